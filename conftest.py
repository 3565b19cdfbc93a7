# Ensure tests import the relay package from this checkout first,
# including subprocess-based tests that run ``python -m dhmz_relay``.
import os
import sys

SERVICE_ROOT = os.path.dirname(__file__)

if SERVICE_ROOT not in sys.path:
    sys.path.insert(0, SERVICE_ROOT)
