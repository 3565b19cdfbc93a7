import os

SERVICE_NAME = os.getenv("SERVICE_NAME", "dhmz-relay")

UPSTREAM_URL = os.getenv("UPSTREAM_URL", "https://vrijeme.hr/hrvatska1_n.xml")
RELAY_PATH = os.getenv("RELAY_PATH", "/dhmz")
# Applied separately to connect, read, write and pool acquisition, in seconds
RELAY_TIMEOUT = float(os.getenv("RELAY_TIMEOUT", "30"))

HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "8000"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "info").lower()


def _parse_otlp_headers(raw: str) -> dict:
    """Parse ``"key=value,key2=value2"`` into exporter metadata."""
    headers: dict = {}
    if not raw:
        return headers
    for entry in raw.split(","):
        entry = entry.strip()
        if "=" not in entry:
            continue
        key, val = entry.split("=", 1)
        key = key.strip().lower()
        val = val.strip()
        if key and val:
            headers[key] = val
    return headers


OTLP_ENDPOINT = os.getenv("OTLP_ENDPOINT")
OTLP_HEADERS = _parse_otlp_headers(os.getenv("OTLP_HEADERS", ""))
