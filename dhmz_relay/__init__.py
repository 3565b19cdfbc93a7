"""Relay for the DHMZ (vrijeme.hr) Croatian weather XML feed."""

__version__ = "0.1.0"
