"""Decode, inspect, edit and re-encode Windows visual style property records."""

__version__ = "0.1.0"