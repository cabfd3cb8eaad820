"""GLOS IQ recording types, replay configuration and GNSS/SDR monitoring state."""

__version__ = "0.2.0"