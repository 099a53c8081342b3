"""Stateless HTTP service that renders text as a QR code PNG."""

__version__ = "0.1.0"
