"""Transports carrying operations to the billing provider."""
from .base import Transport
from .fake import FakeTransport
from .soap import SoapTransport

__all__ = ["FakeTransport", "SoapTransport", "Transport"]
