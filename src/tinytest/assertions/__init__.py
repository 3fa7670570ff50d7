"""Check recording for assertion-style tests."""

from tinytest.assertions.base import DiagnosticLocation, capture_location
from tinytest.assertions.context import AssertionContext

__all__ = ["AssertionContext", "DiagnosticLocation", "capture_location"]
