"""Request handlers."""

from .recap_handler import RecapHandler

__all__ = ["RecapHandler"]
