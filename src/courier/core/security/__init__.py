"""Security helpers."""

from .sanitizer import SensitiveDataSanitizer, sanitize

__all__ = ["SensitiveDataSanitizer", "sanitize"]
