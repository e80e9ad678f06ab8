"""
Sensitive Data Sanitization Module.

This module redacts sensitive values from log metadata before it reaches any
log sink, to prevent credential leakage through logs.
"""

import dataclasses
from enum import Enum
from types import ModuleType
from typing import Any, Dict, FrozenSet, Mapping, Optional, Tuple

from pydantic import BaseModel

from courier.constants import CIRCULAR, REDACTED

_CONTAINER_TYPES = (Mapping, list, tuple, set, frozenset)

# Objects with a __dict__ that are rendered as-is rather than walked
_OPAQUE_TYPES = (type, ModuleType, Enum, BaseException)


class SensitiveDataSanitizer:
    """Sanitize sensitive data from log metadata."""

    # Substrings that mark a key as sensitive (matched against the lower-cased key)
    SENSITIVE_FIELDS: Tuple[str, ...] = (
        "password",
        "token",
        "secret",
        "apikey",
        "api_key",
        "authorization",
        "accesstoken",
        "access_token",
        "refreshtoken",
        "refresh_token",
        "creditcard",
        "credit_card",
        "cardnumber",
        "card_number",
        "cvv",
        "ssn",
        "pin",
    )

    @classmethod
    def is_sensitive_key(cls, key: Any) -> bool:
        """Check whether a mapping key names a sensitive field."""
        key_lower = str(key).lower()
        return any(field in key_lower for field in cls.SENSITIVE_FIELDS)

    @classmethod
    def sanitize(cls, data: Any) -> Any:
        """Return a redacted copy of ``data``.

        Mappings are rebuilt with the value of every sensitive key replaced by
        the redaction marker, whatever its type or depth. Dataclasses,
        pydantic models and plain objects are walked field by field and come
        back as dicts. Lists, tuples and sets are walked item by item. A
        container that contains itself is replaced by the circular marker at
        the point of repetition. Everything else is returned unchanged.

        Args:
            data: Arbitrary log metadata

        Returns:
            Sanitized copy of data
        """
        return cls._sanitize(data, frozenset())

    @classmethod
    def _sanitize(cls, data: Any, ancestors: FrozenSet[int]) -> Any:
        if not isinstance(data, _CONTAINER_TYPES):
            fields = cls._object_fields(data)
            if fields is None:
                return data
        else:
            fields = None

        if id(data) in ancestors:
            return CIRCULAR
        ancestors = ancestors | {id(data)}

        if fields is not None:
            data = fields

        if isinstance(data, Mapping):
            sanitized = {}
            for key, value in data.items():
                if cls.is_sensitive_key(key):
                    sanitized[key] = REDACTED
                else:
                    sanitized[key] = cls._sanitize(value, ancestors)
            return sanitized

        return [cls._sanitize(item, ancestors) for item in data]

    @staticmethod
    def _object_fields(data: Any) -> Optional[Dict[str, Any]]:
        """Field mapping for structured objects, None for anything else."""
        if isinstance(data, BaseModel):
            return {name: getattr(data, name) for name in type(data).model_fields}
        if dataclasses.is_dataclass(data) and not isinstance(data, type):
            return {f.name: getattr(data, f.name) for f in dataclasses.fields(data)}
        if isinstance(data, _OPAQUE_TYPES) or callable(data):
            return None
        attributes = getattr(data, "__dict__", None)
        if attributes:
            return dict(attributes)
        return None


def sanitize(data: Any) -> Any:
    """Module-level shortcut for :meth:`SensitiveDataSanitizer.sanitize`."""
    return SensitiveDataSanitizer.sanitize(data)
