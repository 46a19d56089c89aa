"""Exceptions raised by the catalogue domain and its repositories.

Every error carries a machine-readable ``code`` and a ``details`` mapping with
the offending values, so adapters can translate them without parsing
messages.

Examples
--------
>>> raise NotFoundError(
...     "Show not found", code="SHOW_NOT_FOUND_ERROR", details={"id": show_id}
... )
"""

import typing as typ


class CatalogError(Exception):
    """Base exception with structured metadata for catalogue errors."""

    error_code: typ.ClassVar[str] = "CATALOG_ERROR"

    code: str
    details: dict[str, object]

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        details: dict[str, object] | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code if code is not None else type(self).error_code
        self.details = dict(details) if details is not None else {}


class DomainValidationError(CatalogError):
    """Raised when a value object or entity invariant is violated."""

    error_code: typ.ClassVar[str] = "DOMAIN_ERROR"


class NotFoundError(CatalogError, LookupError):
    """Raised when no stored entity matches an identifier."""

    error_code: typ.ClassVar[str] = "NOT_FOUND_ERROR"


__all__ = ("CatalogError", "DomainValidationError", "NotFoundError")
