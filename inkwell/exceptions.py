"""Application-level exception types.

Convention:
- ``ValueError`` subclasses are *business logic* validation errors whose
  message is safe to show to users (missing form fields, slug clashes).
  The CLI prints ``str(exc)`` and exits with status 1.
- ``LookupError`` subclasses signal a record that does not exist.

Input handled by the search pipeline (queries, categories, page numbers)
never raises; it is normalized instead.
"""

from __future__ import annotations


class PostNotFoundError(LookupError):
    """Raised when a post id or slug is not present in the store."""

    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(f"Post '{key}' not found")


class DuplicatePostError(ValueError):
    """Raised when a post would break id or slug uniqueness in the store."""


class PostValidationError(ValueError):
    """Raised when the admin form is missing required fields."""

    def __init__(
        self,
        missing_fields: tuple[str, ...],
        message: str = "Please fill in all required fields",
    ) -> None:
        self.missing_fields = missing_fields
        super().__init__(message)
