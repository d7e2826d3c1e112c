"""Custom exceptions for profile context with field references."""

from typing import Any, Optional

_MISSING = object()


class InvalidResumeStructureError(ValueError):
    """
    Exception raised when resume data is malformed or missing required substructures.

    Raised instead of substituting defaults, since a silently defaulted field
    would change what the score means.

    Attributes:
        message: Error description
        field_path: Location of the offending value (e.g., 'experience[1].achievements')
        value: The offending value, if one was present
    """

    def __init__(
        self,
        message: str,
        field_path: Optional[str] = None,
        value: Any = _MISSING,
    ):
        self.message = message
        self.field_path = field_path
        self.value = None if value is _MISSING else value

        # Build enhanced error message
        parts = [message]

        if field_path:
            parts.append(f"Field: {field_path}")

        if value is not _MISSING:
            # Truncate value if too long
            shown = repr(value)
            shown = shown[:200] + "..." if len(shown) > 200 else shown
            parts.append(f"Value: {shown}")

        super().__init__("\n".join(parts))
