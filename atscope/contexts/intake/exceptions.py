"""Custom exceptions for intake context with catalog references."""

from pathlib import Path
from typing import Optional


class InvalidCatalogError(ValueError):
    """
    Exception raised when a keyword catalog is malformed.

    Attributes:
        message: Error description
        group: Catalog group label where the problem was found
        source_path: Path to the catalog file, if loaded from disk
    """

    def __init__(
        self,
        message: str,
        group: Optional[str] = None,
        source_path: Optional[Path] = None,
    ):
        self.message = message
        self.group = group
        self.source_path = source_path

        # Build enhanced error message
        parts = [message]

        if group is not None:
            parts.append(f"Group: {group}")

        if source_path:
            parts.append(f"Catalog file: {source_path}")

        super().__init__("\n".join(parts))
