"""
Keyword catalog for the Intake context.

The catalog maps a job-role group label to an ordered sequence of lower-case
keywords. Group labels only organize the table; extraction never branches on them.

The default catalog is loaded once from configs/keyword_catalog.yaml (or the file
named by KEYWORD_CATALOG_PATH) and is read-only for the life of the process.
Alternative catalogs can be built with from_yaml()/from_dict() and passed to
extract_keywords() or analyze_resume().
"""

import os
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, Iterator, Mapping, Optional, Sequence, Tuple

from dotenv import load_dotenv
import yaml
from omegaconf import OmegaConf

from atscope.contexts.intake.exceptions import InvalidCatalogError

load_dotenv()

PACKAGED_CATALOG_PATH = Path(__file__).resolve().parents[2] / "configs" / "keyword_catalog.yaml"
KEYWORD_CATALOG_PATH = Path(os.getenv("KEYWORD_CATALOG_PATH", str(PACKAGED_CATALOG_PATH)))


class KeywordCatalog:
    """
    Immutable, ordered table of keyword groups.

    Attributes:
        groups: Group labels in catalog order
        source_path: File the catalog was loaded from (None for in-memory catalogs)
    """

    def __init__(
        self,
        groups: Mapping[str, Sequence[str]],
        source_path: Optional[Path] = None,
    ):
        """
        Args:
            groups: Mapping of group label to keyword sequence (insertion order is kept)
            source_path: Optional origin of the data, used in error messages

        Raises:
            InvalidCatalogError: If a group is not a list or a keyword is empty/non-string
        """
        self.source_path = source_path

        table = {}
        for label, keywords in groups.items():
            if isinstance(keywords, str) or not isinstance(keywords, (list, tuple)):
                raise InvalidCatalogError(
                    f"Keyword group must be a list, got {type(keywords).__name__}",
                    group=str(label),
                    source_path=source_path,
                )

            normalized = []
            for keyword in keywords:
                if not isinstance(keyword, str) or not keyword.strip():
                    raise InvalidCatalogError(
                        f"Invalid keyword {keyword!r}", group=str(label), source_path=source_path
                    )
                normalized.append(keyword.lower())

            table[str(label)] = tuple(normalized)

        self._groups = MappingProxyType(table)

    @classmethod
    def from_dict(cls, data: Mapping[str, Sequence[str]]) -> "KeywordCatalog":
        """Build a catalog from an in-memory mapping."""
        if not isinstance(data, Mapping):
            raise InvalidCatalogError(f"Catalog must be a mapping, got {type(data).__name__}")
        return cls(data)

    @classmethod
    def from_yaml(cls, yaml_path: Path) -> "KeywordCatalog":
        """
        Load a catalog from a YAML file of `group: [keyword, ...]` entries.

        Raises:
            FileNotFoundError: If yaml_path does not exist
            InvalidCatalogError: If the file is not valid YAML or not a mapping of keyword lists
        """
        yaml_path = Path(yaml_path)
        if not yaml_path.exists():
            raise FileNotFoundError(f"Keyword catalog not found: {yaml_path}")

        try:
            data: Any = OmegaConf.to_container(OmegaConf.load(yaml_path), resolve=True)
        except yaml.YAMLError as e:
            raise InvalidCatalogError(f"Invalid YAML: {e}", source_path=yaml_path) from e
        if not isinstance(data, dict):
            raise InvalidCatalogError("Catalog must be a mapping of group labels", source_path=yaml_path)

        return cls(data, source_path=yaml_path)

    @property
    def groups(self) -> Tuple[str, ...]:
        return tuple(self._groups)

    def keywords_for(self, group: str) -> Tuple[str, ...]:
        """Return keywords for a group label (KeyError if unknown)."""
        return self._groups[group]

    def items(self) -> Iterator[Tuple[str, str]]:
        """Yield (group, keyword) pairs in catalog order, duplicates included."""
        for label, keywords in self._groups.items():
            for keyword in keywords:
                yield label, keyword

    def to_dict(self) -> Dict[str, list]:
        return {label: list(keywords) for label, keywords in self._groups.items()}

    def __iter__(self) -> Iterator[str]:
        for _, keyword in self.items():
            yield keyword

    def __len__(self) -> int:
        return sum(len(keywords) for keywords in self._groups.values())

    def __contains__(self, keyword: object) -> bool:
        if not isinstance(keyword, str):
            return False
        return any(keyword.lower() in keywords for keywords in self._groups.values())

    def __repr__(self) -> str:
        return f"KeywordCatalog(groups={len(self._groups)}, keywords={len(self)})"


_default_catalog: Optional[KeywordCatalog] = None


def get_default_catalog() -> KeywordCatalog:
    """
    Return the process-wide default catalog, loading it on first use.

    The catalog is immutable, so sharing one instance is safe.
    """
    global _default_catalog
    if _default_catalog is None:
        _default_catalog = KeywordCatalog.from_yaml(KEYWORD_CATALOG_PATH)
    return _default_catalog
