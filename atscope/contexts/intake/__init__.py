"""
Intake Context

Responsibilities:
- Owns the keyword catalog (static, curated domain terms grouped by job role)
- Extracts recognized catalog keywords from job description text

Owns: Keyword catalog loading, job description keyword extraction
Never: Inspects resume content or makes scoring decisions
"""

from atscope.contexts.intake.exceptions import InvalidCatalogError
from atscope.contexts.intake.keyword_catalog import KeywordCatalog, get_default_catalog
from atscope.contexts.intake.keyword_extractor import extract_keywords

__all__ = [
    "KeywordCatalog",
    "get_default_catalog",
    "extract_keywords",
    "InvalidCatalogError",
]
