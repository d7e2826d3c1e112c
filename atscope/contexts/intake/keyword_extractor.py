"""
Job description keyword extraction for the Intake context.

Matching is a case-insensitive substring test against every catalog keyword,
so short keywords (e.g. "r", "ai") also fire inside longer words.
"""

from typing import List, Optional

from atscope.contexts.intake.keyword_catalog import KeywordCatalog, get_default_catalog


def extract_keywords(job_description: Optional[str], catalog: Optional[KeywordCatalog] = None) -> List[str]:
    """
    Find catalog keywords present in a job description.

    Args:
        job_description: Free-text job posting (may be empty or None)
        catalog: Keyword catalog to scan (defaults to the packaged catalog)

    Returns:
        Keywords found, in catalog order, without duplicates

    Example:
        >>> extract_keywords("Senior React developer, TypeScript and AWS")
        ['react', 'typescript', 'aws', 'r']
    """
    if not job_description or not job_description.strip():
        return []

    if catalog is None:
        catalog = get_default_catalog()

    text = job_description.lower()
    keywords = []
    seen = set()

    for keyword in catalog:
        if keyword in seen:
            continue
        if keyword in text:
            keywords.append(keyword)
            seen.add(keyword)

    return keywords
