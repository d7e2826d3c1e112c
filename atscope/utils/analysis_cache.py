"""
Analysis Cache

Opaque key/value store for the calling layer, backed by a single JSON file
(default outs/cache/last_analysis.json, override with ANALYSIS_CACHE_PATH).

Holds the most recent analysis and the job description it was run against so
they survive between sessions. Only one analysis is kept; there is no history.

Usage:
    from atscope.utils.analysis_cache import save_last_analysis, load_last_analysis

    save_last_analysis(result, job_description)
    cached = load_last_analysis()  # (AnalysisResult, job_description, saved_at) or None
"""

import json
import os
import shutil
import tempfile
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

from dotenv import load_dotenv
from loguru import logger

from atscope.contexts.targeting.analyzer import AnalysisResult
from atscope.utils.timestamp import now_exact

load_dotenv()
ANALYSIS_CACHE_PATH = Path(os.getenv("ANALYSIS_CACHE_PATH", "outs/cache/last_analysis.json"))

LAST_ANALYSIS_KEY = "atsResult"
JOB_DESCRIPTION_KEY = "jobDescription"
SAVED_AT_KEY = "savedAt"


class AnalysisCache:
    """
    JSON-file key/value store with get/set/remove/clear.

    Every write rewrites the file through a temp file, so a failed write leaves
    the previous contents intact.

    Attributes:
        path: Backing JSON file
    """

    def __init__(self, path: Optional[Path] = None):
        self.path = Path(path) if path is not None else ANALYSIS_CACHE_PATH

    def _read_all(self) -> Dict[str, Any]:
        if not self.path.exists():
            return {}

        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as e:
            raise ValueError(f"Corrupt analysis cache {self.path}: {e}") from e

        if not isinstance(data, dict):
            raise ValueError(f"Corrupt analysis cache {self.path}: expected a JSON object")
        return data

    def _write_all(self, data: Dict[str, Any]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)

        # Write to temp file first (atomic write pattern)
        temp_fd, temp_path = tempfile.mkstemp(suffix=".json", dir=self.path.parent, text=True)
        try:
            with os.fdopen(temp_fd, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2, ensure_ascii=False)

            # Only overwrite original if write succeeded
            shutil.move(temp_path, self.path)
        except Exception:
            # Clean up temp file if write failed
            if os.path.exists(temp_path):
                os.unlink(temp_path)
            raise

    def get(self, key: str, default: Any = None) -> Any:
        """Return the stored value for key, or default."""
        return self._read_all().get(key, default)

    def set(self, key: str, value: Any) -> None:
        """Store a JSON-serializable value under key."""
        data = self._read_all()
        data[key] = value
        self._write_all(data)

    def remove(self, key: str) -> None:
        """Delete key if present."""
        data = self._read_all()
        if key in data:
            del data[key]
            self._write_all(data)

    def clear(self) -> None:
        """Delete every stored value."""
        if self.path.exists():
            self.path.unlink()

    def __contains__(self, key: str) -> bool:
        return key in self._read_all()


def save_last_analysis(
    result: AnalysisResult, job_description: str, cache: Optional[AnalysisCache] = None
) -> None:
    """
    Store an analysis result and its job description as the last analysis.

    Only call this after analyze_resume() returned; a failed analysis must
    leave the previously cached result in place.
    """
    cache = cache or AnalysisCache()
    data = cache._read_all()
    data[LAST_ANALYSIS_KEY] = result.to_dict()
    data[JOB_DESCRIPTION_KEY] = job_description
    data[SAVED_AT_KEY] = now_exact()
    cache._write_all(data)
    logger.debug(f"Saved last analysis (score {result.score}) to {cache.path}")


def load_last_analysis(
    cache: Optional[AnalysisCache] = None,
) -> Optional[Tuple[AnalysisResult, str, Optional[str]]]:
    """
    Load the last stored analysis.

    Returns:
        (result, job_description, saved_at) or None if nothing is cached

    Raises:
        ValueError: If the cache file or stored result is corrupt
    """
    cache = cache or AnalysisCache()
    data = cache._read_all()
    if LAST_ANALYSIS_KEY not in data:
        return None

    result = AnalysisResult.from_dict(data[LAST_ANALYSIS_KEY])
    return result, data.get(JOB_DESCRIPTION_KEY, ""), data.get(SAVED_AT_KEY)
