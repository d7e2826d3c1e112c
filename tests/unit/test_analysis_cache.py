"""Unit tests for the last-analysis cache."""

import json

import pytest

from atscope.contexts.targeting.analyzer import AnalysisResult
from atscope.utils.analysis_cache import (
    JOB_DESCRIPTION_KEY,
    LAST_ANALYSIS_KEY,
    AnalysisCache,
    load_last_analysis,
    save_last_analysis,
)

RESULT = AnalysisResult(
    score=72,
    matched_keywords=("react",),
    missing_keywords=("kubernetes", "api"),
    recommendations=("Add missing skills that are relevant to the job description, especially: kubernetes, api",),
    formatting_issues=("No education entries found.",),
)


@pytest.fixture
def cache(tmp_path) -> AnalysisCache:
    return AnalysisCache(tmp_path / "cache" / "last_analysis.json")


class TestKeyValueStore:
    """Test get/set/remove/clear semantics."""

    @pytest.mark.unit
    def test_get_missing_key(self, cache):
        assert cache.get("anything") is None
        assert cache.get("anything", "default") == "default"
        assert not cache.path.exists()

    @pytest.mark.unit
    def test_set_and_get(self, cache):
        cache.set("theme", "dark")
        cache.set("count", 3)

        assert cache.get("theme") == "dark"
        assert cache.get("count") == 3
        assert "theme" in cache
        assert json.loads(cache.path.read_text(encoding="utf-8")) == {"theme": "dark", "count": 3}

    @pytest.mark.unit
    def test_remove(self, cache):
        cache.set("theme", "dark")
        cache.remove("theme")
        cache.remove("never-set")

        assert "theme" not in cache

    @pytest.mark.unit
    def test_clear(self, cache):
        cache.set("theme", "dark")
        cache.clear()
        cache.clear()

        assert cache.get("theme") is None
        assert not cache.path.exists()

    @pytest.mark.unit
    def test_no_temp_files_left_behind(self, cache):
        cache.set("theme", "dark")

        assert [p.name for p in cache.path.parent.iterdir()] == [cache.path.name]

    @pytest.mark.unit
    @pytest.mark.parametrize("content", ["{not json", "[1, 2, 3]"])
    def test_corrupt_file_raises(self, cache, content):
        cache.path.parent.mkdir(parents=True)
        cache.path.write_text(content, encoding="utf-8")

        with pytest.raises(ValueError, match="Corrupt analysis cache"):
            cache.get("theme")


class TestLastAnalysis:
    """Test saving and loading the last analysis."""

    @pytest.mark.unit
    def test_round_trip(self, cache):
        save_last_analysis(RESULT, "We need React and Kubernetes", cache=cache)

        result, job_description, saved_at = load_last_analysis(cache)

        assert result == RESULT
        assert job_description == "We need React and Kubernetes"
        assert saved_at

    @pytest.mark.unit
    def test_nothing_saved(self, cache):
        assert load_last_analysis(cache) is None

    @pytest.mark.unit
    def test_other_keys_preserved(self, cache):
        cache.set("theme", "dark")
        save_last_analysis(RESULT, "job", cache=cache)

        assert cache.get("theme") == "dark"
        assert cache.get(JOB_DESCRIPTION_KEY) == "job"

    @pytest.mark.unit
    def test_new_save_replaces_old(self, cache):
        save_last_analysis(RESULT, "first", cache=cache)
        save_last_analysis(AnalysisResult(score=50), "second", cache=cache)

        result, job_description, _ = load_last_analysis(cache)
        assert result.score == 50
        assert job_description == "second"

    @pytest.mark.unit
    @pytest.mark.parametrize("stored", [{"score": 150}, {"matchedKeywords": []}, "not a result"])
    def test_invalid_stored_result(self, cache, stored):
        cache.set(LAST_ANALYSIS_KEY, stored)

        with pytest.raises(ValueError):
            load_last_analysis(cache)
