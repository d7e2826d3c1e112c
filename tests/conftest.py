"""Shared fixtures for ATSCOPE tests."""

import copy
from pathlib import Path

import pytest
from omegaconf import OmegaConf

from atscope.contexts.intake.keyword_catalog import KeywordCatalog
from atscope.contexts.profile.resume_data_structure import ResumeRecord

FIXTURES_PATH = Path(__file__).parent / "fixtures"


@pytest.fixture
def fixtures_path() -> Path:
    return FIXTURES_PATH


@pytest.fixture
def complete_resume_data() -> dict:
    """Fully populated resume as a camelCase dict (fresh copy per test)."""
    yaml_data = OmegaConf.load(FIXTURES_PATH / "complete_resume.yaml")
    return OmegaConf.to_container(yaml_data, resolve=True)


@pytest.fixture
def complete_resume(complete_resume_data) -> ResumeRecord:
    return ResumeRecord.from_dict(complete_resume_data)


@pytest.fixture
def sparse_resume() -> ResumeRecord:
    """Summary only: no email, no experience, no education, no skills."""
    return ResumeRecord.from_json(FIXTURES_PATH / "sparse_resume.json")


@pytest.fixture
def frontend_job() -> str:
    return (FIXTURES_PATH / "frontend_job.txt").read_text(encoding="utf-8")


@pytest.fixture
def small_catalog() -> KeywordCatalog:
    return KeywordCatalog.from_dict({"web": ["javascript", "react"]})


@pytest.fixture
def make_resume(complete_resume_data):
    """
    Factory for complete-resume variants.

    Usage:
        resume = make_resume(summary="", skills=[])
    """

    def _make(**overrides) -> ResumeRecord:
        data = copy.deepcopy(complete_resume_data)
        data.update(overrides)
        return ResumeRecord.from_dict(data)

    return _make
