"""
Resume vs. job description analysis orchestration.

Runs the pipeline in order:
    extract keywords -> find missing keywords -> audit formatting
    -> generate recommendations -> score

Every step is a pure function of its inputs and the read-only keyword catalog,
so repeated calls with the same inputs return identical results.
"""

import asyncio
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional, Tuple

from atscope.contexts.intake.keyword_catalog import KeywordCatalog
from atscope.contexts.intake.keyword_extractor import extract_keywords
from atscope.contexts.profile.resume_data_structure import as_resume_record
from atscope.contexts.targeting.formatting_auditor import check_formatting_issues
from atscope.contexts.targeting.gap_detector import find_missing_keywords
from atscope.contexts.targeting.logger import _log_debug
from atscope.contexts.targeting.recommendations import generate_recommendations
from atscope.contexts.targeting.scorer import calculate_ats_score


@dataclass(frozen=True)
class AnalysisResult:
    """
    Outcome of one resume analysis.

    Attributes:
        score: ATS compatibility score, 0-100
        matched_keywords: Job keywords found in the resume (extraction order)
        missing_keywords: Job keywords absent from the resume (extraction order)
        recommendations: Suggested edits, most specific first
        formatting_issues: Structural problems in rule order
    """

    score: int
    matched_keywords: Tuple[str, ...] = ()
    missing_keywords: Tuple[str, ...] = ()
    recommendations: Tuple[str, ...] = ()
    formatting_issues: Tuple[str, ...] = ()

    @property
    def keywords(self) -> Tuple[str, ...]:
        """All keywords extracted from the job description, in extraction order."""
        return self.matched_keywords + self.missing_keywords

    def to_dict(self) -> Dict[str, Any]:
        return {
            "score": self.score,
            "matchedKeywords": list(self.matched_keywords),
            "missingKeywords": list(self.missing_keywords),
            "recommendations": list(self.recommendations),
            "formattingIssues": list(self.formatting_issues),
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "AnalysisResult":
        """
        Rebuild a result from to_dict() output.

        Raises:
            ValueError: If data is not a mapping or the score is missing or out of range
        """
        if not isinstance(data, Mapping):
            raise ValueError(f"Expected a mapping, got {type(data).__name__}")

        score = data.get("score")
        if isinstance(score, bool) or not isinstance(score, int) or not 0 <= score <= 100:
            raise ValueError(f"Invalid analysis score: {score!r}")

        return cls(
            score=score,
            matched_keywords=tuple(data.get("matchedKeywords", ())),
            missing_keywords=tuple(data.get("missingKeywords", ())),
            recommendations=tuple(data.get("recommendations", ())),
            formatting_issues=tuple(data.get("formattingIssues", ())),
        )


def analyze_resume(
    resume,
    job_description: Optional[str],
    catalog: Optional[KeywordCatalog] = None,
) -> AnalysisResult:
    """
    Analyze a resume against a job description.

    Args:
        resume: ResumeRecord, or a mapping accepted by ResumeRecord.from_dict
        job_description: Free-text job posting (empty yields no keywords)
        catalog: Keyword catalog (defaults to the packaged catalog)

    Returns:
        AnalysisResult

    Raises:
        InvalidResumeStructureError: If resume is malformed. No partial result
            is produced; callers should keep any previous result.
    """
    resume = as_resume_record(resume)

    job_keywords = extract_keywords(job_description, catalog=catalog)
    missing_keywords = find_missing_keywords(resume, job_keywords)
    formatting_issues = check_formatting_issues(resume)
    recommendations = generate_recommendations(resume, missing_keywords)
    score = calculate_ats_score(resume, job_keywords, missing_keywords, formatting_issues)

    missing = set(missing_keywords)
    matched_keywords = [keyword for keyword in job_keywords if keyword not in missing]

    _log_debug(
        f"Analysis complete: {len(job_keywords)} keyword(s), {len(matched_keywords)} matched, score {score}"
    )

    return AnalysisResult(
        score=score,
        matched_keywords=tuple(matched_keywords),
        missing_keywords=tuple(missing_keywords),
        recommendations=tuple(recommendations),
        formatting_issues=tuple(formatting_issues),
    )


async def analyze_resume_async(
    resume,
    job_description: Optional[str],
    catalog: Optional[KeywordCatalog] = None,
) -> AnalysisResult:
    """Run analyze_resume() in a worker thread; the result is identical."""
    return await asyncio.to_thread(analyze_resume, resume, job_description, catalog)
