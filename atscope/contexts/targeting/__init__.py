"""
Targeting Context

Responsibilities:
- Detects job keywords missing from a resume
- Audits resume structure for formatting issues
- Generates recommendations for closing keyword gaps
- Scores resume/job compatibility with an additive, explainable model
- Orchestrates the full analysis

Owns: Gap detection, formatting audit, recommendation rules, scoring, analysis orchestration
Never: Loads keyword catalogs from disk or persists results
"""

from atscope.contexts.targeting.analyzer import (
    AnalysisResult,
    analyze_resume,
    analyze_resume_async,
)
from atscope.contexts.targeting.formatting_auditor import check_formatting_issues
from atscope.contexts.targeting.gap_detector import find_missing_keywords
from atscope.contexts.targeting.recommendations import (
    generate_recommendations,
    has_quantifiable_impact,
)
from atscope.contexts.targeting.scorer import (
    ScoreBreakdown,
    calculate_ats_score,
    score_breakdown,
)

__all__ = [
    # Orchestration
    "analyze_resume",
    "analyze_resume_async",
    "AnalysisResult",
    # Pipeline steps
    "find_missing_keywords",
    "check_formatting_issues",
    "generate_recommendations",
    "has_quantifiable_impact",
    "calculate_ats_score",
    "score_breakdown",
    "ScoreBreakdown",
]
