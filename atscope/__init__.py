"""
ATSCOPE - Applicant Tracking System Compatibility Of Profile Evaluation

A rule-based engine that estimates how an applicant tracking system would rate
a structured resume against a free-text job posting.

Architecture:
- Intake Context: Job description keyword catalog and keyword extraction
- Profile Context: Structured resume record and loading/validation
- Targeting Context: Gap detection, formatting audit, recommendations, and scoring
"""

__version__ = "0.1.0"
