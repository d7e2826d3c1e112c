"""
Shared utilities for ATSCOPE.

Common functionality used across contexts and scripts:
- Logger setup
- Timestamps
- Last-analysis cache
- Report formatting
"""

from atscope.utils.timestamp import format_timestamp, now_exact

__all__ = ["format_timestamp", "now_exact"]
