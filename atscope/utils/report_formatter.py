"""
Utility functions for formatting text-based analysis reports.

Provides consistent table formatting for ATS analysis output.
"""

from typing import Any, List, Optional

STRONG_MATCH_THRESHOLD = 80
FAIR_MATCH_THRESHOLD = 60


class Column:
    """Column definition for table formatting."""

    def __init__(self, name: str, width: int, align: str = "<"):
        """
        Args:
            name: Column header name
            width: Column width in characters
            align: Alignment ('<' left, '>' right, '^' center)
        """
        self.name = name
        self.width = width
        self.align = align

    def format_header(self) -> str:
        """Format column header with alignment."""
        return f"{self.name:{self.align}{self.width}}"

    def format_value(self, value: Any) -> str:
        """Format column value with alignment."""
        return f"{value:{self.align}{self.width}}"


class TableFormatter:
    """Builder for formatted text tables with aligned columns."""

    def __init__(self, columns: List[Column], total_width: int = 80):
        """
        Args:
            columns: List of Column definitions
            total_width: Total report width for separators
        """
        self.columns = columns
        self.total_width = total_width
        self.lines: List[str] = []

    def add_section_header(self, title: str) -> "TableFormatter":
        """Add section header with top/bottom separator lines."""
        self.lines.append("=" * self.total_width)
        self.lines.append(title)
        self.lines.append("=" * self.total_width)
        return self

    def add_table_header(self) -> "TableFormatter":
        """Add table header row with column names."""
        header_parts = [col.format_header() for col in self.columns]
        self.lines.append(" ".join(header_parts))
        return self

    def add_separator(self, char: str = "-") -> "TableFormatter":
        self.lines.append(char * self.total_width)
        return self

    def add_row(self, values: List[Any]) -> "TableFormatter":
        """
        Add data row with column values.

        Raises:
            ValueError: If number of values doesn't match columns
        """
        if len(values) != len(self.columns):
            raise ValueError(f"Expected {len(self.columns)} values, got {len(values)}")

        row_parts = [col.format_value(val) for col, val in zip(self.columns, values)]
        self.lines.append(" ".join(row_parts).rstrip())
        return self

    def add_blank_line(self) -> "TableFormatter":
        self.lines.append("")
        return self

    def add_text(self, text: str) -> "TableFormatter":
        self.lines.append(text)
        return self

    def add_bullets(self, items: List[str], empty_text: str = "  (none)") -> "TableFormatter":
        """Add one "  - item" line per item, or empty_text when there are none."""
        if not items:
            self.lines.append(empty_text)
        for item in items:
            self.lines.append(f"  - {item}")
        return self

    def render(self) -> str:
        """Render accumulated lines to string."""
        return "\n".join(self.lines)


def format_percentage(count: int, total: int, decimal_places: int = 1) -> str:
    """
    Format count as percentage of total.

    Returns:
        Formatted percentage string (e.g., "75.0%")
    """
    if total == 0:
        return "0.0%"
    percent = (count / total) * 100
    return f"{percent:.{decimal_places}f}%"


def score_band(score: int) -> str:
    """Label a score: "Strong match" (>= 80), "Fair match" (>= 60), else "Weak match"."""
    if score >= STRONG_MATCH_THRESHOLD:
        return "Strong match"
    elif score >= FAIR_MATCH_THRESHOLD:
        return "Fair match"
    return "Weak match"


def format_analysis_report(result, breakdown=None, title: Optional[str] = None) -> str:
    """
    Render an analysis result as a plain-text report.

    Args:
        result: AnalysisResult from analyze_resume()
        breakdown: Optional ScoreBreakdown to itemize the score
        title: Optional report title (e.g., resume and job names)

    Returns:
        Formatted report string
    """
    total_keywords = len(result.matched_keywords) + len(result.missing_keywords)

    report = TableFormatter([Column("Component", 30), Column("Points", 8, ">")])
    report.add_section_header(title or "ATS Compatibility Report")
    report.add_text(f"Score: {result.score}/100 ({score_band(result.score)})")
    report.add_text(
        f"Keyword match: {len(result.matched_keywords)}/{total_keywords} "
        f"({format_percentage(len(result.matched_keywords), total_keywords)})"
    )

    if breakdown is not None:
        report.add_blank_line().add_table_header().add_separator()
        for label, points in breakdown.items():
            report.add_row([label, f"{points:+d}" if label != "Base score" else str(points)])
        report.add_separator()
        if breakdown.raw_total != breakdown.total:
            report.add_text(f"Raw total {breakdown.raw_total} clamped to {breakdown.total}")

    report.add_blank_line().add_text("Matched keywords:")
    report.add_bullets(list(result.matched_keywords))
    report.add_blank_line().add_text("Missing keywords:")
    report.add_bullets(list(result.missing_keywords))
    report.add_blank_line().add_text("Formatting issues:")
    report.add_bullets(list(result.formatting_issues))
    report.add_blank_line().add_text("Recommendations:")
    report.add_bullets(list(result.recommendations))

    return report.render()
