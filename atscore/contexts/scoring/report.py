"""
Report rendering for score results.

render_text_report() builds a fixed-width terminal report. Markdown reports
come from templates in atscore/templates/, rendered with StrictUndefined so a
missing field fails loudly instead of rendering blank.
"""

from pathlib import Path
from typing import Dict

from jinja2 import Environment, FileSystemLoader, StrictUndefined, Template

from atscore.contexts.scoring.result import ScoreResult
from atscore.utils.report_formatter import Column, TableFormatter, format_keyword_list, format_match_line

TEMPLATES_PATH = Path(__file__).resolve().parents[2] / "templates"
REPORT_TEMPLATE = "report.md.jinja"


class ReportRenderer:
    """Loads and caches report templates."""

    def __init__(self, templates_path: Path = None):
        self.templates_path = templates_path or TEMPLATES_PATH
        self._cache: Dict[str, Template] = {}
        self.env = Environment(
            loader=FileSystemLoader(str(self.templates_path)),
            undefined=StrictUndefined,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )

    def get_template(self, name: str = REPORT_TEMPLATE) -> Template:
        if name not in self._cache:
            self._cache[name] = self.env.get_template(name)
        return self._cache[name]

    def render(self, result: ScoreResult, filename: str = "resume", template_name: str = REPORT_TEMPLATE) -> str:
        """
        Render a result as Markdown.

        Raises:
            TemplateNotFound: If the template file doesn't exist
            UndefinedError: If the template references a missing field
        """
        return self.get_template(template_name).render(
            filename=filename,
            result=result,
            timestamp=result.timestamp.strftime("%Y-%m-%d %H:%M:%S"),
            match_percent=round(result.match_ratio * 100),
        )


_default_renderer = None


def render_markdown_report(result: ScoreResult, filename: str = "resume") -> str:
    """Render a result with the packaged report template."""
    global _default_renderer
    if _default_renderer is None:
        _default_renderer = ReportRenderer()
    return _default_renderer.render(result, filename)


def render_text_report(result: ScoreResult, filename: str = "resume") -> str:
    """Plain-text report for terminal output."""
    table = TableFormatter([Column("Category", 20), Column("Score", 8, ">")], total_width=60)
    table.add_section_header(f"ATS SCORE: {filename}")
    table.add_text(f"Score: {result.score}/100")
    if result.sector:
        table.add_text(f"Sector: {result.sector}")
    table.add_text("")
    table.add_table_header().add_separator()
    for category, value in result.breakdown.items():
        table.add_row([category.capitalize(), value])

    if result.has_job_description:
        table.add_text("")
        table.add_text(format_match_line(len(result.matched_keywords), len(result.missing_keywords)))
        table.add_text(f"Matched keywords {format_keyword_list(result.matched_keywords)}")
        table.add_text(f"Missing keywords {format_keyword_list(result.missing_keywords)}")

    table.add_bullets("Strengths", result.strengths)
    table.add_bullets("Weaknesses", result.weaknesses)
    table.add_bullets("Suggestions", result.suggestions)
    return table.render()
