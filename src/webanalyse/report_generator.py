"""HTML pages for the web front-end, rendered with Jinja2 templates."""

from pathlib import Path
from typing import Optional

from jinja2 import Environment, FileSystemLoader, select_autoescape

from webanalyse.models import PageSummary

TEMPLATE_DIR = Path(__file__).parent / "templates"


class ReportGenerator:
    """Renders the index form, analysis summaries and error pages."""

    def __init__(self, template_dir: Optional[str] = None):
        """Initialize report generator.

        Args:
            template_dir: Directory containing Jinja2 templates (the packaged ones if None)
        """
        template_path = Path(template_dir) if template_dir else TEMPLATE_DIR

        self.env = Environment(
            loader=FileSystemLoader(str(template_path)),
            autoescape=select_autoescape(["html"]),
        )
        self.env.filters['yes_no'] = self._yes_no

    @staticmethod
    def _yes_no(value: bool) -> str:
        return "Yes" if value else "No"

    def render_index(self) -> str:
        return self.env.get_template('index.html').render()

    def render_summary(self, summary: PageSummary) -> str:
        """Render the analysis page for a summary.

        Args:
            summary: Analysis result

        Returns:
            HTML document
        """
        template = self.env.get_template('analyse.html')
        return template.render(
            summary=summary,
            headings=sorted(summary.headings.items()),
            links=summary.links,
        )

    def render_error(self, message: str) -> str:
        return self.env.get_template('error.html').render(message=message)
