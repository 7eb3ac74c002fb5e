"""Shared HTML page shell."""

from pathlib import Path

from fastapi.templating import Jinja2Templates

TEMPLATES_DIR = Path(__file__).parent.parent / "templates"
PAGE_TEMPLATE = "page.html"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))


def render_page(title: str, content: str) -> str:
    """
    Wrap rendered Markdown in the page template.

    Args:
        title: Page title, inserted as given
        content: Rendered HTML for the page body

    Returns:
        Complete HTML document
    """
    return templates.get_template(PAGE_TEMPLATE).render(title=title, content=content)
