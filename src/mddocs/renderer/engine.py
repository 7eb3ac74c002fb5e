"""Markdown rendering engine."""

import markdown

from mddocs.config.models import RenderConfig


class MarkdownRenderer:
    """Renders documentation pages from Markdown to HTML.

    One instance is built per app and reused for every request. Without an
    explicit config it renders GitHub-flavoured Markdown where a single
    newline is a hard line break (see ``RenderConfig.default``). The config
    is fixed at construction; each render starts from a reset parser, so
    output depends only on the input text.
    """

    def __init__(self, config: RenderConfig | None = None) -> None:
        """Build the parser once from config or the GFM default."""
        self.config = config or RenderConfig.default()
        self._md = self._create_markdown_instance()

    def _create_markdown_instance(self) -> markdown.Markdown:
        """Create configured markdown instance."""
        return markdown.Markdown(
            extensions=self.config.extensions,
            extension_configs=self.config.extension_configs,
        )

    def render(self, content: str) -> str:
        """
        Render Markdown content to HTML.

        Args:
            content: Raw Markdown string

        Returns:
            Rendered HTML string
        """
        # Reset the markdown instance for fresh render
        self._md.reset()
        return self._md.convert(content)
