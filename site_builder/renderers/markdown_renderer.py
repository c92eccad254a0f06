"""
Markdown-to-HTML Renderer

Renders the complete README into an HTML fragment for the site template.
Raw HTML passes through untouched, bare URLs become links, and quotes and
dashes get typographic replacements.
"""


class MarkdownRenderer:
    """Renders Markdown documents to HTML with Python-Markdown."""

    EXTENSIONS = ["tables", "fenced_code", "smarty"]

    EXTENSION_CONFIGS = {
        "smarty": {
            "smart_quotes": True,
            "smart_dashes": True,
            "smart_ellipses": True,
        },
    }

    @staticmethod
    def render(text: str) -> str:
        """
        Convert Markdown text to an HTML fragment.

        Args:
            text: The full Markdown document

        Returns:
            The rendered HTML
        """
        try:
            import markdown
        except ImportError:
            raise RuntimeError("markdown is not installed. Run: pip install markdown")

        from .linkify import LinkifyExtension

        md = markdown.Markdown(
            extensions=MarkdownRenderer.EXTENSIONS + [LinkifyExtension()],
            extension_configs=MarkdownRenderer.EXTENSION_CONFIGS,
            output_format="html",
        )
        return md.convert(text)
