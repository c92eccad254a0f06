from .markdown_renderer import MarkdownRenderer
