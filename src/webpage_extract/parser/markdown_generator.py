"""Markdown generation module using markdownify."""

import re
from typing import Any

from bs4 import Tag
from markdownify import ATX, MarkdownConverter

from webpage_extract.config import Settings
from webpage_extract.exceptions import MarkdownGeneratorError

_EXCESSIVE_NEWLINES_RE = re.compile(r"\n{3,}")


class ReadableConverter(MarkdownConverter):
    """markdownify converter with fenced, language-tagged code blocks and inline links."""

    def convert_a(self, el: Tag, text: str, *args: Any, **kwargs: Any) -> str:
        """Render links inline as [text](href), keeping the title if present."""
        href = el.get("href")
        text = (text or "").strip()
        if not href or not text:
            return text
        title = el.get("title")
        if title:
            escaped_title = str(title).replace('"', r"\"")
            return f'[{text}]({href} "{escaped_title}")'
        return f"[{text}]({href})"

    def convert_pre(self, el: Tag, text: str, *args: Any, **kwargs: Any) -> str:
        """Render preformatted blocks as fenced code, tagged from a language-xxx class."""
        code = el.find("code")
        lang = ""
        if isinstance(code, Tag):
            for cls in code.get("class") or []:
                if cls.startswith("language-"):
                    lang = cls[len("language-"):]
                    break
            body = code.get_text()
        else:
            body = el.get_text()
        return f"\n\n```{lang}\n{body.strip()}\n```\n\n"


def count_words(markdown: str) -> int:
    """Count non-empty whitespace-delimited tokens."""
    return len(markdown.split())


def clean_markdown(markdown: str) -> str:
    """Collapse runs of 3+ newlines to a blank line and trim the result."""
    return _EXCESSIVE_NEWLINES_RE.sub("\n\n", markdown).strip()


class MarkdownGenerator:
    """Converts a content subtree to Markdown."""

    def __init__(self, settings: Settings) -> None:
        """Initialize the markdown generator with settings.

        Args:
            settings: Application settings containing markdown configuration.

        """
        self._settings = settings
        self._converter = ReadableConverter(
            heading_style=ATX,
            bullets="-",
            strong_em_symbol="*",
            autolinks=False,
        )

    def convert(self, element: Tag) -> str:
        """Convert a content element to Markdown.

        Args:
            element: The selected main content element.

        Returns:
            Cleaned Markdown; empty if the element has no renderable content.

        Raises:
            MarkdownGeneratorError: If the tree is too deeply nested to convert.

        """
        try:
            markdown = self._converter.convert_soup(element)
        except RecursionError as e:
            raise MarkdownGeneratorError("Document is nested too deeply to convert") from e

        return clean_markdown(markdown)

    def is_short(self, word_count: int) -> bool:
        """Return True if the content is below the configured minimum word count."""
        return word_count < self._settings.min_word_count
