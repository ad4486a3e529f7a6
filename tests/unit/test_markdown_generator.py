"""Unit tests for MarkdownGenerator module."""

from unittest.mock import patch

import pytest
from bs4 import BeautifulSoup

from webpage_extract.config import Settings
from webpage_extract.exceptions import MarkdownGeneratorError
from webpage_extract.parser.markdown_generator import (
    MarkdownGenerator,
    clean_markdown,
    count_words,
)


def convert(settings: Settings, html: str) -> str:
    """Convert an HTML fragment with a fresh generator."""
    soup = BeautifulSoup(html, "html.parser")
    return MarkdownGenerator(settings).convert(soup)


class TestMarkdownGenerator:
    """Test MarkdownGenerator.convert."""

    def test_headings_use_hash_style(self, settings: Settings) -> None:
        """Test that heading level N renders as N hashes."""
        markdown = convert(settings, "<h1>T</h1><h3>Sub</h3>")

        assert "# T" in markdown
        assert "### Sub" in markdown

    def test_strong_and_emphasis(self, settings: Settings) -> None:
        """Test strong and emphasis markers."""
        markdown = convert(settings, "<p><strong>b</strong> and <em>i</em></p>")

        assert "**b**" in markdown
        assert "*i*" in markdown

    def test_links_inline(self, settings: Settings) -> None:
        """Test that links render in inline form."""
        markdown = convert(settings, '<p>See <a href="https://example.com/docs">Docs</a></p>')

        assert "[Docs](https://example.com/docs)" in markdown

    def test_link_title_kept(self, settings: Settings) -> None:
        """Test that a link title is rendered after the href."""
        markdown = convert(settings, '<a href="https://example.com" title="Home">Site</a>')

        assert '[Site](https://example.com "Home")' in markdown

    def test_link_without_href_renders_text(self, settings: Settings) -> None:
        """Test that an anchor without href renders as plain text."""
        markdown = convert(settings, "<p><a name='top'>Anchor</a></p>")

        assert markdown == "Anchor"

    def test_unordered_list_uses_dashes(self, settings: Settings) -> None:
        """Test that list items are bulleted with '-'."""
        markdown = convert(settings, "<ul><li>One</li><li>Two</li></ul>")

        assert "- One" in markdown
        assert "- Two" in markdown

    def test_code_block_with_language(self, settings: Settings) -> None:
        """Test that a language-xxx class tags the fence."""
        markdown = convert(
            settings, '<pre><code class="language-python">print(1)\n</code></pre>'
        )

        assert "```python\nprint(1)\n```" in markdown

    def test_code_block_without_language(self, settings: Settings) -> None:
        """Test that code without a language class gets an untagged fence."""
        markdown = convert(settings, "<pre>x = 1</pre>")

        assert "```\nx = 1\n```" in markdown

    def test_thematic_break(self, settings: Settings) -> None:
        """Test that <hr> renders as ---."""
        markdown = convert(settings, "<p>a</p><hr><p>b</p>")

        assert "---" in markdown

    def test_output_is_clean(self, settings: Settings) -> None:
        """Test that output has no triple newlines and no surrounding whitespace."""
        markdown = convert(settings, "<div><p>a</p><br><br><br><br><p>b</p></div>")

        assert "\n\n\n" not in markdown
        assert markdown == markdown.strip()

    def test_empty_element(self, settings: Settings) -> None:
        """Test that an element with no content converts to an empty string."""
        assert convert(settings, "<div>   </div>") == ""

    def test_recursion_error_wrapped(self, settings: Settings) -> None:
        """Test that RecursionError from the converter becomes MarkdownGeneratorError."""
        generator = MarkdownGenerator(settings)
        soup = BeautifulSoup("<p>x</p>", "html.parser")

        with (
            patch.object(generator._converter, "convert_soup", side_effect=RecursionError),
            pytest.raises(MarkdownGeneratorError, match="nested too deeply"),
        ):
            generator.convert(soup)

    def test_is_short_uses_min_word_count(self, settings: Settings) -> None:
        """Test the short content threshold."""
        generator = MarkdownGenerator(settings)

        assert generator.is_short(49) is True
        assert generator.is_short(50) is False


class TestHelpers:
    """Test markdown post-processing helpers."""

    def test_count_words(self) -> None:
        """Test that tokens are whitespace-delimited and empty tokens ignored."""
        assert count_words("# Title\n\nsome  words\there") == 5
        assert count_words("") == 0
        assert count_words("   \n ") == 0

    def test_clean_markdown(self) -> None:
        """Test newline collapsing and trimming."""
        assert clean_markdown("\n\n a\n\n\n\n\nb \n\n") == "a\n\nb"
        assert clean_markdown("a\n\nb") == "a\n\nb"
