"""Unit tests for Parser module."""

from unittest.mock import patch

import pytest

from webpage_extract.config import Settings
from webpage_extract.exceptions import DocumentLoadError
from webpage_extract.parser.parser import NO_TABLES_WARNING, SHORT_CONTENT_WARNING, Parser

ARTICLE_HTML = (
    "<html><head><title>Guide</title></head><body>"
    "<header><h1>Site name</h1></header>"
    "<nav><a href='/'>Home</a></nav>"
    "<main><h1>Guide</h1><h2>Setup</h2><p>"
    + " ".join(["word"] * 60)
    + "</p></main>"
    "<footer>Copyright</footer></body></html>"
)


@pytest.fixture
def parser(settings: Settings) -> Parser:
    """Create a parser with default settings."""
    return Parser(settings)


class TestExtractMarkdown:
    """Test the markdown view."""

    def test_boilerplate_removed_from_markdown(self, parser: Parser) -> None:
        """Test that navigation text never reaches the markdown."""
        output = parser.extract_markdown("<nav>X</nav><main><h1>T</h1><p>Y</p></main>")

        assert "# T" in output.data["markdown"]
        assert "Y" in output.data["markdown"]
        assert "X" not in output.data["markdown"]

    def test_headings_include_boilerplate_headings(self, parser: Parser) -> None:
        """Test that headings come from the tree before boilerplate removal."""
        output = parser.extract_markdown(ARTICLE_HTML)

        assert output.data["headings"] == [
            {"level": 1, "text": "Site name"},
            {"level": 1, "text": "Guide"},
            {"level": 2, "text": "Setup"},
        ]
        assert "Site name" not in output.data["markdown"]

    def test_word_count_and_no_warning_for_long_content(self, parser: Parser) -> None:
        """Test word count over the final markdown and no short-content warning."""
        output = parser.extract_markdown(ARTICLE_HTML)

        assert output.data["word_count"] == len(output.data["markdown"].split())
        assert output.data["word_count"] >= 60
        assert output.warnings == []

    def test_short_content_warning(self, parser: Parser) -> None:
        """Test that short content is flagged but still returned."""
        output = parser.extract_markdown("<p>Just a few words</p>")

        assert output.data["markdown"] == "Just a few words"
        assert output.data["word_count"] == 4
        assert output.warnings == [SHORT_CONTENT_WARNING]

    def test_bodyless_document_excludes_title(self, parser: Parser) -> None:
        """Test that <title> text never reaches markdown when <body> is omitted."""
        output = parser.extract_markdown(
            "<html><head><title>SiteTitle</title></head><p>Hello world</p></html>"
        )

        assert output.data["markdown"] == "Hello world"
        assert output.data["word_count"] == 2

    def test_same_input_same_output(self, parser: Parser) -> None:
        """Test that repeated extraction yields identical results."""
        assert parser.extract_markdown(ARTICLE_HTML) == parser.extract_markdown(ARTICLE_HTML)

    def test_document_load_error_propagates(self, parser: Parser) -> None:
        """Test that loader failures surface as DocumentLoadError."""
        with (
            patch(
                "webpage_extract.parser.parser.load_document",
                side_effect=DocumentLoadError("bad"),
            ),
            pytest.raises(DocumentLoadError),
        ):
            parser.extract_markdown("<p>x</p>")


class TestExtractTables:
    """Test the tables view."""

    def test_layout_and_data_tables(self, parser: Parser) -> None:
        """Test that only the data table is counted."""
        output = parser.extract_tables(
            '<table role="presentation"><tr><td>Layout</td></tr></table>'
            "<table><tr><th>Name</th></tr><tr><td>Ann</td></tr></table>"
        )

        assert output.data == {"tables": [{"headers": ["Name"], "rows": [["Ann"]]}], "count": 1}
        assert output.warnings == []

    def test_no_tables_warning(self, parser: Parser) -> None:
        """Test the advisory warning when no data tables are found."""
        output = parser.extract_tables("<p>No tables</p>")

        assert output.data == {"tables": [], "count": 0}
        assert output.warnings == [NO_TABLES_WARNING]

    def test_layout_class_hints_from_settings(self) -> None:
        """Test that class hints are read from settings."""
        custom = Settings(_env_file=None, layout_table_class_hints="grid")  # type: ignore[call-arg]
        output = Parser(custom).extract_tables(
            '<table class="grid"><tr><td>1</td></tr></table>'
            '<table class="layout"><tr><td>2</td></tr></table>'
        )

        assert output.data["count"] == 1
        assert output.data["tables"][0]["rows"] == [["2"]]


class TestExtractMetadata:
    """Test the metadata view."""

    def test_og_title_fallback(self, parser: Parser) -> None:
        """Test og:title when there is no <title>."""
        output = parser.extract_metadata('<meta property="og:title" content="A">')

        assert output.data["title"] == "A"
        assert output.warnings == ["No description found in the document"]

    def test_source_used_for_canonical_url(self, parser: Parser) -> None:
        """Test that the source URL is the last canonical fallback."""
        output = parser.extract_metadata("<p>x</p>", source="https://example.com/a")

        assert output.data["canonical_url"] == "https://example.com/a"
