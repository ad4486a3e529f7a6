"""Unit tests for heading collection."""

from bs4 import BeautifulSoup

from webpage_extract.parser.headings import Heading, collect_headings


class TestCollectHeadings:
    """Test collect_headings."""

    def test_levels_in_document_order(self) -> None:
        """Test that headings keep their level and document order."""
        soup = BeautifulSoup(
            "<h2>Second</h2><h1>First</h1><div><h6>Deep</h6></div>", "html.parser"
        )

        headings = collect_headings(soup)

        assert headings == [Heading(2, "Second"), Heading(1, "First"), Heading(6, "Deep")]

    def test_skips_empty_headings(self) -> None:
        """Test that headings with only whitespace are skipped."""
        soup = BeautifulSoup("<h1>  </h1><h3>\n Kept \n</h3>", "html.parser")

        assert collect_headings(soup) == [Heading(3, "Kept")]

    def test_includes_headings_inside_boilerplate(self) -> None:
        """Test that headings in navigation are collected from the unfiltered tree."""
        soup = BeautifulSoup("<nav><h2>Menu</h2></nav><main><h1>Body</h1></main>", "html.parser")

        assert [h.text for h in collect_headings(soup)] == ["Menu", "Body"]

    def test_to_dict(self) -> None:
        """Test the JSON shape of a heading."""
        assert Heading(1, "T").to_dict() == {"level": 1, "text": "T"}
