"""Unit tests for the boilerplate filter."""

from bs4 import BeautifulSoup

from webpage_extract.config import Settings
from webpage_extract.parser.filters.boilerplate import BoilerplateFilter


def soup_of(html: str) -> BeautifulSoup:
    """Parse HTML the way the document loader does."""
    return BeautifulSoup(html, "html.parser")


class TestBoilerplateFilter:
    """Test BoilerplateFilter.apply."""

    def test_removes_structural_tags(self, settings: Settings) -> None:
        """Test that nav, header, footer, aside, script and forms are removed."""
        soup = soup_of(
            "<body><header>H</header><nav>N</nav><p>Body</p><aside>A</aside>"
            "<script>var x;</script><form><input name='q'><button>Go</button></form>"
            "<footer>F</footer></body>"
        )

        removed = BoilerplateFilter(settings).apply(soup)

        assert removed > 0
        assert soup.get_text() == "Body"

    def test_removes_class_and_id_patterns(self, settings: Settings) -> None:
        """Test that ad, sidebar, cookie and related blocks are removed by class or id."""
        soup = soup_of(
            '<div class="ad">Buy</div><div id="sidebar">Side</div>'
            '<div class="cookie">Cookies</div><div class="related-posts">More</div>'
            "<p>Keep</p>"
        )

        BoilerplateFilter(settings).apply(soup)

        assert soup.get_text() == "Keep"

    def test_removes_aria_roles_and_hidden(self, settings: Settings) -> None:
        """Test that landmark roles and aria-hidden elements are removed."""
        soup = soup_of(
            '<div role="navigation">Nav</div><div role="banner">Banner</div>'
            '<div role="contentinfo">Info</div><div role="complementary">Extra</div>'
            '<span aria-hidden="true">Icon</span><p>Keep</p>'
        )

        BoilerplateFilter(settings).apply(soup)

        assert soup.get_text() == "Keep"

    def test_keeps_classes_that_only_contain_pattern_text(self, settings: Settings) -> None:
        """Test that class tokens are matched whole, so 'heading' survives '.ad'."""
        soup = soup_of('<div class="heading">Title</div><div class="download">File</div>')

        removed = BoilerplateFilter(settings).apply(soup)

        assert removed == 0
        assert "Title" in soup.get_text()
        assert "File" in soup.get_text()

    def test_nested_matches_counted_once(self, settings: Settings) -> None:
        """Test that elements removed with an ancestor are not removed again."""
        soup = soup_of('<nav><div class="menu">M</div></nav><p>Keep</p>')

        removed = BoilerplateFilter(settings).apply(soup)

        assert removed == 1
        assert soup.get_text() == "Keep"

    def test_selectors_follow_settings_order(self, settings: Settings) -> None:
        """Test that the deny-list is read from settings in order."""
        selectors = BoilerplateFilter(settings).selectors

        assert selectors[0] == "script"
        assert selectors[-1] == '[aria-hidden="true"]'
