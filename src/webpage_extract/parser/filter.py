"""Main content filtering module."""

from bs4 import BeautifulSoup, Tag

from webpage_extract.config import Settings
from webpage_extract.parser.filters.boilerplate import BoilerplateFilter
from webpage_extract.parser.filters.css_selector import CssSelectorFilter
from webpage_extract.parser.protocols import ContentFilter

HEAD_ONLY_TAGS = ("head", "title", "base", "link", "meta")


class Filter:
    """Strips boilerplate from a document and selects its main content.

    Cleaning filters run first, in order; selection runs on what remains.
    """

    def __init__(self, settings: Settings) -> None:
        """Initialize the filter with settings.

        Args:
            settings: Application settings containing filter configuration.

        """
        self._settings = settings
        self._filters = self._initialize_filters()
        self._selector = CssSelectorFilter(settings)

    def _initialize_filters(self) -> list[ContentFilter]:
        """Initialize cleaning filters in application order.

        Returns:
            List of ContentFilter instances to apply.

        """
        return [
            BoilerplateFilter(self._settings),
        ]

    def apply_all(self, soup: BeautifulSoup) -> Tag:
        """Clean the document in place and return its main content.

        Args:
            soup: Document tree, modified in place.

        Returns:
            The selected content element, else <body>, else the document root
            stripped of head-only elements.

        """
        for content_filter in self._filters:
            content_filter.apply(soup)

        selected = self._selector.apply(soup)
        if selected is not None:
            return selected

        if soup.body is not None:
            return soup.body

        # html.parser only builds <body> when the markup has one
        for element in soup.find_all(HEAD_ONLY_TAGS):
            if not element.decomposed:
                element.decompose()
        return soup
