"""CSS selector strategy for main content selection."""

from bs4 import BeautifulSoup, Tag

from webpage_extract.config import Settings, split_list
from webpage_extract.logger import logger


class CssSelectorFilter:
    """Locates the main content element using CSS selectors.

    Tries selectors in priority order and returns the first element matched
    by the first selector that matches anything.
    """

    def __init__(self, settings: Settings) -> None:
        """Initialize the CSS selector filter.

        Args:
            settings: Application settings containing CSS selector configuration.

        """
        self._selectors = split_list(settings.content_selector_priority_list)

    def apply(self, soup: BeautifulSoup) -> Tag | None:
        """Find the main content element.

        Tries selectors in order (e.g., main, article, #content) and returns
        the first match in document order.

        Args:
            soup: Parsed document tree.

        Returns:
            The matched element, or None if no selector matched.

        """
        for selector in self._selectors:
            element = soup.select_one(selector)
            if element is not None:
                logger.debug("CSS selector '%s' matched <%s>", selector, element.name)
                return element

        logger.debug("No CSS selector matched among %d candidates", len(self._selectors))
        return None
