"""Boilerplate filter for removing page furniture before content selection."""

from bs4 import BeautifulSoup

from webpage_extract.config import Settings, split_list
from webpage_extract.logger import logger


class BoilerplateFilter:
    """Removes navigation, ads, forms and other non-content elements.

    The deny-list is an ordered sequence of CSS selectors from settings,
    applied one after another to the same tree.
    """

    def __init__(self, settings: Settings) -> None:
        """Initialize the boilerplate filter.

        Args:
            settings: Application settings containing the boilerplate selector list.

        """
        self._selectors = split_list(settings.boilerplate_selector_list)

    @property
    def selectors(self) -> list[str]:
        """Deny-list selectors in application order."""
        return list(self._selectors)

    def apply(self, soup: BeautifulSoup) -> int:
        """Remove every element matching the deny-list.

        Args:
            soup: Document tree, modified in place.

        Returns:
            Number of elements removed.

        """
        removed_count = 0

        for selector in self._selectors:
            for element in soup.select(selector):
                # Already gone with an ancestor removed earlier in this pass
                if element.decomposed:
                    continue
                element.decompose()
                removed_count += 1

        if removed_count > 0:
            logger.debug("BoilerplateFilter removed %d elements", removed_count)

        return removed_count
