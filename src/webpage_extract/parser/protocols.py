"""Protocol definitions for the parser package.

Contains structural typing protocols that define interfaces for
parser components, enabling better type checking and extensibility.
"""

from typing import Protocol

from bs4 import BeautifulSoup


class ContentFilter(Protocol):
    """Protocol defining the interface for tree-cleaning filters.

    Content filters strip unwanted elements from a parsed document
    before the main content is selected.

    Implementations should:
    - Modify the tree in place
    - Return the number of elements removed
    """

    def apply(self, soup: BeautifulSoup) -> int:
        """Apply the filter to a parsed document.

        Args:
            soup: The document tree, modified in place.

        Returns:
            The number of elements removed.

        """
        ...
