"""Heading collection from a parsed document."""

from typing import NamedTuple

from bs4 import BeautifulSoup

HEADING_TAGS = ("h1", "h2", "h3", "h4", "h5", "h6")


class Heading(NamedTuple):
    """A document heading."""

    level: int
    text: str

    def to_dict(self) -> dict[str, int | str]:
        """Return the heading as a JSON-ready dict."""
        return {"level": self.level, "text": self.text}


def collect_headings(soup: BeautifulSoup) -> list[Heading]:
    """Collect <h1>-<h6> headings with non-empty text, in document order.

    Must run before boilerplate removal: headings inside navigation or
    headers are reported even though the markdown body drops them.
    """
    headings: list[Heading] = []
    for element in soup.find_all(HEADING_TAGS):
        text = element.get_text().strip()
        if text:
            headings.append(Heading(level=int(element.name[1]), text=text))
    return headings
