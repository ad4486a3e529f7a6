"""Document loading: raw HTML to a BeautifulSoup tree."""

from bs4 import BeautifulSoup, ParserRejectedMarkup, Tag

from webpage_extract.exceptions import DocumentLoadError

PARSER_BACKEND = "html.parser"


def load_document(html: str) -> BeautifulSoup:
    """Parse HTML into a tree owned by the caller.

    The stdlib backend tolerates unclosed and misnested tags, so only markup it
    cannot recover from at all is rejected.

    Raises:
        DocumentLoadError: If the parser rejects the markup.

    """
    try:
        return BeautifulSoup(html, PARSER_BACKEND)
    except ParserRejectedMarkup as e:
        raise DocumentLoadError(f"Failed to parse HTML: {e}") from e


def element_text(element: Tag) -> str:
    """Return an element's text, trimmed, with whitespace runs collapsed to one space."""
    return " ".join(element.get_text().split())
