"""Content filters for HTML extraction."""

from webpage_extract.parser.filters.boilerplate import BoilerplateFilter
from webpage_extract.parser.filters.css_selector import CssSelectorFilter

__all__ = [
    "BoilerplateFilter",
    "CssSelectorFilter",
]
