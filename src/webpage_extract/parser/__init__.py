"""Parser package for content extraction from HTML.

This package turns raw HTML into three independent views: readable
Markdown, structured tables, and page metadata.
"""

from webpage_extract.exceptions import DocumentLoadError, MarkdownGeneratorError
from webpage_extract.parser.filter import Filter
from webpage_extract.parser.headings import Heading
from webpage_extract.parser.markdown_generator import MarkdownGenerator
from webpage_extract.parser.metadata import MetadataExtractor
from webpage_extract.parser.parser import ExtractionOutput, Parser
from webpage_extract.parser.protocols import ContentFilter
from webpage_extract.parser.tables import TableRecord

__all__ = [
    "ContentFilter",
    "DocumentLoadError",
    "ExtractionOutput",
    "Filter",
    "Heading",
    "MarkdownGenerator",
    "MarkdownGeneratorError",
    "MetadataExtractor",
    "Parser",
    "TableRecord",
]
