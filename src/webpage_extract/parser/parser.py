"""Main parser module that composes the extraction views."""

from typing import Any, NamedTuple

from webpage_extract.config import Settings, split_list
from webpage_extract.logger import logger
from webpage_extract.parser.document import load_document
from webpage_extract.parser.filter import Filter
from webpage_extract.parser.headings import collect_headings
from webpage_extract.parser.markdown_generator import MarkdownGenerator, count_words
from webpage_extract.parser.metadata import MetadataExtractor
from webpage_extract.parser.tables import extract_tables
from webpage_extract.timing import timer

SHORT_CONTENT_WARNING = (
    "Extracted content is very short. "
    "The page may be JavaScript-rendered or have unusual structure."
)
NO_TABLES_WARNING = "No data tables found in the document"


class ExtractionOutput(NamedTuple):
    """Result of one extraction view."""

    data: dict[str, Any]
    warnings: list[str]


class Parser:
    """Derives markdown, tables and metadata views from raw HTML.

    Every view parses its own tree, so views share no state and calls are
    safe to run concurrently in worker threads.
    """

    def __init__(self, settings: Settings) -> None:
        """Initialize the parser with settings.

        Args:
            settings: Application settings containing all configuration.

        """
        self._settings = settings
        self._filter = Filter(settings)
        self._markdown_generator = MarkdownGenerator(settings)
        self._table_class_hints = split_list(settings.layout_table_class_hints)
        self._metadata_extractor = MetadataExtractor(
            split_list(settings.publish_date_meta_keys)
        )

    def extract_markdown(self, html: str) -> ExtractionOutput:
        """Run headings -> boilerplate removal -> selection -> markdown.

        Args:
            html: Raw HTML.

        Returns:
            ExtractionOutput with markdown, headings and word count.

        """
        with timer("Markdown extraction"):
            soup = load_document(html)

            # Headings come from the tree before boilerplate removal
            headings = collect_headings(soup)

            logger.debug("[FILTERING STARTED] %d headings collected", len(headings))
            content = self._filter.apply_all(soup)

            logger.debug("[MARKDOWN GENERATION STARTED] from <%s>", content.name)
            markdown = self._markdown_generator.convert(content)
            word_count = count_words(markdown)

        warnings: list[str] = []
        if self._markdown_generator.is_short(word_count):
            warnings.append(SHORT_CONTENT_WARNING)

        data = {
            "markdown": markdown,
            "headings": [heading.to_dict() for heading in headings],
            "word_count": word_count,
        }
        return ExtractionOutput(data, warnings)

    def extract_tables(self, html: str) -> ExtractionOutput:
        """Extract every data table as a header/row record.

        Args:
            html: Raw HTML.

        Returns:
            ExtractionOutput with tables and their count.

        """
        with timer("Table extraction"):
            soup = load_document(html)
            records = extract_tables(soup, self._table_class_hints)

        warnings = [] if records else [NO_TABLES_WARNING]
        data = {
            "tables": [record.to_dict() for record in records],
            "count": len(records),
        }
        return ExtractionOutput(data, warnings)

    def extract_metadata(self, html: str, source: str | None = None) -> ExtractionOutput:
        """Resolve page metadata through the fallback chains.

        Args:
            html: Raw HTML.
            source: URL the HTML was fetched from; last resort for canonical_url.

        Returns:
            ExtractionOutput with the metadata payload.

        """
        with timer("Metadata extraction"):
            soup = load_document(html)
            data, warnings = self._metadata_extractor.extract(soup, source)
        return ExtractionOutput(data, warnings)
