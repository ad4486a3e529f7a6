"""Metadata extraction with ordered fallback chains.

Each output field is resolved by a tuple of independent resolver functions,
tried in order until one returns a non-empty string.
"""

import json
from collections.abc import Callable, Iterator, Sequence
from dataclasses import dataclass
from typing import Any

from bs4 import BeautifulSoup

from webpage_extract.logger import logger


@dataclass(frozen=True)
class MetadataContext:
    """Everything a resolver may consult, computed once per document."""

    soup: BeautifulSoup
    meta_tags: dict[str, str]
    json_ld: list[Any]
    source_url: str | None
    publish_date_meta_keys: tuple[str, ...]


Resolver = Callable[[MetadataContext], str | None]


def resolve_first(chain: Sequence[Resolver], context: MetadataContext) -> str | None:
    """Return the first non-empty value produced by the chain, or None."""
    for resolver in chain:
        value = resolver(context)
        if value:
            return value
    return None


# ---------------------------------------------------------------------------
# Collections
# ---------------------------------------------------------------------------


def extract_open_graph(soup: BeautifulSoup) -> dict[str, str]:
    """Collect og: meta properties, prefix stripped; later duplicates win."""
    og: dict[str, str] = {}
    for element in soup.select('meta[property^="og:"]'):
        prop = element.get("property")
        content = element.get("content")
        if prop and content:
            og[str(prop)[len("og:"):]] = str(content)
    return og


def _reject_constant(name: str) -> Any:
    """Reject NaN and Infinity, which are not valid JSON."""
    raise ValueError(f"Invalid JSON constant: {name}")


def extract_json_ld(soup: BeautifulSoup) -> list[Any]:
    """Parse every JSON-LD script block; invalid blocks are skipped silently."""
    records: list[Any] = []
    scripts = soup.find_all("script", attrs={"type": "application/ld+json"})
    for index, script in enumerate(scripts):
        raw = script.string if script.string is not None else script.get_text()
        if not raw or not raw.strip():
            continue
        try:
            records.append(json.loads(raw, parse_constant=_reject_constant))
        except (ValueError, RecursionError) as e:
            logger.debug("Skipping invalid JSON-LD block #%d: %s", index, e)
    return records


def extract_meta_tags(soup: BeautifulSoup) -> dict[str, str]:
    """Map every <meta> by name, else property, else itemprop, to its content."""
    tags: dict[str, str] = {}
    for element in soup.find_all("meta"):
        key = element.get("name") or element.get("property") or element.get("itemprop")
        content = element.get("content")
        if key and content:
            tags[str(key)] = str(content)
    return tags


def iter_json_ld_objects(json_ld: list[Any]) -> Iterator[dict[str, Any]]:
    """Yield JSON-LD objects in document order.

    Covers top-level objects, objects inside a top-level array, and members
    of an object's @graph.
    """
    for record in json_ld:
        candidates = record if isinstance(record, list) else [record]
        for candidate in candidates:
            if not isinstance(candidate, dict):
                continue
            yield candidate
            graph = candidate.get("@graph")
            if isinstance(graph, list):
                yield from (node for node in graph if isinstance(node, dict))


# ---------------------------------------------------------------------------
# Resolvers
# ---------------------------------------------------------------------------


def _meta_content(selector: str) -> Resolver:
    """Resolver reading the content of the first element matching ``selector``."""
    def resolve(context: MetadataContext) -> str | None:
        element = context.soup.select_one(selector)
        if element is None:
            return None
        content = element.get("content")
        return str(content) if content else None
    return resolve


def _meta_tag(key: str) -> Resolver:
    """Resolver reading ``key`` from the collected meta tags."""
    def resolve(context: MetadataContext) -> str | None:
        return context.meta_tags.get(key)
    return resolve


def title_element(context: MetadataContext) -> str | None:
    element = context.soup.find("title")
    if element is None:
        return None
    return element.get_text().strip() or None


def canonical_link(context: MetadataContext) -> str | None:
    element = context.soup.select_one('link[rel="canonical"]')
    if element is None:
        return None
    href = element.get("href")
    return str(href) if href else None


def source_url(context: MetadataContext) -> str | None:
    return context.source_url


def _person_name(value: Any) -> str | None:
    if isinstance(value, str):
        return value
    if isinstance(value, dict) and isinstance(value.get("name"), str):
        return value["name"]
    return None


def json_ld_author(context: MetadataContext) -> str | None:
    """First JSON-LD author: a string, an object's name, or the first of a list."""
    for node in iter_json_ld_objects(context.json_ld):
        author = node.get("author")
        if isinstance(author, list):
            author = author[0] if author else None
        name = _person_name(author)
        if name:
            return name
    return None


def json_ld_creator(context: MetadataContext) -> str | None:
    for node in iter_json_ld_objects(context.json_ld):
        creator = node.get("creator")
        if isinstance(creator, str) and creator:
            return creator
    return None


def author_link(context: MetadataContext) -> str | None:
    element = context.soup.select_one('a[rel="author"]')
    if element is None:
        return None
    return element.get_text().strip() or None


def meta_publish_date(context: MetadataContext) -> str | None:
    for key in context.publish_date_meta_keys:
        value = context.meta_tags.get(key)
        if value:
            return value
    return None


def json_ld_publish_date(context: MetadataContext) -> str | None:
    for node in iter_json_ld_objects(context.json_ld):
        for key in ("datePublished", "dateCreated"):
            value = node.get(key)
            if isinstance(value, str) and value:
                return value
    return None


def time_element(context: MetadataContext) -> str | None:
    element = context.soup.select_one("time[datetime]")
    if element is None:
        return None
    value = element.get("datetime")
    return str(value) if value else None


TITLE_CHAIN: tuple[Resolver, ...] = (
    title_element,
    _meta_content('meta[property="og:title"]'),
)
DESCRIPTION_CHAIN: tuple[Resolver, ...] = (
    _meta_content('meta[name="description"]'),
    _meta_content('meta[property="og:description"]'),
)
CANONICAL_URL_CHAIN: tuple[Resolver, ...] = (
    canonical_link,
    _meta_content('meta[property="og:url"]'),
    source_url,
)
AUTHOR_CHAIN: tuple[Resolver, ...] = (
    _meta_tag("author"),
    _meta_tag("article:author"),
    json_ld_author,
    json_ld_creator,
    author_link,
)
PUBLISH_DATE_CHAIN: tuple[Resolver, ...] = (
    meta_publish_date,
    json_ld_publish_date,
    time_element,
)


# ---------------------------------------------------------------------------
# Extractor
# ---------------------------------------------------------------------------

OPTIONAL_FIELDS: tuple[tuple[str, tuple[Resolver, ...]], ...] = (
    ("title", TITLE_CHAIN),
    ("description", DESCRIPTION_CHAIN),
    ("canonical_url", CANONICAL_URL_CHAIN),
    ("author", AUTHOR_CHAIN),
    ("publish_date", PUBLISH_DATE_CHAIN),
)


class MetadataExtractor:
    """Resolves page metadata from a parsed document."""

    def __init__(self, publish_date_meta_keys: Sequence[str]) -> None:
        """Initialize the extractor.

        Args:
            publish_date_meta_keys: Meta tag keys tried in order for the publish date.

        """
        self._publish_date_meta_keys = tuple(publish_date_meta_keys)

    def extract(
        self, soup: BeautifulSoup, source: str | None = None
    ) -> tuple[dict[str, Any], list[str]]:
        """Extract metadata and advisory warnings.

        Args:
            soup: Parsed document tree.
            source: URL the document was fetched from, if any.

        Returns:
            Tuple of the metadata payload (absent fields omitted) and warnings.

        """
        open_graph = extract_open_graph(soup)
        json_ld = extract_json_ld(soup)
        meta_tags = extract_meta_tags(soup)

        context = MetadataContext(
            soup=soup,
            meta_tags=meta_tags,
            json_ld=json_ld,
            source_url=source,
            publish_date_meta_keys=self._publish_date_meta_keys,
        )

        data: dict[str, Any] = {}
        for field, chain in OPTIONAL_FIELDS:
            value = resolve_first(chain, context)
            if value:
                data[field] = value
        data["open_graph"] = open_graph
        data["json_ld"] = json_ld
        data["meta_tags"] = meta_tags

        warnings: list[str] = []
        if "title" not in data:
            warnings.append("No title found in the document")
        if "description" not in data:
            warnings.append("No description found in the document")
        if not open_graph:
            warnings.append("No Open Graph metadata found")

        return data, warnings
