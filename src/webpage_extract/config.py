"""Application configuration using Pydantic Settings.

Environment variables are automatically mapped to Settings fields.
"""

from functools import lru_cache

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

TRANSPORTS = ("http", "stdio")
MAX_PORT = 65535


def split_list(value: str) -> list[str]:
    """Split a comma-separated settings string into trimmed, non-empty items."""
    return [item.strip() for item in value.split(",") if item.strip()]


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    Every field has a default, so the server starts with an empty environment.
    Invalid values fail validation early with a clear error message.
    """

    # --- Connectivity & Infrastructure ---
    webpage_extract_debug: bool = False

    # --- Network Interface ---
    transport: str = "http"
    host: str = "0.0.0.0"
    port: int = 8000

    # --- Fetching ---
    default_timeout_ms: int = 30000
    user_agent: str = "webpage-extract/1.0.0"
    accept_header: str = "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8"

    # --- Main Content Selection ---
    content_selector_priority_list: str = (
        'main, article, [role="main"], #content, #main, #main-content, .content, .main, '
        ".main-content, .post, .article, .entry, .entry-content, .post-content, "
        ".article-content"
    )

    # --- Boilerplate Removal ---
    boilerplate_selector_list: str = (
        "script, style, noscript, iframe, nav, header, footer, aside, form, button, input, "
        "select, textarea, .nav, .navbar, .navigation, .menu, .sidebar, .advertisement, "
        ".ad, .ads, .advert, .social, .social-share, .share, .comments, .comment, .related, "
        ".related-posts, .footer, .header, .cookie, .popup, .modal, .newsletter, .subscribe, "
        "#nav, #navbar, #navigation, #menu, #sidebar, #footer, #header, #comments, #ad, #ads, "
        '[role="navigation"], [role="banner"], [role="contentinfo"], '
        '[role="complementary"], [aria-hidden="true"]'
    )

    # --- Markdown ---
    min_word_count: int = 50

    # --- Tables ---
    layout_table_class_hints: str = "layout, wrapper, container, frame"

    # --- Metadata ---
    publish_date_meta_keys: str = (
        "article:published_time, datePublished, date, pubdate, DC.date.issued"
    )

    # --- Redis ---
    redis_url: str = ""
    redis_key_prefix: str = "webpage_extract"
    redis_expiration_seconds: int = 3600

    @model_validator(mode="after")
    def validate_network_config(self) -> "Settings":
        """Validate transport and port settings.

        Raises:
            ValueError: If the transport is unknown or the port is out of range

        """
        if self.transport not in TRANSPORTS:
            msg = f"TRANSPORT must be one of {', '.join(TRANSPORTS)}, got {self.transport!r}"
            raise ValueError(msg)
        if not 1 <= self.port <= MAX_PORT:
            msg = f"PORT must be between 1 and {MAX_PORT}, got {self.port}"
            raise ValueError(msg)
        return self

    # --- Tool Metadata ---
    # Tool descriptions are stored here so they can be updated via environment
    # variables without code changes.
    tool_fetch_url_desc: str = (
        "Fetch raw HTML from a URL with optional custom headers and timeout. Returns the "
        "HTML content, status code, content type, and final URL (after redirects)."
    )
    tool_extract_readable_markdown_desc: str = (
        "Convert HTML to readable Markdown, removing boilerplate, navigation, ads, and "
        "sidebars. Focuses on the main content. Returns markdown text, document headings, "
        "and word count."
    )
    tool_extract_tables_desc: str = (
        "Extract all data tables from HTML as structured JSON. Returns an array of tables "
        "with headers and rows. Layout tables are filtered out."
    )
    tool_extract_metadata_desc: str = (
        "Extract metadata from HTML including: canonical URL, title, description, Open "
        "Graph tags, JSON-LD structured data (best-effort), author, and publish date."
    )

    # Tool argument descriptions
    arg_fetch_url_url_desc: str = "The URL to fetch (must be http:// or https://)"
    arg_fetch_url_headers_desc: str = "Optional custom headers to include in the request"
    arg_fetch_url_timeout_ms_desc: str = "Request timeout in milliseconds (default: 30000)"
    arg_html_or_url_desc: str = (
        "Either a URL to fetch (http:// or https://) or raw HTML content"
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    """Return cached settings instance.

    Uses lru_cache to ensure the .env file is only parsed once
    and all modules share the same settings instance.

    Returns:
        Settings instance with application configuration.

    Raises:
        ValidationError: If an environment variable holds an invalid value.

    """
    return Settings()


settings = get_settings()
