"""Allow running the server with ``python -m webpage_extract``."""

from webpage_extract.server import main

main()
