"""Course registrar search service: scraping, grouping and a JSON HTTP API."""

__version__ = "0.1.0"