"""In-memory TF-IDF document search with pagination, request statistics and input helpers."""

__version__ = "0.1.0"
__all__ = [
    "document",
    "string_processing",
    "search_server",
    "paginator",
    "request_queue",
    "read_input",
    "cli",
]