"""I/O utilities: filesystem operations and taxonomy resource loading."""

from infrastructure.io.fs import ensure_exists, read_text, write_text
from infrastructure.io.taxonomy_source import is_url, read_taxonomy_source

__all__ = [
    "ensure_exists",
    "read_text",
    "write_text",
    "read_taxonomy_source",
    "is_url",
]
