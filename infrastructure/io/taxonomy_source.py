"""Fetch the raw flavor wheel CSV from disk or over HTTP."""

from pathlib import Path

import httpx

from infrastructure.io.fs import read_text


def is_url(source: str) -> bool:
    return source.startswith(("http://", "https://"))


def read_taxonomy_source(
    source: str | Path,
    *,
    client: httpx.Client | None = None,
    timeout_s: float = 10.0,
) -> str:
    """
    Read taxonomy CSV text from a filesystem path or an http(s) URL.

    Args:
        source: Path or URL of the CSV resource
        client: Optional httpx client (used for URLs; tests inject a mock transport)
        timeout_s: Timeout when a client has to be created

    Returns:
        CSV text

    Raises:
        FileNotFoundError: If a path source does not exist
        httpx.HTTPError: If a URL cannot be fetched or answers non-2xx
        UnicodeDecodeError: If a file is not valid UTF-8
    """
    src = str(source)
    if not is_url(src):
        path = Path(src)
        if not path.exists():
            raise FileNotFoundError(f"Taxonomy file not found: {path}")
        return read_text(path)

    if client is not None:
        resp = client.get(src)
        resp.raise_for_status()
        return resp.text

    with httpx.Client(timeout=timeout_s) as own_client:
        resp = own_client.get(src)
        resp.raise_for_status()
        return resp.text
