"""Taxonomy loading with silent fallback to the built-in dataset."""

import logging
from pathlib import Path

import httpx

from domain.taxonomy import DEFAULT_TAXONOMY, FlavorTaxonomy, parse_taxonomy_csv
from infrastructure.io import read_taxonomy_source

logger = logging.getLogger(__name__)


def load_taxonomy(
    source: str | Path | None,
    *,
    client: httpx.Client | None = None,
) -> FlavorTaxonomy:
    """
    Load the flavor taxonomy; never raises.

    Any fetch/read failure, and any resource without a single usable
    (category, subcategory, flavor) row, yields DEFAULT_TAXONOMY.
    """
    if source is None or not str(source).strip():
        logger.warning("No taxonomy source configured; using built-in default taxonomy.")
        return DEFAULT_TAXONOMY

    src = str(source).strip()
    try:
        text = read_taxonomy_source(src, client=client)
    except (OSError, UnicodeDecodeError, httpx.HTTPError, httpx.InvalidURL) as e:
        logger.warning("Taxonomy source %s unreadable (%s); using built-in default taxonomy.", src, e)
        return DEFAULT_TAXONOMY

    taxonomy = parse_taxonomy_csv(text, source=src)
    if taxonomy.is_empty:
        logger.warning("Taxonomy source %s has no usable rows; using built-in default taxonomy.", src)
        return DEFAULT_TAXONOMY

    logger.info(
        "Loaded taxonomy from %s: %d categories, %d flavors",
        src,
        len(taxonomy.categories),
        taxonomy.flavor_count(),
    )
    return taxonomy
