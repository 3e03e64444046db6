"""
Flavor taxonomy: model, CSV parsing and the built-in default dataset.

All functions in this module are pure (no file I/O).
"""

from domain.taxonomy.defaults import DEFAULT_TAXONOMY
from domain.taxonomy.loader import parse_taxonomy_csv
from domain.taxonomy.model import FlavorTaxonomy

__all__ = [
    "FlavorTaxonomy",
    "DEFAULT_TAXONOMY",
    "parse_taxonomy_csv",
]
