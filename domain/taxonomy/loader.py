"""Parse the flavor wheel CSV into a FlavorTaxonomy."""

from domain.taxonomy.model import FlavorTaxonomy


def parse_taxonomy_csv(text: str, *, source: str = "csv") -> FlavorTaxonomy:
    """
    Parse pre-loaded CSV text into a FlavorTaxonomy.

    This is a pure function - it does NOT perform file or network I/O.
    Fetching happens in infrastructure.io.taxonomy_source.

    Row 0 is a header and is skipped. Each remaining row needs at least three
    comma-separated fields (category, subcategory, flavor); extra trailing
    fields are ignored. Rows with any of the first three fields empty after
    trimming are skipped. Flavors are deduplicated per (category, subcategory)
    with a case-sensitive exact match, keeping first-seen order.

    Args:
        text: Raw CSV content
        source: Label recorded on the resulting taxonomy

    Returns:
        FlavorTaxonomy (possibly empty if no row was usable)
    """
    data: dict[str, dict[str, list[str]]] = {}

    for line in text.split("\n")[1:]:
        values = line.split(",")
        if len(values) < 3:
            continue
        category, subcategory, flavor = (v.strip() for v in values[:3])
        if not (category and subcategory and flavor):
            continue

        flavors = data.setdefault(category, {}).setdefault(subcategory, [])
        if flavor not in flavors:
            flavors.append(flavor)

    return FlavorTaxonomy(categories=data, source=source)
