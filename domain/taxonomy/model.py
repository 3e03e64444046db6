"""Flavor taxonomy model: category -> subcategory -> ordered flavors."""

from collections.abc import Iterator, Sequence
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class FlavorTaxonomy(BaseModel):
    """Three-level coffee flavor classification tree.

    Built once per load and never mutated afterwards.
    """

    model_config = ConfigDict(frozen=True)

    categories: dict[str, dict[str, list[str]]] = Field(default_factory=dict)
    source: str = Field(default="default", description="Where the taxonomy was loaded from.")

    @property
    def is_empty(self) -> bool:
        return not self.categories

    def category_names(self) -> list[str]:
        return list(self.categories)

    def subcategory_names(self, category: str) -> list[str]:
        return list(self.categories.get(category, {}))

    def flavors(self, category: str, subcategory: str) -> list[str]:
        return list(self.categories.get(category, {}).get(subcategory, []))

    def flavor_count(self) -> int:
        return sum(1 for _ in self.iter_paths())

    def iter_paths(self) -> Iterator[tuple[str, str, str]]:
        """Yield every (category, subcategory, flavor) leaf path in insertion order."""
        for category, subs in self.categories.items():
            for subcategory, flavors in subs.items():
                for flavor in flavors:
                    yield category, subcategory, flavor

    def contains(self, path: Sequence[str]) -> bool:
        """
        Check whether a 1-3 component path exists in the tree.

        Examples:
            >>> t = FlavorTaxonomy(categories={"FRUITS": {"BERRY": ["STRAWBERRY"]}})
            >>> t.contains(["FRUITS", "BERRY"])
            True
            >>> t.contains(["FRUITS", "CITRUS", "LEMON"])
            False
        """
        if not 1 <= len(path) <= 3:
            return False
        subs = self.categories.get(path[0])
        if subs is None:
            return False
        if len(path) == 1:
            return True
        flavors = subs.get(path[1])
        if flavors is None:
            return False
        return len(path) == 2 or path[2] in flavors

    def to_hierarchy(self, root_name: str = "Coffee Flavors") -> dict[str, Any]:
        """Nested {name, children} tree; leaves carry value=1."""
        return {
            "name": root_name,
            "children": [
                {
                    "name": category,
                    "children": [
                        {
                            "name": subcategory,
                            "children": [{"name": flavor, "value": 1} for flavor in flavors],
                        }
                        for subcategory, flavors in subs.items()
                    ],
                }
                for category, subs in self.categories.items()
            ],
        }
