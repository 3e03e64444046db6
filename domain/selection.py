"""Session-owned selection state for the flavor wheel."""

from dataclasses import dataclass
from typing import Any, Literal

from domain.schemas import FlavorItem, SelectionItem

SelectionKind = Literal["category", "subcategory", "flavor"]

ID_DELIMITER = "-"

_KIND_BY_DEPTH: dict[int, SelectionKind] = {1: "category", 2: "subcategory", 3: "flavor"}


@dataclass(frozen=True)
class SelectionId:
    """Tagged path into the taxonomy: category, subcategory or flavor leaf."""

    kind: SelectionKind
    path: tuple[str, ...]

    @classmethod
    def for_path(cls, *path: str) -> "SelectionId":
        kind = _KIND_BY_DEPTH.get(len(path))
        if kind is None:
            raise ValueError(f"Selection path must have 1-3 components, got {len(path)}: {path!r}")
        return cls(kind=kind, path=tuple(path))

    @property
    def depth(self) -> int:
        return len(self.path)

    @property
    def value(self) -> str:
        """Composed string form, e.g. 'subcategory-FRUITS-BERRY'."""
        return ID_DELIMITER.join((self.kind, *self.path))

    def __str__(self) -> str:
        return self.value


class SurveyDraft:
    """
    In-progress survey for one session: picked wheel nodes plus form fields.

    Selection order is preserved; it becomes the order of the submitted flavors.
    Paths are not checked against the taxonomy.
    """

    def __init__(self) -> None:
        self._selected: list[SelectionId] = []
        self.name = ""
        self.age = ""
        self.coffee_name = ""

    @property
    def selected(self) -> tuple[SelectionId, ...]:
        return tuple(self._selected)

    def is_selected(self, selection_id: SelectionId) -> bool:
        return selection_id in self._selected

    def toggle(self, *path: str) -> tuple[SelectionId, ...]:
        """Select the node at `path`, or deselect it if already selected."""
        selection_id = SelectionId.for_path(*path)
        if selection_id in self._selected:
            self._selected.remove(selection_id)
        else:
            self._selected.append(selection_id)
        return self.selected

    def clear(self) -> tuple[SelectionId, ...]:
        self._selected.clear()
        self.name = ""
        self.age = ""
        self.coffee_name = ""
        return self.selected

    def flavor_selections(self) -> list[FlavorItem]:
        return [
            FlavorItem(category=s.path[0], subcategory=s.path[1], flavor=s.path[2])
            for s in self._selected
            if s.kind == "flavor"
        ]

    def item_selections(self) -> list[SelectionItem]:
        items: list[SelectionItem] = []
        for s in self._selected:
            if s.kind == "category":
                items.append(SelectionItem(type="category", name=s.path[0]))
            elif s.kind == "subcategory":
                items.append(SelectionItem(type="subcategory", category=s.path[0], name=s.path[1]))
        return items

    def to_payload(self) -> dict[str, Any]:
        """Request body for POST /surveys."""
        return {
            "name": self.name.strip(),
            "age": self.age.strip(),
            "coffeeName": self.coffee_name.strip(),
            "flavors": [f.model_dump() for f in self.flavor_selections()],
            "items": [i.model_dump(exclude_none=True) for i in self.item_selections()],
        }
