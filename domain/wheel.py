"""
Sunburst geometry for the flavor wheel.

Partition layout over the taxonomy: every flavor leaf weighs 1, siblings are
ordered by total weight (largest first, ties keep taxonomy order), angles
span a full turn and each depth gets an equal-width ring. Angles follow SVG
arc conventions: 0 at 12 o'clock, increasing clockwise.
"""

import math
from dataclasses import dataclass, field

from domain.selection import SelectionId
from domain.taxonomy.model import FlavorTaxonomy

TAU = 2 * math.pi
MOBILE_BREAKPOINT_PX = 768
DEFAULT_CONTAINER_WIDTH = 600


@dataclass(frozen=True)
class WheelArc:
    selection_id: SelectionId
    name: str
    depth: int
    value: int
    x0: float  # start angle (radians)
    x1: float  # end angle
    y0: float  # inner radius
    y1: float  # outer radius

    def contains(self, angle: float, radius: float) -> bool:
        return self.x0 <= angle < self.x1 and self.y0 <= radius < self.y1

    def label_position(self) -> tuple[float, float, float]:
        """(x, y, rotation_degrees) of the arc centroid, rotated to stay upright."""
        angle = (self.x0 + self.x1) / 2
        r = (self.y0 + self.y1) / 2
        x = math.cos(angle - math.pi / 2) * r
        y = math.sin(angle - math.pi / 2) * r
        rotation = angle * 180 / math.pi - 90
        if 90 < rotation < 270:
            rotation += 180
        return x, y, rotation

    def to_payload(self) -> dict:
        return {
            "id": self.selection_id.value,
            "name": self.name,
            "depth": self.depth,
            "path": list(self.selection_id.path),
            "value": self.value,
            "x0": self.x0,
            "x1": self.x1,
            "y0": self.y0,
            "y1": self.y1,
        }


@dataclass
class _Node:
    name: str
    path: tuple[str, ...]
    children: list["_Node"] = field(default_factory=list)
    value: int = 0

    @property
    def height(self) -> int:
        return 1 + max(c.height for c in self.children) if self.children else 0


def _build_tree(taxonomy: FlavorTaxonomy) -> _Node:
    root = _Node(name="root", path=())
    for category, subs in taxonomy.categories.items():
        cat_node = _Node(name=category, path=(category,))
        for subcategory, flavors in subs.items():
            sub_node = _Node(name=subcategory, path=(category, subcategory))
            sub_node.children = [
                _Node(name=flavor, path=(category, subcategory, flavor), value=1) for flavor in flavors
            ]
            cat_node.children.append(sub_node)
        root.children.append(cat_node)
    _sum_and_sort(root)
    return root


def _sum_and_sort(node: _Node) -> int:
    if node.children:
        node.value = sum(_sum_and_sort(c) for c in node.children)
        node.children.sort(key=lambda c: c.value, reverse=True)
    return node.value


def compute_wheel_layout(taxonomy: FlavorTaxonomy, radius: float) -> list[WheelArc]:
    """
    Lay the taxonomy out as sunburst arcs (root excluded), depth-first.

    Deterministic for a given taxonomy and radius.
    """
    root = _build_tree(taxonomy)
    if root.value == 0:
        return []

    ring = radius / (root.height + 1)
    arcs: list[WheelArc] = []

    def place(node: _Node, x0: float, x1: float, depth: int) -> None:
        if depth > 0:
            arcs.append(
                WheelArc(
                    selection_id=SelectionId.for_path(*node.path),
                    name=node.name,
                    depth=depth,
                    value=node.value,
                    x0=x0,
                    x1=x1,
                    y0=depth * ring,
                    y1=(depth + 1) * ring,
                )
            )
        if not node.children or node.value == 0:
            return
        k = (x1 - x0) / node.value
        cursor = x0
        for child in node.children:
            end = cursor + child.value * k
            place(child, cursor, end, depth + 1)
            cursor = end

    place(root, 0.0, TAU, 0)
    return arcs


def hit_test(arcs: list[WheelArc], x: float, y: float) -> SelectionId | None:
    """Return the selection under point (x, y), relative to the wheel centre (SVG axes)."""
    r = math.hypot(x, y)
    angle = math.atan2(x, -y) % TAU
    for arc in arcs:
        if arc.contains(angle, r):
            return arc.selection_id
    return None


def wheel_radius(
    container_width: float | None,
    viewport_height: float,
    screen_width: float,
) -> float:
    """
    Outer radius for a square wheel fitted to the viewport.

    Mobile screens use a 300-800px square at 60% of the viewport height,
    desktop a 400-1200px square at 80%; 20px is kept as margin.
    """
    if screen_width < MOBILE_BREAKPOINT_PX:
        min_size, max_size, height_ratio = 300, 800, 0.6
    else:
        min_size, max_size, height_ratio = 400, 1200, 0.8

    available_height = viewport_height * height_ratio
    available_width = max(container_width or DEFAULT_CONTAINER_WIDTH, min_size)

    size = min(available_width, available_height, max_size)
    size = max(size, min_size)
    return size / 2 - 20
