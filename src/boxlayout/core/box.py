"""Box: one node of the layout tree.

A box either hosts a view (leaf) or stacks its children along one axis.
Its direction and children may be fixed, or computed from the width and
height the box is given, so the same tree can collapse or rearrange
itself as the available space changes.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Generic, Sequence, TypeVar, Union

from .validation import validate_extent, validate_weight

T = TypeVar("T")

DEFAULT_WEIGHT = 0


class Direction(Enum):
    """How a box stacks its children.

    ROW stacks them top to bottom, each child forming a row, so the
    heights are divided. COLUMN stacks them left to right and divides
    the widths.
    """

    ROW = "row"
    COLUMN = "column"

    @property
    def partitions_width(self) -> bool:
        return self is Direction.COLUMN


# --- Sizing ---

@dataclass(frozen=True)
class Fixed:
    """A static extent along the parent's stacking axis, honoured first."""

    size: int

    def __post_init__(self) -> None:
        validate_extent(self.size)


@dataclass(frozen=True)
class Weighted:
    """A relative share of whatever the static siblings leave over.

    A box given neither a size nor a weight has weight 0 and gets no space.
    """

    weight: int = DEFAULT_WEIGHT

    def __post_init__(self) -> None:
        validate_weight(self.weight)


Sizing = Union[Fixed, Weighted]


def sizing_from(size: int | None = None, weight: int | None = None) -> Sizing:
    """Build a Sizing from keyword-style arguments. At most one may be given."""
    if size is not None and weight is not None:
        raise ValueError(
            f"A box takes either a static size or a weight, not both "
            f"(got size={size}, weight={weight})."
        )
    if size is not None:
        return Fixed(size)
    if weight is not None:
        return Weighted(weight)
    return Weighted()


# --- Resolvers ---

@dataclass(frozen=True)
class Constant(Generic[T]):
    """Resolves to the same value whatever the allocation."""

    value: T

    def resolve(self, width: int, height: int) -> T:
        return self.value


@dataclass(frozen=True)
class Computed(Generic[T]):
    """Resolves by calling ``fn(width, height)``.

    Exceptions raised by ``fn`` are not caught.
    """

    fn: Callable[[int, int], T]

    def resolve(self, width: int, height: int) -> T:
        return self.fn(width, height)


Resolver = Union[Constant, Computed]


def _as_resolver(value: Any) -> Resolver:
    if isinstance(value, (Constant, Computed)):
        return value
    if callable(value):
        return Computed(value)
    return Constant(value)


@dataclass(frozen=True)
class Box:
    """A node of the layout tree.

    A box with no children (for its allocation) is a leaf and publishes
    its rect under ``view_name``; a leaf without a view name is a spacer.
    ``direction`` and ``children`` accept a plain value, a callable
    ``(width, height) -> value``, or a Constant/Computed resolver.
    """

    view_name: str | None = None
    sizing: Sizing = field(default_factory=Weighted)
    direction: Any = Direction.ROW
    children: Any = ()

    def __post_init__(self) -> None:
        if not isinstance(self.sizing, (Fixed, Weighted)):
            raise TypeError(
                f"sizing must be Fixed or Weighted, got {type(self.sizing).__name__}."
            )
        direction = _as_resolver(self.direction)
        if isinstance(direction, Constant) and not isinstance(direction.value, Direction):
            raise TypeError(
                f"direction must be a Direction or a callable, got {direction.value!r}."
            )
        children = _as_resolver(self.children)
        if isinstance(children, Constant):
            children = Constant(tuple(children.value))
        object.__setattr__(self, "direction", direction)
        object.__setattr__(self, "children", children)

    @property
    def is_static(self) -> bool:
        return isinstance(self.sizing, Fixed)

    def resolve_children(self, width: int, height: int) -> tuple[Box, ...]:
        return tuple(self.children.resolve(width, height) or ())

    def resolve_direction(self, width: int, height: int) -> Direction:
        return Direction(self.direction.resolve(width, height))

    # --- Convenience constructors ---

    @classmethod
    def view(cls, name: str, *, size: int | None = None, weight: int | None = None) -> Box:
        """A leaf publishing its rect under ``name``."""
        return cls(view_name=name, sizing=sizing_from(size, weight))

    @classmethod
    def spacer(cls, *, size: int | None = None, weight: int | None = None) -> Box:
        """A leaf that takes up space but publishes nothing."""
        return cls(sizing=sizing_from(size, weight))

    @classmethod
    def row(cls, *children: Box, size: int | None = None, weight: int | None = None) -> Box:
        """Children stacked top to bottom."""
        return cls(sizing=sizing_from(size, weight), direction=Direction.ROW, children=children)

    @classmethod
    def column(cls, *children: Box, size: int | None = None, weight: int | None = None) -> Box:
        """Children stacked left to right."""
        return cls(sizing=sizing_from(size, weight), direction=Direction.COLUMN, children=children)

    @classmethod
    def conditional(
        cls,
        direction: Direction | Callable[[int, int], Direction],
        children: Sequence[Box] | Callable[[int, int], Sequence[Box]],
        *,
        view_name: str | None = None,
        size: int | None = None,
        weight: int | None = None,
    ) -> Box:
        """A box whose direction and/or children depend on its allocation.

        ``view_name`` is published only for allocations where ``children``
        resolves to nothing.
        """
        return cls(
            view_name=view_name,
            sizing=sizing_from(size, weight),
            direction=direction,
            children=children,
        )
