# ============================================================================
# RescueTower - Component Catalog
#
# Purpose: Component record and the capacity-bounded ordered catalog
# Inputs: Component fields, CatalogConfig
# Outputs: Catalog (MutableSequence[Component])
# Dependencies: collections.abc, dataclasses, config, errors
# Usage: catalog = Catalog(config.catalog); catalog.append(Component("Chip", "controle", 10))
#
# Changelog:
#   2026-03-02: Initial Component and Catalog
#   2026-03-04: Field validation moved into validate_component() so that file
#               loaders and the interactive menu share one rule set
# ============================================================================

from collections.abc import MutableSequence
from dataclasses import dataclass
from typing import Any, Iterable, List, Literal, Optional, Union, overload

from RescueTower.config import CatalogConfig
from RescueTower.errors import CapacityError, ComponentValidationError

SortKey = Literal["name", "category", "priority"]


@dataclass(frozen=True)
class Component:
    """A tower component. Value type: equal fields means equal components."""

    name: str
    category: str
    priority: int


def _check_text(field_name: str, value: Any, max_bytes: int) -> None:
    if not isinstance(value, str):
        raise ComponentValidationError(f"{field_name} must be a string, got {type(value).__name__}")
    if "\n" in value or "\r" in value:
        raise ComponentValidationError(f"{field_name} must not contain line breaks")
    size = len(value.encode("utf-8"))
    if size > max_bytes:
        raise ComponentValidationError(
            f"{field_name} is too long ({size} bytes, max {max_bytes})",
            details=repr(value),
        )


def validate_component(component: Component, config: Optional[CatalogConfig] = None) -> Component:
    """
    Check a component against the catalog field constraints.

    Args:
        component: Component to check
        config: Constraints to apply (defaults to CatalogConfig())

    Returns:
        The same component, for chaining

    Raises:
        ComponentValidationError: If any field is out of bounds
    """
    config = config or CatalogConfig()
    _check_text("name", component.name, config.max_name_bytes)
    _check_text("category", component.category, config.max_category_bytes)
    priority = component.priority
    # bool is an int subclass; True is not a priority
    if isinstance(priority, bool) or not isinstance(priority, int):
        raise ComponentValidationError(f"priority must be an integer, got {type(priority).__name__}")
    if not config.min_priority <= priority <= config.max_priority:
        raise ComponentValidationError(
            f"priority must be between {config.min_priority} and {config.max_priority}, got {priority}"
        )
    return component


class Catalog(MutableSequence):
    """
    Ordered, capacity-bounded sequence of components.

    Insertions are validated and capacity-checked. Item assignment is left
    unchecked beyond the type so that the sort algorithms can reorder in place;
    it can never change the length.
    """

    def __init__(self, config: Optional[CatalogConfig] = None, components: Iterable[Component] = ()):
        self.config = config or CatalogConfig()
        self._items: List[Component] = []
        for component in components:
            self.append(component)

    @property
    def capacity(self) -> int:
        return self.config.capacity

    def is_full(self) -> bool:
        return len(self._items) >= self.capacity

    def __len__(self) -> int:
        return len(self._items)

    @overload
    def __getitem__(self, index: int) -> Component: ...

    @overload
    def __getitem__(self, index: slice) -> List[Component]: ...

    def __getitem__(self, index: Union[int, slice]) -> Union[Component, List[Component]]:
        return self._items[index]

    def __setitem__(self, index, value) -> None:  # type: ignore[override]
        if isinstance(index, slice):
            raise TypeError("Catalog does not support slice assignment")
        if not isinstance(value, Component):
            raise TypeError(f"Catalog holds Component objects, got {type(value).__name__}")
        self._items[index] = value

    def __delitem__(self, index) -> None:  # type: ignore[override]
        del self._items[index]

    def insert(self, index: int, value: Component) -> None:
        if not isinstance(value, Component):
            raise TypeError(f"Catalog holds Component objects, got {type(value).__name__}")
        if self.is_full():
            raise CapacityError(f"Catalog is full ({self.capacity} components)")
        validate_component(value, self.config)
        self._items.insert(index, value)

    def clear(self) -> None:
        self._items.clear()

    def snapshot(self) -> List[Component]:
        """Copy of the current order. Components are immutable, so a shallow copy suffices."""
        return list(self._items)

    def __repr__(self) -> str:
        return f"Catalog({len(self)}/{self.capacity})"
