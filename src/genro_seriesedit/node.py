# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Container node classes and runtime node-kind dispatch.

A simulation data tree mixes four kinds of node:

- Dataset: ordered collection of named elements
- Signal: named record owning one values container (dict or Dataset)
- dict: plain field name -> node mapping
- TimeSeries: leaf holding time and data facets

Containers are values: methods that change content return a new instance
and leave the receiver untouched.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Iterable, Iterator

from .timeseries import TimeSeries


class NodeKind(Enum):
    """Structural kind of a tree node."""

    COLLECTION = 'collection'
    RECORD = 'record'
    MAP = 'map'
    SERIES = 'series'


def node_kind(node: Any) -> NodeKind | None:
    """Classify node, or return None if it is not a tree node."""
    if isinstance(node, Dataset):
        return NodeKind.COLLECTION
    if isinstance(node, Signal):
        return NodeKind.RECORD
    if isinstance(node, dict):
        return NodeKind.MAP
    if isinstance(node, TimeSeries):
        return NodeKind.SERIES
    return None


class Dataset:
    """An ordered collection of named elements.

    Each element exposes a ``name`` attribute (Signal, TimeSeries or a
    nested Dataset). Names are not required to be unique here; the editor
    rejects duplicated names when a Dataset is edited.

    Example:
        >>> ds = Dataset([Signal({'x': ts}, name='Signal1')])
        >>> ds = ds.add_element(Signal({'x': ts}, name='Signal2'))
        >>> ds.element_names()
        ['Signal1', 'Signal2']
        >>> ds.get('Signal2').name
        'Signal2'
    """

    __slots__ = ('_elements', 'name')

    def __init__(self, elements: Iterable[Any] | None = None, name: str = '') -> None:
        self._elements: tuple[Any, ...] = tuple(elements or ())
        self.name = name

    def __repr__(self) -> str:
        return f"Dataset({self.name!r}, {self.element_names()})"

    def __len__(self) -> int:
        return len(self._elements)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._elements)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Dataset):
            return NotImplemented
        return self.name == other.name and self._elements == other._elements

    __hash__ = None  # type: ignore[assignment]

    @property
    def num_elements(self) -> int:
        """Number of elements (alias for len())."""
        return len(self._elements)

    def element_names(self) -> list[str]:
        """Return element names in order."""
        return [getattr(element, 'name', '') for element in self._elements]

    def index_of(self, name: str) -> int:
        """Get the position of the first element called name.

        Raises:
            KeyError: If no element has that name.
        """
        for i, element in enumerate(self._elements):
            if getattr(element, 'name', '') == name:
                return i
        raise KeyError(f"Element '{name}' not found")

    def get_element(self, index: int) -> Any:
        """Get element by position (negative indexes allowed)."""
        return self._elements[index]

    def get(self, key: str | int) -> Any:
        """Get element by name or by position.

        Raises:
            KeyError: If key is a name that does not exist.
            IndexError: If key is an out of range position.
        """
        if isinstance(key, int):
            return self.get_element(key)
        return self._elements[self.index_of(key)]

    def set_element(self, index: int, element: Any) -> Dataset:
        """Return a new Dataset with the element at index replaced."""
        elements = list(self._elements)
        elements[index] = element
        return Dataset(elements, name=self.name)

    def add_element(self, element: Any) -> Dataset:
        """Return a new Dataset with element appended."""
        return Dataset((*self._elements, element), name=self.name)


class Signal:
    """A named record wrapping one values container.

    Addressing passes through a Signal straight into its values, so
    ``'Signal1.sin_t'`` reaches ``signal.values['sin_t']``.

    Attributes:
        values: A dict or Dataset of child nodes.
        name: Signal name, used as its element name inside a Dataset.
        block_path: Path of the block that logged the signal.
        port_index: Output port index of that block.
    """

    __slots__ = ('values', 'name', 'block_path', 'port_index')

    def __init__(
        self,
        values: dict[str, Any] | Dataset | None = None,
        name: str = '',
        block_path: str = '',
        port_index: int = 1,
    ) -> None:
        self.values = {} if values is None else values
        self.name = name
        self.block_path = block_path
        self.port_index = port_index

    def __repr__(self) -> str:
        return f"Signal({self.name!r}, values={self.values!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Signal):
            return NotImplemented
        return (
            self.name == other.name
            and self.block_path == other.block_path
            and self.port_index == other.port_index
            and self.values == other.values
        )

    __hash__ = None  # type: ignore[assignment]

    def with_values(self, values: dict[str, Any] | Dataset) -> Signal:
        """Return a new Signal with the same identity and new values."""
        return Signal(
            values,
            name=self.name,
            block_path=self.block_path,
            port_index=self.port_index,
        )
