# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Path traversal: read the node at a path, or rebuild a tree around it.

Both directions share the same child lookup rules:

- Dataset: segment is an element name
- Signal: segment names a child of its values container
- dict: segment is a key

Rebuilding is copy-on-write along the path only. Every container between the
root and the replaced node is a new object; everything off the path is
reused by reference.
"""

from __future__ import annotations

import copy
from typing import Any, Sequence

from ..exceptions import AddressNotFoundError, UnsupportedNodeTypeError
from ..node import NodeKind, node_kind


def _child(container: Any, segment: str, prefix: Sequence[str]) -> Any:
    """Look up segment in a Dataset or dict.

    Raises:
        AddressNotFoundError: If container has no such child.
        UnsupportedNodeTypeError: If container is neither Dataset nor dict.
    """
    kind = node_kind(container)
    if kind is NodeKind.COLLECTION:
        if segment not in container.element_names():
            raise AddressNotFoundError(segment, prefix)
        return container.get(segment)
    if kind is NodeKind.MAP:
        if segment not in container:
            raise AddressNotFoundError(segment, prefix)
        return container[segment]
    raise UnsupportedNodeTypeError(
        container, f"cannot look up '{segment}' inside it"
    )


def _with_child(container: Any, segment: str, value: Any) -> Any:
    """Return a copy of a Dataset or dict with one child replaced."""
    if node_kind(container) is NodeKind.COLLECTION:
        return container.set_element(container.index_of(segment), value)
    # copy.copy keeps the mapping type and its key order
    result = copy.copy(container)
    result[segment] = value
    return result


def get_node(root: Any, path: Sequence[str]) -> Any:
    """Descend from root following path and return the node found there.

    The returned node is the one stored in the tree, not a copy.

    Args:
        root: Tree root.
        path: Address segments, as returned by parse_address().

    Returns:
        The addressed node (root itself for an empty path).

    Raises:
        AddressNotFoundError: At the first segment that does not exist.
        UnsupportedNodeTypeError: If a leaf or unknown object is reached
            while segments remain.

    Example:
        >>> get_node(dataset, ('Signal1', 'sin_t'))
        TimeSeries('sin_t', samples=100)
    """
    current = root
    for i, segment in enumerate(path):
        kind = node_kind(current)
        if kind is NodeKind.RECORD:
            current = _child(current.values, segment, path[:i])
        elif kind is NodeKind.COLLECTION or kind is NodeKind.MAP:
            current = _child(current, segment, path[:i])
        else:
            remaining = '.'.join(path[i:])
            raise UnsupportedNodeTypeError(
                current, f"cannot access '{remaining}' inside it"
            )
    return current


def set_node(root: Any, path: Sequence[str], replacement: Any) -> Any:
    """Return a new tree equal to root except for the node at path.

    Args:
        root: Tree root. It is not modified.
        path: Address segments of the node to replace.
        replacement: The new node.

    Returns:
        replacement itself for an empty path, otherwise a new root.

    Raises:
        AddressNotFoundError: If a segment does not exist.
        UnsupportedNodeTypeError: If a leaf or unknown object is reached
            while segments remain.
    """
    return _rebuild(root, tuple(path), 0, replacement)


def _rebuild(node: Any, path: tuple[str, ...], depth: int, replacement: Any) -> Any:
    if depth == len(path):
        return replacement

    kind = node_kind(node)
    if kind is NodeKind.RECORD:
        return node.with_values(
            _rebuild_child(node.values, path, depth, replacement)
        )
    if kind is NodeKind.COLLECTION or kind is NodeKind.MAP:
        return _rebuild_child(node, path, depth, replacement)

    remaining = '.'.join(path[depth:])
    raise UnsupportedNodeTypeError(
        node, f"cannot replace '{remaining}' inside it"
    )


def _rebuild_child(
    container: Any, path: tuple[str, ...], depth: int, replacement: Any
) -> Any:
    segment = path[depth]
    child = _child(container, segment, path[:depth])
    new_child = _rebuild(child, path, depth + 1, replacement)
    return _with_child(container, segment, new_child)
