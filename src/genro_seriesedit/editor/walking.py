# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Walk a subtree and transform every TimeSeries beneath it."""

from __future__ import annotations

import copy
from typing import Any, Callable, Iterator

from ..exceptions import InvalidTransformError, UnsupportedNodeTypeError
from ..node import Dataset, NodeKind, node_kind
from ..timeseries import Target, TimeSeries

Transform = Callable[[Any], Any]


def apply(
    series: TimeSeries,
    target: Target,
    fcn: Transform,
    copy_payloads: bool = False,
) -> TimeSeries:
    """Run fcn on a series, or on its time or data facet.

    Args:
        series: The leaf to transform.
        target: WHOLE passes the series, TIME/DATA pass that facet only.
        fcn: The transform. Its result replaces what it was given.
        copy_payloads: If True, fcn receives a deep copy. Otherwise a WHOLE
            transform receives a new TimeSeries sharing the facets, so
            reassigning its attributes never reaches the input tree.

    Returns:
        The new TimeSeries.

    Raises:
        InvalidTransformError: If target is WHOLE and fcn does not return
            a TimeSeries.
    """
    if target is Target.WHOLE:
        arg = copy.deepcopy(series) if copy_payloads else series.copy()
        result = fcn(arg)
        if not isinstance(result, TimeSeries):
            raise InvalidTransformError(
                f"Transform must return a TimeSeries, got {type(result).__name__}"
            )
        return result

    facet = series.get_facet(target)
    if copy_payloads:
        facet = copy.deepcopy(facet)
    return series.replace_facet(target, fcn(facet))


class SeriesWalker:
    """Rebuilds a subtree with fcn applied to every TimeSeries in it.

    Containers are visited in their own order, so each leaf is transformed
    exactly once and always in the same sequence. ``count`` holds the number
    of leaves transformed so far.
    """

    def __init__(
        self,
        target: Target,
        fcn: Transform,
        copy_payloads: bool = False,
    ) -> None:
        self.target = target
        self.fcn = fcn
        self.copy_payloads = copy_payloads
        self.count = 0

    def walk(self, node: Any) -> Any:
        """Return a transformed copy of node.

        Raises:
            UnsupportedNodeTypeError: If an unknown object is found.
        """
        kind = node_kind(node)
        if kind is NodeKind.SERIES:
            self.count += 1
            return apply(node, self.target, self.fcn, self.copy_payloads)
        if kind is NodeKind.COLLECTION:
            return Dataset([self.walk(element) for element in node], name=node.name)
        if kind is NodeKind.RECORD:
            return node.with_values(self.walk(node.values))
        if kind is NodeKind.MAP:
            result = copy.copy(node)
            for key, value in node.items():
                result[key] = self.walk(value)
            return result
        raise UnsupportedNodeTypeError(node)


def walk(
    node: Any,
    target: Target | str | None,
    fcn: Transform,
    copy_payloads: bool = False,
) -> Any:
    """Return node with fcn applied to every TimeSeries beneath it.

    Example:
        >>> walk(signal, 'Data', lambda data: data * 2)
    """
    return SeriesWalker(Target.coerce(target), fcn, copy_payloads).walk(node)


def iter_series(node: Any, prefix: str = '') -> Iterator[tuple[str, TimeSeries]]:
    """Yield (address, series) for every TimeSeries beneath node.

    Addresses are relative to node, prefixed by prefix. Order matches the
    walk order. An address can be passed back to SeriesEditor.edit() only
    when every name and key on its path is non-empty and free of dots;
    other names are yielded verbatim and will not resolve.

    Example:
        >>> for address, ts in iter_series(dataset):
        ...     print(address, len(ts))
        Signal1.sin_t 100
        Signal1.cos_t 100
    """
    kind = node_kind(node)
    if kind is NodeKind.SERIES:
        yield prefix, node
    elif kind is NodeKind.RECORD:
        yield from iter_series(node.values, prefix)
    elif kind is NodeKind.COLLECTION:
        for element in node:
            name = getattr(element, 'name', '')
            yield from iter_series(element, f"{prefix}.{name}" if prefix else name)
    elif kind is NodeKind.MAP:
        for key, value in node.items():
            yield from iter_series(value, f"{prefix}.{key}" if prefix else key)
    else:
        raise UnsupportedNodeTypeError(node)
