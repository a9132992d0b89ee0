# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""SeriesEditor - edit every TimeSeries beneath a dotted address.

This module provides the SeriesEditor class, the entry point of the
genro-seriesedit library. An edit validates its inputs, descends to the
addressed node, rebuilds that subtree with the transform applied to every
TimeSeries in it, and splices the result into a new root.

Key Features:
    - **Uniform addressing**: 'Signal2.Subsignal3.timeseries1' works the
      same whether each level is a Dataset, a Signal or a dict
    - **Facet selection**: transform whole series, their Time, or their Data
    - **Non-destructive**: the input tree is never modified; only the
      containers on the addressed path are rebuilt
    - **Batch input**: lists of roots, lists of addresses

Address Syntax:
    - Dotted paths: 'Signal1.sin_t'
    - Empty address: '' targets the whole tree
    - Extra dots are ignored: '.Signal1..sin_t.'

Example:
    Basic usage::

        t = np.linspace(0, 2 * np.pi, 100)
        values = {'sin_t': TimeSeries(np.sin(t), t),
                  'cos_t': TimeSeries(np.cos(t), t)}
        A = Dataset([Signal(values, name='Signal1'),
                     Signal(values, name='Signal2')])

        editor = SeriesEditor()
        # Shift all the times of Signal1 by 1
        B = editor.edit(A, 'Signal1', 'Time', lambda time: time + 1)
        # Scale all the values of Signal2 by 2
        C = editor.edit(A, 'Signal2', 'Data', lambda data: data * 2)
        # Resample every series of both results
        D = editor.edit([B, C], '', '', lambda ts: resample(ts, newtime))
"""

from __future__ import annotations

import logging
from typing import Any, Sequence

from ..exceptions import (
    DuplicateElementNameError,
    InvalidAddressError,
    InvalidTargetError,
    InvalidTransformError,
    UnsupportedInputTypeError,
)
from ..node import Dataset, NodeKind, node_kind
from ..path import parse_address
from ..timeseries import Target
from .traversal import get_node, set_node
from .walking import SeriesWalker, Transform

logger = logging.getLogger(__name__)

SUPPORTED_TYPES = ('Dataset', 'Signal', 'dict', 'TimeSeries')


class SeriesEditor:
    """Applies transforms to the TimeSeries of simulation data trees.

    Attributes:
        raise_on_error: If True (default), the first failure aborts a batch
            edit. If False, each root of a batch is edited independently:
            a failing root is returned unchanged and its exception is
            recorded in ``errors``.
        copy_payloads: If True, the transform receives deep copies of the
            series or facets, so in-place changes cannot reach the input.
        errors: Exceptions of the last batch edit, keyed by root index.
            Reset at every call to edit().

    Example:
        >>> editor = SeriesEditor(raise_on_error=False)
        >>> results = editor.edit([good, broken], 'Signal1', 'Data', scale)
        >>> editor.errors
        {1: AddressNotFoundError("Did not find element 'Signal1' of 'data'")}
    """

    __slots__ = ('raise_on_error', 'copy_payloads', 'errors')

    def __init__(
        self,
        raise_on_error: bool = True,
        copy_payloads: bool = False,
    ) -> None:
        self.raise_on_error = raise_on_error
        self.copy_payloads = copy_payloads
        self.errors: dict[int, Exception] = {}

    def __repr__(self) -> str:
        return (
            f"SeriesEditor(raise_on_error={self.raise_on_error}, "
            f"copy_payloads={self.copy_payloads})"
        )

    # ==================== Validation ====================

    def _check_data(self, data: Any) -> None:
        """Check data is a supported root, or a sequence of one kind of root.

        Raises:
            UnsupportedInputTypeError: If it is not.
        """
        if isinstance(data, (list, tuple)):
            kinds = {node_kind(item) for item in data}
            if None in kinds:
                bad = next(item for item in data if node_kind(item) is None)
                raise UnsupportedInputTypeError(
                    f"Elements of data must be one of {', '.join(SUPPORTED_TYPES)}, "
                    f"not {type(bad).__name__}"
                )
            if len(kinds) > 1:
                raise UnsupportedInputTypeError(
                    "Elements of data must all be of the same type, got "
                    f"{', '.join(sorted(type(item).__name__ for item in data))}"
                )
        elif node_kind(data) is None:
            raise UnsupportedInputTypeError(
                f"Input data must be one of {', '.join(SUPPORTED_TYPES)}, "
                f"not {type(data).__name__}"
            )

    def _check_target(self, target: Any) -> Target:
        try:
            return Target.coerce(target)
        except ValueError as exc:
            raise InvalidTargetError(
                f"Input target must be empty, 'Time', or 'Data', not {target!r}"
            ) from exc

    def _check_unique_names(self, dataset: Dataset) -> None:
        seen: set[str] = set()
        duplicates: list[str] = []
        for name in dataset.element_names():
            if name in seen and name not in duplicates:
                duplicates.append(name)
            seen.add(name)
        if duplicates:
            raise DuplicateElementNameError(duplicates)

    def _check_address(self, address: Any) -> tuple[str, ...]:
        """Normalize address to a tuple of address strings."""
        if isinstance(address, str):
            return (address,)
        if isinstance(address, (list, tuple)) and all(
            isinstance(item, str) for item in address
        ):
            return tuple(address)
        raise InvalidAddressError(
            "Input address must be a string or a list of strings, "
            f"not {type(address).__name__}"
        )

    # ==================== Core API ====================

    def edit(
        self,
        data: Any,
        address: str | Sequence[str],
        target: Target | str | None,
        fcn: Transform,
    ) -> Any:
        """Apply fcn to every TimeSeries beneath address.

        Args:
            data: A Dataset, Signal, dict or TimeSeries, or a list/tuple of
                roots of one kind (each edited independently, in order).
            address: Dotted address of the node to edit ('' for the whole
                tree), or a list of addresses applied one after the other,
                each to the result of the previous one.
            target: '' (or None) to pass whole series to fcn, 'Time' or
                'Data' to pass only that facet.
            fcn: Transform whose result replaces what it receives.

        Returns:
            New tree(s) with the same shape and types as data.

        Raises:
            UnsupportedInputTypeError: data is not a supported root.
            InvalidTargetError: target is not '', 'Time' or 'Data'.
            InvalidTransformError: fcn is not callable, or with a whole
                series target returns something other than a TimeSeries.
            DuplicateElementNameError: a Dataset root has duplicate names.
            InvalidAddressError: address is not a string or list of strings.
            AddressNotFoundError: an address segment does not exist.
            UnsupportedNodeTypeError: traversal met a leaf or unknown object.
        """
        self.errors = {}
        self._check_data(data)
        target = self._check_target(target)
        if not callable(fcn):
            raise InvalidTransformError(
                f"Input fcn must be callable, not {type(fcn).__name__}"
            )

        if isinstance(data, (list, tuple)):
            return self._edit_batch(data, address, target, fcn)
        return self._edit_root(data, address, target, fcn)

    def _edit_batch(
        self,
        data: list[Any] | tuple[Any, ...],
        address: str | Sequence[str],
        target: Target,
        fcn: Transform,
    ) -> list[Any] | tuple[Any, ...]:
        results = []
        for index, root in enumerate(data):
            logger.debug(f"Editing data[{index}] of {len(data)}")
            try:
                results.append(self._edit_root(root, address, target, fcn))
            except Exception as exc:
                if self.raise_on_error:
                    raise
                logger.warning(f"Edit of data[{index}] failed, left unchanged: {exc}")
                self.errors[index] = exc
                results.append(root)
        if isinstance(data, tuple):
            return tuple(results)
        return results

    def _edit_root(
        self,
        root: Any,
        address: str | Sequence[str],
        target: Target,
        fcn: Transform,
    ) -> Any:
        if node_kind(root) is NodeKind.COLLECTION:
            self._check_unique_names(root)
        addresses = self._check_address(address)

        result = root
        for item in addresses:
            result = self._edit_address(result, item, target, fcn)
        return result

    def _edit_address(
        self,
        root: Any,
        address: str,
        target: Target,
        fcn: Transform,
    ) -> Any:
        path = parse_address(address)
        logger.debug(f"Editing {address!r} with target {target.value!r}")

        subtree = get_node(root, path)
        walker = SeriesWalker(target, fcn, self.copy_payloads)
        new_subtree = walker.walk(subtree)
        logger.debug(f"Transformed {walker.count} series under {address!r}")

        return set_node(root, path, new_subtree)


def edit_sim_data(
    data: Any,
    address: str | Sequence[str],
    target: Target | str | None,
    fcn: Transform,
    **options: Any,
) -> Any:
    """Edit data with a one-off SeriesEditor.

    Args:
        data, address, target, fcn: See SeriesEditor.edit().
        **options: SeriesEditor options (raise_on_error, copy_payloads).

    Example:
        >>> B = edit_sim_data(A, 'Signal1', 'Time', lambda t: t + 1)
    """
    return SeriesEditor(**options).edit(data, address, target, fcn)
