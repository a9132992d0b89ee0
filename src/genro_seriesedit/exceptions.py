# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""SeriesEdit exceptions."""

from __future__ import annotations

from typing import Any, Sequence

from .path import format_prefix


class SeriesEditError(Exception):
    """Base exception for SeriesEdit errors."""

    pass


class UnsupportedInputTypeError(SeriesEditError, TypeError):
    """Raised when the data to edit is not a supported root node."""

    pass


class InvalidTargetError(SeriesEditError, ValueError):
    """Raised when the target is not '', 'Time' or 'Data'."""

    pass


class InvalidTransformError(SeriesEditError, TypeError):
    """Raised when the transform is not callable or returns a non-series."""

    pass


class InvalidAddressError(SeriesEditError, TypeError):
    """Raised when the address is not a string or a list of strings."""

    pass


class DuplicateElementNameError(SeriesEditError, ValueError):
    """Raised when a Dataset root holds two elements with the same name."""

    def __init__(self, duplicates: Sequence[str]) -> None:
        self.duplicates = tuple(duplicates)
        names = ', '.join(repr(name) for name in self.duplicates)
        super().__init__(
            f"Element names of data must be unique, duplicated: {names}"
        )


class AddressNotFoundError(SeriesEditError, LookupError):
    """Raised when an address segment does not name an existing child.

    Attributes:
        segment: The segment that could not be resolved.
        prefix: The segments successfully consumed before it.
    """

    def __init__(self, segment: str, prefix: Sequence[str] = ()) -> None:
        self.segment = segment
        self.prefix = tuple(prefix)
        super().__init__(
            f"Did not find element '{segment}' of '{format_prefix(self.prefix)}'"
        )


class UnsupportedNodeTypeError(SeriesEditError, TypeError):
    """Raised when traversal reaches a node it does not know how to handle."""

    def __init__(self, node: Any, detail: str | None = None) -> None:
        self.node_type = type(node)
        message = f"Don't know what to do with an object of type '{self.node_type.__name__}'"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)
