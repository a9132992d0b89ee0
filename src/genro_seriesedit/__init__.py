# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Genro-SeriesEdit - Edit time series buried in nested simulation data.

A small library that finds every TimeSeries beneath a dotted address in a
tree of Datasets, Signals and dicts, applies a function to each series (or
to its Time or Data), and returns a new tree with the results spliced in.
"""

__version__ = "0.1.0"

from .editor import (
    SeriesEditor,
    SeriesWalker,
    edit_sim_data,
    get_node,
    iter_series,
    set_node,
    walk,
)
from .exceptions import (
    AddressNotFoundError,
    DuplicateElementNameError,
    InvalidAddressError,
    InvalidTargetError,
    InvalidTransformError,
    SeriesEditError,
    UnsupportedInputTypeError,
    UnsupportedNodeTypeError,
)
from .node import Dataset, NodeKind, Signal, node_kind
from .path import parse_address
from .timeseries import Target, TimeSeries, resample

__all__ = [
    # Core classes
    "SeriesEditor",
    "SeriesWalker",
    "edit_sim_data",
    # Node classes
    "Dataset",
    "Signal",
    "TimeSeries",
    "NodeKind",
    "node_kind",
    "Target",
    # Traversal
    "parse_address",
    "get_node",
    "set_node",
    "walk",
    "iter_series",
    "resample",
    # Exceptions
    "SeriesEditError",
    "UnsupportedInputTypeError",
    "InvalidTargetError",
    "InvalidTransformError",
    "InvalidAddressError",
    "DuplicateElementNameError",
    "AddressNotFoundError",
    "UnsupportedNodeTypeError",
]
