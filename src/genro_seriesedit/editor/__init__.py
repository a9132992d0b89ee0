# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Editor package - Address, walk and rebuild simulation data trees.

The package is organized into:
- core: SeriesEditor entry point with validation and batch handling
- traversal: get_node/set_node along a parsed address
- walking: transform every TimeSeries beneath a node

Example:
    >>> from genro_seriesedit import SeriesEditor
    >>> editor = SeriesEditor()
    >>> shifted = editor.edit(dataset, 'Signal1', 'Time', lambda t: t + 1)
"""

from .core import SeriesEditor, edit_sim_data
from .traversal import get_node, set_node
from .walking import SeriesWalker, apply, iter_series, walk

__all__ = [
    "SeriesEditor",
    "SeriesWalker",
    "apply",
    "edit_sim_data",
    "get_node",
    "iter_series",
    "set_node",
    "walk",
]
