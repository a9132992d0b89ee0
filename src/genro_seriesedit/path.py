# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Dotted address parsing."""

from __future__ import annotations

from typing import Sequence

ROOT_LABEL = 'data'


def parse_address(address: str) -> tuple[str, ...]:
    """Split a dotted address into its path segments.

    Empty segments are dropped, so leading, trailing or doubled dots are
    tolerated. Whether each segment exists is only checked while descending.

    Args:
        address: Dotted address (e.g., 'Signal1.sin_t').

    Returns:
        Tuple of non-empty segments. An empty tuple addresses the root.

    Example:
        >>> parse_address('Signal2.Subsignal3.timeseries1')
        ('Signal2', 'Subsignal3', 'timeseries1')
        >>> parse_address('.a..b.')
        ('a', 'b')
        >>> parse_address('')
        ()
    """
    return tuple(part for part in address.split('.') if part)


def format_prefix(segments: Sequence[str]) -> str:
    """Render consumed segments as 'data.a.b' for error messages."""
    return '.'.join((ROOT_LABEL, *segments))
