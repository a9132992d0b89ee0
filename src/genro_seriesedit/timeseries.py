# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""TimeSeries leaf node and the Target selector.

A TimeSeries is the terminal node of a simulation data tree. It carries two
facets, ``time`` and ``data``, which the editing engine treats as opaque
payloads: it only ever reads them, hands them to a transform, and stores
whatever the transform returns in a new TimeSeries.

Example:
    >>> import numpy as np
    >>> t = np.linspace(0, 1, 5)
    >>> ts = TimeSeries(t * 2, t, name='ramp')
    >>> shifted = ts.replace_facet(Target.TIME, ts.time + 1)
    >>> shifted.time[0]
    1.0
    >>> ts.time[0]  # original untouched
    0.0
"""

from __future__ import annotations

from enum import Enum
from typing import Any

import numpy as np


class Target(str, Enum):
    """Which part of each TimeSeries is handed to the transform."""

    WHOLE = ''
    TIME = 'Time'
    DATA = 'Data'

    @property
    def facet(self) -> str | None:
        """Attribute name of the selected facet, None for WHOLE."""
        if self is Target.WHOLE:
            return None
        return self.value.lower()

    @classmethod
    def coerce(cls, value: Target | str | None) -> Target:
        """Return the Target matching value. None means WHOLE.

        Raises:
            ValueError: If value is not '', 'Time', 'Data' or None.
        """
        if value is None:
            return cls.WHOLE
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            raise ValueError(f"Invalid target: {value!r}")
        return cls(value)


class TimeSeries:
    """A named pair of time and data facets.

    Attributes:
        data: Sample values (any payload, usually a numpy array).
        time: Sample times. Defaults to 0..n-1 when data is given without it.
        name: Series name.
    """

    __slots__ = ('data', 'time', 'name')

    def __init__(self, data: Any = None, time: Any = None, name: str = '') -> None:
        if time is None and data is not None:
            time = np.arange(_num_samples(data), dtype=float)
        self.data = data
        self.time = time
        self.name = name

    def __repr__(self) -> str:
        return f"TimeSeries({self.name!r}, samples={len(self)})"

    def __len__(self) -> int:
        if self.time is None:
            return 0
        return _num_samples(self.time)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TimeSeries):
            return NotImplemented
        return (
            self.name == other.name
            and np.array_equal(self.time, other.time)
            and np.array_equal(self.data, other.data)
        )

    __hash__ = None  # type: ignore[assignment]

    def get_facet(self, target: Target | str) -> Any:
        """Return the time or data facet selected by target."""
        facet = Target.coerce(target).facet
        if facet is None:
            raise ValueError("WHOLE does not select a facet")
        return getattr(self, facet)

    def replace_facet(self, target: Target | str, value: Any) -> TimeSeries:
        """Return a copy of this series with one facet replaced.

        Args:
            target: Target.TIME or Target.DATA (or 'Time'/'Data').
            value: New payload for that facet.

        Returns:
            New TimeSeries; the other facet and the name are shared.
        """
        facet = Target.coerce(target).facet
        if facet is None:
            raise ValueError("WHOLE does not select a facet")
        result = self.copy()
        setattr(result, facet, value)
        return result

    def copy(self) -> TimeSeries:
        """Return a new series sharing this one's facets and name."""
        return TimeSeries(self.data, self.time, self.name)


def _num_samples(payload: Any) -> int:
    """Length of the first axis; a scalar payload is one sample."""
    if np.ndim(payload) == 0:
        return 1
    return np.shape(payload)[0]


def resample(series: TimeSeries, new_time: Any) -> TimeSeries:
    """Linearly interpolate a series onto a new time base.

    Samples outside the original time range are NaN. Two-dimensional data is
    interpolated column by column (one column per channel).

    Args:
        series: The series to resample.
        new_time: The new sample times.

    Returns:
        New TimeSeries with the same name.

    Raises:
        ValueError: If data has more than two dimensions.

    Example:
        >>> newtime = np.linspace(1, 2 * np.pi, 100)
        >>> editor.edit(data, '', '', lambda ts: resample(ts, newtime))
    """
    new_time = np.asarray(new_time, dtype=float)
    old_time = np.asarray(series.time, dtype=float)
    data = np.asarray(series.data, dtype=float)

    if data.ndim == 1:
        new_data = np.interp(new_time, old_time, data, left=np.nan, right=np.nan)
    elif data.ndim == 2:
        new_data = np.column_stack([
            np.interp(new_time, old_time, data[:, col], left=np.nan, right=np.nan)
            for col in range(data.shape[1])
        ])
    else:
        raise ValueError(
            f"Cannot resample data with {data.ndim} dimensions"
        )

    return TimeSeries(new_data, new_time, series.name)
