"""
This module provides the :class:`QuaternionInterpolator` class for interpolating between two orientations, for
instance once per frame of an animation or once per step of a simulation.

The interpolator is configured with an :class:`InterpolatorOptions` instance which selects the interpolation method
(:func:`.slerp` or :func:`.nlerp`), the times that correspond to the start and end orientations, and whether
requested times outside of that interval are clamped to it.
"""

import logging

from dataclasses import dataclass

from enum import Enum

import numpy as np

from orientation._typing import ARRAY_LIKE, DatetimeLike
from orientation.rotations.core._helpers import _fractional_time
from orientation.rotations.core.quaternion_math import nlerp, slerp
from orientation.rotations.quaternion import Quaternion
from orientation.utilities.options import UserOptions
from orientation.utilities.mixin_classes import AttributePrinting, UserOptionConfigured


_LOGGER: logging.Logger = logging.getLogger(__name__)
"""
This is the logging interface for reporting status, results, issues, and other information.
"""


class InterpolationMethods(Enum):
    """
    This enumeration provides the interpolation methods available to the :class:`QuaternionInterpolator`.
    """

    SLERP = "slerp"
    """
    Spherical linear interpolation (constant angular velocity).  See :func:`.slerp`.
    """

    NLERP = "nlerp"
    """
    Normalized linear interpolation (cheaper, exact only at the end points).  See :func:`.nlerp`.
    """


@dataclass
class InterpolatorOptions(UserOptions):

    method: InterpolationMethods | str = InterpolationMethods.SLERP
    """
    The interpolation method to use, either as an :class:`InterpolationMethods` value or its string name.
    """

    clamp: bool = True
    """
    Whether to clamp the fractional time to [0, 1] so the result never extrapolates past the end orientations.
    """

    time0: float | DatetimeLike = 0.0
    """
    The time corresponding to the start orientation.
    """

    time1: float | DatetimeLike = 1.0
    """
    The time corresponding to the end orientation.
    """


class QuaternionInterpolator(UserOptionConfigured[InterpolatorOptions], AttributePrinting):
    """
    Interpolates between a start and an end orientation.

    Calling the instance with a time returns the interpolated :class:`.Quaternion`::

        >>> from orientation.rotations import Quaternion, QuaternionInterpolator, InterpolatorOptions
        >>> from numpy import pi
        >>> interpolator = QuaternionInterpolator(Quaternion.identity(), Quaternion.rotate_z(pi/2),
        ...                                       options=InterpolatorOptions(time0=0.0, time1=10.0))
        >>> halfway = interpolator(5.0)

    The options can be changed on the instance directly and restored with :meth:`reset_settings`.
    """

    method: InterpolationMethods | str
    clamp: bool
    time0: float | DatetimeLike
    time1: float | DatetimeLike

    def __init__(self, start: Quaternion | ARRAY_LIKE, end: Quaternion | ARRAY_LIKE,
                 options: InterpolatorOptions | None = None):
        """
        :param start: the orientation at `time0`
        :param end: the orientation at `time1`
        :param options: the options to configure the interpolator with
        :raises ValueError: if the configured method is not recognized
        """

        super().__init__(InterpolatorOptions, options=options)

        self._start = start if isinstance(start, Quaternion) else Quaternion.from_value(start)
        self._end = end if isinstance(end, Quaternion) else Quaternion.from_value(end)

        # raises ValueError for an unknown method
        self._interpolation_function()

    @property
    def start(self) -> Quaternion:
        """
        The orientation at `time0`.
        """

        return self._start

    @property
    def end(self) -> Quaternion:
        """
        The orientation at `time1`.
        """

        return self._end

    def _interpolation_function(self):

        method = self.method

        if isinstance(method, str):
            try:
                method = InterpolationMethods(method.lower())
            except ValueError:
                raise ValueError(f'Unrecognized interpolation method {self.method!r}.  '
                                 f'Must be one of {[m.value for m in InterpolationMethods]}')

        if method == InterpolationMethods.SLERP:
            return slerp
        elif method == InterpolationMethods.NLERP:
            return nlerp
        else:
            raise ValueError(f'Unrecognized interpolation method {self.method!r}')

    def fraction(self, time: float | DatetimeLike) -> float:
        """
        Computes the fractional percent of the way `time` is from `time0` to `time1`, clamping to [0, 1] if requested.

        :param time: the time to compute the fraction for
        :return: the fractional percent
        :raises ZeroDivisionError: if `time0` and `time1` are equal
        """

        dt = _fractional_time(time, self.time0, self.time1)

        if self.clamp and not 0 <= dt <= 1:
            _LOGGER.debug(f'Clamping interpolation fraction {dt} to [0, 1]')
            dt = float(np.clip(dt, 0, 1))

        return dt

    def __call__(self, time: float | DatetimeLike) -> Quaternion:
        """
        Interpolates the orientation at `time`.

        :param time: the time to interpolate at
        :return: the interpolated orientation
        :raises ZeroDivisionError: if `time0` and `time1` are equal
        """

        func = self._interpolation_function()

        return Quaternion.from_value(func(self._start, self._end, self.fraction(time)))
