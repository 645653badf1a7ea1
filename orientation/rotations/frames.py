"""
Directional helpers for rotation quaternions.

This module provides the local axes of a rotated frame (:func:`forward`, :func:`up`, and :func:`right`) and
:func:`look_rotation`, which builds the quaternion that points the forward axis along a direction.
"""

import numpy as np

from orientation._typing import ARRAY_LIKE, DTYPE, FLOAT_ARRAY

from orientation.rotations.core._helpers import normalize_safe, _check_vector_array_and_shape
from orientation.rotations.core.quaternion_math import rotate_point


__all__ = ['forward', 'up', 'right', 'look_rotation']


def forward(quaternion: ARRAY_LIKE) -> FLOAT_ARRAY:
    """
    Returns the forward direction (the z axis, ``[0, 0, 1]``) rotated by the quaternion.

    :param quaternion: the unit rotation quaternion
    :return: the rotated forward direction
    """

    return rotate_point(quaternion, [0, 0, 1])


def up(quaternion: ARRAY_LIKE) -> FLOAT_ARRAY:
    """
    Returns the up direction (the y axis, ``[0, 1, 0]``) rotated by the quaternion.

    :param quaternion: the unit rotation quaternion
    :return: the rotated up direction
    """

    return rotate_point(quaternion, [0, 1, 0])


def right(quaternion: ARRAY_LIKE) -> FLOAT_ARRAY:
    """
    Returns the right direction (the x axis, ``[1, 0, 0]``) rotated by the quaternion.

    :param quaternion: the unit rotation quaternion
    :return: the rotated right direction
    """

    return rotate_point(quaternion, [1, 0, 0])


def look_rotation(direction: ARRAY_LIKE, up_vector: ARRAY_LIKE) -> FLOAT_ARRAY:
    """
    Compute the rotation quaternion that turns the forward (z) axis onto `direction` while keeping the up (y) axis as
    close to `up_vector` as possible.

    A right handed frame is formed from the normalized direction (a zero direction gives a zero vector), the right
    vector ``up_vector x direction``, and the corrected up vector ``direction x right``.  The frame is then converted
    to a quaternion using the trace of the frame to select between 4 formulas.

    `up_vector` should be a unit vector perpendicular to `direction`, otherwise the result is not unit length.

    :param direction: The direction the forward axis should point along
    :param up_vector: The approximate direction the up axis should point along
    :return: The rotation quaternion
    """

    # Form the right handed frame
    forward_axis: np.ndarray = normalize_safe(direction)
    right_axis: np.ndarray = np.cross(_check_vector_array_and_shape(up_vector), forward_axis)
    up_axis: np.ndarray = np.cross(forward_axis, right_axis)

    m00, m01, m02 = right_axis
    m10, m11, m12 = up_axis
    m20, m21, m22 = forward_axis

    trace = (m00 + m11) + m22

    if trace > 0:
        scale = np.sqrt(trace + 1)
        qw = scale * DTYPE(0.5)
        scale = DTYPE(0.5) / scale
        return np.array([(m12 - m21) * scale,
                         (m20 - m02) * scale,
                         (m01 - m10) * scale,
                         qw], dtype=DTYPE)

    if m00 >= m11 and m00 >= m22:
        root = np.sqrt(((1 + m00) - m11) - m22)
        scale = DTYPE(0.5) / root
        return np.array([DTYPE(0.5) * root,
                         (m01 + m10) * scale,
                         (m02 + m20) * scale,
                         (m12 - m21) * scale], dtype=DTYPE)

    if m11 > m22:
        root = np.sqrt(((1 + m11) - m00) - m22)
        scale = DTYPE(0.5) / root
        return np.array([(m10 + m01) * scale,
                         DTYPE(0.5) * root,
                         (m21 + m12) * scale,
                         (m20 - m02) * scale], dtype=DTYPE)

    root = np.sqrt(((1 + m22) - m00) - m11)
    scale = DTYPE(0.5) / root
    return np.array([(m20 + m02) * scale,
                     (m21 + m12) * scale,
                     DTYPE(0.5) * root,
                     (m01 - m10) * scale], dtype=DTYPE)
