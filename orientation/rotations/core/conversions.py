# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.

"""
Core conversion routines for rotation representations

This module contains core routines for converting between quaternions and the other rotation representations (axis
and angle, euler angles, rotation matrices, and rigid transformation matrices).  All routines are implemented purely on
numpy arrays (or array like objects).
"""

import logging

import numpy as np

from orientation._typing import ARRAY_LIKE, DTYPE, FLOAT_ARRAY

from orientation.rotations.core._helpers import (normalize, sincos, _check_matrix_array_and_shape,
                                                 _check_quaternion_array_and_shape, _check_vector_array_and_shape)
from orientation.rotations.core.elementals import IDENTITY, RotationOrder, rotate_x, rotate_y, rotate_z
from orientation.rotations.core.quaternion_math import quaternion_multiplication as mul, quaternion_normalize


__all__ = ['axis_angle_to_quaternion', 'quaternion_to_axis_angle',
           'euler_to_quaternion', 'euler_vector_to_quaternion',
           'basis_to_quaternion', 'rotmat_to_quaternion', 'quaternion_to_rotmat', 'rigid_transform']


_LOGGER: logging.Logger = logging.getLogger(__name__)
"""
This is the logging interface for reporting status, results, issues, and other information.
"""


def axis_angle_to_quaternion(axis: ARRAY_LIKE, angle: float) -> FLOAT_ARRAY:
    r"""
    This function converts a rotation axis and angle into a rotation quaternion.

    The quaternion is formed by:

    .. math::
        \mathbf{q} = \left[\begin{array}{c} \text{sin}(\frac{\theta}{2})\hat{\mathbf{x}} \\
        \text{cos}(\frac{\theta}{2})\end{array}\right]

    The axis is normalized before use.  A zero length axis is not checked for and produces NaN values.

    :param axis: The axis to rotate about
    :param angle: The angle to rotate by in radians
    :return: the rotation quaternion
    """

    sina, cosa = sincos(0.5 * angle)

    return np.append(normalize(axis) * sina, cosa).astype(DTYPE)


def quaternion_to_axis_angle(quaternion: ARRAY_LIKE) -> tuple[FLOAT_ARRAY, np.float32]:
    """
    This function converts a unit rotation quaternion into a rotation axis and angle.

    The angle is in the range :math:`[0, 2\\pi]`.  For the identity quaternion (or anything that is close enough that
    the axis cannot be recovered) the axis ``[1, 0, 0]`` with an angle of 0 is returned.  The quaternion does not need to
    be unit length, only its direction is used.

    :param quaternion: the unit rotation quaternion to convert
    :return: The rotation axis and the rotation angle in radians
    """

    quaternion = _check_quaternion_array_and_shape(quaternion)

    sin_half = np.linalg.norm(quaternion[:3])

    if sin_half < np.finfo(DTYPE).tiny:
        return np.array([1, 0, 0], dtype=DTYPE), DTYPE(0)

    angle = DTYPE(2) * np.arctan2(sin_half, quaternion[-1])

    return (quaternion[:3] / sin_half).astype(DTYPE), DTYPE(angle)


def euler_to_quaternion(x: float, y: float, z: float,
                        order: RotationOrder | str = RotationOrder.ZXY) -> FLOAT_ARRAY:
    """
    This function converts 3 euler angles into a rotation quaternion.

    Each angle is the rotation about the corresponding axis in radians.  The order that the elemental rotations are
    applied in is given by `order` (see :class:`.RotationOrder`), which may also be given as a string such as
    ``'xyz'``.  If the order is not recognized the identity quaternion is returned.

    :param x: The angle to rotate about the x axis
    :param y: The angle to rotate about the y axis
    :param z: The angle to rotate about the z axis
    :param order: The order to apply the rotations in
    :return: The rotation quaternion
    """

    if isinstance(order, str):
        try:
            order = RotationOrder(order.lower())
        except ValueError:
            pass

    if order == RotationOrder.XYZ:
        return mul(rotate_z(z), mul(rotate_y(y), rotate_x(x)))
    elif order == RotationOrder.XZY:
        return mul(rotate_y(y), mul(rotate_z(z), rotate_x(x)))
    elif order == RotationOrder.YXZ:
        return mul(rotate_z(z), mul(rotate_x(x), rotate_y(y)))
    elif order == RotationOrder.YZX:
        return mul(rotate_x(x), mul(rotate_z(z), rotate_y(y)))
    elif order == RotationOrder.ZXY:
        return mul(rotate_y(y), mul(rotate_x(x), rotate_z(z)))
    elif order == RotationOrder.ZYX:
        return mul(rotate_x(x), mul(rotate_y(y), rotate_z(z)))
    else:
        _LOGGER.warning(f'Unrecognized rotation order {order!r}.  Returning the identity quaternion')
        return IDENTITY.copy()


def euler_vector_to_quaternion(angles: ARRAY_LIKE, order: RotationOrder | str = RotationOrder.ZXY) -> FLOAT_ARRAY:
    """
    This function converts a 3 element vector of euler angles (x, y, z) into a rotation quaternion.

    See :func:`euler_to_quaternion` for details.

    :param angles: The angles to rotate about the x, y, and z axes in radians
    :param order: The order to apply the rotations in
    :return: The rotation quaternion
    """

    x, y, z = _check_vector_array_and_shape(angles)

    return euler_to_quaternion(x, y, z, order)


def basis_to_quaternion(u: ARRAY_LIKE, v: ARRAY_LIKE, w: ARRAY_LIKE) -> FLOAT_ARRAY:
    """
    This function converts the 3 columns of a rotation matrix into a unit rotation quaternion.

    The extraction chooses between 4 formulas based on the signs of the diagonal terms so that the dominant term is
    always large and nothing is divided by a value near zero.

    `u`, `v`, and `w` must be orthonormal.  This is not checked and a non-orthonormal input produces an incorrect
    (but finite) result.

    :param u: the first column of the rotation matrix
    :param v: the second column of the rotation matrix
    :param w: the third column of the rotation matrix
    :return: The unit rotation quaternion
    """

    ux, uy, uz = _check_vector_array_and_shape(u)
    vx, vy, vz = _check_vector_array_and_shape(v)
    wx, wy, wz = _check_vector_array_and_shape(w)

    if ux >= 0:
        t = vy + wz
        if t >= 0:
            q = [vz - wy, wx - uz, uy - vx, 1 + ux + t]
        else:
            q = [1 + ux - t, uy + vx, wx + uz, vz - wy]
    else:
        t = vy - wz
        if t >= 0:
            q = [uy + vx, 1 - ux + t, vz + wy, wx - uz]
        else:
            q = [wx + uz, vz + wy, 1 - ux - t, uy - vx]

    return quaternion_normalize(q)


def rotmat_to_quaternion(rotation_matrix: ARRAY_LIKE) -> FLOAT_ARRAY:
    """
    This function converts a 3x3 rotation matrix into a unit rotation quaternion.

    The columns of the matrix are passed to :func:`basis_to_quaternion`.

    :param rotation_matrix: The orthonormal rotation matrix to convert
    :return: the rotation quaternion
    :raises ValueError: if the matrix is not 3x3
    """

    rotation_matrix = _check_matrix_array_and_shape(rotation_matrix)

    return basis_to_quaternion(rotation_matrix[:, 0], rotation_matrix[:, 1], rotation_matrix[:, 2])


def quaternion_to_rotmat(quaternion: ARRAY_LIKE) -> FLOAT_ARRAY:
    r"""
    This function converts a rotation quaternion into its equivalent rotation matrix.

    The quaternion is normalized first.  The matrix is then formed as

    .. math::
        \mathbf{T} = \left[\begin{array}{ccc} 1-2(q_y^2+q_z^2) & 2(q_xq_y-q_sq_z) & 2(q_xq_z+q_sq_y) \\
        2(q_xq_y+q_sq_z) & 1-2(q_x^2+q_z^2) & 2(q_yq_z-q_sq_x) \\
        2(q_xq_z-q_sq_y) & 2(q_yq_z+q_sq_x) & 1-2(q_x^2+q_y^2)\end{array}\right]

    so that ``quaternion_to_rotmat(q) @ p`` is the same as ``rotate_point(q, p)``.

    :param quaternion: The rotation quaternion to be converted
    :return: the 3x3 rotation matrix
    """

    qx, qy, qz, qw = quaternion_normalize(quaternion)

    # doubled products
    x = qx * 2
    y = qy * 2
    z = qz * 2
    xx = qx * x
    yy = qy * y
    zz = qz * z
    xy = qx * y
    xz = qx * z
    yz = qy * z
    wx = qw * x
    wy = qw * y
    wz = qw * z

    return np.column_stack([[1 - (yy + zz), xy + wz, xz - wy],
                            [xy - wz, 1 - (xx + zz), yz + wx],
                            [xz + wy, yz - wx, 1 - (xx + yy)]]).astype(DTYPE)


def rigid_transform(quaternion: ARRAY_LIKE, translation: ARRAY_LIKE) -> FLOAT_ARRAY:
    """
    This function forms a 4x4 affine transformation matrix from a rotation quaternion and a translation.

    The upper left 3x3 block is :func:`quaternion_to_rotmat` of the quaternion, the last column holds the translation,
    and the bottom row is ``[0, 0, 0, 1]``.

    :param quaternion: The rotation quaternion
    :param translation: The 3 element translation
    :return: the 4x4 transformation matrix
    """

    translation = _check_vector_array_and_shape(translation)

    transform = np.eye(4, dtype=DTYPE)
    transform[:3, :3] = quaternion_to_rotmat(quaternion)
    transform[:3, 3] = translation

    return transform
