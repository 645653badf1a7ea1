from enum import Enum

import numpy as np

from orientation._typing import DTYPE, FLOAT_ARRAY
from orientation.rotations.core._helpers import sincos


__all__ = ["RotationOrder", "IDENTITY", "rotate_x", "rotate_y", "rotate_z"]


IDENTITY: FLOAT_ARRAY = np.array([0, 0, 0, 1], dtype=DTYPE)
"""
The identity quaternion, which corresponds to no rotation.
"""
IDENTITY.flags.writeable = False


class RotationOrder(Enum):
    """
    This enumeration provides the orders in which elemental rotations can be combined to form a rotation from euler
    angles.

    The order is read left to right, so that for ``XYZ`` the rotation about x is applied first, then the rotation
    about y, and finally the rotation about z.
    """

    XYZ = "xyz"
    """
    Rotate about x, then y, then z.
    """

    XZY = "xzy"
    """
    Rotate about x, then z, then y.
    """

    YXZ = "yxz"
    """
    Rotate about y, then x, then z.
    """

    YZX = "yzx"
    """
    Rotate about y, then z, then x.
    """

    ZXY = "zxy"
    """
    Rotate about z, then x, then y.
    """

    ZYX = "zyx"
    """
    Rotate about z, then y, then x.
    """


def rotate_x(angle: float) -> FLOAT_ARRAY:
    r"""
    This function returns the quaternion for a right handed rotation about the x axis by `angle`.

    Mathematically this quaternion is:

    .. math::
        \mathbf{q}_x(\theta)=\left[\begin{array}{cccc}\text{sin}(\frac{\theta}{2}) & 0 & 0 &
        \text{cos}(\frac{\theta}{2})\end{array}\right]^T

    :param angle: The angle to rotate by in radians
    :return: The rotation quaternion
    """

    sina, cosa = sincos(0.5 * angle)

    return np.array([sina, 0, 0, cosa], dtype=DTYPE)


def rotate_y(angle: float) -> FLOAT_ARRAY:
    r"""
    This function returns the quaternion for a right handed rotation about the y axis by `angle`.

    .. math::
        \mathbf{q}_y(\theta)=\left[\begin{array}{cccc}0 & \text{sin}(\frac{\theta}{2}) & 0 &
        \text{cos}(\frac{\theta}{2})\end{array}\right]^T

    :param angle: The angle to rotate by in radians
    :return: The rotation quaternion
    """

    sina, cosa = sincos(0.5 * angle)

    return np.array([0, sina, 0, cosa], dtype=DTYPE)


def rotate_z(angle: float) -> FLOAT_ARRAY:
    r"""
    This function returns the quaternion for a right handed rotation about the z axis by `angle`.

    .. math::
        \mathbf{q}_z(\theta)=\left[\begin{array}{cccc}0 & 0 & \text{sin}(\frac{\theta}{2}) &
        \text{cos}(\frac{\theta}{2})\end{array}\right]^T

    :param angle: The angle to rotate by in radians
    :return: The rotation quaternion
    """

    sina, cosa = sincos(0.5 * angle)

    return np.array([0, 0, sina, cosa], dtype=DTYPE)
