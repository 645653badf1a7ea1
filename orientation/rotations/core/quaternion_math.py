import logging

import numpy as np

from orientation._typing import ARRAY_LIKE, DTYPE, FLOAT_ARRAY, DatetimeLike

from orientation.rotations.core._helpers import (EPSILON_NORMAL, rsqrt, _fractional_time,
                                                 _check_quaternion_array_and_shape, _check_vector_array_and_shape)
from orientation.rotations.core.elementals import IDENTITY

__all__ = ["quaternion_dot", "quaternion_normalize", "quaternion_inverse", "quaternion_multiplication",
           "rotate_point", "nlerp", "slerp"]


_LOGGER: logging.Logger = logging.getLogger(__name__)
"""
This is the logging interface for reporting status, results, issues, and other information.
"""


SLERP_THRESHOLD = DTYPE(0.9995)
"""
The cosine of the angle between two quaternions above which :func:`slerp` reverts to :func:`nlerp`.
"""


def quaternion_dot(quaternion_1: ARRAY_LIKE, quaternion_2: ARRAY_LIKE) -> np.float32:
    """
    Computes the 4 element inner product of two quaternions.

    :param quaternion_1: the first quaternion
    :param quaternion_2: the second quaternion
    :return: the dot product
    """

    return DTYPE(np.dot(_check_quaternion_array_and_shape(quaternion_1),
                        _check_quaternion_array_and_shape(quaternion_2)))


def quaternion_normalize(quaternion: ARRAY_LIKE) -> FLOAT_ARRAY:
    """
    Normalizes the quaternion to have a length of 1.

    If the squared length of the quaternion is not greater than :data:`.EPSILON_NORMAL` the identity quaternion is
    returned instead, so the result is never NaN.  The sign of the quaternion is not changed.

    :param quaternion: the quaternion to normalize

    :returns: The normalized quaternion
    """

    work_quaternion = _check_quaternion_array_and_shape(quaternion)

    length_squared = np.dot(work_quaternion, work_quaternion)

    if not length_squared > EPSILON_NORMAL:
        _LOGGER.debug('Normalizing a zero length quaternion.  Returning the identity quaternion')
        return IDENTITY.copy()

    return work_quaternion * rsqrt(length_squared)


def quaternion_inverse(quaternion: ARRAY_LIKE) -> FLOAT_ARRAY:
    r"""
    This function provides the inverse of a unit rotation quaternion.

    The inverse of a rotation quaternion is defined such that
    :math:`\mathbf{q}\otimes\mathbf{q}^{-1}=\mathbf{q}_I` where
    :math:`\mathbf{q}_I=\left[\begin{array}{cccc}0&0&0&1\end{array}\right]^T` is the identity quaternion and
    :math:`\otimes` indicates quaternion multiplication.  Mathematically this corresponds to negating the vector
    portion of the quaternion.

    :param quaternion: The rotation quaternion to be inverted
    :return: a numpy array representing the inverse quaternion
    """

    quaternion = _check_quaternion_array_and_shape(quaternion)

    # negate the vector portion
    quaternion[:3] *= -1

    return quaternion


def quaternion_multiplication(quaternion_1_in: ARRAY_LIKE, quaternion_2_in: ARRAY_LIKE) -> FLOAT_ARRAY:
    r"""
    This function performs the hamiltonian quaternion multiplication operation.

    The multiplication is defined such that
    `q_from_A_to_C = quaternion_multiplication(q_from_B_to_C, q_from_A_to_B)`, that is the rotation represented by the
    second quaternion is applied first.

    Mathematically this is given by:

    .. math::
        \mathbf{q}_1\otimes\mathbf{q}_2=\left[\begin{array}{c}q_{s1}\mathbf{q}_{v2} + q_{s2}\mathbf{q}_{v1} +
        \mathbf{q}_{v1}\times\mathbf{q}_{v2}\\
        q_{s1}q_{s2}-\mathbf{q}_{v1}^T\mathbf{q}_{v2}\end{array}\right]

    :param quaternion_1_in: The first (left) quaternion to multiply
    :param quaternion_2_in: The second (right) quaternion to multiply
    :return: The hamiltonian product of quaternion_1 and quaternion_2
    """

    lx, ly, lz, lw = _check_quaternion_array_and_shape(quaternion_1_in)
    rx, ry, rz, rw = _check_quaternion_array_and_shape(quaternion_2_in)

    return np.array([lw * rx + lx * rw + ly * rz - lz * ry,
                     lw * ry + ly * rw + lz * rx - lx * rz,
                     lw * rz + lz * rw + lx * ry - ly * rx,
                     lw * rw - lx * rx - ly * ry - lz * rz], dtype=DTYPE)


def rotate_point(quaternion: ARRAY_LIKE, point: ARRAY_LIKE) -> FLOAT_ARRAY:
    """
    Rotates a 3 element point by a unit quaternion.

    This uses the expanded form of the rotation matrix without forming the matrix.  The quaternion is assumed to
    already be unit length and is not normalized.

    :param quaternion: the unit rotation quaternion
    :param point: the point to rotate
    :return: the rotated point
    """

    qx, qy, qz, qw = _check_quaternion_array_and_shape(quaternion)
    px, py, pz = _check_vector_array_and_shape(point)

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

    return np.array([(1 - (yy + zz)) * px + (xy - wz) * py + (xz + wy) * pz,
                     (xy + wz) * px + (1 - (xx + zz)) * py + (yz - wx) * pz,
                     (xz - wy) * px + (yz + wx) * py + (1 - (xx + yy)) * pz], dtype=DTYPE)


def nlerp(quaternion0: ARRAY_LIKE, quaternion1: ARRAY_LIKE,
          time: float | DatetimeLike,
          time0: float | DatetimeLike = 0, time1: float | DatetimeLike = 1) -> FLOAT_ARRAY:
    r"""
    This function performs normalized linear interpolation of rotation quaternions.

    NLERP of quaternions involves first performing a linear interpolation between the two vectors, and then normalizing
    the interpolated result to have unit length.  That is:

    .. math::
        \mathbf{q}=\frac{\mathbf{q}_0(1-p)+\mathbf{q}_1p}
        {\left\|\mathbf{q}_0(1-p)+\mathbf{q}_1p\right\|}

    where :math:`p` is the fractional percent of the way between :math:`\mathbf{q}_0` and :math:`\mathbf{q}_1` that we
    want to interpolate at (:math:`p\in[0, 1]`).  If the dot product of the two quaternions is negative the ending
    quaternion is negated first so that the shorter arc is followed.

    You can either specify the argument `time` as the fractional percent that you want to interpolate at, or specify
    the keyword arguments `time0` and `time1` to be the times corresponding to the first and second quaternion
    respectively and the function will compute the fractional percent for you.  It is also possible to specify all
    three of `time`, `time0`, and `time1` as python datetime objects.

    .. warning::
        NLERP does not perform a constant angular velocity interpolation and is only exact at the end points.  If you
        need constant angular velocity use :func:`slerp`.

    :param quaternion0: The starting quaternion
    :param quaternion1: The ending quaternion
    :param time: The time to interpolate the quaternions at, as a fractional percent or as the actual time between
                `time0` and `time1`
    :param time0: the time corresponding to the first quaternion
    :param time1: the time corresponding to the second quaternion
    :return: The interpolated quaternion
    :raises ZeroDivisionError: if `time0` and `time1` are equal
    """

    dt = _fractional_time(time, time0, time1)

    q0 = _check_quaternion_array_and_shape(quaternion0)
    q1 = _check_quaternion_array_and_shape(quaternion1)

    if np.dot(q0, q1) < 0:
        q1 = -q1

    return quaternion_normalize(q0 + (q1 - q0) * dt)


def slerp(quaternion0: ARRAY_LIKE, quaternion1: ARRAY_LIKE,
          time: float | DatetimeLike,
          time0: float | DatetimeLike = 0, time1: float | DatetimeLike = 1) -> FLOAT_ARRAY:
    r"""
    This function performs spherical linear interpolation of rotation quaternions.

    SLERP of quaternions involves performing a linear interpolation along the great circle arc connecting the two
    quaternions. That is:

    .. math::
        \omega = \text{cos}^{-1}(\mathbf{q}_0^T\mathbf{q}_1)\\
        \mathbf{q}=\frac{\text{sin}((1-p)\omega)}{\text{sin}(\omega)}\mathbf{q}_0+
        \frac{\text{sin}(p\omega)}{\text{sin}(\omega)}\mathbf{q}_1

    where :math:`\omega` is the angle between the quaternions and :math:`p` is the fractional percent of the way
    between them.  If the dot product is negative the ending quaternion is negated first so that the shorter arc is
    followed.  When the dot product is at least 0.9995 the quaternions are too close for the
    :math:`1/\text{sin}(\omega)` term to be stable and :func:`nlerp` is used instead.  The result is not renormalized.

    The time arguments are interpreted the same way as in :func:`nlerp`.

    :param quaternion0: The starting (unit) quaternion
    :param quaternion1: The ending (unit) quaternion
    :param time: The time to interpolate the quaternions at, as a fractional percent or as the actual time between
                `time0` and `time1`
    :param time0: the time corresponding to the first quaternion
    :param time1: the time corresponding to the second quaternion
    :return: The interpolated quaternion
    :raises ZeroDivisionError: if `time0` and `time1` are equal
    """

    dt = _fractional_time(time, time0, time1)

    q0 = _check_quaternion_array_and_shape(quaternion0)
    q1 = _check_quaternion_array_and_shape(quaternion1)

    cos_angle = DTYPE(np.dot(q0, q1))

    if cos_angle < 0:
        # negate the second quaternion to ensure the shorter path is taken
        cos_angle = -cos_angle
        q1 = -q1

    if cos_angle >= SLERP_THRESHOLD:
        _LOGGER.debug(f'Quaternions are nearly parallel (cos angle {cos_angle}).  Reverting to nlerp')
        return nlerp(q0, q1, dt)

    angle = np.arccos(cos_angle)
    inv_sin = rsqrt(1 - cos_angle * cos_angle)

    w0 = np.sin(angle * DTYPE(1 - dt)) * inv_sin
    w1 = np.sin(angle * DTYPE(dt)) * inv_sin

    return (q0 * w0 + q1 * w1).astype(DTYPE)
