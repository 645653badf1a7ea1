"""
This module provides the :class:`Quaternion` value type, an immutable object oriented interface to the rotation
routines in :mod:`.rotations.core` and :mod:`.rotations.frames`.
"""

from typing import Self, Iterator

import numpy as np

from orientation.rotations.core.conversions import (axis_angle_to_quaternion, quaternion_to_axis_angle,
                                                    euler_to_quaternion, euler_vector_to_quaternion,
                                                    basis_to_quaternion, rotmat_to_quaternion,
                                                    quaternion_to_rotmat, rigid_transform)
from orientation.rotations.core.elementals import IDENTITY, RotationOrder, rotate_x, rotate_y, rotate_z
from orientation.rotations.core.quaternion_math import (quaternion_dot, quaternion_normalize, quaternion_inverse,
                                                        quaternion_multiplication, rotate_point, nlerp, slerp)
from orientation.rotations.core._helpers import _check_quaternion_array_and_shape
from orientation.rotations import frames

from orientation._typing import ARRAY_LIKE, DTYPE, FLOAT_ARRAY, DatetimeLike


class Quaternion:
    """
    An immutable rotation quaternion.

    The :class:`Quaternion` class is a thin value type around the free functions in :mod:`.rotations.core`.  It stores
    the 4 components ``(x, y, z, w)`` as a read only single precision numpy array, where ``(x, y, z)`` is the vector
    portion (the rotation axis scaled by the sine of half the rotation angle) and ``w`` is the scalar portion (the
    cosine of half the rotation angle).

    Every method returns a new instance so that instances can be freely shared.  The multiplication operator composes
    rotations such that the right hand rotation is applied first::

        >>> from orientation.rotations import Quaternion
        >>> from numpy import pi, allclose
        >>> rotation_a2b = Quaternion.rotate_x(pi)
        >>> rotation_b2c = Quaternion.rotate_y(pi/2)
        >>> rotation_a2c = rotation_b2c*rotation_a2b
        >>> allclose(rotation_a2c.rotate([0, 0, 1]), [-1, 0, 0], atol=1e-6)
        True

    The equality operator checks that the components of two quaternions are exactly equal.  Note that ``q`` and
    ``-q`` represent the same rotation but do not compare equal.

    Multiplying a :class:`Quaternion` by anything other than another :class:`Quaternion` (including numpy arrays and
    numpy scalars) raises a :exc:`TypeError`.  Use :func:`.quaternion_multiplication` to compose raw arrays.
    """

    __slots__ = ('_value',)

    # numpy operators defer to the methods here so that ``*`` is never an element-wise product
    __array_ufunc__ = None

    def __init__(self, x: float = 0, y: float = 0, z: float = 0, w: float = 1):
        """
        :param x: the x component of the vector portion
        :param y: the y component of the vector portion
        :param z: the z component of the vector portion
        :param w: the scalar portion
        """

        value = np.array([x, y, z, w], dtype=DTYPE)
        value.flags.writeable = False

        self._value: FLOAT_ARRAY = value

    @classmethod
    def from_value(cls, value: ARRAY_LIKE) -> Self:
        """
        Creates a quaternion from a 4 element array like ``(x, y, z, w)``.

        :param value: The quaternion components
        :return: The new quaternion
        :raises ValueError: if the value does not have exactly 4 elements
        """

        x, y, z, w = _check_quaternion_array_and_shape(value)

        return cls(x, y, z, w)

    @classmethod
    def identity(cls) -> Self:
        """
        Returns the identity quaternion ``(0, 0, 0, 1)``.
        """

        return cls.from_value(IDENTITY)

    @classmethod
    def from_axis_angle(cls, axis: ARRAY_LIKE, angle: float) -> Self:
        """
        Creates a quaternion rotating by `angle` radians about `axis`.

        See :func:`.axis_angle_to_quaternion`.
        """

        return cls.from_value(axis_angle_to_quaternion(axis, angle))

    @classmethod
    def from_euler(cls, x: float, y: float, z: float, order: RotationOrder | str = RotationOrder.ZXY) -> Self:
        """
        Creates a quaternion from euler angles.

        See :func:`.euler_to_quaternion`.
        """

        return cls.from_value(euler_to_quaternion(x, y, z, order))

    @classmethod
    def from_euler_vector(cls, angles: ARRAY_LIKE, order: RotationOrder | str = RotationOrder.ZXY) -> Self:
        """
        Creates a quaternion from a 3 element vector of euler angles.

        See :func:`.euler_vector_to_quaternion`.
        """

        return cls.from_value(euler_vector_to_quaternion(angles, order))

    @classmethod
    def from_basis(cls, u: ARRAY_LIKE, v: ARRAY_LIKE, w: ARRAY_LIKE) -> Self:
        """
        Creates a quaternion from the 3 orthonormal columns of a rotation matrix.

        See :func:`.basis_to_quaternion`.
        """

        return cls.from_value(basis_to_quaternion(u, v, w))

    @classmethod
    def from_matrix(cls, matrix: ARRAY_LIKE) -> Self:
        """
        Creates a quaternion from a 3x3 rotation matrix.

        See :func:`.rotmat_to_quaternion`.
        """

        return cls.from_value(rotmat_to_quaternion(matrix))

    @classmethod
    def rotate_x(cls, angle: float) -> Self:
        """
        Creates a quaternion rotating by `angle` radians about the x axis.
        """

        return cls.from_value(rotate_x(angle))

    @classmethod
    def rotate_y(cls, angle: float) -> Self:
        """
        Creates a quaternion rotating by `angle` radians about the y axis.
        """

        return cls.from_value(rotate_y(angle))

    @classmethod
    def rotate_z(cls, angle: float) -> Self:
        """
        Creates a quaternion rotating by `angle` radians about the z axis.
        """

        return cls.from_value(rotate_z(angle))

    @classmethod
    def look_rotation(cls, direction: ARRAY_LIKE, up: ARRAY_LIKE) -> Self:
        """
        Creates a quaternion pointing the forward axis along `direction` with the up axis towards `up`.

        See :func:`.look_rotation`.
        """

        return cls.from_value(frames.look_rotation(direction, up))

    @property
    def value(self) -> FLOAT_ARRAY:
        """
        The ``(x, y, z, w)`` components as a read only numpy array.
        """

        return self._value

    @property
    def x(self) -> float:
        return float(self._value[0])

    @property
    def y(self) -> float:
        return float(self._value[1])

    @property
    def z(self) -> float:
        return float(self._value[2])

    @property
    def w(self) -> float:
        return float(self._value[3])

    @property
    def q_vector(self) -> FLOAT_ARRAY:
        """
        This is an alias to the first three elements of the quaternion array (the vector portion of the quaternion)
        """

        return self._value[:3]

    @property
    def q_scalar(self) -> float:
        """
        This is an alias to the last element of the quaternion array (the scalar portion of the quaternion)
        """

        return float(self._value[-1])

    def dot(self, other: ARRAY_LIKE) -> float:
        return float(quaternion_dot(self._value, other))

    def normalize(self) -> 'Quaternion':
        """
        Returns this quaternion scaled to unit length, or the identity if it is zero length.
        """

        return Quaternion.from_value(quaternion_normalize(self._value))

    def inverse(self) -> 'Quaternion':
        """
        Returns the inverse rotation.

        See :func:`.quaternion_inverse` for more information.
        """

        return Quaternion.from_value(quaternion_inverse(self._value))

    def rotate(self, point: ARRAY_LIKE) -> FLOAT_ARRAY:
        """
        Rotates a 3 element point by this (unit) quaternion.

        See :func:`.rotate_point`.
        """

        return rotate_point(self._value, point)

    def to_matrix(self) -> FLOAT_ARRAY:
        """
        Returns the 3x3 rotation matrix for this quaternion.
        """

        return quaternion_to_rotmat(self._value)

    def rigid_transform(self, translation: ARRAY_LIKE) -> FLOAT_ARRAY:
        """
        Returns the 4x4 transformation matrix for this rotation followed by `translation`.
        """

        return rigid_transform(self._value, translation)

    def to_axis_angle(self) -> tuple[FLOAT_ARRAY, float]:
        """
        Returns the rotation axis and the rotation angle in radians.
        """

        axis, angle = quaternion_to_axis_angle(self._value)

        return axis, float(angle)

    def nlerp(self, other: ARRAY_LIKE, time: float | DatetimeLike,
              time0: float | DatetimeLike = 0, time1: float | DatetimeLike = 1) -> 'Quaternion':
        """
        Normalized linear interpolation from this quaternion towards `other`.

        See :func:`.nlerp`.
        """

        return Quaternion.from_value(nlerp(self._value, other, time, time0, time1))

    def slerp(self, other: ARRAY_LIKE, time: float | DatetimeLike,
              time0: float | DatetimeLike = 0, time1: float | DatetimeLike = 1) -> 'Quaternion':
        """
        Spherical linear interpolation from this quaternion towards `other`.

        See :func:`.slerp`.
        """

        return Quaternion.from_value(slerp(self._value, other, time, time0, time1))

    def forward(self) -> FLOAT_ARRAY:
        return frames.forward(self._value)

    def up(self) -> FLOAT_ARRAY:
        return frames.up(self._value)

    def right(self) -> FLOAT_ARRAY:
        return frames.right(self._value)

    def __array__(self, dtype=None, copy=None) -> np.ndarray:
        # the stored value is read only, hand out a copy
        return np.array(self._value, dtype=dtype)

    def __iter__(self) -> Iterator[float]:
        return iter(self._value.tolist())

    def __len__(self) -> int:
        return 4

    def __eq__(self, other) -> bool:

        if not isinstance(other, Quaternion):
            return NotImplemented

        return bool((self._value == other._value).all())

    def __hash__(self) -> int:
        return hash(tuple(self._value.tolist()))

    def __mul__(self, other: 'Quaternion') -> 'Quaternion':

        # use quaternion multiplication
        if isinstance(other, Quaternion):

            return Quaternion.from_value(quaternion_multiplication(self._value, other._value))

        else:

            return NotImplemented

    def __neg__(self) -> 'Quaternion':
        return Quaternion.from_value(-self._value)

    def __repr__(self) -> str:
        return 'Quaternion({0!r}, {1!r}, {2!r}, {3!r})'.format(self.x, self.y, self.z, self.w)

    def __str__(self) -> str:
        return str(self._value)
