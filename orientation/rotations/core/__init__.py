"""
This module contains fundamental mathematical operations and utilities for quaternion calculations.  It has no
dependencies on the other rotation modules to avoid circular imports.  All functions here are pure operations on numpy
arrays that can be used as building blocks for the :class:`.Quaternion` type.
"""

import orientation.rotations.core.conversions
import orientation.rotations.core.elementals
import orientation.rotations.core.quaternion_math

from orientation.rotations.core._helpers import EPSILON_NORMAL, normalize_safe

from orientation.rotations.core.conversions import (axis_angle_to_quaternion, quaternion_to_axis_angle,
                                                    euler_to_quaternion, euler_vector_to_quaternion,
                                                    basis_to_quaternion, rotmat_to_quaternion,
                                                    quaternion_to_rotmat, rigid_transform)

from orientation.rotations.core.elementals import RotationOrder, IDENTITY, rotate_x, rotate_y, rotate_z

from orientation.rotations.core.quaternion_math import (quaternion_dot, quaternion_normalize, quaternion_inverse,
                                                        quaternion_multiplication, rotate_point, nlerp, slerp,
                                                        SLERP_THRESHOLD)

__all__ = ['axis_angle_to_quaternion', 'quaternion_to_axis_angle',
           'euler_to_quaternion', 'euler_vector_to_quaternion',
           'basis_to_quaternion', 'rotmat_to_quaternion', 'quaternion_to_rotmat', 'rigid_transform',
           'RotationOrder', 'IDENTITY', 'rotate_x', 'rotate_y', 'rotate_z',
           'quaternion_dot', 'quaternion_normalize', 'quaternion_inverse', 'quaternion_multiplication',
           'rotate_point', 'nlerp', 'slerp', 'SLERP_THRESHOLD', 'EPSILON_NORMAL', 'normalize_safe']
