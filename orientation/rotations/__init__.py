r"""
This package defines the routines for building, composing, converting, and interpolating rotation quaternions as well
as an immutable :class:`.Quaternion` value type wrapping them.

The rotation representations used in this package are described as follows:

.. _rotation-representation-table:

=================  =====================================================================================================
Representation     Description
=================  =====================================================================================================
quaternion         A 4 element single precision rotation quaternion of the form
                   :math:`\mathbf{q}=\left[\begin{array}{c} q_x \\ q_y \\ q_z \\ q_w\end{array}\right]=
                   \left[\begin{array}{c}\text{sin}(\frac{\theta}{2})\hat{\mathbf{x}}\\
                   \text{cos}(\frac{\theta}{2})\end{array}\right]`
                   where :math:`\hat{\mathbf{x}}` is a 3 element unit vector representing the axis of rotation and
                   :math:`\theta` is the total angle to rotate about that vector.  Note that quaternions are not unique
                   in that the rotation represented by :math:`\mathbf{q}` is the same rotation represented by
                   :math:`-\mathbf{q}`.
axis and angle     A 3 element rotation axis and a rotation angle in radians.
rotation matrix    A :math:`3\times 3` orthonormal matrix :math:`\mathbf{T}` such that :math:`\mathbf{T}\mathbf{p}`
                   rotates the point :math:`\mathbf{p}`.  The columns of the matrix are the rotated x, y, and z axes.
rigid transform    A :math:`4\times 4` matrix with a rotation matrix in the upper left block and a translation in the
                   last column.
euler angles       3 angles about the x, y, and z axes together with a :class:`.RotationOrder` giving the order the
                   elemental rotations are applied in.
=================  =====================================================================================================

The free functions work on numpy arrays (or anything array like, including :class:`.Quaternion` instances) and always
return new arrays.  The :class:`.Quaternion` class offers the same functionality as methods and composes rotations with
the ``*`` operator.
"""

import orientation.rotations.core
import orientation.rotations.frames
import orientation.rotations.quaternion
import orientation.rotations.interpolation

from orientation.rotations.core import *
from orientation.rotations.frames import forward, up, right, look_rotation
from orientation.rotations.quaternion import Quaternion
from orientation.rotations.interpolation import InterpolationMethods, InterpolatorOptions, QuaternionInterpolator

__all__ = ['axis_angle_to_quaternion', 'quaternion_to_axis_angle',
           'euler_to_quaternion', 'euler_vector_to_quaternion',
           'basis_to_quaternion', 'rotmat_to_quaternion', 'quaternion_to_rotmat', 'rigid_transform',
           'RotationOrder', 'IDENTITY', 'rotate_x', 'rotate_y', 'rotate_z',
           'quaternion_dot', 'quaternion_normalize', 'quaternion_inverse', 'quaternion_multiplication',
           'rotate_point', 'nlerp', 'slerp', 'SLERP_THRESHOLD', 'EPSILON_NORMAL', 'normalize_safe',
           'forward', 'up', 'right', 'look_rotation',
           'Quaternion', 'InterpolationMethods', 'InterpolatorOptions', 'QuaternionInterpolator']
