"""
Shape checking and small scalar/vector math helpers shared by the core rotation modules.
"""

import numpy as np

from orientation._typing import ARRAY_LIKE, DTYPE, FLOAT_ARRAY, DatetimeLike


EPSILON_NORMAL = DTYPE(1e-30)
"""
Squared lengths at or below this value are treated as zero when normalizing.
"""


def _check_array_and_shape(input: ARRAY_LIKE, shape: tuple[int, ...]) -> FLOAT_ARRAY:
    in_shape = np.shape(input)

    if not in_shape:
        raise ValueError('The input must be shaped')

    if in_shape != shape:
        raise ValueError(f'The input must have shape {shape} but has shape {in_shape}')

    # always copy so that nothing we return aliases the caller's data
    return np.array(input, dtype=DTYPE)


def _check_quaternion_array_and_shape(quaternion: ARRAY_LIKE) -> FLOAT_ARRAY:
    return _check_array_and_shape(quaternion, (4,))


def _check_vector_array_and_shape(vector: ARRAY_LIKE) -> FLOAT_ARRAY:
    return _check_array_and_shape(vector, (3,))


def _check_matrix_array_and_shape(matrix: ARRAY_LIKE) -> FLOAT_ARRAY:
    return _check_array_and_shape(matrix, (3, 3))


def _fractional_time(time: float | DatetimeLike,
                     time0: float | DatetimeLike = 0,
                     time1: float | DatetimeLike = 1) -> float:
    """
    Computes the fractional percent of the way `time` is between `time0` and `time1`.

    :raises TypeError: if the times cannot be subtracted or the differences cannot be divided
    :raises ZeroDivisionError: if `time0` and `time1` are equal
    """

    try:
        return float((time - time0) / (time1 - time0))  # type: ignore
    except TypeError:
        raise TypeError('time, time0, and time1 must support subtraction resulting in a type that supports true division.'
                        'Typically this means they should all be floats or all be DatetimeLike objects')


def rsqrt(value) -> np.float32:
    """
    Returns the reciprocal square root of `value` in single precision.
    """

    return DTYPE(1) / np.sqrt(DTYPE(value))


def sincos(angle) -> tuple[np.float32, np.float32]:
    """
    Returns the sine and cosine of `angle` in single precision.
    """

    angle = DTYPE(angle)

    return np.sin(angle), np.cos(angle)


def normalize(vector: ARRAY_LIKE) -> FLOAT_ARRAY:
    """
    Scales a 3 element vector to unit length.

    No check is made for a zero length input, which results in NaN values.  Use :func:`normalize_safe` when the input
    may be zero.

    :param vector: the vector to normalize
    :return: the unit vector
    """

    vector = _check_vector_array_and_shape(vector)

    with np.errstate(divide='ignore', invalid='ignore'):
        return vector * rsqrt(np.dot(vector, vector))


def normalize_safe(vector: ARRAY_LIKE, default: ARRAY_LIKE = (0, 0, 0)) -> FLOAT_ARRAY:
    """
    Scales a 3 element vector to unit length, returning `default` when the vector is (nearly) zero length.

    :param vector: the vector to normalize
    :param default: the value to return for a zero length vector
    :return: the unit vector or the default
    """

    vector = _check_vector_array_and_shape(vector)

    length_squared = np.dot(vector, vector)

    if length_squared > EPSILON_NORMAL:
        return vector * rsqrt(length_squared)

    return _check_vector_array_and_shape(default)
