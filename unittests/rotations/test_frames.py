from unittest import TestCase

import numpy as np

from orientation import rotations as rot


def assert_same_rotation(actual, expected, decimal=5):
    actual = np.asarray(actual, dtype=np.float64)
    expected = np.asarray(expected, dtype=np.float64)

    if np.dot(actual, expected) < 0:
        actual = -actual

    np.testing.assert_array_almost_equal(actual, expected, decimal=decimal)


class TestDirections(TestCase):

    def test_identity(self):

        np.testing.assert_array_equal(rot.forward(rot.IDENTITY), [0, 0, 1])
        np.testing.assert_array_equal(rot.up(rot.IDENTITY), [0, 1, 0])
        np.testing.assert_array_equal(rot.right(rot.IDENTITY), [1, 0, 0])

    def test_rotated(self):

        q = rot.rotate_x(np.pi/2)

        np.testing.assert_array_almost_equal(rot.forward(q), [0, -1, 0])
        np.testing.assert_array_almost_equal(rot.up(q), [0, 0, 1])
        np.testing.assert_array_almost_equal(rot.right(q), [1, 0, 0])

        q = rot.rotate_y(np.pi/2)

        np.testing.assert_array_almost_equal(rot.forward(q), [1, 0, 0])
        np.testing.assert_array_almost_equal(rot.up(q), [0, 1, 0])

    def test_matches_matrix_columns(self):

        q = rot.quaternion_normalize([0.23, 0.45, 0.67, 0.2])

        rmat = rot.quaternion_to_rotmat(q)

        np.testing.assert_array_almost_equal(rot.right(q), rmat[:, 0])
        np.testing.assert_array_almost_equal(rot.up(q), rmat[:, 1])
        np.testing.assert_array_almost_equal(rot.forward(q), rmat[:, 2])


class TestLookRotation(TestCase):

    def test_identity(self):

        np.testing.assert_array_equal(rot.look_rotation([0, 0, 1], [0, 1, 0]), [0, 0, 0, 1])

        # the direction is normalized
        np.testing.assert_array_equal(rot.look_rotation([0, 0, 5], [0, 1, 0]), [0, 0, 0, 1])

    def test_branches(self):

        # identity uses the trace, the half turns about x, y, and z use the other 3 branches
        for q in [rot.IDENTITY, rot.rotate_x(np.pi), rot.rotate_y(np.pi), rot.rotate_z(np.pi)]:
            with self.subTest(q=q):
                assert_same_rotation(rot.look_rotation(rot.forward(q), rot.up(q)), q)

    def test_round_trip(self):

        rng = np.random.default_rng(42)

        quaternions = rng.normal(size=(20, 4))
        quaternions /= np.linalg.norm(quaternions, axis=1, keepdims=True)

        for q in quaternions:
            with self.subTest(q=q):
                assert_same_rotation(rot.look_rotation(rot.forward(q), rot.up(q)), q)

    def test_points_forward(self):

        direction = np.array([1, 1, 0]) / np.sqrt(2)

        q = rot.look_rotation(direction, [0, 0, 1])

        self.assertAlmostEqual(np.linalg.norm(q), 1, places=5)

        np.testing.assert_array_almost_equal(rot.forward(q), direction)
        np.testing.assert_array_almost_equal(rot.up(q), [0, 0, 1])

    def test_matches_basis_extraction(self):

        q = rot.look_rotation([0, 1, 0], [-1, 0, 0])

        forward_axis = np.array([0, 1, 0])
        right_axis = np.cross([-1, 0, 0], forward_axis)
        up_axis = np.cross(forward_axis, right_axis)

        assert_same_rotation(q, rot.basis_to_quaternion(right_axis, up_axis, forward_axis))

    def test_zero_direction(self):

        q = rot.look_rotation([0, 0, 0], [0, 1, 0])

        self.assertTrue(np.isfinite(q).all())

        np.testing.assert_array_equal(q, [0.5, 0, 0, 0])

    def test_normalize_safe(self):

        np.testing.assert_array_almost_equal(rot.normalize_safe([3, 0, 4]), [0.6, 0, 0.8])

        np.testing.assert_array_equal(rot.normalize_safe([0, 0, 0]), [0, 0, 0])

        np.testing.assert_array_equal(rot.normalize_safe([0, 0, 0], default=[0, 0, 1]), [0, 0, 1])
