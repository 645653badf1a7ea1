from unittest import TestCase

import numpy as np

from orientation import rotations as rot


def matrix_x(theta):
    return np.array([[1, 0, 0], [0, np.cos(theta), -np.sin(theta)], [0, np.sin(theta), np.cos(theta)]])


def matrix_y(theta):
    return np.array([[np.cos(theta), 0, np.sin(theta)], [0, 1, 0], [-np.sin(theta), 0, np.cos(theta)]])


def matrix_z(theta):
    return np.array([[np.cos(theta), -np.sin(theta), 0], [np.sin(theta), np.cos(theta), 0], [0, 0, 1]])


def assert_same_rotation(actual, expected, decimal=5):
    # q and -q are the same rotation
    actual = np.asarray(actual, dtype=np.float64)
    expected = np.asarray(expected, dtype=np.float64)

    if np.dot(actual, expected) < 0:
        actual = -actual

    np.testing.assert_array_almost_equal(actual, expected, decimal=decimal)


class TestAxisAngleToQuaternion(TestCase):

    def test_axis_angle_to_quaternion(self):

        q = rot.axis_angle_to_quaternion([0, 0, 1], np.pi/2)

        np.testing.assert_array_almost_equal(q, [0, 0, np.sqrt(2)/2, np.sqrt(2)/2])
        self.assertEqual(q.dtype, np.float32)

        np.testing.assert_array_almost_equal(rot.rotate_point(q, [1, 0, 0]), [0, 1, 0])

        # the axis is normalized first
        np.testing.assert_array_almost_equal(rot.axis_angle_to_quaternion([0, 0, 5], np.pi/2), q)

        np.testing.assert_array_almost_equal(rot.axis_angle_to_quaternion([1, 0, 0], 0.7), rot.rotate_x(0.7))

    def test_zero_axis(self):

        self.assertTrue(np.isnan(rot.axis_angle_to_quaternion([0, 0, 0], 1.0)[:3]).all())


class TestQuaternionToAxisAngle(TestCase):

    def test_quaternion_to_axis_angle(self):

        axis = np.array([1, 2, 3]) / np.sqrt(14)

        out_axis, out_angle = rot.quaternion_to_axis_angle(rot.axis_angle_to_quaternion(axis, 1.2))

        np.testing.assert_array_almost_equal(out_axis, axis, decimal=5)
        self.assertAlmostEqual(out_angle, 1.2, places=5)

        out_axis, out_angle = rot.quaternion_to_axis_angle(rot.IDENTITY)

        np.testing.assert_array_equal(out_axis, [1, 0, 0])
        self.assertEqual(out_angle, 0)

    def test_small_angles(self):

        axis = np.array([0, 0.6, 0.8])

        for angle in [1e-2, 1e-3, 1e-4, 1e-6]:

            with self.subTest(angle=angle):

                out_axis, out_angle = rot.quaternion_to_axis_angle(rot.axis_angle_to_quaternion(axis, angle))

                self.assertLess(abs(out_angle - angle) / angle, 1e-4)
                np.testing.assert_array_almost_equal(out_axis, axis, decimal=5)

    def test_unnormalized(self):

        out_axis, out_angle = rot.quaternion_to_axis_angle(3 * rot.rotate_z(0.5))

        np.testing.assert_array_almost_equal(out_axis, [0, 0, 1])
        self.assertAlmostEqual(out_angle, 0.5, places=5)


class TestEulerToQuaternion(TestCase):

    def test_single_axis(self):

        q_x = rot.rotate_x(np.pi/2)

        for order in rot.RotationOrder:
            with self.subTest(order=order):
                np.testing.assert_array_almost_equal(rot.euler_to_quaternion(np.pi/2, 0, 0, order), q_x)

        np.testing.assert_array_almost_equal(rot.euler_to_quaternion(0, 0.4, 0, rot.RotationOrder.XYZ),
                                             rot.rotate_y(0.4))

        np.testing.assert_array_almost_equal(rot.euler_to_quaternion(0, 0, -0.9, rot.RotationOrder.ZYX),
                                             rot.rotate_z(-0.9))

    def test_orders(self):

        angles = {'x': 0.3, 'y': -1.1, 'z': 2.4}
        matrices = {'x': matrix_x, 'y': matrix_y, 'z': matrix_z}

        for order in rot.RotationOrder:
            with self.subTest(order=order):
                # the first axis in the order is applied first
                first, second, third = order.value

                rmat = (matrices[third](angles[third]) @ matrices[second](angles[second]) @
                        matrices[first](angles[first]))

                q = rot.euler_to_quaternion(angles['x'], angles['y'], angles['z'], order)

                np.testing.assert_array_almost_equal(rot.quaternion_to_rotmat(q), rmat, decimal=5)

    def test_explicit_compositions(self):

        x, y, z = 0.2, 0.5, -0.7

        mul = rot.quaternion_multiplication

        np.testing.assert_array_almost_equal(rot.euler_to_quaternion(x, y, z, rot.RotationOrder.ZXY),
                                             mul(rot.rotate_y(y), mul(rot.rotate_x(x), rot.rotate_z(z))))

        np.testing.assert_array_almost_equal(rot.euler_to_quaternion(x, y, z, rot.RotationOrder.YZX),
                                             mul(rot.rotate_x(x), mul(rot.rotate_z(z), rot.rotate_y(y))))

    def test_default_and_string_orders(self):

        np.testing.assert_array_equal(rot.euler_to_quaternion(0.1, 0.2, 0.3),
                                      rot.euler_to_quaternion(0.1, 0.2, 0.3, rot.RotationOrder.ZXY))

        np.testing.assert_array_equal(rot.euler_to_quaternion(0.1, 0.2, 0.3, 'XYZ'),
                                      rot.euler_to_quaternion(0.1, 0.2, 0.3, rot.RotationOrder.XYZ))

        np.testing.assert_array_equal(rot.euler_to_quaternion(0.1, 0.2, 0.3, 'yzx'),
                                      rot.euler_to_quaternion(0.1, 0.2, 0.3, rot.RotationOrder.YZX))

    def test_invalid_order(self):

        with self.assertLogs('orientation.rotations.core.conversions', level='WARNING'):
            q = rot.euler_to_quaternion(0.1, 0.2, 0.3, 'xyx')

        np.testing.assert_array_equal(q, [0, 0, 0, 1])

        with self.assertLogs('orientation.rotations.core.conversions', level='WARNING'):
            q = rot.euler_to_quaternion(0.1, 0.2, 0.3, 42)

        np.testing.assert_array_equal(q, [0, 0, 0, 1])

    def test_euler_vector_to_quaternion(self):

        np.testing.assert_array_equal(rot.euler_vector_to_quaternion([0.1, 0.2, 0.3]),
                                      rot.euler_to_quaternion(0.1, 0.2, 0.3, rot.RotationOrder.ZXY))

        np.testing.assert_array_equal(rot.euler_vector_to_quaternion(np.array([0.1, 0.2, 0.3]), 'xzy'),
                                      rot.euler_to_quaternion(0.1, 0.2, 0.3, rot.RotationOrder.XZY))

        with self.assertRaises(ValueError):
            rot.euler_vector_to_quaternion([0.1, 0.2])


class TestBasisToQuaternion(TestCase):

    def test_branches(self):

        # each case lands in a different branch of the extraction
        cases = [(np.eye(3), [0, 0, 0, 1]),
                 (np.diag([1, -1, -1]), [1, 0, 0, 0]),
                 (np.diag([-1, 1, -1]), [0, 1, 0, 0]),
                 (np.diag([-1, -1, 1]), [0, 0, 1, 0])]

        for rmat, quaternion in cases:
            with self.subTest(rmat=rmat):
                q = rot.basis_to_quaternion(rmat[:, 0], rmat[:, 1], rmat[:, 2])

                np.testing.assert_array_almost_equal(q, quaternion)

    def test_known_rotation(self):

        rmat = np.array([[1, 0, 0], [0, 0, -1], [0, 1, 0]])

        q = rot.basis_to_quaternion(rmat[:, 0], rmat[:, 1], rmat[:, 2])

        np.testing.assert_array_almost_equal(q, [np.sqrt(2)/2, 0, 0, np.sqrt(2)/2])

    def test_round_trip(self):

        rng = np.random.default_rng(8)

        quaternions = rng.normal(size=(20, 4))
        quaternions /= np.linalg.norm(quaternions, axis=1, keepdims=True)

        for q in quaternions:
            with self.subTest(q=q):
                rmat = rot.quaternion_to_rotmat(q)

                assert_same_rotation(rot.basis_to_quaternion(rmat[:, 0], rmat[:, 1], rmat[:, 2]), q)

                assert_same_rotation(rot.rotmat_to_quaternion(rmat), q)

    def test_unit_length(self):

        q = rot.basis_to_quaternion(*matrix_z(0.3).T)

        self.assertAlmostEqual(np.linalg.norm(q), 1, places=5)


class TestRotMatToQuaternion(TestCase):

    def test_rotmat_to_quaternion(self):

        np.testing.assert_array_almost_equal(rot.rotmat_to_quaternion(matrix_y(0.8)), rot.rotate_y(0.8))

        with self.assertRaises(ValueError):
            rot.rotmat_to_quaternion([1, 2, 3])


class TestQuaternionToRotMat(TestCase):

    def test_quaternion_to_rotmat(self):

        rmat = rot.quaternion_to_rotmat([np.sqrt(2)/2, 0, 0, np.sqrt(2)/2])

        np.testing.assert_array_almost_equal(rmat, [[1, 0, 0], [0, 0, -1], [0, 1, 0]])
        self.assertEqual(rmat.dtype, np.float32)

        np.testing.assert_array_almost_equal(rot.quaternion_to_rotmat(rot.rotate_z(0.5)), matrix_z(0.5))

        np.testing.assert_array_equal(rot.quaternion_to_rotmat(rot.IDENTITY), np.eye(3))

    def test_normalizes(self):

        np.testing.assert_array_almost_equal(rot.quaternion_to_rotmat([0, 0, 0, 2]), np.eye(3))

        np.testing.assert_array_almost_equal(rot.quaternion_to_rotmat([2, 0, 0, 2]),
                                             [[1, 0, 0], [0, 0, -1], [0, 1, 0]])

        np.testing.assert_array_equal(rot.quaternion_to_rotmat([0, 0, 0, 0]), np.eye(3))


class TestRigidTransform(TestCase):

    def test_rigid_transform(self):

        q = rot.rotate_z(np.pi/2)

        transform = rot.rigid_transform(q, [1, 2, 3])

        self.assertEqual(transform.shape, (4, 4))
        self.assertEqual(transform.dtype, np.float32)

        np.testing.assert_array_almost_equal(transform[:3, :3], rot.quaternion_to_rotmat(q))
        np.testing.assert_array_equal(transform[:3, 3], [1, 2, 3])
        np.testing.assert_array_equal(transform[3], [0, 0, 0, 1])

        np.testing.assert_array_almost_equal(transform @ [1, 0, 0, 1], [1, 3, 3, 1])

        with self.assertRaises(ValueError):
            rot.rigid_transform(q, [1, 2])
