"""
Unit tests for Mat2, Mat3 and Mat4.

Run with: python -m pytest tests/test_matrix.py -v
"""

import math
import unittest

from render_kernel.math_utils import Vec2, Vec3, Vec4
from render_kernel.matrix import Mat2, Mat3, Mat4

INVERTIBLE = {
    Mat2: [[4.0, 7.0],
           [2.0, 6.0]],
    Mat3: [[2.0, 0.0, 1.0],
           [1.0, 3.0, 2.0],
           [1.0, 1.0, 2.0]],
    Mat4: [[1.0, 0.0, 2.0, -1.0],
           [3.0, 0.0, 0.0, 5.0],
           [2.0, 1.0, 4.0, -3.0],
           [1.0, 0.0, 5.0, 0.0]],
}


class TestConstruction(unittest.TestCase):
    """Tests for constructors and row/column conversions."""

    def test_from_rows(self):
        m = Mat3.from_rows([[1.0, 2.0, 3.0],
                            [5.5, 6.5, 7.5],
                            [9.0, 10.0, 11.0]])
        self.assertEqual(m[0][0], 1.0)
        self.assertEqual(m[1][0], 5.5)
        self.assertEqual(m[1][2], 7.5)
        self.assertEqual(m[2][2], 11.0)

    def test_from_cols(self):
        m = Mat2.from_cols([[1.0, 2.0],
                            [3.0, 4.0]])
        self.assertEqual(m.to_rows(), [[1.0, 3.0], [2.0, 4.0]])
        self.assertEqual(m.to_cols(), [[1.0, 2.0], [3.0, 4.0]])

    def test_round_trips(self):
        rows = INVERTIBLE[Mat4]
        self.assertEqual(Mat4.from_rows(rows).to_rows(), rows)
        self.assertEqual(Mat4.from_cols(rows).to_cols(), rows)

    def test_identity_and_zero(self):
        self.assertEqual(Mat3.identity().to_rows(),
                         [[1.0, 0.0, 0.0], [0.0, 1.0, 0.0], [0.0, 0.0, 1.0]])
        self.assertEqual(Mat2.zero().to_rows(), [[0.0, 0.0], [0.0, 0.0]])

    def test_row_and_col(self):
        m = Mat3.from_rows([[1, 2, 3], [4, 5, 6], [7, 8, 9]])
        self.assertEqual(m.row(1), Vec3(4, 5, 6))
        self.assertEqual(m.col(1), Vec3(2, 5, 8))

    def test_malformed_input(self):
        with self.assertRaises(ValueError):
            Mat2.from_rows([[1.0, 2.0, 3.0], [4.0, 5.0, 6.0]])
        with self.assertRaises(ValueError):
            Mat3.from_rows([[1.0, 2.0, 3.0]])

    def test_immutable(self):
        m = Mat2.identity()
        with self.assertRaises(AttributeError):
            m.m = ((0.0, 0.0), (0.0, 0.0))
        with self.assertRaises(TypeError):
            m[0][0] = 5.0
        self.assertEqual(m, Mat2.identity())

    def test_equality_tolerance(self):
        a = Mat2.from_rows([[1.0 + 1.0, 2.0 + 2.0], [1.5 - 0.5, 3.0]])
        b = Mat2.from_rows([[2.0, 4.0], [1.0, 1.5 + 1.5]])
        self.assertEqual(a, b)
        self.assertNotEqual(a, Mat2.identity())


class TestAlgebra(unittest.TestCase):
    """Tests for transpose, determinant, inverse and products."""

    def test_transpose(self):
        a = Mat2.from_rows([[1.0, 2.0], [3.0, 4.0]])
        self.assertEqual(a.transpose(), Mat2.from_rows([[1.0, 3.0], [2.0, 4.0]]))
        for cls, rows in INVERTIBLE.items():
            m = cls.from_rows(rows)
            self.assertEqual(m.transpose().transpose(), m)

    def test_determinant_identity(self):
        for cls in (Mat2, Mat3, Mat4):
            self.assertEqual(cls.identity().determinant(), 1.0)

    def test_determinant_values(self):
        self.assertAlmostEqual(Mat2.from_rows(INVERTIBLE[Mat2]).determinant(), 10.0)
        self.assertAlmostEqual(Mat3.from_rows(INVERTIBLE[Mat3]).determinant(), 6.0)
        self.assertAlmostEqual(Mat4.from_rows(INVERTIBLE[Mat4]).determinant(), 30.0)

    def test_determinant_singular(self):
        self.assertEqual(Mat2.from_rows([[1, 2], [0, 0]]).determinant(), 0.0)
        self.assertEqual(Mat3.from_rows([[1, 2, 3], [0, 0, 0], [7, 8, 9]]).determinant(), 0.0)
        self.assertEqual(Mat4.from_rows([[1, 2, 3, 4], [5, 6, 7, 8],
                                         [0, 0, 0, 0], [1, 1, 1, 1]]).determinant(), 0.0)

    def test_invert(self):
        for cls, rows in INVERTIBLE.items():
            m = cls.from_rows(rows)
            inv = m.invert()
            self.assertIsNotNone(inv)
            self.assertEqual(m @ inv, cls.identity())
            self.assertEqual(inv @ m, cls.identity())

    def test_invert_affine(self):
        m = Mat4.translation(1, 2, 3) @ Mat4.rotation_y(0.3) @ Mat4.scale(2, 2, 2)
        self.assertEqual(m @ m.invert(), Mat4.identity())
        p = Vec3(0.5, -1.0, 4.0)
        self.assertEqual(m.invert() @ (m @ p), p)

    def test_invert_singular_returns_none(self):
        self.assertIsNone(Mat2.zero().invert())
        self.assertIsNone(Mat3.from_rows([[1, 2, 3], [2, 4, 6], [0, 1, 0]]).invert())
        self.assertIsNone(Mat4.zero().invert())

    def test_multiply(self):
        a = Mat4.from_rows([[1.0, 2.0, 3.0, 4.0],
                            [4.0, 3.0, 2.0, 1.0],
                            [1.0, 2.0, 3.0, 4.0],
                            [4.0, 3.0, 2.0, 1.0]])
        b = Mat4.from_rows([[4.0, 3.0, 2.0, 1.0],
                            [1.0, 2.0, 3.0, 4.0],
                            [4.0, 3.0, 2.0, 1.0],
                            [1.0, 2.0, 3.0, 4.0]])
        c = Mat4.from_rows([[22.0, 24.0, 26.0, 28.0],
                            [28.0, 26.0, 24.0, 22.0],
                            [22.0, 24.0, 26.0, 28.0],
                            [28.0, 26.0, 24.0, 22.0]])
        self.assertEqual(a @ b, c)

    def test_multiply_not_commutative(self):
        a = Mat2.from_rows([[1.0, 2.0], [4.0, 3.0]])
        b = Mat2.from_rows([[4.0, 3.0], [1.0, 2.0]])
        self.assertEqual(a @ b, Mat2.from_rows([[6.0, 7.0], [19.0, 18.0]]))
        self.assertNotEqual(a @ b, b @ a)

    def test_matrix_vector(self):
        m2 = Mat2.from_rows([[1, 2], [3, 4]])
        self.assertEqual(m2 @ Vec2(1, 1), Vec2(3, 7))
        m3 = Mat3.from_rows([[1, 0, 0], [0, 2, 0], [0, 0, 3]])
        self.assertEqual(m3 @ Vec3(1, 1, 1), Vec3(1, 2, 3))
        m4 = Mat4.translation(1, 2, 3)
        self.assertEqual(m4 @ Vec4(0, 0, 0, 1), Vec4(1, 2, 3, 1))
        self.assertEqual(m4 @ Vec4(1, 1, 1, 0), Vec4(1, 1, 1, 0))

    def test_elementwise_and_scalar(self):
        a = Mat2.from_rows([[1.0, 2.0], [4.0, 3.0]])
        b = Mat2.from_rows([[4.0, 3.0], [1.0, 2.0]])
        self.assertEqual(a + b, Mat2.from_rows([[5.0, 5.0], [5.0, 5.0]]))
        self.assertEqual(a - a, Mat2.zero())
        self.assertEqual(a * 2, Mat2.from_rows([[2.0, 4.0], [8.0, 6.0]]))
        self.assertEqual(2 * a, a * 2)


class TestProjection(unittest.TestCase):
    """Tests for the perspective and look_at builders."""

    def test_perspective_terms(self):
        m = Mat4.perspective(90.0, 0.75, 1.0, 101.0)
        f = 1.0 / math.tan(math.radians(45.0))
        self.assertAlmostEqual(m[0][0], 0.75 * f)
        self.assertAlmostEqual(m[1][1], f)
        self.assertAlmostEqual(m[2][2], 101.0 / 100.0)
        self.assertAlmostEqual(m[2][3], -101.0 / 100.0)
        self.assertEqual(m[3][2], 1.0)
        self.assertEqual(m[3][3], 0.0)

    def test_perspective_depth_range(self):
        m = Mat4.perspective(60.0, 1.0, 0.5, 50.0)
        self.assertAlmostEqual((m @ Vec3(0, 0, 0.5)).z, 0.0)
        self.assertAlmostEqual((m @ Vec3(0, 0, 50.0)).z, 1.0)
        # Twice as far projects to half the screen offset
        near = m @ Vec3(1, 1, 2)
        far = m @ Vec3(1, 1, 4)
        self.assertAlmostEqual(near.x, 2 * far.x)

    def _assert_orthonormal(self, m):
        basis = [Vec3(*m[r][:3]) for r in range(3)]
        for i, v in enumerate(basis):
            self.assertAlmostEqual(v.magnitude(), 1.0)
            for w in basis[i + 1:]:
                self.assertAlmostEqual(v.dot(w), 0.0)

    def test_look_at_from_origin(self):
        m = Mat4.look_at(Vec3(0, 0, 0), Vec3(1, 2, 0.5), Vec3(0, 0, 1))
        self._assert_orthonormal(m)
        for r in range(3):
            self.assertAlmostEqual(m[r][3], 0.0)

    def test_look_at_translation(self):
        eye = Vec3(0, 0, 5)
        m = Mat4.look_at(eye, Vec3(0, 0, 0), Vec3(0, 1, 0))
        self._assert_orthonormal(m)
        self.assertEqual(m @ eye, Vec3(0, 0, 0))
        # Target lies straight ahead on -Z
        self.assertEqual(m @ Vec3(0, 0, 0), Vec3(0, 0, -5))
        self.assertEqual(m @ Vec3(1, 0, 5), Vec3(1, 0, 0))


if __name__ == '__main__':
    unittest.main()
