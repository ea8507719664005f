import unittest

import numpy as np

from bigrational import (
    Rational,
    as_rational_array,
    factor_array,
    to_float_array,
    zeros,
    zeros_like,
)


class NumpyInteropTests(unittest.TestCase):
    def test_numpy_array_operations_with_scalar(self):
        vector = np.array([0.25, 0.5, 0.75])
        result = Rational(1, 4) + vector
        self.assertEqual(result.dtype, object)
        self.assertTrue(all(isinstance(item, Rational) for item in result))
        self.assertEqual(list(result), [Rational(1, 2), Rational(3, 4), Rational(1)])

    def test_reflected_array_operations(self):
        vector = np.array([1, 2, 3])
        result = Rational(1, 2) - vector
        self.assertEqual(list(result), [Rational(-1, 2), Rational(-3, 2), Rational(-5, 2)])
        result = Rational(3) / np.array([1, 2])
        self.assertEqual(list(result), [Rational(3), Rational(3, 2)])

    def test_numpy_array_operations_with_object_array(self):
        vector = np.array([Rational(1, 2), Rational(1, 3)], dtype=object)
        result = vector + Rational(1, 6)
        np.testing.assert_allclose([float(item) for item in result], [2 / 3, 1 / 2])
        self.assertEqual(list(result), [Rational(2, 3), Rational(1, 2)])

    def test_numpy_ufunc_support(self):
        vector = np.array([Rational(1, 2), Rational(3, 4)], dtype=object)
        result = np.add(vector, Rational(1, 4))
        self.assertEqual(list(result), [Rational(3, 4), Rational(1)])
        self.assertEqual(np.negative(Rational(1, 2)), Rational(-1, 2))
        self.assertEqual(np.floor(Rational(-1, 2)), Rational(-1))
        self.assertEqual(np.sqrt(Rational(9, 16)), Rational(3, 4))
        self.assertEqual(np.remainder(Rational(7, 2), 1), Rational(1, 2))

    def test_ufunc_out_argument_rejected(self):
        out = np.empty(1, dtype=object)
        with self.assertRaises(NotImplementedError):
            np.add(Rational(1), Rational(2), out=out)

    def test_numpy_power(self):
        vector = np.array([Rational(2, 3), Rational(4, 5)], dtype=object)
        result = np.power(vector, 2)
        self.assertEqual(list(result), [Rational(4, 9), Rational(16, 25)])
        result = Rational(2) ** np.array([1, -1])
        self.assertEqual(list(result), [Rational(2), Rational(1, 2)])


class ArrayHelperTests(unittest.TestCase):
    def test_rational_array_helpers(self):
        arr = zeros(4)
        self.assertEqual(arr.shape, (4,))
        self.assertTrue(all(isinstance(item, Rational) for item in arr))

        base = [Rational(1, 2), 0.25, 0.75]
        arr_from_list = as_rational_array(base)
        self.assertEqual(arr_from_list.shape, (3,))
        self.assertTrue(all(isinstance(item, Rational) for item in arr_from_list))
        self.assertEqual(arr_from_list[1], Rational(1, 4))

        arr_like = zeros_like(arr_from_list)
        self.assertEqual(arr_like.shape, arr_from_list.shape)
        self.assertTrue(all(item == 0 for item in arr_like))

    def test_zeros_rejects_negative_length(self):
        with self.assertRaises(ValueError):
            zeros(-1)

    def test_as_rational_array_without_copy(self):
        arr = np.array([Rational(1), Rational(2)], dtype=object)
        self.assertIs(as_rational_array(arr, copy=False), arr)
        self.assertIsNot(as_rational_array(arr), arr)

    def test_as_rational_array_from_float_array(self):
        arr = as_rational_array(np.array([[0.1, 0.2], [0.3, 0.4]]))
        self.assertEqual(arr.shape, (2, 2))
        self.assertEqual(arr[1, 0], Rational(3, 10))

    def test_factor_array(self):
        arr = np.array([Rational(2, 4), Rational(6, -3)], dtype=object)
        reduced = factor_array(arr)
        self.assertEqual(
            [(item.numerator, item.denominator) for item in reduced],
            [(1, 2), (-2, 1)],
        )

    def test_to_float_array(self):
        values = to_float_array([Rational(1, 4), Rational(-3, 2)])
        self.assertEqual(values.dtype, np.float64)
        np.testing.assert_array_equal(values, [0.25, -1.5])
        narrow = to_float_array([Rational(1, 3)], dtype=np.float32)
        self.assertEqual(narrow.dtype, np.float32)
        with self.assertRaises(OverflowError):
            to_float_array([Rational(10**5)], dtype=np.float16)


if __name__ == "__main__":  # pragma: no cover - direct execution helper
    unittest.main()
