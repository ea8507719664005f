import decimal
import unittest

import numpy as np

from bigrational import Rational, parse
from bigrational.decimal_text import (
    format_decimal,
    parse_decimal,
    render_decimal,
    render_float,
    separators,
)


class SeparatorTests(unittest.TestCase):
    def test_explicit_separators(self):
        self.assertEqual(separators(",", "."), (",", "."))
        self.assertEqual(separators(".", ""), (".", ""))

    def test_locale_fallback_has_distinct_separators(self):
        decimal_sep, group_sep = separators()
        self.assertTrue(decimal_sep)
        self.assertNotEqual(decimal_sep, group_sep)

    def test_conflicting_separators_rejected(self):
        with self.assertRaises(ValueError):
            separators(".", ".")
        with self.assertRaises(ValueError):
            separators("", ",")


class ParseTests(unittest.TestCase):
    def test_integer_text(self):
        self.assertEqual(parse_decimal("42", decimal_separator="."), (42, 1))
        self.assertEqual(parse_decimal("  -17 ", decimal_separator="."), (-17, 1))
        self.assertEqual(parse_decimal("+5", decimal_separator="."), (5, 1))

    def test_fraction_digits_set_power_of_ten(self):
        self.assertEqual(parse_decimal("3.1400", decimal_separator="."), (31400, 10000))
        self.assertEqual(parse_decimal("-.5", decimal_separator="."), (-5, 10))
        self.assertEqual(parse_decimal("7.", decimal_separator="."), (7, 1))

    def test_group_separators_removed(self):
        self.assertEqual(
            parse_decimal("1,234,567.25", decimal_separator=".", group_separator=","),
            (123456725, 100),
        )
        self.assertEqual(
            parse_decimal("1.234,5", decimal_separator=",", group_separator="."),
            (12345, 10),
        )

    def test_malformed_text(self):
        for text in [
            "", "   ", ".", "-", "+.", "1.2.3", "1e5", "abc", "--1", "0x10", "1 000", "٣",
            "1.-5", ".-5", ".+25", "-.-5",
        ]:
            with self.subTest(text=text):
                with self.assertRaises(ValueError):
                    parse_decimal(text, decimal_separator=".", group_separator=",")

    def test_sign_after_separator_rejected(self):
        with self.assertRaises(ValueError):
            parse(".-5", decimal_separator=".", group_separator=",")
        with self.assertRaises(ValueError):
            parse(".+25", decimal_separator=".", group_separator=",")
        self.assertEqual(parse("+.25", decimal_separator="."), Rational(1, 4))

    def test_none_and_non_text(self):
        with self.assertRaises(TypeError):
            parse_decimal(None)
        with self.assertRaises(TypeError):
            parse_decimal(3.5)

    def test_parse_reduces(self):
        value = parse("3.1400", decimal_separator=".")
        self.assertEqual((value.numerator, value.denominator), (157, 50))
        self.assertTrue(value.is_normalized)

    def test_try_parse(self):
        self.assertEqual(Rational.try_parse("0.25", decimal_separator="."), Rational(1, 4))
        self.assertIsNone(Rational.try_parse("1.2.3", decimal_separator="."))
        self.assertIsNone(Rational.try_parse(None))


class FormatTests(unittest.TestCase):
    def test_truncates_to_precision(self):
        self.assertEqual(format_decimal(1, 3, 5, decimal_separator="."), "0.33333")
        self.assertEqual(format_decimal(2, 3, 5, decimal_separator="."), "0.66666")

    def test_exact_integers(self):
        self.assertEqual(format_decimal(6, 3, decimal_separator="."), "2")
        self.assertEqual(format_decimal(6, 3, trailing_zeros=True, decimal_separator="."), "2.0")
        self.assertEqual(format_decimal(0, 1, trailing_zeros=True, decimal_separator="."), "0.0")

    def test_trailing_zero_policy(self):
        self.assertEqual(format_decimal(1, 4, 6, decimal_separator="."), "0.25")
        self.assertEqual(
            format_decimal(1, 4, 6, trailing_zeros=True, decimal_separator="."), "0.250000"
        )

    def test_leading_fraction_zeros_are_kept(self):
        self.assertEqual(format_decimal(1, 1000, 5, decimal_separator="."), "0.001")
        self.assertEqual(format_decimal(100001, 100000, 5, decimal_separator="."), "1.00001")

    def test_fraction_below_precision(self):
        self.assertEqual(format_decimal(1, 10**6, 3, decimal_separator="."), "0")
        self.assertEqual(format_decimal(10**6 + 1, 10**6, 3, decimal_separator="."), "1")
        self.assertEqual(format_decimal(-1, 10**6, 3, decimal_separator="."), "0")
        self.assertEqual(
            format_decimal(5 * 10**6 + 1, 10**6, 3, True, decimal_separator="."), "5.0"
        )

    def test_signs(self):
        self.assertEqual(format_decimal(-7, 2, decimal_separator="."), "-3.5")
        self.assertEqual(format_decimal(7, -2, decimal_separator="."), "-3.5")
        self.assertEqual(format_decimal(-7, -2, decimal_separator="."), "3.5")

    def test_custom_decimal_separator(self):
        self.assertEqual(format_decimal(5, 2, decimal_separator=","), "2,5")
        self.assertEqual(Rational(5, 2).to_string(decimal_separator=","), "2,5")

    def test_zero_precision(self):
        self.assertEqual(format_decimal(7, 2, 0, decimal_separator="."), "3")

    def test_invalid_arguments(self):
        with self.assertRaises(ValueError):
            format_decimal(1, 3, -1)
        with self.assertRaises(ZeroDivisionError):
            format_decimal(1, 0)

    def test_round_trip_through_text(self):
        for text in ["0.125", "-42", "3.1415926535897932384626433832795028841971693993751", "0.0001"]:
            with self.subTest(text=text):
                value = parse(text, decimal_separator=".")
                self.assertEqual(value.to_string(100, decimal_separator="."), text)


class RenderTests(unittest.TestCase):
    def test_render_float(self):
        self.assertEqual(render_float(0.1), "0.1")
        self.assertEqual(render_float(-2.5), "-2.5")
        self.assertEqual(render_float(1e20), "100000000000000000000")
        self.assertEqual(render_float(np.float32(0.1)), "0.1")

    def test_render_decimal(self):
        self.assertEqual(render_decimal(decimal.Decimal("1.50")), "1.50")
        self.assertEqual(render_decimal(decimal.Decimal("2E+2")), "200")


if __name__ == "__main__":  # pragma: no cover - direct execution helper
    unittest.main()
