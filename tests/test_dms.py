"""
Tests for degrees/minutes/seconds conversion.
"""

import unittest
from decimal import Decimal
from fractions import Fraction

from geocoord.dms import (
    LONGITUDE_HEMISPHERES,
    decimal_from_dms,
    decimal_to_dms,
    format_dms,
    parse_direction,
    to_fraction,
)
from geocoord.errors import GeoError, ParseError


class TaggedFloat(float):
    """Float subclass with its own repr, like numpy scalar types."""

    def __repr__(self):
        return f"TaggedFloat({float(self)!r})"


class TestDecimalFromDMS(unittest.TestCase):
    """Test decimal_from_dms."""

    def test_north_hemisphere(self):
        """Test N keeps the value positive and is exact."""
        self.assertEqual(decimal_from_dms([50, 27, 0, "N"]), Fraction(1009, 20))

    def test_east_with_seconds(self):
        """Test seconds contribute exactly."""
        self.assertEqual(decimal_from_dms([30, 31, 24, "E"]), Fraction(9157, 300))

    def test_south_and_west_are_negative(self):
        expected = -(33 + Fraction(52, 60) + Fraction(4, 3600))
        self.assertEqual(decimal_from_dms([33, 52, 4, "S"]), expected)
        self.assertEqual(decimal_from_dms((0, 7, 39, "W")), -(Fraction(7, 60) + Fraction(39, 3600)))

    def test_sign_from_degrees_without_letter(self):
        """Test negative degrees make the whole value negative."""
        self.assertEqual(decimal_from_dms([-33, 52, 4]), decimal_from_dms([33, 52, 4, "S"]))

    def test_zero_degrees_without_letter_is_positive(self):
        self.assertEqual(decimal_from_dms([0, 30, 0]), Fraction(1, 2))

    def test_missing_minutes_and_seconds_default_to_zero(self):
        self.assertEqual(decimal_from_dms([12]), 12)
        self.assertEqual(decimal_from_dms([12, 30, "S"]), Fraction(-25, 2))

    def test_minutes_and_seconds_are_not_truncated(self):
        self.assertEqual(decimal_from_dms([10, 30.5, 0]), 10 + Fraction(61, 120))
        self.assertEqual(decimal_from_dms([10, 0, 1.5]), 10 + Fraction(3, 7200))

    def test_only_degrees_are_truncated(self):
        self.assertEqual(decimal_from_dms([10.9, 0, 0]), 10)

    def test_unknown_direction(self):
        """Test an unknown hemisphere letter raises ParseError."""
        with self.assertRaises(ParseError):
            decimal_from_dms([10, 0, 0, "X"])

    def test_parse_error_is_value_error(self):
        with self.assertRaises(ValueError):
            decimal_from_dms([10, 0, 0, "north"])
        self.assertTrue(issubclass(ParseError, GeoError))

    def test_empty_parts(self):
        with self.assertRaises(ParseError):
            decimal_from_dms([])
        with self.assertRaises(ParseError):
            decimal_from_dms(["N"])

    def test_too_many_components(self):
        with self.assertRaises(ParseError):
            decimal_from_dms([1, 2, 3, 4, "N"])

    def test_input_not_mutated(self):
        """Test the caller's list still holds the hemisphere letter."""
        parts = [50, 27, 0, "N"]
        decimal_from_dms(parts)
        self.assertEqual(parts, [50, 27, 0, "N"])


class TestDecimalToDMS(unittest.TestCase):
    """Test decimal_to_dms."""

    def test_with_direction(self):
        self.assertEqual(decimal_to_dms(Fraction(1009, 20), True), (50, 27, 0.0, "N"))

    def test_longitude_west(self):
        self.assertEqual(decimal_to_dms(-30.55, True, LONGITUDE_HEMISPHERES), (30, 33, 0.0, "W"))

    def test_without_direction_is_signed(self):
        self.assertEqual(decimal_to_dms(-30.55), (-30, 33, 0.0))

    def test_fractional_seconds(self):
        degrees, minutes, seconds, letter = decimal_to_dms(Fraction(9157, 300) + Fraction(1, 7200), True)
        self.assertEqual((degrees, minutes, letter), (30, 31, "N"))
        self.assertAlmostEqual(seconds, 24.5)

    def test_negative_below_one_degree(self):
        """Test values between -1 and 0 still get the negative letter."""
        self.assertEqual(decimal_to_dms(-0.5, True), (0, 30, 0.0, "S"))

    def test_zero(self):
        self.assertEqual(decimal_to_dms(0, True, LONGITUDE_HEMISPHERES), (0, 0, 0.0, "E"))

    def test_round_trip(self):
        """Test decimal -> DMS -> decimal stays within sub-second precision."""
        for value in (0.0, -0.5, 12.345678, -179.999, 89.5, -33.8688, 151.2093):
            with self.subTest(value=value):
                back = decimal_from_dms(decimal_to_dms(value, True))
                self.assertAlmostEqual(float(back), value, places=9)

    def test_round_trip_exact_for_whole_seconds(self):
        value = decimal_from_dms([51, 30, 26, "N"])
        self.assertEqual(decimal_from_dms(decimal_to_dms(value, True)), value)


class TestHelpers(unittest.TestCase):
    """Test parsing helpers."""

    def test_parse_direction(self):
        self.assertEqual([parse_direction(d) for d in "NSEW"], [1, -1, 1, -1])

    def test_to_fraction_float_uses_repr(self):
        self.assertEqual(to_fraction(50.45), Fraction(1009, 20))

    def test_to_fraction_float_subclass(self):
        self.assertEqual(to_fraction(TaggedFloat(50.45)), Fraction(1009, 20))
        self.assertEqual(to_fraction(TaggedFloat(-30.55)), Fraction(-611, 20))

    def test_decimal_to_dms_float_subclass(self):
        self.assertEqual(
            decimal_to_dms(TaggedFloat(-30.55), True, LONGITUDE_HEMISPHERES),
            (30, 33, 0.0, "W"),
        )

    def test_to_fraction_other_types(self):
        self.assertEqual(to_fraction(7), Fraction(7))
        self.assertEqual(to_fraction(Decimal("0.1")), Fraction(1, 10))
        self.assertEqual(to_fraction("12.25"), Fraction(49, 4))

    def test_to_fraction_rejects_bad_values(self):
        with self.assertRaises(ValueError):
            to_fraction(float("nan"))
        with self.assertRaises(ValueError):
            to_fraction("north")
        with self.assertRaises(TypeError):
            to_fraction(None)
        with self.assertRaises(TypeError):
            to_fraction(True)

    def test_format_dms(self):
        self.assertEqual(format_dms((50, 27, 0.0, "N")), "50°27′0″N")
        self.assertEqual(format_dms((0, 7, 38.6, "W")), "0°7′39″W")

    def test_format_dms_rounds_seconds_without_carry(self):
        self.assertEqual(format_dms((59, 59, 59.9999, "N")), "59°59′60″N")


if __name__ == "__main__":
    unittest.main()
