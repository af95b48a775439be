"""
Tests for measurement units.
"""

import math
import unittest

from geocoord.unit import (
    UNITS_BY_SYMBOL,
    Degree,
    Kilometer,
    Meter,
    Mile,
    NauticalMile,
    Radian,
)


class TestLengthUnits(unittest.TestCase):
    """Test distance units."""

    def test_si_storage(self):
        self.assertEqual(float(Kilometer(2.5)), 2500.0)
        self.assertEqual(Kilometer(2.5).value, 2.5)

    def test_conversion(self):
        self.assertAlmostEqual(Mile(1).to(Kilometer), 1.609344)
        self.assertAlmostEqual(NauticalMile(1).to(Meter), 1852.0)
        self.assertIsInstance(Kilometer(1).as_unit(Mile), Mile)

    def test_same_family_arithmetic(self):
        total = Kilometer(5.2) + Meter(150)
        self.assertIsInstance(total, Kilometer)
        self.assertAlmostEqual(total.value, 5.35)
        self.assertEqual(str(Kilometer(2) - Meter(500)), "1.5 km")

    def test_scalar_arithmetic(self):
        self.assertEqual((Kilometer(2) * 3).value, 6.0)
        self.assertEqual((Kilometer(3) / 2).value, 1.5)

    def test_comparison_across_scales(self):
        self.assertLess(Meter(999), Kilometer(1))
        self.assertEqual(Meter(1000), Kilometer(1))
        self.assertEqual(hash(Meter(1000)), hash(Kilometer(1)))

    def test_symbol_lookup(self):
        self.assertIs(UNITS_BY_SYMBOL["km"], Kilometer)
        self.assertIs(UNITS_BY_SYMBOL["nmi"], NauticalMile)


class TestAngleUnits(unittest.TestCase):
    """Test angle units."""

    def test_degree_to_radian(self):
        self.assertAlmostEqual(float(Degree(180)), math.pi)
        self.assertAlmostEqual(Radian(math.pi / 2).to(Degree), 90.0)

    def test_normalized(self):
        self.assertAlmostEqual(Degree(-90).normalized().value, 270.0)
        self.assertAlmostEqual(Degree(450).normalized().value, 90.0)
        self.assertAlmostEqual(Degree(765).normalized().value, 45.0)
        self.assertIsInstance(Degree(-90).normalized(), Degree)

    def test_str(self):
        self.assertEqual(str(Degree(90)), "90.0 °")


class TestFamilies(unittest.TestCase):
    """Test that unit families do not mix."""

    def test_add_rejected(self):
        with self.assertRaises(TypeError):
            Degree(45) + Kilometer(1)

    def test_compare_rejected(self):
        with self.assertRaises(TypeError):
            Degree(45) < Meter(1)

    def test_conversion_rejected(self):
        with self.assertRaises(TypeError):
            Kilometer(1).to(Degree)

    def test_scale_by_unit_rejected(self):
        with self.assertRaises(TypeError):
            Kilometer(1) * Meter(2)

    def test_not_equal_across_families(self):
        self.assertNotEqual(Radian(1), Meter(1))


if __name__ == "__main__":
    unittest.main()
