"""
Tests for the geocoord command line.
"""

import io
import unittest
from contextlib import redirect_stdout

from geocoord.cli import create_argument_parser, main, run


def run_cli(*argv):
    out = io.StringIO()
    with redirect_stdout(out):
        status = main(list(argv))
    return status, out.getvalue().splitlines()


class TestCli(unittest.TestCase):
    """Test CLI sub-commands."""

    def test_describe(self):
        status, lines = run_cli("describe", "50.45", "30.52")
        self.assertEqual(status, 0)
        self.assertEqual(lines, ["(50°27′0″N, 30°31′12″E)", "50.45,30.52"])

    def test_dms(self):
        status, lines = run_cli("dms", "--lng", "-30.55")
        self.assertEqual(status, 0)
        self.assertEqual(lines, ["30°33′0″W"])

    def test_distance_units(self):
        _, km = run_cli("distance", "0", "0", "0", "1")
        _, mi = run_cli("--units", "mi", "distance", "0", "0", "0", "1")
        self.assertEqual(km, ["111.195 km"])
        self.assertEqual(mi, ["69.093 mi"])

    def test_bearing(self):
        _, lines = run_cli("bearing", "0", "0", "0", "10")
        self.assertEqual(lines, ["90.00°"])

    def test_endpoint(self):
        _, lines = run_cli("endpoint", "0", "0", "0", "111.19508")
        lat, lng = map(float, lines[1].split(","))
        self.assertAlmostEqual(lat, 1.0, places=6)
        self.assertAlmostEqual(lng, 0.0, places=6)

    def test_sun(self):
        _, lines = run_cli("sun", "50.45", "30.52", "--date", "2016-03-31")
        self.assertTrue(lines[0].startswith("sunrise: 2016-03-31T03:"))
        self.assertTrue(lines[1].startswith("sunset: 2016-03-31T"))

    def test_sun_polar_night(self):
        _, lines = run_cli("sun", "78.22", "15.65", "--date", "2016-12-21")
        self.assertEqual(lines, ["sunrise: none", "sunset: none"])

    def test_links(self):
        _, lines = run_cli("links", "50.45", "30.52")
        self.assertEqual(len(lines), 3)
        self.assertTrue(lines[0].startswith("osm: https://www.openstreetmap.org/"))

    def test_run_returns_lines(self):
        args = create_argument_parser().parse_args(["describe", "33", "-90"])
        self.assertEqual(run(args)[0], "(33°0′0″N, 90°0′0″W)")

    def test_missing_command(self):
        with self.assertRaises(SystemExit) as ctx:
            create_argument_parser().parse_args([])
        self.assertEqual(ctx.exception.code, 2)


if __name__ == "__main__":
    unittest.main()
