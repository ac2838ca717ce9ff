import unittest

from geometry import PixelRect, Rectangle, scale_to_pixels
from util import argb_to_rgba, ceil_to_int, to_argb


class TestCeilToInt(unittest.TestCase):
    def test_integral_values_are_unchanged(self):
        self.assertEqual(ceil_to_int(4.0), 4)
        self.assertEqual(ceil_to_int(0.0), 0)
        self.assertEqual(ceil_to_int(1440.0), 1440)

    def test_fractions_round_up(self):
        self.assertEqual(ceil_to_int(4.001), 5)
        self.assertEqual(ceil_to_int(95.958), 96)
        self.assertEqual(ceil_to_int(0.0001), 1)

    def test_returns_int(self):
        self.assertIsInstance(ceil_to_int(2.5), int)


class TestScaleToPixels(unittest.TestCase):
    def test_reference_key_at_1080p(self):
        px = scale_to_pixels(1920, 1080, Rectangle(75, 25, 5, 8.885))
        # Height follows the viewport height: ceil(1080 * 8.885 / 100) == 96.
        self.assertEqual(px.as_tuple(), (1440, 270, 96, 96))

    def test_exact_percentages_are_not_bumped(self):
        px = scale_to_pixels(1000, 500, Rectangle(10, 20, 30, 40))
        self.assertEqual(px.as_tuple(), (100, 100, 300, 200))

    def test_fractional_pixels_round_up(self):
        px = scale_to_pixels(100, 100, Rectangle(33.3, 0.5, 12.25, 99.01))
        self.assertEqual(px.as_tuple(), (34, 1, 13, 100))

    def test_bounds_may_extend_past_viewport(self):
        px = scale_to_pixels(200, 100, Rectangle(90, 95, 20, 10))
        self.assertEqual(px.as_tuple(), (180, 95, 40, 10))
        self.assertGreater(px.right, 200)


class TestPixelRect(unittest.TestCase):
    def test_inset_shrinks_every_side(self):
        self.assertEqual(PixelRect(10, 20, 30, 40).inset(1, 1), PixelRect(11, 21, 28, 38))

    def test_center(self):
        self.assertEqual(PixelRect(0, 0, 5, 10).center, (2.5, 5.0))


class TestArgb(unittest.TestCase):
    def test_byte_order(self):
        self.assertEqual(to_argb(0x10, 0xA0, 0xB0, 0xC0), 0x10A0B0C0)
        self.assertEqual(to_argb(0xFF, 0xFF, 0xFF, 0xFF), 0xFFFFFFFF)

    def test_only_low_byte_is_used(self):
        self.assertEqual(to_argb(0x110, 0x1A0, 0, 0), 0x10A00000)

    def test_unpack_to_rgba(self):
        self.assertEqual(argb_to_rgba(0x10A0B0C0), (0xA0, 0xB0, 0xC0, 0x10))


if __name__ == "__main__":
    unittest.main()
