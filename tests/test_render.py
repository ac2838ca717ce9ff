import os
import unittest

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

import pygame

import config
from geometry import PixelRect
from keys import FillInstruction, InputDevice
from keyset import build_default_keyset
from render import FontCache, RateMeter, draw_fill, draw_instructions
from util import to_argb

BINDINGS = {
    "forward": (InputDevice.KEYBOARD, pygame.K_w),
    "back": (InputDevice.KEYBOARD, pygame.K_s),
    "left": (InputDevice.KEYBOARD, pygame.K_a),
    "right": (InputDevice.KEYBOARD, pygame.K_d),
    "attack": (InputDevice.MOUSE, 1),
    "use": (InputDevice.MOUSE, 3),
    "jump": (InputDevice.KEYBOARD, pygame.K_SPACE),
}


class TestDrawFill(unittest.TestCase):
    def setUp(self):
        self.surface = pygame.Surface((40, 40))
        self.surface.fill((0, 0, 0))

    def test_opaque_fill(self):
        draw_fill(self.surface, FillInstruction(PixelRect(10, 10, 5, 5), config.TEXT_COLOR))
        self.assertEqual(tuple(self.surface.get_at((12, 12)))[:3], (255, 255, 255))
        self.assertEqual(tuple(self.surface.get_at((9, 9)))[:3], (0, 0, 0))

    def test_translucent_fill_blends(self):
        draw_fill(self.surface, FillInstruction(PixelRect(0, 0, 10, 10), to_argb(0x80, 0xFF, 0, 0)))
        r, g, b = tuple(self.surface.get_at((5, 5)))[:3]
        self.assertGreater(r, 0)
        self.assertLess(r, 255)
        self.assertEqual((g, b), (0, 0))

    def test_empty_rect_is_skipped(self):
        draw_fill(self.surface, FillInstruction(PixelRect(5, 5, 0, 10), config.TEXT_COLOR))
        self.assertEqual(tuple(self.surface.get_at((5, 5)))[:3], (0, 0, 0))


class TestDrawFrame(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        pygame.font.init()

    @classmethod
    def tearDownClass(cls):
        pygame.font.quit()

    def test_full_key_set(self):
        keys = build_default_keyset(BINDINGS)
        surface = pygame.Surface((640, 360))
        surface.fill(config.BG_COLOR)
        draw_instructions(surface, FontCache(), keys.render(640, 360, 0, lambda code: "w"))

        jump = keys[6].render(640, 360, 0).body[0].rect
        cx = jump.x + jump.w // 2
        cy = jump.y + jump.h // 2
        self.assertEqual(tuple(surface.get_at((cx, cy)))[:3], (255, 255, 255))

    def test_font_cache_reuses_sizes(self):
        fonts = FontCache(base_px=10)
        self.assertIs(fonts.get(2.0), fonts.get(2.0))
        self.assertIsNot(fonts.get(1.0), fonts.get(3.0))


class TestRateMeter(unittest.TestCase):
    def test_starts_at_zero(self):
        meter = RateMeter()
        meter.tick()
        self.assertEqual(meter.value, 0.0)


if __name__ == "__main__":
    unittest.main()
