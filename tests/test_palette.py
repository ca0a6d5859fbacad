"""
Unit tests for palette generation.
Run from project root: python -m pytest tests/ -v
"""
import unittest

import numpy as np

from manjul.palette import COLOR_LEVELS, channel_value, make_palette, palette_size


class TestMakePalette(unittest.TestCase):
    """Lookup table shape, formula and ordering."""

    def test_default_length_is_levels_cubed(self):
        palette = make_palette()
        self.assertEqual(COLOR_LEVELS, 6)
        self.assertEqual(palette.shape, (216, 3))
        self.assertEqual(palette.dtype, np.uint8)
        self.assertEqual(palette_size(), 216)

    def test_channel_ramp(self):
        """256 // (levels - k), with 256 clamped to 255."""
        ramp = [channel_value(k) for k in range(6)]
        self.assertEqual(ramp, [42, 51, 64, 85, 128, 255])

    def test_linear_index_layout(self):
        """Red varies fastest, blue slowest."""
        palette = make_palette()
        self.assertEqual(tuple(palette[0]), (42, 42, 42))
        self.assertEqual(tuple(palette[1]), (51, 42, 42))
        self.assertEqual(tuple(palette[6]), (42, 51, 42))
        self.assertEqual(tuple(palette[36]), (42, 42, 51))
        self.assertEqual(tuple(palette[215]), (255, 255, 255))
        rc, gc, bc = 3, 1, 4
        self.assertEqual(
            tuple(palette[rc + gc * 6 + bc * 36]),
            (channel_value(rc), channel_value(gc), channel_value(bc))
        )

    def test_every_entry_populated(self):
        palette = make_palette()
        self.assertTrue(np.all(palette > 0))

    def test_channels_monotonic_in_level(self):
        levels = COLOR_LEVELS
        palette = make_palette(levels).reshape(levels, levels, levels, 3)
        # reshape axes are (bc, gc, rc)
        self.assertTrue(np.all(np.diff(palette[:, :, :, 0].astype(int), axis=2) >= 0))
        self.assertTrue(np.all(np.diff(palette[:, :, :, 1].astype(int), axis=1) >= 0))
        self.assertTrue(np.all(np.diff(palette[:, :, :, 2].astype(int), axis=0) >= 0))

    def test_deterministic(self):
        self.assertTrue(np.array_equal(make_palette(), make_palette()))
        self.assertIsNot(make_palette(), make_palette())

    def test_read_only(self):
        palette = make_palette()
        with self.assertRaises(ValueError):
            palette[0, 0] = 1

    def test_other_level_counts(self):
        self.assertEqual(make_palette(1).tolist(), [[255, 255, 255]])
        self.assertEqual(make_palette(4).shape, (64, 3))

    def test_rejects_non_positive_levels(self):
        with self.assertRaises(ValueError):
            make_palette(0)


if __name__ == "__main__":
    unittest.main()
