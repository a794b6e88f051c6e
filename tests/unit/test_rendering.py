"""Unit tests for canvas rasterization utilities."""

import unittest

import numpy as np
from PIL import Image

from blockfont.utils.rendering import canvas_to_image, canvas_to_mask, get_canvas_bbox


class TestCanvasToMask(unittest.TestCase):

    def test_shape_and_values(self):
        mask = canvas_to_mask(['█▀', '▄'])
        self.assertEqual(mask.dtype, bool)
        np.testing.assert_array_equal(mask, [
            [True, True],
            [True, False],
            [False, False],
            [True, False],
        ])

    def test_empty(self):
        self.assertEqual(canvas_to_mask([]).shape, (0, 0))


class TestCanvasToImage(unittest.TestCase):

    def test_pixel_size(self):
        img = canvas_to_image(['█ '], pixel_size=3)
        self.assertIsInstance(img, Image.Image)
        self.assertEqual(img.mode, 'RGB')
        self.assertEqual(img.size, (6, 6))
        self.assertEqual(img.getpixel((0, 0)), (255, 255, 255))
        self.assertEqual(img.getpixel((5, 5)), (0, 0, 0))

    def test_custom_colors(self):
        img = canvas_to_image(['▀'], foreground=(255, 0, 0), background=(0, 0, 255))
        self.assertEqual(img.getpixel((0, 0)), (255, 0, 0))
        self.assertEqual(img.getpixel((0, 1)), (0, 0, 255))

    def test_empty_canvas(self):
        img = canvas_to_image([])
        self.assertEqual(img.size, (1, 1))


class TestGetCanvasBbox(unittest.TestCase):

    def test_bbox(self):
        self.assertEqual(get_canvas_bbox(['  ', ' ▄']), (1, 3, 1, 3))

    def test_multiple_cells(self):
        self.assertEqual(get_canvas_bbox(['▀  ', '  █']), (0, 0, 2, 3))

    def test_no_ink(self):
        self.assertIsNone(get_canvas_bbox(['   ']))


if __name__ == '__main__':
    unittest.main()
