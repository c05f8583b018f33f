"""Tests for map rendering."""

import numpy as np
import pytest
from PIL import Image

from local_robot_map import CellLabel
from local_robot_map.visualization import labels_to_luma, labels_to_rgb, save_image, to_image


class TestLabelConversion:
    """Test label to pixel conversion."""

    def test_luma(self, seed_map):
        pixels = labels_to_luma(seed_map.cells)

        assert pixels.dtype == np.uint8
        assert pixels.shape == (5, 3)
        assert pixels[0].tolist() == [0, 40, 50]
        assert pixels[4].tolist() == [120, 180, 220]

    def test_rgb(self, seed_map):
        pixels = labels_to_rgb(seed_map.cells)

        assert pixels.shape == (5, 3, 3)
        assert tuple(pixels[2, 0]) == CellLabel.ASSIGNED.to_rgb()
        assert tuple(pixels[1, 2]) == (200, 200, 200)


class TestImageRendering:
    """Test Pillow image output."""

    def test_pixel_layout(self, seed_map):
        """Pixel (x, y) shows cell (row=y, col=x)."""
        image = to_image(seed_map, 'RGB')

        assert image.mode == 'RGB'
        assert image.size == (3, 5)
        for cell in seed_map.get_map_region(lambda label: True):
            assert image.getpixel((cell.col, cell.row)) == cell.label.to_rgb()

    def test_grayscale(self, seed_map):
        image = to_image(seed_map, 'l')

        assert image.mode == 'L'
        assert image.getpixel((2, 0)) == CellLabel.MY_ROBOT.to_luma()

    def test_default_mode(self, seed_map):
        assert seed_map.as_image().mode == 'RGB'

    def test_unsupported_mode(self, seed_map):
        with pytest.raises(ValueError, match="Unsupported image mode"):
            to_image(seed_map, 'CMYK')

    def test_save_image(self, seed_map, test_data_dir):
        path = save_image(seed_map, test_data_dir / 'maps' / 'seed.png', mode='L')

        assert path.exists()
        with Image.open(path) as image:
            assert image.size == (3, 5)
            assert image.getpixel((0, 1)) == CellLabel.FRONTIER.to_luma()
