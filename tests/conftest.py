from pathlib import Path

import pytest
from PIL import Image


@pytest.fixture
def make_image(tmp_path):
    """Write a solid-color image and return its path."""

    def _make(name: str, size=(100, 50), mode="RGB", color=None, **save_kwargs) -> Path:
        path = tmp_path / name
        if color is None:
            color = (200, 30, 30, 255)[: len(mode)] if mode in ("RGB", "RGBA") else 128
        Image.new(mode, size, color).save(path, **save_kwargs)
        return path

    return _make


@pytest.fixture
def make_gif(tmp_path):
    """Write a two-frame GIF whose first frame is red and second is blue."""

    def _make(name: str = "anim.gif", size=(64, 32)) -> Path:
        path = tmp_path / name
        frames = [Image.new("RGB", size, (255, 0, 0)), Image.new("RGB", size, (0, 0, 255))]
        frames[0].save(path, save_all=True, append_images=frames[1:], duration=100, loop=0)
        return path

    return _make
