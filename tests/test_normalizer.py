import pytest
from PIL import Image

from anysticker.core.errors import UnsupportedFormatError
from anysticker.core.normalizer import ensure_alpha, to_rgb_or_rgba


def test_ensure_alpha_adds_opaque_channel():
    image = Image.new("RGB", (37, 11), (10, 20, 30))
    result = ensure_alpha(image)
    assert result.mode == "RGBA"
    assert result.size == (37, 11)
    assert result.getchannel("A").getextrema() == (255, 255)
    assert result.getpixel((0, 0)) == (10, 20, 30, 255)
    assert image.mode == "RGB"


def test_ensure_alpha_passes_rgba_through():
    image = Image.new("RGBA", (8, 8), (1, 2, 3, 4))
    assert ensure_alpha(image) is image


@pytest.mark.parametrize("mode", ["L", "LA", "CMYK", "P", "YCbCr"])
def test_ensure_alpha_rejects_other_layouts(mode):
    with pytest.raises(UnsupportedFormatError):
        ensure_alpha(Image.new(mode, (4, 4)))


def test_to_rgb_or_rgba_keeps_transparency():
    assert to_rgb_or_rgba(Image.new("LA", (4, 4))).mode == "RGBA"
    assert to_rgb_or_rgba(Image.new("L", (4, 4))).mode == "RGB"
    assert to_rgb_or_rgba(Image.new("CMYK", (4, 4))).mode == "RGB"
    assert to_rgb_or_rgba(Image.new("I", (4, 4))).mode == "RGB"


def test_to_rgb_or_rgba_palette_with_transparency():
    image = Image.new("P", (4, 4), 0)
    image.info["transparency"] = 0
    assert to_rgb_or_rgba(image).mode == "RGBA"


def test_to_rgb_or_rgba_expands_rgb_transparency_key():
    image = Image.new("RGB", (4, 4), (0, 0, 0))
    image.putpixel((3, 3), (9, 9, 9))
    image.info["transparency"] = (0, 0, 0)
    result = to_rgb_or_rgba(image)
    assert result.mode == "RGBA"
    assert result.getpixel((0, 0))[3] == 0
    assert result.getpixel((3, 3)) == (9, 9, 9, 255)


def test_ensure_alpha_accepts_premultiplied_and_padded_rgb():
    padded = ensure_alpha(Image.new("RGBX", (3, 2), (5, 6, 7, 0)))
    assert padded.mode == "RGBA"
    assert padded.getpixel((0, 0)) == (5, 6, 7, 255)

    premultiplied = ensure_alpha(Image.new("RGBa", (3, 2), (10, 20, 30, 255)))
    assert premultiplied.mode == "RGBA"
    assert premultiplied.size == (3, 2)
    assert premultiplied.getpixel((0, 0)) == (10, 20, 30, 255)
