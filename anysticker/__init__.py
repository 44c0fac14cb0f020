"""Convert images and simple animations into 512px sticker images."""

__version__ = "0.1.0"
