"""Подготовка декодированного изображения к показу в окне."""
from __future__ import annotations

from typing import Optional, Tuple

import numpy as np
from PIL import Image

from ppmview.config import MAX_WINDOW_HEIGHT, MAX_WINDOW_WIDTH
from ppmview.models.image_model import PpmImage


class DisplayService:
    def __init__(self, max_width: int = MAX_WINDOW_WIDTH, max_height: int = MAX_WINDOW_HEIGHT) -> None:
        self._max_width = max_width
        self._max_height = max_height

    def to_pil_image(self, image: PpmImage, packed: Optional[np.ndarray] = None) -> Image.Image:
        """
        Строит RGB-изображение PIL из упакованного буфера `0x00RRGGBB`.
        В памяти little-endian такое слово лежит как B, G, R, 0, поэтому режим "BGRX".
        """
        if packed is None:
            packed = image.to_packed_buffer()
        if image.width == 0 or image.height == 0:
            return Image.new("RGB", (image.width, image.height))
        raw = packed.astype("<u4", copy=False).tobytes()
        return Image.frombuffer("RGB", image.size, raw, "raw", "BGRX", 0, 1)

    def window_size(self, image: PpmImage) -> Tuple[int, int]:
        """Размер окна: размеры изображения, ограниченные сверху."""
        return min(image.width, self._max_width), min(image.height, self._max_height)
