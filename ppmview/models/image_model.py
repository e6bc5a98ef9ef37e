"""Модель декодированного PPM-изображения.

Принципы:
- SRP: только структура данных и упаковка пикселей, без разбора файла.
- Чистый код: неизменяемость (`frozen=True`, буфер только для чтения).
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple

import numpy as np

from ppmview.utils import parallel_map_chunks


class PpmFormat(Enum):
    """Вариант PPM, определяемый магическим числом."""
    ASCII = "P3"
    BINARY = "P6"

    @classmethod
    def from_magic(cls, magic_number: str) -> Optional["PpmFormat"]:
        """Возвращает вариант по магическому числу или None, если оно не поддерживается."""
        for fmt in cls:
            if fmt.value == magic_number:
                return fmt
        return None


@dataclass(frozen=True)
class PpmImage:
    """Неизменяемое изображение: поля заголовка и пиксели.

    Fields:
        filename: Имя исходного файла (только для отображения).
        magic_number: "P3" или "P6".
        width: Ширина, px.
        height: Высота, px.
        max_val: Максимум канала из заголовка; не используется для масштабирования.
        pixels: Массив uint8 формы (width * height, 3), построчно, в порядке файла.
    """
    filename: str
    magic_number: str
    width: int
    height: int
    max_val: int
    pixels: np.ndarray = field(repr=False)

    def __post_init__(self) -> None:
        if PpmFormat.from_magic(self.magic_number) is None:
            raise ValueError(f"Неподдерживаемое магическое число: {self.magic_number!r}")
        if self.width < 0 or self.height < 0:
            raise ValueError(f"Отрицательные размеры: {self.width}x{self.height}")
        if self.pixels.dtype != np.uint8:
            raise ValueError(f"Ожидался буфер uint8, получен {self.pixels.dtype}")
        if self.pixels.shape != (self.pixel_count, 3):
            raise ValueError(
                f"Размер буфера {self.pixels.shape} не соответствует {self.width}x{self.height}"
            )
        self.pixels.setflags(write=False)

    @property
    def format(self) -> PpmFormat:
        return PpmFormat(self.magic_number)

    @property
    def pixel_count(self) -> int:
        return self.width * self.height

    @property
    def size(self) -> Tuple[int, int]:
        return self.width, self.height

    def to_packed_buffer(self, workers: Optional[int] = None) -> np.ndarray:
        """Упаковывает пиксели в 32-битные слова `(R << 16) | (G << 8) | B`.

        Старший байт всегда нулевой, порядок пикселей сохраняется.
        Возвращает новый массив uint32, не разделяющий память с `pixels`.
        """
        pixels = self.pixels

        def pack(start: int, stop: int) -> np.ndarray:
            chunk = pixels[start:stop].astype(np.uint32)
            return (chunk[:, 0] << 16) | (chunk[:, 1] << 8) | chunk[:, 2]

        parts = parallel_map_chunks(pack, len(pixels), workers=workers)
        if not parts:
            return np.zeros(0, dtype=np.uint32)
        return np.concatenate(parts)
