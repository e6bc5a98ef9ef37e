"""Загрузка PPM-изображений с диска.

Принципы:
- SRP: сервис читает файл и собирает `PpmImage`, алгоритмы разбора вынесены
  в `header_tokenizer` и `pixel_decoder`.
- Сервис ничего не печатает и не пишет в лог: ошибки только пробрасываются.
"""
from __future__ import annotations

import time
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import numpy as np

from ppmview.models.errors import PpmIoError
from ppmview.models.image_model import PpmImage
from ppmview.services.header_tokenizer import read_header
from ppmview.services.pixel_decoder import decode_pixels


def decode_bytes(data: bytes, filename: str = "<memory>", workers: Optional[int] = None) -> PpmImage:
    """Декодирует содержимое PPM-файла, уже прочитанное в память.

    Raises:
        PpmError: любая ошибка формата; частично собранное изображение не возвращается.
    """
    header = read_header(data)
    pixels = decode_pixels(
        header.format,
        memoryview(data)[header.payload_offset:],
        header.width,
        header.height,
        workers=workers,
    )
    return PpmImage(
        filename=filename,
        magic_number=header.magic_number,
        width=header.width,
        height=header.height,
        max_val=header.max_val,
        pixels=pixels,
    )


def decode(file_path: str | Path, workers: Optional[int] = None) -> PpmImage:
    """Читает файл целиком и декодирует его.

    Raises:
        PpmIoError: если файл не найден или не читается.
        PpmError: если содержимое не является корректным P3/P6.
    """
    path = Path(file_path)
    try:
        data = path.read_bytes()
    except OSError as exc:
        raise PpmIoError(str(path), exc.strerror or str(exc)) from exc
    return decode_bytes(data, filename=path.name, workers=workers)


@dataclass(frozen=True)
class LoadResult:
    """Изображение, его упакованный буфер и время декодирования с упаковкой, с."""
    image: PpmImage
    packed: np.ndarray
    seconds: float


class ImageService:
    def __init__(self, workers: Optional[int] = None) -> None:
        self._workers = workers

    def load_packed(self, file_path: str | Path) -> LoadResult:
        """Декодирует файл и сразу упаковывает пиксели, замеряя общее время."""
        start = time.perf_counter()
        image = self.load_image(file_path)
        packed = image.to_packed_buffer(workers=self._workers)
        return LoadResult(image=image, packed=packed, seconds=time.perf_counter() - start)

    def load_image(self, file_path: str | Path) -> PpmImage:
        """Загружает PPM-изображение с диска.

        Args:
            file_path: Путь до файла изображения.

        Returns:
            `PpmImage` с полями заголовка и пикселями.
        """
        return decode(file_path, workers=self._workers)
