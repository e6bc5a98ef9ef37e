"""Декодирование данных пикселей PPM в массив троек (R, G, B).

Для каждого варианта `PpmFormat` свой алгоритм с одинаковым контрактом:
`(payload, width, height, workers) -> ndarray[uint8] формы (width * height, 3)`.
"""
from __future__ import annotations

from typing import Callable, Dict, List, Optional, Union

import numpy as np

from ppmview.models.errors import InvalidPixelValueError, TrailingDataError, TruncatedPayloadError
from ppmview.models.image_model import PpmFormat
from ppmview.services.header_tokenizer import tokenize
from ppmview.utils import parallel_map_chunks

Payload = Union[bytes, memoryview]
PixelDecoder = Callable[[Payload, int, int, Optional[int]], np.ndarray]

# a channel value has at most 3 significant digits ("255")
_MAX_DIGITS = 3


def _empty_pixels() -> np.ndarray:
    return np.zeros((0, 3), dtype=np.uint8)


def decode_binary(payload: Payload, width: int, height: int, workers: Optional[int] = None) -> np.ndarray:
    """P6: ровно `width * height * 3` сырых байт, лишние байты после них игнорируются.

    Данные копируются один раз, без промежуточных срезов.
    """
    expected = width * height * 3
    if len(payload) < expected:
        raise TruncatedPayloadError(expected, len(payload))
    if expected == 0:
        return _empty_pixels()
    return np.frombuffer(payload, dtype=np.uint8, count=expected).copy().reshape(-1, 3)


def _parse_channel_tokens(tokens: List[bytes], offset: int) -> np.ndarray:
    """Векторно разбирает блок ASCII-токенов; `offset`: индекс первого токена в payload.

    Ведущие нули допустимы ("0255" == 255). При ошибке сообщается самый
    первый некорректный токен блока.
    """
    lengths = np.fromiter(map(len, tokens), dtype=np.int64, count=len(tokens))
    candidates = tokens
    long_idx = np.flatnonzero(lengths > _MAX_DIGITS)
    if long_idx.size:
        candidates = list(tokens)
        for i in long_idx.tolist():
            stripped = tokens[i].lstrip(b"0") or b"0"
            # anything still too long cannot be a channel value
            candidates[i] = stripped if len(stripped) <= _MAX_DIGITS else b"x"
            lengths[i] = len(candidates[i])

    arr = np.array(candidates, dtype=f"S{_MAX_DIGITS}")
    # "S" drops trailing NUL bytes, the length comparison catches them
    bad = ~np.char.isdigit(arr) | (np.char.str_len(arr) != lengths)
    values = np.where(bad, b"0", arr).astype(np.uint16)
    bad |= values > 255
    if bad.any():
        i = int(np.flatnonzero(bad)[0])
        raise InvalidPixelValueError(offset + i, tokens[i].decode("latin-1"))
    return values.astype(np.uint8)


def decode_ascii(payload: Payload, width: int, height: int, workers: Optional[int] = None) -> np.ndarray:
    """P3: ровно `width * height * 3` десятичных значений в диапазоне [0, 255]."""
    tokens = tokenize(bytes(payload))
    expected = width * height * 3
    if len(tokens) < expected:
        raise TruncatedPayloadError(expected, len(tokens), unit="значений")
    if len(tokens) > expected:
        raise TrailingDataError(expected, len(tokens))
    if expected == 0:
        return _empty_pixels()

    def parse_chunk(start: int, stop: int) -> np.ndarray:
        return _parse_channel_tokens(tokens[start:stop], start)

    parts = parallel_map_chunks(parse_chunk, expected, workers=workers, align=3)
    return np.concatenate(parts).reshape(-1, 3)


_DECODERS: Dict[PpmFormat, PixelDecoder] = {
    PpmFormat.BINARY: decode_binary,
    PpmFormat.ASCII: decode_ascii,
}


def decode_pixels(
    fmt: PpmFormat,
    payload: Payload,
    width: int,
    height: int,
    workers: Optional[int] = None,
) -> np.ndarray:
    """Выбирает алгоритм по варианту формата и декодирует пиксели."""
    return _DECODERS[fmt](payload, width, height, workers)
