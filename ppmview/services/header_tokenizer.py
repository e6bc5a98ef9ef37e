"""Разбор заголовка PPM: магическое число, ширина, высота, максимум канала.

Заголовок читается побайтно ровно до конца четвёртого токена и одного
разделителя после него. Всё дальше это данные пикселей, которые для P6
передаются декодеру как есть.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple

from ppmview.models.errors import MalformedHeaderFieldError, MissingFieldError, UnsupportedFormatError
from ppmview.models.image_model import PpmFormat

_WHITESPACE = b" \t\n\r\x0b\x0c"
_MAX_VAL_LIMIT = 0xFFFF


@dataclass(frozen=True)
class PpmHeader:
    magic_number: str
    width: int
    height: int
    max_val: int
    payload_offset: int

    @property
    def format(self) -> PpmFormat:
        return PpmFormat(self.magic_number)


def _next_token(data: bytes, pos: int) -> Tuple[Optional[bytes], int]:
    """Возвращает (токен, позиция сразу после него) или (None, len(data)).

    Пропускает пробельные символы и комментарии: `#` в начале токена
    открывает комментарий до конца строки.
    """
    n = len(data)
    while pos < n:
        byte = data[pos:pos + 1]
        if byte in _WHITESPACE:
            pos += 1
        elif byte == b"#":
            eol = data.find(b"\n", pos)
            pos = n if eol == -1 else eol + 1
        else:
            break
    if pos >= n:
        return None, n
    start = pos
    while pos < n and data[pos:pos + 1] not in _WHITESPACE:
        pos += 1
    return data[start:pos], pos


def _parse_unsigned(field: str, token: bytes) -> int:
    # bytes.isdigit() accepts ASCII digits only: no signs, no '_', no spaces
    if not token.isdigit():
        raise MalformedHeaderFieldError(field, token.decode("latin-1"))
    try:
        return int(token)
    except ValueError as exc:
        # exceeds the interpreter's integer string conversion limit
        raise MalformedHeaderFieldError(field, token[:32].decode("latin-1")) from exc


def read_header(data: bytes) -> PpmHeader:
    """Извлекает четыре поля заголовка и смещение начала данных пикселей.

    Raises:
        MissingFieldError: если токенов меньше четырёх.
        UnsupportedFormatError: если магическое число не "P3" и не "P6".
        MalformedHeaderFieldError: если ширина, высота или максимум не числа.
    """
    token, pos = _next_token(data, 0)
    if token is None:
        raise MissingFieldError("magic number")
    magic_number = token.decode("latin-1")
    if PpmFormat.from_magic(magic_number) is None:
        raise UnsupportedFormatError(magic_number)

    values = []
    for field in ("width", "height", "max value"):
        token, pos = _next_token(data, pos)
        if token is None:
            raise MissingFieldError(field)
        values.append(_parse_unsigned(field, token))
    width, height, max_val = values
    if max_val > _MAX_VAL_LIMIT:
        raise MalformedHeaderFieldError("max value", str(max_val))

    # exactly one separator byte after max value
    if pos < len(data):
        pos += 1

    return PpmHeader(
        magic_number=magic_number,
        width=width,
        height=height,
        max_val=max_val,
        payload_offset=pos,
    )


def tokenize(data: bytes) -> List[bytes]:
    """Построчная токенизация текста: пустые строки и строки с `#` отбрасываются.

    Применяется только к текстовым данным (payload P3), но не к бинарным.
    """
    if b"#" not in data:
        # no comments at all: one C-level split gives the same tokens
        return data.split()
    tokens: List[bytes] = []
    for line in data.splitlines():
        line = line.strip()
        if not line or line.startswith(b"#"):
            continue
        tokens.extend(line.split())
    return tokens
