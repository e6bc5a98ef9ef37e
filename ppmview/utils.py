"""Вспомогательные функции: параллельная обработка блоками и форматирование времени."""
from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from typing import Callable, List, Optional, Tuple, TypeVar

from ppmview.config import DEFAULT_WORKERS, MIN_CHUNK_ITEMS

T = TypeVar("T")


def chunk_bounds(n_items: int, n_chunks: int, align: int = 1) -> List[Tuple[int, int]]:
    """Делит диапазон [0, n_items) на не более чем `n_chunks` смежных отрезков.

    Границы отрезков кратны `align` (например, 3 для троек каналов),
    последний отрезок забирает остаток.
    """
    if n_items <= 0:
        return []
    n_chunks = max(1, n_chunks)
    units = -(-n_items // align)  # ceil
    per_chunk = -(-units // n_chunks) * align
    bounds = []
    start = 0
    while start < n_items:
        stop = min(n_items, start + per_chunk)
        bounds.append((start, stop))
        start = stop
    return bounds


def parallel_map_chunks(
    func: Callable[[int, int], T],
    n_items: int,
    workers: Optional[int] = None,
    align: int = 1,
    min_chunk: Optional[int] = None,
) -> List[T]:
    """Применяет `func(start, stop)` к блокам диапазона и возвращает результаты по порядку.

    `func` должна быть чистой: результат блока зависит только от его элементов.
    При `workers <= 1` или малом объёме данных блок один и пул не создаётся.
    Исключение из любого блока пробрасывается вызывающему без изменений.
    """
    if workers is None:
        workers = DEFAULT_WORKERS
    if min_chunk is None:
        min_chunk = MIN_CHUNK_ITEMS
    n_chunks = min(workers, max(1, n_items // max(1, min_chunk)))
    bounds = chunk_bounds(n_items, n_chunks, align)
    if len(bounds) <= 1:
        return [func(start, stop) for start, stop in bounds]

    with ThreadPoolExecutor(max_workers=len(bounds)) as pool:
        # map() keeps submission order
        return list(pool.map(lambda b: func(*b), bounds))


def format_duration(seconds: float) -> str:
    """Человекочитаемая длительность: "1s 5ms 20us"."""
    total_ns = int(round(seconds * 1_000_000_000))
    if total_ns <= 0:
        return "0s"
    units = (
        ("h", 3600 * 1_000_000_000),
        ("m", 60 * 1_000_000_000),
        ("s", 1_000_000_000),
        ("ms", 1_000_000),
        ("us", 1_000),
        ("ns", 1),
    )
    parts = []
    for suffix, size in units:
        value, total_ns = divmod(total_ns, size)
        if value:
            parts.append(f"{value}{suffix}")
    return " ".join(parts)
