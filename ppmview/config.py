"""
Configuration
=============
Central registry of global constants for the viewer and the decoder pool.

Exports:
    MAX_WINDOW_WIDTH, MAX_WINDOW_HEIGHT (int): Upper bounds of the viewer window, px.
    DEFAULT_WORKERS (int): Size of the worker pool used for chunked pixel maps.
    MIN_CHUNK_ITEMS (int): Smallest chunk worth handing to a separate worker.
"""
import os

# Display bounds belong to the viewer only; the decoder has no size ceiling.
MAX_WINDOW_WIDTH: int = 800
MAX_WINDOW_HEIGHT: int = 600

WINDOW_TITLE_PREFIX: str = "PPM Viewer"

DEFAULT_WORKERS: int = min(8, os.cpu_count() or 1)
MIN_CHUNK_ITEMS: int = 64 * 1024

LOG_FORMAT: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT: str = "%H:%M:%S"
