"""Точка входа: декодирует PPM-файл, печатает сведения и открывает окно просмотра."""
from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from ppmview.logging_config import setup_logging
from ppmview.models.errors import PpmError
from ppmview.services.image_service import ImageService, LoadResult
from ppmview.utils import format_duration

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="ppmview", description="Просмотр изображений PPM (P3/P6).")
    parser.add_argument("input_file", help="путь к файлу .ppm")
    parser.add_argument("--no-window", action="store_true", help="только вывести сведения, без окна")
    parser.add_argument("--workers", type=int, default=None, help="число потоков для обработки пикселей")
    parser.add_argument("-v", "--verbose", action="store_true", help="подробный лог")
    parser.add_argument("--log-file", default=None, help="дополнительно писать лог в файл")
    return parser


def print_summary(result: LoadResult) -> None:
    image = result.image
    print(f"Magic number: {image.magic_number}")
    print(f"Image width: {image.width}")
    print(f"Image height: {image.height}")
    print(f"Max value: {image.max_val}")
    print(f"\nDuration: {format_duration(result.seconds)}")


def _show_window(result: LoadResult) -> None:
    # GUI stack is imported only when a window is actually requested
    from ppmview.app import PpmViewerApp

    app = PpmViewerApp(result)
    app.mainloop()


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(level=logging.DEBUG if args.verbose else logging.WARNING, log_file=args.log_file)

    logger.info("Decoding %s", args.input_file)
    try:
        result = ImageService(workers=args.workers).load_packed(args.input_file)
    except PpmError as exc:
        logger.debug("Decode failed", exc_info=True)
        print(f"error: {exc}", file=sys.stderr)
        return 1

    print_summary(result)

    if args.no_window:
        return 0
    if result.image.width == 0 or result.image.height == 0:
        print("error: изображение нулевого размера нельзя показать", file=sys.stderr)
        return 1
    _show_window(result)
    return 0


if __name__ == "__main__":
    sys.exit(main())
