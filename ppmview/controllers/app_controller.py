"""Контроллер приложения: связывает результат декодирования с виджетами.

SOLID:
- SRP: класс только передаёт данные из сервисов в UI и обрабатывает события окна.
- DIP: декодирование и конвертация живут в сервисах.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field

import customtkinter as ctk

from ppmview.config import WINDOW_TITLE_PREFIX
from ppmview.services.display_service import DisplayService
from ppmview.services.image_service import LoadResult
from ppmview.ui.image_viewer import ImageViewer
from ppmview.ui.info_panel import InfoPanel
from ppmview.utils import format_duration

logger = logging.getLogger(__name__)


@dataclass
class AppController:
    """Связывает элементы UI с прикладной логикой.

    Ответственности:
    - Бинд событий окна (Escape закрывает окно).
    - Показ декодированного изображения и сведений о нём.
    """
    viewer: ImageViewer
    info_panel: InfoPanel
    window: ctk.CTk

    _display_service: DisplayService = field(default_factory=DisplayService)

    def bind_events(self) -> None:
        self.window.bind("<Escape>", self._handle_escape)

    def show(self, result: LoadResult) -> None:
        """Отображает изображение из упакованного буфера и обновляет панель сведений."""
        image = result.image
        self.window.title(f"{WINDOW_TITLE_PREFIX}: {image.filename}")
        self.viewer.set_image(self._display_service.to_pil_image(image, result.packed))
        self.info_panel.set_image_info(image, format_duration(result.seconds))
        logger.info("Showing %s (%dx%d, %s)", image.filename, image.width, image.height, image.magic_number)

    # ---- Handlers ----
    def _handle_escape(self, _event: object) -> None:
        logger.debug("Escape pressed, closing window")
        self.window.destroy()
