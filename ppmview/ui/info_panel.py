"""Панель со сведениями о заголовке открытого файла и времени декодирования."""
from __future__ import annotations

import customtkinter as ctk

from ppmview.models.image_model import PpmImage


class InfoPanel(ctk.CTkFrame):
    def __init__(self, master: ctk.CTk, **kwargs) -> None:
        super().__init__(master, **kwargs)
        self.grid_columnconfigure(1, weight=1)

        self._values = {}
        rows = (
            ("filename", "Файл"),
            ("magic", "Формат"),
            ("dims", "Размер"),
            ("max_val", "Максимум"),
            ("duration", "Декодирование"),
        )
        for column, (key, title) in enumerate(rows):
            var = ctk.StringVar(value="—")
            self._values[key] = var
            label = ctk.CTkLabel(self, text=f"{title}:", font=ctk.CTkFont(weight="bold"))
            label.grid(row=0, column=column * 2, padx=(8, 2), pady=4, sticky="w")
            value = ctk.CTkLabel(self, textvariable=var, anchor="w")
            value.grid(row=0, column=column * 2 + 1, padx=(0, 8), pady=4, sticky="w")

    def set_image_info(self, image: PpmImage, duration: str) -> None:
        """Обновляет поля по данным изображения."""
        self._values["filename"].set(image.filename)
        self._values["magic"].set(image.magic_number)
        self._values["dims"].set(f"{image.width} × {image.height}")
        self._values["max_val"].set(str(image.max_val))
        self._values["duration"].set(duration)
