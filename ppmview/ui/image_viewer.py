"""Виджет просмотра изображения: показ в масштабе 1:1 и панорамирование.

Принципы:
- SRP: отвечает только за представление изображения на канве.
- Чистый код: публичный API отделён от обработчиков событий.
"""
from __future__ import annotations

from typing import Optional, Tuple

import customtkinter as ctk
import tkinter as tk
from PIL import Image, ImageTk


class ImageViewer(ctk.CTkFrame):
    """Канва с изображением; если оно больше окна, его можно двигать мышью."""
    def __init__(self, master: ctk.CTk | tk.Misc, **kwargs) -> None:
        super().__init__(master, **kwargs)
        self.grid_rowconfigure(0, weight=1)
        self.grid_columnconfigure(0, weight=1)

        self._canvas = tk.Canvas(self, highlightthickness=0, bg=self._get_canvas_bg())
        self._canvas.grid(row=0, column=0, sticky="nsew")

        self._image: Optional[Image.Image] = None
        self._tk_image: Optional[ImageTk.PhotoImage] = None
        self._image_top_left: Tuple[int, int] = (0, 0)

        # panning state
        self._pan_start_canvas_xy: Optional[Tuple[int, int]] = None
        self._pan_start_top_left: Optional[Tuple[int, int]] = None

        self._canvas.bind("<Configure>", self._on_canvas_resize)
        self._canvas.bind("<ButtonPress-1>", self._on_pan_start)
        self._canvas.bind("<B1-Motion>", self._on_pan_move)
        self._canvas.bind("<ButtonRelease-1>", self._on_pan_end)

    # ---- Public API ----
    def set_image(self, image: Image.Image) -> None:
        """Устанавливает изображение и прижимает его к левому верхнему углу."""
        self._image = image
        self._tk_image = ImageTk.PhotoImage(image)
        self._image_top_left = (0, 0)
        self._render_image()

    # ---- Internals ----
    def _render_image(self) -> None:
        self._canvas.delete("all")
        if self._tk_image is None:
            return
        x, y = self._clamp_top_left(*self._image_top_left)
        self._image_top_left = (x, y)
        self._canvas.create_image(x, y, image=self._tk_image, anchor="nw")

    def _clamp_top_left(self, x: int, y: int) -> Tuple[int, int]:
        if self._image is None:
            return 0, 0
        canvas_w = int(self._canvas.winfo_width())
        canvas_h = int(self._canvas.winfo_height())
        img_w, img_h = self._image.size
        min_x = min(0, canvas_w - img_w)
        min_y = min(0, canvas_h - img_h)
        return max(min_x, min(0, x)), max(min_y, min(0, y))

    def _on_canvas_resize(self, _event: tk.Event) -> None:
        self._render_image()

    def _get_canvas_bg(self) -> str:
        return "#1f1f1f" if ctk.get_appearance_mode().lower() == "dark" else "#f2f2f2"

    # ---- Panning ----
    def _on_pan_start(self, event: tk.Event) -> None:
        self._pan_start_canvas_xy = (event.x, event.y)
        self._pan_start_top_left = self._image_top_left

    def _on_pan_move(self, event: tk.Event) -> None:
        if self._pan_start_canvas_xy is None or self._pan_start_top_left is None:
            return
        sx, sy = self._pan_start_canvas_xy
        ox, oy = self._pan_start_top_left
        self._image_top_left = (ox + event.x - sx, oy + event.y - sy)
        self._render_image()

    def _on_pan_end(self, _event: tk.Event) -> None:
        self._pan_start_canvas_xy = None
        self._pan_start_top_left = None
