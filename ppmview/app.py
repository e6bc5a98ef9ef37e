import customtkinter as ctk

from ppmview.controllers.app_controller import AppController
from ppmview.services.display_service import DisplayService
from ppmview.services.image_service import LoadResult
from ppmview.ui.image_viewer import ImageViewer
from ppmview.ui.info_panel import InfoPanel


class PpmViewerApp(ctk.CTk):
    def __init__(self, result: LoadResult) -> None:
        super().__init__()
        ctk.set_appearance_mode("system")
        ctk.set_default_color_theme("blue")

        # window fits the image, capped by the configured bounds
        width, height = DisplayService().window_size(result.image)
        self.geometry(f"{max(width, 1)}x{max(height, 1) + 40}")

        # root layout: viewer on top, info bar below
        self.grid_columnconfigure(0, weight=1)
        self.grid_rowconfigure(0, weight=1)
        self.grid_rowconfigure(1, weight=0)

        self._viewer = ImageViewer(self, corner_radius=0)
        self._viewer.grid(row=0, column=0, sticky="nsew")

        self._info = InfoPanel(self)
        self._info.grid(row=1, column=0, sticky="ew")

        self._controller = AppController(viewer=self._viewer, info_panel=self._info, window=self)
        self._controller.bind_events()
        self._controller.show(result)
