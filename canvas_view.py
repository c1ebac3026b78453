from __future__ import annotations

from typing import Optional

import tkinter as tk
from matplotlib import colors

import config
from canvas_controller import BoardController
from model import Board, Circle


class CanvasView:
    def __init__(self, master: tk.Widget, board: Board, controller: BoardController) -> None:
        """Description: Init
        Inputs: master: tk.Widget, board: Board, controller: BoardController
        """
        self.board = board
        self._controller = controller
        self.canvas = tk.Canvas(
            master,
            width=config.CANVAS_WIDTH,
            height=config.CANVAS_HEIGHT,
            bg=config.CANVAS_BG,
            highlightthickness=0,
        )

        self.canvas.bind("<ButtonPress-1>", self._on_left_press)
        self.canvas.bind("<B1-Motion>", self._on_left_drag)
        self.canvas.bind("<ButtonRelease-1>", self._on_left_release)
        self.canvas.bind("<MouseWheel>", self._on_mouse_wheel)
        # X11 reports the wheel as buttons 4 and 5.
        self.canvas.bind("<Button-4>", self._on_wheel_up)
        self.canvas.bind("<Button-5>", self._on_wheel_down)
        self.canvas.bind("<<TouchStart>>", self._on_touch_start)
        self.canvas.bind("<<TouchMove>>", self._on_touch_move)
        self.canvas.bind("<<TouchEnd>>", self._on_touch_end)

    def draw(self) -> None:
        """Description: Draw
        Inputs: None
        """
        self.canvas.delete("circle")
        for index, circle in enumerate(self.board.circles):
            fill = config.HIGHLIGHT_COLOR if index == self.board.selected_index else circle.color
            self._draw_circle(circle, fill)

    def _draw_circle(self, circle: Circle, fill: str) -> int:
        """Description: Draw circle
        Inputs: circle: Circle, fill: str
        """
        color = self._tk_color(fill)
        return self.canvas.create_oval(
            circle.x - circle.radius,
            circle.y - circle.radius,
            circle.x + circle.radius,
            circle.y + circle.radius,
            fill=color,
            outline=color,
            tags="circle",
        )

    @staticmethod
    def _tk_color(color: str) -> str:
        """Description: Tk color
        Inputs: color: str
        """
        return colors.to_hex(color)

    def _inside_canvas(self, x: float, y: float) -> bool:
        """Description: Inside canvas
        Inputs: x: float, y: float
        """
        width = self.canvas.winfo_width()
        height = self.canvas.winfo_height()
        return 0 <= x < width and 0 <= y < height

    def _on_left_press(self, event: tk.Event) -> None:
        """Description: On left press
        Inputs: event: tk.Event
        """
        self.canvas.focus_set()
        self._controller.begin_drag(event.x, event.y)

    def _on_left_drag(self, event: tk.Event) -> None:
        """Description: On left drag
        Inputs: event: tk.Event
        """
        self._controller.drag_to(event.x, event.y)

    def _on_left_release(self, event: tk.Event) -> None:
        """Description: On left release
        Inputs: event: tk.Event
        """
        # Browser order is down, up, click; a release off the canvas is no click.
        self._controller.end_drag()
        if self._inside_canvas(event.x, event.y):
            self._controller.select_or_create(event.x, event.y)

    def _on_mouse_wheel(self, event: tk.Event) -> Optional[str]:
        """Description: On mouse wheel
        Inputs: event: tk.Event
        """
        # Tk reports scroll-up as a positive delta.
        return self._resize(-event.delta)

    def _on_wheel_up(self, _event: tk.Event) -> Optional[str]:
        """Description: On wheel up
        Inputs: _event: tk.Event
        """
        return self._resize(-1)

    def _on_wheel_down(self, _event: tk.Event) -> Optional[str]:
        """Description: On wheel down
        Inputs: _event: tk.Event
        """
        return self._resize(1)

    def _resize(self, delta_y: float) -> Optional[str]:
        """Description: Resize
        Inputs: delta_y: float
        """
        if self._controller.resize_selected(delta_y):
            return "break"
        return None

    def _on_touch_start(self, event: tk.Event) -> str:
        """Description: On touch start
        Inputs: event: tk.Event
        """
        self._controller.touch_start(event.x, event.y)
        return "break"

    def _on_touch_move(self, event: tk.Event) -> str:
        """Description: On touch move
        Inputs: event: tk.Event
        """
        self._controller.touch_move(event.x, event.y)
        return "break"

    def _on_touch_end(self, _event: tk.Event) -> str:
        """Description: On touch end
        Inputs: _event: tk.Event
        """
        self._controller.touch_end()
        return "break"
