from __future__ import annotations

import tkinter as tk
from tkinter import colorchooser

import config
from canvas_controller import BoardController, selection_info
from canvas_view import CanvasView
from model import Board


class CircleBoardApp:
    def __init__(self) -> None:
        self.root = tk.Tk()
        self.root.title(config.WINDOW_TITLE)
        self.root.configure(bg=config.THEME["bg"])

        self.board = Board()
        self.color_var = tk.StringVar(value=config.DEFAULT_COLOR)
        self.radius_var = tk.StringVar(value=str(config.DEFAULT_RADIUS))
        self.position_var = tk.StringVar()
        self.radius_info_var = tk.StringVar()
        self.color_info_var = tk.StringVar()

        self.controller = BoardController(
            self.board,
            get_color=self.color_var.get,
            get_radius_text=self.radius_var.get,
            on_change=self._on_board_changed,
        )

        self._build_layout()
        self._bind_shortcuts()

        self.canvas_view.draw()
        self._update_info()

    def run(self) -> None:
        self.root.mainloop()

    def _build_layout(self) -> None:
        self.main_frame = tk.Frame(self.root, bg=config.THEME["bg"])
        self.main_frame.pack(fill=tk.BOTH, expand=True)

        self.main_frame.columnconfigure(0, weight=0)
        self.main_frame.columnconfigure(1, weight=1)
        self.main_frame.columnconfigure(2, weight=0)
        self.main_frame.rowconfigure(0, weight=1)

        self.toolbar_frame = tk.Frame(self.main_frame, bg=config.THEME["panel"], padx=10, pady=10)
        self.toolbar_frame.grid(row=0, column=0, sticky="ns")

        self.canvas_frame = tk.Frame(self.main_frame, bg=config.THEME["bg"], padx=8, pady=8)
        self.canvas_frame.grid(row=0, column=1, sticky="nsew")
        self.canvas_frame.rowconfigure(0, weight=1)
        self.canvas_frame.columnconfigure(0, weight=1)

        self.sidebar_frame = tk.Frame(self.main_frame, bg=config.THEME["panel"], padx=10, pady=10)
        self.sidebar_frame.grid(row=0, column=2, sticky="ns")

        self.canvas_view = CanvasView(self.canvas_frame, self.board, self.controller)
        self.canvas_view.canvas.grid(row=0, column=0, sticky="nsew")

        self._build_toolbar()
        self._build_info_panel()
        self._build_status_bar()

    def _build_toolbar(self) -> None:
        header = tk.Label(self.toolbar_frame, text="Circle", bg=config.THEME["panel"], fg=config.THEME["text"], font=("Segoe UI", 12, "bold"))
        header.pack(anchor="w", pady=(0, 10))

        tk.Label(self.toolbar_frame, text="Color", bg=config.THEME["panel"], fg=config.THEME["muted"], font=("Segoe UI", 10)).pack(anchor="w")
        self.color_swatch = tk.Button(
            self.toolbar_frame,
            textvariable=self.color_var,
            command=self._choose_color,
            bg=config.THEME["panel_alt"],
            fg=config.THEME["text"],
            relief=tk.FLAT,
            pady=4,
        )
        self.color_swatch.pack(fill=tk.X, pady=4)

        palette_frame = tk.Frame(self.toolbar_frame, bg=config.THEME["panel"])
        palette_frame.pack(anchor="w", pady=(0, 8))
        for index, color in enumerate(config.COLORS):
            btn = tk.Button(
                palette_frame,
                bg=color,
                width=2,
                height=1,
                relief=tk.FLAT,
                command=lambda c=color: self._set_color(c),
            )
            btn.grid(row=index // 5, column=index % 5, padx=2, pady=2)

        tk.Label(self.toolbar_frame, text="Radius", bg=config.THEME["panel"], fg=config.THEME["muted"], font=("Segoe UI", 10)).pack(anchor="w")
        self.radius_entry = tk.Entry(self.toolbar_frame, textvariable=self.radius_var, bg=config.THEME["panel_alt"], fg=config.THEME["text"], insertbackground=config.THEME["text"], relief=tk.FLAT, width=10)
        self.radius_entry.pack(fill=tk.X, pady=4)

        sep = tk.Frame(self.toolbar_frame, bg=config.THEME["panel_alt"], height=2)
        sep.pack(fill=tk.X, pady=8)

        delete_btn = tk.Button(
            self.toolbar_frame,
            text="Delete",
            command=self.controller.delete_selected,
            bg=config.THEME["panel_alt"],
            fg=config.THEME["text"],
            relief=tk.FLAT,
            pady=4,
        )
        delete_btn.pack(fill=tk.X, pady=4)

        clear_btn = tk.Button(
            self.toolbar_frame,
            text="Clear",
            command=self.controller.clear,
            bg=config.THEME["panel_alt"],
            fg=config.THEME["text"],
            activebackground=config.THEME["accent"],
            relief=tk.FLAT,
            pady=4,
        )
        clear_btn.pack(fill=tk.X, pady=4)

        self._set_color(self.color_var.get())

    def _build_info_panel(self) -> None:
        title = tk.Label(self.sidebar_frame, text="Selected Circle", bg=config.THEME["panel"], fg=config.THEME["text"], font=("Segoe UI", 12, "bold"))
        title.pack(anchor="w", pady=(0, 8))
        for var in (self.position_var, self.radius_info_var, self.color_info_var):
            label = tk.Label(self.sidebar_frame, textvariable=var, bg=config.THEME["panel"], fg=config.THEME["muted"], font=("Segoe UI", 10), anchor="w")
            label.pack(fill=tk.X, pady=2)

    def _build_status_bar(self) -> None:
        self.status_var = tk.StringVar(value="")
        status = tk.Label(self.root, textvariable=self.status_var, bg=config.THEME["panel_alt"], fg=config.THEME["muted"], anchor="w")
        status.pack(fill=tk.X, side=tk.BOTTOM)

    def _bind_shortcuts(self) -> None:
        self.root.bind("<Delete>", self._on_delete_shortcut)

    def _text_input_focused(self) -> bool:
        widget = self.root.focus_get()
        if widget is None:
            return False
        return isinstance(widget, (tk.Entry, tk.Text, tk.Spinbox))

    def _on_delete_shortcut(self, _event: tk.Event) -> None:
        if self._text_input_focused():
            return
        self.controller.delete_selected()

    def _choose_color(self) -> None:
        color = colorchooser.askcolor(title="Circle Color", initialcolor=self.color_var.get())
        if not color or not color[1]:
            return
        self._set_color(color[1])

    def _set_color(self, color: str) -> None:
        self.color_var.set(color)
        self.color_swatch.configure(bg=color, activebackground=color)

    def _on_board_changed(self) -> None:
        self.canvas_view.draw()
        self._update_info()

    def _update_info(self) -> None:
        info = selection_info(self.board)
        self.position_var.set(info.position)
        self.radius_info_var.set(info.radius)
        self.color_info_var.set(info.color)
        self._update_status()

    def _update_status(self) -> None:
        count = len(self.board.circles)
        self.status_var.set(f"Circles: {count}  |  {self.board.state.capitalize()}")
