# Board interaction: circle creation, selection, drag and resize.

from __future__ import annotations

from typing import Callable, NamedTuple, Optional
import logging
import math
import re

from matplotlib import colors

import config
from model import Board, Circle

logger = logging.getLogger(__name__)

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class SelectionInfo(NamedTuple):
    position: str
    radius: str
    color: str


def parse_radius(text: Optional[str]) -> int:
    """Description: Parse radius
    Inputs: text: Optional[str]
    """
    match = _LEADING_INT.match(text or "")
    radius = int(match.group(1)) if match else 0
    if radius <= 0:
        logger.debug("Radius input %r not usable, using %s", text, config.DEFAULT_RADIUS)
        return config.DEFAULT_RADIUS
    return radius


def resolve_color(color: Optional[str]) -> str:
    """Description: Resolve color
    Inputs: color: Optional[str]
    """
    if color and colors.is_color_like(color):
        return color
    logger.warning("Color %r not recognised, using %s", color, config.DEFAULT_COLOR)
    return config.DEFAULT_COLOR


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def _format_number(value: float) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def selection_info(board: Board) -> SelectionInfo:
    """Description: Selection info
    Inputs: board: Board
    """
    circle = board.selected_circle
    if circle is None:
        return SelectionInfo(
            position=f"Position: {config.NOT_AVAILABLE}",
            radius=f"Radius: {config.NOT_AVAILABLE}",
            color=f"Color: {config.NOT_AVAILABLE}",
        )
    return SelectionInfo(
        position=f"Position: ({_round_half_up(circle.x)}, {_round_half_up(circle.y)})",
        radius=f"Radius: {_format_number(circle.radius)}",
        color=f"Color: {circle.color}",
    )


class BoardController:
    def __init__(
        self,
        board: Board,
        get_color: Callable[[], str],
        get_radius_text: Callable[[], str],
        on_change: Optional[Callable[[], None]] = None,
    ) -> None:
        """Description: Init
        Inputs: board: Board, get_color: Callable[[], str], get_radius_text: Callable[[], str], on_change: Optional[Callable[[], None]]
        """
        self.board = board
        self._get_color = get_color
        self._get_radius_text = get_radius_text
        self._on_change = on_change

    def select_or_create(self, x: float, y: float) -> bool:
        """Description: Select or create
        Inputs: x: float, y: float
        """
        index = self.board.find_circle_index(x, y)
        if index is None:
            radius = parse_radius(self._get_radius_text())
            color = resolve_color(self._get_color())
            circle = Circle(x=x, y=y, radius=radius, color=color)
            index = self.board.add_circle(circle)
            logger.debug("Created circle %d at (%s, %s) r=%s", index, x, y, circle.radius)
        self.board.select(index)
        self._notify_changed()
        return True

    def begin_drag(self, x: float, y: float) -> bool:
        """Description: Begin drag
        Inputs: x: float, y: float
        """
        circle = self.board.selected_circle
        if circle is None or not circle.contains(x, y):
            return False
        self.board.dragging = True
        self.board.drag_offset = (x - circle.x, y - circle.y)
        logger.debug("Drag started on circle %d", self.board.selected_index)
        return True

    def drag_to(self, x: float, y: float) -> bool:
        """Description: Drag to
        Inputs: x: float, y: float
        """
        circle = self.board.selected_circle
        if not self.board.dragging or circle is None:
            return False
        offset_x, offset_y = self.board.drag_offset
        circle.x = x - offset_x
        circle.y = y - offset_y
        self._notify_changed()
        return True

    def end_drag(self) -> bool:
        """Description: End drag
        Inputs: None
        """
        self.board.dragging = False
        return False

    def touch_start(self, x: float, y: float) -> bool:
        """Description: Touch start
        Inputs: x: float, y: float
        """
        return self.select_or_create(x, y)

    def touch_move(self, x: float, y: float) -> bool:
        """Description: Touch move
        Inputs: x: float, y: float
        """
        # Touch snaps the centre to the finger; the grab offset is not applied.
        circle = self.board.selected_circle
        if circle is None:
            return False
        circle.x = x
        circle.y = y
        self._notify_changed()
        return True

    def touch_end(self) -> bool:
        """Description: Touch end
        Inputs: None
        """
        return self.end_drag()

    def resize_selected(self, delta_y: float) -> bool:
        """Description: Resize selected
        Inputs: delta_y: float
        """
        circle = self.board.selected_circle
        if circle is None:
            return False
        if delta_y < 0:
            circle.radius += config.RADIUS_STEP
        else:
            circle.radius = max(config.MIN_RADIUS, circle.radius - config.RADIUS_STEP)
        self._notify_changed()
        return True

    def delete_selected(self) -> bool:
        """Description: Delete selected
        Inputs: None
        """
        index = self.board.selected_index
        if self.board.remove_selected() is None:
            return False
        logger.debug("Deleted circle %d", index)
        self._notify_changed()
        return True

    def clear(self) -> bool:
        """Description: Clear
        Inputs: None
        """
        count = len(self.board.circles)
        self.board.clear()
        logger.debug("Cleared %d circles", count)
        self._notify_changed()
        return True

    def _notify_changed(self) -> None:
        if self._on_change:
            self._on_change()
