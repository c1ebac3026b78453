from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

Point = Tuple[float, float]


@dataclass
class Circle:
    x: float
    y: float
    radius: float
    color: str

    def contains(self, x: float, y: float) -> bool:
        """Description: Contains
        Inputs: x: float, y: float
        """
        dx = x - self.x
        dy = y - self.y
        return dx * dx + dy * dy <= self.radius * self.radius


@dataclass
class Board:
    circles: List[Circle] = field(default_factory=list)
    selected_index: Optional[int] = None
    dragging: bool = False
    drag_offset: Point = (0.0, 0.0)

    @property
    def selected_circle(self) -> Optional[Circle]:
        """Description: Selected circle
        Inputs: None
        """
        if self.selected_index is None:
            return None
        return self.circles[self.selected_index]

    @property
    def state(self) -> str:
        """Description: State
        Inputs: None
        """
        if self.selected_index is None:
            return "idle"
        if self.dragging:
            return "dragging"
        return "selected"

    def find_circle_index(self, x: float, y: float) -> Optional[int]:
        """Description: Find circle index
        Inputs: x: float, y: float
        """
        # Topmost first: later circles are drawn over earlier ones.
        for index in range(len(self.circles) - 1, -1, -1):
            if self.circles[index].contains(x, y):
                return index
        return None

    def add_circle(self, circle: Circle) -> int:
        """Description: Add circle
        Inputs: circle: Circle
        """
        self.circles.append(circle)
        return len(self.circles) - 1

    def select(self, index: Optional[int]) -> None:
        """Description: Select
        Inputs: index: Optional[int]
        """
        if index is not None and not 0 <= index < len(self.circles):
            raise IndexError(f"No circle at index {index}")
        self.selected_index = index
        if index is None:
            self.dragging = False

    def remove_selected(self) -> Optional[Circle]:
        """Description: Remove selected
        Inputs: None
        """
        if self.selected_index is None:
            return None
        circle = self.circles.pop(self.selected_index)
        self.select(None)
        return circle

    def clear(self) -> None:
        """Description: Clear
        Inputs: None
        """
        self.circles = []
        self.select(None)
