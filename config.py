# Configuration values for the circle board.

WINDOW_TITLE = "Circle Board"

CANVAS_WIDTH = 800
CANVAS_HEIGHT = 600
CANVAS_BG = "#FFFFFF"

DEFAULT_COLOR = "#000000"
DEFAULT_RADIUS = 20

# Wheel resize
RADIUS_STEP = 2
MIN_RADIUS = 5

HIGHLIGHT_COLOR = "red"
NOT_AVAILABLE = "N/A"

COLORS = [
    "#000000",
    "#FF4D4D",
    "#FF9500",
    "#FFD60A",
    "#32D74B",
    "#00FF00",
    "#0A84FF",
    "#64D2FF",
    "#BF5AF2",
    "#FF2D55",
]

THEME = {
    "bg": "#1F2125",
    "panel": "#262A30",
    "panel_alt": "#2F343C",
    "text": "#E6E6E6",
    "muted": "#9AA0A6",
    "accent": "#0A84FF",
}

LOG_LEVEL = "WARNING"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
