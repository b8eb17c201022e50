DEFAULT_RECTANGLE_WIDTH = 5.0
DEFAULT_RECTANGLE_HEIGHT = 10.0
DEFAULT_CIRCLE_RADIUS = 7.0

DEMO_RECTANGLE_COLOR = "Azul"
DEMO_CIRCLE_COLOR = "Vermelho"

# PNG preview
DEFAULT_PNG_WIDTH = 800
DEFAULT_PNG_HEIGHT = 600
DEFAULT_PNG_MARGIN = 0.1
DPI = 100

OUTLINE_COLOR = "black"
OUTLINE_WIDTH = 1.0
BORDER_WIDTH = 4.0

# Portuguese color names used by the demo, mapped to matplotlib names
COLOR_ALIASES = {
    "azul": "blue",
    "vermelho": "red",
    "verde": "green",
    "amarelo": "yellow",
    "preto": "black",
    "branco": "white",
    "laranja": "orange",
    "roxo": "purple",
    "cinza": "gray",
    "rosa": "pink",
}
