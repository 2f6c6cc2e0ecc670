import math

from PySide6.QtGui import QColor

# Colores del Tema
BG_COLOR = QColor(0, 0, 0)
TEXT_COLOR = QColor(200, 200, 200)
PREVIEW_COLOR = QColor(200, 200, 200, 120)

# Colores del árbol (tronco/ramas y hojas)
LIGHT_BROWN = QColor(105, 72, 33)
GREEN = QColor(28, 127, 25)
ORANGE = QColor(169, 79, 13)
RED = QColor(124, 26, 12)
YELLOW = QColor(158, 162, 19)

BRANCH_COLOR = LIGHT_BROWN
LEAF_COLORS = (ORANGE, RED, YELLOW, GREEN)

# Generador de ramas
NUM_GENERATIONS = 6        # Más generaciones = más detalle
NUM_CHILDREN = 3           # Hijos por rama (árbol más o menos frondoso)
GOLDEN_RATIO = 1.618       # Cada hija mide padre / phi
MAX_BRANCHING_ANGLE = 0.5 * math.pi
LEAF_DIAM = 5
TRUNK_TWINS = 5            # Copias de la primera generación (árbol más denso)
MAX_SAMPLING_ATTEMPTS = 1000

# Ventana
WINDOW_TITLE = "A Single Tree Painting"
FRAME_WIDTH = 700
FRAME_HEIGHT = 900

INSTRUCTIONS_TEXT = "Haz clic, arrastra y suelta para pintar un árbol"
INSTRUCTIONS_MARGIN = 20
INSTRUCTIONS_FONT_SIZE = 14

# Atajos mostrados en la esquina inferior
SHORTCUTS = ["C: Limpiar", "ESC: Salir"]
