import logging
import random

from PySide6.QtWidgets import QWidget
from PySide6.QtCore import Qt
from PySide6.QtGui import QPainter, QPixmap

import config
import painter_surface
from geometry import Point, is_degenerate
from tree_generator import TreeParams, generate_tree

logger = logging.getLogger(__name__)


class Canvas(QWidget):
    def __init__(self, params=None, seed=None):
        super().__init__()
        self.params = params or TreeParams()
        self.fixed_seed = seed

        # State
        self.trunk_start = None
        self.trunk_end = None
        self.tree_seed = None
        self.press_pos = None
        self.drag_pos = None
        self.is_dragging = False
        self.last_stats = None

        # Buffer del árbol (sólo se regenera si cambia el tronco o el tamaño)
        self.tree_pixmap = QPixmap()
        self.needs_tree_update = True

        self.setMinimumSize(100, 100)
        self.setFocusPolicy(Qt.StrongFocus)

    def has_tree(self):
        return self.trunk_start is not None and self.trunk_end is not None

    def plant_tree(self, start, end):
        """Fija un nuevo tronco y repinta. Devuelve False si el gesto es degenerado."""
        if is_degenerate(start, end):
            logger.debug("Ignoring zero-length trunk at (%.1f, %.1f)", start.x, start.y)
            return False

        self.trunk_start, self.trunk_end = start, end
        self.tree_seed = self.fixed_seed if self.fixed_seed is not None else random.getrandbits(32)
        logger.info("Painting tree from (%.0f, %.0f) to (%.0f, %.0f), seed %s",
                    start.x, start.y, end.x, end.y, self.tree_seed)
        self.needs_tree_update = True
        self.update()
        return True

    def clear(self):
        self.trunk_start = self.trunk_end = self.tree_seed = None
        self.last_stats = None
        self.needs_tree_update = True
        self.update()

    def render_tree(self):
        tp = QPainter()
        if tp.begin(self.tree_pixmap):
            tp.setRenderHint(QPainter.Antialiasing)
            painter_surface.draw_background(tp, self.tree_pixmap.rect())
            if self.has_tree():
                # Misma semilla = mismo árbol en cada repintado
                self.last_stats = generate_tree(painter_surface.PainterSurface(tp),
                                                self.trunk_start, self.trunk_end,
                                                params=self.params, rng=random.Random(self.tree_seed))
            tp.end()
        self.needs_tree_update = False

    def paintEvent(self, event):
        if self.width() <= 0 or self.height() <= 0: return

        # El fondo negro sigue al tamaño de la ventana
        size = self.size()
        if self.tree_pixmap.size() != size:
            self.tree_pixmap = QPixmap(size)
            self.needs_tree_update = True
        if self.needs_tree_update:
            self.render_tree()

        painter = QPainter()
        if painter.begin(self):
            painter.setRenderHint(QPainter.Antialiasing)
            painter.drawPixmap(0, 0, self.tree_pixmap)
            if self.is_dragging and self.press_pos is not None and self.drag_pos is not None:
                painter_surface.draw_trunk_preview(painter, self.press_pos, self.drag_pos)
            painter_surface.draw_instructions(painter, self.rect(), config.INSTRUCTIONS_TEXT)
            painter_surface.draw_shortcuts(painter, self.rect())
            painter.end()

    # --- EVENTOS ---
    def mousePressEvent(self, event):
        if event.button() != Qt.LeftButton: return
        self.setFocus()
        pos = event.position()
        self.press_pos = self.drag_pos = Point(pos.x(), pos.y())
        self.is_dragging = True

    def mouseMoveEvent(self, event):
        if not self.is_dragging: return
        pos = event.position()
        self.drag_pos = Point(pos.x(), pos.y())
        self.update()

    def mouseReleaseEvent(self, event):
        if event.button() != Qt.LeftButton or not self.is_dragging: return
        self.is_dragging = False
        pos = event.position()
        release_pos = Point(pos.x(), pos.y())
        if not self.plant_tree(self.press_pos, release_pos):
            self.update()  # Borra la guía aunque no haya árbol nuevo
        self.press_pos = self.drag_pos = None

    def keyPressEvent(self, event):
        if event.key() == Qt.Key_Escape: self.window().close(); return
        if event.key() == Qt.Key_C: self.clear(); return
        super().keyPressEvent(event)
