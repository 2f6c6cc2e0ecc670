from PySide6.QtCore import Qt, QRectF, QPointF
from PySide6.QtGui import QBrush, QPen, QColor, QFont

import config


class PainterSurface:
    """Adapta un QPainter a la superficie de dibujo del generador."""

    def __init__(self, painter):
        self.painter = painter

    def draw_line(self, start, end, width, color):
        # Grosor 0 en Qt = línea cosmética de 1px (la más fina posible)
        self.painter.setPen(QPen(QColor(color), width, Qt.SolidLine, Qt.RoundCap, Qt.RoundJoin))
        self.painter.drawLine(QPointF(start.x, start.y), QPointF(end.x, end.y))

    def draw_leaf(self, center, diameter, color):
        # La hoja queda centrada sobre el extremo de la rama
        self.painter.setPen(Qt.NoPen)
        self.painter.setBrush(QBrush(QColor(color)))
        self.painter.drawEllipse(QRectF(center.x - diameter / 2, center.y - diameter / 2, diameter, diameter))


def draw_background(painter, rect):
    painter.fillRect(rect, config.BG_COLOR)


def draw_instructions(painter, rect, text):
    painter.save()
    font = QFont(painter.font())
    font.setPointSize(config.INSTRUCTIONS_FONT_SIZE)
    painter.setFont(font)
    painter.setPen(QPen(config.TEXT_COLOR))
    banner = QRectF(rect.x(), rect.y() + config.INSTRUCTIONS_MARGIN, rect.width(), font.pointSize() * 2)
    painter.drawText(banner, Qt.AlignHCenter | Qt.AlignVCenter, text)
    painter.restore()


def draw_shortcuts(painter, rect):
    painter.setPen(QPen(config.TEXT_COLOR))
    y = rect.height() - 25 * len(config.SHORTCUTS)
    for line in config.SHORTCUTS:
        painter.drawText(10, int(y), line); y += 25


def draw_trunk_preview(painter, start, end):
    """Guía discontinua mientras el usuario arrastra."""
    painter.save()
    painter.setPen(QPen(config.PREVIEW_COLOR, 1, Qt.DashLine))
    painter.drawLine(QPointF(start.x, start.y), QPointF(end.x, end.y))
    painter.restore()
