import math
from typing import NamedTuple


class Point(NamedTuple):
    x: float
    y: float


class Segment(NamedTuple):
    start: Point
    end: Point


def distance(a, b):
    return math.hypot(b.x - a.x, b.y - a.y)


def segment_length(segment):
    return distance(segment.start, segment.end)


def is_degenerate(start, end):
    return start.x == end.x and start.y == end.y


def point_at_angle(origin, length, angle):
    """Punto a `length` de `origin` en la dirección `angle` (radianes).

    x usa el coseno, y usa el seno. No valida `length`.
    """
    return Point(origin.x + length * math.cos(angle),
                 origin.y + length * math.sin(angle))


def to_vector(segment):
    """Traslada el segmento al origen (end - start)."""
    return Point(segment.end.x - segment.start.x, segment.end.y - segment.start.y)


def angle_between(seg1, seg2):
    """Ángulo sin signo entre dos segmentos, en [0, pi].

    Con un segmento de longitud cero el resultado es NaN.
    """
    v1, v2 = to_vector(seg1), to_vector(seg2)
    numer = v1.x * v2.x + v1.y * v2.y
    denom = math.hypot(v1.x, v1.y) * math.hypot(v2.x, v2.y)
    if denom == 0:
        return math.nan
    # El ruido de coma flotante puede dejar el coseno justo fuera de [-1, 1]
    return math.acos(max(-1.0, min(1.0, numer / denom)))
