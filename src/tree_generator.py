"""Generador recursivo de árboles.

A partir de un tronco (dos puntos) dibuja ramas cada vez más cortas y finas
hasta llegar a la generación 0, donde cada rama termina en una hoja. El árbol
nunca se guarda: sólo existe como la secuencia de llamadas de dibujo que
recibe la superficie.
"""
import logging
import math
import random
from dataclasses import dataclass, field, replace
from typing import NamedTuple, Protocol

import config
from geometry import Point, Segment, angle_between, is_degenerate, point_at_angle, segment_length

logger = logging.getLogger(__name__)


class DrawingSurface(Protocol):
    def draw_line(self, start, end, width, color): ...

    def draw_leaf(self, center, diameter, color): ...


class TreeStats(NamedTuple):
    lines: int = 0
    leaves: int = 0
    resample_failures: int = 0


@dataclass(frozen=True)
class TreeParams:
    generations: int = config.NUM_GENERATIONS
    children: int = config.NUM_CHILDREN
    golden_ratio: float = config.GOLDEN_RATIO
    max_branching_angle: float = config.MAX_BRANCHING_ANGLE
    leaf_diameter: int = config.LEAF_DIAM
    trunk_twins: int = config.TRUNK_TWINS
    branch_color: object = field(default_factory=lambda: config.BRANCH_COLOR)
    leaf_colors: tuple = config.LEAF_COLORS
    max_attempts: int = config.MAX_SAMPLING_ATTEMPTS
    seed: object = None

    def __post_init__(self):
        if self.generations < 0:
            raise ValueError(f"generations must be >= 0, got {self.generations}")
        if self.children < 1 or self.trunk_twins < 1:
            raise ValueError("children and trunk_twins must be >= 1")
        if self.golden_ratio <= 0:
            raise ValueError(f"golden_ratio must be positive, got {self.golden_ratio}")
        if not self.leaf_colors:
            raise ValueError("leaf_colors must not be empty")
        if self.max_attempts < 1:
            raise ValueError("max_attempts must be >= 1")

    def with_overrides(self, **kwargs):
        return replace(self, **kwargs)

    def child_count(self, generation, max_generations):
        # Sólo el tronco se multiplica: varias primeras ramas desde el mismo punto
        if generation == max_generations:
            return self.children * self.trunk_twins
        return self.children


def expected_counts(params, max_generations=None):
    """Número exacto de (líneas, hojas) que produce un tronco válido."""
    if max_generations is None:
        max_generations = params.generations
    lines, level = 0, 1
    for generation in range(max_generations, -1, -1):
        lines += level
        if generation > 0:
            level *= params.child_count(generation, max_generations)
    return lines, level


class BranchGenerator:
    def __init__(self, surface, params, rng, max_generations):
        self.surface = surface
        self.params = params
        self.rng = rng
        self.max_generations = max_generations
        self.lines = 0
        self.leaves = 0
        self.resample_failures = 0

    def stats(self):
        return TreeStats(self.lines, self.leaves, self.resample_failures)

    def draw_branch(self, start, end, generation):
        # El grosor es la propia generación: cuanto más profunda, más fina
        self.surface.draw_line(start, end, generation, self.params.branch_color)
        self.lines += 1

        if generation == 0:
            self.surface.draw_leaf(end, self.params.leaf_diameter, self.random_leaf_color())
            self.leaves += 1
            return

        for _ in range(self.params.child_count(generation, self.max_generations)):
            self.draw_branch(end, self.new_end_point(start, end), generation - 1)

    def new_end_point(self, parent_start, parent_end):
        """Muestreo por rechazo de un extremo dentro del cono permitido."""
        parent = Segment(parent_start, parent_end)
        length = segment_length(parent) / self.params.golden_ratio

        for _ in range(self.params.max_attempts):
            candidate = point_at_angle(parent_end, length, self.rng.random() * 2 * math.pi)
            if angle_between(parent, Segment(parent_end, candidate)) <= self.params.max_branching_angle:
                return candidate

        self.resample_failures += 1
        logger.warning("No valid branching angle after %d attempts; continuing straight",
                       self.params.max_attempts)
        heading = math.atan2(parent_end.y - parent_start.y, parent_end.x - parent_start.x)
        return point_at_angle(parent_end, length, heading)

    def random_leaf_color(self):
        colors = self.params.leaf_colors
        return colors[min(int(self.rng.random() * len(colors)), len(colors) - 1)]


def generate_tree(surface: DrawingSurface, trunk_start, trunk_end, max_generations=None, params=None, rng=None):
    """Dibuja un árbol completo sobre `surface` con el tronco trunk_start -> trunk_end.

    `rng` sólo necesita un método random() en [0, 1); si no se pasa se crea
    uno por llamada (con `params.seed` si está definido). Un tronco degenerado
    no dibuja nada.
    """
    params = params or TreeParams()
    if max_generations is None:
        max_generations = params.generations
    trunk_start, trunk_end = Point(*trunk_start), Point(*trunk_end)
    if is_degenerate(trunk_start, trunk_end):
        logger.debug("Degenerate trunk at (%.1f, %.1f); nothing to draw", trunk_start.x, trunk_start.y)
        return TreeStats()
    if max_generations < 0:
        raise ValueError(f"max_generations must be >= 0, got {max_generations}")

    if rng is None:
        rng = random.Random(params.seed)

    generator = BranchGenerator(surface, params, rng, max_generations)
    generator.draw_branch(trunk_start, trunk_end, max_generations)
    stats = generator.stats()
    logger.debug("Tree drawn: %d lines, %d leaves, %d sampling fallbacks",
                 stats.lines, stats.leaves, stats.resample_failures)
    return stats
