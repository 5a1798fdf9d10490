"""Pygame practice board for generated puzzles."""

from .layout import BoardGeometry, compute_geometry
from .toolkit import RicochetBoardUI, ensure_pygame

__all__ = [
    "BoardGeometry",
    "RicochetBoardUI",
    "compute_geometry",
    "ensure_pygame",
]
