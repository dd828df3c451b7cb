
"""Shape sources for the engine"""
import random
from typing import List, Optional, Protocol

from tetris_piece import SHAPES, Shape


class ShapeSource(Protocol):
    def next_shape(self) -> Shape: ...


class RandomShapes:
    """Uniform choice with replacement over the catalog; no bag, no history."""
    PIECES: List[str] = list(SHAPES)

    def __init__(self, seed: Optional[int] = None):
        self.rng = random.Random(seed)

    def next_name(self) -> str:
        return self.rng.choice(self.PIECES)

    def next_shape(self) -> Shape:
        return SHAPES[self.next_name()]
