
"""Piece model, shapes, clockwise rotation"""
from dataclasses import dataclass
from typing import Dict, Iterator, Tuple

Shape = Tuple[Tuple[int, ...], ...]

# Minimal bounding boxes, 1s are blocks
SHAPES: Dict[str, Shape] = {
    "I": ((1,1,1,1),),
    "T": ((1,1,1),(0,1,0)),
    "O": ((1,1),(1,1)),
    "S": ((0,1,1),(1,1,0)),
    "Z": ((1,1,0),(0,1,1)),
    "J": ((1,0,0),(1,1,1)),
    "L": ((0,0,1),(1,1,1)),
}

def rotate_cw(m: Shape) -> Shape:
    """R x C -> C x R, with new[x][R-1-y] = old[y][x]."""
    return tuple(zip(*m[::-1]))

def shape_width(m: Shape) -> int:
    return len(m[0]) if m else 0

@dataclass(frozen=True)
class Piece:
    shape: Shape
    x: int
    y: int

    @staticmethod
    def spawn(shape: Shape, cols: int) -> "Piece":
        return Piece(shape, (cols - shape_width(shape)) // 2, 0)

    def moved(self, dx: int, dy: int) -> "Piece":
        return Piece(self.shape, self.x + dx, self.y + dy)

    def rotated(self) -> "Piece":
        return Piece(rotate_cw(self.shape), self.x, self.y)

    def cells(self) -> Iterator[Tuple[int, int]]:
        for r, row in enumerate(self.shape):
            for c, v in enumerate(row):
                if v:
                    yield self.x + c, self.y + r
