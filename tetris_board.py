
"""Board helpers: new_board, valid_position, merge, clear_lines"""
from typing import List
from tetris_piece import Shape

Board = List[List[int]]

def new_board(rows: int, cols: int) -> Board:
    if rows <= 0 or cols <= 0:
        raise ValueError(f"board dimensions must be positive, got {rows}x{cols}")
    return [[0]*cols for _ in range(rows)]

def valid_position(board: Board, shape: Shape, ox: int, oy: int) -> bool:
    # Only filled cells are bounds-checked; empty cells may overhang the edges.
    rows, cols = len(board), len(board[0])
    for y,row in enumerate(shape):
        for x,v in enumerate(row):
            if not v: continue
            bx,by = ox+x, oy+y
            if bx<0 or bx>=cols or by<0 or by>=rows: return False
            if board[by][bx]: return False
    return True

def merge(board: Board, shape: Shape, ox: int, oy: int):
    for y,r in enumerate(shape):
        for x,v in enumerate(r):
            if v: board[oy+y][ox+x] = 1

def clear_lines(board: Board, include_top: bool = False) -> int:
    """Removes complete rows bottom-up and returns how many were cleared.

    Row 0 is never examined unless include_top is set.
    """
    cols = len(board[0])
    stop = 0 if include_top else 1
    c=0; y=len(board)-1
    while y>=stop:
        if all(board[y]):
            del board[y]; board.insert(0,[0]*cols); c+=1
        else: y-=1
    return c
