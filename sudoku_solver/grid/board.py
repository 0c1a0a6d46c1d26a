# -*- coding: utf-8 -*-
"""
盤面の構造（行・列・ブロック）と妥当性判定をまとめたモジュールです。

盤面は shape = (9, 9) の numpy 配列で、0 が空きマス、1..9 が数字です。
座標はすべて 0 始まりの (row, col) で扱います。
ブロック番号は左上から行優先で 0..8 です。

   0 | 1 | 2
  ---+---+---
   3 | 4 | 5
  ---+---+---
   6 | 7 | 8
"""

from __future__ import annotations

from typing import List

import numpy as np

from ..config import BOX_SIZE, EMPTY, GRID_SIZE
from ..types import CellCoord
from .parser import normalize_grid

ALL_DIGITS = range(1, GRID_SIZE + 1)


# ----------------------------------------------------------------------
# 構造
# ----------------------------------------------------------------------

def block_index(row: int, col: int) -> int:
    """マス (row, col) を含むブロックの番号を返します。"""
    return (row // BOX_SIZE) * BOX_SIZE + col // BOX_SIZE


def block_origin(block: int) -> CellCoord:
    """ブロックの左上マスの座標を返します。"""
    return ((block // BOX_SIZE) * BOX_SIZE, (block % BOX_SIZE) * BOX_SIZE)


def row_cells(row: int) -> List[CellCoord]:
    return [(row, c) for c in range(GRID_SIZE)]


def col_cells(col: int) -> List[CellCoord]:
    return [(r, col) for r in range(GRID_SIZE)]


def block_cells(block: int) -> List[CellCoord]:
    r0, c0 = block_origin(block)
    return [(r0 + i, c0 + j) for i in range(BOX_SIZE) for j in range(BOX_SIZE)]


def sees(a: CellCoord, b: CellCoord) -> bool:
    """
    2 つのマスが同じ行・列・ブロックのいずれかに属するかを返します。

    同じマス同士は False とします。
    """
    if a == b:
        return False
    return a[0] == b[0] or a[1] == b[1] or block_index(*a) == block_index(*b)


# ----------------------------------------------------------------------
# 妥当性判定
# ----------------------------------------------------------------------

def _check_cell(row: int, col: int) -> None:
    if not (0 <= row < GRID_SIZE and 0 <= col < GRID_SIZE):
        raise ValueError(f"Cell out of range: ({row}, {col})")


def is_legal_placement(grid: np.ndarray, row: int, col: int, digit: int) -> bool:
    """
    数字 digit を (row, col) に置いても、同じ行・列・ブロックの
    「他のマス」に同じ数字が無いかどうかを返します。

    (row, col) 自身の値は比較しません。盤面は変更しません。
    リストや文字列の盤面は normalize_grid で変換してから判定します。
    """
    _check_cell(row, col)
    if not 1 <= digit <= GRID_SIZE:
        raise ValueError(f"Digit out of range: {digit}")
    if not isinstance(grid, np.ndarray):
        grid = normalize_grid(grid)

    for c in range(GRID_SIZE):
        if c != col and grid[row, c] == digit:
            return False

    for r in range(GRID_SIZE):
        if r != row and grid[r, col] == digit:
            return False

    r0, c0 = block_origin(block_index(row, col))
    for r in range(r0, r0 + BOX_SIZE):
        for c in range(c0, c0 + BOX_SIZE):
            if (r, c) != (row, col) and grid[r, c] == digit:
                return False

    return True


def has_duplicate(grid: np.ndarray, row: int, col: int) -> bool:
    """
    (row, col) に置かれた数字が、同じ行・列・ブロックの他のマスにもあるかを返します。

    空きマスなら False です。
    """
    _check_cell(row, col)
    value = int(grid[row, col])
    if value == EMPTY:
        return False
    return not is_legal_placement(grid, row, col, value)


def is_cell_correct(grid: np.ndarray, solution: np.ndarray, row: int, col: int) -> bool:
    """マスの値が解答と一致するかを返します。空きマスは正しいものとみなします。"""
    _check_cell(row, col)
    value = int(grid[row, col])
    if value == EMPTY:
        return True
    return value == int(solution[row, col])


def is_board_complete(grid: np.ndarray, solution: np.ndarray) -> bool:
    """すべてのマスが解答と一致しているか（クリア判定）を返します。"""
    return bool(np.array_equal(np.asarray(grid), np.asarray(solution)))


def find_incorrect_cells(
    grid: np.ndarray,
    solution: np.ndarray,
    show_incorrect: bool = True,
) -> np.ndarray:
    """
    「誤り」として表示すべきマスの bool マスク (9, 9) を返します。

    - 同じ行・列・ブロックに同じ数字がある場合は常に誤り
    - show_incorrect=True のときは、解答と食い違う数字も誤り
    - 空きマスは誤りになりません
    """
    mask = np.zeros((GRID_SIZE, GRID_SIZE), dtype=bool)
    for r in range(GRID_SIZE):
        for c in range(GRID_SIZE):
            if grid[r, c] == EMPTY:
                continue
            wrong_value = show_incorrect and not is_cell_correct(grid, solution, r, c)
            mask[r, c] = has_duplicate(grid, r, c) or wrong_value
    return mask


def is_valid_solution(grid: np.ndarray) -> bool:
    """
    盤面がすべて埋まっていて、各行・各列・各ブロックに
    1..9 がちょうど 1 回ずつ現れるかを返します。
    """
    arr = np.asarray(grid)
    if arr.shape != (GRID_SIZE, GRID_SIZE):
        return False

    expected = set(ALL_DIGITS)
    for i in range(GRID_SIZE):
        if set(arr[i, :].tolist()) != expected:
            return False
        if set(arr[:, i].tolist()) != expected:
            return False
        block = [int(arr[r, c]) for r, c in block_cells(i)]
        if set(block) != expected:
            return False
    return True
