# -*- coding: utf-8 -*-
"""
バックトラックによる解の探索を行うモジュールです。

2 種類の探索を提供します。

solve
    左上から行優先で最初の空きマスを探し、1..9 を小さい順に試す
    決定的なバックトラック。盤面をその場で埋めます。
    乱数は使わないので、同じ盤面からは常に同じ解が得られます。

count_solutions
    解を limit 個見つけた時点で探索全体を打ち切る数え上げ。
    問題生成で「解がちょうど 1 つか」を判定するために limit=2 で使います。
    数えるだけなので訪問順は結果に影響しません。ここでは
    MRV（Minimum Remaining Values: 候補が最も少ないマスから埋める）
    で枝を減らしています。

どちらも行・列・ブロックで使用済みの数字をビット集合で持つことで、
1 マスあたりの合法判定を O(1) にしています。
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

import numpy as np

from ..config import BOX_SIZE, EMPTY, GRID_SIZE, UNIQUENESS_SOLUTION_LIMIT
from .domains import FULL_MASK, mask_to_digits


@dataclass
class SearchContext:
    """
    探索全体で共有する情報をまとめたクラスです。

    rows / cols / boxes は、各行・列・ブロックで使用済みの数字のビット集合。
    """

    board: List[List[int]]
    rows: List[int] = field(default_factory=lambda: [0] * GRID_SIZE)
    cols: List[int] = field(default_factory=lambda: [0] * GRID_SIZE)
    boxes: List[int] = field(default_factory=lambda: [0] * GRID_SIZE)

    limit: int = 0
    solutions_found: int = 0

    @classmethod
    def from_grid(cls, grid: np.ndarray) -> Optional["SearchContext"]:
        """
        盤面から探索用の状態を作ります。

        すでに置かれている数字同士が衝突している場合は None を返します
        （その盤面には解が無い）。
        """
        ctx = cls(board=np.asarray(grid, dtype=np.int64).tolist())
        for r in range(GRID_SIZE):
            for c in range(GRID_SIZE):
                v = ctx.board[r][c]
                if v == EMPTY:
                    continue
                bit = 1 << (v - 1)
                b = _box(r, c)
                if (ctx.rows[r] | ctx.cols[c] | ctx.boxes[b]) & bit:
                    return None
                ctx.place(r, c, v)
        return ctx

    def free_mask(self, r: int, c: int) -> int:
        return FULL_MASK & ~(self.rows[r] | self.cols[c] | self.boxes[_box(r, c)])

    def place(self, r: int, c: int, v: int) -> None:
        bit = 1 << (v - 1)
        self.board[r][c] = v
        self.rows[r] |= bit
        self.cols[c] |= bit
        self.boxes[_box(r, c)] |= bit

    def clear(self, r: int, c: int, v: int) -> None:
        bit = ~(1 << (v - 1))
        self.board[r][c] = EMPTY
        self.rows[r] &= bit
        self.cols[c] &= bit
        self.boxes[_box(r, c)] &= bit


def _box(r: int, c: int) -> int:
    return (r // BOX_SIZE) * BOX_SIZE + c // BOX_SIZE


# ----------------------------------------------------------------------
# solve
# ----------------------------------------------------------------------

def _solve_from(ctx: SearchContext, start: int) -> bool:
    """行優先で start 番目以降の最初の空きマスから再帰的に埋めます。"""
    for idx in range(start, GRID_SIZE * GRID_SIZE):
        r, c = divmod(idx, GRID_SIZE)
        if ctx.board[r][c] != EMPTY:
            continue

        free = ctx.free_mask(r, c)
        for v in mask_to_digits(free):
            ctx.place(r, c, v)
            if _solve_from(ctx, idx + 1):
                return True
            ctx.clear(r, c, v)
        return False

    return True


def solve(grid: np.ndarray) -> bool:
    """
    盤面をその場で埋めます（決定的なバックトラック）。

    Returns
    -------
    bool
        すべてのマスを埋められたら True。
        False の場合、盤面は呼び出し時のままです。
    """
    ctx = SearchContext.from_grid(grid)
    if ctx is None:
        return False

    if not _solve_from(ctx, 0):
        return False

    grid[:, :] = np.asarray(ctx.board, dtype=grid.dtype)
    return True


def solve_copy(grid: np.ndarray) -> np.ndarray:
    """
    盤面のコピーを解いて返します。

    解けない場合は内部整合性のエラーとして RuntimeError を投げます。
    """
    work = np.array(grid, dtype=np.int8, copy=True)
    if not solve(work):
        raise RuntimeError("Sudoku grid could not be completed by backtracking")
    return work


# ----------------------------------------------------------------------
# count_solutions
# ----------------------------------------------------------------------

def choose_next_cell(ctx: SearchContext) -> Optional[tuple[int, int, int]]:
    """
    次に埋める空きマスを選びます（MRV）。

    Returns
    -------
    (row, col, free_mask) or None
        空きマスが無ければ None。
        候補ゼロのマスがあれば、そのマスを即座に返します（行き止まり）。
    """
    best: Optional[tuple[int, int, int]] = None
    best_size = GRID_SIZE + 1

    for r in range(GRID_SIZE):
        for c in range(GRID_SIZE):
            if ctx.board[r][c] != EMPTY:
                continue
            free = ctx.free_mask(r, c)
            size = bin(free).count("1")
            if size < best_size:
                best = (r, c, free)
                best_size = size
                if size <= 1:
                    return best

    return best


def _count_from(ctx: SearchContext) -> None:
    if ctx.solutions_found >= ctx.limit:
        return

    nxt = choose_next_cell(ctx)
    if nxt is None:
        # すべて埋まった = 解を 1 つ発見
        ctx.solutions_found += 1
        return

    r, c, free = nxt
    for v in mask_to_digits(free):
        ctx.place(r, c, v)
        _count_from(ctx)
        ctx.clear(r, c, v)

        if ctx.solutions_found >= ctx.limit:
            return


def count_solutions(grid: np.ndarray, limit: int = UNIQUENESS_SOLUTION_LIMIT) -> int:
    """
    盤面の解の個数を、limit 個を上限として数えます。

    探索は盤面のコピー上で行うので、呼び出し側の盤面は変わりません。
    各解は完全な割り当てなので、見つかる解はすべて互いに異なります。
    """
    if limit <= 0:
        return 0

    ctx = SearchContext.from_grid(grid)
    if ctx is None:
        return 0

    ctx.limit = limit
    _count_from(ctx)
    return ctx.solutions_found


def has_unique_solution(grid: np.ndarray) -> bool:
    """解がちょうど 1 つかどうかを返します。"""
    return count_solutions(grid, UNIQUENESS_SOLUTION_LIMIT) == 1
