# -*- coding: utf-8 -*-
"""
空きマスごとの候補集合（ドメイン）を計算するモジュールです。

候補集合は 9 ビットの整数（ビット集合）で表します。
ビット d-1 が立っていれば、数字 d が候補です。

    {1, 4, 9}  ->  0b100001001

こうすることで、Naked Pair/Triple/Quad や X-Wing などで多用する
和集合・共通部分の計算が整数のビット演算 1 回で済みます。

候補は毎回盤面から計算し直します（キャッシュや差分更新はしません）。
"""

from __future__ import annotations

from typing import Iterable, List, Set

import numpy as np

from ..config import BOX_SIZE, EMPTY, GRID_SIZE
from ..grid.parser import normalize_grid
from ..types import CandidateMap

# 1..9 がすべて候補の状態
FULL_MASK: int = (1 << GRID_SIZE) - 1


def digit_mask(digit: int) -> int:
    """数字 1 つ分のビットを返します。"""
    return 1 << (digit - 1)


def digits_to_mask(digits: Iterable[int]) -> int:
    mask = 0
    for d in digits:
        mask |= digit_mask(d)
    return mask


def mask_to_digits(mask: int) -> List[int]:
    """ビット集合を昇順の数字リストに変換します。"""
    return [d for d in range(1, GRID_SIZE + 1) if mask & digit_mask(d)]


def mask_size(mask: int) -> int:
    """ビット集合の要素数を返します。"""
    return bin(mask).count("1")


def has_digit(mask: int, digit: int) -> bool:
    return bool(mask & digit_mask(digit))


def candidate_mask(grid: np.ndarray, row: int, col: int) -> int:
    """
    (row, col) の候補をビット集合で返します。

    数字が入っているマスは 0（空集合）です。
    """
    if grid[row, col] != EMPTY:
        return 0

    used = 0
    for c in range(GRID_SIZE):
        v = int(grid[row, c])
        if v != EMPTY:
            used |= digit_mask(v)

    for r in range(GRID_SIZE):
        v = int(grid[r, col])
        if v != EMPTY:
            used |= digit_mask(v)

    r0 = (row // BOX_SIZE) * BOX_SIZE
    c0 = (col // BOX_SIZE) * BOX_SIZE
    for r in range(r0, r0 + BOX_SIZE):
        for c in range(c0, c0 + BOX_SIZE):
            v = int(grid[r, c])
            if v != EMPTY:
                used |= digit_mask(v)

    return FULL_MASK & ~used


def get_candidates(grid: np.ndarray, row: int, col: int) -> Set[int]:
    """
    (row, col) に置ける数字の集合を返します。

    数字が入っているマスでは空集合を返します（例外は投げません）。
    リストや文字列の盤面も受け付けます。
    """
    if not (0 <= row < GRID_SIZE and 0 <= col < GRID_SIZE):
        raise ValueError(f"Cell out of range: ({row}, {col})")
    if not isinstance(grid, np.ndarray):
        grid = normalize_grid(grid)
    return set(mask_to_digits(candidate_mask(grid, row, col)))


def get_all_candidates(grid: np.ndarray) -> CandidateMap:
    """
    すべての空きマスについて候補のビット集合を計算します。

    Returns
    -------
    dict[(int, int), int]
        (row, col) -> 候補のビット集合。キーは行優先の順に並びます。
    """
    if not isinstance(grid, np.ndarray):
        grid = normalize_grid(grid)

    candidates: CandidateMap = {}
    for r in range(GRID_SIZE):
        for c in range(GRID_SIZE):
            if grid[r, c] == EMPTY:
                candidates[(r, c)] = candidate_mask(grid, r, c)
    return candidates
