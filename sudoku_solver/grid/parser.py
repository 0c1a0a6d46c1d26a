# -*- coding: utf-8 -*-
"""
盤面のセルを内部表現に正規化するモジュールです。

主な役割:
- pandas.DataFrame / 2次元リスト / numpy 配列 / 81 文字の文字列を
  shape = (9, 9), dtype = int8 の numpy 配列に変換
- 各セルの値を「0 = 空きマス」「1..9 = 数字」に正規化
- 利用者のメモ（候補メモ）を {(row, col): set(数字)} に正規化
"""

from __future__ import annotations

import math
from typing import Any, Dict, Iterable, Mapping, Optional, Set

import numpy as np
import pandas as pd

from ..config import EMPTY, GRID_SIZE
from ..types import CellCoord

# 空きマスとして扱う文字列
EMPTY_TOKENS = {"", ".", "0", "-", "_"}


def normalize_cell(x: Any) -> int:
    """
    個々のセルの値を、内部表現（0..9 の整数）に変換します。

    変換ルール（例）
    ----------------
    - None, NaN, "", ".", "0", "-", "_" : 0（空きマス）
    - 1..9 の整数、または "1".."9"      : その数字
    - それ以外                          : ValueError
    """
    if x is None:
        return EMPTY

    if isinstance(x, float) and math.isnan(x):
        return EMPTY

    if isinstance(x, (int, np.integer)) and not isinstance(x, bool):
        v = int(x)
    elif isinstance(x, float) and x.is_integer():
        v = int(x)
    else:
        s = str(x).strip()
        if s in EMPTY_TOKENS:
            return EMPTY
        if not s.isdigit():
            raise ValueError(f"Invalid cell value: {x!r}")
        v = int(s)

    if not 0 <= v <= GRID_SIZE:
        raise ValueError(f"Cell value out of range: {x!r}")
    return v


def parse_grid_string(text: str) -> np.ndarray:
    """
    "53..7....6..195..." のような 81 文字の文字列を盤面に変換します。

    空白や改行は無視します。
    """
    chars = [ch for ch in text if not ch.isspace()]
    if len(chars) != GRID_SIZE * GRID_SIZE:
        raise ValueError(
            f"Grid string must contain {GRID_SIZE * GRID_SIZE} cells, got {len(chars)}"
        )

    grid = np.zeros((GRID_SIZE, GRID_SIZE), dtype=np.int8)
    for idx, ch in enumerate(chars):
        grid[idx // GRID_SIZE, idx % GRID_SIZE] = normalize_cell(ch)
    return grid


def normalize_grid(data: Any) -> np.ndarray:
    """
    各種の入力から 9x9 の numpy 配列に変換し、
    各セルを :func:`normalize_cell` によって正規化します。

    入力はコピーされるので、戻り値を書き換えても元のデータには影響しません。

    Parameters
    ----------
    data : pandas.DataFrame, numpy.ndarray, list of list, or str
        入力の盤面データ。

    Returns
    -------
    numpy.ndarray
        shape = (9, 9), dtype = int8 の 2次元配列。
    """
    if isinstance(data, str):
        return parse_grid_string(data)

    if isinstance(data, pd.DataFrame):
        values = data.to_numpy(dtype=object)
    else:
        values = np.asarray(data, dtype=object)

    if values.shape != (GRID_SIZE, GRID_SIZE):
        raise ValueError(f"Grid must be {GRID_SIZE}x{GRID_SIZE}, got shape {values.shape}")

    grid = np.zeros((GRID_SIZE, GRID_SIZE), dtype=np.int8)
    for i in range(GRID_SIZE):
        for j in range(GRID_SIZE):
            grid[i, j] = normalize_cell(values[i, j])

    return grid


def normalize_notes(
    notes: Optional[Mapping[CellCoord, Iterable[int]]],
) -> Dict[CellCoord, Set[int]]:
    """
    メモ（候補メモ）を {(row, col): set(数字)} の形に正規化します。

    メモが空のマスは結果に含めません。
    """
    if not notes:
        return {}

    out: Dict[CellCoord, Set[int]] = {}
    for (row, col), digits in notes.items():
        if not (0 <= row < GRID_SIZE and 0 <= col < GRID_SIZE):
            raise ValueError(f"Note cell out of range: ({row}, {col})")
        ds = {int(d) for d in digits}
        if any(not 1 <= d <= GRID_SIZE for d in ds):
            raise ValueError(f"Note digits out of range at ({row}, {col}): {sorted(ds)}")
        if ds:
            out[(int(row), int(col))] = ds
    return out
