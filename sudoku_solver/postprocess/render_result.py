# -*- coding: utf-8 -*-
"""
エンジンの結果をもとに表示用の情報を構築するモジュールです。

画面側（外部）には numpy 配列や dataclass ではなく、
JSON にそのまま変換できる dict / list を渡します。
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Mapping, Optional

import numpy as np
import pandas as pd

from ..config import BOX_SIZE, EMPTY, GRID_SIZE
from ..grid.board import has_duplicate
from ..grid.parser import normalize_grid, normalize_notes
from ..types import CellCoord, HintResult


def _cell(cell: CellCoord) -> Dict[str, int]:
    return {"row": int(cell[0]), "col": int(cell[1])}


def build_hint_payload(hint: Optional[HintResult]) -> Optional[Dict[str, Any]]:
    """
    HintResult を表示用の dict に変換します。

    None を渡した場合は None を返します（ヒントなし）。
    """
    if hint is None:
        return None

    return {
        "row": hint.row,
        "col": hint.col,
        "value": hint.value,
        "strategy": hint.strategy,
        "explanation": hint.explanation,
        "action": hint.action,
        "affected_cells": [_cell(c) for c in hint.affected_cells],
        "highlighted_regions": [
            {"type": r.kind, "index": r.index} for r in hint.highlighted_regions
        ],
        "invalid_notes": list(hint.invalid_notes),
        "all_cells_with_invalid_notes": [
            {"row": c.row, "col": c.col, "invalid_notes": list(c.invalid_notes)}
            for c in hint.all_cells_with_invalid_notes
        ],
        "eliminations": [
            {"row": e.row, "col": e.col, "digits": list(e.digits)}
            for e in hint.eliminations
        ],
        "candidates": list(hint.candidates),
    }


def build_board_payload(
    puzzle,
    notes: Optional[Mapping[CellCoord, Iterable[int]]] = None,
) -> List[List[Dict[str, Any]]]:
    """
    問題盤面を、画面で扱うマス情報の 2 次元リストに変換します。

    各マスは次のキーを持ちます。
    - value        : 数字（空きマスは None）
    - is_initial   : 最初から置かれている数字かどうか
    - notes        : メモ（昇順のリスト）
    - is_incorrect : 同じ行・列・ブロックに同じ数字があるかどうか
    """
    grid = normalize_grid(puzzle)
    note_map = normalize_notes(notes)

    board: List[List[Dict[str, Any]]] = []
    for r in range(GRID_SIZE):
        row: List[Dict[str, Any]] = []
        for c in range(GRID_SIZE):
            value = int(grid[r, c])
            row.append(
                {
                    "value": None if value == EMPTY else value,
                    "is_initial": value != EMPTY,
                    "notes": sorted(note_map.get((r, c), set())) if value == EMPTY else [],
                    "is_incorrect": has_duplicate(grid, r, c),
                }
            )
        board.append(row)
    return board


def grid_to_dataframe(grid) -> pd.DataFrame:
    """
    盤面を DataFrame に変換します（空きマスは空文字）。

    index / columns は 1 始まりの行番号・列番号です。
    """
    arr = normalize_grid(grid)
    labels = list(range(1, GRID_SIZE + 1))
    df = pd.DataFrame(arr.astype(int), index=labels, columns=labels)
    return df.astype(object).where(df != EMPTY, "")


def format_grid(grid) -> str:
    """
    盤面をテキストで整形します。空きマスは "." で表示します。

        5 3 . | . 7 . | . . .
        6 . . | 1 9 5 | . . .
        ...
    """
    arr: np.ndarray = normalize_grid(grid)
    lines: List[str] = []
    for r in range(GRID_SIZE):
        if r and r % BOX_SIZE == 0:
            lines.append("------+-------+------")
        parts: List[str] = []
        for c in range(GRID_SIZE):
            if c and c % BOX_SIZE == 0:
                parts.append("|")
            v = int(arr[r, c])
            parts.append("." if v == EMPTY else str(v))
        lines.append(" ".join(parts))
    return "\n".join(lines)
