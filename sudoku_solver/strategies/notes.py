# -*- coding: utf-8 -*-
"""
利用者のメモ（候補メモ）の誤りを見つける戦略です。

空きマスのメモに、同じ行・列・ブロックにすでに置かれている数字が
含まれていれば、そのメモは誤りです。
見つかった誤りは、すべてのマスの分を 1 つのヒントにまとめて返します
（複数のマスを一度に対象にするのはこの戦略だけです）。
"""

from __future__ import annotations

from typing import Dict, Iterable, List, Mapping, Optional, Set

import numpy as np

from ..config import EMPTY, GRID_SIZE
from ..grid.board import block_cells, block_index, col_cells, row_cells
from ..types import (
    ACTION_REMOVE_NOTE,
    CellCoord,
    Elimination,
    HintResult,
    InvalidNoteCell,
)

STRATEGY_NAME = "Remove Invalid Notes"


def find_invalid_notes(
    grid: np.ndarray,
    notes: Optional[Mapping[CellCoord, Iterable[int]]],
) -> Optional[HintResult]:
    """
    誤ったメモをまとめて 1 件のヒントとして返します。

    Parameters
    ----------
    grid : numpy.ndarray
        現在の盤面。
    notes : dict[(int, int), iterable of int] or None
        マスごとのメモ。数字が入っているマスのメモは無視します。
    """
    if not notes:
        return None

    bad_cells: List[InvalidNoteCell] = []
    affected: Dict[CellCoord, None] = {}  # 順序付きの集合として使う

    for row in range(GRID_SIZE):
        for col in range(GRID_SIZE):
            cell_notes: Set[int] = set(notes.get((row, col), ()))
            if grid[row, col] != EMPTY or not cell_notes:
                continue

            units = [
                row_cells(row),
                col_cells(col),
                block_cells(block_index(row, col)),
            ]
            placed = {int(grid[r, c]) for unit in units for r, c in unit} - {EMPTY}
            invalid = sorted(cell_notes & placed)
            if not invalid:
                continue

            bad_cells.append(InvalidNoteCell(row=row, col=col, invalid_notes=tuple(invalid)))

            # 根拠となる（同じ数字が置かれている）マスを集める
            for note in invalid:
                for unit in units:
                    for r, c in unit:
                        if grid[r, c] == note:
                            affected.setdefault((r, c), None)

    if not bad_cells:
        return None

    total = sum(len(cell.invalid_notes) for cell in bad_cells)
    first = bad_cells[0]
    explanation = (
        f"Found {total} invalid note{'s' if total > 1 else ''} across "
        f"{len(bad_cells)} cell{'s' if len(bad_cells) > 1 else ''}. "
        "Each of these notes is a number that is already placed in the same row, "
        "column or 3x3 block, so it can be removed."
    )
    return HintResult(
        row=first.row,
        col=first.col,
        value=first.invalid_notes[0],
        strategy=STRATEGY_NAME,
        explanation=explanation,
        action=ACTION_REMOVE_NOTE,
        affected_cells=tuple(affected),
        invalid_notes=first.invalid_notes,
        all_cells_with_invalid_notes=tuple(bad_cells),
        eliminations=tuple(
            Elimination(row=cell.row, col=cell.col, digits=cell.invalid_notes)
            for cell in bad_cells
        ),
    )
