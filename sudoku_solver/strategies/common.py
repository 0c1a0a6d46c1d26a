# -*- coding: utf-8 -*-
"""
戦略モジュールで共通して使う小さなヘルパーです。

- 領域（行・列・ブロック）の一覧
- 説明文に使う座標・数字の書式
- 候補消去系の戦略の結果を HintResult にまとめる処理
"""

from __future__ import annotations

from typing import Iterable, List, Optional, Sequence, Tuple

from ..config import GRID_SIZE
from ..csp.propagation import EliminationMap, apply_eliminations, eliminations_to_tuple
from ..grid.board import block_cells, block_origin, col_cells, row_cells
from ..types import (
    ACTION_ADD_VALUE,
    CandidateMap,
    CellCoord,
    HintResult,
    Region,
)

# (領域, その領域のマス一覧) の一覧。行 → 列 → ブロックの順。
UNITS: List[Tuple[Region, List[CellCoord]]] = (
    [(Region("row", i), row_cells(i)) for i in range(GRID_SIZE)]
    + [(Region("col", i), col_cells(i)) for i in range(GRID_SIZE)]
    + [(Region("block", i), block_cells(i)) for i in range(GRID_SIZE)]
)


def cell_name(cell: CellCoord) -> str:
    """説明文用の座標表記（1 始まり）。"""
    return f"row {cell[0] + 1}, column {cell[1] + 1}"


def short_cell_name(cell: CellCoord) -> str:
    return f"({cell[0] + 1},{cell[1] + 1})"


def region_name(region: Region) -> str:
    if region.kind == "row":
        return f"row {region.index + 1}"
    if region.kind == "col":
        return f"column {region.index + 1}"
    r0, c0 = block_origin(region.index)
    return f"the block at row {r0 + 1}, column {c0 + 1}"


def join_digits(digits: Iterable[int], sep: str = ", ") -> str:
    return sep.join(str(d) for d in digits)


def empty_cells_in(cells: Sequence[CellCoord], candidates: CandidateMap) -> List[CellCoord]:
    """マス一覧のうち、候補を持つ（= 空きマスの）ものだけを返します。"""
    return [cell for cell in cells if cell in candidates]


def eliminate_from(
    cells: Iterable[CellCoord],
    remove_mask: int,
    candidates: CandidateMap,
    eliminations: Optional[EliminationMap] = None,
) -> EliminationMap:
    """
    cells の各マスから remove_mask の数字を消す消去マップを作ります。

    実際に候補として持っている数字だけを記録します。
    eliminations を渡した場合は、そこに追記して返します。
    """
    out: EliminationMap = eliminations if eliminations is not None else {}
    for cell in cells:
        hit = candidates.get(cell, 0) & remove_mask
        if hit:
            out[cell] = out.get(cell, 0) | hit
    return out


def elimination_hint(
    candidates: CandidateMap,
    eliminations: EliminationMap,
    strategy: str,
    reason: str,
    affected_cells: Sequence[CellCoord] = (),
    regions: Sequence[Region] = (),
) -> Optional[HintResult]:
    """
    消去を適用して候補が 1 つになるマスがあれば、HintResult を作ります。

    無ければ None（この消去はヒントとして提示しない）。
    """
    if not eliminations:
        return None

    forced = apply_eliminations(candidates, eliminations)
    if forced is None:
        return None

    target = (forced.row, forced.col)
    explanation = (
        f"{reason} After eliminating these candidates, the cell at "
        f"{cell_name(target)} must be {forced.value}."
    )
    return HintResult(
        row=forced.row,
        col=forced.col,
        value=forced.value,
        strategy=strategy,
        explanation=explanation,
        action=ACTION_ADD_VALUE,
        affected_cells=tuple(affected_cells),
        highlighted_regions=tuple(regions),
        eliminations=eliminations_to_tuple(eliminations),
    )
