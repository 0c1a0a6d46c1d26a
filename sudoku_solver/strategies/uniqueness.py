# -*- coding: utf-8 -*-
"""
Unique Rectangle（Type 1）の戦略です。

2 つの行・2 つの列・2 つのブロックにまたがる長方形の 4 隅のうち、
3 隅の候補がちょうど同じ {a, b} で、残りの 1 隅が {a, b} と他の数字を持つ場合を探します。

もし 4 隅目も a か b になると、4 隅すべてで a と b を入れ替えた
もう 1 つの解ができてしまいます。問題の解は 1 つだけなので、
4 隅目からは a と b を消すことができ、残った候補のどれかが入ります。
"""

from __future__ import annotations

import itertools
from typing import List, Optional

import numpy as np

from ..csp.domains import mask_size, mask_to_digits
from ..grid.board import block_index
from ..types import CandidateMap, CellCoord, HintResult
from .common import cell_name, elimination_hint, join_digits


def find_unique_rectangle(grid: np.ndarray, candidates: CandidateMap) -> Optional[HintResult]:
    bivalue: List[CellCoord] = [
        cell for cell, mask in candidates.items() if mask_size(mask) == 2
    ]

    for c1, c2, c3 in itertools.combinations(bivalue, 3):
        pair = candidates[c1]
        if candidates[c2] != pair or candidates[c3] != pair:
            continue

        rows = [c[0] for c in (c1, c2, c3)]
        cols = [c[1] for c in (c1, c2, c3)]
        if len(set(rows)) != 2 or len(set(cols)) != 2:
            continue

        # 1 回しか現れない行・列が 4 隅目
        missing_row = next(r for r in set(rows) if rows.count(r) == 1)
        missing_col = next(c for c in set(cols) if cols.count(c) == 1)
        corner = (missing_row, missing_col)

        # 長方形はちょうど 2 つのブロックにまたがること
        corners = (c1, c2, c3, corner)
        if len({block_index(*c) for c in corners}) != 2:
            continue

        corner_mask = candidates.get(corner)
        if corner_mask is None or corner_mask & pair != pair or corner_mask == pair:
            continue

        pair_digits = mask_to_digits(pair)
        eliminations = {corner: pair}
        hint = elimination_hint(
            candidates,
            eliminations,
            strategy="Unique Rectangle",
            reason=(
                f"A Unique Rectangle was found with the candidates "
                f"{join_digits(pair_digits, ' and ')}. If the cell at {cell_name(corner)} "
                f"were also {join_digits(pair_digits, ' or ')}, the four corners could swap "
                f"{join_digits(pair_digits, ' and ')} and the puzzle would have two solutions. "
                f"So {join_digits(pair_digits, ' and ')} can be removed from that cell."
            ),
            affected_cells=list(corners),
        )
        if hint is not None:
            return hint

    return None
