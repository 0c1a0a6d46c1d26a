# -*- coding: utf-8 -*-
"""
XY-Wing の戦略です。

候補が {X, Y} の 2 つだけのマス（ピボット）と、ピボットと同じ領域にある
候補 2 つのマス（ウイング）{X, Z} と {Y, Z} の組を探します。
ピボットが X ならウイング {X, Z} は Z、ピボットが Y ならウイング {Y, Z} は Z。
どちらにしても片方のウイングは Z になるので、
両方のウイングと同じ領域にあるマスには Z が入りません。
"""

from __future__ import annotations

import itertools
from typing import List, Optional

import numpy as np

from ..config import GRID_SIZE
from ..csp.domains import mask_size, mask_to_digits
from ..grid.board import sees
from ..types import CandidateMap, CellCoord, HintResult
from .common import eliminate_from, elimination_hint, join_digits, short_cell_name


def find_xy_wing(grid: np.ndarray, candidates: CandidateMap) -> Optional[HintResult]:
    bivalue: List[CellCoord] = [
        cell for cell, mask in candidates.items() if mask_size(mask) == 2
    ]

    for pivot in bivalue:
        pivot_mask = candidates[pivot]

        # ピボットと同じ領域にあり、ピボットと候補を 1 つだけ共有するマス
        wings = [
            cell for cell in bivalue
            if sees(cell, pivot) and mask_size(candidates[cell] & pivot_mask) == 1
        ]

        for w1, w2 in itertools.combinations(wings, 2):
            m1, m2 = candidates[w1], candidates[w2]

            # 2 つのウイングはピボットの別々の数字を共有すること
            if m1 & pivot_mask == m2 & pivot_mask:
                continue

            z_mask = m1 & ~pivot_mask
            if z_mask != m2 & ~pivot_mask:
                continue
            (z,) = mask_to_digits(z_mask)

            targets = [
                (row, col)
                for row in range(GRID_SIZE)
                for col in range(GRID_SIZE)
                if (row, col) not in (w1, w2, pivot)
                and sees((row, col), w1)
                and sees((row, col), w2)
            ]
            eliminations = eliminate_from(targets, z_mask, candidates)
            hint = elimination_hint(
                candidates,
                eliminations,
                strategy="XY-Wing",
                reason=(
                    f"An XY-Wing was found with the pivot at {short_cell_name(pivot)} "
                    f"holding {join_digits(mask_to_digits(pivot_mask), '/')} and wings at "
                    f"{short_cell_name(w1)} and {short_cell_name(w2)}. Whatever the pivot "
                    f"turns out to be, one of the wings must be {z}, so {z} can be removed "
                    f"from every cell that sees both wings."
                ),
                affected_cells=[pivot, w1, w2],
            )
            if hint is not None:
                return hint

    return None
