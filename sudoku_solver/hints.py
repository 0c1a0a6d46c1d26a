# -*- coding: utf-8 -*-
"""
ヒントを 1 件作るモジュールです。

流れ
----
1. メモの誤り（Remove Invalid Notes）を確認
2. 候補のスナップショットを 1 回だけ計算
3. strategies.STRATEGY_CASCADE の順に戦略を試し、最初に当たったものを返す
4. どの戦略も当たらなければ、空きマスか誤ったマスをランダムに 1 つ選び、
   解答の値をそのまま提示する（Guided Hint）
5. 盤面が解答と完全に一致していれば None

呼び出し側の盤面・メモは変更しません。
"""

from __future__ import annotations

import random
from typing import Iterable, List, Mapping, Optional

import numpy as np

from . import config
from .config import EMPTY, GRID_SIZE
from .csp.domains import get_all_candidates, get_candidates
from .grid.parser import normalize_grid, normalize_notes
from .logging_utils import get_logger
from .strategies import STRATEGY_CASCADE, find_invalid_notes
from .types import ACTION_ADD_VALUE, CellCoord, HintResult

logger = get_logger()

GUIDED_HINT = "Guided Hint"


def cells_needing_hint(grid: np.ndarray, solution: np.ndarray) -> List[CellCoord]:
    """空きマス、または解答と食い違うマスの一覧を返します。"""
    return [
        (r, c)
        for r in range(GRID_SIZE)
        for c in range(GRID_SIZE)
        if grid[r, c] == EMPTY or grid[r, c] != solution[r, c]
    ]


def get_hint(
    grid,
    solution,
    rng: Optional[random.Random] = None,
) -> Optional[CellCoord]:
    """
    説明なしの簡単なヒント。

    空きマスか誤ったマスをランダムに 1 つ選んで (row, col) を返します。
    そういうマスが無ければ None です。
    """
    grid = normalize_grid(grid)
    solution = normalize_grid(solution)
    rng = rng if rng is not None else random.Random()

    cells = cells_needing_hint(grid, solution)
    if not cells:
        return None
    return rng.choice(cells)


def build_guided_hint(
    grid: np.ndarray,
    solution: np.ndarray,
    rng: random.Random,
) -> Optional[HintResult]:
    """解答の値をそのまま提示するヒントを作ります。"""
    cells = cells_needing_hint(grid, solution)
    if not cells:
        return None

    row, col = rng.choice(cells)
    value = int(solution[row, col])
    cands = tuple(sorted(get_candidates(grid, row, col)))
    listed = ", ".join(str(d) for d in cands) if cands else "none"
    return HintResult(
        row=row,
        col=col,
        value=value,
        strategy=GUIDED_HINT,
        explanation=(
            f"This cell needs more advanced techniques to solve logically. "
            f"Its possible candidates are: {listed}. The correct value is {value}."
        ),
        action=ACTION_ADD_VALUE,
        candidates=cands,
    )


def get_advanced_hint(
    grid,
    solution,
    notes: Optional[Mapping[CellCoord, Iterable[int]]] = None,
    rng: Optional[random.Random] = None,
) -> Optional[HintResult]:
    """
    最も簡単な戦略で説明できるヒントを 1 件返します。

    Parameters
    ----------
    grid : array-like
        現在の盤面（0 が空きマス）。
    solution : array-like
        解答の盤面。
    notes : dict[(int, int), iterable of int], optional
        利用者のメモ。
    rng : random.Random, optional
        Guided Hint でマスを選ぶための乱数源。

    Returns
    -------
    HintResult or None
        盤面が解答と完全に一致していれば None。
    """
    grid = normalize_grid(grid)
    solution = normalize_grid(solution)
    rng = rng if rng is not None else random.Random()

    if not cells_needing_hint(grid, solution):
        logger.debug("[hints] grid already matches the solution")
        return None

    hint = find_invalid_notes(grid, normalize_notes(notes))
    if hint is not None:
        logger.debug("[hints] strategy hit: %s", hint.strategy)
        return hint

    candidates = get_all_candidates(grid)

    for name, strategy in STRATEGY_CASCADE:
        try:
            hint = strategy(grid, candidates)
        except Exception as e:
            logger.exception("[hints] strategy %s failed: %s", name, e)
            continue

        if hint is not None:
            logger.debug("[hints] strategy hit: %s -> %s", hint.strategy, hint.cell)
            return hint
        logger.debug("[hints] strategy miss: %s", name)

    if not config.GUIDED_HINT_ENABLED:
        logger.debug("[hints] no logical hint and guided hint disabled")
        return None

    return build_guided_hint(grid, solution, rng)
