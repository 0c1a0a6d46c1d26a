# -*- coding: utf-8 -*-
"""
数独の問題を生成するモジュールです。

ざっくり流れ
------------
1. 対角線上の 3 つのブロック（左上・中央・右下）に 1..9 をランダムに並べる
   （この 3 ブロックは行も列も共有しないので、互いに衝突しません）
2. 残りをバックトラック（csp.search.solve）で埋めて完成盤面にする
3. 完成盤面からランダムにマスを消していく。
   消すたびに解がちょうど 1 つかを確認し、一意でなくなるなら元に戻す
4. 難易度ごとの目標数だけ消せたら終了。
   試行回数の上限に達したら、それまでに消せた分だけで終了する

乱数は random.Random 互換のオブジェクト（rng）から取ります。
テストでは seed 付きの random.Random を渡すことで、結果を再現できます。
"""

from __future__ import annotations

import random
from typing import Optional, Tuple

import numpy as np

from .config import (
    BOX_SIZE,
    DIFFICULTY_CELLS_TO_REMOVE,
    EMPTY,
    GRID_SIZE,
    REMOVAL_ATTEMPT_FACTOR,
)
from .csp.search import has_unique_solution, solve
from .logging_utils import get_logger
from .types import Difficulty

logger = get_logger()


def cells_to_remove(difficulty: Difficulty) -> int:
    """難易度から、消すマスの目標数を返します。"""
    try:
        return DIFFICULTY_CELLS_TO_REMOVE[difficulty]
    except KeyError:
        raise ValueError(
            f"Unknown difficulty: {difficulty!r} "
            f"(expected one of {sorted(DIFFICULTY_CELLS_TO_REMOVE)})"
        ) from None


def fill_box(grid: np.ndarray, row: int, col: int, rng: random.Random) -> None:
    """(row, col) を左上とするブロックに 1..9 のランダムな並びを書き込みます。"""
    numbers = list(range(1, GRID_SIZE + 1))
    rng.shuffle(numbers)

    idx = 0
    for i in range(BOX_SIZE):
        for j in range(BOX_SIZE):
            grid[row + i, col + j] = numbers[idx]
            idx += 1


def generate_complete_grid(rng: Optional[random.Random] = None) -> np.ndarray:
    """
    ランダムな完成盤面を作ります。

    Raises
    ------
    RuntimeError
        バックトラックで盤面を埋めきれなかった場合（本来起こりません）。
    """
    rng = rng if rng is not None else random.Random()
    grid = np.zeros((GRID_SIZE, GRID_SIZE), dtype=np.int8)

    # 対角線上のブロックを先に埋める
    for box in range(0, GRID_SIZE, BOX_SIZE):
        fill_box(grid, box, box, rng)

    # 残りを埋める
    if not solve(grid):
        raise RuntimeError("Failed to complete a grid seeded with diagonal blocks")

    return grid


def create_puzzle(
    solution: np.ndarray,
    difficulty: Difficulty,
    rng: Optional[random.Random] = None,
) -> np.ndarray:
    """
    完成盤面からマスを消して、解が一意な問題を作ります。

    Parameters
    ----------
    solution : numpy.ndarray
        完成盤面。変更しません。
    difficulty : str
        "easy" / "medium" / "hard"。
    rng : random.Random, optional
        乱数源。

    Returns
    -------
    numpy.ndarray
        問題盤面（0 が空きマス）。試行回数の上限に達した場合は、
        目標より空きマスが少ないことがあります。
    """
    target = cells_to_remove(difficulty)
    rng = rng if rng is not None else random.Random()

    board = np.array(solution, dtype=np.int8, copy=True)
    removed = 0
    attempts = target * REMOVAL_ATTEMPT_FACTOR

    for _ in range(attempts):
        if removed >= target:
            break

        row = rng.randrange(GRID_SIZE)
        col = rng.randrange(GRID_SIZE)
        if board[row, col] == EMPTY:
            continue

        backup = int(board[row, col])
        board[row, col] = EMPTY

        # 解がちょうど 1 つのままなら確定、そうでなければ元に戻す
        if has_unique_solution(board):
            removed += 1
        else:
            board[row, col] = backup

    if removed < target:
        logger.warning(
            "[generator] removed %d/%d cells for difficulty=%s (attempts exhausted)",
            removed, target, difficulty,
        )
    else:
        logger.debug("[generator] removed %d cells for difficulty=%s", removed, difficulty)

    return board


def generate_game(
    difficulty: Difficulty = "medium",
    rng: Optional[random.Random] = None,
) -> Tuple[np.ndarray, np.ndarray]:
    """
    新しいゲーム（問題と解答の組）を作ります。

    Returns
    -------
    (puzzle, solution) : (numpy.ndarray, numpy.ndarray)
        puzzle の数字が入っているマスは、必ず solution と一致します。
    """
    cells_to_remove(difficulty)
    rng = rng if rng is not None else random.Random()

    logger.info("=== generate_game() START (difficulty=%s) ===", difficulty)
    solution = generate_complete_grid(rng)
    puzzle = create_puzzle(solution, difficulty, rng)
    logger.info(
        "=== generate_game() END: %d empty cells ===",
        int(np.count_nonzero(puzzle == EMPTY)),
    )
    return puzzle, solution
