# -*- coding: utf-8 -*-
"""
sudoku_solver パッケージの入口となるモジュールです。

画面や状態管理（外部）から:

    from sudoku_solver import generate_game, get_advanced_hint

と呼び出されることを想定しています。

ここでは、
1. 問題の生成（完成盤面 → マスを消して一意解の問題）
2. 候補の計算
3. 人間の解き方によるヒントの作成
4. 盤面の妥当性判定（置けるか・正しいか・クリアしたか）
の入口をまとめています。
"""

from __future__ import annotations

from .csp.domains import get_all_candidates, get_candidates
from .csp.search import count_solutions, has_unique_solution, solve
from .generator import create_puzzle, generate_complete_grid, generate_game
from .grid.board import (
    find_incorrect_cells,
    has_duplicate,
    is_board_complete,
    is_cell_correct,
    is_legal_placement,
    is_valid_solution,
)
from .grid.parser import normalize_grid
from .hints import get_advanced_hint, get_hint
from .types import Elimination, HintResult, InvalidNoteCell, Region

__all__ = [
    "generate_game",
    "generate_complete_grid",
    "create_puzzle",
    "solve",
    "count_solutions",
    "has_unique_solution",
    "get_candidates",
    "get_all_candidates",
    "get_advanced_hint",
    "get_hint",
    "is_legal_placement",
    "has_duplicate",
    "is_board_complete",
    "is_cell_correct",
    "find_incorrect_cells",
    "is_valid_solution",
    "normalize_grid",
    "HintResult",
    "Region",
    "Elimination",
    "InvalidNoteCell",
]
