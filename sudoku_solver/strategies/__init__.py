# -*- coding: utf-8 -*-
"""
sudoku_solver.strategies パッケージ

人間が使う解き方（戦略）をまとめています。
ヒントは下の STRATEGY_CASCADE の順に試し、最初に当たったものを返します。
簡単な戦略ほど先に試すので、常に「最も簡単な説明」が提示されます。

メモの誤り（notes.py）は盤面とメモを見るので、候補を使う戦略とは別に、
いちばん最初に試します。
"""

from __future__ import annotations

from typing import Callable, List, Optional, Tuple

import numpy as np

from ..types import CandidateMap, HintResult
from .fish import find_swordfish, find_x_wing
from .intersections import find_box_line_reduction, find_pointing_pair
from .notes import find_invalid_notes
from .singles import find_hidden_single, find_naked_single
from .subsets import find_hidden_pair, find_naked_pair, find_naked_quad, find_naked_triple
from .uniqueness import find_unique_rectangle
from .wings import find_xy_wing

Strategy = Callable[[np.ndarray, CandidateMap], Optional[HintResult]]

# (戦略名, 関数) の一覧。この順番自体が仕様です。
STRATEGY_CASCADE: List[Tuple[str, Strategy]] = [
    ("Naked Single", find_naked_single),
    ("Hidden Single", find_hidden_single),
    ("Pointing Pair/Triple", find_pointing_pair),
    ("Box/Line Reduction", find_box_line_reduction),
    ("Naked Pair", find_naked_pair),
    ("Hidden Pair", find_hidden_pair),
    ("Naked Triple", find_naked_triple),
    ("Naked Quad", find_naked_quad),
    ("X-Wing", find_x_wing),
    ("Swordfish", find_swordfish),
    ("XY-Wing", find_xy_wing),
    ("Unique Rectangle", find_unique_rectangle),
]

__all__ = [
    "STRATEGY_CASCADE",
    "Strategy",
    "find_invalid_notes",
    "find_naked_single",
    "find_hidden_single",
    "find_pointing_pair",
    "find_box_line_reduction",
    "find_naked_pair",
    "find_hidden_pair",
    "find_naked_triple",
    "find_naked_quad",
    "find_x_wing",
    "find_swordfish",
    "find_xy_wing",
    "find_unique_rectangle",
]
