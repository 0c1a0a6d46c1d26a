# -*- coding: utf-8 -*-
"""
数独エンジンで使う主なデータ構造（型）をまとめたモジュールです。

dataclass を使うことで、
「この構造体はどんなフィールドを持っているのか」を
分かりやすく表現しています。

ヒント結果（HintResult）は一度作ったら変更しないので frozen にしています。
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Literal, Tuple

# グリッド上の座標を表す型 (row, col)。どちらも 0 始まり。
CellCoord = Tuple[int, int]

# 空きマスごとの候補集合（9 ビットのビット集合）。
# ビット d-1 が立っていれば、数字 d が候補。
CandidateMap = Dict[CellCoord, int]

# 難易度
Difficulty = Literal["easy", "medium", "hard"]

# ヒントが利用者に求める操作の種類
HintAction = Literal["add-value", "add-note", "remove-note"]

ACTION_ADD_VALUE: HintAction = "add-value"
ACTION_ADD_NOTE: HintAction = "add-note"
ACTION_REMOVE_NOTE: HintAction = "remove-note"

# 強調表示する領域の種類
RegionKind = Literal["row", "col", "block"]


@dataclass(frozen=True)
class Region:
    """
    強調表示する行・列・ブロックを表すクラスです。

    Attributes
    ----------
    kind : str
        "row" / "col" / "block" のいずれか。
    index : int
        0 始まりの番号。ブロックは左上から行優先で 0..8。
    """

    kind: RegionKind
    index: int


@dataclass(frozen=True)
class InvalidNoteCell:
    """メモ（候補メモ）のうち、すでに置かれた数字と衝突しているものを持つマス。"""

    row: int
    col: int
    invalid_notes: Tuple[int, ...]


@dataclass(frozen=True)
class Elimination:
    """あるマスの候補から取り除ける数字の組。"""

    row: int
    col: int
    digits: Tuple[int, ...]


@dataclass(frozen=True)
class ForcedPlacement:
    """候補の消去によって候補が 1 つだけになったマスと、その数字。"""

    row: int
    col: int
    value: int


@dataclass(frozen=True)
class HintResult:
    """
    1 回のヒント呼び出しで提示する推論 1 件を表すクラスです。

    Attributes
    ----------
    row, col : int
        対象マスの座標（0 始まり）。
    value : int
        関係する数字。"add-value" なら置くべき数字。
    strategy : str
        戦略名（例: "Naked Single", "X-Wing", "Guided Hint"）。
    explanation : str
        利用者向けの説明文。
    action : str
        "add-value" / "add-note" / "remove-note" のいずれか。
    affected_cells : tuple of (row, col)
        根拠として関係するマス、または候補を消したマス。
    highlighted_regions : tuple of Region
        強調表示する行・列・ブロック。
    invalid_notes : tuple of int
        "remove-note" の場合の、対象マスで消すべきメモ。
    all_cells_with_invalid_notes : tuple of InvalidNoteCell
        不正なメモを持つすべてのマス。
    eliminations : tuple of Elimination
        候補消去系の戦略で消した (マス, 数字) の一覧。
    candidates : tuple of int
        対象マスの現在の候補（Guided Hint の表示用）。
    """

    row: int
    col: int
    value: int
    strategy: str
    explanation: str
    action: HintAction = ACTION_ADD_VALUE
    affected_cells: Tuple[CellCoord, ...] = ()
    highlighted_regions: Tuple[Region, ...] = ()
    invalid_notes: Tuple[int, ...] = ()
    all_cells_with_invalid_notes: Tuple[InvalidNoteCell, ...] = ()
    eliminations: Tuple[Elimination, ...] = ()
    candidates: Tuple[int, ...] = ()

    @property
    def cell(self) -> CellCoord:
        """対象マスの座標 (row, col) を返します。"""
        return (self.row, self.col)
