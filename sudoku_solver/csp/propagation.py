# -*- coding: utf-8 -*-
"""
候補の消去（propagation）を行うモジュールです。

Pointing Pair から Unique Rectangle までの候補消去系の戦略は、
どれも次の流れで結果を判定します。

1. 戦略ごとに「どのマスからどの数字を消せるか」を求める
2. 候補のコピーにその消去を適用する
3. 候補がちょうど 1 つになったマスがあれば、そのマスをヒントにする

ここではその 2, 3 を共通化しています。
元の候補（スナップショット）は書き換えません。
"""

from __future__ import annotations

from typing import Dict, Optional, Tuple

from ..types import CandidateMap, CellCoord, Elimination, ForcedPlacement
from .domains import digits_to_mask, mask_size, mask_to_digits

# (row, col) -> 消す数字のビット集合
EliminationMap = Dict[CellCoord, int]


def apply_eliminations(
    candidates: CandidateMap,
    eliminations: EliminationMap,
) -> Optional[ForcedPlacement]:
    """
    消去を適用した結果、候補が 1 つだけになるマスを探します。

    消去の対象になったマスだけを、eliminations の順に調べます
    （候補が変わるのはそれらのマスだけなので、盤面全体を調べるのと同じです）。

    Parameters
    ----------
    candidates : dict[(int, int), int]
        現在の候補のスナップショット。変更しません。
    eliminations : dict[(int, int), int]
        マスごとに消す数字のビット集合。

    Returns
    -------
    ForcedPlacement or None
        最初に見つかった「候補が 1 つになったマス」。無ければ None。
    """
    for (row, col), remove in eliminations.items():
        current = candidates.get((row, col))
        if current is None:
            continue

        updated = current & ~remove
        if updated != current and mask_size(updated) == 1:
            (value,) = mask_to_digits(updated)
            return ForcedPlacement(row=row, col=col, value=value)

    return None


def eliminations_to_tuple(eliminations: EliminationMap) -> Tuple[Elimination, ...]:
    """消去マップを HintResult に載せる形（Elimination のタプル）に変換します。"""
    return tuple(
        Elimination(row=r, col=c, digits=tuple(mask_to_digits(m)))
        for (r, c), m in eliminations.items()
        if m
    )


def apply_eliminations_to_candidates(
    candidates: CandidateMap,
    eliminations: Tuple[Elimination, ...],
) -> CandidateMap:
    """
    消去を適用した候補の「コピー」を返します。

    ヒントの検証や、呼び出し側で候補メモを更新するときに使います。
    """
    updated = dict(candidates)
    for e in eliminations:
        key = (e.row, e.col)
        if key not in updated:
            continue
        updated[key] = updated[key] & ~digits_to_mask(e.digits)
    return updated
