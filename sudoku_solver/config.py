# -*- coding: utf-8 -*-
"""
sudoku_solver 全体で共通して使う設定値をまとめたモジュールです。

実運用時には、ここを編集することで
- 難易度ごとに空けるマスの数
- 一意解チェックの打ち切り件数
- ロジックで解けないときのフォールバック（答えの提示）
などを簡単に変更できます。
"""

from __future__ import annotations

from typing import Dict

# ==== 盤面の形 =============================================================

# 盤面の一辺（9x9 のみ対応）
GRID_SIZE: int = 9

# ブロックの一辺（3x3）
BOX_SIZE: int = 3

# 空きマスを表す値
EMPTY: int = 0

# ==== 問題生成関連 =========================================================

# 難易度 -> 完成盤面から消すマスの数（81 マス中）
DIFFICULTY_CELLS_TO_REMOVE: Dict[str, int] = {
    "easy": 35,
    "medium": 45,
    "hard": 55,
}

# マスを消す試行回数の上限 = 目標数 * この係数
# 上限に達した場合、目標より少ない数だけ消した問題をそのまま返します。
REMOVAL_ATTEMPT_FACTOR: int = 2

# 一意解チェックで数える解の上限。
# 2 個見つかった時点で「一意ではない」と分かるので、それ以上は探索しません。
UNIQUENESS_SOLUTION_LIMIT: int = 2

# ==== ヒント関連 ===========================================================

# どの戦略も当てはまらないとき、正解の値をそのまま提示するかどうか。
# False にすると、その場合は None を返します。
GUIDED_HINT_ENABLED: bool = True

# ==== ログ関連 =============================================================

# 既定のログレベル（環境変数 SUDOKU_SOLVER_LOG_LEVEL で上書き可能）
LOG_LEVEL: str = "INFO"
