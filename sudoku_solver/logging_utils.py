# -*- coding: utf-8 -*-
"""
ログ出力の設定を行うモジュールです。

初学者向けポイント:
- 「ログ」とは、プログラムの実行状況を記録するメッセージのことです。
- 問題生成でマスを何個消せたか、どのヒント戦略が当たったか、などを
  確認するのに役立ちます。
"""

from __future__ import annotations

import logging
import os

from .config import LOG_LEVEL

# sudoku_solver パッケージ共通で使うロガー名
LOGGER_NAME = "sudoku_solver"

# ログレベルを上書きするための環境変数名
LOG_LEVEL_ENV = "SUDOKU_SOLVER_LOG_LEVEL"


def get_logger() -> logging.Logger:
    """
    sudoku_solver 全体で共通して使う logger を返します。

    すでに handler（出力先）が設定されていない場合は、
    標準出力（コンソール）にログを表示するように設定します。
    レベルは環境変数 SUDOKU_SOLVER_LOG_LEVEL があればそれを、
    無ければ config.LOG_LEVEL を使います。
    """
    logger = logging.getLogger(LOGGER_NAME)

    # まだハンドラが設定されていなければ、簡単な設定を行う
    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            "%(asctime)s [%(levelname)s] [%(name)s] %(message)s"
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)

        level_name = os.environ.get(LOG_LEVEL_ENV, LOG_LEVEL).upper()
        logger.setLevel(getattr(logging, level_name, logging.INFO))

    return logger
