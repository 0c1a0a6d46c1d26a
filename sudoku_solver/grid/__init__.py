# -*- coding: utf-8 -*-
"""
sudoku_solver.grid パッケージ

盤面（グリッド）に関する処理をまとめたサブパッケージです。
- parser.py : DataFrame / リスト / 文字列などから内部表現への変換
- board.py  : 行・列・ブロックの構造と、盤面の妥当性判定
"""
