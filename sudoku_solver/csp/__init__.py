# -*- coding: utf-8 -*-
"""
sudoku_solver.csp パッケージ

制約充足（数独のルール）に関する処理をまとめています。

主に以下の役割を持つモジュールから構成されています。
- domains.py     : 空きマスごとの候補集合（ビット集合）の計算
- propagation.py : 候補の消去を適用し、候補が 1 つになるマスを探す
- search.py      : バックトラックによる解の探索と解の個数の数え上げ
"""
