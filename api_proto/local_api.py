from fastapi import FastAPI, HTTPException
from pydantic import BaseModel
import random
import sys
import os

# プロジェクトルートをパスに追加して sudoku_solver をインポート可能にする
# api_proto/local_api.py -> 親ディレクトリがルート
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from sudoku_solver import (
    find_incorrect_cells,
    generate_game,
    get_advanced_hint,
    get_all_candidates,
    is_board_complete,
    normalize_grid,
)
from sudoku_solver.csp.domains import mask_to_digits
from sudoku_solver.logging_utils import get_logger
from sudoku_solver.postprocess.render_result import build_board_payload, build_hint_payload

logger = get_logger()

app = FastAPI()


class NewGameRequest(BaseModel):
    difficulty: str = "medium"
    seed: int | None = None


class NoteEntry(BaseModel):
    row: int
    col: int
    digits: list[int]


class HintRequest(BaseModel):
    board: list[list[int | str | None]]  # 9x9。空きマスは 0 / "" / None
    solution: list[list[int | str | None]]
    notes: list[NoteEntry] = []
    seed: int | None = None


class BoardRequest(BaseModel):
    board: list[list[int | str | None]]
    solution: list[list[int | str | None]] | None = None


def _to_list(grid) -> list[list[int]]:
    return [[int(v) for v in row] for row in grid]


@app.post("/api/new-game")
async def api_new_game(request: NewGameRequest):
    """
    新しい問題を作ります。
    seed を渡すと同じ問題を再現できます。
    """
    rng = random.Random(request.seed) if request.seed is not None else None
    try:
        puzzle, solution = generate_game(request.difficulty, rng=rng)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return {
        "difficulty": request.difficulty,
        "puzzle": _to_list(puzzle),
        "solution": _to_list(solution),
        "board": build_board_payload(puzzle),
    }


@app.post("/api/hint")
async def api_hint(request: HintRequest):
    """
    ヒントを 1 件返します。盤面が解答と一致していれば hint は null です。
    """
    notes = {(n.row, n.col): n.digits for n in request.notes}
    rng = random.Random(request.seed) if request.seed is not None else None
    try:
        hint = get_advanced_hint(request.board, request.solution, notes=notes, rng=rng)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return {"hint": build_hint_payload(hint)}


@app.post("/api/candidates")
async def api_candidates(request: BoardRequest):
    try:
        grid = normalize_grid(request.board)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return {
        "candidates": [
            {"row": r, "col": c, "digits": mask_to_digits(mask)}
            for (r, c), mask in get_all_candidates(grid).items()
        ]
    }


@app.post("/api/validate")
async def api_validate(request: BoardRequest):
    """
    盤面の状態を返します。
    solution があれば、解答と食い違うマスとクリア判定も返します。
    """
    try:
        grid = normalize_grid(request.board)
        solution = normalize_grid(request.solution) if request.solution is not None else None
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    result = {"board": build_board_payload(grid)}
    if solution is not None:
        incorrect = find_incorrect_cells(grid, solution)
        result["incorrect_cells"] = [
            {"row": int(r), "col": int(c)} for r, c in zip(*incorrect.nonzero())
        ]
        result["is_complete"] = is_board_complete(grid, solution)

    logger.debug("[api] validate: %s", {k: v for k, v in result.items() if k != "board"})
    return result
