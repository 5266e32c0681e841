from __future__ import annotations

import os
import sys
from typing import Any, Dict, Optional

from flask import Flask, jsonify, request, send_from_directory

# Ensure the game facade imports when executed directly from the repo root
if __package__ in (None, ""):
    sys.path.insert(0, os.path.abspath(os.path.dirname(__file__)))

try:
    from .game import (  # type: ignore
        Board,
        GameState,
        HistoryStep,
        apply_move,
        jump_to,
        render_view,
        toggle_moves,
        verify_state,
    )
except ImportError:
    from game import (  # type: ignore
        Board,
        GameState,
        HistoryStep,
        apply_move,
        jump_to,
        render_view,
        toggle_moves,
        verify_state,
    )

DEBUG_TRACE = os.getenv("TICTACTOE_DEBUG", "0").lower() in ("1", "true", "yes", "on")

# Serve the view layer from ./static (explicit absolute path)
STATIC_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), "static"))
app = Flask(__name__, static_url_path="/static", static_folder=STATIC_DIR)


# ---------- JSON codec ----------

def board_to_json(b: Board) -> Dict[str, Any]:
    return {"squares": list(b.cells)}


def board_from_json(obj: Dict[str, Any]) -> Board:
    squares = obj["squares"]
    if not isinstance(squares, list):
        raise ValueError("squares must be a list")
    return Board(cells=tuple(None if x in (None, "") else str(x) for x in squares))


def _as_int(v: Any, name: str) -> int:
    if isinstance(v, bool) or not isinstance(v, int):
        raise ValueError(f"{name} must be an integer")
    return v


def _opt_int(v: Any, name: str) -> Optional[int]:
    return None if v is None else _as_int(v, name)


def step_to_json(step: HistoryStep) -> Dict[str, Any]:
    return {
        "board": board_to_json(step.board),
        "row": step.row,
        "col": step.col,
        "player": step.player,
    }


def step_from_json(obj: Dict[str, Any]) -> HistoryStep:
    if not isinstance(obj, dict):
        raise ValueError("history step must be an object")
    player = obj.get("player")
    if player is not None and not isinstance(player, str):
        raise ValueError("player must be a string or null")
    return HistoryStep(
        board=board_from_json(obj["board"]),
        row=_opt_int(obj.get("row"), "row"),
        col=_opt_int(obj.get("col"), "col"),
        player=player,
    )


def state_to_json(s: GameState) -> Dict[str, Any]:
    return {
        "history": [step_to_json(step) for step in s.history],
        "stepNumber": int(s.step_number),
        "sortedAsc": bool(s.sorted_asc),
    }


def json_to_state(obj: Dict[str, Any]) -> GameState:
    """Decodes and validates a state posted by the browser; raises ValueError/KeyError/TypeError."""
    if not isinstance(obj, dict):
        raise ValueError("state must be an object")
    history = obj["history"]
    if not isinstance(history, list):
        raise ValueError("history must be a list")
    sorted_asc = obj.get("sortedAsc", True)
    if not isinstance(sorted_asc, bool):
        raise ValueError("sortedAsc must be a boolean")
    state = GameState(
        history=tuple(step_from_json(step) for step in history),
        step_number=_as_int(obj.get("stepNumber", len(history) - 1), "stepNumber"),
        sorted_asc=sorted_asc,
    )
    return verify_state(state)


def _bad_request(msg: str) -> Any:
    if DEBUG_TRACE:
        print(f"[api] 400 {request.path}: {msg}")
    return jsonify({"ok": False, "error": msg}), 400


def _state_from_body(body: Any) -> GameState:
    if not isinstance(body, dict):
        raise ValueError("body must be an object")
    s_in = body.get("state")
    if s_in is None:
        raise ValueError("state required")
    return json_to_state(s_in)


def _int_field(body: Dict[str, Any], name: str) -> int:
    return _as_int(body.get(name), name)


def _reply(state: GameState, **extra: Any) -> Any:
    payload: Dict[str, Any] = {"ok": True}
    payload.update(extra)
    payload["state"] = state_to_json(state)
    payload["view"] = render_view(state)
    return jsonify(payload)


# ---------- Static routes ----------

@app.get("/")
def index() -> Any:
    return send_from_directory(app.static_folder, "index.html")


@app.get("/main.js")
def main_js() -> Any:
    resp = send_from_directory(app.static_folder, "main.js")
    resp.headers["Content-Type"] = "application/javascript; charset=utf-8"
    return resp


@app.get("/styles.css")
def styles_css() -> Any:
    resp = send_from_directory(app.static_folder, "styles.css")
    resp.headers["Content-Type"] = "text/css; charset=utf-8"
    return resp


# ---------- Game API (used by main.js) ----------

@app.post("/api/new")
def api_new() -> Any:
    return _reply(GameState.new())


@app.post("/api/move")
def api_move() -> Any:
    body = request.get_json(force=True, silent=True) or {}
    try:
        state = _state_from_body(body)
        cell = _int_field(body, "cell")
        next_state = apply_move(state, cell)
    except (KeyError, TypeError, ValueError) as e:
        return _bad_request(f"bad move: {e}")
    # Occupied cells and finished games are ignored, not errors
    return _reply(next_state, accepted=next_state is not state)


@app.post("/api/jump")
def api_jump() -> Any:
    body = request.get_json(force=True, silent=True) or {}
    try:
        state = _state_from_body(body)
        next_state = jump_to(state, _int_field(body, "step"))
    except (KeyError, TypeError, ValueError) as e:
        return _bad_request(f"bad jump: {e}")
    return _reply(next_state)


@app.post("/api/toggle")
def api_toggle() -> Any:
    body = request.get_json(force=True, silent=True) or {}
    try:
        state = _state_from_body(body)
    except (KeyError, TypeError, ValueError) as e:
        return _bad_request(f"bad state: {e}")
    return _reply(toggle_moves(state))


@app.post("/api/view")
def api_view() -> Any:
    body = request.get_json(force=True, silent=True) or {}
    try:
        state = _state_from_body(body)
    except (KeyError, TypeError, ValueError) as e:
        return _bad_request(f"bad state: {e}")
    return jsonify({"ok": True, "view": render_view(state)})


def main() -> None:
    debug = os.getenv("FLASK_DEBUG", os.getenv("DEBUG", "0")).lower() in ("1", "true", "yes", "on")
    host = os.getenv("TICTACTOE_HOST", "0.0.0.0")
    app.run(host=host, port=int(os.getenv("PORT", "5000")), debug=debug)


# Entrypoint for "python app.py"
if __name__ == "__main__":
    main()
