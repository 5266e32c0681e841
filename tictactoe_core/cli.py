from __future__ import annotations

import argparse
from typing import List, Optional

from .board import SIZE, check_index
from .moves import apply_move, jump_to, legal_moves, toggle_moves
from .state import GameState
from .status import game_status, move_list, outcome, winning_line, IN_PROGRESS


def parse_cell(text: str) -> int:
    """Parses '0'..'8' or a 1-based 'r,c' / 'r c' pair into a cell index."""
    text = text.strip()
    sep = ',' if ',' in text else ' '
    parts = [t for t in text.split(sep) if t != '']
    if len(parts) == 1:
        index = int(parts[0])
    elif len(parts) == 2:
        r, c = int(parts[0]), int(parts[1])
        if not (1 <= r <= SIZE and 1 <= c <= SIZE):
            raise ValueError(f'row/col out of range: {text!r}')
        index = (r - 1) * SIZE + (c - 1)
    else:
        raise ValueError(f'could not parse cell: {text!r}')
    return check_index(index)


def format_moves(state: GameState) -> str:
    lines: List[str] = []
    for entry in move_list(state):
        marker = '>' if entry['current'] else ' '
        label = f"  {entry['label']}" if entry['label'] else ''
        lines.append(f"{marker} {entry['move']}. {entry['description']}{label}")
    return '\n'.join(lines)


def show(state: GameState) -> None:
    board = state.current.board
    print(board.pretty(winning_line(state)))
    print(game_status(board, state.x_is_next))


def run(initial: Optional[List[int]] = None, show_moves: bool = False) -> GameState:
    state = GameState.new()
    for index in initial or []:
        state = apply_move(state, index)
    show(state)
    if show_moves:
        print(format_moves(state))

    while True:
        try:
            text = input("Cell (0-8 or r,c), 'jump N', 'moves', 'toggle' or 'quit': ").strip()
        except EOFError:
            print()
            return state
        if not text:
            continue
        cmd = text.split()[0].lower()
        if cmd in ('quit', 'q', 'exit'):
            return state
        if cmd == 'moves':
            print(format_moves(state))
            continue
        if cmd == 'toggle':
            state = toggle_moves(state)
            print(format_moves(state))
            continue
        try:
            if cmd == 'jump':
                state = jump_to(state, int(text.split()[1]))
            else:
                index = parse_cell(text)
                if index not in legal_moves(state):
                    print('That cell is not available.')
                    continue
                state = apply_move(state, index)
        except (ValueError, IndexError) as e:
            print(f'Could not use {text!r}: {e}')
            continue
        show(state)
        if show_moves or outcome(state) != IN_PROGRESS:
            print(format_moves(state))


def main(argv: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser(description='Hot-seat tic-tac-toe with move history')
    parser.add_argument('--moves', default='', help='Comma-separated cells to play before prompting, e.g. 0,4,1')
    parser.add_argument('--show-moves', action='store_true', help='Print the move list after every move')
    args = parser.parse_args(argv)

    try:
        initial = [parse_cell(t) for t in args.moves.split(',') if t.strip() != '']
    except ValueError as e:
        parser.error(str(e))
    run(initial, show_moves=args.show_moves)
