"""Terminal driver: human vs engine on stdin/stdout."""

import argparse
import sys
from typing import Callable, Optional

from tacmate.config import CONFIG, parse_mark
from tacmate.core.board import Board, Coord, Mark
from tacmate.core.utils import configure_logging, format_move
from tacmate.main import Engine

GREEN = "\x1b[32m"
YELLOW = "\x1b[33m"
BOLD = "\x1b[1m"
RESET = "\x1b[0m"
CLEAR = "\x1b[2J\x1b[1;1H"


def parse_move(text: str) -> Optional[Coord]:
    """"1a" -> (0, 0). Only the length is checked; range is left to Board.is_legal."""
    text = text.strip()
    if len(text) != 2:
        return None
    return ord(text[0]) - ord("1"), ord(text[1].lower()) - ord("a")


def render(board: Board, color: bool = True) -> str:
    if not color:
        return str(board)
    glyphs = {None: ".", Mark.X: f"{GREEN}x{RESET}", Mark.O: f"{YELLOW}o{RESET}"}
    lines = ["  a b c"]
    for i, row in enumerate(board.fields):
        lines.append(f"{i + 1} " + " ".join(glyphs[cell] for cell in row))
    return "\n".join(lines)


def play(engine: Engine, human: Mark = Mark.X, input_fn: Optional[Callable[[str], str]] = None,
         out=None, color: bool = True, clear_screen: bool = False) -> Optional[str]:
    out = out or sys.stdout
    input_fn = input_fn or input

    def say(msg=""):
        print(msg, file=out)

    prompt = "Action [e.g. 1a]: "
    while not engine.is_game_over():
        if clear_screen:
            out.write(CLEAR)
        say(render(engine.board, color))
        say()

        if engine.next_player == human:
            while True:
                text = input_fn(prompt)
                prompt = "> "
                if not text.strip():
                    continue
                move = parse_move(text)
                if move is None:
                    say("Invalid action")
                    continue
                if not engine.make_move(move):
                    say("Illegal action")
                    continue
                break
            prompt = "Action [e.g. 1a]: "
        else:
            move = engine.play_engine_move()
            say(f"{CONFIG.ui.engine_name} plays: {format_move(move)}")
        say()

    say(f"{YELLOW}{BOLD}Game Ended{RESET}\n" if color else "Game Ended\n")
    winner = engine.winner()
    if winner is not None:
        say(f"Winner is Player {winner}")
    else:
        say("Game ended with a draw")
    say("\nFinal board:\n")
    say(render(engine.board, color))
    return engine.result()


def main(argv=None):
    parser = argparse.ArgumentParser(description=f"Play tic-tac-toe against {CONFIG.ui.engine_name}")
    parser.add_argument("--first", type=str, default=None, help="Mark that moves first (X or O)")
    parser.add_argument("--human", type=str, default=None, help="Mark played by the human (X or O)")
    parser.add_argument("--threads", type=int, default=None, help="Threads for root move scoring")
    parser.add_argument("--no-color", action="store_true", help="Plain output")
    args = parser.parse_args(argv)

    configure_logging(CONFIG.log_level)
    first = parse_mark(args.first) if args.first else CONFIG.game.first
    human = parse_mark(args.human) if args.human else CONFIG.game.human
    color = CONFIG.ui.color and not args.no_color

    engine = Engine(first_mover=first, threads=args.threads)
    try:
        play(engine, human=human, color=color, clear_screen=CONFIG.ui.clear_screen and color)
    except (EOFError, KeyboardInterrupt):
        print("\nGame aborted")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
