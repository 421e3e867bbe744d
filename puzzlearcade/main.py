"""
Command line entry point for Puzzle Arcade.

Usage:
    python -m puzzlearcade.main generate config.yaml --output puzzles/ws.json
    python -m puzzlearcade.main verify puzzles/ws.json
    python -m puzzlearcade.main play puzzles/ws.json
"""

import argparse
import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Callable, Optional

import yaml

from .engine import Position, verify
from .generation import GeneratorConfig, GeneratedPuzzle, PuzzleGenerator, GenerationError
from .session import (
    GameSession,
    WordSearchSession,
    CrosswordSession,
    LetterScrambleSession,
    MazeSession,
    SecondTicker,
    create_session,
)
from .utils.grid_visualizer import render_snapshot, format_time


HELP = {
    "word-search": "ROW COL ROW COL   drag from one cell to another",
    "crossword": "type ROW COL LETTERS | clue NUMBER across|down | up/down/left/right | back | check",
    "letter-scramble": "WORD to guess | shuffle",
    "maze": "w/a/s/d (several at once, e.g. 'ddds')",
}

MAZE_KEYS = {"w": (0, -1), "s": (0, 1), "a": (-1, 0), "d": (1, 0)}


def load_config(config_path: str) -> GeneratorConfig:
    """Load generator configuration from a YAML file."""
    path = Path(config_path)

    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(path) as f:
        data = yaml.safe_load(f) or {}

    return GeneratorConfig(**data)


def handle_command(session: GameSession, command: str) -> str:
    """
    Apply one line of player input to a session.

    Returns a short message for the player; unknown or rejected input
    leaves the session unchanged.
    """
    parts = command.strip().split()
    if not parts:
        return ""
    verb = parts[0].lower()

    if verb == "pause":
        return f"Status: {session.toggle_pause()}"
    if verb == "reset":
        session.reset()
        return "Puzzle reset"

    if isinstance(session, WordSearchSession):
        if len(parts) != 4 or not all(p.lstrip("-").isdigit() for p in parts):
            return f"Usage: {HELP['word-search']}"
        r1, c1, r2, c2 = (int(p) for p in parts)
        session.select_start(Position(r1, c1))
        session.select_extend(Position(r2, c2))
        result = session.select_commit()
        return {
            "found": f"Found {result.word}!",
            "duplicate": f"{result.word} was already found",
        }.get(result.outcome, "No word there")

    if isinstance(session, CrosswordSession):
        if verb == "type" and len(parts) == 4 and parts[1].isdigit() and parts[2].isdigit():
            row, col = int(parts[1]), int(parts[2])
            for i, ch in enumerate(parts[3]):
                if i > 0:
                    if session.cursor.active is None:
                        break
                    row, col = session.cursor.active
                if not session.type_char(row, col, ch):
                    break
            return ""
        if verb == "clue" and len(parts) == 3 and parts[1].isdigit() and parts[2] in ("across", "down"):
            session.select_clue(int(parts[1]), parts[2])
            return ""
        if verb in ("up", "down", "left", "right"):
            session.arrow(verb)
            return ""
        if verb == "back":
            session.backspace()
            return ""
        if verb == "check":
            result = session.check()
            return f"You have {result.correct} of {result.total} correct words so far."
        return f"Usage: {HELP['crossword']}"

    if isinstance(session, LetterScrambleSession):
        if verb == "shuffle":
            session.shuffle()
            return ""
        result = session.submit_guess(parts[0])
        return {
            "found": "Great word!",
            "duplicate": "Already found!",
            "unformable": "Those letters are not in the rack.",
            "ignored": "",
        }.get(result.outcome, "Not a valid word.")

    if isinstance(session, MazeSession):
        if not all(ch in MAZE_KEYS for ch in verb):
            return f"Usage: {HELP['maze']}"
        for ch in verb:
            session.move(*MAZE_KEYS[ch])
        return ""

    return "Unknown command"


def play(
    session: GameSession,
    read: Callable[[str], str] = input,
    write: Callable[[str], None] = print,
    ticker: Optional[SecondTicker] = None,
) -> GameSession:
    """Run an interactive session until it finishes or the player quits."""
    ticker = ticker or SecondTicker()
    ticker.start()
    write(f"Commands: {HELP.get(session.rules.game, '')} | pause | reset | quit")

    while not session.is_finished:
        ticker.drive(session)
        write(render_snapshot(session.snapshot()))
        if session.is_finished:
            break
        try:
            command = read("> ")
        except EOFError:
            break
        ticker.drive(session)
        if command.strip().lower() in ("quit", "exit"):
            break
        message = handle_command(session, command)
        if message:
            write(message)

    write(render_snapshot(session.snapshot()))
    if session.status == "won":
        write(f"Puzzle solved in {format_time(session.elapsed_seconds)}!")
    elif session.status == "over":
        write(f"Time's up! You found {len(session.found)} words.")
    return session


def cmd_generate(args: argparse.Namespace) -> int:
    try:
        config = load_config(args.config)
    except Exception as e:
        print(f"Error loading config: {e}", file=sys.stderr)
        return 1

    if args.game:
        config.game = args.game
    if args.difficulty:
        config.difficulty = args.difficulty
    if args.theme:
        config.theme = args.theme

    if args.output:
        output_path = Path(args.output)
    else:
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        output_path = Path("puzzles") / f"{config.game}_{timestamp}.json"

    generator = PuzzleGenerator.create(config=config)
    try:
        generated = generator.generate()
    except GenerationError as e:
        print(f"Puzzle generation failed: {e}", file=sys.stderr)
        print("Please try again.", file=sys.stderr)
        return 1

    generated.save(output_path)
    print(f"Generated {generated.game} puzzle ({generated.difficulty}"
          f"{', theme ' + generated.theme if generated.theme else ''})")
    print(f"Tokens used: {generated.usage.total_tokens}")
    print(f"Saved to: {output_path}")
    return 0


def cmd_verify(args: argparse.Namespace) -> int:
    try:
        generated = GeneratedPuzzle.load(args.puzzle)
    except Exception as e:
        print(f"Error loading puzzle: {e}", file=sys.stderr)
        return 1

    result = verify(generated.game, generated.puzzle)
    for error in result.errors:
        print(f"ERROR {error.code}: {error.message}")
    for warning in result.warnings:
        print(f"WARNING {warning.code}: {warning.message}")
    print("Puzzle is valid" if result.valid else "Puzzle is invalid")
    return 0 if result.valid else 1


def cmd_play(args: argparse.Namespace) -> int:
    try:
        generated = GeneratedPuzzle.load(args.puzzle)
        session = create_session(
            generated.game,
            generated.puzzle,
            time_limit=args.time_limit or generated.time_limit,
            target_count=args.target or generated.target_count,
        )
    except Exception as e:
        print(f"Cannot start puzzle: {e}", file=sys.stderr)
        return 1

    if generated.theme:
        print(f"Theme: {generated.theme}")
    if isinstance(session, CrosswordSession):
        for direction, clue in generated.puzzle.clues.all():
            print(f"  {clue.number} {direction}: {clue.clue} ({len(clue.answer)})")

    try:
        play(session)
    except KeyboardInterrupt:
        print("\nGame interrupted by user")
    return 0


def main(argv: Optional[list] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Generate and play Puzzle Arcade puzzles",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Example config.yaml:
  model: gpt-4o
  game: word-search
  difficulty: medium
  theme: space
  temperature: 0.7
  seed: 42
        """
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Log generation progress"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    generate_parser = subparsers.add_parser("generate", help="Generate a puzzle with an LLM")
    generate_parser.add_argument("config", help="Path to YAML configuration file")
    generate_parser.add_argument("--game", choices=["word-search", "crossword", "letter-scramble", "maze"])
    generate_parser.add_argument("--difficulty", choices=["easy", "medium", "hard"])
    generate_parser.add_argument("--theme", help="Theme for word search and crossword puzzles")
    generate_parser.add_argument(
        "--output", "-o",
        help="Path to save the puzzle JSON (default: puzzles/<game>_<timestamp>.json)"
    )
    generate_parser.set_defaults(func=cmd_generate)

    verify_parser = subparsers.add_parser("verify", help="Check a saved puzzle")
    verify_parser.add_argument("puzzle", help="Path to a saved puzzle JSON file")
    verify_parser.set_defaults(func=cmd_verify)

    play_parser = subparsers.add_parser("play", help="Play a saved puzzle in the terminal")
    play_parser.add_argument("puzzle", help="Path to a saved puzzle JSON file")
    play_parser.add_argument("--time-limit", type=int, help="Letter scramble round length in seconds (default: from the puzzle file)")
    play_parser.add_argument("--target", type=int, help="Words needed to win a letter scramble round (default: from the puzzle file)")
    play_parser.set_defaults(func=cmd_play)

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
