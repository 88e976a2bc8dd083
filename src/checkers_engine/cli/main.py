"""
Main CLI for the checkers engine.

Reads one protocol message per line from stdin and answers each with
the state after this player's move on stdout:

    checkers-engine [init|i] [verbose|v] [fast|f]
"""

import argparse
import logging
import sys
from typing import Iterable, Optional, Sequence, TextIO

from ..core import MessageDecodeError, create_starting_state, find_possible_moves, from_message
from ..player import RandomPlayer
from ..utils import Deadline
from ..utils.rich_display import GameDisplay, setup_rich_logging

logger = logging.getLogger(__name__)

OPTION_WORDS = {
    "init": "init",
    "i": "init",
    "verbose": "verbose",
    "v": "verbose",
    "fast": "fast",
    "f": "fast",
}

# Time allowed to answer each message
DEADLINE_SECONDS = 1.0
FAST_DEADLINE_SECONDS = 0.1


def play_loop(
    lines: Iterable[str],
    out: TextIO,
    player: RandomPlayer,
    display: Optional[GameDisplay] = None,
    fast: bool = False,
    list_moves: bool = False,
) -> int:
    """
    Answer protocol messages until the game ends or input runs out.

    Args:
        lines: Incoming messages, one per line
        out: Stream for outgoing messages
        player: Chooses the reply to each state
        display: Verbose diagnostics, or None for quiet operation
        fast: Use the short deadline
        list_moves: Reply with every successor instead of choosing one

    Returns:
        Process exit status
    """
    for line in lines:
        # Deadline starts when the message arrives
        deadline = Deadline(FAST_DEADLINE_SECONDS if fast else DEADLINE_SECONDS)

        message = line.rstrip("\r\n")
        try:
            input_state = from_message(message)
        except MessageDecodeError as e:
            logger.error(f"Cannot decode {message!r}: {e}")
            return 1

        # We must produce the same message we received
        if input_state.to_message() != message:
            logger.error(f"Interpreted: {message!r}")
            logger.error(f"As:          {input_state.to_message()!r}")
            logger.error(input_state.to_diagram(input_state.next_player))
            return 1

        me = input_state.next_player
        if display is not None:
            display.show_state(input_state, "Received", me)

        if input_state.is_eog:
            logger.info("Game over, exiting")
            break

        if list_moves:
            successors = find_possible_moves(input_state)
            print(len(successors), file=out)
            for successor in successors:
                print(successor.to_message(), file=out)
            out.flush()
            continue

        output_state = player.play(input_state, deadline)

        if display is not None:
            display.show_state(output_state, "Sent", me)

        print(output_state.to_message(), file=out, flush=True)

        if output_state.is_eog:
            logger.info("Game over, exiting")
            break

    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Checkers engine (line protocol on stdin/stdout)")
    parser.add_argument(
        "options",
        nargs="*",
        metavar="OPTION",
        help="init|i: send the starting board first; verbose|v: print diagnostics "
        "to stderr; fast|f: use the short deadline",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level",
    )
    parser.add_argument(
        "--seed", type=int, default=None, help="Random seed for move selection"
    )
    parser.add_argument(
        "--list-moves",
        action="store_true",
        help="Reply with the number of legal successors followed by each of them",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> None:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    options = set()
    for word in args.options:
        if word not in OPTION_WORDS:
            parser.error(f"Unknown parameter: '{word}'")
        options.add(OPTION_WORDS[word])

    setup_rich_logging(args.log_level)

    # Start the game by sending the starting board
    if "init" in options:
        message = create_starting_state().to_message()
        logger.info(f"Sending initial board: {message!r}")
        print(message, flush=True)

    display = GameDisplay() if "verbose" in options else None
    status = play_loop(
        sys.stdin,
        sys.stdout,
        RandomPlayer(seed=args.seed),
        display=display,
        fast="fast" in options,
        list_moves=args.list_moves,
    )

    if status:
        sys.exit(status)


if __name__ == "__main__":
    main()
