"""
Rich-based diagnostics for the game loop.

Everything goes to stderr: stdout carries the protocol messages.
"""

import logging
from typing import Optional
from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from ..core import GameState, RED, get_game_result

console = Console(stderr=True)


class GameDisplay:
    """
    Rich-based display for verbose mode.

    Shows:
    - Protocol message received/sent
    - Board diagram with game information
    """

    def log_success(self, message: str):
        """Log success message."""
        console.print(f"[green]✓[/green] {message}")

    def show_state(self, state: GameState, title: str = "State", player: Optional[int] = None):
        """Show a state's message and diagram in a panel."""
        if player is None:
            player = state.next_player
        if state.next_player == RED:
            to_move = "[red]Red to move[/red]"
        else:
            to_move = "[white]White to move[/white]"

        console.print(Text(state.to_message(), style="dim"))
        console.print(
            Panel(
                Text(state.to_diagram(player)),
                title=f"[bold]{title}[/bold]",
                subtitle=to_move,
                expand=False,
            )
        )

        result = get_game_result(state)
        if result is not None:
            self.log_success(f"Game over: {result}")


def setup_rich_logging(level: str = "WARNING"):
    """Configure logging to work nicely with rich console."""
    from rich.logging import RichHandler

    # Remove existing handlers
    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    # Add rich handler
    rich_handler = RichHandler(
        console=console,
        show_time=True,
        show_path=False,
        rich_tracebacks=True,
    )
    rich_handler.setFormatter(logging.Formatter("%(message)s"))

    logging.basicConfig(
        level=getattr(logging, level.upper()),
        handlers=[rich_handler],
        format="%(message)s",
    )
