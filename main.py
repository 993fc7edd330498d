#!/usr/bin/env python3
"""Casual Mahjong - play against three scripted opponents in the terminal"""

import os
import time

from rich.console import Console
from rich.panel import Panel

from casual_mahjong.engine.event import EventBus
from casual_mahjong.engine.game import GameConfig, TurnEngine
from casual_mahjong.engine.game_logger import GameLogger, setup_logging
from casual_mahjong.engine.round import GamePhase
from casual_mahjong.player.base import build_game_view
from casual_mahjong.player.human import HumanPlayer
from casual_mahjong.player.scripted_ai import Difficulty
from casual_mahjong.ui.renderer import Renderer

console = Console()

# Real seconds per logical second of opponent pacing
PACE = float(os.environ.get("CASUAL_MAHJONG_PACE", "1.0"))

MENU_CHOICES = {
    1: (Difficulty.EASY, False),
    2: (Difficulty.MEDIUM, False),
    3: (Difficulty.HARD, False),
    4: (Difficulty.HARD, True),
}


def show_menu() -> int:
    """Show difficulty selection menu and return choice."""
    console.print()
    console.print(Panel(
        "[bold cyan]Mahjong[/bold cyan]\n"
        "[dim]You against three AI bots[/dim]",
        border_style="cyan",
        padding=(1, 4),
    ))
    console.print()
    console.print("  Select difficulty:")
    console.print("    1. Easy")
    console.print("    2. Medium")
    console.print("    3. Hard")
    console.print("    4. Watch four bots (hard)")
    console.print("    0. Quit")
    console.print()

    while True:
        try:
            choice = int(console.input("  > Choose 0-4: ").strip())
            if 0 <= choice <= 4:
                return choice
        except (ValueError, EOFError):
            pass
        console.print("  [red]Invalid input[/red]")


def play_game(difficulty: Difficulty, is_spectator: bool):
    """Play one game until it finishes."""
    config = GameConfig(
        difficulty=difficulty,
        human_seat=None if is_spectator else 0,
    )
    event_bus = EventBus()
    renderer = Renderer(console, event_bus, config.player_names, config.human_seat)

    logger = GameLogger(config.player_names, config.to_dict(), config.log_dir)
    logger.subscribe_events(event_bus)

    engine = TurnEngine(config, event_bus)
    engine.new_game()
    human = None if is_spectator else HumanPlayer(config.player_names[0], console)
    scheduler = engine.scheduler

    while engine.phase == GamePhase.PLAYING:
        snapshot = engine.snapshot()
        seat = snapshot.current_player_index

        if human is not None and not snapshot.current_player.is_ai and scheduler.pending == 0:
            renderer.render_snapshot(snapshot)
            view = build_game_view(seat, engine.round.players, snapshot.draw_pile_remaining)
            tile = human.choose_discard(view)
            engine.select_tile(tile.id)
            engine.discard_selected()
            continue

        due = scheduler.next_due()
        if due is None:
            break
        time.sleep(max(due - scheduler.now, 0.0) * PACE)
        scheduler.run_next()

    final = engine.snapshot()
    renderer.show_result(final)

    log_path = logger.save()
    console.print(f"  [dim]Game log saved: {log_path}[/dim]")


def main():
    """Main entry point."""
    setup_logging(os.environ.get("CASUAL_MAHJONG_LOG_LEVEL", "WARNING"))
    try:
        while True:
            choice = show_menu()
            if choice == 0:
                console.print("\n  Goodbye!\n")
                break
            difficulty, is_spectator = MENU_CHOICES[choice]
            play_game(difficulty, is_spectator)
            console.print()
    except KeyboardInterrupt:
        console.print("\n\n  [dim]Game exited[/dim]\n")
    except EOFError:
        console.print("\n\n  [dim]Game exited[/dim]\n")


if __name__ == "__main__":
    main()
