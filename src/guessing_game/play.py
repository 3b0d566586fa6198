#!/usr/bin/env python
"""Playable number-guessing game.

Usage:
    guessing-game                          # Guess a secret between 1 and 100
    guessing-game --seed 42                # Reproducible secret
    guessing-game --reveal-secret          # Show the secret first (debug/demo)
    guessing-game --ai --noise 0.2         # Watch the stub guesser play
    guessing-game --games 1000             # Stress test with the stub guesser
    guessing-game --tui                    # Full-screen Textual UI
"""

import argparse
import asyncio
import logging
import random
import statistics
import sys
from collections import Counter
from typing import Optional

# Enable Windows console colors
if sys.platform == "win32":
    import colorama
    colorama.init()

from rich.console import Console

from guessing_game.models import MIN_GUESS, MAX_GUESS, GameConfig
from guessing_game.engine import GuessingGame, TransportFailure
from guessing_game.events import GameEventLog, GameStatus, MessageKind, READ_FAILURE
from guessing_game.ai.stub_ai import create_stub_guesser
from guessing_game.ui.console import ConsoleTransport
from guessing_game.ui.textual_game import GuessingGameUI

logger = logging.getLogger(__name__)

EXIT_WIN = 0
EXIT_FAILURE = 1

# Stub guesser line cap, so a fully noisy guesser still terminates
STUB_MAX_LINES = 1000

# Buckets used for the uniformity check in the stress test report
SECRET_BUCKETS = 10


def _save_log(event_log: GameEventLog, log_file: Optional[str], console: Console) -> None:
    """Save the event log to a file, if requested."""
    if not log_file:
        return
    try:
        with open(log_file, "w", encoding="utf-8") as f:
            f.write(str(event_log))
        console.print(f"Event log saved to {log_file}", style="dim")
    except OSError as e:
        console.print(f"[red]Failed to save log: {e}[/red]")


async def run_console_game(
    config: GameConfig,
    ai: bool = False,
    noise: float = 0.0,
    log_file: Optional[str] = None,
    console: Optional[Console] = None,
) -> int:
    """Play one game in the terminal.

    Args:
        config: Session options
        ai: If True the stub guesser plays instead of the keyboard
        noise: Stub guesser invalid-line probability
        log_file: File to save the event log (None to disable)
        console: Rich console for output

    Returns:
        Process exit status (0 on a win, 1 on transport failure)
    """
    console = console or Console()
    transport = ConsoleTransport(console)

    if ai:
        guesser = create_stub_guesser(seed=config.seed, noise=noise, max_lines=STUB_MAX_LINES)
        game = GuessingGame(
            source=guesser,
            sink=transport,
            config=config,
            event_callback=guesser.observe,
        )
    else:
        game = GuessingGame(source=transport, sink=transport, config=config)

    try:
        await game.run()
        status = EXIT_WIN
    except TransportFailure as e:
        logger.debug("Transport failure: %s", e.reason)
        Console(stderr=True).print(READ_FAILURE, style="red", highlight=False)
        status = EXIT_FAILURE

    _save_log(game.event_log, log_file, console)
    return status


class _DiscardSink:
    """Sink that drops every message (stress test sessions)."""

    def write_line(self, text: str, kind: MessageKind = MessageKind.INFO) -> None:
        pass


def chi_square_uniform(values: list[int], buckets: int = SECRET_BUCKETS) -> float:
    """Chi-square statistic of values in [MIN_GUESS, MAX_GUESS] against a uniform spread.

    The guess range must divide evenly into the buckets.

    Args:
        values: Observed secrets
        buckets: Number of equal-width buckets over the guess range

    Returns:
        The chi-square statistic (buckets - 1 degrees of freedom)
    """
    span = MAX_GUESS - MIN_GUESS + 1
    counts = [0] * buckets
    for value in values:
        counts[(value - MIN_GUESS) * buckets // span] += 1

    expected = len(values) / buckets
    if expected == 0:
        return 0.0
    return sum((observed - expected) ** 2 / expected for observed in counts)


def run_stress_test(
    num_games: int,
    seed_base: Optional[int] = None,
    noise: float = 0.0,
    console: Optional[Console] = None,
) -> dict:
    """Run many stub-guesser games and report results.

    Args:
        num_games: Number of games to run
        seed_base: Optional seed base (uses random if not provided)
        noise: Stub guesser invalid-line probability
        console: Rich console for the report

    Returns:
        Summary dict with secrets, lines per won game, abort count and outcome counts
    """
    console = console or Console()

    if seed_base is None:
        seed_base = random.randint(1, 1000000)

    console.print(f"\n[bold]Running stress test: {num_games} games...[/bold]")
    console.print(f"Seed base: {seed_base}")
    console.print("-" * 50)

    async def run_one(game_num: int) -> GameEventLog:
        seed = seed_base + game_num
        guesser = create_stub_guesser(seed=seed, noise=noise, max_lines=STUB_MAX_LINES)
        game = GuessingGame(
            source=guesser,
            sink=_DiscardSink(),
            config=GameConfig(seed=seed),
            event_callback=guesser.observe,
        )
        try:
            return await game.run()
        except TransportFailure:
            return game.event_log

    async def run_all():
        tasks = [run_one(i) for i in range(num_games)]
        return await asyncio.gather(*tasks)

    logs = asyncio.run(run_all())

    secrets = [log.game_start.secret for log in logs if log.game_start]
    rounds = [len(log.rounds) for log in logs if log.winner_found]
    aborted = [log for log in logs if not log.winner_found]
    outcomes = Counter(event.outcome.value for log in logs for event in log.rounds)

    # Print report
    console.print("=" * 60)
    console.print("STRESS TEST REPORT")
    console.print("=" * 60)
    console.print(f"\nGames run: {num_games}")
    console.print(f"Won: {len(rounds)}")
    console.print(f"Aborted: {len(aborted)}")

    if secrets:
        console.print("\nSecrets:")
        console.print(f"  min={min(secrets)} max={max(secrets)} mean={statistics.mean(secrets):.1f}")
        console.print(f"  chi-square ({SECRET_BUCKETS - 1} dof): {chi_square_uniform(secrets):.2f}")

    if rounds:
        console.print("\nLines per won game:")
        console.print(f"  mean={statistics.mean(rounds):.2f} max={max(rounds)}")

    console.print("\nOutcomes:")
    for outcome, count in sorted(outcomes.items()):
        console.print(f"  {outcome}: {count}")

    console.print("=" * 60)

    return {
        "seed_base": seed_base,
        "secrets": secrets,
        "rounds": rounds,
        "aborted": len(aborted),
        "outcomes": outcomes,
    }


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Guess the secret number between 1 and 100",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for a reproducible secret"
    )
    parser.add_argument(
        "--reveal-secret",
        action="store_true",
        help="Print the secret number before play begins (debug/demo)"
    )
    parser.add_argument(
        "--ai",
        action="store_true",
        help="Let the stub guesser play instead of reading the keyboard"
    )
    parser.add_argument(
        "--noise",
        type=float,
        default=0.0,
        help="Probability that the stub guesser sends an invalid line (default: 0)"
    )
    parser.add_argument(
        "--games",
        type=int,
        default=None,
        help="Run N stub-guesser games and print a report (stress test mode)"
    )
    parser.add_argument(
        "--tui",
        action="store_true",
        help="Play in a full-screen Textual UI"
    )
    parser.add_argument(
        "--log-file",
        type=str,
        default=None,
        help="File to save the game event log (default: not saved)"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging"
    )

    args = parser.parse_args(argv)

    # Configure logging
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(name)s: %(message)s",
    )

    # Validate args
    if args.games is not None and args.games < 1:
        print("Error: --games must be a positive integer")
        return EXIT_FAILURE
    if not 0.0 <= args.noise <= 1.0:
        print("Error: --noise must be between 0 and 1")
        return EXIT_FAILURE

    config = GameConfig(reveal_secret=args.reveal_secret, seed=args.seed)

    if args.games is not None:
        report = run_stress_test(args.games, seed_base=args.seed, noise=args.noise)
        return EXIT_WIN if report["aborted"] == 0 else EXIT_FAILURE

    if args.tui:
        app = GuessingGameUI(config)
        status = app.run()
        if app.event_log is not None:
            _save_log(app.event_log, args.log_file, Console())
        if status != GameStatus.WON:
            return EXIT_FAILURE
        return EXIT_WIN

    return asyncio.run(run_console_game(
        config,
        ai=args.ai,
        noise=args.noise,
        log_file=args.log_file,
    ))


if __name__ == "__main__":
    sys.exit(main())
