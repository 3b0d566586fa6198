"""Tests for the command-line entry point and stress test mode."""

import io
import random

import pytest
from rich.console import Console

from guessing_game.models import MIN_GUESS, MAX_GUESS
from guessing_game.events import GameEventLog, GameOver, GameStart, GameStatus
from guessing_game.play import (
    EXIT_FAILURE,
    EXIT_WIN,
    STUB_MAX_LINES,
    chi_square_uniform,
    main,
    run_stress_test,
)


def feed_input(monkeypatch, lines):
    """Make builtins.input return the given lines, then raise EOFError."""
    remaining = iter(lines)

    def fake_input(*args):
        try:
            return next(remaining)
        except StopIteration:
            raise EOFError

    monkeypatch.setattr("builtins.input", fake_input)


def secret_for_seed(seed: int) -> int:
    return random.Random(seed).randint(MIN_GUESS, MAX_GUESS)


class TestHumanMode:
    """Tests: keyboard play through the console transport."""

    def test_win_exits_zero(self, monkeypatch, capsys):
        secret = secret_for_seed(5)
        feed_input(monkeypatch, ["abc", "0", str(secret)])

        assert main(["--seed", "5"]) == EXIT_WIN

        out = capsys.readouterr().out
        assert "Guess the number!" in out
        assert "Error. Invalid input. Please enter a valid number." in out
        assert "Error: Please enter a number between 1 and 100." in out
        assert "You win!!" in out
        assert "The secret number is" not in out

    def test_end_of_input_exits_one(self, monkeypatch, capsys):
        feed_input(monkeypatch, [])

        assert main(["--seed", "7"]) == EXIT_FAILURE

        captured = capsys.readouterr()
        assert "Failed to read line" in captured.err
        assert "You win!!" not in captured.out

    def test_reveal_secret(self, monkeypatch, capsys):
        secret = secret_for_seed(9)
        feed_input(monkeypatch, [str(secret)])

        assert main(["--seed", "9", "--reveal-secret"]) == EXIT_WIN
        assert f"The secret number is: {secret}" in capsys.readouterr().out

    def test_log_file(self, monkeypatch, tmp_path):
        secret = secret_for_seed(3)
        feed_input(monkeypatch, [str(secret)])
        log_file = tmp_path / "game_log.txt"

        assert main(["--seed", "3", "--log-file", str(log_file)]) == EXIT_WIN

        text = log_file.read_text(encoding="utf-8")
        assert f"GameStart: secret={secret}" in text
        assert "GameOver: WON" in text

    def test_log_file_written_on_abort(self, monkeypatch, tmp_path):
        feed_input(monkeypatch, ["12"])
        log_file = tmp_path / "game_log.txt"

        assert main(["--seed", "3", "--log-file", str(log_file)]) == EXIT_FAILURE
        assert "GameOver: ABORTED (end of input)" in log_file.read_text(encoding="utf-8")


class TestAiMode:
    """Tests: stub guesser play."""

    def test_ai_wins(self, capsys):
        assert main(["--ai", "--seed", "21"]) == EXIT_WIN
        assert "You win!!" in capsys.readouterr().out

    def test_noisy_ai_wins(self, capsys):
        assert main(["--ai", "--seed", "21", "--noise", "0.4"]) == EXIT_WIN

    def test_all_noise_stops_at_line_cap(self, capsys):
        """A guesser that never sends a valid line gives up instead of looping forever."""
        assert main(["--ai", "--seed", "1", "--noise", "1.0"]) == EXIT_FAILURE

        captured = capsys.readouterr()
        assert "Failed to read line" in captured.err
        assert "You win!!" not in captured.out
        rejected = (
            captured.out.count("Error. Invalid input.")
            + captured.out.count("Error: Please enter a number between")
        )
        assert rejected == STUB_MAX_LINES


def fake_tui_run(monkeypatch, status, secret=42):
    """Replace GuessingGameUI.run with one that ends at once with the given status."""
    calls = []

    def run(self):
        calls.append(self.config)
        if status is not None:
            self.event_log = GameEventLog(
                game_start=GameStart(secret=secret),
                game_over=GameOver(status=status),
            )
        return status

    monkeypatch.setattr("guessing_game.play.GuessingGameUI.run", run)
    return calls


class TestTuiMode:
    """Tests: --tui exit status and log saving, without starting the app."""

    @pytest.mark.parametrize("status, expected", [
        (GameStatus.WON, EXIT_WIN),
        (GameStatus.ABORTED, EXIT_FAILURE),
        (None, EXIT_FAILURE),
    ])
    def test_exit_status(self, monkeypatch, status, expected):
        fake_tui_run(monkeypatch, status)
        assert main(["--tui"]) == expected

    def test_config_passed_to_app(self, monkeypatch):
        calls = fake_tui_run(monkeypatch, GameStatus.WON)
        main(["--tui", "--seed", "8", "--reveal-secret"])
        assert calls[0].seed == 8
        assert calls[0].reveal_secret

    def test_log_file(self, monkeypatch, tmp_path):
        fake_tui_run(monkeypatch, GameStatus.ABORTED, secret=17)
        log_file = tmp_path / "tui_log.txt"

        assert main(["--tui", "--log-file", str(log_file)]) == EXIT_FAILURE

        text = log_file.read_text(encoding="utf-8")
        assert "GameStart: secret=17" in text
        assert "GameOver: ABORTED" in text

    def test_no_log_without_a_game(self, monkeypatch, tmp_path):
        fake_tui_run(monkeypatch, None)
        log_file = tmp_path / "tui_log.txt"

        assert main(["--tui", "--log-file", str(log_file)]) == EXIT_FAILURE
        assert not log_file.exists()


class TestArgumentValidation:
    """Tests: flags rejected by the CLI itself."""

    def test_games_must_be_positive(self, capsys):
        assert main(["--games", "0"]) == EXIT_FAILURE
        assert "--games must be a positive integer" in capsys.readouterr().out

    @pytest.mark.parametrize("noise", ["-0.5", "2"])
    def test_noise_must_be_probability(self, noise, capsys):
        assert main(["--noise", noise]) == EXIT_FAILURE

    def test_unknown_flag_exits_two(self):
        with pytest.raises(SystemExit) as exc_info:
            main(["--no-such-flag"])
        assert exc_info.value.code == 2


class TestStressTest:
    """Tests: many stub-guesser games in parallel."""

    @pytest.fixture
    def console(self) -> Console:
        return Console(file=io.StringIO(), force_terminal=False, width=120)

    def test_all_games_won(self, console):
        report = run_stress_test(200, seed_base=1, console=console)

        assert report["aborted"] == 0
        assert len(report["rounds"]) == 200
        assert all(MIN_GUESS <= s <= MAX_GUESS for s in report["secrets"])
        assert max(report["rounds"]) <= 7
        assert "STRESS TEST REPORT" in console.file.getvalue()

    def test_noise_produces_input_errors(self, console):
        report = run_stress_test(50, seed_base=100, noise=0.3, console=console)

        assert report["aborted"] == 0
        assert report["outcomes"]["WIN"] == 50
        assert report["outcomes"]["PARSE_ERROR"] + report["outcomes"]["RANGE_ERROR"] > 0

    def test_same_seed_base_same_secrets(self, console):
        first = run_stress_test(20, seed_base=77, console=console)
        second = run_stress_test(20, seed_base=77, console=console)
        assert first["secrets"] == second["secrets"]

    def test_cli_stress_mode(self, capsys):
        assert main(["--games", "10", "--seed", "4"]) == EXIT_WIN
        assert "Games run: 10" in capsys.readouterr().out


class TestChiSquare:
    """Tests: chi_square_uniform."""

    def test_perfectly_uniform(self):
        assert chi_square_uniform(list(range(MIN_GUESS, MAX_GUESS + 1))) == 0.0

    def test_skewed(self):
        # 100 samples in one of 10 buckets: 9 * 10 + 90**2 / 10
        assert chi_square_uniform([1] * 100) == pytest.approx(900.0)

    def test_empty(self):
        assert chi_square_uniform([]) == 0.0
