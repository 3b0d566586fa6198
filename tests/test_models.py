"""Tests for secret, outcome and session state models."""

import random
from collections import Counter

import pytest
from pydantic import ValidationError

from guessing_game.models import (
    MIN_GUESS,
    MAX_GUESS,
    GameConfig,
    GuessAttempt,
    RoundOutcome,
    RoundResult,
    SecretNumber,
    SessionState,
    draw_secret,
)


class FixedSource:
    """Random source that always returns the given value."""

    def __init__(self, value: int):
        self.value = value
        self.calls: list[tuple[int, int]] = []

    def randint(self, a: int, b: int) -> int:
        self.calls.append((a, b))
        return self.value


class TestSecretNumber:
    """Tests for SecretNumber validation."""

    @pytest.mark.parametrize("value", [MIN_GUESS, 50, MAX_GUESS])
    def test_accepts_values_in_range(self, value):
        """Both bounds and interior values are valid secrets."""
        assert SecretNumber(value=value).value == value

    @pytest.mark.parametrize("value", [0, -1, 101, 1000])
    def test_rejects_values_out_of_range(self, value):
        """Values outside [1, 100] fail validation."""
        with pytest.raises(ValidationError):
            SecretNumber(value=value)

    def test_is_immutable(self):
        """A secret cannot be changed once drawn."""
        secret = SecretNumber(value=42)
        with pytest.raises(ValidationError):
            secret.value = 43

    def test_int_conversion(self):
        assert int(SecretNumber(value=7)) == 7


class TestDrawSecret:
    """Tests for draw_secret."""

    def test_requests_inclusive_bounds(self):
        """The random source is asked for the full closed range."""
        source = FixedSource(33)
        secret = draw_secret(source)
        assert secret.value == 33
        assert source.calls == [(MIN_GUESS, MAX_GUESS)]

    def test_secrets_always_in_range(self):
        """Every drawn secret satisfies 1 <= s <= 100."""
        rng = random.Random(1234)
        for _ in range(5000):
            assert MIN_GUESS <= draw_secret(rng).value <= MAX_GUESS

    def test_both_bounds_are_reachable(self):
        """Neither bound is lost to an off-by-one error."""
        rng = random.Random(99)
        seen = {draw_secret(rng).value for _ in range(20000)}
        assert MIN_GUESS in seen
        assert MAX_GUESS in seen
        assert seen == set(range(MIN_GUESS, MAX_GUESS + 1))

    def test_distribution_is_uniform(self):
        """Chi-square over 10 buckets stays well under the 0.001 critical value."""
        rng = random.Random(2024)
        samples = 50000
        buckets = Counter((draw_secret(rng).value - 1) // 10 for _ in range(samples))
        expected = samples / 10
        chi_square = sum((buckets[i] - expected) ** 2 / expected for i in range(10))
        # Critical value for 9 degrees of freedom at p=0.001 is 27.88
        assert chi_square < 27.88

    def test_same_seed_same_secret(self):
        """Seeded sources reproduce the same secret."""
        assert draw_secret(random.Random(5)) == draw_secret(random.Random(5))


class TestSessionState:
    """Tests for the RUNNING -> WON state machine."""

    @pytest.mark.parametrize("outcome", [
        RoundOutcome.PARSE_ERROR,
        RoundOutcome.RANGE_ERROR,
        RoundOutcome.TOO_LOW,
        RoundOutcome.TOO_HIGH,
    ])
    def test_non_winning_outcomes_keep_running(self, outcome):
        assert SessionState.RUNNING.advance(outcome) is SessionState.RUNNING

    def test_win_moves_to_won(self):
        assert SessionState.RUNNING.advance(RoundOutcome.WIN) is SessionState.WON

    @pytest.mark.parametrize("outcome", list(RoundOutcome))
    def test_won_is_terminal(self, outcome):
        """No outcome may be applied once the session is won."""
        with pytest.raises(ValueError):
            SessionState.WON.advance(outcome)


class TestRoundOutcome:
    """Tests for RoundOutcome helpers."""

    def test_retryable_outcomes(self):
        retryable = {o for o in RoundOutcome if o.is_retryable}
        assert retryable == {RoundOutcome.PARSE_ERROR, RoundOutcome.RANGE_ERROR}


class TestResultModels:
    """Tests for RoundResult, GuessAttempt and GameConfig."""

    def test_round_result_defaults(self):
        result = RoundResult(outcome=RoundOutcome.PARSE_ERROR)
        assert result.guess is None
        assert not result.is_win

    def test_round_result_win(self):
        assert RoundResult(outcome=RoundOutcome.WIN, guess=42).is_win

    def test_guess_attempt_fields(self):
        attempt = GuessAttempt(raw="42", value=42)
        assert attempt.raw == "42"
        assert attempt.value == 42

    def test_config_hides_secret_by_default(self):
        config = GameConfig()
        assert config.reveal_secret is False
        assert config.seed is None
