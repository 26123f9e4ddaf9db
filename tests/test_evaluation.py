"""
Test suite for guess evaluation.

Covers the worked examples, duplicate letter handling and the invariant that a
letter is never credited more often than it appears in the secret.
"""

import itertools
from collections import Counter

import pytest

from wordguess.engine import LetterState, Tile, evaluate, score_row
from wordguess.providers.data import DEFAULT_WORDS

C = LetterState.CORRECT
P = LetterState.PRESENT
A = LetterState.ABSENT


class TestWorkedExamples:
    """Examples against the secret CRANE and friends."""

    def test_crazy_against_crane(self):
        assert evaluate("CRAZY", "CRANE") == [C, C, C, A, A]

    def test_react_against_crane(self):
        """R, E and C are present elsewhere, A is in place, T is absent."""
        assert evaluate("REACT", "CRANE") == [P, P, C, P, A]

    def test_llama_against_alloy(self):
        """Second L is exact, first L takes the spare L, only one A is credited."""
        assert evaluate("LLAMA", "ALLOY") == [P, C, P, A, A]

    def test_exact_guess_is_all_correct(self):
        assert evaluate("CRANE", "CRANE") == [C] * 5

    def test_nothing_in_common(self):
        assert evaluate("MOULD", "CRANE") == [A] * 5


class TestDuplicateLetters:
    """Duplicate letters in the guess, the secret, or both."""

    def test_exact_match_claims_letter_before_present(self):
        """The final E is exact, so only one spare E is left for the two leading ones."""
        assert evaluate("EERIE", "THREE") == [P, A, C, A, C]

    def test_repeated_guess_letter_single_in_secret(self):
        assert evaluate("SPEED", "ABIDE") == [A, A, P, A, P]

    def test_repeated_secret_letter_single_in_guess(self):
        assert evaluate("LEVEL", "HELLO") == [P, C, A, A, P]

    def test_all_same_letter_guess(self):
        assert evaluate("AAAAA", "ALLOY") == [C, A, A, A, A]

    def test_present_claims_leftmost_remaining_occurrence(self):
        """The misplaced O takes the O left over by the exact match."""
        assert evaluate("OXOXX", "BOOKS") == [P, A, C, A, A]


class TestInvariants:
    """Properties that must hold for every guess/secret pair."""

    @pytest.mark.parametrize("secret,guess", list(itertools.product(DEFAULT_WORDS[:40:3], DEFAULT_WORDS[::17])))
    def test_letter_credit_never_exceeds_secret_count(self, secret, guess):
        states = evaluate(guess, secret)
        credited = Counter(
            char for char, state in zip(guess, states)
            if state in (LetterState.CORRECT, LetterState.PRESENT)
        )
        secret_counts = Counter(secret)
        for letter, count in credited.items():
            assert count <= secret_counts[letter]

    def test_correct_exactly_where_letters_match(self):
        for secret, guess in itertools.product(DEFAULT_WORDS[:10], DEFAULT_WORDS[-10:]):
            states = evaluate(guess, secret)
            for i, state in enumerate(states):
                assert (state is LetterState.CORRECT) == (guess[i] == secret[i])

    def test_evaluation_is_pure(self):
        first = evaluate("LLAMA", "ALLOY")
        second = evaluate("LLAMA", "ALLOY")
        assert first == second

    def test_length_mismatch_raises(self):
        with pytest.raises(ValueError):
            evaluate("CAT", "CRANE")

    def test_never_initial(self):
        assert LetterState.INITIAL not in evaluate("ZZZZZ", "CRANE")


class TestScoreRow:
    """score_row wraps evaluate in finished tiles."""

    def test_returns_tiles_with_letters_and_states(self):
        tiles = score_row("REACT", "CRANE")
        assert tiles == [
            Tile(char="R", state=P),
            Tile(char="E", state=P),
            Tile(char="A", state=C),
            Tile(char="C", state=P),
            Tile(char="T", state=A),
        ]

    def test_tile_count_matches_word_length(self):
        assert len(score_row("AB", "BA")) == 2
