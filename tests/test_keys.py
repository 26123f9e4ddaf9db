"""Test key name dispatch."""

import pytest

from wordguess.engine import GameStatus, SignalKind, dispatch_key

from conftest import guess


class TestDispatchKey:
    """Key names map onto engine intents."""

    @pytest.mark.parametrize("key", ["c", "C"])
    def test_letter_types(self, engine, key):
        result = dispatch_key(engine, key)
        assert result.state.current_guess == "C"

    @pytest.mark.parametrize("key", ["Backspace", "BACKSPACE", "delete"])
    def test_backspace_deletes(self, engine, key):
        dispatch_key(engine, "C")
        result = dispatch_key(engine, key)
        assert result.state.current_col == 0

    def test_enter_submits(self, engine):
        result = dispatch_key(engine, "Enter")
        assert result.signal.kind is SignalKind.TOO_SHORT

    def test_enter_restarts_finished_game(self, engine, provider):
        guess(engine, "CRANE")
        result = dispatch_key(engine, "ENTER")
        assert result.state.status is GameStatus.PLAYING
        assert result.state.current_row == 0
        assert provider.fetch_calls == [5, 5]

    @pytest.mark.parametrize("key", ["Shift", "F5", "1", "", " ", None])
    def test_unknown_keys_are_ignored(self, engine, key):
        dispatch_key(engine, "C")
        result = dispatch_key(engine, key)
        assert result.state.current_guess == "C"
        assert result.signal is None
