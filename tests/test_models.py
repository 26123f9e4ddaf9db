import pytest
from pydantic import ValidationError

from wordguess.engine import GameConfig, GameState, GameStatus, LetterState, Tile


class TestLetterState:
    """Informativeness ordering used by the hint reducer."""

    def test_total_order(self):
        assert LetterState.INITIAL < LetterState.ABSENT < LetterState.PRESENT < LetterState.CORRECT

    def test_ranks(self):
        assert [s.rank for s in (LetterState.INITIAL, LetterState.ABSENT, LetterState.PRESENT, LetterState.CORRECT)] == [0, 1, 2, 3]

    def test_max_picks_most_informative(self):
        assert max([LetterState.ABSENT, LetterState.CORRECT, LetterState.PRESENT]) is LetterState.CORRECT


class TestTile:
    def test_default_is_empty_initial(self):
        tile = Tile()
        assert tile.char == ""
        assert tile.state is LetterState.INITIAL

    def test_rejects_lowercase(self):
        with pytest.raises(ValidationError):
            Tile(char="a")

    def test_rejects_multiple_letters(self):
        with pytest.raises(ValidationError):
            Tile(char="AB")

    def test_is_frozen(self):
        tile = Tile(char="A")
        with pytest.raises(ValidationError):
            tile.char = "B"


class TestGameConfig:
    def test_defaults(self):
        config = GameConfig()
        assert config.word_length == 5
        assert config.max_attempts == 5

    @pytest.mark.parametrize("field", ["word_length", "max_attempts"])
    def test_must_be_positive(self, field):
        with pytest.raises(ValidationError):
            GameConfig(**{field: 0})

    def test_is_frozen(self):
        config = GameConfig()
        with pytest.raises(ValidationError):
            config.word_length = 6


class TestGameState:
    def test_empty_grid_dimensions(self):
        state = GameState.empty(GameConfig(word_length=4, max_attempts=6))
        assert len(state.grid) == 6
        assert all(len(row) == 4 for row in state.grid)
        assert state.status is GameStatus.LOADING
        assert state.letter_states == {}
        assert state.answer is None

    def test_guesses_left(self):
        state = GameState.empty(GameConfig())
        state.current_row = 2
        assert state.guesses_left == 3

    def test_current_guess_reads_active_row(self):
        state = GameState.empty(GameConfig())
        state.grid[0][0] = Tile(char="C")
        state.grid[0][1] = Tile(char="A")
        assert state.current_guess == "CA"
