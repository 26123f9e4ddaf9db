"""Test keyboard hint aggregation."""

from wordguess.engine import LetterState, Tile, merge_letter_states, score_row

C = LetterState.CORRECT
P = LetterState.PRESENT
A = LetterState.ABSENT


def row(*pairs):
    return [Tile(char=char, state=state) for char, state in pairs]


class TestUpgradeRule:
    """A letter's hint only ever becomes more informative."""

    def test_first_row_records_every_letter(self):
        hints = merge_letter_states({}, score_row("REACT", "CRANE"))
        assert hints == {"R": P, "E": P, "A": C, "C": P, "T": A}

    def test_present_upgrades_to_correct(self):
        hints = merge_letter_states({"R": P}, row(("R", C)))
        assert hints["R"] is C

    def test_absent_upgrades_to_present(self):
        hints = merge_letter_states({"E": A}, row(("E", P)))
        assert hints["E"] is P

    def test_correct_never_downgrades_to_present(self):
        hints = merge_letter_states({"A": C}, row(("A", P)))
        assert hints["A"] is C

    def test_correct_never_downgrades_to_absent(self):
        hints = merge_letter_states({"A": C}, row(("A", A)))
        assert hints["A"] is C

    def test_present_never_downgrades_to_absent(self):
        hints = merge_letter_states({"L": P}, row(("L", A)))
        assert hints["L"] is P

    def test_same_row_duplicate_keeps_best_state(self):
        """LLAMA vs ALLOY: trailing A is ABSENT but the earlier A was PRESENT."""
        hints = merge_letter_states({}, score_row("LLAMA", "ALLOY"))
        assert hints == {"L": C, "A": P, "M": A}

    def test_same_row_correct_after_absent(self):
        hints = merge_letter_states({}, row(("E", A), ("E", C)))
        assert hints["E"] is C

    def test_empty_tiles_are_skipped(self):
        hints = merge_letter_states({}, [Tile(), Tile(char="A", state=A)])
        assert hints == {"A": A}


class TestReducerShape:
    """merge_letter_states behaves as a pure reducer."""

    def test_previous_mapping_not_mutated(self):
        previous = {"R": P}
        merge_letter_states(previous, row(("R", C), ("Z", A)))
        assert previous == {"R": P}

    def test_returns_new_mapping(self):
        previous = {}
        assert merge_letter_states(previous, row(("Z", A))) is not previous

    def test_monotonic_over_a_game(self):
        secret = "CRANE"
        hints = {}
        for guess in ["TOWEL", "REACT", "CRAZY", "CRANE"]:
            before = dict(hints)
            hints = merge_letter_states(hints, score_row(guess, secret))
            for letter, state in before.items():
                assert hints[letter] >= state
        assert all(hints[letter] is C for letter in "CRANE")
