from statcard.cards.structural import (
    STRUCTURAL_POSITIONS,
    STRUCTURAL_VALUES,
    VARIABLE_COUNT,
    VARIABLE_POSITIONS,
    apply_structural_constants,
    is_structural_position,
    variable_positions,
)


class TestStructuralLayout:
    def test_nine_structural_positions(self) -> None:
        assert STRUCTURAL_POSITIONS == (1, 3, 6, 11, 13, 18, 23, 25, 32)

    def test_structural_values(self) -> None:
        assert [STRUCTURAL_VALUES[p] for p in STRUCTURAL_POSITIONS] == [30, 28, 27, 26, 31, 29, 25, 32, 35]

    def test_variable_positions_are_complement(self) -> None:
        assert VARIABLE_COUNT == 26
        assert set(VARIABLE_POSITIONS) | set(STRUCTURAL_POSITIONS) == set(range(35))
        assert not set(VARIABLE_POSITIONS) & set(STRUCTURAL_POSITIONS)

    def test_variable_positions_ascending(self) -> None:
        assert variable_positions() == sorted(VARIABLE_POSITIONS)
        assert variable_positions()[:5] == [0, 2, 4, 5, 7]
        assert variable_positions()[-2:] == [33, 34]

    def test_is_structural_position(self) -> None:
        assert is_structural_position(1)
        assert is_structural_position(32)
        assert not is_structural_position(0)
        assert not is_structural_position(24)


class TestApplyStructuralConstants:
    def test_writes_only_structural_positions(self) -> None:
        buffer = [99] * 35
        result = apply_structural_constants(buffer)
        assert result is buffer
        for i in range(35):
            if i in STRUCTURAL_VALUES:
                assert buffer[i] == STRUCTURAL_VALUES[i]
            else:
                assert buffer[i] == 99

    def test_overwrites_existing_values(self) -> None:
        buffer = list(range(35))
        apply_structural_constants(buffer)
        assert buffer[1] == 30
        assert buffer[32] == 35

    def test_idempotent(self) -> None:
        once = apply_structural_constants([0] * 35)
        twice = apply_structural_constants(list(once))
        assert once == twice
