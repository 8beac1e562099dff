"""Tests for dice, output sink and roller."""

import io
import random

import pytest
from pydantic import ValidationError

from dicesim.engine.dice import Die, FairDie, FixedDie, create_die
from dicesim.engine.output import ConsoleOutput, OutputSink
from dicesim.engine.roller import DiceRoller
from dicesim.models.dice import DiceVariant, DieSpec, RollResult


class RecordingOutput(OutputSink):
    """Collects displayed results."""

    def __init__(self):
        self.results = []

    def display_result(self, result):
        self.results.append(result)


class TestFixedDie:
    """Test suite for FixedDie."""

    def test_always_rolls_side_count(self, fixed_die):
        """Test that every roll shows the highest face."""
        assert all(fixed_die.roll() == 6 for _ in range(1000))

    def test_side_count(self):
        """Test that side_count reflects construction."""
        assert FixedDie(20).side_count == 20

    def test_rejects_zero_sides(self):
        """Test that a die needs at least one side."""
        with pytest.raises(ValueError):
            FixedDie(0)


class TestFairDie:
    """Test suite for FairDie."""

    def test_rolls_stay_in_range(self, seeded_die):
        """Test that 1000 rolls stay within [1, side_count]."""
        rolls = [seeded_die.roll() for _ in range(1000)]
        assert min(rolls) >= 1
        assert max(rolls) <= 6

    def test_rolls_are_not_constant(self, seeded_die):
        """Test that 1000 rolls produce more than one face."""
        rolls = {seeded_die.roll() for _ in range(1000)}
        assert len(rolls) > 1

    def test_same_seed_same_sequence(self):
        """Test that seeding once gives a reproducible sequence."""
        first = FairDie(6, seed=7)
        second = FairDie(6, seed=7)
        assert [first.roll() for _ in range(50)] == [second.roll() for _ in range(50)]

    def test_injected_generator_is_reused(self):
        """Test that an injected generator is drawn from, not replaced."""
        rng = random.Random(99)
        expected = random.Random(99)
        die = FairDie(10, rng=rng)
        assert [die.roll() for _ in range(20)] == [expected.randint(1, 10) for _ in range(20)]

    def test_one_sided_die(self):
        """Test that a one-sided die always shows 1."""
        die = FairDie(1)
        assert {die.roll() for _ in range(100)} == {1}

    def test_roll_result_is_bounded(self, seeded_die):
        """Test that roll_result wraps the roll in a RollResult."""
        result = seeded_die.roll_result()
        assert isinstance(result, RollResult)
        assert result.side_count == 6
        assert 1 <= result.value <= 6

    def test_die_is_abstract(self):
        """Test that Die cannot be instantiated."""
        with pytest.raises(TypeError):
            Die(6)  # type: ignore


class TestDiceModels:
    """Test suite for DieSpec and RollResult."""

    def test_spec_defaults_to_fair(self):
        """Test DieSpec defaults."""
        spec = DieSpec(side_count=6)
        assert spec.variant == DiceVariant.FAIR
        assert spec.fixed is False
        assert spec.seed is None

    def test_spec_fixed_flag(self):
        """Test that the fixed flag follows the variant."""
        assert DieSpec(side_count=6, variant="fixed").fixed is True

    def test_spec_rejects_zero_sides(self):
        """Test that side_count must be at least 1."""
        with pytest.raises(ValidationError):
            DieSpec(side_count=0)

    def test_roll_result_out_of_range(self):
        """Test that a face above side_count is rejected."""
        with pytest.raises(ValidationError):
            RollResult(value=7, side_count=6)

    def test_roll_result_below_one(self):
        """Test that a face below 1 is rejected."""
        with pytest.raises(ValidationError):
            RollResult(value=0, side_count=6)


class TestCreateDie:
    """Test suite for create_die."""

    def test_creates_fixed_die(self):
        """Test that the fixed variant builds a FixedDie."""
        die = create_die(DieSpec(side_count=12, variant=DiceVariant.FIXED))
        assert isinstance(die, FixedDie)
        assert die.roll() == 12

    def test_creates_fair_die(self):
        """Test that the fair variant builds a seeded FairDie."""
        die = create_die(DieSpec(side_count=8, seed=3))
        assert isinstance(die, FairDie)
        assert die.side_count == 8
        assert die.roll() == FairDie(8, seed=3).roll()


class TestDiceRoller:
    """Test suite for DiceRoller and ConsoleOutput."""

    def test_roll_dice_passes_result_to_output(self, fixed_die):
        """Test that one cycle rolls once and displays once."""
        output = RecordingOutput()
        roller = DiceRoller(fixed_die, output)
        roller.roll_dice()
        assert output.results == [6]

    def test_console_output_format(self):
        """Test the console line template."""
        buffer = io.StringIO()
        ConsoleOutput(buffer).display_result(4)
        assert buffer.getvalue() == "You rolled: 4\n"

    def test_console_output_defaults_to_stdout(self, capsys):
        """Test that ConsoleOutput writes to standard output by default."""
        roller = DiceRoller(FixedDie(3), ConsoleOutput())
        roller.roll_dice()
        assert capsys.readouterr().out == "You rolled: 3\n"

    def test_roll_dice_rejects_face_out_of_range(self):
        """Test that a die reporting a face above its side count is not displayed."""

        class BrokenDie(Die):
            def roll(self):
                return self.side_count + 1

        output = RecordingOutput()
        roller = DiceRoller(BrokenDie(6), output)
        with pytest.raises(ValidationError):
            roller.roll_dice()
        assert output.results == []

    def test_injected_dependencies_exposed(self, fixed_die):
        """Test that the roller keeps the injected die and sink."""
        output = RecordingOutput()
        roller = DiceRoller(fixed_die, output)
        assert roller.die is fixed_die
        assert roller.output is output
