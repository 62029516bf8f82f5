"""Unit tests for the ValueObject base class.

Tests cover:
- Factory-only construction
- validate(): first failing rule wins, lazy conditions
- Structural equality and hashing
- copy_with returns props, never an unvalidated instance
- Immutability
"""

from dataclasses import dataclass

import pytest

from pling.core.errors import ValueObjectConstructionError
from pling.core.result import Failure, Result
from pling.domain.value_object import ValueObject


@dataclass(frozen=True, slots=True)
class ScoreProps:
    label: str
    points: int


class Score(ValueObject[ScoreProps]):
    @classmethod
    def create(cls, label: str, points: int) -> Result["Score", str]:
        return cls.validate(
            [
                (bool(label.strip()), "Etikett saknas"),
                (points >= 0, "Poäng kan inte vara negativa"),
            ]
        ).map(lambda _: cls._from_props(ScoreProps(label=label.strip(), points=points)))


@dataclass
class MutableProps:
    value: int


@pytest.mark.unit
class TestConstruction:
    """Test factory-only construction."""

    def test_create_returns_instance(self):
        result = Score.create(" mål ", 3)

        assert result.is_ok()
        assert result.value.to_dict() == {"label": "mål", "points": 3}

    def test_direct_construction_is_rejected(self):
        with pytest.raises(ValueObjectConstructionError, match="create"):
            Score(ScoreProps(label="x", points=1))

    def test_mutable_props_are_rejected(self):
        with pytest.raises(ValueObjectConstructionError, match="frozen dataclass"):
            Score._from_props(MutableProps(value=1))  # type: ignore[arg-type]


@pytest.mark.unit
class TestValidate:
    """Test declarative rules."""

    def test_all_rules_pass(self):
        assert ValueObject.validate([(True, "a"), (lambda: True, "b")]).is_ok()

    def test_first_failing_rule_wins(self):
        result = ValueObject.validate([(True, "a"), (False, "b"), (False, "c")])

        assert result == Failure(error="b")

    def test_lazy_conditions_after_failure_are_not_evaluated(self):
        evaluated = []

        def later():
            evaluated.append(True)
            return True

        result = ValueObject.validate([(False, "first"), (later, "second")])

        assert result.error == "first"
        assert evaluated == []

    def test_create_reports_rule_message(self):
        assert Score.create("mål", -1).error == "Poäng kan inte vara negativa"


@pytest.mark.unit
class TestEquality:
    """Test structural equality."""

    def test_equal_props_are_equal(self):
        a = Score.create("mål", 3).value
        b = Score.create("mål", 3).value

        assert a == b
        assert a.equals(b)
        assert hash(a) == hash(b)

    def test_different_props_differ(self):
        assert Score.create("mål", 3).value != Score.create("mål", 4).value

    def test_not_equal_to_none_or_other_type(self):
        score = Score.create("mål", 3).value

        assert not score.equals(None)
        assert score != ScoreProps(label="mål", points=3)


@pytest.mark.unit
class TestImmutability:
    """Test that instances cannot change."""

    def test_setattr_is_blocked(self):
        score = Score.create("mål", 3).value

        with pytest.raises(AttributeError, match="immutable"):
            score.points = 5  # type: ignore[attr-defined]

    def test_copy_with_returns_new_props_only(self):
        score = Score.create("mål", 3).value

        changed = score.copy_with(points=10)

        assert isinstance(changed, ScoreProps)
        assert changed.points == 10
        assert score.to_dict()["points"] == 3

    def test_repr_lists_fields(self):
        assert repr(Score.create("mål", 3).value) == "Score(label='mål', points=3)"
