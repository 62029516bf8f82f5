"""InvariantTestHelper: corrupt aggregate state and assert it is caught.

Uses the aggregate's test-only hooks (``_override_props_for_testing`` /
``_restore_props_for_testing``) so tests never reach into private props.

Usage:
    helper = InvariantTestHelper(organization)
    helper.assert_invariant_violation(
        {"members": ()}, "Ägaren måste vara medlem med ägarrollen"
    )
"""

from collections.abc import Callable
from typing import Any

from pling.core.result import Failure, Result
from pling.domain.aggregate_root import AggregateRoot


class InvariantTestHelper:
    """Invariant round-trip assertions for one aggregate."""

    def __init__(self, aggregate: AggregateRoot[Any]) -> None:
        self.aggregate = aggregate

    def assert_invariant_violation(
        self, corrupt: dict[str, Any], expected_message: str
    ) -> None:
        """Corrupt props, expect a Failure, restore, expect success again.

        Args:
            corrupt: Props fields to overwrite.
            expected_message: Substring of the expected failure reason.
        """
        assert self.aggregate.validate_invariants().is_ok(), "aggregate must start valid"

        previous = self.aggregate._override_props_for_testing(**corrupt)
        try:
            result = self.aggregate.validate_invariants()
            assert isinstance(result, Failure), f"corruption {corrupt} went unnoticed"
            assert expected_message in result.error
        finally:
            self.aggregate._restore_props_for_testing(previous)

        assert self.aggregate.validate_invariants().is_ok()

    def assert_mutation_rejected(
        self,
        mutation: Callable[[], Result[Any, str]],
        expected_message: str | None = None,
    ) -> Failure[str]:
        """Run mutation, expect Failure with state and event queue unchanged.

        Returns:
            The Failure, for further assertions.
        """
        before_state = self.aggregate._snapshot()
        before_events = self.aggregate.domain_events

        result = mutation()

        assert isinstance(result, Failure), f"mutation unexpectedly succeeded: {result}"
        if expected_message is not None:
            assert expected_message in result.error
        assert self.aggregate._snapshot() is before_state
        assert self.aggregate.domain_events == before_events
        return result
