"""Join of two independent completions gating a single action.

The exercise flow waits on two things that finish in either order: the
transition video ending (a bare signal) and the generated plan arriving
(a value). ``CompletionJoin`` runs its continuation exactly once, when the
second of the two arrives. A failure short-circuits the join: the failure
callback runs immediately and nothing fires afterwards.
"""

from collections.abc import Callable
from typing import Any

_PENDING = object()


class CompletionJoin:
    """Fire-once join of a signal side and a value side."""

    def __init__(
        self,
        on_complete: Callable[[Any], None],
        on_failure: Callable[[str], None] | None = None,
    ):
        self._on_complete = on_complete
        self._on_failure = on_failure
        self._signalled = False
        self._value: Any = _PENDING
        self._fired = False
        self._error: str | None = None

    @property
    def signalled(self) -> bool:
        return self._signalled

    @property
    def has_value(self) -> bool:
        return self._value is not _PENDING

    @property
    def value(self) -> Any:
        return None if self._value is _PENDING else self._value

    @property
    def fired(self) -> bool:
        return self._fired

    @property
    def failed(self) -> bool:
        return self._error is not None

    @property
    def error(self) -> str | None:
        return self._error

    @property
    def settled(self) -> bool:
        """True once the join has either fired or failed."""
        return self._fired or self.failed

    def signal(self) -> bool:
        """Mark the signal side done.

        Returns:
            True if this call fired the continuation
        """
        if self.settled:
            return False
        self._signalled = True
        return self._try_fire()

    def resolve(self, value: Any) -> bool:
        """Mark the value side done with ``value``.

        Returns:
            True if this call fired the continuation
        """
        if self.settled:
            return False
        self._value = value
        return self._try_fire()

    def fail(self, error: str) -> bool:
        """Abandon the join regardless of the signal side.

        Returns:
            True if this call settled the join as failed
        """
        if self.settled:
            return False
        self._error = error
        if self._on_failure is not None:
            self._on_failure(error)
        return True

    def _try_fire(self) -> bool:
        if self._fired or not self._signalled or self._value is _PENDING:
            return False
        self._fired = True
        self._on_complete(self._value)
        return True
