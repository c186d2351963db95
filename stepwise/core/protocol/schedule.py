from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class ScheduleProtocol(Protocol):
    """
    Protocol defining an interface for a hyper-parameter schedule.

    A schedule maps a 1-based iteration index to a real value. Implementations are
    expected to be immutable: evaluating the same index always yields the same value and
    never changes the schedule.
    """

    def value_at(self, t: int) -> float:
        """
        Evaluates the schedule.

        Args:
            t: The 1-based iteration index.

        Returns:
            The scheduled value at index t.
        """


@runtime_checkable
class StatefulProtocol(Protocol):
    """
    Protocol for consumers whose position in a schedule can be saved and resumed.
    """

    def state_dict(self) -> dict[str, Any]:
        """
        Captures the progress needed to resume consumption later.

        Returns:
            A plain dictionary that `load_state_dict()` accepts, e.g. the cursor of a stream.
        """

    def load_state_dict(self, state_dict: dict[str, Any]) -> None:
        """
        Resumes from progress previously captured by `state_dict()`.

        Args:
            state_dict: A dictionary produced by `state_dict()`.
        """
