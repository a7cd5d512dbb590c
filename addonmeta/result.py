"""Results produced by validators."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class Result:
    """Status and reasons for one validator run against a meta bundle."""

    code: int
    name: str = ""
    description: str = ""
    failure_msgs: list[str] = field(default_factory=list)
    error: BaseException | None = None
    retryable: bool = False
    success: bool = False

    def is_success(self) -> bool:
        """True if the validator that produced this result succeeded."""
        return self.success

    def is_error(self) -> bool:
        """True if the validator encountered an error."""
        return self.error is not None

    def is_retryable_error(self) -> bool:
        """True if the validator hit an error that may be retried."""
        return self.retryable

    def __lt__(self, other: Result) -> bool:
        if not isinstance(other, Result):
            return NotImplemented
        return self.code < other.code


class ResultList(list):
    """A list of results, sortable by validator code."""

    def has_failure(self) -> bool:
        """True if any member is a failure or an error."""
        return any(not result.is_success() for result in self)

    def errors(self) -> list[BaseException]:
        """The errors carried by the members, in order."""
        return [result.error for result in self if result.is_error()]