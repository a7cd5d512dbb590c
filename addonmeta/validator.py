"""Validator codes and the base class shared by validators."""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from typing import Any

from addonmeta.result import Result

CODE_PREFIX = "AM"

_NUMBER = re.compile(r"[+-]?\d+")


class Code(int):
    """A prefixed integer identifying a validator, e.g. AM0001."""

    def __str__(self) -> str:
        return f"{CODE_PREFIX}{int(self):04d}"

    def __repr__(self) -> str:
        return f"Code({int(self)})"


def parse_code(maybe_code: str) -> Code:
    """Parse a string such as 'AM0001' (case-insensitive) into a Code."""
    if len(maybe_code) != 6:
        raise ValueError(f"code must be of the format '{CODE_PREFIX}XXXX'")
    upper = maybe_code.upper()
    if not upper.startswith(CODE_PREFIX):
        raise ValueError(f"unable to parse code from '{maybe_code}'")
    match = _NUMBER.match(upper, len(CODE_PREFIX))
    if match is None:
        raise ValueError(f"unable to parse code from '{maybe_code}'")
    return Code(int(match.group()))


class Validator(ABC):
    """A task that checks a meta bundle and returns a Result."""

    @property
    @abstractmethod
    def code(self) -> Code:
        """The unique id of the validator."""

    @property
    @abstractmethod
    def name(self) -> str:
        """The display name of the validator."""

    @property
    @abstractmethod
    def description(self) -> str:
        """The displayed description of the validator."""

    @abstractmethod
    def run(self, meta_bundle: Any) -> Result:
        """Validate the meta bundle and return the result."""


class Base(Validator):
    """Common behaviour for validators: identity and result helpers."""

    def __init__(self, code: int, name: str = "", description: str = "") -> None:
        if code < 0:
            raise ValueError(f"validator codes must be non-negative integers not {code}")
        self._code = Code(code)
        self._name = name or f"unnamed validator <{self._code}>"
        self._description = description or "no description available"

    @property
    def code(self) -> Code:
        return self._code

    @property
    def name(self) -> str:
        return self._name

    @property
    def description(self) -> str:
        return self._description

    def _result(self, **kwargs: Any) -> Result:
        return Result(code=self._code, name=self._name, description=self._description, **kwargs)

    def success(self) -> Result:
        """A successful result."""
        return self._result(success=True)

    def fail(self, *args: str) -> Result:
        """A failed result carrying the given messages."""
        return self._result(failure_msgs=list(args))

    def error(self, err: BaseException) -> Result:
        """A result for a validation that stopped on an error."""
        return self._result(error=err)

    def retryable_error(self, err: BaseException) -> Result:
        """A result for a temporary error that middleware may retry."""
        return self._result(error=err, retryable=True)