"""Registration and concurrent execution of validators."""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass, field
from typing import Any, Callable, Iterable, Iterator, Optional, Sequence

from addonmeta.middleware import Middleware, RunFunc
from addonmeta.ocm_client import DisconnectedOCMClient
from addonmeta.quay_client import new_quay_client
from addonmeta.result import Result
from addonmeta.validator import Code, Validator

Filter = Callable[[Validator], bool]


@dataclass
class ValidatorConfig:
    """Settings shared with every validator."""

    excluded_namespaces: list[str] = field(default_factory=list)


@dataclass
class Dependencies:
    """Common dependencies handed to validator initializers."""

    logger: logging.Logger = field(default_factory=lambda: logging.getLogger("addonmeta"))
    ocm_client: Any = None
    quay_client: Any = None
    validator_config: ValidatorConfig = field(default_factory=ValidatorConfig)


Initializer = Callable[[Dependencies], Validator]

_initializers: list[Initializer] = []


def register(initializer: Initializer) -> None:
    """Queue an initializer that runners use when none are given explicitly."""
    _initializers.append(initializer)


class DuplicateCodeError(ValueError):
    """Raised when two validators share the same code."""


def _satisfies(validator: Validator, filters: Sequence[Optional[Filter]]) -> bool:
    return all(f is None or f(validator) for f in filters)


class Runner:
    """Initializes validators and runs them against meta bundles."""

    def __init__(
        self,
        initializers: Optional[Iterable[Initializer]] = None,
        middleware: Optional[Iterable[Middleware]] = None,
        ocm_client: Any = None,
        quay_client: Any = None,
        excluded_namespaces: Optional[Iterable[str]] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        inits = list(initializers or [])
        if not inits:
            inits = list(_initializers)
        self.logger = logger if logger is not None else logging.getLogger("addonmeta")
        self.middleware = list(middleware or [])
        self.ocm_client = ocm_client if ocm_client is not None else DisconnectedOCMClient()
        self.quay_client = quay_client if quay_client is not None else new_quay_client()

        deps = Dependencies(
            logger=self.logger,
            ocm_client=self.ocm_client,
            quay_client=self.quay_client,
            validator_config=ValidatorConfig(list(excluded_namespaces or [])),
        )

        self._validators: dict[Code, Validator] = {}
        for init in inits:
            validator = init(deps)
            existing = self._validators.get(validator.code)
            if existing is not None:
                raise DuplicateCodeError(
                    f"code '{int(validator.code)}' is already registered "
                    f"for validator '{existing.name}'"
                )
            self._validators[validator.code] = validator

    def get_validators(self, *args: Optional[Filter]) -> list[Validator]:
        """Validators satisfying every filter, ordered by code."""
        return sorted(
            (v for v in self._validators.values() if _satisfies(v, args)),
            key=lambda v: v.code,
        )

    def run(self, meta_bundle: Any, *args: Optional[Filter]) -> Iterator[Result]:
        """Run the selected validators concurrently, yielding results as they finish."""
        validators = self.get_validators(*args)
        if not validators:
            return
        with ThreadPoolExecutor(max_workers=len(validators)) as pool:
            futures = [
                pool.submit(self._apply_middleware(v.run), meta_bundle) for v in validators
            ]
            for future in as_completed(futures):
                yield future.result()

    def _apply_middleware(self, run: RunFunc) -> RunFunc:
        for mw in self.middleware:
            run = mw.wrap(run)
        return run


def matches_codes(*args: int) -> Filter:
    """A filter accepting validators whose code is one of the given codes."""
    codes = set(args)

    def _filter(validator: Validator) -> bool:
        return validator.code in codes

    return _filter


def negate(filter_: Filter) -> Filter:
    """A filter accepting exactly what the given filter rejects."""

    def _filter(validator: Validator) -> bool:
        return not filter_(validator)

    return _filter