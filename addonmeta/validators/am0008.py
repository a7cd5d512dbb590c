"""AM0008: the target namespace is listed and namespaces start with 'redhat-'."""

from __future__ import annotations

import re
from typing import Any, Iterable

from addonmeta.result import Result
from addonmeta.runner import Dependencies
from addonmeta.validator import Base

CODE = 8
NAME = "ensure_namespace"
DESCRIPTION = "Ensure that the target namespace is listed in the set of channels listed"

NAMESPACE_PRESENCE_EXCEPTIONS = ("openshift-logging",)

_NAMESPACE_PATTERN = re.compile(r"redhat-.*")


def _failed_namespaces(namespaces: Iterable[str], exceptions: Iterable[str]) -> list[str]:
    excluded = set(exceptions)
    return [
        ns for ns in namespaces
        if ns not in excluded and not _NAMESPACE_PATTERN.fullmatch(ns)
    ]


class Namespace(Base):
    """Checks the addon's target namespace and namespace list."""

    def __init__(self, excluded_namespaces: Iterable[str] = ()) -> None:
        super().__init__(CODE, NAME, DESCRIPTION)
        self.excluded_namespaces = list(excluded_namespaces)

    def run(self, meta_bundle: Any) -> Result:
        meta = meta_bundle.addon_meta
        target = getattr(meta, "target_namespace", "")
        namespaces = list(getattr(meta, "namespaces", None) or [])

        if target not in NAMESPACE_PRESENCE_EXCEPTIONS and target not in namespaces:
            return self.fail("Target namespace is not in the list of supplied namespaces")

        failed = _failed_namespaces(namespaces, self.excluded_namespaces)
        if failed:
            return self.fail(
                f"Some namespaces doesn't start with 'redhat-*' [{' '.join(failed)}]"
            )
        return self.success()


def new_namespace(deps: Dependencies) -> Namespace:
    """Initializer for Namespace."""
    return Namespace(deps.validator_config.excluded_namespaces)