"""AM0016: catalog source, secret and credentials request names are unique."""

from __future__ import annotations

from typing import Any, Iterable, Iterator

from addonmeta.result import Result
from addonmeta.runner import Dependencies
from addonmeta.validator import Base

CODE = 16
NAME = "unique_resource"
DESCRIPTION = (
    "Ensure that addon additional catalog source, secrets and credential requests names are unique"
)


def _repeated_names(items: Iterable[Any]) -> Iterator[str]:
    """Yield each name that was already seen earlier in the sequence."""
    seen: set[str] = set()
    for item in items:
        if item.name in seen:
            yield item.name
        else:
            seen.add(item.name)


def unique_additional_catalog_sources(addon_meta: Any) -> list[str]:
    """Messages for additional catalog source names that repeat."""
    sources = getattr(addon_meta, "additional_catalog_sources", None)
    if sources is None:
        return []
    return [
        f"additional catalaog source: additionalCatalogSource name {name} "
        "is already present and not unique."
        for name in _repeated_names(sources)
    ]


def unique_secrets(addon_meta: Any) -> list[str]:
    """Messages for secret names that repeat."""
    config = getattr(addon_meta, "config", None)
    if config is None:
        return []
    secrets = getattr(config, "secrets", None)
    if secrets is None:
        return []
    return [
        f"secrets: secret name {name} is already present and not unique."
        for name in _repeated_names(secrets)
    ]


def unique_credential_requests(addon_meta: Any) -> list[str]:
    """Messages for credentials request names that repeat."""
    requests = getattr(addon_meta, "credentials_requests", None)
    if requests is None:
        return []
    return [
        f"credential requests: credentialRequest name {name} is already present and not unique"
        for name in _repeated_names(requests)
    ]


class UniqueResource(Base):
    """Checks that resource names in the addon metadata do not repeat."""

    def __init__(self) -> None:
        super().__init__(CODE, NAME, DESCRIPTION)

    def run(self, meta_bundle: Any) -> Result:
        meta = meta_bundle.addon_meta
        messages = [
            *unique_additional_catalog_sources(meta),
            *unique_secrets(meta),
            *unique_credential_requests(meta),
        ]
        if messages:
            return self.fail(*messages)
        return self.success()


def new_unique_resource(deps: Dependencies) -> UniqueResource:
    """Initializer for UniqueResource."""
    return UniqueResource()