"""Client for checking image references in a V2 container registry."""

from __future__ import annotations

from dataclasses import dataclass

import requests
from requests.adapters import HTTPAdapter

QUAY_URL = "https://quay.io"


@dataclass(frozen=True)
class ImageReference:
    """An image repository name without registry, and its tag or digest."""

    short_name: str
    tag: str


class V2RegistryClient:
    """Looks up image manifests through the registry V2 API."""

    def __init__(self, base_url: str, session: requests.Session | None = None) -> None:
        self.base_url = base_url.rstrip("/")
        if session is None:
            session = requests.Session()
            adapter = HTTPAdapter(max_retries=3)
            session.mount("http://", adapter)
            session.mount("https://", adapter)
        self._session = session

    def has_reference(self, ref: ImageReference) -> bool:
        """True if the registry holds a manifest for the reference."""
        response = self._session.head(
            f"{self.base_url}/v2/{ref.short_name}/manifests/{ref.tag}",
            allow_redirects=True,
        )
        response.close()
        return response.status_code == 200


def new_quay_client() -> V2RegistryClient:
    """A registry client for quay.io."""
    return V2RegistryClient(QUAY_URL)