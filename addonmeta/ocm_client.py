"""Client for the OCM API as used by validators."""

from __future__ import annotations

from dataclasses import dataclass
from types import TracebackType

import requests

API_URL_STAGE = "https://api.stage.openshift.com"
_QUOTA_RULES_PATH = "/api/accounts_mgmt/v1/quota_rules"


class OCMError(Exception):
    """An error related to OCM whose cause can be inspected."""

    def server_side(self) -> bool:
        """True if the error was caused by a server-side issue."""
        return False


class OCMResponseError(OCMError):
    """An HTTP error status returned by OCM."""

    def __init__(self, code: int) -> None:
        super().__init__(f"ocm responded with code {code}")
        self.code = code

    def server_side(self) -> bool:
        return 500 <= self.code < 600


def is_ocm_server_side_error(err: BaseException) -> bool:
    """True if err is an OCMError caused by a server-side issue."""
    return isinstance(err, OCMError) and err.server_side()


@dataclass
class OCMConnectionConfig:
    """Settings for a connection to OCM."""

    api_url: str = API_URL_STAGE
    access_token: str = ""
    client_id: str = ""
    client_secret: str = ""


def _is_http_error(code: int) -> bool:
    return 400 <= code < 600


class OCMClient:
    """Requests data from OCM on behalf of validators."""

    def __init__(
        self,
        api_url: str = API_URL_STAGE,
        access_token: str = "",
        session: requests.Session | None = None,
    ) -> None:
        if not access_token:
            raise ValueError("connecting to OCM: an access token is required")
        self.config = OCMConnectionConfig(api_url=api_url or API_URL_STAGE, access_token=access_token)
        self._owns_session = session is None
        self._session = session if session is not None else requests.Session()
        self._session.headers["Authorization"] = f"Bearer {access_token}"

    def quota_rule_exists(self, quota_name: str) -> bool:
        """True if a quota rule with the given name exists."""
        response = self._session.get(
            self.config.api_url.rstrip("/") + _QUOTA_RULES_PATH,
            params={"search": f"name = '{quota_name}'"},
        )
        if _is_http_error(response.status_code):
            raise OCMResponseError(response.status_code)
        try:
            data = response.json()
        except ValueError as exc:
            raise ValueError(f"unmarshalling quota rules: {exc}") from exc
        size = data.get("size", 0) if isinstance(data, dict) else 0
        return size > 0

    def close(self) -> None:
        """Release the resources held by the connection."""
        if self._owns_session:
            self._session.close()

    def __enter__(self) -> OCMClient:
        return self

    def __exit__(
        self,
        *args: type[BaseException] | BaseException | TracebackType | None,
    ) -> None:
        self.close()


class OCMClientDisconnectedError(Exception):
    """Raised by a client that has no connection to OCM."""

    def __init__(self, operation: str = "") -> None:
        super().__init__("OCM client disconnected")
        self.operation = operation


class DisconnectedOCMClient:
    """An OCM client whose every request fails."""

    def quota_rule_exists(self, quota_name: str) -> bool:
        """Always fails: there is no connection to look the quota rule up with."""
        operation = f"quota rule lookup for {quota_name!r}"
        raise OCMClientDisconnectedError(operation)