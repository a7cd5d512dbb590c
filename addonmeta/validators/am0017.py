"""AM0017: a pull secret name, when set, names one of the addon secrets."""

from __future__ import annotations

from typing import Any

from addonmeta.result import Result
from addonmeta.runner import Dependencies
from addonmeta.validator import Base

CODE = 17
NAME = "pull_secret_name"
DESCRIPTION = "Ensure that pullSecretName if not nil is present in Secrets"


class PullSecretName(Base):
    """Checks that the pull secret name is among the configured secrets."""

    def __init__(self) -> None:
        super().__init__(CODE, NAME, DESCRIPTION)

    def run(self, meta_bundle: Any) -> Result:
        meta = meta_bundle.addon_meta
        pull_secret_name = getattr(meta, "pull_secret_name", "") or ""
        if not pull_secret_name:
            return self.success()

        config = getattr(meta, "config", None)
        if config is None:
            return self.fail(
                f"pullSecretName {pull_secret_name} is present in addon.yaml "
                "whereas addon config is nil"
            )

        secrets = getattr(config, "secrets", None)
        if secrets is None:
            return self.fail(
                f"pullSecretName {pull_secret_name} is present in addon.yaml "
                "whereas addon secrets are nil"
            )

        if any(secret.name == pull_secret_name for secret in secrets):
            return self.success()
        return self.fail(f"pullSecretName {pull_secret_name} is not present in addon secrets")


def new_pull_secret_name(deps: Dependencies) -> PullSecretName:
    """Initializer for PullSecretName."""
    return PullSecretName()