"""AM0011: a SKU quota rule exists in OCM for the addon's quota name."""

from __future__ import annotations

from typing import Any

from addonmeta.ocm_client import is_ocm_server_side_error
from addonmeta.result import Result
from addonmeta.runner import Dependencies
from addonmeta.validator import Base

CODE = 11
NAME = "sku_validation"
DESCRIPTION = "Validates whether a SKU Rule exists in OCM for quota provided in addon metadata"


class OCMSKURuleExists(Base):
    """Asks OCM whether a quota rule exists for the addon's quota name."""

    def __init__(self, ocm: Any) -> None:
        super().__init__(CODE, NAME, DESCRIPTION)
        self.ocm = ocm

    def run(self, meta_bundle: Any) -> Result:
        quota_name = getattr(meta_bundle.addon_meta, "ocm_quota_name", "")
        try:
            exists = self.ocm.quota_rule_exists(quota_name)
        except Exception as err:  # noqa: BLE001 - any client failure becomes an error result
            if is_ocm_server_side_error(err):
                return self.retryable_error(err)
            return self.error(err)

        if not exists:
            return self.fail(f"no QuotaRule exists for ocmQuotaName '{quota_name}'")
        return self.success()


def new_ocm_sku_rule_exists(deps: Dependencies) -> OCMSKURuleExists:
    """Initializer for OCMSKURuleExists."""
    return OCMSKURuleExists(deps.ocm_client)