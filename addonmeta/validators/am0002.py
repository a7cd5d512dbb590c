"""AM0002: the addon label follows 'api.openshift.com/addon-<id>'."""

from __future__ import annotations

from typing import Any

from addonmeta.result import Result
from addonmeta.runner import Dependencies
from addonmeta.validator import Base

CODE = 2
NAME = "label_format"
DESCRIPTION = "Validates whether label follows the format 'api.openshift.com/addon-<id>'"

LABEL_PREFIX = "api.openshift.com/addon-"


class AddonLabel(Base):
    """Checks that the addon label is derived from the addon id."""

    def __init__(self) -> None:
        super().__init__(CODE, NAME, DESCRIPTION)

    def run(self, meta_bundle: Any) -> Result:
        meta = meta_bundle.addon_meta
        addon_id = getattr(meta, "id", "")
        label = getattr(meta, "label", "")
        if label != LABEL_PREFIX + addon_id:
            return self.fail(
                f"addon label '{label}' wasn't recognized to follow the "
                "'api.openshift.com/addon-<id>' format"
            )
        return self.success()


def new_addon_label(deps: Dependencies) -> AddonLabel:
    """Initializer for AddonLabel."""
    return AddonLabel()