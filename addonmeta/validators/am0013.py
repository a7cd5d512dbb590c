"""AM0013: every addon requirement carries data."""

from __future__ import annotations

from typing import Any

from addonmeta.result import Result
from addonmeta.runner import Dependencies
from addonmeta.validator import Base

CODE = 13
NAME = "addon_requirements"
DESCRIPTION = "Ensure `addOnRequirements` section in the addon metadata is rightfully defined"


class AddonRequirements(Base):
    """Checks that no addon requirement has empty data."""

    def __init__(self) -> None:
        super().__init__(CODE, NAME, DESCRIPTION)

    def run(self, meta_bundle: Any) -> Result:
        requirements = getattr(meta_bundle.addon_meta, "addon_requirements", None)
        if requirements is None:
            return self.success()

        msgs = [
            f'requirement "{req.id}" has no data'
            for req in requirements
            if not getattr(req, "data", None)
        ]
        if msgs:
            return self.fail(*msgs)
        return self.success()


def new_addon_requirements(deps: Dependencies) -> AddonRequirements:
    """Initializer for AddonRequirements."""
    return AddonRequirements()