"""AM0006: the Dead Man's Snitch name postfix must not start with 'hive-'."""

from __future__ import annotations

from typing import Any

from addonmeta.result import Result
from addonmeta.runner import Dependencies
from addonmeta.validator import Base

CODE = 6
NAME = "dms_snitchnamepostfix"
DESCRIPTION = "Ensure `deadmanssnitch.snitchNamePostFix` doesn't begin with 'hive-'"


class DMSSnitchNamePostFix(Base):
    """Checks the deadmanssnitch snitch name postfix."""

    def __init__(self) -> None:
        super().__init__(CODE, NAME, DESCRIPTION)

    def run(self, meta_bundle: Any) -> Result:
        meta = meta_bundle.addon_meta
        dms = getattr(meta, "deadmans_snitch", None)
        postfix = getattr(dms, "snitch_name_post_fix", None) if dms is not None else None
        if postfix is not None and postfix.startswith("hive-"):
            return self.fail(
                f"`deadmanssnitch.snitchNamePostFix` in addon {getattr(meta, 'id', '')} "
                "found to begin with 'hive-'"
            )
        return self.success()


def new_dms_snitch_name_post_fix(deps: Dependencies) -> DMSSnitchNamePostFix:
    """Initializer for DMSSnitchNamePostFix."""
    return DMSSnitchNamePostFix()