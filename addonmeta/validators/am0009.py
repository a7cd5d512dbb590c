"""AM0009: the addon parameters section is well formed."""

from __future__ import annotations

import re
from typing import Any

from addonmeta.result import Result
from addonmeta.runner import Dependencies
from addonmeta.validator import Base

CODE = 9
NAME = "addon_parameters"
DESCRIPTION = "Ensure `addOnParameters` section in the addon metadata is rightfully defined"


class AddonParameters(Base):
    """Checks default values against each parameter's validation or options."""

    def __init__(self) -> None:
        super().__init__(CODE, NAME, DESCRIPTION)

    def run(self, meta_bundle: Any) -> Result:
        params = getattr(meta_bundle.addon_meta, "addon_parameters", None)
        if params is None:
            return self.success()

        for param in params:
            validation = getattr(param, "validation", None)
            options = getattr(param, "options", None)
            default_value = getattr(param, "default_value", None)

            if validation is not None and options is not None:
                return self.fail("validation and options can't both be set")

            if default_value is None:
                continue

            if validation is not None:
                try:
                    pattern = re.compile(validation)
                except re.error as exc:
                    return self.error(
                        ValueError(f"failed parse `validation` as regex: {exc}")
                    )
                if pattern.search(default_value) is None:
                    msg = f"defaultValue {default_value} didn't match its validation"
                    err_msg = getattr(param, "validation_err_msg", None)
                    if err_msg is not None:
                        return self.fail(f"{msg}: {err_msg}")
                    return self.fail(msg)
                return self.success()

            if options is not None:
                if any(default_value == opt.value for opt in options):
                    return self.success()
                return self.fail(f"defaultValue '{default_value}' not found in `options`")

        return self.success()


def new_addon_parameters(deps: Dependencies) -> AddonParameters:
    """Initializer for AddonParameters."""
    return AddonParameters()