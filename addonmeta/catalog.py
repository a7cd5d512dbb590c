"""The set of built-in validators."""

from __future__ import annotations

from addonmeta.runner import Initializer, register
from addonmeta.validators.am0002 import new_addon_label
from addonmeta.validators.am0004 import new_icon_base64
from addonmeta.validators.am0006 import new_dms_snitch_name_post_fix
from addonmeta.validators.am0008 import new_namespace
from addonmeta.validators.am0009 import new_addon_parameters
from addonmeta.validators.am0011 import new_ocm_sku_rule_exists
from addonmeta.validators.am0013 import new_addon_requirements
from addonmeta.validators.am0016 import new_unique_resource
from addonmeta.validators.am0017 import new_pull_secret_name

_DEFAULTS: tuple[Initializer, ...] = (
    new_addon_label,
    new_icon_base64,
    new_dms_snitch_name_post_fix,
    new_namespace,
    new_addon_parameters,
    new_ocm_sku_rule_exists,
    new_addon_requirements,
    new_unique_resource,
    new_pull_secret_name,
)

_registered = False


def default_initializers() -> list[Initializer]:
    """Initializers for every built-in validator, ordered by code."""
    return list(_DEFAULTS)


def register_defaults() -> None:
    """Register the built-in validators with the runner, once."""
    global _registered
    if _registered:
        return
    for init in _DEFAULTS:
        register(init)
    _registered = True