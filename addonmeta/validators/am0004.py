"""AM0004: the addon icon is a base64 encoded PNG."""

from __future__ import annotations

import base64
import binascii
import io
from typing import Any

from PIL import Image

from addonmeta.result import Result
from addonmeta.runner import Dependencies
from addonmeta.validator import Base

CODE = 4
NAME = "icon_base64"
DESCRIPTION = "Ensure that `icon` in Addon metadata is rightfully base64 encoded"


def _is_png(data: bytes) -> bool:
    try:
        with Image.open(io.BytesIO(data), formats=["PNG"]) as img:
            img.load()
    except (OSError, SyntaxError, ValueError):
        return False
    return True


class IconBase64(Base):
    """Checks that the icon decodes from base64 to PNG data."""

    def __init__(self) -> None:
        super().__init__(CODE, NAME, DESCRIPTION)

    def run(self, meta_bundle: Any) -> Result:
        meta = meta_bundle.addon_meta
        addon_id = getattr(meta, "id", "")
        icon = getattr(meta, "icon", "") or ""
        if not icon:
            return self.fail(f"`icon` not found under the addon metadata of {addon_id}")

        try:
            decoded = base64.b64decode(icon.replace("\r", "").replace("\n", ""), validate=True)
        except (binascii.Error, ValueError):
            return self.fail(
                f"`icon` found to be improperly base64 populated under the addon metadata of {addon_id}"
            )

        if not _is_png(decoded):
            return self.fail(
                "`icon`'s base64 value found to correspond to a non-png data "
                f"under the addon metadata of {addon_id}"
            )
        return self.success()


def new_icon_base64(deps: Dependencies) -> IconBase64:
    """Initializer for IconBase64."""
    return IconBase64()