"""Asset-creation hook: hide the system name before editing, compute it on submit"""

import logging
from dataclasses import dataclass

from sysname.config import Settings
from sysname.core.assemble import build_name
from sysname.core.errors import SystemNameError
from sysname.core.models import Asset
from sysname.core.utils.normalize import Normalizer, normalize_filename


logger = logging.getLogger(__name__)

PLUGIN_NAME = "PageFieldsToSystemNamePlugin"


@dataclass
class HookResult:
    """Allow/deny signal returned to the host workflow."""
    allow:   bool
    message: str = ""


def prepopulate(asset: Asset, placeholder: str = "hidden") -> Asset:
    """Hide the editable system name and seed a placeholder when the asset has none."""
    asset.hide_system_name = True
    if not asset.name or not asset.name.strip():
        asset.name = placeholder
    return asset


def run_post(asset: Asset, settings: Settings, normalizer: Normalizer = normalize_filename) -> HookResult:
    """Compute and assign the system name; deny creation on any failure.

    The asset is left untouched when creation is denied.
    """
    try:
        name = build_name(
            settings.field_ids, settings.space_token, settings.concat_token,
            asset, normalizer, settings.keep_chars,
        )
    except SystemNameError as e:
        message = f"{PLUGIN_NAME}: {e}"
        logger.warning(message)
        return HookResult(allow=False, message=message)

    asset.name = name
    logger.info("System name set to %r", name)
    return HookResult(allow=True)
