"""Page snapshot loading from YAML or JSON files"""

from pathlib import Path
from typing import Any

import yaml

from sysname.core.models import Page


def load_page(path: Path) -> Page:
    """Read a page snapshot; JSON is parsed as the YAML subset it is."""
    path = Path(path)
    try:
        data: Any = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid page snapshot {path.name}: {e}") from e
    if not isinstance(data, dict):
        raise ValueError(f"Invalid page snapshot {path.name}: expected a mapping, got {type(data).__name__}")
    return Page.model_validate(data)
