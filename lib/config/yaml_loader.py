"""Safe YAML loader."""
from pathlib import Path
from typing import Any, Dict, Union

import yaml

from lib.utils.validation import ensure


def load_yaml(path: Union[str, Path]) -> Dict[str, Any]:
    """Read ``path`` and return its top-level mapping (empty for an empty file)."""
    with open(path, encoding="utf-8") as fh:
        data = yaml.safe_load(fh) or {}
    ensure(isinstance(data, dict), f"{path}: expected a mapping at the top level")
    return data
