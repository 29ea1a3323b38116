"""
Run configuration.

Settings come from a YAML file (``config/default.yaml`` unless --config says
otherwise). Missing keys fall back to DEFAULTS.
"""

from pathlib import Path
from typing import Optional, Union

import yaml

from .primes import MAX_BOUND

DEFAULT_CONFIG_PATH = Path(__file__).parent.parent / "config" / "default.yaml"

DEFAULTS = {
    "max_bound": MAX_BOUND,
    "record_extension": ".csv",
    "color": True,
}


def load_config(path: Optional[Union[str, Path]] = None) -> dict:
    """
    Load settings from ``path`` merged over DEFAULTS.

    Parameters
    ----------
    path : str or Path, optional
        YAML file. When omitted, the bundled default file is used if present,
        otherwise DEFAULTS alone.

    Returns
    -------
    dict
        Validated settings.
    """
    config = dict(DEFAULTS)

    if path is None:
        if not DEFAULT_CONFIG_PATH.exists():
            return config
        path = DEFAULT_CONFIG_PATH

    with open(path) as f:
        loaded = yaml.safe_load(f) or {}

    if not isinstance(loaded, dict):
        raise ValueError(f"{path}: expected a mapping at top level")

    unknown = sorted(set(loaded) - set(DEFAULTS))
    if unknown:
        raise ValueError(f"{path}: unknown settings {', '.join(unknown)}")

    config.update(loaded)

    max_bound = config["max_bound"]
    if isinstance(max_bound, bool) or not isinstance(max_bound, int) \
            or not 2 <= max_bound <= MAX_BOUND:
        raise ValueError(f"{path}: max_bound must be an integer between 2 and {MAX_BOUND}")
    if not isinstance(config["record_extension"], str):
        raise ValueError(f"{path}: record_extension must be a string")
    if not isinstance(config["color"], bool):
        raise ValueError(f"{path}: color must be true or false")

    return config
