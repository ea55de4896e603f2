# passutils/config.py
"""
Default generation settings for passutils.
Settings are read from JSON in %APPDATA%/passutils/config.json (Windows) or
~/.passutils/config.json (fallback). PASSUTILS_CONFIG overrides the path.
"""

import os
import json
import logging
from typing import Dict, Any, Optional

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "PASSUTILS_CONFIG"

DEFAULTS: Dict[str, Any] = {
    "length": 16,
    "copies": 1,
    "options": {},       # GenerationOptions fields
    "requirements": {},  # Requirements fields
}

def _appdata_dir() -> str:
    appdata = os.getenv("APPDATA")
    if appdata:
        return os.path.join(appdata, "passutils")
    return os.path.join(os.path.expanduser("~"), ".passutils")

def config_path() -> str:
    override = os.getenv(CONFIG_ENV_VAR)
    if override:
        return override
    return os.path.join(_appdata_dir(), "config.json")

def _defaults() -> Dict[str, Any]:
    return json.loads(json.dumps(DEFAULTS))

def load_config(path: Optional[str] = None) -> Dict[str, Any]:
    p = path or config_path()
    if not os.path.exists(p):
        return _defaults()
    try:
        with open(p, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.warning("Ignoring unreadable config file %s: %s", p, e)
        return _defaults()
    if not isinstance(data, dict):
        logger.warning("Ignoring config file %s: top level must be an object", p)
        return _defaults()
    # merge defaults
    out = _defaults()
    out.update(data)
    return out
