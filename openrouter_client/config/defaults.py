"""openrouter_client.config.defaults
=================================

Built-in defaults for :class:`~openrouter_client.config.ClientConfig`. These
are the lowest-precedence source of the configuration merge and can be
overridden by the config file, the environment or explicit arguments.

Only plain constants live here (no I/O, no imports from other subpackages
besides the shared constants) to keep the module free of import cycles.
"""

from __future__ import annotations

from typing import Any, Dict

from ..base.constants import DEFAULT_BASE_URL

# Section of the external config file read by the client.
CONFIG_FILE_SECTION = "openrouter"

# Environment variable naming the external config file (JSON or YAML).
CONFIG_FILE_ENV = "OPENROUTER_CLIENT_CONFIG_FILE"

DEFAULTS: Dict[str, Any] = {
    "base_url": DEFAULT_BASE_URL,
}


__all__ = [
    "CONFIG_FILE_SECTION",
    "CONFIG_FILE_ENV",
    "DEFAULTS",
]
