"""Load [tool.loglevel-guard] from pyproject.toml. Infrastructure I/O only."""

import logging
import tomllib
from pathlib import Path
from typing import Optional

from loglevel_guard.domain.constants import TOOL_SECTION

logger = logging.getLogger(__name__)


class ConfigFileLoader:
    """
    Loads config from the nearest pyproject.toml, walking up from start (default: cwd).
    """

    @staticmethod
    def load_config_from_fs(start: Optional[Path] = None) -> dict[str, object]:
        """Return the [tool.loglevel-guard] table, or {} when there is none."""
        current_path = (start or Path.cwd()).resolve()
        for directory in (current_path, *current_path.parents):
            config_file = directory / "pyproject.toml"
            if not config_file.exists():
                continue
            try:
                with config_file.open("rb") as f:
                    data = tomllib.load(f)
            except (OSError, tomllib.TOMLDecodeError) as exc:
                logger.warning("Could not read %s: %s", config_file, exc)
                return {}
            tool_section = data.get("tool", {}) or {}
            config_dict = tool_section.get(TOOL_SECTION, {}) or {}
            logger.debug("Loaded configuration from %s", config_file)
            return dict(config_dict)
        return {}
