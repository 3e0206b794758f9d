"""
Configuration for gvs.

Every path the version manager touches is derived from a single home
directory and carried in an explicit ``GvsConfig`` value, so components never
look up the current user themselves.

Directory Structure (relative to home):
    - sdk/<canonical-version>/   : One directory per installed release
    - sdk/<version>/bin/go       : Entry point of a release
    - .gvs/bin/go                : Active-version symlink
    - .gvs/lock/                 : Advisory lock files
    - .gvs/config.yaml           : Optional configuration overrides
    - go/bin/go<version>         : Per-version downloader programs
"""

import logging
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from .exceptions import ConfigError

logger = logging.getLogger(__name__)

DEFAULT_LISTING_URL = "https://go.dev/dl/"
DEFAULT_FETCH_TIMEOUT = 5
DEFAULT_INSTALL_TIMEOUT = 300

# Keys that may be overridden from config.yaml
_OVERRIDABLE_KEYS = {
    "listing_url": str,
    "fetch_timeout": (int, float),
    "install_timeout": (int, float),
    "go_command": str,
    "downloader_dir": str,
}


def default_home() -> Path:
    """Return the current user's home directory."""
    return Path.home()


@dataclass(frozen=True)
class GvsConfig:
    """
    Paths and tunables for one gvs run.

    Attributes:
        home: Home directory everything else is derived from
        downloader_dir: Directory where ``go install`` places downloader programs
        listing_url: Page listing the published releases
        fetch_timeout: Seconds allowed for the listing request
        install_timeout: Seconds allowed for both install steps together
        go_command: Go executable used to build the downloader
        downloader_module: Module path of the per-version downloaders
    """

    home: Path
    downloader_dir: Path
    listing_url: str = DEFAULT_LISTING_URL
    fetch_timeout: float = DEFAULT_FETCH_TIMEOUT
    install_timeout: float = DEFAULT_INSTALL_TIMEOUT
    go_command: str = "go"
    downloader_module: str = "golang.org/dl"

    @classmethod
    def for_home(cls, home: Union[str, Path]) -> "GvsConfig":
        """Build the default configuration rooted at ``home``."""
        home = Path(home)
        return cls(home=home, downloader_dir=home / "go" / "bin")

    @property
    def versions_root(self) -> Path:
        return self.home / "sdk"

    @property
    def gvs_dir(self) -> Path:
        return self.home / ".gvs"

    @property
    def link_dir(self) -> Path:
        """Directory the user must add to their PATH."""
        return self.gvs_dir / "bin"

    @property
    def link_path(self) -> Path:
        return self.link_dir / "go"

    @property
    def lock_dir(self) -> Path:
        return self.gvs_dir / "lock"

    @property
    def default_config_file(self) -> Path:
        return self.gvs_dir / "config.yaml"


def _validate_overrides(data: Dict[str, Any], config_file: Path) -> Dict[str, Any]:
    unknown = sorted(set(data) - set(_OVERRIDABLE_KEYS))
    if unknown:
        raise ConfigError(
            f"Unknown configuration keys in {config_file}: {', '.join(unknown)}"
        )

    for key, value in data.items():
        expected = _OVERRIDABLE_KEYS[key]
        # bool is an int subclass but never a valid timeout
        if isinstance(value, bool) or not isinstance(value, expected):
            raise ConfigError(f"Invalid value for '{key}' in {config_file}: {value!r}")
        if key.endswith("_timeout") and value <= 0:
            raise ConfigError(f"'{key}' must be positive in {config_file}")

    if "downloader_dir" in data:
        data["downloader_dir"] = Path(data["downloader_dir"]).expanduser()

    return data


def load_config(
    config_file: Optional[Path] = None, home: Optional[Path] = None
) -> GvsConfig:
    """
    Load configuration, applying overrides from a YAML file.

    Args:
        config_file: Explicit configuration file. When None, the default
            ``<home>/.gvs/config.yaml`` is used if it exists.
        home: Home directory (default: current user's home)

    Returns:
        GvsConfig for this run

    Raises:
        ConfigError: If an explicit file is missing, or the YAML is invalid
    """
    config = GvsConfig.for_home(home or default_home())

    if config_file is None:
        config_file = config.default_config_file
        if not config_file.exists():
            logger.debug(f"No config file at {config_file}, using defaults")
            return config
    elif not config_file.exists():
        raise ConfigError(f"Configuration file not found: {config_file}")

    logger.debug(f"Loading configuration from {config_file}")

    try:
        with open(config_file, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {config_file}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Failed to read {config_file}: {e}") from e

    data = data or {}
    if not isinstance(data, dict):
        raise ConfigError(f"Configuration in {config_file} must be a mapping")

    return replace(config, **_validate_overrides(data, config_file))
