"""
Tests for gvs.core.config.
"""

from pathlib import Path
from unittest.mock import patch

import pytest

from gvs.core.config import (
    DEFAULT_FETCH_TIMEOUT,
    DEFAULT_INSTALL_TIMEOUT,
    DEFAULT_LISTING_URL,
    GvsConfig,
    load_config,
)
from gvs.core.exceptions import ConfigError


class TestGvsConfig:
    def test_paths_derived_from_home(self, tmp_path):
        config = GvsConfig.for_home(tmp_path)

        assert config.versions_root == tmp_path / "sdk"
        assert config.link_dir == tmp_path / ".gvs" / "bin"
        assert config.link_path == tmp_path / ".gvs" / "bin" / "go"
        assert config.lock_dir == tmp_path / ".gvs" / "lock"
        assert config.downloader_dir == tmp_path / "go" / "bin"

    def test_defaults(self, tmp_path):
        config = GvsConfig.for_home(tmp_path)

        assert config.listing_url == DEFAULT_LISTING_URL
        assert config.fetch_timeout == DEFAULT_FETCH_TIMEOUT == 5
        assert config.install_timeout == DEFAULT_INSTALL_TIMEOUT == 300
        assert config.go_command == "go"

    def test_accepts_string_home(self, tmp_path):
        config = GvsConfig.for_home(str(tmp_path))
        assert config.home == tmp_path


class TestLoadConfig:
    def test_no_file_gives_defaults(self, gvs_home):
        config = load_config(home=gvs_home)
        assert config == GvsConfig.for_home(gvs_home)

    def test_default_home_used(self, gvs_home):
        with patch("gvs.core.config.default_home", return_value=gvs_home):
            config = load_config()
        assert config.home == gvs_home

    def test_default_file_overrides(self, gvs_home):
        config_file = gvs_home / ".gvs" / "config.yaml"
        config_file.parent.mkdir(parents=True)
        config_file.write_text(
            "listing_url: https://mirror.example.com/dl/\n"
            "fetch_timeout: 2.5\n"
            "go_command: /usr/local/go/bin/go\n"
        )

        config = load_config(home=gvs_home)

        assert config.listing_url == "https://mirror.example.com/dl/"
        assert config.fetch_timeout == 2.5
        assert config.go_command == "/usr/local/go/bin/go"
        assert config.install_timeout == 300

    def test_explicit_file(self, gvs_home, tmp_path):
        config_file = tmp_path / "custom.yaml"
        config_file.write_text("install_timeout: 600\ndownloader_dir: /opt/gobin\n")

        config = load_config(config_file, home=gvs_home)

        assert config.install_timeout == 600
        assert config.downloader_dir == Path("/opt/gobin")

    def test_explicit_file_missing(self, gvs_home, tmp_path):
        with pytest.raises(ConfigError, match="not found"):
            load_config(tmp_path / "missing.yaml", home=gvs_home)

    def test_empty_file(self, gvs_home, tmp_path):
        config_file = tmp_path / "empty.yaml"
        config_file.write_text("")

        assert load_config(config_file, home=gvs_home) == GvsConfig.for_home(gvs_home)

    def test_invalid_yaml(self, gvs_home, tmp_path):
        config_file = tmp_path / "bad.yaml"
        config_file.write_text("listing_url: [unclosed\n")

        with pytest.raises(ConfigError, match="Invalid YAML"):
            load_config(config_file, home=gvs_home)

    def test_non_mapping(self, gvs_home, tmp_path):
        config_file = tmp_path / "list.yaml"
        config_file.write_text("- a\n- b\n")

        with pytest.raises(ConfigError, match="must be a mapping"):
            load_config(config_file, home=gvs_home)

    def test_unknown_key(self, gvs_home, tmp_path):
        config_file = tmp_path / "unknown.yaml"
        config_file.write_text("versions_root: /elsewhere\n")

        with pytest.raises(ConfigError, match="Unknown configuration keys"):
            load_config(config_file, home=gvs_home)

    @pytest.mark.parametrize(
        "content", ["fetch_timeout: fast\n", "fetch_timeout: 0\n", "install_timeout: true\n"]
    )
    def test_invalid_values(self, gvs_home, tmp_path, content):
        config_file = tmp_path / "invalid.yaml"
        config_file.write_text(content)

        with pytest.raises(ConfigError):
            load_config(config_file, home=gvs_home)
