"""Tests for config loading, validation, and env var overrides."""

from pathlib import Path

import pytest

from gitdeny.config.loader import ConfigError, load_config


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for var in ("GITDENY_RULES", "GITDENY_FORMAT", "GITDENY_ALL", "GITDENY_MAX_WORKERS"):
        monkeypatch.delenv(var, raising=False)


class TestConfigLoading:
    def test_default_config(self, tmp_path: Path):
        cfg = load_config(tmp_path)
        assert cfg.scan.rules == "git-deny-patterns.json"
        assert cfg.scan.all is False
        assert cfg.scan.max_workers is None
        assert cfg.output.format == "terminal"

    def test_custom_toml(self, tmp_path: Path):
        (tmp_path / ".gitdeny.toml").write_text(
            'version = "1.0"\n'
            '[scan]\n'
            'rules = "policy/deny.yaml"\n'
            'all = true\n'
            'max_workers = 4\n'
            '[output]\n'
            'format = "json"\n'
        )
        cfg = load_config(tmp_path)
        assert cfg.scan.rules == "policy/deny.yaml"
        assert cfg.scan.all is True
        assert cfg.scan.max_workers == 4
        assert cfg.output.format == "json"

    def test_unknown_keys_ignored(self, tmp_path: Path):
        (tmp_path / ".gitdeny.toml").write_text('[scan]\nentropy = true\n')
        cfg = load_config(tmp_path)
        assert cfg.scan.all is False

    def test_config_override_path(self, tmp_path: Path):
        custom = tmp_path / "custom.toml"
        custom.write_text('[scan]\nall = true\n')
        cfg = load_config(tmp_path, config_override=str(custom))
        assert cfg.scan.all is True

    def test_missing_override_raises(self, tmp_path: Path):
        with pytest.raises(ConfigError):
            load_config(tmp_path, config_override="/nonexistent/config.toml")

    def test_invalid_toml_raises(self, tmp_path: Path):
        (tmp_path / ".gitdeny.toml").write_text("this is not valid [toml")
        with pytest.raises(ConfigError):
            load_config(tmp_path)

    def test_invalid_format_raises(self, tmp_path: Path):
        (tmp_path / ".gitdeny.toml").write_text('[output]\nformat = "sarif"\n')
        with pytest.raises(ConfigError, match="output format"):
            load_config(tmp_path)

    def test_invalid_workers_raises(self, tmp_path: Path):
        (tmp_path / ".gitdeny.toml").write_text('[scan]\nmax_workers = 0\n')
        with pytest.raises(ConfigError, match="max_workers"):
            load_config(tmp_path)

    def test_boolean_workers_raises(self, tmp_path: Path):
        (tmp_path / ".gitdeny.toml").write_text('[scan]\nmax_workers = true\n')
        with pytest.raises(ConfigError, match="max_workers"):
            load_config(tmp_path)

    def test_section_must_be_table(self, tmp_path: Path):
        (tmp_path / ".gitdeny.toml").write_text('scan = "yes"\n')
        with pytest.raises(ConfigError):
            load_config(tmp_path)


class TestEnvVarOverrides:
    def test_rules_override(self, tmp_path: Path, monkeypatch):
        monkeypatch.setenv("GITDENY_RULES", "/etc/gitdeny/rules.json")
        assert load_config(tmp_path).scan.rules == "/etc/gitdeny/rules.json"

    def test_format_override(self, tmp_path: Path, monkeypatch):
        monkeypatch.setenv("GITDENY_FORMAT", "json")
        assert load_config(tmp_path).output.format == "json"

    def test_invalid_format_override_ignored(self, tmp_path: Path, monkeypatch):
        monkeypatch.setenv("GITDENY_FORMAT", "xml")
        assert load_config(tmp_path).output.format == "terminal"

    def test_all_override(self, tmp_path: Path, monkeypatch):
        monkeypatch.setenv("GITDENY_ALL", "true")
        assert load_config(tmp_path).scan.all is True

    def test_max_workers_override(self, tmp_path: Path, monkeypatch):
        monkeypatch.setenv("GITDENY_MAX_WORKERS", "8")
        assert load_config(tmp_path).scan.max_workers == 8

    def test_invalid_max_workers_ignored(self, tmp_path: Path, monkeypatch):
        monkeypatch.setenv("GITDENY_MAX_WORKERS", "lots")
        assert load_config(tmp_path).scan.max_workers is None
