"""Tests for AidSettings — unified settings with TOML source."""

from pathlib import Path

import click
import pytest

from aidctl.config.settings import AidSettings


class TestAidSettingsDefaults:
    def test_all_defaults(self, project_root: Path) -> None:
        """With no TOML and no env vars, all fields use code defaults."""
        settings = AidSettings.from_cli(project_root=project_root)
        assert settings.project_root == project_root
        assert settings.config_path is None
        assert settings.json_output is False
        assert settings.quiet is False
        assert settings.verbose is False
        assert settings.ids.max_attempts == 4096
        assert settings.database.type == "sqlite"
        assert settings.storage.root == "storage"

    def test_frozen(self, project_root: Path) -> None:
        settings = AidSettings.from_cli(project_root=project_root)
        with pytest.raises(Exception):
            settings.quiet = True  # type: ignore[misc]


class TestTomlSource:
    def test_loads_from_toml(self, project_root: Path) -> None:
        toml = project_root / "aidctl.toml"
        toml.write_text('[ids]\nseed = 5\n[database]\npath = "data/other.db"\n')
        settings = AidSettings.from_cli(project_root=project_root)
        assert settings.ids.seed == 5
        assert settings.database.path == "data/other.db"
        assert settings.ids.max_attempts == 4096  # default preserved
        assert settings.config_path == toml

    def test_empty_toml_uses_defaults(self, project_root: Path) -> None:
        (project_root / "aidctl.toml").write_text("")
        settings = AidSettings.from_cli(project_root=project_root)
        assert settings.storage.root == "storage"

    def test_explicit_config_path(self, project_root: Path) -> None:
        custom = project_root / "custom" / "my.toml"
        custom.parent.mkdir(parents=True)
        custom.write_text('[storage]\nroot = "custom-store"\n')
        settings = AidSettings.from_cli(config_path=str(custom), project_root=project_root)
        assert settings.storage.root == "custom-store"
        assert settings.config_path == custom

    def test_root_from_config_location(
        self, project_root: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        (project_root / "aidctl.toml").write_text("")
        nested = project_root / "src" / "deep"
        nested.mkdir(parents=True)
        monkeypatch.chdir(nested)
        settings = AidSettings.from_cli()
        assert settings.project_root == project_root.resolve()

    def test_invalid_toml_raises_click_exception(self, project_root: Path) -> None:
        (project_root / "aidctl.toml").write_text("[ids\nbroken")
        with pytest.raises(click.ClickException, match="Invalid TOML"):
            AidSettings.from_cli(project_root=project_root)


class TestEnvVars:
    def test_nested_env_override(
        self, project_root: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("AIDCTL_IDS__MAX_ATTEMPTS", "17")
        settings = AidSettings.from_cli(project_root=project_root)
        assert settings.ids.max_attempts == 17

    def test_env_beats_toml(self, project_root: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (project_root / "aidctl.toml").write_text('[storage]\nroot = "from-toml"\n')
        monkeypatch.setenv("AIDCTL_STORAGE__ROOT", "from-env")
        settings = AidSettings.from_cli(project_root=project_root)
        assert settings.storage.root == "from-env"


class TestCliFlags:
    def test_cli_flags_override(self, project_root: Path) -> None:
        settings = AidSettings.from_cli(
            project_root=project_root,
            json_output=True,
            quiet=True,
            verbose=True,
        )
        assert settings.json_output is True
        assert settings.quiet is True
        assert settings.verbose is True

    def test_cli_flags_override_toml(self, project_root: Path) -> None:
        """CLI flags take priority over TOML values."""
        (project_root / "aidctl.toml").write_text("quiet = true\n")
        settings = AidSettings.from_cli(project_root=project_root, quiet=False)
        assert settings.quiet is False
