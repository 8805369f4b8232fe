"""Tests for ModgitSettings — unified settings with TOML source."""

from __future__ import annotations

from pathlib import Path

import click
import pytest

from modgit.config.models import GitConfig
from modgit.config.settings import ModgitSettings


class TestModgitSettingsDefaults:
    def test_all_defaults(self, tmp_path: Path) -> None:

        settings = ModgitSettings.from_cli(root=tmp_path)
        assert settings.root == tmp_path
        assert settings.config_path is None
        assert settings.json_output is False
        assert settings.quiet is False
        assert settings.catalog.filename == ".modgit"
        assert settings.git.binary == "git"
        assert settings.visibility.include == ["/*"]
        assert settings.definitions_path == tmp_path / ".modgit"

    def test_frozen(self, tmp_path: Path) -> None:

        settings = ModgitSettings.from_cli(root=tmp_path)
        with pytest.raises(Exception):
            settings.quiet = True  # type: ignore[misc]

    def test_cli_flags_pass_through(self, tmp_path: Path) -> None:

        settings = ModgitSettings.from_cli(root=tmp_path, json_output=True, verbose=True)
        assert settings.json_output is True
        assert settings.verbose is True

    def test_section_override_by_kwarg(self, tmp_path: Path) -> None:

        settings = ModgitSettings.from_cli(root=tmp_path, git=GitConfig(binary="/opt/git"))
        assert settings.git.binary == "/opt/git"


class TestTomlSource:
    def test_loads_from_toml(self, tmp_path: Path) -> None:

        (tmp_path / "modgit.toml").write_text(
            '[catalog]\nfilename = "modules.cfg"\n[visibility]\ninclude = ["/*", "!/*/"]\n'
        )
        settings = ModgitSettings.from_cli(root=tmp_path)
        assert settings.catalog.filename == "modules.cfg"
        assert settings.visibility.include == ["/*", "!/*/"]
        assert settings.git.binary == "git"
        assert settings.definitions_path == tmp_path / "modules.cfg"

    def test_explicit_config_path(self, tmp_path: Path) -> None:

        config = tmp_path / "elsewhere.toml"
        config.write_text('[git]\nbinary = "git2"\n')
        settings = ModgitSettings.from_cli(config_path=str(config), root=tmp_path)
        assert settings.config_path == config
        assert settings.git.binary == "git2"

    def test_missing_explicit_config_is_ignored(self, tmp_path: Path) -> None:

        settings = ModgitSettings.from_cli(config_path=str(tmp_path / "nope.toml"), root=tmp_path)
        assert settings.config_path is None

    def test_invalid_toml(self, tmp_path: Path) -> None:

        (tmp_path / "modgit.toml").write_text("[catalog\n")
        with pytest.raises(click.ClickException):
            ModgitSettings.from_cli(root=tmp_path)

    def test_env_overrides_toml(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:

        (tmp_path / "modgit.toml").write_text('[git]\nbinary = "from-toml"\n')
        monkeypatch.setenv("MODGIT_GIT__BINARY", "from-env")
        settings = ModgitSettings.from_cli(root=tmp_path)
        assert settings.git.binary == "from-env"


class TestRootDiscovery:
    def test_root_from_definitions_file(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:

        (tmp_path / ".modgit").write_text('[module "a"]\n\tpath = a\n')
        nested = tmp_path / "a" / "deep"
        nested.mkdir(parents=True)
        monkeypatch.chdir(nested)
        settings = ModgitSettings.from_cli()
        assert settings.root == tmp_path.resolve()

    def test_root_from_config_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:

        (tmp_path / "modgit.toml").write_text("")
        nested = tmp_path / "sub"
        nested.mkdir()
        monkeypatch.chdir(nested)
        settings = ModgitSettings.from_cli()
        assert settings.root == tmp_path.resolve()

    def test_root_honours_configured_filename(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        (tmp_path / "modgit.toml").write_text('[catalog]\nfilename = "modules.cfg"\n')
        repo = tmp_path / "repo"
        repo.mkdir()
        (repo / "modules.cfg").write_text("")
        monkeypatch.chdir(repo)
        settings = ModgitSettings.from_cli()
        assert settings.root == repo.resolve()
