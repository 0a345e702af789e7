"""Tests for intlroute.cli — ``check`` and ``resolve`` subcommands."""

import sys
import types
from pathlib import Path

import pytest

from intlroute.cli import main
from intlroute.cli._resolve import resolve_config
from intlroute.config import DomainConfig, RoutingConfig
from intlroute.errors import ConfigurationError
from intlroute.i18n.routing import LocaleRouting

CONFIG = RoutingConfig(
    locales=("en", "fr"),
    default_locale="en",
    domains=(
        DomainConfig("us.example.com", "en", locales=("en",)),
        DomainConfig("ca.example.com", "en", locales=("en", "fr")),
    ),
)

PYPROJECT = """\
[project]
name = "shop"

[tool.intlroute]
locales = ["en", "de"]
default_locale = "en"
locale_prefix = "always"
"""


@pytest.fixture
def fake_module(monkeypatch: pytest.MonkeyPatch) -> types.ModuleType:
    """Register a module exposing routing objects under several names."""
    mod = types.ModuleType("_intlroute_cli_test")
    mod.routing = CONFIG  # type: ignore[attr-defined]
    mod.engine = LocaleRouting(CONFIG)  # type: ignore[attr-defined]
    mod.plain = {"locales": ["en", "de"], "default_locale": "de"}  # type: ignore[attr-defined]
    mod.factory = lambda: RoutingConfig(locales=("de",), default_locale="de")  # type: ignore[attr-defined]
    mod.number = 42  # type: ignore[attr-defined]
    monkeypatch.setitem(sys.modules, "_intlroute_cli_test", mod)
    return mod


class TestResolveConfig:
    def test_default_attribute(self, fake_module: types.ModuleType) -> None:
        assert resolve_config("_intlroute_cli_test") is CONFIG

    def test_engine_attribute(self, fake_module: types.ModuleType) -> None:
        assert resolve_config("_intlroute_cli_test:engine") is CONFIG

    def test_mapping_attribute(self, fake_module: types.ModuleType) -> None:
        assert resolve_config("_intlroute_cli_test:plain").default_locale == "de"

    def test_factory(self, fake_module: types.ModuleType) -> None:
        assert resolve_config("_intlroute_cli_test:factory").locales == ("de",)

    def test_wrong_type(self, fake_module: types.ModuleType) -> None:
        with pytest.raises(TypeError, match="not a RoutingConfig"):
            resolve_config("_intlroute_cli_test:number")

    def test_pyproject_table(self, tmp_path: Path) -> None:
        path = tmp_path / "pyproject.toml"
        path.write_text(PYPROJECT)
        config = resolve_config(str(path))
        assert config.locales == ("en", "de")
        assert config.locale_prefix.value == "always"

    def test_intlroute_table(self, tmp_path: Path) -> None:
        path = tmp_path / "routing.toml"
        path.write_text('[intlroute]\nlocales = ["en"]\ndefault_locale = "en"\n')
        assert resolve_config(str(path)).locales == ("en",)

    def test_top_level_with_domains(self, tmp_path: Path) -> None:
        path = tmp_path / "routing.toml"
        path.write_text(
            'locales = ["en", "fr"]\n'
            'default_locale = "en"\n'
            "\n"
            "[[domains]]\n"
            'domain = "ca.example.com"\n'
            'default_locale = "fr"\n'
        )
        config = resolve_config(str(path))
        assert config.domains[0].domain == "ca.example.com"
        assert config.domains[0].locales == ("en", "fr")

    def test_invalid_config(self, tmp_path: Path) -> None:
        path = tmp_path / "routing.toml"
        path.write_text('locales = ["en"]\ndefault_locale = "fr"\n')
        with pytest.raises(ConfigurationError):
            resolve_config(str(path))


class TestCheckCommand:
    def test_success(self, fake_module: types.ModuleType, capsys: pytest.CaptureFixture[str]) -> None:
        main(["check", "_intlroute_cli_test:routing"])
        out = capsys.readouterr().out
        assert "locales:         en, fr" in out
        assert "us.example.com -> en [en]" in out
        assert out.rstrip().endswith("OK")

    def test_invalid_config_exits_one(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        path = tmp_path / "routing.toml"
        path.write_text('locales = ["en"]\ndefault_locale = "fr"\n')
        with pytest.raises(SystemExit) as exc_info:
            main(["check", str(path)])
        assert exc_info.value.code == 1
        assert "Error: Default locale 'fr'" in capsys.readouterr().err

    def test_missing_file(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["check", str(tmp_path / "missing.toml")])
        assert exc_info.value.code == 1
        assert "Error:" in capsys.readouterr().err

    def test_invalid_import_string(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["check", "nonexistent_module_xyz:routing"])
        assert exc_info.value.code == 1
        assert "Error:" in capsys.readouterr().err

    def test_no_command_prints_help(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main([])
        assert exc_info.value.code == 0
        assert "usage: intlroute" in capsys.readouterr().out


class TestResolveCommand:
    def test_redirect(self, fake_module: types.ModuleType, capsys: pytest.CaptureFixture[str]) -> None:
        main(["resolve", "_intlroute_cli_test", "/fr/menu", "--host", "us.example.com"])
        out = capsys.readouterr().out
        assert "locale:   fr (pathPrefix)" in out
        assert "domain:   us.example.com" in out
        assert "decision: redirect -> https://ca.example.com/fr/menu" in out
        assert "cookie:   INTL_LOCALE=fr;" in out
        assert "link:" not in out

    def test_rewrite(self, fake_module: types.ModuleType, capsys: pytest.CaptureFixture[str]) -> None:
        main(
            [
                "resolve",
                "_intlroute_cli_test:plain",
                "/about",
                "--accept-language",
                "fr, de;q=0.5",
            ]
        )
        out = capsys.readouterr().out
        assert "locale:   de (header)" in out
        assert "decision: rewrite -> /de/about" in out
        assert 'link:     <https://localhost/en/about>; rel="alternate"; hreflang="en"' in out
        assert '<https://localhost/about>; rel="alternate"; hreflang="de"' in out

    def test_cookie_flag(self, fake_module: types.ModuleType, capsys: pytest.CaptureFixture[str]) -> None:
        main(["resolve", "_intlroute_cli_test:plain", "/", "--cookie", "en", "--scheme", "http"])
        out = capsys.readouterr().out
        assert "locale:   en (cookie)" in out
        assert "decision: redirect -> /en" in out
