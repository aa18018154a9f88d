"""Tests for uidlc.toml configuration, the stack registry and path helpers."""

from __future__ import annotations

from pathlib import Path

import pytest

from uidlc.core.config import UidlcConfig, load_config
from uidlc.core.errors import ConfigurationError
from uidlc.core.paths import generate_local_dependencies_prefix, prefix_assets_path
from uidlc.core.strings import camel_case_to_dash_case, dash_case_to_upper_camel_case, slugify
from uidlc.project import ProjectGenerator, ProjectStrategy
from uidlc.stacks import StackRegistry, create_project_generator, get_registry, get_strategy


class TestConfig:
    def test_defaults_without_file(self, tmp_path: Path) -> None:
        config = load_config(tmp_path)

        assert config == UidlcConfig()
        assert config.generation.stack == "react"
        assert config.get_output_path(tmp_path) == tmp_path / "generated"

    def test_values_from_file(self, tmp_path: Path) -> None:
        (tmp_path / "uidlc.toml").write_text(
            """
[generation]
stack = "html"
output = "/tmp/site"
assets_prefix = "/static"
log_level = "DEBUG"

[package]
dev_dependencies = { "prettier" = "^3.0.0" }
"""
        )

        config = load_config(tmp_path)

        assert config.generation.stack == "html"
        assert config.generation.assets_prefix == "/static"
        assert config.generation.log_level == "DEBUG"
        assert config.package.dev_dependencies == {"prettier": "^3.0.0"}
        assert config.get_output_path(tmp_path) == Path("/tmp/site")

    def test_invalid_toml(self, tmp_path: Path) -> None:
        (tmp_path / "uidlc.toml").write_text("[generation\n")

        with pytest.raises(ConfigurationError, match="Invalid uidlc.toml"):
            load_config(tmp_path)

    def test_unknown_keys_rejected(self, tmp_path: Path) -> None:
        (tmp_path / "uidlc.toml").write_text('[generation]\nframework = "vue"\n')

        with pytest.raises(ConfigurationError):
            load_config(tmp_path)


class TestStackRegistry:
    def test_builtin_stacks(self) -> None:
        names = [info.name for info in get_registry().list_stacks()]

        assert names == ["html", "react"]
        assert "react" in get_registry()

    def test_each_call_builds_a_fresh_strategy(self) -> None:
        assert isinstance(get_strategy("react"), ProjectStrategy)
        assert get_strategy("react") is not get_strategy("react")

    def test_unknown_stack(self) -> None:
        with pytest.raises(ConfigurationError, match="Available stacks: html, react"):
            get_strategy("angular")

    def test_duplicate_registration(self) -> None:
        registry = StackRegistry()
        registry.register("react", lambda: get_strategy("react"))

        with pytest.raises(ConfigurationError, match="already registered"):
            registry.register("react", lambda: get_strategy("react"))

    def test_create_project_generator(self) -> None:
        generator = create_project_generator("html", dev_dependencies={"serve": "^14.0.0"})

        assert isinstance(generator, ProjectGenerator)
        assert generator.strategy.id == "html"
        assert generator.dev_dependencies == {"serve": "^14.0.0"}


class TestPaths:
    @pytest.mark.parametrize(
        "from_path,to_path,expected",
        [
            (["src", "views"], ["src", "components"], "../components"),
            (["src", "views", "blog"], ["src", "components"], "../../components"),
            (["src"], ["src", "views"], "./views"),
            (["src", "components"], ["src", "components"], "."),
            ([], [], "."),
            (["deals"], [], ".."),
            ([], ["src"], "./src"),
        ],
    )
    def test_local_dependencies_prefix(
        self, from_path: list[str], to_path: list[str], expected: str
    ) -> None:
        assert generate_local_dependencies_prefix(from_path, to_path) == expected

    @pytest.mark.parametrize(
        "prefix,path,expected",
        [
            ("/static", "/logo.png", "/static/logo.png"),
            ("/static/", "/logo.png", "/static/logo.png"),
            ("", "/logo.png", "/logo.png"),
            ("/static", "logo.png", "logo.png"),
            ("/static", "https://cdn.example.com/a.png", "https://cdn.example.com/a.png"),
            ("/static", "", ""),
        ],
    )
    def test_prefix_assets_path(self, prefix: str, path: str, expected: str) -> None:
        assert prefix_assets_path(prefix, path) == expected


class TestStrings:
    def test_casing(self) -> None:
        assert camel_case_to_dash_case("ProductCard") == "product-card"
        assert camel_case_to_dash_case("about_us page") == "about-us-page"
        assert dash_case_to_upper_camel_case("product-card") == "ProductCard"
        assert slugify("  Shop & Co.  ") == "shop-co"
