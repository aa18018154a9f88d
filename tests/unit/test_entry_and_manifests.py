"""Tests for the entry document, web manifest and package manifest handlers."""

from __future__ import annotations

import json

import pytest

from uidlc.core.errors import ConfigurationError
from uidlc.core.ir import (
    ChunkDefinition,
    ChunkType,
    FileType,
    GeneratedFile,
    GeneratedFolder,
    ProjectUIDL,
)
from uidlc.generators import create_component_generator
from uidlc.project import (
    Attribute,
    CustomTag,
    EntryFileOptions,
    EntrySection,
    GeneratorConfig,
    ProjectStrategy,
    create_entry_file,
    create_html_entry_file_chunks,
    create_manifest_json_file,
    handle_package_json,
)
from uidlc.stacks import get_strategy


def project(globals_: dict | None = None, name: str = "Shop") -> ProjectUIDL:
    return ProjectUIDL.model_validate(
        {
            "name": name,
            "globals": globals_ or {},
            "root": {"name": "App", "node": {"type": "element", "content": {"elementType": "div"}}},
        }
    )


def render_entry(uidl: ProjectUIDL, options: EntryFileOptions | None = None) -> str:
    chunks = create_html_entry_file_chunks(uidl, options or EntryFileOptions())
    files = create_component_generator().link_code_chunks(chunks, "index")
    assert [file.full_name for file in files] == ["index.html"]
    return files[0].content


class TestEntryFile:
    """Tests for the generated entry document."""

    def test_inline_body_script(self) -> None:
        """A lone inline script lands in the body; the head stays empty."""
        uidl = project(
            {
                "assets": [
                    {
                        "type": "script",
                        "content": "console.log('hi')",
                        "options": {"target": "body"},
                    }
                ]
            }
        )

        chunks = create_html_entry_file_chunks(uidl, EntryFileOptions())
        document = chunks[FileType.HTML][1].content
        head, body = document.children

        assert head.children == []
        assert len(body.children) == 2
        assert render_entry(uidl) == (
            "<!DOCTYPE html>\n"
            '<html><head></head><body><div id="app"></div>'
            "<script type=\"text/javascript\">console.log('hi')</script></body></html>"
        )

    def test_globals_are_rendered(self) -> None:
        uidl = project(
            {
                "settings": {"title": "Shop", "language": "en"},
                "meta": [{"property": "og:image", "content": "/og.png"}],
                "manifest": {"name": "Shop"},
                "assets": [
                    {"type": "style", "path": "/main.css"},
                    {"type": "style", "content": "body { margin: 0; }"},
                    {"type": "font", "path": "https://fonts.example.com/inter.css"},
                    {"type": "canonical", "path": "https://shop.example.com"},
                    {
                        "type": "script",
                        "path": "/app.js",
                        "options": {"defer": True, "async": True},
                    },
                    {
                        "type": "icon",
                        "path": "/favicon.png",
                        "options": {"iconType": "image/png", "iconSizes": "32x32"},
                    },
                ],
                "customCode": {"head": "<!-- head -->", "body": "<!-- body -->"},
            }
        )

        html = render_entry(uidl, EntryFileOptions(assets_prefix="/static"))

        assert '<html lang="en">' in html
        assert "<title>Shop</title>" in html
        assert '<link rel="manifest" href="/static/manifest.json">' in html
        assert '<meta property="og:image" content="/static/og.png">' in html
        assert '<link rel="stylesheet" href="/static/main.css">' in html
        assert "<style>body { margin: 0; }</style>" in html
        assert '<link rel="stylesheet" href="https://fonts.example.com/inter.css">' in html
        assert '<link rel="canonical" href="https://shop.example.com">' in html
        assert '<script type="text/javascript" src="/static/app.js" defer async></script>' in html
        assert (
            '<link rel="shortcut icon" href="/static/favicon.png" type="image/png" sizes="32x32">'
        ) in html
        assert "<!-- head --></head>" in html
        assert "<!-- body --></body>" in html

    def test_custom_tags_and_root_override(self) -> None:
        options = EntryFileOptions(
            app_root_override='<main id="root"></main>',
            custom_tags=(
                CustomTag(
                    tag_name="script",
                    target_tag="body",
                    content="window.env = {}",
                    attributes=(Attribute("nomodule"),),
                ),
                CustomTag(
                    tag_name="meta",
                    attributes=(Attribute("name", "theme-color"), Attribute("content", "#fff")),
                ),
            ),
            custom_head_content="<base href='/'>",
        )

        html = render_entry(project(), options)

        assert '<div id="app">' not in html
        assert '<body><main id="root"></main><script nomodule>window.env = {}</script>' in html
        assert "<head><meta name=\"theme-color\" content=\"#fff\"><base href='/'></head>" in html

    def test_strategy_options_are_merged_under_call_options(self) -> None:
        strategy = ProjectStrategy(
            id="test",
            components=get_strategy("react").components,
            pages=get_strategy("react").pages,
            entry=EntrySection(
                config=GeneratorConfig(generator=create_component_generator),
                file_name="index",
                options=EntryFileOptions(app_root_override="<div id='root'></div>"),
            ),
        )

        files = create_entry_file(
            project({"settings": {"title": "Shop"}}),
            strategy,
            create_component_generator(),
            EntryFileOptions(assets_prefix="/static"),
        )

        assert "<div id='root'></div>" in files[0].content

    def test_custom_chunk_generation_function(self) -> None:
        def chunks(uidl, options):
            return {
                FileType.HTML: [
                    ChunkDefinition(
                        name="doc",
                        type=ChunkType.STRING,
                        file_type=FileType.HTML,
                        content=f"<p>{uidl.name}</p>",
                    )
                ]
            }

        strategy = ProjectStrategy(
            id="test",
            components=get_strategy("react").components,
            pages=get_strategy("react").pages,
            entry=EntrySection(chunk_generation_function=chunks),
        )

        files = create_entry_file(project(), strategy, create_component_generator())

        assert files[0].content == "<p>Shop</p>"

    def test_missing_entry_section(self) -> None:
        with pytest.raises(ConfigurationError, match="no entry section"):
            create_entry_file(project(), get_strategy("html"), create_component_generator())


class TestWebManifest:
    def test_defaults_and_icon_prefix(self) -> None:
        uidl = project(
            {
                "manifest": {
                    "themeColor": "#000000",
                    "icons": [{"src": "/icon-192.png", "sizes": "192x192"}],
                }
            }
        )

        file = create_manifest_json_file(uidl, "/static")
        content = json.loads(file.content)

        assert file.full_name == "manifest.json"
        assert content == {
            "short_name": "Shop",
            "name": "Shop",
            "display": "standalone",
            "start_url": "/",
            "theme_color": "#000000",
            "icons": [{"src": "/static/icon-192.png", "sizes": "192x192"}],
        }

    def test_declared_fields_override_defaults(self) -> None:
        uidl = project({"manifest": {"name": "The Shop", "display": "browser"}})

        content = json.loads(create_manifest_json_file(uidl).content)

        assert content["name"] == "The Shop"
        assert content["display"] == "browser"
        assert content["short_name"] == "Shop"


class TestPackageJson:
    def test_default_manifest(self) -> None:
        folder = GeneratedFolder(name="shop")

        handle_package_json(
            folder, project(name="My Shop!"), {"react": "^18.2.0"}, {"prettier": "^3.0.0"}
        )

        content = json.loads(folder.find_file("package", "json").content)
        assert content["name"] == "my-shop"
        assert content["version"] == "1.0.0"
        assert content["dependencies"] == {"react": "^18.2.0"}
        assert content["devDependencies"] == {"prettier": "^3.0.0"}

    def test_existing_manifest_is_merged(self) -> None:
        existing = {
            "name": "template",
            "scripts": {"start": "vite"},
            "dependencies": {"react": "^17.0.0", "lodash": "^4.17.0"},
        }
        folder = GeneratedFolder(
            name="shop",
            files=[GeneratedFile("package", json.dumps(existing), "json")],
        )

        handle_package_json(folder, project(), {"react": "^18.2.0"})

        content = json.loads(folder.files[0].content)
        assert len(folder.files) == 1
        assert content["name"] == "shop"
        assert content["scripts"] == {"start": "vite"}
        assert content["dependencies"] == {"react": "^18.2.0", "lodash": "^4.17.0"}

    def test_broken_template_manifest(self) -> None:
        folder = GeneratedFolder(
            name="shop", files=[GeneratedFile("package", "{not json", "json")]
        )

        with pytest.raises(ConfigurationError, match="Invalid package.json in template"):
            handle_package_json(folder, project(), {"react": "^18.2.0"})
