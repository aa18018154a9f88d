"""Tests for the plugin pipeline and the component generator."""

from __future__ import annotations

import asyncio

import pytest

from uidlc.core.errors import InvalidOptionsError, MissingChunkError, PluginError
from uidlc.core.ir import ChunkDefinition, ChunkType, ComponentUIDL, FileType
from uidlc.core.pipeline import ComponentStructure, run_plugins
from uidlc.generators import (
    ComponentGenerator,
    component_file_name,
    create_component_generator,
    create_html_component_generator,
    create_react_component_generator,
)
from uidlc.plugins import create_html_imports_plugin
from uidlc.postprocessors import normalize_whitespace


def add_chunk(name: str, content: str, link_after=()):
    def plugin(structure: ComponentStructure) -> ComponentStructure:
        structure.chunks.add_or_replace(
            ChunkDefinition(
                name=name,
                type=ChunkType.STRING,
                file_type=FileType.JS,
                content=content,
                link_after=list(link_after),
            )
        )
        return structure

    plugin.__name__ = f"add-{name}"
    return plugin


class TestPipeline:
    """Tests for sequential plugin execution."""

    @pytest.mark.asyncio
    async def test_plugins_see_predecessors(self, greeting_uidl: dict) -> None:
        seen: list[list[str]] = []

        def recorder(structure: ComponentStructure) -> ComponentStructure:
            seen.append([chunk.name for chunk in structure.chunks])
            return structure

        async def async_chunk(structure: ComponentStructure) -> ComponentStructure:
            await asyncio.sleep(0)
            return add_chunk("second", "2")(structure)

        structure = ComponentStructure(uidl=ComponentUIDL.model_validate(greeting_uidl))
        await run_plugins(structure, [add_chunk("first", "1"), async_chunk, recorder])

        assert seen == [["first", "second"]]

    @pytest.mark.asyncio
    async def test_first_failure_stops_the_run(self, greeting_uidl: dict) -> None:
        """A failing plugin propagates unchanged and later plugins never run."""
        calls: list[str] = []

        def failing(structure: ComponentStructure) -> ComponentStructure:
            raise PluginError("failing", "precondition not met")

        def later(structure: ComponentStructure) -> ComponentStructure:
            calls.append("later")
            return structure

        structure = ComponentStructure(uidl=ComponentUIDL.model_validate(greeting_uidl))
        with pytest.raises(PluginError, match="precondition not met"):
            await run_plugins(structure, [failing, later])

        assert calls == []

    @pytest.mark.asyncio
    async def test_plugin_must_return_structure(self, greeting_uidl: dict) -> None:
        def broken(structure: ComponentStructure) -> None:
            return None

        structure = ComponentStructure(uidl=ComponentUIDL.model_validate(greeting_uidl))
        with pytest.raises(PluginError):
            await run_plugins(structure, [broken])

    def test_missing_producer_names_the_consumer(self, greeting_uidl: dict) -> None:
        """Dropping the plugin that makes a chunk fails at the plugin needing it."""
        generator = create_component_generator(plugins=[create_html_imports_plugin()])

        with pytest.raises(MissingChunkError) as exc_info:
            generator.generate_component_sync(greeting_uidl)

        assert exc_info.value.chunk_name == "html-template"
        assert exc_info.value.requested_by == "html-imports"


class TestComponentGenerator:
    """Tests for ComponentGenerator values."""

    def test_with_methods_return_new_values(self) -> None:
        base = create_component_generator()
        extended = base.with_plugin(add_chunk("a", "a")).with_postprocessor(normalize_whitespace)

        assert base.plugins == ()
        assert base.postprocessors == ()
        assert len(extended.plugins) == 1
        assert len(extended.postprocessors) == 1

    def test_with_mapping_accepts_json(self) -> None:
        generator = ComponentGenerator().with_mapping({"elements": {"box": {"elementType": "div"}}})

        assert generator.mappings[0].elements["box"].element_type == "div"

    def test_chunks_are_linked_per_file_type(self, greeting_uidl: dict) -> None:
        generator = create_component_generator(
            plugins=[add_chunk("body", "body", link_after=["head"]), add_chunk("head", "head")]
        )

        result = generator.generate_component_sync(greeting_uidl)

        assert [(file.full_name, file.content) for file in result.files] == [
            ("greeting.js", "head\nbody")
        ]

    def test_postprocessors_run_in_order(self, greeting_uidl: dict) -> None:
        generator = (
            create_component_generator(plugins=[add_chunk("a", "text")])
            .with_postprocessor(lambda outputs: {k: v + "!" for k, v in outputs.items()})
            .with_postprocessor(lambda outputs: {k: v.upper() for k, v in outputs.items()})
        )

        result = generator.generate_component_sync(greeting_uidl)

        assert result.files[0].content == "TEXT!"

    def test_invalid_options(self, greeting_uidl: dict) -> None:
        with pytest.raises(InvalidOptionsError):
            create_component_generator().generate_component_sync(
                greeting_uidl, {"localDependencyPrefix": "../"}
            )

    def test_input_is_not_mutated(self, navigation_uidl: dict) -> None:
        uidl = ComponentUIDL.model_validate(navigation_uidl)
        before = uidl.model_dump()

        create_react_component_generator().generate_component_sync(uidl)

        assert uidl.model_dump() == before

    @pytest.mark.asyncio
    async def test_concurrent_generations_are_independent(
        self, greeting_uidl: dict, navigation_uidl: dict
    ) -> None:
        """One generator value serves concurrent calls without shared state."""
        generator = create_react_component_generator()

        greeting, navigation = await asyncio.gather(
            generator.generate_component(greeting_uidl),
            generator.generate_component(navigation_uidl),
        )
        alone = await generator.generate_component(greeting_uidl)

        assert greeting.files == alone.files
        assert "Hello" not in navigation.files[0].content

    def test_file_names(self) -> None:
        uidl = ComponentUIDL.model_validate(
            {
                "name": "AppHeader",
                "node": {"type": "element", "content": {"elementType": "div"}},
                "outputOptions": {"styleFileName": "header-styles"},
            }
        )

        assert component_file_name(uidl, FileType.JS) == "app-header"
        assert component_file_name(uidl, FileType.CSS) == "header-styles"


class TestPresets:
    """Tests for the preloaded HTML and React generators."""

    def test_html_component(self, greeting_uidl: dict) -> None:
        result = create_html_component_generator().generate_component_sync(greeting_uidl)

        assert len(result.files) == 1
        assert result.files[0].full_name == "greeting.html"
        assert result.files[0].content == (
            "<!DOCTYPE html>\n<html><body><div>Hello</div></body></html>"
        )

    def test_react_component(self, greeting_uidl: dict) -> None:
        result = create_react_component_generator().generate_component_sync(greeting_uidl)
        content = result.files[0].content

        assert result.files[0].full_name == "greeting.js"
        assert content.startswith("import React from 'react'\n")
        assert "export default function Greeting() {" in content
        assert "<div>\n      Hello\n    </div>" in content
        assert result.package_dependencies == {"react": "^18.2.0"}

    def test_react_props_and_state(self) -> None:
        uidl = {
            "name": "counter",
            "propDefinitions": {"label": {"type": "string"}},
            "stateDefinitions": {"count": {"type": "number", "defaultValue": 0}},
            "node": {
                "type": "element",
                "content": {
                    "elementType": "button",
                    "attrs": {"class": {"type": "static", "content": "counter"}},
                    "style": {"fontSize": {"type": "static", "content": "12px"}},
                    "children": [
                        {"type": "dynamic", "content": {"referenceType": "prop", "id": "label"}},
                        {"type": "dynamic", "content": {"referenceType": "state", "id": "count"}},
                    ],
                },
            },
        }

        content = create_react_component_generator().generate_component_sync(uidl).files[0].content

        assert "import React, { useState } from 'react'" in content
        assert "export default function Counter(props) {" in content
        assert "const [count, setCount] = useState(0)" in content
        assert '<button className="counter" style={{ fontSize: "12px" }}>' in content
        assert "{props.label}" in content
        assert "{count}" in content

    def test_html_uses_default_values(self) -> None:
        uidl = {
            "name": "Badge",
            "propDefinitions": {"label": {"type": "string", "defaultValue": "New"}},
            "node": {
                "type": "element",
                "content": {
                    "elementType": "text",
                    "style": {"fontWeight": {"type": "static", "content": "bold"}},
                    "children": [
                        {"type": "dynamic", "content": {"referenceType": "prop", "id": "label"}}
                    ],
                },
            },
        }

        content = create_html_component_generator().generate_component_sync(uidl).files[0].content

        assert '<span style="font-weight: bold;">New</span>' in content

    def test_assets_prefix_on_images(self) -> None:
        uidl = {
            "name": "Logo",
            "node": {
                "type": "element",
                "content": {
                    "elementType": "image",
                    "attrs": {"src": {"type": "static", "content": "/logo.png"}},
                },
            },
        }
        options = {"assets_prefix": "/static"}

        html = create_html_component_generator().generate_component_sync(uidl, options)
        react = create_react_component_generator().generate_component_sync(uidl, options)

        assert '<img src="/static/logo.png">' in html.files[0].content
        assert '<img src="/static/logo.png" />' in react.files[0].content

    def test_html_seo_head(self) -> None:
        uidl = {
            "name": "About",
            "seo": {"title": "About & us", "metaTags": [{"name": "robots", "content": "none"}]},
            "node": {"type": "element", "content": {"elementType": "container"}},
        }

        content = create_html_component_generator().generate_component_sync(uidl).files[0].content

        assert (
            '<html><head><title>About &amp; us</title><meta name="robots" content="none">'
            "</head><body><div></div></body></html>"
        ) in content
