"""Tests for the chunk store and the chunk linker."""

from __future__ import annotations

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from uidlc.core.chunks import ChunkStore
from uidlc.core.dependencies import DependencyAggregator
from uidlc.core.errors import (
    ChunkCycleError,
    ConfigurationError,
    MissingChunkError,
    RepresentationError,
    UnknownChunkFlagError,
    UnresolvedChunkReferenceError,
)
from uidlc.core.ir import (
    ChunkDefinition,
    ChunkFlag,
    ChunkType,
    DependencyRecord,
    FileType,
    ImportDeclaration,
    Program,
    add_attribute_to_node,
    add_text_node,
    create_html_node,
)
from uidlc.core.linker import link_chunks, link_code_chunks, order_chunks


def text_chunk(name: str, content: str | None = None, link_after=(), **kwargs) -> ChunkDefinition:
    return ChunkDefinition(
        name=name,
        type=ChunkType.STRING,
        file_type=kwargs.pop("file_type", FileType.JS),
        content=name if content is None else content,
        link_after=list(link_after),
        **kwargs,
    )


class TestChunkStore:
    """Tests for ChunkStore."""

    def test_replace_keeps_position(self) -> None:
        """Replacing a chunk keeps its insertion slot."""
        store = ChunkStore([text_chunk("a"), text_chunk("b")])
        store.add_or_replace(text_chunk("a", "A"))

        assert [chunk.content for chunk in store] == ["A", "b"]

    def test_same_name_different_file_type(self) -> None:
        store = ChunkStore([text_chunk("a"), text_chunk("a", file_type=FileType.CSS)])

        assert len(store) == 2
        assert store.file_types() == [FileType.JS, FileType.CSS]

    def test_require_names_requester(self) -> None:
        """A missing chunk names both the chunk and who asked for it."""
        store = ChunkStore()

        with pytest.raises(MissingChunkError) as exc_info:
            store.require("html-template", requested_by="html-imports")

        assert exc_info.value.chunk_name == "html-template"
        assert exc_info.value.requested_by == "html-imports"
        assert "html-imports" in str(exc_info.value)

    def test_remove_missing_chunk(self) -> None:
        with pytest.raises(MissingChunkError):
            ChunkStore().remove("nothing")

    def test_get_filters_by_type(self) -> None:
        store = ChunkStore([text_chunk("a")])

        assert store.get("a", chunk_type=ChunkType.HAST) is None
        assert store.get("a", chunk_type=ChunkType.STRING) is not None

    def test_link_and_serialize(self) -> None:
        store = ChunkStore([text_chunk("b", link_after=["a"]), text_chunk("a")])

        assert store.link_and_serialize(FileType.JS) == "a\nb"


class TestOrdering:
    """Tests for link_after ordering."""

    def test_link_after_is_respected(self) -> None:
        chunks = [
            text_chunk("component", link_after=["imports"]),
            text_chunk("imports"),
        ]

        assert [chunk.name for chunk in order_chunks(chunks)] == ["imports", "component"]

    def test_unrelated_chunks_keep_insertion_order(self) -> None:
        chunks = [text_chunk("c"), text_chunk("a"), text_chunk("b", link_after=["c"])]

        assert [chunk.name for chunk in order_chunks(chunks)] == ["c", "a", "b"]

    def test_cycle_is_reported(self) -> None:
        """Cyclic link_after fails naming the chunks involved."""
        chunks = [
            text_chunk("free"),
            text_chunk("a", link_after=["b"]),
            text_chunk("b", link_after=["a"]),
        ]

        with pytest.raises(ChunkCycleError) as exc_info:
            order_chunks(chunks)

        assert set(exc_info.value.chunk_names) == {"a", "b"}

    def test_unknown_reference(self) -> None:
        with pytest.raises(UnresolvedChunkReferenceError) as exc_info:
            order_chunks([text_chunk("a", link_after=["ghost"])])

        assert exc_info.value.missing == ["ghost"]

    def test_reference_across_file_types_is_unresolved(self) -> None:
        """link_after only sees chunks of the same file type."""
        chunks = [
            text_chunk("style", file_type=FileType.CSS),
            text_chunk("script", link_after=["style"]),
        ]

        with pytest.raises(UnresolvedChunkReferenceError):
            link_code_chunks(chunks)

    def test_duplicate_names(self) -> None:
        with pytest.raises(ConfigurationError, match="Duplicate chunk name"):
            order_chunks([text_chunk("a"), text_chunk("a")])


class TestLinking:
    """Tests for rendering and joining chunks."""

    def test_hidden_chunks_order_but_emit_nothing(self) -> None:
        chunks = [
            text_chunk("hidden", meta=frozenset({ChunkFlag.LINKED_BUT_HIDDEN})),
            text_chunk("body", link_after=["hidden"]),
        ]

        assert link_chunks(chunks) == "body"

    def test_import_only_chunk_contributes_dependencies(self) -> None:
        record = DependencyRecord(source="lodash", version="^4.17.0")
        chunks = [
            text_chunk("deps", meta=frozenset({"import-only"}), dependencies={"_": record}),
            text_chunk("body"),
        ]
        aggregator = DependencyAggregator()

        assert link_chunks(chunks, aggregator) == "body"
        assert aggregator.get("_") == record

    def test_unknown_flag_is_rejected(self) -> None:
        with pytest.raises(UnknownChunkFlagError) as exc_info:
            text_chunk("a", meta=frozenset({"sometimes-visible"}))

        assert exc_info.value.flag == "sometimes-visible"

    def test_representation_mismatch(self) -> None:
        """A text chunk holding a markup tree is never coerced."""
        chunk = ChunkDefinition(
            name="broken",
            type=ChunkType.STRING,
            file_type=FileType.HTML,
            content=create_html_node("div"),
        )

        with pytest.raises(RepresentationError) as exc_info:
            link_chunks([chunk])

        assert exc_info.value.chunk_name == "broken"

    def test_failed_link_leaves_dependencies_untouched(self) -> None:
        record = DependencyRecord(source="lodash", version="^4.17.0")
        chunks = [
            text_chunk("deps", meta=frozenset({"import-only"}), dependencies={"_": record}),
            text_chunk("script"),
            ChunkDefinition(
                name="broken",
                type=ChunkType.STRING,
                file_type=FileType.HTML,
                content=create_html_node("div"),
            ),
        ]
        aggregator = DependencyAggregator()

        with pytest.raises(RepresentationError):
            link_code_chunks(chunks, aggregator)

        assert len(aggregator) == 0

    def test_mixed_file_types_in_one_link(self) -> None:
        with pytest.raises(ConfigurationError):
            link_chunks([text_chunk("a"), text_chunk("b", file_type=FileType.CSS)])

    def test_link_code_chunks_groups_by_file_type(self) -> None:
        chunks = [
            text_chunk("script"),
            text_chunk("style", "a {}", file_type=FileType.CSS),
            ChunkDefinition(
                name="imports",
                type=ChunkType.AST,
                file_type=FileType.JS,
                content=Program(body=[ImportDeclaration(source="./a.css")]),
            ),
        ]

        linked = link_code_chunks(chunks)

        assert linked == {FileType.JS: "script\nimport './a.css'", FileType.CSS: "a {}"}

    def test_markup_chunk_escapes_text(self) -> None:
        node = create_html_node("p")
        add_attribute_to_node(node, "title", 'say "hi"')
        add_text_node(node, "<b>")
        chunk = ChunkDefinition(
            name="p", type=ChunkType.HAST, file_type=FileType.HTML, content=node
        )

        assert link_chunks([chunk]) == '<p title="say &#34;hi&#34;">&lt;b&gt;</p>'


# =============================================================================
# Property tests
# =============================================================================

names = st.lists(
    st.text(alphabet="abcdefghij", min_size=1, max_size=6), min_size=1, max_size=12, unique=True
)


@st.composite
def acyclic_chunk_sets(draw) -> list[ChunkDefinition]:
    """Chunk sets whose link_after only point at chunks that sort earlier by name."""
    chunk_names = draw(names)
    ranked = sorted(chunk_names)
    chunks = []
    for name in chunk_names:
        earlier = [other for other in ranked if other < name]
        link_after = draw(st.lists(st.sampled_from(earlier), unique=True)) if earlier else []
        chunks.append(text_chunk(name, link_after=link_after))
    return chunks


class TestLinkerProperties:
    """Property-based tests for the linker."""

    @given(acyclic_chunk_sets())
    @settings(max_examples=100)
    def test_linking_is_deterministic(self, chunks: list[ChunkDefinition]) -> None:
        """Invariant: linking the same chunk set twice gives identical text."""
        assert link_chunks(chunks) == link_chunks(chunks)

    @given(acyclic_chunk_sets())
    @settings(max_examples=100)
    def test_predecessors_come_first(self, chunks: list[ChunkDefinition]) -> None:
        """Invariant: every chunk is emitted after all chunks it links after."""
        position = {chunk.name: i for i, chunk in enumerate(order_chunks(chunks))}

        for chunk in chunks:
            for predecessor in chunk.link_after:
                assert position[predecessor] < position[chunk.name]

    @given(names.filter(lambda n: len(n) >= 2), st.data())
    @settings(max_examples=100)
    def test_cycles_always_fail(self, chunk_names: list[str], data: st.DataObject) -> None:
        """Invariant: a ring of link_after relations never links."""
        ring = data.draw(st.lists(st.sampled_from(chunk_names), min_size=2, unique=True))
        chunks = []
        for name in chunk_names:
            link_after = []
            if name in ring:
                link_after = [ring[ring.index(name) - 1]]
            chunks.append(text_chunk(name, link_after=link_after))

        with pytest.raises(ChunkCycleError) as exc_info:
            link_chunks(chunks)

        assert set(ring) <= set(exc_info.value.chunk_names)
