"""Tests for the section template engine and dispatcher."""

from __future__ import annotations

import io

import pytest

from beamsplitter.core.dispatch import Artifact, SectionDispatcher
from beamsplitter.core.model import DefinitionKind, TypeModel
from beamsplitter.core.templates import TemplateEngine, TemplateError


@pytest.fixture
def engine() -> TemplateEngine:
    engine = TemplateEngine(globals={"prefix": "ns$"})
    engine.add_template("struct", "struct {{ prefix }}{{ definition.name }}\n")
    engine.add_template("enum", "enum {{ definition.name }}\n")
    engine.add_template("header", "// begin {{ title }}\n")
    return engine


def test_render_section_binds_definition_and_globals(
    engine: TemplateEngine, sample_model: TypeModel
) -> None:
    text = engine.render_section("struct", sample_model.get("pkg::Foo"))

    assert text == "struct ns$pkg::Foo\n"


def test_missing_section_raises(engine: TemplateEngine) -> None:
    assert not engine.template_exists("union")

    with pytest.raises(TemplateError, match="not found"):
        engine.render_section("union")


def test_undefined_attribute_raises_with_definition_name(
    engine: TemplateEngine, sample_model: TypeModel
) -> None:
    engine.add_template("broken", "{{ definition.enumerators }}")

    with pytest.raises(TemplateError, match="pkg::Foo"):
        engine.render_section("broken", sample_model.get("pkg::Foo"))


def test_filters_are_registered() -> None:
    engine = TemplateEngine(filters={"shout": str.upper})
    engine.add_template("t", "{{ word | shout }}|{{ block | indent(2) }}|{{ doc | comment }}")

    text = engine.render_section("t", word="a", block="x\n\ny", doc="doc\n")

    assert text == "A|  x\n\n  y|// doc\n//"


def test_dispatcher_skips_kinds_without_section(
    engine: TemplateEngine, sample_model: TypeModel
) -> None:
    artifact = Artifact("out.txt", sections={DefinitionKind.ENUM: "enum"})
    dispatcher = SectionDispatcher(engine)
    out = io.StringIO()

    count = dispatcher.render_all(artifact, sample_model, out)

    assert count == 1
    assert out.getvalue() == "enum pkg::Bar\n"
    assert dispatcher.render(artifact, sample_model.get("pkg::Foo")) is None


def test_dispatcher_keeps_model_order_and_artifact_context(
    engine: TemplateEngine, sample_model: TypeModel
) -> None:
    artifact = Artifact(
        "out.txt",
        sections={DefinitionKind.STRUCT: "struct", DefinitionKind.ENUM: "enum"},
        header="header",
        context={"title": "bindings"},
    )
    dispatcher = SectionDispatcher(engine)
    out = io.StringIO()

    dispatcher.render_all(artifact, sample_model, out)

    assert dispatcher.render_header(artifact) == "// begin bindings\n"
    assert dispatcher.render_footer(artifact) == ""
    assert out.getvalue() == "struct ns$pkg::Foo\nenum pkg::Bar\n"
    assert not artifact.merge_in_place
