"""Tests for the JavaScript and TypeScript targets."""

from __future__ import annotations

from pathlib import Path

import pytest

from beamsplitter.core.config import GeneratorConfig
from beamsplitter.core.model import TypeModel, model_from_dict
from beamsplitter.core.patcher import MarkerMissingError
from beamsplitter.languages.javascript import (
    JavaScriptGenerator,
    TypeScriptGenerator,
    create_javascript_generator,
    create_typescript_generator,
)

MARKER = "<<MARKER>>"


def _generated(tmp_path: Path, name: str) -> str:
    return (tmp_path / name).read_text(encoding="utf-8")


def test_javascript_writes_three_artifacts(tmp_path: Path, sample_model: TypeModel) -> None:
    generator = JavaScriptGenerator(GeneratorConfig(output_dir=str(tmp_path)))

    result = generator.generate(sample_model)

    assert [p.name for p in result.paths] == [
        "jsbindings_generated.cpp",
        "jsenums_generated.cpp",
        "extensions_generated.js",
    ]
    assert all(not artifact.edited for artifact in result.artifacts)
    assert result.summary_lines()[0] == f"Generated {tmp_path / 'jsbindings_generated.cpp'}"


def test_struct_glue_lists_fields(tmp_path: Path, sample_model: TypeModel) -> None:
    JavaScriptGenerator(GeneratorConfig(output_dir=str(tmp_path))).generate(sample_model)

    bindings = _generated(tmp_path, "jsbindings_generated.cpp")
    assert bindings.startswith("// This file is generated by beamsplitter. Do not edit.\n")
    assert "EMSCRIPTEN_BINDINGS(jsbindings_generated) {\n" in bindings
    assert (
        'value_object<pkg::Foo>("pkg$Foo")\n'
        '    .field("x", &pkg::Foo::x)\n'
        "    ;\n"
    ) in bindings
    assert "enum_<" not in bindings
    assert bindings.endswith("}\n")


def test_enum_glue_lists_values(tmp_path: Path, sample_model: TypeModel) -> None:
    JavaScriptGenerator(GeneratorConfig(output_dir=str(tmp_path))).generate(sample_model)

    enums = _generated(tmp_path, "jsenums_generated.cpp")
    assert "EMSCRIPTEN_BINDINGS(jsenums_generated) {\n" in enums
    assert (
        'enum_<pkg::Bar>("pkg$Bar")\n'
        '    .value("A", pkg::Bar::A)\n'
        '    .value("B", pkg::Bar::B)\n'
        "    ;\n"
    ) in enums
    assert "value_object<" not in enums


def test_namespace_and_includes(tmp_path: Path, view_model: TypeModel) -> None:
    generator = create_javascript_generator(
        "View",
        {"output_dir": str(tmp_path), "includes": ["filament/View.h"]},
    )

    generator.generate(view_model)

    bindings = _generated(tmp_path, "jsbindings_generated.cpp")
    assert "#include <filament/View.h>\n" in bindings
    assert "using namespace filament;\n" in bindings
    assert "// Options to control the bloom effect\n" in bindings
    assert 'value_object<View::BloomOptions>("View$BloomOptions")' in bindings
    assert '.field("strength", &View::BloomOptions::strength)' in bindings

    enums = _generated(tmp_path, "jsenums_generated.cpp")
    assert 'enum_<View::QualityLevel>("View$QualityLevel")' in enums


def test_extension_script_spells_defaults(tmp_path: Path, view_model: TypeModel) -> None:
    create_javascript_generator("View", {"output_dir": str(tmp_path)}).generate(view_model)

    script = _generated(tmp_path, "extensions_generated.js")
    assert script.startswith(
        "// This file is generated by beamsplitter. Do not edit.\n\n"
        "Filament.loadGeneratedExtensions = function() {\n\n"
    )
    assert (
        "    Filament.View.prototype.setBloomOptionsDefaults = function(overrides) {\n"
        "        const options = {\n"
        "            strength: 0.1,\n"
        "            levels: 6,\n"
        "            quality: Filament.View$QualityLevel.LOW,\n"
        "            enabled: false,\n"
        "            tint: [1, 1, 1],\n"
        "        };\n"
        "        return Object.assign(options, overrides);\n"
        "    };\n"
    ) in script
    assert script.endswith("};\n")


def test_typescript_patches_declaration_file(tmp_path: Path, sample_model: TypeModel) -> None:
    declarations = tmp_path / "decl.d.ts"
    declarations.write_text(f"// keep\n// {MARKER}\n", encoding="utf-8")
    generator = TypeScriptGenerator(
        GeneratorConfig(output_dir=str(tmp_path), marker=MARKER, declaration_file="decl.d.ts")
    )

    result = generator.generate(sample_model)

    assert declarations.read_text(encoding="utf-8") == (
        "// keep\n"
        f"// {MARKER}\n"
        "export interface pkg$Foo {\n"
        "    x?: number;\n"
        "}\n"
        "\n"
        "export enum pkg$Bar {\n"
        "    A,\n"
        "    B,\n"
        "}\n"
        "\n"
    )
    assert result.summary_lines() == [f"Edited {declarations}"]


def test_typescript_documents_and_maps_types(tmp_path: Path, view_model: TypeModel) -> None:
    declarations = tmp_path / "filament.d.ts"
    declarations.write_text(f"// {MARKER}\n", encoding="utf-8")

    create_typescript_generator(
        "View", {"output_dir": str(tmp_path), "marker": MARKER}
    ).generate(view_model)

    text = declarations.read_text(encoding="utf-8")
    assert (
        "/**\n"
        " * Quality of a rendering pass\n"
        " */\n"
        "export enum View$QualityLevel {\n"
    ) in text
    assert (
        "    /**\n"
        "     * bloom's strength\n"
        "     */\n"
        "    strength?: number;\n"
    ) in text
    assert "    quality?: View$QualityLevel;\n" in text
    assert "    enabled?: boolean;\n" in text
    assert "    tint?: float3;\n" in text


def test_typescript_edit_is_idempotent_and_keeps_prefix(
    tmp_path: Path, view_model: TypeModel
) -> None:
    prefix = b"declare module 'x' {}\r\n\r\n// hand-written\r\n"
    declarations = tmp_path / "filament.d.ts"
    declarations.write_bytes(prefix + f"// {MARKER}\n// stale output\n".encode())
    generator = create_typescript_generator(
        "View", {"output_dir": str(tmp_path), "marker": MARKER}
    )

    generator.generate(view_model)
    first = declarations.read_bytes()
    generator.generate(view_model)

    assert declarations.read_bytes() == first
    assert first.startswith(prefix + f"// {MARKER}\n".encode())
    assert b"stale output" not in first


def test_typescript_without_marker_leaves_file_alone(
    tmp_path: Path, sample_model: TypeModel
) -> None:
    declarations = tmp_path / "filament.d.ts"
    declarations.write_text("interface Keep {}\n", encoding="utf-8")
    generator = TypeScriptGenerator(GeneratorConfig(output_dir=str(tmp_path), marker=MARKER))

    with pytest.raises(MarkerMissingError):
        generator.generate(sample_model)

    assert declarations.read_text(encoding="utf-8") == "interface Keep {}\n"


def test_typescript_enum_keeps_explicit_values(tmp_path: Path) -> None:
    model = model_from_dict(
        {
            "definitions": [
                {
                    "kind": "enum",
                    "name": "pkg::Flags",
                    "enumerators": [{"name": "A"}, {"name": "B", "value": 5}],
                }
            ]
        }
    )
    declarations = tmp_path / "filament.d.ts"
    declarations.write_text(f"// {MARKER}\n", encoding="utf-8")

    create_typescript_generator("", {"output_dir": str(tmp_path), "marker": MARKER}).generate(
        model
    )

    assert "export enum pkg$Flags {\n    A = 0,\n    B = 5,\n}\n" in declarations.read_text(
        encoding="utf-8"
    )
