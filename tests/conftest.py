from __future__ import annotations

import json
from pathlib import Path

import pytest

from beamsplitter.core.model import TypeModel, model_from_dict

SAMPLE_DOCUMENT = {
    "definitions": [
        {
            "kind": "struct",
            "name": "pkg::Foo",
            "fields": [{"name": "x", "type": "float"}],
        },
        {
            "kind": "enum",
            "name": "pkg::Bar",
            "enumerators": [{"name": "A", "value": 0}, {"name": "B", "value": 1}],
        },
    ]
}

VIEW_DOCUMENT = {
    "definitions": [
        {
            "kind": "enum",
            "name": "QualityLevel",
            "doc": "Quality of a rendering pass",
            "enumerators": [{"name": "LOW"}, {"name": "MEDIUM"}, {"name": "HIGH"}],
        },
        {
            "kind": "struct",
            "name": "BloomOptions",
            "doc": "Options to control the bloom effect",
            "fields": [
                {"name": "strength", "type": "float", "default": "0.1", "doc": "bloom's strength"},
                {"name": "levels", "type": "uint8_t", "default": "6"},
                {"name": "quality", "type": "QualityLevel", "default": "QualityLevel::LOW"},
                {"name": "enabled", "type": "bool", "default": "false"},
                {"name": "tint", "type": "math::float3", "default": "[1, 1, 1]"},
            ],
        },
    ]
}


@pytest.fixture
def sample_model() -> TypeModel:
    """One struct pkg::Foo and one enum pkg::Bar."""
    return model_from_dict(SAMPLE_DOCUMENT)


@pytest.fixture
def view_model() -> TypeModel:
    """Definitions named relative to a "View" namespace."""
    return model_from_dict(VIEW_DOCUMENT)


@pytest.fixture
def model_file(tmp_path: Path) -> Path:
    path = tmp_path / "definitions.json"
    path.write_text(json.dumps(SAMPLE_DOCUMENT), encoding="utf-8")
    return path
