"""
Unit Tests for the Schema Package.

Verifies the blog data schema loads at import, is a valid Draft 7
schema, and that the loader reports missing or broken schema files.
"""
import json

import pytest
from jsonschema import Draft7Validator

import schema.schema as schema_module
from schema import BLOG_DATA_SCHEMA, get_blog_data_schema


def test_schema_loaded_at_import():
    assert BLOG_DATA_SCHEMA["$schema"] == "http://json-schema.org/draft-07/schema#"
    assert BLOG_DATA_SCHEMA["required"] == ["blogs", "categories"]


def test_schema_is_valid_draft7():
    Draft7Validator.check_schema(BLOG_DATA_SCHEMA)


def test_get_blog_data_schema_returns_constant():
    assert get_blog_data_schema() is BLOG_DATA_SCHEMA


def test_block_kinds_in_schema():
    block = BLOG_DATA_SCHEMA["definitions"]["block"]

    assert block["properties"]["type"]["enum"] == ["paragraph", "heading", "list", "code"]


def test_load_schema_missing_file(tmp_path, monkeypatch):
    monkeypatch.setattr(schema_module, "SCHEMA_DIR", tmp_path)

    with pytest.raises(FileNotFoundError, match="Schema file not found"):
        schema_module._load_schema("missing.json")


def test_load_schema_invalid_json(tmp_path, monkeypatch):
    (tmp_path / "broken.json").write_text("{not json", encoding="utf-8")
    monkeypatch.setattr(schema_module, "SCHEMA_DIR", tmp_path)

    with pytest.raises(json.JSONDecodeError, match="Invalid JSON in schema file broken.json"):
        schema_module._load_schema("broken.json")
