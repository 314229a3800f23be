"""
Tests for extracting and repairing model-written JSON
"""
import json

from launchgen_api.utils.json_repair import extract_json_from_content, repair_json


def test_extract_prefers_json_fence():
    content = 'Here you go:\n```json\n{"a": 1}\n```\nand ```{"b": 2}```'
    assert extract_json_from_content(content) == '{"a": 1}'


def test_extract_falls_back_to_any_fence():
    assert extract_json_from_content('```\n{"a": 1}\n```') == '{"a": 1}'


def test_extract_raw_text():
    assert extract_json_from_content('  {"a": 1}  ') == '{"a": 1}'


def test_repair_trailing_commas():
    assert json.loads(repair_json('{"a": [1, 2,], "b": 3,}')) == {"a": [1, 2], "b": 3}


def test_repair_unquoted_keys():
    assert json.loads(repair_json('{name: "Acme", logo: ""}')) == {"name": "Acme", "logo": ""}


def test_repair_missing_comma_between_objects():
    repaired = repair_json('{"features": [{"title": "A"} {"title": "B"}]}')
    assert json.loads(repaired) == {"features": [{"title": "A"}, {"title": "B"}]}


def test_repair_truncated_tail_is_closed():
    truncated = '{"hero": {"headline": "Hi"}, "features": [{"title": "A"}, {"title": "B'
    repaired = json.loads(repair_json(truncated))
    assert repaired["hero"] == {"headline": "Hi"}
    assert repaired["features"] == [{"title": "A"}]


def test_repair_leaves_valid_json_parseable():
    original = {"hero": {"headline": "Hi"}, "features": [{"title": "A"}]}
    assert json.loads(repair_json(json.dumps(original))) == original
