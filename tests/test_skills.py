import pytest

from config.config import parse_skill_options
from utils.skills import decode_skills, encode_skills, skill_label, unknown_skills


def test_round_trip_keeps_order():
    assert decode_skills(encode_skills(["php", "react"])) == ["php", "react"]
    assert decode_skills(encode_skills(["react", "php"])) == ["react", "php"]


def test_encoded_form_is_json_array():
    assert encode_skills(["php", "mysql"]) == '["php", "mysql"]'


def test_decode_empty_column():
    assert decode_skills(None) == []
    assert decode_skills("") == []


def test_decode_rejects_non_array():
    with pytest.raises(ValueError):
        decode_skills('{"php": true}')


def test_labels_and_unknown_tokens():
    vocabulary = {"php": "PHP", "react": "React"}
    assert skill_label("php", vocabulary) == "PHP"
    assert skill_label("cobol", vocabulary) == "cobol"
    assert unknown_skills(["php", "cobol"], vocabulary) == ["cobol"]


def test_parse_skill_options():
    options = parse_skill_options("php:PHP, react:React,go")
    assert list(options) == ["php", "react", "go"]
    assert options["react"] == "React"
    assert options["go"] == "go"
