import enum
import re

import pytest

from auraetools.errors import (
    AllowRegexViolation,
    InvalidError,
    MaximumError,
    MinimumError,
    RequiredError,
)
from auraetools.validators import (
    DOMAIN_NAME_LABEL_REGEX,
    UNIT_CHARACTERS,
    UNRESERVED_URL_PATH_SEGMENT_REGEX,
    allow_regex,
    maximum_length,
    maximum_value,
    minimum_length,
    minimum_value,
    required,
    required_not_empty,
    valid_enum,
    valid_json,
    valid_url,
)


class MyTestEnum(enum.IntEnum):
    FIRST = 10
    SECOND = 11


def test_allow_regex():
    assert allow_regex("my-name", DOMAIN_NAME_LABEL_REGEX, "test", None) is None
    with pytest.raises(AllowRegexViolation) as info:
        allow_regex("my*name", DOMAIN_NAME_LABEL_REGEX, "test", None)
    assert info.value.field == "test"
    assert info.value.pattern == DOMAIN_NAME_LABEL_REGEX.pattern


@pytest.mark.parametrize("label", ["-abc", "abc-", "", "a" * 64, "abc\n"])
def test_domain_label_rejects(label):
    with pytest.raises(AllowRegexViolation):
        allow_regex(label, DOMAIN_NAME_LABEL_REGEX, "label")


def test_domain_label_accepts_max_length():
    assert allow_regex("a" * 63, DOMAIN_NAME_LABEL_REGEX, "label") is None


def test_url_path_segment_regex():
    assert allow_regex("a_b.c~d-e", UNRESERVED_URL_PATH_SEGMENT_REGEX, "seg") is None
    with pytest.raises(AllowRegexViolation):
        allow_regex("a/b", UNRESERVED_URL_PATH_SEGMENT_REGEX, "seg")


def test_allow_regex_with_string_pattern_and_parent():
    with pytest.raises(AllowRegexViolation) as info:
        allow_regex("xyz", r"^a", "name", "cell")
    assert info.value.field == "cell.name"
    assert info.value.pattern == r"^a"


def test_allow_regex_matches_anywhere():
    assert allow_regex("xxaxx", re.compile("a"), "name") is None


def test_maximum_length():
    value = [1, 2]
    with pytest.raises(MaximumError) as info:
        maximum_length(value, len(value) - 1, "test", "test", None)
    assert info.value.maximum == str(len(value) - 1)
    assert maximum_length(value, len(value), "test", "test", None) is None


def test_minimum_length():
    value = "123456"
    with pytest.raises(MinimumError) as info:
        minimum_length(value, len(value) + 1, "test", "test", None)
    assert info.value.minimum == str(len(value) + 1)
    assert minimum_length(value, len(value) - 1, "test", "test", None) is None


def test_length_counts_characters():
    assert maximum_length("héllo", 5, UNIT_CHARACTERS, "name") is None
    with pytest.raises(MaximumError) as info:
        maximum_length("héllo", 4, UNIT_CHARACTERS, "name", "cell")
    assert info.value.field == "cell.name"
    assert info.value.units == UNIT_CHARACTERS


def test_maximum_value():
    assert maximum_value(1, 2, "test", "test", None) is None
    with pytest.raises(MaximumError) as info:
        maximum_value(2, 1, "test", "test", None)
    assert info.value.maximum == "1"
    assert info.value.units == "test"


def test_minimum_value():
    with pytest.raises(MinimumError) as info:
        minimum_value(1, 2, "test", "test", None)
    assert info.value.minimum == "2"
    assert minimum_value(2, 1, "test", "test", None) is None


def test_value_bounds_are_inclusive():
    assert maximum_value(5, 5, "u", "f") is None
    assert minimum_value(5, 5, "u", "f") is None


def test_required():
    assert required("hi", "test", None) == "hi"
    with pytest.raises(RequiredError) as info:
        required(None, "test", None)
    assert info.value.field == "test"


def test_required_keeps_falsy_values():
    assert required(0, "test") == 0
    assert required("", "test") == ""


def test_required_not_empty():
    assert required_not_empty("hi", "test", None) == "hi"
    with pytest.raises(RequiredError):
        required_not_empty(None, "test", None)
    with pytest.raises(RequiredError) as info:
        required_not_empty("", "test", "parent")
    assert info.value.field == "parent.test"


def test_required_not_empty_collections():
    assert required_not_empty([1], "items") == [1]
    with pytest.raises(RequiredError):
        required_not_empty([], "items")


def test_valid_enum():
    assert valid_enum(MyTestEnum, 10, "test", None) is MyTestEnum.FIRST
    with pytest.raises(InvalidError) as info:
        valid_enum(MyTestEnum, 12312, "test", None)
    assert info.value.field == "test"


def test_valid_json():
    assert valid_json("[]", "test", None) == []
    with pytest.raises(InvalidError):
        valid_json("1: 1", "test", None)


def test_valid_json_object():
    assert valid_json('{"a": [1, 2]}', "doc") == {"a": [1, 2]}


def test_valid_url_accepts():
    parts = valid_url("https://example.com:8443/path?q=1", "url")
    assert parts.scheme == "https"
    assert parts.hostname == "example.com"
    assert parts.port == 8443
    assert parts.path == "/path"


def test_valid_url_non_special_scheme():
    assert valid_url("mailto:someone@example.com", "url").scheme == "mailto"


@pytest.mark.parametrize(
    "text",
    ["", "example.com/path", "http://", "http://exa mple.com", "http://example.com:abc", "1http://x"],
)
def test_valid_url_rejects(text):
    with pytest.raises(InvalidError) as info:
        valid_url(text, "url", "endpoint")
    assert info.value.field == "endpoint.url"