from __future__ import annotations

from swiftfetch.client import build_url, flatten_headers, merge_headers


def test_build_url_concatenates_base_without_normalizing() -> None:
    assert build_url("https://h", "/a") == "https://h/a"
    assert build_url("https://h/", "/a") == "https://h//a"


def test_build_url_without_base_uses_url_as_is() -> None:
    assert build_url(None, "https://other.test/x") == "https://other.test/x"


def test_build_url_appends_query_with_question_mark() -> None:
    assert build_url("https://h", "/a", {"x": 1}) == "https://h/a?x=1"


def test_build_url_uses_ampersand_when_query_present() -> None:
    assert build_url("https://h", "/a?y=2", {"x": 1}) == "https://h/a?y=2&x=1"


def test_build_url_empty_params_leave_url_untouched() -> None:
    assert build_url("https://h", "/a", {}) == "https://h/a"
    assert build_url("https://h", "/a", None) == "https://h/a"


def test_build_url_keeps_mapping_order_and_stringifies_values() -> None:
    url = build_url(None, "/s", {"b": "two", "a": 1, "c": 1.5})
    assert url == "/s?b=two&a=1&c=1.5"


def test_build_url_keeps_repeated_keys_from_pairs() -> None:
    assert build_url(None, "/s", [("tag", "x"), ("tag", "y")]) == "/s?tag=x&tag=y"


def test_build_url_encodes_reserved_characters() -> None:
    assert build_url(None, "/s", {"q": "a b&c"}) == "/s?q=a+b%26c"


def test_merge_headers_overrides_key_by_key() -> None:
    defaults = {"Accept": "text/plain", "X-Token": "t"}
    merged = merge_headers(defaults, {"Accept": "application/json"})
    assert merged == {"Accept": "application/json", "X-Token": "t"}
    assert defaults["Accept"] == "text/plain"


def test_merge_headers_is_case_sensitive() -> None:
    merged = merge_headers({"Accept": "a"}, {"accept": "b"})
    assert merged == {"Accept": "a", "accept": "b"}


def test_flatten_headers_last_value_wins() -> None:
    assert flatten_headers([("set-cookie", "a=1"), ("set-cookie", "b=2")]) == {"set-cookie": "b=2"}


def test_build_url_stringifies_floats_with_str() -> None:
    assert build_url(None, "/s", {"ratio": 1.0}) == "/s?ratio=1.0"
