from __future__ import annotations

from runlogger import Field, field
from runlogger.fields import build_payload, normalize_fields


class TestNormalizeFields:
    """Accepted field inputs"""

    def test_none_is_empty(self) -> None:
        """None means no fields"""
        assert normalize_fields(None) == ()

    def test_mapping(self) -> None:
        """Mappings keep their insertion order"""
        assert normalize_fields({"a": 1, "b": "x"}) == (Field("a", 1), Field("b", "x"))

    def test_pairs_and_fields_mixed(self) -> None:
        """Tuples and Field objects may be mixed"""
        fields = normalize_fields([("a", 1), field("b", 2)])
        assert fields == (Field("a", 1), Field("b", 2))

    def test_keys_coerced_to_str(self) -> None:
        """Keys are converted to strings"""
        assert normalize_fields([(7, "seven")]) == (Field("7", "seven"),)


class TestBuildPayload:
    """Payload assembly"""

    def test_last_duplicate_wins(self) -> None:
        """A repeated key keeps its last value"""
        payload = build_payload([Field("code", 400), Field("path", "/x"), Field("code", 500)])
        assert payload == {"code": 500, "path": "/x"}

    def test_message_key_is_renamed(self) -> None:
        """A message field becomes _message_"""
        payload = build_payload([Field("message", "user text")])
        assert payload == {"_message_": "user text"}
        assert "message" not in payload

    def test_empty(self) -> None:
        """No fields build an empty payload"""
        assert build_payload([]) == {}
