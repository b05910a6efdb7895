from __future__ import annotations

from dataclasses import dataclass

import pytest

from mattermost_client.core.deserialization import TypeToken, convert, decode_json, decode_text
from mattermost_client.core.errors import ApiError, MattermostDeserializationError


@dataclass(slots=True, frozen=True)
class Channel:
    id: str
    name: str
    team_id: str = ""


def test_decode_json_accepts_bytes():
    assert decode_json(b'{"a": [1, 2]}') == {"a": [1, 2]}


def test_decode_json_maps_parse_failure():
    with pytest.raises(MattermostDeserializationError, match="not valid JSON") as info:
        decode_json(b"<html>oops</html>", http_status=502)
    assert info.value.http_status == 502
    assert isinstance(info.value.__cause__, ValueError)


def test_decode_text_uses_charset_and_falls_back_on_unknown_encoding():
    assert decode_text("é".encode("latin-1"), charset="latin-1") == "é"
    assert decode_text("é".encode("utf-8"), charset="no-such-charset") == "é"
    assert decode_text(b"ok", charset=None) == "ok"


def test_convert_builds_dataclass_and_ignores_unknown_fields():
    channel = convert({"id": "c1", "name": "town-square", "extra": 1}, Channel)
    assert channel == Channel(id="c1", name="town-square")


def test_convert_generic_alias():
    token = TypeToken(list[Channel])
    channels = convert([{"id": "c1", "name": "a"}, {"id": "c2", "name": "b"}], token.type)
    assert [channel.id for channel in channels] == ["c1", "c2"]


def test_convert_rejects_mismatched_shape():
    with pytest.raises(MattermostDeserializationError, match="Channel"):
        convert({"id": "c1"}, Channel)


def test_convert_rejects_non_string_map_values():
    with pytest.raises(MattermostDeserializationError):
        convert({"status": 1}, dict[str, str])


def test_api_error_requires_distinguishing_fields():
    with pytest.raises(MattermostDeserializationError):
        convert({"id": "u1", "username": "alice"}, ApiError)


def test_type_token_repr_names_type():
    assert repr(TypeToken(dict[str, int])) == "TypeToken(dict[str, int])"
