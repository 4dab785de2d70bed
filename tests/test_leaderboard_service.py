from __future__ import annotations

import pytest

from flowfield_scores.errors import ValidationError
from flowfield_scores.models import MapId
from flowfield_scores.services import decode_payload, parse_submission, top_scores_to_dict


@pytest.mark.parametrize(
    "payload, field",
    [
        ({"name": "ABC", "score": 1, "map": "clockback"}, "name"),
        ({"name": 12, "score": 1, "map": "clockback"}, "name"),
        ({"name": "AB", "score": "100", "map": "clockback"}, "score"),
        ({"name": "AB", "score": True, "map": "clockback"}, "score"),
        ({"name": "AB", "score": float("nan"), "map": "clockback"}, "score"),
        ({"name": "AB", "score": float("inf"), "map": "clockback"}, "score"),
        ({"name": "\U0001F600\U0001F600", "score": 1, "map": "clockback"}, "name"),
        ({"name": "AB", "score": 1, "map": "moon base"}, "map"),
        ({"name": "AB", "score": 1}, "map"),
    ],
)
def test_invalid_submission_is_rejected_and_not_stored(service, store, payload, field):
    with pytest.raises(ValidationError) as excinfo:
        service.submit_score(payload)

    assert field in excinfo.value.fields
    assert store.count() == 0


@pytest.mark.parametrize("payload", [None, [], "AB", 5])
def test_non_object_payload_is_rejected(service, store, payload):
    with pytest.raises(ValidationError) as excinfo:
        service.submit_score(payload)

    assert excinfo.value.fields == ["body"]
    assert store.count() == 0


def test_parse_submission_ignores_unknown_keys():
    submission = parse_submission({"name": "", "score": 3.5, "map": "curl valley", "cheat": True})

    assert submission.name == ""
    assert submission.score == 3.5
    assert submission.map is MapId.CURL_VALLEY


def test_submitted_score_appears_in_top_scores(service):
    service.submit_score({"name": "AB", "score": 100, "map": "dual vision"})

    top = service.fetch_top_scores()

    assert [(entry.name, entry.score) for entry in top[MapId.DUAL_VISION]] == [("AB", 100)]


def test_top_scores_are_truncated_to_five(service):
    for value in range(10, 80, 10):
        service.submit_score({"name": "AB", "score": value, "map": "curl valley"})

    top = service.fetch_top_scores()

    assert [entry.score for entry in top[MapId.CURL_VALLEY]] == [70, 60, 50, 40, 30]


def test_every_map_present_without_submissions(service):
    top = service.fetch_top_scores()

    assert list(top) == [MapId.DUAL_VISION, MapId.CLOCKBACK, MapId.CURL_VALLEY]
    assert all(entries == [] for entries in top.values())


def test_maps_are_isolated(service):
    service.submit_score({"name": "XY", "score": 9, "map": "clockback"})
    service.submit_score({"name": "ZZ", "score": 3, "map": "clockback"})

    top = service.fetch_top_scores()

    assert [entry.name for entry in top[MapId.CLOCKBACK]] == ["XY", "ZZ"]
    assert top[MapId.DUAL_VISION] == []
    assert top[MapId.CURL_VALLEY] == []


def test_consecutive_reads_are_identical(service):
    service.submit_score({"name": "AB", "score": 5, "map": "dual vision"})
    service.submit_score({"name": "CD", "score": 5, "map": "dual vision"})

    first = top_scores_to_dict(service.fetch_top_scores())
    second = top_scores_to_dict(service.fetch_top_scores())

    assert first == second
    assert [entry["name"] for entry in first["dual vision"]] == ["AB", "CD"]


def test_top_scores_to_dict_uses_map_names(service):
    service.submit_score({"name": "AB", "score": 12, "map": "clockback"})

    payload = top_scores_to_dict(service.fetch_top_scores())

    assert list(payload) == ["dual vision", "clockback", "curl valley"]
    assert payload["clockback"] == [{"name": "AB", "score": 12.0, "map": "clockback"}]


def test_name_limit_counts_utf16_units():
    assert parse_submission({"name": "\U0001F600", "score": 1, "map": "clockback"}).name == "\U0001F600"
    assert parse_submission({"name": "éé", "score": 1, "map": "clockback"}).name == "éé"


def test_decode_payload_accepts_bytes():
    assert decode_payload(b'{"name": "AB", "score": 1, "map": "clockback"}') == {
        "name": "AB",
        "score": 1,
        "map": "clockback",
    }


@pytest.mark.parametrize("raw", [b"", b"{not json", b"\x80\x81"])
def test_submit_raw_rejects_undecodable_body(service, store, raw):
    with pytest.raises(ValidationError) as excinfo:
        service.submit_raw(raw)

    assert excinfo.value.fields == ["body"]
    assert store.count() == 0


def test_submit_raw_stores_decoded_score(service, store):
    service.submit_raw(b'{"name": "AB", "score": 7, "map": "curl valley"}')

    assert store.count(MapId.CURL_VALLEY) == 1
