"""Tests for post write normalization."""
from datetime import datetime

import pytest

from app.services import write_normalizer
from app.services.write_normalizer import is_publish, prepare_create, prepare_update


class TestPrepareCreate:
    """Test prepare_create()."""

    def test_derives_slug_from_title(self):
        result = prepare_create({"title": "Hello, World!"})
        assert result["slug"] == "hello-world"
        assert result["title"] == "Hello, World!"

    def test_empty_title_yields_empty_slug(self):
        assert prepare_create({"title": ""})["slug"] == ""

    def test_missing_or_none_title(self):
        assert prepare_create({})["slug"] == ""
        assert prepare_create({"title": None})["slug"] == ""

    def test_overwrites_caller_slug(self):
        result = prepare_create({"title": "Real Title", "slug": "custom"})
        assert result["slug"] == "real-title"

    def test_passes_other_fields_through(self):
        payload = {
            "title": "Post",
            "content": "Body",
            "draft": True,
            "author": {"id": 1},
            "tags": [{"id": 2}],
        }
        result = prepare_create(payload)
        assert {k: v for k, v in result.items() if k != "slug"} == payload

    def test_does_not_mutate_input(self):
        payload = {"title": "Post"}
        prepare_create(payload)
        assert payload == {"title": "Post"}


class TestPrepareUpdate:
    """Test prepare_update()."""

    def test_publish_stamps_equal_timestamps(self):
        before = datetime.utcnow()
        result = prepare_update({"where": {"id": 1}, "data": {"draft": False}})
        data = result["data"]
        assert data["created_at"] == data["updated_at"]
        assert data["created_at"] >= before
        assert data["draft"] is False

    def test_publish_overwrites_caller_timestamps(self):
        stale = datetime(2000, 1, 1)
        result = prepare_update(
            {"data": {"draft": False, "created_at": stale, "updated_at": stale}}
        )
        assert result["data"]["created_at"] > stale
        assert result["data"]["updated_at"] > stale

    def test_reads_clock_once(self, monkeypatch):
        calls = []

        def fake_now():
            calls.append(1)
            return datetime(2026, 10, 17, 12, 0, 0)

        monkeypatch.setattr(write_normalizer, "_utcnow", fake_now)
        result = prepare_update({"data": {"draft": False}})
        assert len(calls) == 1
        assert result["data"]["created_at"] == datetime(2026, 10, 17, 12, 0, 0)

    @pytest.mark.parametrize(
        "payload",
        [
            {"where": {"id": 1}, "data": {"draft": True}},
            {"where": {"id": 1}, "data": {"title": "x"}},
            {"where": {"id": 1}, "data": {"draft": None}},
            {"where": {"id": 1}, "data": {"draft": 0}},
            {"where": {"id": 1}, "data": {"draft": ""}},
            {"where": {"id": 1}, "data": {}},
            {"where": {"id": 1}},
        ],
    )
    def test_non_publish_updates_are_unchanged(self, payload):
        assert prepare_update(payload) == payload

    def test_title_change_keeps_slug_untouched(self):
        result = prepare_update({"data": {"title": "Renamed"}})
        assert "slug" not in result["data"]

    def test_does_not_mutate_input(self):
        payload = {"where": {"id": 1}, "data": {"draft": False}}
        prepare_update(payload)
        assert payload == {"where": {"id": 1}, "data": {"draft": False}}

    def test_sequential_publishes_are_monotonic(self):
        payload = {"data": {"draft": False}}
        stamps = [prepare_update(payload)["data"]["updated_at"] for _ in range(5)]
        assert stamps == sorted(stamps)


def test_is_publish():
    assert is_publish({"data": {"draft": False}})
    assert not is_publish({"data": {"draft": True}})
    assert not is_publish({"data": {"draft": 0}})
    assert not is_publish({"data": {}})
    assert not is_publish({})
