"""Field derivation applied to post payloads before they reach storage.

Both functions are pure: they take plain records (field name to value
mappings) and return new records, leaving their input untouched.

Create records are flat, e.g. ``{"title": ..., "author": {"id": 1}}``.
Update records wrap the changed fields, e.g.
``{"where": {"id": 1}, "data": {"draft": False}}``.
"""
from datetime import datetime
from typing import Any, Mapping

from app.services.slug import slugify


def _utcnow() -> datetime:
    return datetime.utcnow()


def prepare_create(payload: Mapping[str, Any]) -> dict[str, Any]:
    """Return a copy of ``payload`` with ``slug`` derived from ``title``.

    A caller-supplied slug is overwritten. A missing or ``None`` title is
    treated as the empty string.
    """
    prepared = dict(payload)
    prepared["slug"] = slugify(payload.get("title") or "")
    return prepared


def prepare_update(payload: Mapping[str, Any]) -> dict[str, Any]:
    """Return a copy of ``payload``, stamping timestamps on publish.

    When ``data["draft"]`` is the boolean ``False`` the post is being
    published, so ``created_at`` and ``updated_at`` are both set to the
    current time, replacing any caller values. Any other ``draft`` value,
    falsy or not, leaves ``data`` as it was.

    The slug is not recomputed here even if ``title`` changes.
    """
    prepared = dict(payload)
    if is_publish(payload):
        now = _utcnow()
        prepared["data"] = {**payload["data"], "created_at": now, "updated_at": now}
    return prepared


def is_publish(payload: Mapping[str, Any]) -> bool:
    """Whether an update record explicitly marks the post as published."""
    return (payload.get("data") or {}).get("draft") is False
