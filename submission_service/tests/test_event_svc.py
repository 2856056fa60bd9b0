"""
赛事：新增、全量更新、关闭幂等、live 过滤
"""
import pytest

from submission_service.errors import NotFoundError, ValidationError
from submission_service.models import EventStatus
from submission_service.services.event_svc import (
    add_event,
    close_event,
    get_event,
    list_events,
    list_live_events,
    update_event,
)


def test_add_event_is_open_with_generated_id():
    ev = add_event("Hack", "online", "2024-01-01", "2024-01-02", "logo.png")
    assert ev.id == 1
    assert ev.status == EventStatus.OPEN
    assert (ev.title, ev.event_type, ev.start_date, ev.end_date, ev.logo) == (
        "Hack", "online", "2024-01-01", "2024-01-02", "logo.png"
    )
    assert get_event(ev.id) == ev


def test_add_event_without_end_date():
    ev = add_event("Hack", "online", "2024-01-01", None, "logo.png")
    assert get_event(ev.id).end_date is None


def test_add_event_requires_title():
    with pytest.raises(ValidationError):
        add_event(None, "online", "2024-01-01", None, "logo.png")


def test_update_round_trip_in_any_status():
    ev = add_event("Hack", "online", "2024-01-01", "2024-01-02", "logo.png")
    close_event(ev.id)
    upd = update_event(ev.id, "Hack 2", "onsite", "2024-02-01", "2024-02-03", "logo2.png")
    assert (upd.title, upd.event_type, upd.start_date, upd.end_date, upd.logo) == (
        "Hack 2", "onsite", "2024-02-01", "2024-02-03", "logo2.png"
    )
    # update never reopens
    assert upd.status == EventStatus.CLOSED
    assert get_event(ev.id) == upd


def test_update_missing_event():
    with pytest.raises(NotFoundError):
        update_event(42, "x", "y", "2024-01-01", None, "z")


def test_close_twice_is_idempotent():
    ev = add_event("Hack", "online", "2024-01-01", None, "logo.png")
    first = close_event(ev.id)
    second = close_event(ev.id)
    assert first.status == EventStatus.CLOSED
    assert second.status == EventStatus.CLOSED
    assert get_event(ev.id).status == EventStatus.CLOSED


def test_close_missing_event():
    with pytest.raises(NotFoundError):
        close_event(7)


def test_list_and_live_filter():
    a = add_event("A", "online", "2024-01-01", None, "a.png")
    b = add_event("B", "online", "2024-01-01", None, "b.png")
    c = add_event("C", "online", "2024-01-01", None, "c.png")
    close_event(b.id)
    assert [e.id for e in list_events()] == [a.id, b.id, c.id]
    assert [e.id for e in list_live_events()] == [a.id, c.id]


def test_lists_empty():
    assert list_events() == []
    assert list_live_events() == []


def test_get_rejects_non_numeric_id():
    with pytest.raises(ValidationError):
        get_event("abc")


@pytest.mark.parametrize("bad_id", [2 ** 63, 2 ** 64, -(2 ** 63) - 1])
def test_get_rejects_id_outside_sqlite_range(bad_id):
    with pytest.raises(ValidationError):
        get_event(bad_id)


def test_get_accepts_largest_sqlite_id():
    with pytest.raises(NotFoundError):
        get_event(2 ** 63 - 1)


def test_get_rejects_fractional_id():
    add_event("Hack", "online", "2024-01-01", None, "logo.png")
    with pytest.raises(ValidationError):
        get_event(1.9)
    assert get_event(1.0).id == 1
