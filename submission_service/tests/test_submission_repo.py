"""
submission_repo：插入/更新/提交/查询，存储层约束翻译
"""
import pytest

from submission_service.db import get_conn
from submission_service.errors import DuplicateKeyError, NotFoundError, ValidationError
from submission_service.models import SubmissionStatus
from submission_service.repository import submission_repo


def _insert(conn, event_id, submit_by, name="Proj"):
    return submission_repo.insert(conn, event_id, name, "desc", None, "git://x", None, "video://x", submit_by)


def test_insert_reads_back_draft(participant, event):
    with get_conn() as conn:
        sub = submission_repo.insert(
            conn, event.id, "Proj", "desc", "thumb.png", "git://x", "https://demo", "video://x", "addr1"
        )
    assert sub.id == 1
    assert sub.status == SubmissionStatus.DRAFT
    assert (sub.event_id, sub.project_name, sub.description, sub.thumbnail) == (event.id, "Proj", "desc", "thumb.png")
    assert (sub.git_url, sub.live_demo_url, sub.video_demo_url, sub.submit_by) == (
        "git://x", "https://demo", "video://x", "addr1"
    )
    assert sub.created_at


def test_unique_index_rejects_second_row(participant, event):
    with get_conn() as conn:
        _insert(conn, event.id, "addr1")
        with pytest.raises(DuplicateKeyError):
            _insert(conn, event.id, "addr1", name="Other")


def test_foreign_keys_enforced(event):
    with get_conn() as conn:
        with pytest.raises(ValidationError):
            _insert(conn, event.id, "ghost")


def test_update_does_not_check_status(participant, event):
    with get_conn() as conn:
        sub = _insert(conn, event.id, "addr1")
        submission_repo.submit(conn, sub.id)
        upd = submission_repo.update(conn, sub.id, "New", "new desc", "", "git://y", "", "video://y")
    assert upd.project_name == "New"
    assert upd.status == SubmissionStatus.SUBMITTED
    assert upd.created_at == sub.created_at


def test_submit_twice_stays_submitted(participant, event):
    with get_conn() as conn:
        sub = _insert(conn, event.id, "addr1")
        assert submission_repo.submit(conn, sub.id).status == SubmissionStatus.SUBMITTED
        assert submission_repo.submit(conn, sub.id).status == SubmissionStatus.SUBMITTED


def test_submit_missing_row():
    with get_conn() as conn:
        with pytest.raises(NotFoundError):
            submission_repo.submit(conn, 99)


def test_get_by_user_and_event(participant, event):
    with get_conn() as conn:
        with pytest.raises(NotFoundError):
            submission_repo.get_by_user_and_event(conn, "addr1", event.id)
        assert submission_repo.find_by_user_and_event(conn, "addr1", event.id) is None
        sub = _insert(conn, event.id, "addr1")
        assert submission_repo.get_by_user_and_event(conn, "addr1", event.id) == sub


def test_list_all_and_by_event(participant, event):
    from submission_service.repository import event_repo, participant_repo
    with get_conn() as conn:
        participant_repo.register(conn, "addr2", "b@x.com")
        other = event_repo.add(conn, "Other", "online", "2024-03-01", None, "o.png")
        s1 = _insert(conn, event.id, "addr1")
        s2 = _insert(conn, other.id, "addr1")
        s3 = _insert(conn, event.id, "addr2")
        assert [s.id for s in submission_repo.list_all(conn)] == [s1.id, s2.id, s3.id]
        assert [s.id for s in submission_repo.list_by_event(conn, event.id)] == [s1.id, s3.id]
        assert submission_repo.list_by_event(conn, 999) == []
