"""Entities returned by the repositories, plus the flat response shape used by routes."""
from __future__ import annotations

from dataclasses import asdict, dataclass
from enum import IntEnum
from sqlite3 import Row
from typing import Any, Optional, Type

from .errors import ServiceError


class EventStatus(IntEnum):
    OPEN = 1
    CLOSED = 2


class SubmissionStatus(IntEnum):
    DRAFT = 1
    SUBMITTED = 2


# 默认值即失败响应中的“零值”实体
@dataclass
class Participant:
    near_address: str = ""
    email: str = ""
    first_name: Optional[str] = ""
    last_name: Optional[str] = ""
    is_student: int = 0
    country: Optional[str] = ""
    git_handler: Optional[str] = ""
    linkedin_handler: Optional[str] = ""
    twitter_handler: Optional[str] = ""

    @classmethod
    def from_row(cls, r: Row) -> "Participant":
        return cls(
            near_address=r["near_address"],
            email=r["email"],
            first_name=r["first_name"],
            last_name=r["last_name"],
            is_student=int(r["is_student"] or 0),
            country=r["country"],
            git_handler=r["git_handler"],
            linkedin_handler=r["linkedin_handler"],
            twitter_handler=r["twitter_handler"],
        )


@dataclass
class Event:
    id: int = 0
    title: str = ""
    event_type: str = ""
    start_date: str = ""
    end_date: Optional[str] = ""
    logo: str = ""
    status: int = 0

    @classmethod
    def from_row(cls, r: Row) -> "Event":
        return cls(
            id=int(r["id"]),
            title=r["title"],
            event_type=r["type"],
            start_date=r["start_date"],
            end_date=r["end_date"],
            logo=r["logo"],
            status=EventStatus(r["status"]),
        )

    @property
    def is_open(self) -> bool:
        return self.status == EventStatus.OPEN


@dataclass
class Submission:
    id: int = 0
    event_id: int = 0
    project_name: str = ""
    description: str = ""
    thumbnail: Optional[str] = ""
    git_url: str = ""
    live_demo_url: Optional[str] = ""
    video_demo_url: str = ""
    submit_by: str = ""
    status: int = 0
    created_at: str = ""

    @classmethod
    def from_row(cls, r: Row) -> "Submission":
        return cls(
            id=int(r["id"]),
            event_id=int(r["event_id"]),
            project_name=r["project_name"],
            description=r["description"],
            thumbnail=r["thumbnail"],
            git_url=r["git_url"],
            live_demo_url=r["live_demo_url"],
            video_demo_url=r["video_demo_url"],
            submit_by=r["submit_by"],
            status=SubmissionStatus(r["status"]),
            created_at=str(r["created_at"] or ""),
        )

    @property
    def is_draft(self) -> bool:
        return self.status == SubmissionStatus.DRAFT


# ---------------- boundary shape ----------------

def ok_response(entity) -> dict[str, Any]:
    return {**asdict(entity), "success": True, "err_msg": "", "err_kind": ""}


def error_response(entity_cls: Type, err: ServiceError) -> dict[str, Any]:
    return {**asdict(entity_cls()), "success": False, "err_msg": str(err), "err_kind": err.kind}


def ok_list_response(entities) -> dict[str, Any]:
    return {"success": True, "err_msg": "", "err_kind": "", "items": [asdict(e) for e in entities]}


def error_list_response(err: ServiceError) -> dict[str, Any]:
    return {"success": False, "err_msg": str(err), "err_kind": err.kind, "items": []}


def ok_result() -> dict[str, Any]:
    return {"success": True, "err_msg": "", "err_kind": ""}


def error_result(msg: str, kind: str = "error") -> dict[str, Any]:
    return {"success": False, "err_msg": msg, "err_kind": kind}
