import uuid

import pytest
from pydantic import ValidationError

from src.notethread.core.schemas.auth import RegisterRequest
from src.notethread.core.schemas.comments import CommentSort
from src.notethread.core.schemas.common import PageMeta
from src.notethread.core.schemas.notes import NoteCreate, NoteUpdate


def test_note_create_ignores_owner_fields():
    req = NoteCreate(title="t", body="b", owner_id=str(uuid.uuid4()), author="mallory")
    assert req.model_dump() == {"title": "t", "body": "b"}


def test_note_create_title_max_length():
    with pytest.raises(ValidationError):
        NoteCreate(title="x" * 201)


def test_note_update_tracks_only_supplied_fields():
    assert NoteUpdate(body="new").model_dump(exclude_unset=True) == {"body": "new"}
    assert NoteUpdate(title=None).model_dump(exclude_unset=True) == {"title": None}


@pytest.mark.parametrize("username", ["ab", "has space", "semi;colon", "x" * 51])
def test_register_rejects_bad_usernames(username):
    with pytest.raises(ValidationError):
        RegisterRequest(username=username, email="a@example.com", password="password123")


def test_register_accepts_dash_and_underscore():
    req = RegisterRequest(username="a_b-c", email="a@example.com", password="password123")
    assert req.username == "a_b-c"


def test_register_rejects_short_password_and_bad_email():
    with pytest.raises(ValidationError):
        RegisterRequest(username="alice", email="a@example.com", password="short")
    with pytest.raises(ValidationError):
        RegisterRequest(username="alice", email="not-an-email", password="password123")


@pytest.mark.parametrize(
    "total,limit,pages",
    [(0, 10, 0), (1, 10, 1), (10, 10, 1), (21, 10, 3), (5, 2, 3)],
)
def test_page_meta_total_pages(total, limit, pages):
    meta = PageMeta.create(total=total, page=1, limit=limit)
    assert meta.total_pages == pages


def test_page_meta_serializes_camel_case():
    dumped = PageMeta.create(total=3, page=2, limit=2).model_dump(by_alias=True)
    assert dumped == {"page": 2, "limit": 2, "total": 3, "totalPages": 2}


def test_comment_sort_values():
    assert CommentSort("latest") is CommentSort.LATEST
    assert CommentSort("oldest") is CommentSort.OLDEST
    with pytest.raises(ValueError):
        CommentSort("newest")
