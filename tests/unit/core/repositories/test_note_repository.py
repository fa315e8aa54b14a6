"""NoteRepository against a real SQLite database."""

from datetime import datetime, timedelta, timezone

from src.notethread.core.models import Note
from src.notethread.core.repositories.note_repository import NoteRepository


def _note_data(user, title="Note", **extra):
    data = {"title": title, "body": "body", "author": user.username, "owner_id": user.id}
    data.update(extra)
    return data


async def test_create_and_get_scoped_by_owner(db_session, make_user):
    alice = await make_user("alice")
    bob = await make_user("bob")
    repo = NoteRepository(db_session)

    note = await repo.create_note(_note_data(alice, "Groceries"))
    await db_session.commit()

    assert note.id is not None
    found = await repo.get_by_id_and_user(note.id, alice.id)
    assert found is not None and found.title == "Groceries"
    assert await repo.get_by_id_and_user(note.id, bob.id) is None


async def test_list_user_notes_only_owner_newest_first(db_session, make_user):
    alice = await make_user("alice")
    bob = await make_user("bob")
    repo = NoteRepository(db_session)
    base = datetime(2024, 1, 1, tzinfo=timezone.utc)

    await repo.create_note(_note_data(alice, "old", created_at=base))
    await repo.create_note(_note_data(alice, "new", created_at=base + timedelta(hours=1)))
    await repo.create_note(_note_data(bob, "bob's"))
    await db_session.commit()

    notes = await repo.list_user_notes(alice.id)
    assert [n.title for n in notes] == ["new", "old"]
    assert all(n.owner_id == alice.id for n in notes)


async def test_update_note_applies_fields(db_session, make_user):
    alice = await make_user("alice")
    bob = await make_user("bob")
    repo = NoteRepository(db_session)
    note = await repo.create_note(_note_data(alice, "before"))
    await db_session.commit()

    assert await repo.update_note(note.id, bob.id, {"title": "hijacked"}) is None

    updated = await repo.update_note(note.id, alice.id, {"title": "after"})
    await db_session.commit()
    assert updated.title == "after"
    assert updated.body == "body"


async def test_delete_note(db_session, make_user):
    alice = await make_user("alice")
    repo = NoteRepository(db_session)
    note = await repo.create_note(_note_data(alice))
    await db_session.commit()

    await repo.delete_note(note)
    await db_session.commit()

    assert await repo.get_by_id_and_user(note.id, alice.id) is None
    assert await db_session.get(Note, note.id) is None
