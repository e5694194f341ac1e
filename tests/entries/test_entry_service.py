import pytest

from src.class_journal.class_journal.core.exceptions import NotFoundError, ValidationError
from src.class_journal.class_journal.entries.service import EntryService

from tests.fakes import InMemoryEntries


@pytest.fixture
def entry_service() -> EntryService:
    return EntryService(InMemoryEntries())


def test_create_and_list_newest_first(entry_service):
    entry_service.create_entry(name="Собрание", date="2026-10-01", note="ауд. 101")
    entry_service.create_entry(name="Зачёт")

    entries = entry_service.list_entries()

    assert [e.name for e in entries] == ["Зачёт", "Собрание"]
    assert entries[1].updated_at is not None


def test_update_replaces_fields(entry_service):
    created = entry_service.create_entry(name="Собрание")

    updated = entry_service.update_entry(created.entry_id, name="Собрание группы", note="перенесено")

    assert (updated.name, updated.note) == ("Собрание группы", "перенесено")


def test_update_and_delete_missing_raise_not_found(entry_service):
    with pytest.raises(NotFoundError):
        entry_service.update_entry(9, name="x")
    with pytest.raises(NotFoundError):
        entry_service.delete_entry(9)


def test_name_is_required(entry_service):
    with pytest.raises(ValidationError):
        entry_service.create_entry(name="  ")
