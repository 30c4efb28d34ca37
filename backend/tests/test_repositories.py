"""
Bookstore Backend — Repository Tests
======================================

What:  Repository[T] contract against a real (SQLite) session, plus commit
       fault handling against a mocked session.

What we test:
    ✅ find_all returns an empty list, not None, on an empty table
    ✅ create commits and assigns the generated id
    ✅ update replaces every column; a missing id returns False
    ✅ delete removes the row; save with nothing staged returns False
    ✅ commit faults roll back and propagate
"""

import pytest
from sqlalchemy.exc import OperationalError

from bookstore.models import Author, Book
from bookstore.repositories import AuthorRepository, BookRepository


class TestRepositoryReads:
    """find_all / find_by_id / does_exist."""

    @pytest.mark.asyncio
    async def test_find_all_empty_table_returns_empty_list(self, db_session):
        result = await AuthorRepository(db_session).find_all()
        assert result == []

    @pytest.mark.asyncio
    async def test_find_all_orders_by_id(self, db_session):
        repo = AuthorRepository(db_session)
        await repo.create(Author(first_name="Ursula", last_name="Le Guin"))
        await repo.create(Author(first_name="Isaac", last_name="Asimov"))

        authors = await repo.find_all()

        assert [a.last_name for a in authors] == ["Le Guin", "Asimov"]
        assert authors[0].id < authors[1].id

    @pytest.mark.asyncio
    async def test_find_by_id_missing_returns_none(self, db_session):
        assert await BookRepository(db_session).find_by_id(999) is None

    @pytest.mark.asyncio
    async def test_does_exist(self, db_session):
        repo = BookRepository(db_session)
        book = Book(title="Solaris", year=1961)
        await repo.create(book)

        assert await repo.does_exist(book.id) is True
        assert await repo.does_exist(book.id + 1) is False


class TestRepositoryWrites:
    """create / update / delete / save."""

    @pytest.mark.asyncio
    async def test_create_assigns_id_and_returns_true(self, db_session):
        author = Author(first_name="Frank", last_name="Herbert")

        assert await AuthorRepository(db_session).create(author) is True
        assert author.id is not None and author.id >= 1

    @pytest.mark.asyncio
    async def test_update_replaces_all_columns(self, db_session, session_factory):
        repo = BookRepository(db_session)
        book = Book(title="Dune", year=1965, isbn="0441013597", summary="Spice")
        await repo.create(book)

        # Detached replacement, as built from an update DTO: unset fields become NULL
        replacement = Book(id=book.id, title="Dune Messiah", year=1969)
        assert await repo.update(replacement) is True

        async with session_factory() as fresh:
            stored = await BookRepository(fresh).find_by_id(book.id)
        assert stored.title == "Dune Messiah"
        assert stored.year == 1969
        assert stored.isbn is None
        assert stored.summary is None

    @pytest.mark.asyncio
    async def test_update_with_unchanged_values_still_succeeds(self, db_session):
        repo = AuthorRepository(db_session)
        author = Author(first_name="Frank", last_name="Herbert")
        await repo.create(author)

        same = Author(id=author.id, first_name="Frank", last_name="Herbert")
        assert await repo.update(same) is True

    @pytest.mark.asyncio
    async def test_update_missing_row_returns_false(self, db_session):
        repo = AuthorRepository(db_session)

        result = await repo.update(Author(id=42, first_name="No", last_name="Body"))

        assert result is False
        assert await repo.find_all() == []

    @pytest.mark.asyncio
    async def test_delete_removes_row(self, db_session):
        repo = AuthorRepository(db_session)
        author = Author(first_name="Frank", last_name="Herbert")
        await repo.create(author)

        assert await repo.delete(author) is True
        assert await repo.does_exist(author.id) is False

    @pytest.mark.asyncio
    async def test_save_with_nothing_staged_returns_false(self, db_session):
        assert await AuthorRepository(db_session).save() is False


class TestRepositoryFaults:
    """Persistence faults propagate after a rollback."""

    @pytest.mark.asyncio
    async def test_commit_failure_rolls_back_and_raises(self, mock_db_session):
        mock_db_session.commit.side_effect = OperationalError("COMMIT", {}, Exception("disk full"))

        with pytest.raises(OperationalError):
            await AuthorRepository(mock_db_session).create(
                Author(first_name="Frank", last_name="Herbert")
            )

        mock_db_session.add.assert_called_once()
        mock_db_session.rollback.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_save_counts_staged_changes(self, mock_db_session):
        mock_db_session.dirty = [object()]

        assert await BookRepository(mock_db_session).save() is True
        mock_db_session.commit.assert_awaited_once()

    @pytest.mark.asyncio
    @pytest.mark.parametrize("entity_id", [0, -1, 2**31, 10**20])
    async def test_unstorable_ids_never_reach_the_database(self, mock_db_session, entity_id):
        repo = AuthorRepository(mock_db_session)

        assert await repo.find_by_id(entity_id) is None
        assert await repo.does_exist(entity_id) is False
        mock_db_session.get.assert_not_awaited()
        mock_db_session.execute.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_largest_storable_id_is_queried(self, db_session):
        assert await AuthorRepository(db_session).find_by_id(2**31 - 1) is None
