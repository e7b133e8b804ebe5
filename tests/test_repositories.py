"""Tests for the generic repository operations."""
from uuid import uuid4

import pytest

from brain.shared.repositories.tag_repository import TagRepository
from brain.shared.repositories.user_repository import UserRepository


class TestBaseRepository:

    @pytest.mark.asyncio
    async def test_get_count_delete(self, session, user_factory):
        alice = await user_factory('alice@example.com')
        await user_factory('bob@example.com')
        repo = UserRepository(session)

        assert await repo.get(alice.id) is alice
        assert await repo.get(uuid4()) is None
        assert await repo.count() == 2
        assert await repo.count({'username': 'alice@example.com'}) == 1

        assert await repo.delete(alice.id) is True
        assert await repo.delete(alice.id) is False
        assert await repo.get(alice.id) is None
        assert await repo.count() == 1

    @pytest.mark.asyncio
    async def test_unknown_filter_field_raises(self, session, user_factory):
        """A misspelled filter must not silently match every row."""
        await user_factory('alice@example.com')
        repo = UserRepository(session)

        with pytest.raises(ValueError, match='usernme'):
            await repo.count({'usernme': 'bob@example.com'})

    @pytest.mark.asyncio
    async def test_username_lookup(self, session, user_factory):
        user = await user_factory('alice@example.com')
        repo = UserRepository(session)

        assert await repo.get_by_username('alice@example.com') is user
        assert await repo.username_exists('alice@example.com') is True
        assert await repo.username_exists('bob@example.com') is False


class TestTagRepository:

    @pytest.mark.asyncio
    async def test_get_or_create_many_reuses_rows(self, session):
        repo = TagRepository(session)

        first = await repo.get_or_create_many(['music', 'jazz'])
        second = await repo.get_or_create_many(['music', 'rock'])

        assert [tag.title for tag in first] == ['jazz', 'music']
        assert [tag.title for tag in second] == ['music', 'rock']
        assert first[1].id == second[0].id
        assert await repo.count() == 3

    @pytest.mark.asyncio
    async def test_inserts_in_sorted_order(self, session, monkeypatch):
        """Test new titles are inserted alphabetically whatever order the request used."""
        repo = TagRepository(session)
        inserted = []
        insert = repo.insert_ignoring_conflicts

        async def recording_insert(conflict_columns, **values):
            inserted.append(values['title'])
            await insert(conflict_columns, **values)

        monkeypatch.setattr(repo, 'insert_ignoring_conflicts', recording_insert)

        tags = await repo.get_or_create_many(['rock', 'ambient', 'jazz'])

        assert inserted == ['ambient', 'jazz', 'rock']
        assert [tag.title for tag in tags] == ['ambient', 'jazz', 'rock']

    @pytest.mark.asyncio
    async def test_empty(self, session):
        assert await TagRepository(session).get_or_create_many([]) == []
