"""Tests for the share link lifecycle and public resolution."""
import asyncio
from uuid import uuid4

import pytest
import pytest_asyncio
from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from brain.shared.core.exceptions import ShareLinkNotFoundError
from brain.shared.models import Base, ShareLink
from brain.shared.repositories.share_link_repository import ShareLinkRepository
from brain.shared.repositories.user_repository import UserRepository
from brain.shared.services.share_link_service import ShareLinkService

from tests.test_content_api import add_content


class TestShareLinkService:
    """Tests for enable / disable / resolve."""

    @pytest.mark.asyncio
    async def test_enable_is_idempotent(self, session, user_factory):
        user = await user_factory()
        service = ShareLinkService(session)

        first = await service.enable(user.id)
        second = await service.enable(user.id)

        assert first == second
        assert await ShareLinkRepository(session).count({'user_id': user.id}) == 1

    @pytest.mark.asyncio
    async def test_disable_then_enable_mints_new_token(self, session, user_factory):
        user = await user_factory()
        service = ShareLinkService(session)

        first = await service.enable(user.id)
        await service.disable(user.id)
        second = await service.enable(user.id)

        assert first != second
        with pytest.raises(ShareLinkNotFoundError):
            await service.resolve(first)

    @pytest.mark.asyncio
    async def test_disable_without_link_is_noop(self, session, user_factory):
        user = await user_factory()
        service = ShareLinkService(session)

        await service.disable(user.id)
        await service.disable(user.id)
        assert await ShareLinkRepository(session).get_by_user(user.id) is None

    @pytest.mark.asyncio
    async def test_set_sharing(self, session, user_factory):
        user = await user_factory()
        service = ShareLinkService(session)

        token = await service.set_sharing(user.id, True)
        assert token is not None
        assert await service.set_sharing(user.id, True) == token
        assert await service.set_sharing(user.id, False) is None
        assert await ShareLinkRepository(session).get_by_user(user.id) is None

    @pytest.mark.asyncio
    async def test_tokens_are_per_owner(self, session, user_factory):
        alice = await user_factory()
        bob = await user_factory()
        service = ShareLinkService(session)

        assert await service.enable(alice.id) != await service.enable(bob.id)

    @pytest.mark.asyncio
    async def test_resolve_unknown_token(self, session):
        with pytest.raises(ShareLinkNotFoundError):
            await ShareLinkService(session).resolve(uuid4().hex)

    @pytest.mark.asyncio
    async def test_resolve_link_with_missing_owner(self, session):
        """Test a link whose owner row is gone resolves like an unknown token."""
        session.add(ShareLink(hash='dangling', user_id=uuid4()))
        await session.flush()

        with pytest.raises(ShareLinkNotFoundError):
            await ShareLinkService(session).resolve('dangling')


class TestShareLinkRepository:
    """Tests for the conflict-tolerant create."""

    @pytest.mark.asyncio
    async def test_create_for_user_keeps_existing_link(self, session, user_factory):
        user = await user_factory()
        repo = ShareLinkRepository(session)

        created = await repo.create_for_user(user.id, 'first-token')
        raced = await repo.create_for_user(user.id, 'second-token')

        assert created.hash == raced.hash == 'first-token'
        assert await repo.count({'user_id': user.id}) == 1
        assert await repo.get_by_hash('second-token') is None

    @pytest.mark.asyncio
    async def test_delete_by_user_reports_result(self, session, user_factory):
        user = await user_factory()
        repo = ShareLinkRepository(session)

        assert await repo.delete_by_user(user.id) is False
        await repo.create_for_user(user.id, 'token')
        assert await repo.delete_by_user(user.id) is True


@pytest_asyncio.fixture
async def locking_session_factory(tmp_path):
    """
    Sessions on a SQLite database whose transactions take the write lock
    up front, so concurrent writers queue instead of failing with
    "database is locked".
    """
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'concurrent.db'}")

    @event.listens_for(engine.sync_engine, 'connect')
    def disable_driver_transactions(dbapi_connection, connection_record):
        dbapi_connection.isolation_level = None

    @event.listens_for(engine.sync_engine, 'begin')
    def begin_immediate(conn):
        conn.exec_driver_sql('BEGIN IMMEDIATE')

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield async_sessionmaker(bind=engine, class_=AsyncSession, expire_on_commit=False)
    await engine.dispose()


class TestConcurrentEnable:
    """N concurrent enable() calls for one owner."""

    @pytest.mark.asyncio
    async def test_concurrent_enable_leaves_one_link(self, locking_session_factory):
        async with locking_session_factory() as session:
            user = await UserRepository(session).create(username='c@example.com', password_hash='x')
            await session.commit()

        async def enable_once():
            async with locking_session_factory() as session:
                token = await ShareLinkService(session).enable(user.id)
                await session.commit()
                return token

        tokens = await asyncio.gather(*(enable_once() for _ in range(8)))

        assert len(set(tokens)) == 1
        async with locking_session_factory() as session:
            repo = ShareLinkRepository(session)
            assert await repo.count({'user_id': user.id}) == 1
            assert (await repo.get_by_user(user.id)).hash == tokens[0]


class TestShareApi:
    """Tests for POST /brain/share and GET /brain/{share_link}."""

    @pytest.mark.asyncio
    async def test_share_toggle(self, client, api_prefix, signed_in):
        headers = await signed_in()

        first = await client.post(f'{api_prefix}/brain/share', json={'share': True}, headers=headers)
        assert first.status_code == 200
        token = first.json()['token']
        assert 'disabled' not in first.json()

        again = await client.post(f'{api_prefix}/brain/share', json={'share': True}, headers=headers)
        assert again.json()['token'] == token

        off = await client.post(f'{api_prefix}/brain/share', json={'share': False}, headers=headers)
        assert off.status_code == 200
        assert off.json() == {'success': True, 'disabled': True}

        gone = await client.get(f'{api_prefix}/brain/{token}')
        assert gone.status_code == 404

    @pytest.mark.asyncio
    async def test_share_requires_token(self, client, api_prefix):
        response = await client.post(f'{api_prefix}/brain/share', json={'share': True})
        assert response.status_code == 401

    @pytest.mark.asyncio
    @pytest.mark.parametrize('payload', [{}, {'share': 'yes'}, {'share': 1}])
    async def test_share_flag_must_be_boolean(self, client, api_prefix, signed_in, payload):
        headers = await signed_in()
        response = await client.post(f'{api_prefix}/brain/share', json=payload, headers=headers)
        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_resolve_returns_exactly_owner_content(self, client, api_prefix, signed_in):
        alice = await signed_in('alice@example.com')
        bob = await signed_in('bob@example.com')
        mine = await add_content(client, api_prefix, alice, title='Mine')
        await add_content(client, api_prefix, bob, title='Not mine')

        token = (await client.post(
            f'{api_prefix}/brain/share', json={'share': True}, headers=alice
        )).json()['token']

        response = await client.get(f'{api_prefix}/brain/{token}')
        assert response.status_code == 200
        body = response.json()
        assert body['username'] == 'alice@example.com'
        assert [c['id'] for c in body['contents']] == [mine['id']]
        assert body['contents'][0]['tags'] == mine['tags']

    @pytest.mark.asyncio
    async def test_resolve_unknown_is_404(self, client, api_prefix):
        response = await client.get(f'{api_prefix}/brain/{uuid4().hex}')
        assert response.status_code == 404
        body = response.json()
        assert body['error']['code'] == 'NOT_FOUND'
        assert body['error']['message'] == 'Share link not found'
