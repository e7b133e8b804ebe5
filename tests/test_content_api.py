"""Tests for owner-scoped content endpoints."""
from datetime import datetime, timedelta, timezone
from uuid import uuid4

import pytest

from brain.shared.services.content_service import ContentService
from brain.shared.core.exceptions import AuthorizationError, ContentNotFoundError
from brain.shared.models import ContentType
from brain.shared.repositories.content_repository import ContentRepository
from brain.shared.services.token_service import TokenService

from tests.conftest import TEST_SECRET


ARTICLE = {
    'link': 'https://example.com/second-brain',
    'type': 'article',
    'title': 'How to build a second brain',
    'tags': ['productivity', 'notes'],
}


async def add_content(client, api_prefix, headers, **overrides):
    payload = {**ARTICLE, **overrides}
    response = await client.post(f'{api_prefix}/content', json=payload, headers=headers)
    assert response.status_code == 200, response.text
    return response.json()['content']


class TestCreateContent:
    """Tests for POST /content."""

    @pytest.mark.asyncio
    async def test_create(self, client, api_prefix, signed_in):
        headers = await signed_in()
        content = await add_content(client, api_prefix, headers)

        assert content['title'] == ARTICLE['title']
        assert content['type'] == 'article'
        assert content['link'] == ARTICLE['link']
        assert content['tags'] == ['notes', 'productivity']
        assert content['id']
        assert content['created_at']

    @pytest.mark.asyncio
    async def test_forged_user_id_is_ignored(self, client, api_prefix, signed_in):
        """Test the owner always comes from the token, never the body."""
        alice = await signed_in('alice@example.com')
        bob = await signed_in('bob@example.com')
        bob_content = await add_content(client, api_prefix, bob)

        forged = await add_content(client, api_prefix, alice, user_id=bob_content['user_id'])
        assert forged['user_id'] != bob_content['user_id']

        bob_list = (await client.get(f'{api_prefix}/contents', headers=bob)).json()['contents']
        assert [c['id'] for c in bob_list] == [bob_content['id']]

    @pytest.mark.asyncio
    async def test_tags_are_normalized_and_shared(self, client, api_prefix, signed_in):
        alice = await signed_in('alice@example.com')
        bob = await signed_in('bob@example.com')

        first = await add_content(client, api_prefix, alice, tags=[' music ', 'music', '', 'jazz'])
        second = await add_content(client, api_prefix, bob, tags=['music'])

        assert first['tags'] == ['jazz', 'music']
        assert second['tags'] == ['music']

    @pytest.mark.asyncio
    @pytest.mark.parametrize('overrides', [
        {'type': 'podcast'},
        {'link': 'not a url'},
        {'link': 'javascript:alert(1)'},
        {'link': 'ftp://files.example.com/notes.txt'},
        {'link': '/relative/path'},
        {'title': ''},
        {'tags': ['x' * 101]},
    ])
    async def test_invalid_payload_is_400(self, client, api_prefix, signed_in, overrides):
        headers = await signed_in()
        response = await client.post(
            f'{api_prefix}/content', json={**ARTICLE, **overrides}, headers=headers
        )
        assert response.status_code == 400

    @pytest.mark.asyncio
    @pytest.mark.parametrize('link', [
        'https://example.com',
        'http://Example.com/notes?q=1#top',
    ])
    async def test_link_is_stored_as_sent(self, client, api_prefix, signed_in, link):
        headers = await signed_in()
        created = await add_content(client, api_prefix, headers, link=link)
        assert created['link'] == link

        listed = (await client.get(f'{api_prefix}/contents', headers=headers)).json()['contents']
        assert [c['link'] for c in listed] == [link]

    @pytest.mark.asyncio
    async def test_requires_token(self, client, api_prefix):
        response = await client.post(f'{api_prefix}/content', json=ARTICLE)
        assert response.status_code == 401


class TestListContents:
    """Tests for GET /contents."""

    @pytest.mark.asyncio
    async def test_lists_only_own_content(self, client, api_prefix, signed_in):
        alice = await signed_in('alice@example.com')
        bob = await signed_in('bob@example.com')

        video = await add_content(client, api_prefix, alice, type='video', title='Talk')
        article = await add_content(client, api_prefix, alice)
        await add_content(client, api_prefix, bob, title="Bob's link")

        response = await client.get(f'{api_prefix}/contents', headers=alice)
        assert response.status_code == 200
        contents = response.json()['contents']
        assert {c['id'] for c in contents} == {video['id'], article['id']}
        assert all(c['user_id'] == video['user_id'] for c in contents)

    @pytest.mark.asyncio
    async def test_newest_first(self, client, api_prefix, signed_in, session_factory):
        headers = await signed_in()
        user_id = TokenService(TEST_SECRET).verify(headers['Authorization'])
        saved_at = datetime(2026, 1, 1, tzinfo=timezone.utc)

        async with session_factory() as session:
            repo = ContentRepository(session)
            ids = {}
            # Insert order differs from created_at order
            for title, days in [('middle', 1), ('oldest', 0), ('newest', 2)]:
                content = await repo.create(
                    user_id=user_id,
                    title=title,
                    type=ContentType.ARTICLE,
                    link=f'https://example.com/{title}',
                    tags=[],
                    created_at=saved_at + timedelta(days=days),
                )
                ids[title] = str(content.id)
            await session.commit()

        response = await client.get(f'{api_prefix}/contents', headers=headers)
        assert response.status_code == 200
        assert [c['id'] for c in response.json()['contents']] == [
            ids['newest'], ids['middle'], ids['oldest'],
        ]


class TestDeleteContent:
    """Tests for DELETE /delete-content/{id}."""

    @pytest.mark.asyncio
    async def test_delete_own(self, client, api_prefix, signed_in):
        headers = await signed_in()
        content = await add_content(client, api_prefix, headers)

        response = await client.delete(
            f"{api_prefix}/delete-content/{content['id']}", headers=headers
        )
        assert response.status_code == 200
        assert response.json()['message'] == 'Content deleted successfully'

        contents = (await client.get(f'{api_prefix}/contents', headers=headers)).json()['contents']
        assert contents == []

    @pytest.mark.asyncio
    async def test_delete_foreign_is_403_and_keeps_content(self, client, api_prefix, signed_in):
        alice = await signed_in('alice@example.com')
        bob = await signed_in('bob@example.com')
        content = await add_content(client, api_prefix, bob)

        response = await client.delete(
            f"{api_prefix}/delete-content/{content['id']}", headers=alice
        )
        assert response.status_code == 403
        assert response.json()['error']['code'] == 'AUTHORIZATION_ERROR'

        bob_list = (await client.get(f'{api_prefix}/contents', headers=bob)).json()['contents']
        assert [c['id'] for c in bob_list] == [content['id']]

    @pytest.mark.asyncio
    @pytest.mark.parametrize('content_id', [str(uuid4()), 'not-a-uuid'])
    async def test_delete_missing_is_404(self, client, api_prefix, signed_in, content_id):
        headers = await signed_in()
        response = await client.delete(f'{api_prefix}/delete-content/{content_id}', headers=headers)
        assert response.status_code == 404
        assert response.json()['error']['code'] == 'NOT_FOUND'


class TestContentService:
    """Service-level ownership checks."""

    @pytest.mark.asyncio
    async def test_delete_own_checks_owner(self, session, user_factory):
        owner = await user_factory()
        stranger = await user_factory()
        service = ContentService(session)
        content = await service.create_content(
            owner.id,
            link='https://example.com/a',
            type=ContentType.IMAGE,
            title='A picture',
            tags=[],
        )

        with pytest.raises(AuthorizationError):
            await service.delete_own(stranger.id, str(content.id))
        assert await service.list_own(owner.id) == [content]

        await service.delete_own(owner.id, str(content.id))
        assert await service.list_own(owner.id) == []

        with pytest.raises(ContentNotFoundError):
            await service.delete_own(owner.id, str(content.id))
