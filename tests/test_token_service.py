"""Tests for brain.shared.services.token_service."""
from uuid import uuid4

import pytest

from brain.config.settings import Settings
from brain.shared.core.exceptions import ConfigurationError, InvalidTokenError
from brain.shared.services.token_service import TokenService
from brain.shared.utils.security import SecurityUtils


SECRET = 'token-service-secret-key-with-enough-length'
OTHER_SECRET = 'some-other-secret-key-with-enough-length'


@pytest.fixture
def tokens():
    return TokenService(SECRET)


class TestTokenService:
    """Tests for issuing and verifying session tokens."""

    def test_issue_then_verify_round_trip(self, tokens):
        """Test verify(issue(u)) yields u."""
        user_id = uuid4()
        assert tokens.verify(tokens.issue(user_id)) == user_id

    def test_token_payload_carries_user_id(self, tokens):
        user_id = uuid4()
        payload = SecurityUtils.decode_access_token(tokens.issue(user_id), SECRET)
        assert payload == {'id': str(user_id)}

    def test_foreign_secret_rejected(self, tokens):
        """Test a token signed with a different secret is rejected."""
        foreign = TokenService(OTHER_SECRET).issue(uuid4())
        with pytest.raises(InvalidTokenError):
            tokens.verify(foreign)

    @pytest.mark.parametrize('token', ['', None, 'garbage', 'a.b.c'])
    def test_malformed_tokens_rejected(self, tokens, token):
        with pytest.raises(InvalidTokenError):
            tokens.verify(token)

    def test_missing_id_claim_rejected(self, tokens):
        token = SecurityUtils.create_access_token({'sub': str(uuid4())}, SECRET)
        with pytest.raises(InvalidTokenError, match='no user id'):
            tokens.verify(token)

    def test_non_string_id_claim_rejected(self, tokens):
        token = SecurityUtils.create_access_token({'id': 42}, SECRET)
        with pytest.raises(InvalidTokenError):
            tokens.verify(token)

    def test_non_uuid_id_claim_rejected(self, tokens):
        token = SecurityUtils.create_access_token({'id': 'not-a-uuid'}, SECRET)
        with pytest.raises(InvalidTokenError, match='not a UUID'):
            tokens.verify(token)

    def test_expiring_tokens(self):
        """Test tokens past their configured lifetime are rejected."""
        expired = TokenService(SECRET, expire_minutes=-1)
        with pytest.raises(InvalidTokenError, match='expired'):
            expired.verify(expired.issue(uuid4()))

        fresh = TokenService(SECRET, expire_minutes=60)
        user_id = uuid4()
        assert fresh.verify(fresh.issue(user_id)) == user_id

    @pytest.mark.parametrize('secret', ['', '   '])
    def test_empty_secret_is_configuration_error(self, secret):
        with pytest.raises(ConfigurationError) as exc_info:
            TokenService(secret)
        assert exc_info.value.status_code == 500
        assert exc_info.value.error_code == 'CONFIGURATION_ERROR'

    def test_from_settings(self):
        config = Settings(JWT_SECRET=SECRET, JWT_EXPIRE_MINUTES=15)
        service = TokenService.from_settings(config)
        assert service.algorithm == 'HS256'
        assert service.expires_delta is not None
        user_id = uuid4()
        assert TokenService(SECRET).verify(service.issue(user_id)) == user_id


class TestSettingsSecret:
    """Tests that the process refuses to load without a signing secret."""

    def test_blank_secret_fails_to_load(self):
        from pydantic import ValidationError

        with pytest.raises(ValidationError):
            Settings(JWT_SECRET='   ')

    def test_settings_are_frozen(self):
        from pydantic import ValidationError

        config = Settings(JWT_SECRET=SECRET)
        with pytest.raises(ValidationError):
            config.JWT_SECRET = OTHER_SECRET
