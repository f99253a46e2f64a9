import pytest
from jose import jwt

from config import ApplicationConfig
from src.adapter.services.jwt_token_service import JwtTokenService
from src.app.services.token_service import TokenSigningError


class NoSecretConfig(ApplicationConfig):
    JWT_SECRET = ""


@pytest.fixture
def token_service():
    return JwtTokenService(ApplicationConfig)


def _decode(token, secret):
    return jwt.decode(
        token, secret, algorithms=["HS256"], issuer=ApplicationConfig.JWT_ISSUER
    )


def test_access_token_carries_claims_and_one_hour_expiry(token_service):
    token = token_service.generate_access_token({"sub": "42", "role": "customer"})

    payload = _decode(token, ApplicationConfig.JWT_SECRET)
    assert payload["sub"] == "42"
    assert payload["role"] == "customer"
    assert payload["exp"] - payload["iat"] == 3600
    assert "jti" not in payload


def test_refresh_token_embeds_record_id_and_one_year_expiry(token_service):
    token = token_service.generate_refresh_token(
        {"sub": "42", "role": "customer", "id": "7"}
    )

    payload = _decode(token, ApplicationConfig.REFRESH_TOKEN_SECRET)
    assert payload["sub"] == "42"
    assert payload["id"] == "7"
    assert payload["jti"] == "7"
    assert payload["exp"] - payload["iat"] == 60 * 60 * 24 * 365


def test_tokens_signed_with_separate_secrets(token_service):
    refresh_token = token_service.generate_refresh_token(
        {"sub": "42", "role": "customer", "id": "7"}
    )
    access_token = token_service.generate_access_token({"sub": "42", "role": "customer"})

    assert token_service.decode_refresh_token(refresh_token)["jti"] == "7"
    assert token_service.decode_refresh_token(access_token) is None


def test_refresh_token_requires_record_id(token_service):
    with pytest.raises(TokenSigningError):
        token_service.generate_refresh_token({"sub": "42", "role": "customer"})


def test_missing_secret_raises_signing_error():
    token_service = JwtTokenService(NoSecretConfig)

    with pytest.raises(TokenSigningError):
        token_service.generate_access_token({"sub": "42", "role": "customer"})
