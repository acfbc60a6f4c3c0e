import pytest
from jose import jwt

from healthbook.core.config import Settings
from healthbook.core.exceptions import InvalidToken
from healthbook.core.security import (
    TokenClaims, TokenIssuer, UserRole, build_password_context, issue_token
)

SECRET = "test-secret"

def make_issuer(**overrides) -> TokenIssuer:
    return TokenIssuer(Settings(SECRET_KEY=SECRET, **overrides))


class TestPasswordHashing:

    def test_hash_uses_configured_cost(self):
        assert build_password_context(10).hash("pw123456").startswith("$2b$10$")
        assert build_password_context(4).hash("pw123456").startswith("$2b$04$")

    def test_hash_is_salted(self):
        context = build_password_context(4)
        assert context.hash("pw123456") != context.hash("pw123456")

    def test_verify_password(self):
        context = build_password_context(4)
        hashed = context.hash("pw123456")
        assert context.verify("pw123456", hashed)
        assert not context.verify("pw1234567", hashed)


class TestTokenIssuer:

    def test_sign_and_verify(self):
        issuer = make_issuer()
        token = issue_token(issuer, 7, "a@x.com", UserRole.PATIENT)

        claims = issuer.verify(token)
        assert claims.sub == "7"
        assert claims.user_id == 7
        assert claims.email == "a@x.com"
        assert claims.role == UserRole.PATIENT
        assert claims.is_patient and not claims.is_doctor

    def test_no_expiry_by_default(self):
        issuer = make_issuer()
        token = issuer.sign(TokenClaims(sub="1", email="a@x.com", role=UserRole.DOCTOR))

        payload = jwt.get_unverified_claims(token)
        assert "exp" not in payload
        assert issuer.verify(token).exp is None

    def test_expiry_when_configured(self):
        issuer = make_issuer(ACCESS_TOKEN_EXPIRE_MINUTES=15)
        token = issuer.sign(TokenClaims(sub="1", email="a@x.com", role=UserRole.DOCTOR))

        assert issuer.verify(token).exp is not None

    def test_expired_token_rejected(self):
        issuer = make_issuer(ACCESS_TOKEN_EXPIRE_MINUTES=-1)
        token = issuer.sign(TokenClaims(sub="1", email="a@x.com", role=UserRole.DOCTOR))

        with pytest.raises(InvalidToken):
            issuer.verify(token)

    def test_wrong_secret_rejected(self):
        token = make_issuer().sign(TokenClaims(sub="1", email="a@x.com", role=UserRole.PATIENT))
        other = TokenIssuer(Settings(SECRET_KEY="another-secret"))

        with pytest.raises(InvalidToken):
            other.verify(token)

    def test_garbage_rejected(self):
        with pytest.raises(InvalidToken):
            make_issuer().verify("not-a-jwt")

    def test_unknown_role_rejected(self):
        token = jwt.encode({"sub": "1", "email": "a@x.com", "role": "admin"}, SECRET, algorithm="HS256")

        with pytest.raises(InvalidToken):
            make_issuer().verify(token)

    def test_missing_claims_rejected(self):
        token = jwt.encode({"sub": "1"}, SECRET, algorithm="HS256")

        with pytest.raises(InvalidToken):
            make_issuer().verify(token)

    def test_signing_is_deterministic_without_expiry(self):
        issuer = make_issuer()
        claims = TokenClaims(sub="3", email="doc@x.com", role=UserRole.DOCTOR)

        assert issuer.sign(claims) == issuer.sign(claims)

    def test_non_numeric_subject_rejected(self):
        token = jwt.encode({"sub": "abc", "email": "a@x.com", "role": "patient"}, SECRET, algorithm="HS256")

        with pytest.raises(InvalidToken):
            make_issuer().verify(token)
