import unittest
import uuid
from datetime import timedelta

from jose import jwt

from backend.app.auth.errors import VerificationFailure, VerificationReason
from backend.app.auth.tokens import TokenService
from backend.app.models.JWTAuthToken import SessionClaims
from backend.app.models.Role import Role
from backend.app.models.User import UserResponse
from helpers import FakeClock

SECRET = "unit-test-secret-0123456789abcdefghijkl"


class TestTokenService(unittest.TestCase):

    def setUp(self):
        self.clock = FakeClock()
        self.service = TokenService(
            secret=SECRET,
            issuer="SafeScribeAPI",
            audience="SafeScribeClients",
            expires_minutes=60,
            clock=self.clock,
        )
        self.identity = UserResponse(id=uuid.uuid4(), username="joao", role=Role.EDITOR)

    def _claims(self, **overrides):
        now = int(self.clock.now.timestamp())
        claims = {
            "sub": str(self.identity.id),
            "unique_name": "joao",
            "role": "Editor",
            "jti": str(uuid.uuid4()),
            "iss": "SafeScribeAPI",
            "aud": "SafeScribeClients",
            "iat": now,
            "exp": now + 600,
        }
        claims.update(overrides)
        return {k: v for k, v in claims.items() if v is not None}

    def _sign(self, claims, secret=SECRET):
        return jwt.encode(claims, secret, algorithm="HS256")

    def assertFailure(self, result, reason):
        self.assertIsInstance(result, VerificationFailure)
        self.assertEqual(result.reason, reason)

    def test_mint_then_verify_round_trip(self):
        token, expires_at = self.service.mint_token(self.identity)
        claims = self.service.verify(token)

        self.assertIsInstance(claims, SessionClaims)
        self.assertEqual(claims.sub, str(self.identity.id))
        self.assertEqual(claims.username, "joao")
        self.assertEqual(claims.role, Role.EDITOR)
        self.assertEqual(claims.exp, int(expires_at.timestamp()))
        self.assertEqual(jwt.get_unverified_claims(token)["jti"], claims.jti)

    def test_token_is_three_part_jws_with_registered_claims(self):
        token, _ = self.service.mint_token(self.identity)
        self.assertEqual(token.count("."), 2)
        self.assertEqual(jwt.get_unverified_header(token)["alg"], "HS256")
        raw = jwt.get_unverified_claims(token)
        for claim in ("sub", "unique_name", "role", "jti", "iss", "aud", "iat", "exp"):
            self.assertIn(claim, raw)

    def test_expiry_uses_configured_minutes(self):
        _, expires_at = self.service.mint_token(self.identity)
        self.assertEqual(expires_at, self.clock.now + timedelta(minutes=60))

    def test_every_mint_gets_a_fresh_token_id(self):
        ids = {self.service.verify(self.service.mint_token(self.identity)[0]).jti for _ in range(20)}
        self.assertEqual(len(ids), 20)

    def test_token_valid_until_one_second_before_expiry(self):
        token, expires_at = self.service.mint_token(self.identity)
        self.clock.now = expires_at - timedelta(seconds=1)
        self.assertIsInstance(self.service.verify(token), SessionClaims)

    def test_token_expired_exactly_at_expiry(self):
        token, expires_at = self.service.mint_token(self.identity)
        self.clock.now = expires_at
        self.assertFailure(self.service.verify(token), VerificationReason.EXPIRED)

    def test_exp_equal_to_now_is_expired(self):
        now = int(self.clock.now.timestamp())
        token = self._sign(self._claims(iat=now - 30, exp=now))
        self.assertFailure(self.service.verify(token), VerificationReason.EXPIRED)

    def test_issued_in_the_future_is_rejected(self):
        now = int(self.clock.now.timestamp())
        token = self._sign(self._claims(iat=now + 30, exp=now + 600))
        self.assertFailure(self.service.verify(token), VerificationReason.NOT_YET_VALID)

    def test_garbage_is_malformed(self):
        self.assertFailure(self.service.verify("not-a-token"), VerificationReason.MALFORMED)
        self.assertFailure(self.service.verify("a.b.c"), VerificationReason.MALFORMED)

    def test_other_secret_is_bad_signature(self):
        token = self._sign(self._claims(), secret="some-other-secret-value-0123456789")
        self.assertFailure(self.service.verify(token), VerificationReason.BAD_SIGNATURE)

    def test_tampered_payload_is_bad_signature(self):
        token, _ = self.service.mint_token(self.identity)
        header, _, signature = token.split(".")
        forged_payload = self._sign(self._claims(role="Admin")).split(".")[1]
        self.assertFailure(
            self.service.verify(f"{header}.{forged_payload}.{signature}"),
            VerificationReason.BAD_SIGNATURE,
        )

    def test_unexpected_algorithm_is_rejected(self):
        token = jwt.encode(self._claims(), SECRET, algorithm="HS512")
        self.assertFailure(self.service.verify(token), VerificationReason.BAD_SIGNATURE)

    def test_wrong_issuer(self):
        token = self._sign(self._claims(iss="someone-else"))
        self.assertFailure(self.service.verify(token), VerificationReason.WRONG_ISSUER)

    def test_wrong_audience(self):
        token = self._sign(self._claims(aud="another-app"))
        self.assertFailure(self.service.verify(token), VerificationReason.WRONG_AUDIENCE)

    def test_issuer_checked_before_expiry(self):
        now = int(self.clock.now.timestamp())
        token = self._sign(self._claims(iss="someone-else", iat=now - 100, exp=now - 50))
        self.assertFailure(self.service.verify(token), VerificationReason.WRONG_ISSUER)

    def test_unknown_role_is_malformed(self):
        token = self._sign(self._claims(role="SuperUser"))
        self.assertFailure(self.service.verify(token), VerificationReason.MALFORMED)

    def test_missing_lifetime_claims_are_malformed(self):
        claims = self._claims()
        del claims["exp"]
        self.assertFailure(self.service.verify(self._sign(claims)), VerificationReason.MALFORMED)

    def test_missing_subject_is_malformed(self):
        claims = self._claims()
        del claims["sub"]
        self.assertFailure(self.service.verify(self._sign(claims)), VerificationReason.MALFORMED)

    def test_token_without_jti_still_verifies(self):
        claims = self._claims()
        del claims["jti"]
        result = self.service.verify(self._sign(claims))
        self.assertIsInstance(result, SessionClaims)
        self.assertIsNone(result.jti)


if __name__ == "__main__":
    unittest.main()
