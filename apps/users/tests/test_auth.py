from datetime import datetime, timedelta, timezone

import jwt
from django.conf import settings
from django.test import RequestFactory, TestCase

from apps.users.auth import CallerIdentity, JWTBearer, identity_from_payload
from apps.users.jwt_auth import create_access_token, decode_token
from apps.users.models import User


class JWTTest(TestCase):
    def setUp(self):
        self.user = User.objects.create(
            email="a@b.com", password="bcrypt_sha256$placeholder", first_name="A", last_name="B",
        )
        self.factory = RequestFactory()
        self.guard = JWTBearer()

    def authenticate(self, token):
        request = self.factory.get("/api/tasks", HTTP_AUTHORIZATION=f"Bearer {token}")
        return self.guard.authenticate(request, token)

    def test_token_round_trips_identity(self):
        caller = self.authenticate(create_access_token(self.user))
        self.assertEqual(caller, CallerIdentity(id=self.user.id, email="a@b.com", first_name="A", last_name="B"))

    def test_expired_token(self):
        payload = {
            "sub": str(self.user.id),
            "email": "a@b.com",
            "firstName": "A",
            "lastName": "B",
            "type": "access",
            "exp": datetime.now(timezone.utc) - timedelta(minutes=1),
        }
        token = jwt.encode(payload, settings.JWT_SECRET, algorithm=settings.JWT_ALGORITHM)
        self.assertIsNone(decode_token(token))
        self.assertIsNone(self.authenticate(token))

    def test_wrong_signature(self):
        token = jwt.encode({"sub": str(self.user.id), "type": "access"}, "other-secret", algorithm="HS256")
        self.assertIsNone(self.authenticate(token))

    def test_garbage_token(self):
        self.assertIsNone(self.authenticate("not.a.token"))

    def test_payload_must_be_access_token_with_numeric_subject(self):
        base = {"sub": "1", "email": "a@b.com", "firstName": "A", "lastName": "B", "type": "access"}
        self.assertIsNotNone(identity_from_payload(base))
        self.assertIsNone(identity_from_payload({**base, "type": "refresh"}))
        self.assertIsNone(identity_from_payload({**base, "sub": "abc"}))
        self.assertIsNone(identity_from_payload({k: v for k, v in base.items() if k != "email"}))
