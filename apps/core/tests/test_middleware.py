import json

from django.http import JsonResponse
from django.test import RequestFactory, SimpleTestCase

from apps.core.middleware import REDACTED, RequestLoggingMiddleware, redact


class RedactTest(SimpleTestCase):
    def test_redacts_nested_passwords(self):
        data = {"email": "a@b.com", "password": "secret1", "items": [{"password": "x"}]}
        self.assertEqual(
            redact(data),
            {"email": "a@b.com", "password": REDACTED, "items": [{"password": REDACTED}]},
        )

    def test_leaves_scalars_alone(self):
        self.assertEqual(redact("password"), "password")
        self.assertEqual(redact([1, 2]), [1, 2])


class RequestLoggingMiddlewareTest(SimpleTestCase):
    def setUp(self):
        self.factory = RequestFactory()
        self.middleware = RequestLoggingMiddleware(lambda request: JsonResponse({"id": 1}, status=201))

    def test_logs_request_without_password(self):
        request = self.factory.post(
            "/api/users",
            data=json.dumps({"email": "a@b.com", "password": "secret1"}),
            content_type="application/json",
        )
        with self.assertLogs("apps.core.middleware", level="INFO") as logs:
            response = self.middleware(request)

        self.assertEqual(response.status_code, 201)
        output = "\n".join(logs.output)
        self.assertIn("POST /api/users", output)
        self.assertIn("a@b.com", output)
        self.assertNotIn("secret1", output)
        self.assertIn("Success - POST /api/users => 201", output)

    def test_logs_client_errors_as_warnings(self):
        middleware = RequestLoggingMiddleware(lambda request: JsonResponse({"detail": "nope"}, status=404))
        with self.assertLogs("apps.core.middleware", level="WARNING") as logs:
            middleware(self.factory.get("/api/users/9"))
        self.assertIn("Error - GET /api/users/9 => 404", "\n".join(logs.output))
