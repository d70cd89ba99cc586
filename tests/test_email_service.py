import os
import unittest
from unittest.mock import MagicMock, Mock, patch

os.environ.setdefault("DATABASE_URL", "sqlite+pysqlite:///:memory:")
os.environ.setdefault("REDIS_URL", "redis://localhost:6379/0")

from app.core.config import settings
from app.services.email_service import EmailDeliveryError, email_provider_health, send_email


class EmailServiceTests(unittest.TestCase):
    def setUp(self):
        self._backup = {
            key: getattr(settings, key)
            for key in (
                "EMAIL_PROVIDER",
                "EMAIL_SERVICE_URL",
                "INTERNAL_SERVICE_TOKEN",
                "EMAIL_FROM_ADDRESS",
                "SMTP_HOST",
                "SMTP_PORT",
                "SMTP_USER",
                "SMTP_USE_TLS",
                "SMTP_USE_SSL",
            )
        }

    def tearDown(self):
        for key, value in self._backup.items():
            setattr(settings, key, value)

    def test_dummy_provider_only_logs(self):
        settings.EMAIL_PROVIDER = "dummy"
        payload = send_email(to=["a@example.com", "b@example.com"], subject="Hello", text="Body")
        self.assertEqual(payload.get("provider"), "mock_email")
        self.assertFalse(payload.get("sent"))
        self.assertEqual(payload.get("recipients"), 2)

    def test_no_recipients_raises(self):
        settings.EMAIL_PROVIDER = "dummy"
        with self.assertRaises(EmailDeliveryError):
            send_email(to=["", "  "], subject="Hello")

    def test_service_provider_calls_internal_email_service(self):
        settings.EMAIL_PROVIDER = "service"
        settings.EMAIL_SERVICE_URL = "http://email-service:8010/"
        settings.INTERNAL_SERVICE_TOKEN = "token"

        mock_response = Mock()
        mock_response.status_code = 200
        mock_response.content = b'{"status":"sent"}'
        mock_response.json.return_value = {"status": "sent"}

        mock_client = Mock()
        mock_client.__enter__ = Mock(return_value=mock_client)
        mock_client.__exit__ = Mock(return_value=False)
        mock_client.post.return_value = mock_response

        with patch("app.services.email_service.httpx.Client", return_value=mock_client):
            payload = send_email(to="user@example.com", subject="Hello", text="Body", bcc=True)
        self.assertEqual(payload.get("provider"), "email-service")
        self.assertTrue(payload.get("sent"))
        url = mock_client.post.call_args.args[0]
        body = mock_client.post.call_args.kwargs["json"]
        self.assertEqual(url, "http://email-service:8010/internal/send")
        self.assertEqual(body["to"], ["user@example.com"])
        self.assertTrue(body["bcc"])

    def test_service_error_status_raises(self):
        settings.EMAIL_PROVIDER = "service"
        settings.EMAIL_SERVICE_URL = "http://email-service:8010"
        settings.INTERNAL_SERVICE_TOKEN = "token"

        mock_response = Mock()
        mock_response.status_code = 502
        mock_response.content = b'{"detail":"upstream"}'
        mock_response.json.return_value = {"detail": "upstream"}

        mock_client = Mock()
        mock_client.__enter__ = Mock(return_value=mock_client)
        mock_client.__exit__ = Mock(return_value=False)
        mock_client.post.return_value = mock_response

        with patch("app.services.email_service.httpx.Client", return_value=mock_client):
            with self.assertRaises(EmailDeliveryError):
                send_email(to="user@example.com", subject="Hello")

    def test_smtp_bcc_keeps_recipients_in_envelope_only(self):
        settings.EMAIL_PROVIDER = "smtp"
        settings.EMAIL_FROM_ADDRESS = "news@example.org"
        settings.SMTP_HOST = "smtp.example.org"
        settings.SMTP_PORT = 587
        settings.SMTP_USER = ""
        settings.SMTP_USE_TLS = False
        settings.SMTP_USE_SSL = False

        smtp = MagicMock()
        smtp.__enter__.return_value = smtp
        with patch("app.services.email_service.smtplib.SMTP", return_value=smtp):
            payload = send_email(to=["a@example.com", "b@example.com"], subject="News", text="Body", bcc=True)

        self.assertEqual(payload.get("provider"), "smtp")
        message = smtp.send_message.call_args.args[0]
        self.assertEqual(smtp.send_message.call_args.kwargs["to_addrs"], ["a@example.com", "b@example.com"])
        self.assertEqual(message["To"], message["From"])

    def test_smtp_without_host_raises(self):
        settings.EMAIL_PROVIDER = "smtp"
        settings.SMTP_HOST = ""
        with self.assertRaises(EmailDeliveryError):
            send_email(to="a@example.com", subject="News")

    def test_unknown_provider_raises(self):
        settings.EMAIL_PROVIDER = "unknown"
        with self.assertRaises(EmailDeliveryError):
            send_email(to="user@example.com", subject="Hello")
        self.assertEqual(email_provider_health()["status"], "error")

    def test_health_reports_missing_smtp_settings(self):
        settings.EMAIL_PROVIDER = "smtp"
        settings.SMTP_HOST = ""
        health = email_provider_health()
        self.assertFalse(health["can_send"])
        self.assertIn("SMTP_HOST is not configured", health["issues"])
