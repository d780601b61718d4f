import asyncio
import smtplib

import pytest

from contact_api.domain.entities.notification_email import NotificationEmail
from contact_api.infrastructure.mail import smtp_mail_sender
from contact_api.infrastructure.mail.smtp_mail_sender import SmtpMailSender


class FakeSMTP:
    """Records what smtplib would have been asked to do."""

    instances = []
    supports_starttls = True
    fail_on_send = None

    def __init__(self, host, port, timeout=None):
        self.host = host
        self.port = port
        self.timeout = timeout
        self.started_tls = False
        self.credentials = None
        self.sent = []
        self.noops = 0
        self.closed = False
        FakeSMTP.instances.append(self)

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()
        return False

    def close(self):
        self.closed = True

    def ehlo(self):
        pass

    def has_extn(self, name):
        return name == "starttls" and self.supports_starttls

    def starttls(self):
        self.started_tls = True

    def login(self, user, password):
        self.credentials = (user, password)

    def send_message(self, msg):
        if FakeSMTP.fail_on_send is not None:
            raise FakeSMTP.fail_on_send
        self.sent.append(msg)

    def noop(self):
        self.noops += 1


class FakeSMTPSSL(FakeSMTP):
    pass


@pytest.fixture(autouse=True)
def fake_smtp(monkeypatch):
    FakeSMTP.instances = []
    FakeSMTP.fail_on_send = None
    FakeSMTP.supports_starttls = True
    monkeypatch.setattr(smtp_mail_sender.smtplib, "SMTP", FakeSMTP)
    monkeypatch.setattr(smtp_mail_sender.smtplib, "SMTP_SSL", FakeSMTPSSL)
    return FakeSMTP


@pytest.fixture()
def notification():
    return NotificationEmail(
        sender="site@example.org",
        reply_to="ada@example.com",
        to="owner@example.org",
        subject="New contact from Ada",
        text_body="Name: Ada\nEmail: ada@example.com\n\nHello\nWorld",
        html_body="<p><strong>Name:</strong> Ada</p>",
    )


def _sender(**overrides):
    options = dict(host="smtp.test", port=587, user="site@example.org", password="secret")
    options.update(overrides)
    return SmtpMailSender(**options)


class TestSend:
    def test_sends_multipart_message_over_starttls(self, notification):
        result = asyncio.run(_sender().send(notification))

        assert result.ok
        server = FakeSMTP.instances[-1]
        assert type(server) is FakeSMTP
        assert (server.host, server.port) == ("smtp.test", 587)
        assert server.started_tls
        assert server.credentials == ("site@example.org", "secret")
        assert server.closed

        (msg,) = server.sent
        assert msg["From"] == "site@example.org"
        assert msg["To"] == "owner@example.org"
        assert msg["Reply-To"] == "ada@example.com"
        assert msg["Subject"] == "New contact from Ada"
        assert "Name: Ada" in msg.get_body(("plain",)).get_content()
        assert "<strong>Name:</strong>" in msg.get_body(("html",)).get_content()

    def test_secure_flag_uses_implicit_tls(self, notification):
        result = asyncio.run(_sender(port=465, secure=True).send(notification))

        assert result.ok
        server = FakeSMTP.instances[-1]
        assert type(server) is FakeSMTPSSL
        assert not server.started_tls

    def test_skips_login_without_credentials(self, notification):
        asyncio.run(_sender(user="", password="").send(notification))
        assert FakeSMTP.instances[-1].credentials is None

    def test_relay_rejection_becomes_mail_error(self, notification):
        FakeSMTP.fail_on_send = smtplib.SMTPDataError(554, b"rejected")

        result = asyncio.run(_sender().send(notification))

        assert not result.ok
        assert "rejected" in result.error.message

    def test_unreachable_relay_becomes_mail_error(self, monkeypatch, notification):
        def _refuse(*args, **kwargs):
            raise ConnectionRefusedError("connection refused")

        monkeypatch.setattr(smtp_mail_sender.smtplib, "SMTP", _refuse)

        result = asyncio.run(_sender().send(notification))

        assert not result.ok
        assert "connection refused" in result.error.message

    def test_missing_host_is_a_mail_error(self, notification):
        result = asyncio.run(_sender(host="").send(notification))

        assert not result.ok
        assert result.error.message == "EMAIL_HOST is not configured"
        assert FakeSMTP.instances == []


class TestVerify:
    def test_verify_opens_and_authenticates_session(self):
        result = asyncio.run(_sender().verify())

        assert result.ok
        server = FakeSMTP.instances[-1]
        assert server.credentials == ("site@example.org", "secret")
        assert server.noops == 1
        assert server.sent == []

    def test_verify_reports_auth_failure(self, monkeypatch):
        def _reject_login(self, user, password):
            raise smtplib.SMTPAuthenticationError(535, b"bad credentials")

        monkeypatch.setattr(FakeSMTP, "login", _reject_login)

        result = asyncio.run(_sender().verify())

        assert not result.ok
        assert "bad credentials" in result.error.message
        assert FakeSMTP.instances[-1].closed

    def test_failed_starttls_closes_session(self, monkeypatch, notification):
        def _broken_tls(self):
            raise smtplib.SMTPException("STARTTLS extension not supported by server")

        monkeypatch.setattr(FakeSMTP, "starttls", _broken_tls)

        result = asyncio.run(_sender().send(notification))

        assert not result.ok
        server = FakeSMTP.instances[-1]
        assert server.closed
        assert server.sent == []
