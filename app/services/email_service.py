from __future__ import annotations

import logging
import smtplib
from email.message import EmailMessage
from email.utils import formataddr
from typing import Any, Sequence
import httpx

from app.core.config import settings


class EmailDeliveryError(Exception):
    pass


logger = logging.getLogger("uvicorn.error")

MOCK_PROVIDERS = {"", "dummy", "mock", "console"}
SERVICE_PROVIDERS = {"service", "email_service"}


def normalize_email(value: str | None) -> str:
    return str(value or "").strip().lower()


def _provider() -> str:
    return str(settings.EMAIL_PROVIDER or "dummy").strip().lower()


def _sender(from_name: str | None) -> str:
    address = str(settings.EMAIL_FROM_ADDRESS or "").strip()
    name = str(from_name or settings.EMAIL_FROM_NAME or "").strip()
    return formataddr((name, address)) if name else address


def _mock_send(*, recipients: list[str], subject: str, bcc: bool) -> dict[str, Any]:
    logger.warning(
        "[EMAIL MOCK] subject=%r recipients=%s bcc=%s",
        subject,
        len(recipients),
        bcc,
    )
    return {
        "provider": "mock_email",
        "status": "accepted",
        "sent": False,
        "mocked": True,
        "recipients": len(recipients),
    }


def _build_message(*, sender: str, recipients: list[str], subject: str, text: str, html: str | None, bcc: bool) -> EmailMessage:
    msg = EmailMessage()
    msg["From"] = sender
    msg["Subject"] = subject
    if bcc:
        # Recipients stay hidden from each other; the envelope carries the list.
        msg["To"] = sender
        msg["Bcc"] = ", ".join(recipients)
    else:
        msg["To"] = ", ".join(recipients)
    msg.set_content(text or "")
    if html:
        msg.add_alternative(html, subtype="html")
    return msg


def _send_smtp(*, sender: str, recipients: list[str], subject: str, text: str, html: str | None, bcc: bool) -> dict[str, Any]:
    host = str(settings.SMTP_HOST or "").strip()
    port = int(settings.SMTP_PORT or 0)
    username = str(settings.SMTP_USER or "").strip()
    password = str(settings.SMTP_PASSWORD or "").strip()
    use_tls = bool(settings.SMTP_USE_TLS)
    use_ssl = bool(settings.SMTP_USE_SSL)

    if not host or not port:
        raise EmailDeliveryError("SMTP_HOST/SMTP_PORT are not configured")
    if use_tls and use_ssl:
        raise EmailDeliveryError("SMTP_USE_TLS and SMTP_USE_SSL are mutually exclusive")

    msg = _build_message(sender=sender, recipients=recipients, subject=subject, text=text, html=html, bcc=bcc)
    try:
        if use_ssl:
            smtp = smtplib.SMTP_SSL(host=host, port=port, timeout=15)
        else:
            smtp = smtplib.SMTP(host=host, port=port, timeout=15)
        with smtp as client:
            client.ehlo()
            if use_tls:
                client.starttls()
                client.ehlo()
            if username:
                client.login(username, password)
            client.send_message(msg, to_addrs=recipients)
    except Exception as exc:
        raise EmailDeliveryError(f"SMTP delivery failed: {exc}") from exc

    return {"provider": "smtp", "status": "accepted", "sent": True, "recipients": len(recipients)}


def _send_via_email_service(*, sender: str, recipients: list[str], subject: str, text: str, html: str | None, bcc: bool) -> dict[str, Any]:
    base_url = str(settings.EMAIL_SERVICE_URL or "").strip().rstrip("/")
    token = str(settings.INTERNAL_SERVICE_TOKEN or "").strip()
    if not base_url:
        raise EmailDeliveryError("EMAIL_SERVICE_URL is not configured")
    if not token:
        raise EmailDeliveryError("INTERNAL_SERVICE_TOKEN is not configured")
    try:
        with httpx.Client(timeout=15.0) as client:
            response = client.post(
                f"{base_url}/internal/send",
                headers={"X-Internal-Token": token, "Content-Type": "application/json"},
                json={
                    "from": sender,
                    "to": recipients,
                    "bcc": bcc,
                    "subject": subject,
                    "text": text,
                    "html": html,
                },
            )
    except Exception as exc:
        raise EmailDeliveryError(f"email-service request failed: {exc}") from exc
    payload: dict[str, Any] = {}
    try:
        payload = response.json() if response.content else {}
    except Exception:
        payload = {}
    if response.status_code >= 400:
        detail = str(payload.get("detail") or payload.get("error") or response.text or response.status_code)
        raise EmailDeliveryError(f"email-service error: {detail}")
    return {
        "provider": "email-service",
        "status": "accepted",
        "sent": True,
        "recipients": len(recipients),
        "response": payload,
    }


def send_email(
    *,
    to: str | Sequence[str],
    subject: str,
    text: str = "",
    html: str | None = None,
    from_name: str | None = None,
    bcc: bool = False,
) -> dict[str, Any]:
    raw = [to] if isinstance(to, str) else list(to or [])
    recipients = [email for email in (normalize_email(item) for item in raw) if email]
    if not recipients:
        raise EmailDeliveryError("No recipients specified")

    provider = _provider()
    if provider in MOCK_PROVIDERS:
        return _mock_send(recipients=recipients, subject=subject, bcc=bcc)

    sender = _sender(from_name)
    if provider in SERVICE_PROVIDERS:
        return _send_via_email_service(sender=sender, recipients=recipients, subject=subject, text=text, html=html, bcc=bcc)
    if provider == "smtp":
        return _send_smtp(sender=sender, recipients=recipients, subject=subject, text=text, html=html, bcc=bcc)

    raise EmailDeliveryError(f"Unknown EMAIL_PROVIDER: {provider}")


def email_provider_health() -> dict[str, Any]:
    provider = _provider()
    if provider in MOCK_PROVIDERS:
        return {"provider": "dummy", "status": "ok", "mode": "mock", "can_send": True, "issues": []}

    if provider in SERVICE_PROVIDERS:
        base_url = str(settings.EMAIL_SERVICE_URL or "").strip().rstrip("/")
        token = str(settings.INTERNAL_SERVICE_TOKEN or "").strip()
        issues: list[str] = []
        if not base_url:
            issues.append("EMAIL_SERVICE_URL is not configured")
        if not token:
            issues.append("INTERNAL_SERVICE_TOKEN is not configured")
        can_send = not issues
        if can_send:
            try:
                with httpx.Client(timeout=5.0) as client:
                    response = client.get(f"{base_url}/health")
                if response.status_code >= 400:
                    can_send = False
                    issues.append(f"email-service unavailable: HTTP {response.status_code}")
            except Exception as exc:
                can_send = False
                issues.append(f"email-service unavailable: {exc}")
        return {
            "provider": "email-service",
            "status": "ok" if can_send else "degraded",
            "mode": "service",
            "can_send": can_send,
            "issues": issues,
        }

    if provider == "smtp":
        issues = []
        if not str(settings.SMTP_HOST or "").strip():
            issues.append("SMTP_HOST is not configured")
        if not str(settings.EMAIL_FROM_ADDRESS or "").strip():
            issues.append("EMAIL_FROM_ADDRESS is not configured")
        return {
            "provider": "smtp",
            "status": "degraded" if issues else "ok",
            "mode": "real",
            "can_send": not issues,
            "issues": issues,
        }

    return {
        "provider": provider,
        "status": "error",
        "mode": "unknown",
        "can_send": False,
        "issues": [f"Unknown EMAIL_PROVIDER: {provider}"],
    }
