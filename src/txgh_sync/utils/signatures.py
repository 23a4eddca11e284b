"""Webhook signature helpers for GitHub and Transifex deliveries."""

import base64
import hashlib
import hmac


def transifex_signature(secret: str, url: str, date: str, body: bytes) -> str:
    """Compute the Transifex webhook signature (``X-TX-Signature-V2``)."""
    content_md5 = hashlib.md5(body).hexdigest()
    message = "\n".join(["POST", url, date, content_md5])
    digest = hmac.new(secret.encode("utf-8"), message.encode("utf-8"), hashlib.sha256).digest()
    return base64.b64encode(digest).decode("ascii")


def verify_transifex_signature(
    secret: str, url: str, date: str, body: bytes, signature: str | None
) -> bool:
    if not secret or not signature:
        return False
    expected = transifex_signature(secret, url, date, body)
    return hmac.compare_digest(expected, signature)


def github_signature(secret: str, body: bytes) -> str:
    """Compute the GitHub ``X-Hub-Signature-256`` header value."""
    digest = hmac.new(secret.encode("utf-8"), body, hashlib.sha256).hexdigest()
    return f"sha256={digest}"


def verify_github_signature(secret: str, body: bytes, signature: str | None) -> bool:
    if not signature:
        return False
    return hmac.compare_digest(github_signature(secret, body), signature)
