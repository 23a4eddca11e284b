"""Tests for hashing and signature helpers."""

import base64
import hashlib
import hmac

from txgh_sync.utils.git_hash import git_blob_sha
from txgh_sync.utils.signatures import (
    github_signature,
    transifex_signature,
    verify_github_signature,
    verify_transifex_signature,
)


class TestGitBlobSha:
    """Tests for git_blob_sha."""

    def test_empty_blob(self):
        """Test the well-known sha of the empty blob."""
        assert git_blob_sha("") == "e69de29bb2d1d6434b8b29ae775ad8c2e48c5391"

    def test_matches_git_hash_object(self):
        """Test against `printf 'hello\\n' | git hash-object --stdin`."""
        assert git_blob_sha("hello\n") == "ce013625030ba8dba906f756967f9e9ca394464a"

    def test_str_and_bytes_agree(self):
        """Test text is hashed as its UTF-8 bytes."""
        assert git_blob_sha("héllo") == git_blob_sha("héllo".encode("utf-8"))


class TestTransifexSignature:
    """Tests for Transifex webhook signatures."""

    URL = "https://bot.example.com/transifex/webhook"
    DATE = "Mon, 12 Oct 2026 10:00:00 GMT"
    BODY = b'{"project": "proj", "resource": "locale", "language": "fr"}'

    def test_signature_format(self):
        """Test the signature is base64 HMAC-SHA256 over method, url, date and body md5."""
        message = "POST\n{}\n{}\n{}".format(self.URL, self.DATE, hashlib.md5(self.BODY).hexdigest())
        expected = base64.b64encode(
            hmac.new(b"secret", message.encode(), hashlib.sha256).digest()
        ).decode()

        assert transifex_signature("secret", self.URL, self.DATE, self.BODY) == expected

    def test_verify_accepts_valid_signature(self):
        signature = transifex_signature("secret", self.URL, self.DATE, self.BODY)

        assert verify_transifex_signature("secret", self.URL, self.DATE, self.BODY, signature) is True

    def test_verify_rejects_tampered_body(self):
        signature = transifex_signature("secret", self.URL, self.DATE, self.BODY)

        assert verify_transifex_signature("secret", self.URL, self.DATE, self.BODY + b" ", signature) is False

    def test_verify_rejects_missing_signature_or_secret(self):
        signature = transifex_signature("secret", self.URL, self.DATE, self.BODY)

        assert verify_transifex_signature("secret", self.URL, self.DATE, self.BODY, None) is False
        assert verify_transifex_signature("", self.URL, self.DATE, self.BODY, signature) is False


class TestGitHubSignature:
    """Tests for GitHub webhook signatures."""

    def test_signature_prefix_and_digest(self):
        body = b'{"zen": "Keep it logically awesome."}'
        digest = hmac.new(b"gh-secret", body, hashlib.sha256).hexdigest()

        assert github_signature("gh-secret", body) == f"sha256={digest}"

    def test_verify(self):
        body = b"{}"
        signature = github_signature("gh-secret", body)

        assert verify_github_signature("gh-secret", body, signature) is True
        assert verify_github_signature("other", body, signature) is False
        assert verify_github_signature("gh-secret", body, None) is False
