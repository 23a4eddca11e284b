"""Git object hashing."""

import hashlib


def git_blob_sha(content: str | bytes) -> str:
    """Return the sha git assigns to a blob holding ``content``.

    Git hashes ``b"blob <size>\\0"`` followed by the raw bytes, so the result
    can be compared directly with a blob sha read from the GitHub API.
    """
    data = content.encode("utf-8") if isinstance(content, str) else content
    header = f"blob {len(data)}\0".encode("ascii")
    return hashlib.sha1(header + data).hexdigest()
