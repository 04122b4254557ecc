"""URI construction for server locations.

Locations are opaque to the plugin: an override path becomes ``urn:<path>``
and is never resolved against the filesystem, and the bundled server is
addressed relative to the plugin directory URI the host reports.
"""

import re
from urllib.parse import quote, urljoin, urlsplit, urlunsplit, uses_relative

from .errors import InvalidURIError

_SCHEME = re.compile(r"^[A-Za-z][A-Za-z0-9+.\-]*:")
_UNSAFE = re.compile(r"[^\x21-\x7e]")


def parse_uri(text: str) -> str:
    """Validate ``text`` as an absolute URI and return it normalized.

    Spaces, control characters and anything outside ASCII are
    percent-encoded as UTF-8, everything else is kept as given.

    Raises:
        InvalidURIError: If the text has no scheme.
    """
    text = text.strip()
    if not text:
        raise InvalidURIError(text, "empty URI")
    if not _SCHEME.match(text):
        raise InvalidURIError(text, "relative URL without a base")
    return _UNSAFE.sub(lambda m: quote(m.group(), safe=""), text)


def urn(name: str) -> str:
    """URI for a name the host resolves itself (a PATH lookup or absolute path)."""
    return parse_uri(f"urn:{name}")


def join_uri(base: str, segment: str) -> str:
    """Resolve ``segment`` against ``base``.

    As with any URL reference, a base without a trailing slash has its last
    path segment replaced. Any scheme with an authority or an absolute path
    can be a base, not only the ones ``urljoin`` knows about.

    Raises:
        InvalidURIError: If ``base`` is not an absolute URI or has an opaque path.
    """
    base = parse_uri(base)
    parts = urlsplit(base)
    if parts.scheme.lower() in uses_relative:
        return parse_uri(urljoin(base, segment))
    if not parts.netloc and not parts.path.startswith("/"):
        raise InvalidURIError(base, "cannot be a base URL")

    resolved = urlsplit(urljoin(parts.path or "/", segment))
    return parse_uri(urlunsplit((parts.scheme, parts.netloc, resolved.path, resolved.query, resolved.fragment)))
