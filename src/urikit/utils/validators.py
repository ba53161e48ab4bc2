"""src/urikit/utils/validators.py

Validation and percent-encoding filters for URI components.
"""

import re
import urllib.parse
from typing import Dict, FrozenSet, Optional, Pattern

from urikit.exceptions import InvalidPort, InvalidScheme

__all__ = [
    "SCHEMES",
    "STANDARD_PORTS",
    "encode_unsafe",
    "filter_fragment",
    "filter_path",
    "filter_port",
    "filter_query",
    "filter_scheme",
    "filter_user_info",
    "has_standard_port",
]

SCHEMES: FrozenSet[str] = frozenset({"", "http", "https"})

STANDARD_PORTS: Dict[str, int] = {
    "http": 80,
    "https": 443,
}

MIN_PORT = 1
MAX_PORT = 65535

# Safe character classes, without "%" (valid escapes are handled separately).
_PATH_SAFE = r"A-Za-z0-9_\-.~:@&=+$,/;"
_QUERY_SAFE = r"A-Za-z0-9_\-.~!$&'()*+,;=:@/?"
_USER_INFO_SAFE = r"A-Za-z0-9_\-.~!$&'()*+,;="


def _unsafe_pattern(safe: str) -> Pattern[str]:
    # A run of characters outside the safe class, or a "%" that does not
    # start a %XX escape.
    return re.compile(rf"(?:[^{safe}%]|%(?![A-Fa-f0-9]{{2}}))+")


_PATH_UNSAFE = _unsafe_pattern(_PATH_SAFE)
_QUERY_UNSAFE = _unsafe_pattern(_QUERY_SAFE)
_USER_INFO_UNSAFE = _unsafe_pattern(_USER_INFO_SAFE)

_SCHEME_SUFFIX = re.compile(r"[:/]+$")


def encode_unsafe(value: str, unsafe: Pattern[str]) -> str:
    """
    Percent-encode every match of ``unsafe`` in ``value``.

    Args:
        value: Text to encode.
        unsafe: Compiled pattern matching runs of characters to escape.

    Returns:
        The encoded text. Existing ``%XX`` escapes are left as they are,
        so encoding an already encoded value returns it unchanged.
    """
    return unsafe.sub(lambda match: urllib.parse.quote(match.group(0), safe=""), value)


def filter_scheme(scheme: str) -> str:
    """
    Strip a trailing ``:`` or ``://`` and validate the scheme.

    Raises:
        InvalidScheme: If the scheme is not "", "http" or "https".
    """
    filtered = _SCHEME_SUFFIX.sub("", scheme)
    if filtered not in SCHEMES:
        raise InvalidScheme()
    return filtered


def filter_port(port: Optional[int]) -> Optional[int]:
    """
    Validate a port number.

    Raises:
        InvalidPort: Unless the port is None or an integer in [1, 65535].
    """
    if port is None:
        return None
    if isinstance(port, int) and not isinstance(port, bool) and MIN_PORT <= port <= MAX_PORT:
        return port
    raise InvalidPort()


def filter_path(path: str) -> str:
    """Percent-encode the characters a path may not contain."""
    return encode_unsafe(path, _PATH_UNSAFE)


def filter_query(query: str) -> str:
    """Drop a leading ``?`` and percent-encode the rest."""
    if query.startswith("?"):
        query = query[1:]
    return encode_unsafe(query, _QUERY_UNSAFE)


def filter_fragment(fragment: str) -> str:
    """Drop a leading ``#`` and percent-encode the rest."""
    if fragment.startswith("#"):
        fragment = fragment[1:]
    return encode_unsafe(fragment, _QUERY_UNSAFE)


def filter_user_info(value: str) -> str:
    """Percent-encode a user name or password. ``:`` and ``@`` are escaped."""
    return encode_unsafe(value, _USER_INFO_UNSAFE)


def has_standard_port(scheme: str, port: Optional[int]) -> bool:
    """Whether ``port`` is the implicit default port of ``scheme``."""
    return port is not None and STANDARD_PORTS.get(scheme) == port
