"""src/urikit/uri.py

Immutable URI value object for urikit.
"""

import logging
import urllib.parse
from typing import Any, Dict, Mapping, Optional, Tuple, Union

from urikit.exceptions import InvalidUri
from urikit.utils.serialization import QueryValue, build_query, parse_query
from urikit.utils.validators import (
    filter_fragment,
    filter_path,
    filter_port,
    filter_query,
    filter_scheme,
    filter_user_info,
    has_standard_port,
)

__all__ = ["Uri"]

logger = logging.getLogger(__name__)

QueryInput = Union[str, Mapping[str, Any], None]


def _query_to_string(query: QueryInput) -> str:
    if query is None:
        return ""
    if isinstance(query, Mapping):
        return filter_query(build_query(query))
    return filter_query(query)


class Uri:
    """
    Immutable URI made of scheme, authority, path, query and fragment.

    Components are validated and percent-encoded when the instance is
    built. The ``with_*`` methods return a new instance with one component
    replaced; the receiver is never modified.

    Example::

        uri = Uri("https", "example.com", path="/foo", query={"a": "1"})
        str(uri.with_fragment("top"))  # 'https://example.com/foo?a=1#top'
    """

    __slots__ = (
        "_scheme",
        "_host",
        "_port",
        "_path",
        "_query",
        "_fragment",
        "_user",
        "_password",
        "_base_path",
    )

    def __init__(
        self,
        scheme: str,
        host: str,
        port: Optional[int] = None,
        path: Optional[str] = "/",
        query: QueryInput = "",
        fragment: Optional[str] = "",
        user: str = "",
        password: str = "",
    ):
        """
        Args:
            scheme: "", "http" or "https", optionally followed by ":" or "://".
            host: Host name, stored as given.
            port: Port number or None.
            path: Path; None or "" becomes "/".
            query: Query string (leading "?" allowed), a mapping of parameters
                or None for no query.
            fragment: Fragment (leading "#" allowed) or None.
            user: User name, stored as given.
            password: Password, stored as given.

        Raises:
            InvalidScheme: If the scheme is not supported.
            InvalidPort: If the port is out of range.
        """
        self._scheme = filter_scheme(scheme)
        self._host = host
        self._port = filter_port(port)
        self._path = "/" if not path else filter_path(path)
        self._query = _query_to_string(query)
        self._fragment = filter_fragment(fragment or "")
        self._user = user
        self._password = password
        self._base_path = ""

    @classmethod
    def from_string(cls, uri: str) -> "Uri":
        """
        Parse an absolute URI.

        Args:
            uri: Absolute URI such as ``https://user:pw@example.com:8080/a?b=c#d``.

        Returns:
            A new Uri built from the parsed components.

        Raises:
            InvalidUri: If the text is not an absolute URI.
            InvalidScheme: If the scheme is not supported.
        """
        try:
            parts = urllib.parse.urlsplit(uri)
            port = parts.port
        except ValueError as exc:
            logger.debug("Rejected URI %r: %s", uri, exc)
            raise InvalidUri(f"Cannot parse URI: {uri!r}") from exc

        if not parts.scheme or not parts.hostname:
            logger.debug("Rejected URI %r: not absolute", uri)
            raise InvalidUri(f"Not an absolute URI: {uri!r}")

        host = parts.hostname
        # IPv6 literals come back without their brackets.
        if ":" in host:
            host = f"[{host}]"

        return cls(
            parts.scheme,
            host,
            port,
            parts.path,
            parts.query,
            parts.fragment,
            parts.username or "",
            parts.password or "",
        )

    # Accessors

    @property
    def scheme(self) -> str:
        """Scheme without the ``://`` suffix."""
        return self._scheme

    @property
    def host(self) -> str:
        return self._host

    @property
    def port(self) -> Optional[int]:
        """Port, or None when unset or equal to the scheme's standard port."""
        if self._port is None or has_standard_port(self._scheme, self._port):
            return None
        return self._port

    @property
    def path(self) -> str:
        return self._path

    @property
    def query(self) -> str:
        """Query string without the ``?`` prefix."""
        return self._query

    @property
    def fragment(self) -> str:
        """Fragment without the ``#`` prefix."""
        return self._fragment

    @property
    def user(self) -> str:
        return self._user

    @property
    def password(self) -> str:
        return self._password

    @property
    def base_path(self) -> str:
        return self._base_path

    @property
    def user_info(self) -> str:
        """``user`` or ``user:password``; empty when there is no user."""
        if not self._user:
            return ""
        if self._password:
            return f"{self._user}:{self._password}"
        return self._user

    @property
    def authority(self) -> str:
        """``user_info@host:port`` with empty parts left out."""
        user_info = self.user_info
        port = self.port
        authority = f"{user_info}@{self._host}" if user_info else self._host
        if port is not None:
            authority = f"{authority}:{port}"
        return authority

    @property
    def full_path(self) -> str:
        """Base path and path joined by a single slash."""
        path = self._path[1:] if self._path.startswith("/") else self._path
        return f"{self._base_path}/{path}"

    @property
    def relative_url(self) -> str:
        url = self.full_path
        if self._query:
            url += f"?{self._query}"
        if self._fragment:
            url += f"#{self._fragment}"
        return url

    @property
    def absolute_url(self) -> str:
        return str(self)

    def query_object(self) -> Dict[str, QueryValue]:
        """Decode the query string into a dictionary."""
        return parse_query(self._query)

    # Mutators

    def _copy(self) -> "Uri":
        clone = object.__new__(type(self))
        for klass in type(self).__mro__:
            slots = vars(klass).get("__slots__", ())
            if isinstance(slots, str):
                slots = (slots,)
            for name in slots:
                if name not in ("__dict__", "__weakref__") and hasattr(self, name):
                    setattr(clone, name, getattr(self, name))
        if hasattr(self, "__dict__"):
            clone.__dict__.update(self.__dict__)
        return clone

    def with_scheme(self, scheme: str) -> "Uri":
        """Return a copy with another scheme."""
        uri = self._copy()
        uri._scheme = filter_scheme(scheme)
        return uri

    def with_host(self, host: str) -> "Uri":
        """Return a copy with another host."""
        uri = self._copy()
        uri._host = host
        return uri

    def with_port(self, port: Optional[int]) -> "Uri":
        """Return a copy with another port. None removes the port."""
        uri = self._copy()
        uri._port = filter_port(port)
        return uri

    def with_path(self, path: str) -> "Uri":
        """Return a copy with another path. An empty path stays empty."""
        uri = self._copy()
        uri._path = filter_path(path)
        return uri

    def with_query(self, query: QueryInput) -> "Uri":
        """Return a copy with another query, given as a string or a mapping."""
        uri = self._copy()
        uri._query = _query_to_string(query)
        return uri

    def with_fragment(self, fragment: Optional[str]) -> "Uri":
        """Return a copy with another fragment."""
        uri = self._copy()
        uri._fragment = filter_fragment(fragment or "")
        return uri

    def with_base_path(self, base_path: str) -> "Uri":
        """
        Return a copy with another base path.

        Surrounding slashes are ignored: "base", "/base" and "/base/" all give
        "/base". An empty value or "/" clears the base path.
        """
        uri = self._copy()
        stripped = base_path.strip("/")
        uri._base_path = f"/{filter_path(stripped)}" if stripped else ""
        return uri

    def with_user_info(self, user: str, password: Optional[str] = None) -> "Uri":
        """
        Return a copy with other credentials.

        The password is only kept when this instance already has a user.
        Calling ``with_user_info`` on a URI without a user always clears the
        password, even when one is passed.
        """
        uri = self._copy()
        uri._user = filter_user_info(user)
        uri._password = ""
        if self._user and password:
            uri._password = filter_user_info(password)
        return uri

    # Value semantics

    def _key(self) -> Tuple[Any, ...]:
        return (
            self._scheme,
            self._host,
            self.port,
            self._path,
            self._query,
            self._fragment,
            self._user,
            self._password,
            self._base_path,
        )

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Uri):
            return self._key() == other._key()
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._key())

    def __str__(self) -> str:
        url = f"{self._scheme}:" if self._scheme else ""
        authority = self.authority
        if authority:
            url += f"//{authority}"
        return url + self.relative_url

    def __repr__(self) -> str:
        return f"<Uri {str(self)!r}>"
