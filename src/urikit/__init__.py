"""src/urikit/__init__.py

urikit - Immutable URI value object for Python.

urikit parses, validates and rebuilds http(s) URIs. Every component is
percent-encoded on the way in, and every change produces a new object.

Key Features:
    - Zero external dependencies
    - Immutable value type, safe to share between threads
    - Idempotent percent-encoding (no double escaping)
    - Query strings from and to plain dictionaries
    - Base path support for applications served under a prefix
    - Full type hints (PEP 561)
    - Memory optimized with __slots__

Example:
    Parsing::

        from urikit import Uri

        uri = Uri.from_string('https://example.com:8080/foo/bar?abc=123')
        uri.port    # 8080
        uri.query_object()  # {'abc': '123'}

    Building::

        uri = Uri('https', 'example.com', path='/search', query={'q': 'a b'})
        str(uri.with_base_path('api'))
        # 'https://example.com/api/search?q=a%20b'
"""

import logging

from urikit.exceptions import InvalidPort, InvalidScheme, InvalidUri, UriError
from urikit.uri import Uri
from urikit.version import __version__

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Uri",
    "UriError",
    "InvalidScheme",
    "InvalidPort",
    "InvalidUri",
    "__version__",
]
