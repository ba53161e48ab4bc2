"""tests/unit/test_version.py"""

import urikit
from urikit.version import __version__


def test_version():
    """Verify the package exposes a dotted version string."""
    assert urikit.__version__ == __version__
    parts = __version__.split(".")
    assert len(parts) >= 2
    assert all(part.isdigit() for part in parts[:2])


def test_public_api():
    """Verify the names exported from the package root."""
    assert set(urikit.__all__) == {
        "Uri",
        "UriError",
        "InvalidScheme",
        "InvalidPort",
        "InvalidUri",
        "__version__",
    }
