"""src/urikit/utils/__init__.py

Filtering and serialization helpers used by :class:`urikit.Uri`.
"""
