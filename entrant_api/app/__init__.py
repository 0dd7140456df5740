"""
Application package initializer.

This package contains the main entrypoint for the API and its
submodules.  The record store lives in ``services``, the request and
response models in ``schemas`` and the HTTP routes in
``api/v1/endpoints``.  Versioning is handled by grouping routers under
the ``api/<version>/`` hierarchy.
"""

from .main import app, create_app  # noqa: F401
