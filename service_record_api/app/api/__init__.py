"""
API package.

``router`` bundles every endpoint module; it is mounted under ``/api``
by ``create_app``.
"""
