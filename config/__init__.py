"""Top-level package for Django configuration.

This package exposes configuration for the Building Management back office.
It contains settings modules for different environments and entry points
for WSGI and ASGI.
"""
