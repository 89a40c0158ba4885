"""
Core utilities shared across the roster application.

This package hosts configuration helpers (env vars, storage paths, backend
selection) and the logging setup. Services and repositories should read
settings from here instead of touching os.environ directly.
"""
