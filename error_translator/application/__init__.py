"""
Application layer package.

Validates translator options and freezes them for the handler.
Depends on domain entities and ports only.
"""
