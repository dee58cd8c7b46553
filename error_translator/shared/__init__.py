"""
Shared module package.

Contains cross-cutting concerns used by the translator and its host app:
- Logging configuration and the trace-capable logger adapter
- Request context middleware
"""
