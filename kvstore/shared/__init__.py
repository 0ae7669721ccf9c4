"""
Shared module package.

Contains cross-cutting concerns applied to every request:
- Error classification and mapping
- Admission control (load shedding)
- Timeout enforcement
- Logging configuration
"""
