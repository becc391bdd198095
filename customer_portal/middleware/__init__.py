# Middleware package init
"""
Customer Portal - Middleware Package
======================================

Middleware Chain:
    Request → [Request ID] → [Logging] → [GZip] → Route Handler

    - Request ID runs first so the access log line can carry the ID.
    - Logging measures duration and records the final status code.
"""
