"""
Customer Portal - Application Package Initializer
==================================================

What: Marks the `customer_portal` directory as a Python package.
Who:  Used by uvicorn (`customer_portal.main:app`), pytest and the
      `python -m customer_portal` entry point.

Architecture Note:
    The service is split into thin layers:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │   Services (lookup, HTML rendering) │  ← id parsing, response shaping
    ├─────────────────────────────────────┤
    │        Schemas (Pydantic models)    │  ← API contracts
    ├─────────────────────────────────────┤
    │     Store (fixed in-memory records) │  ← read-only after startup
    └─────────────────────────────────────┘
"""

__version__ = "1.0.0"
