"""
Subscriptions API — Application Package
=========================================

Layers:

    ┌─────────────────────────────────────┐
    │        Routes (HTTP handlers)       │  ← status codes, inputs
    ├─────────────────────────────────────┤
    │     Services (storage operations)   │  ← one statement per call
    ├─────────────────────────────────────┤
    │   Models (ORM) & Schemas (Pydantic) │
    ├─────────────────────────────────────┤
    │   Database (engine, sessions)       │
    └─────────────────────────────────────┘
"""

__version__ = "0.1.0"
