"""
NutriSnap Backend - Application Package Initializer
=====================================================

What: Marks the `nutrisnap` directory as a Python package.
Who:  Imported by uvicorn (`nutrisnap.main:app`), pytest, and the console script.

Architecture Note:
    The backend is a thin layered stack:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │         Services (Business Logic)   │  ← Validation, error translation
    ├─────────────────────────────────────┤
    │   Repositories & Schemas (Data)     │  ← Collection API + pydantic shapes
    ├─────────────────────────────────────┤
    │       Record Store (Persistence)    │  ← Locked JSON files
    └─────────────────────────────────────┘
"""

__version__ = "1.0.0"
