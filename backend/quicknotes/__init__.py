"""
QuickNotes Backend — Application Package Initializer
====================================================

What: Marks the `quicknotes` directory as a Python package.
Who:  Used by uvicorn (`quicknotes.main:app`), pytest, and the console entry point.

Architecture Note:
    The backend is split into thin layers:

    ┌─────────────────────────────────────┐
    │     Routes (loader / action)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │   Services (validate, orchestrate)  │  ← Note rules, create workflow
    ├─────────────────────────────────────┤
    │          Schemas (Pydantic)         │  ← Note shape, API contracts
    ├─────────────────────────────────────┤
    │      Note Store (JSON document)     │  ← Whole-document load/save
    └─────────────────────────────────────┘

    The presentation layer (forms, lists, error views) lives outside this
    package and only consumes JSON, redirects, and structured errors.
"""

__version__ = "1.0.0"
