"""Core library for docwiki.

The preferred executable entrypoints remain at the repo root:
- app.py (FastAPI)
- render.py (CLI)
- config.py (YAML config)

This package contains the reusable building blocks (wiki language
translator, documentation link resolvers).
"""
