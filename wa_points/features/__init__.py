"""
Feature modules for WA Points.

Each feature is a self-contained module with:
- models.py - dataclasses
- schemas.py - Pydantic schemas (optional)
- service.py - Business logic (optional)
- catalog.py / tables.py - Static data loading (optional)
"""
