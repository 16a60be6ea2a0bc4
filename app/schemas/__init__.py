"""
Pydantic schema package.

Domain-specific schema modules live here, e.g.:
- candidates.py
- resume.py
"""
