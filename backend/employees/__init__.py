# employees/__init__.py
"""Employees app - staff records owned by a company."""
