# src/rad_object/aop/__init__.py
"""Interceptação de métodos (filters) em forma de cadeia de middleware."""

from .filters import Chain, Filters, filters

__all__ = ["Chain", "Filters", "filters"]
