# src/rad_object/core/__init__.py
"""
Core do rad_object.

Componentes principais:
    - base_object → `BaseObject`: construtor universal e auto-configuração
    - auto_config → diretivas de auto-configuração compiladas por classe
    - parents     → `ParentsCache`: cache de ancestrais por classe concreta
    - libraries   → `Libraries`: localizador de classes e fábrica de instâncias
    - inspector   → `is_callable`: checagem de capacidades com visibilidade
    - errors      → hierarquia de exceções do pacote

Limites explícitos:
    - Não contém lógica de domínio de aplicação
    - Não configura handlers de logging
"""

from .auto_config import AutoConfigDirective, AutoConfigEffect, array_union
from .base_object import BaseObject
from .errors import AutoConfigError, ClassNotFoundError, RadObjectError
from .inspector import is_callable
from .libraries import Libraries, libraries
from .parents import ParentsCache, class_parents, parents_cache

__all__ = [
    "AutoConfigDirective",
    "AutoConfigEffect",
    "AutoConfigError",
    "BaseObject",
    "ClassNotFoundError",
    "Libraries",
    "ParentsCache",
    "RadObjectError",
    "array_union",
    "class_parents",
    "is_callable",
    "libraries",
    "parents_cache",
]
