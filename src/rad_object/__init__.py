# src/rad_object/__init__.py
"""
rad_object — convenções de construção, configuração e introspecção de classes.

Este pacote raiz define o namespace público do rad_object: um objeto base
com construtor universal baseado em mapping de opções, auto-configuração
declarativa de propriedades, localizador de classes, cache de ancestrais e
um registro de filtros (interceptação de métodos).

Arquitetura em alto nível:
    - core          → objeto base, auto-configuração, localizador, inspeção
    - aop           → filtros em cadeia de middleware

Limites explícitos:
    - Não é um container de injeção de dependências
    - Não realiza discovery automático de classes
"""

from .aop import Chain, Filters, filters
from .core import (
    AutoConfigEffect,
    AutoConfigError,
    BaseObject,
    ClassNotFoundError,
    Libraries,
    ParentsCache,
    RadObjectError,
    libraries,
    parents_cache,
)

__all__ = [
    "AutoConfigEffect",
    "AutoConfigError",
    "BaseObject",
    "Chain",
    "ClassNotFoundError",
    "Filters",
    "Libraries",
    "ParentsCache",
    "RadObjectError",
    "filters",
    "libraries",
    "parents_cache",
]
