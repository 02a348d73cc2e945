# src/rad_object/core/parents.py
"""
Cache de ancestrais de classes.

Este módulo define o `ParentsCache`, registro explícito que memoriza a
lista ordenada de classes ancestrais de cada classe concreta, calculada
uma única vez e reutilizada durante toda a vida do processo.

Decisões arquiteturais:
    - O cache é um objeto injetável, não estado estático implícito de classe
    - A primitiva de lookup é injetável (permite contagem em testes)
    - Inserção é "insert-if-absent": o primeiro resultado gravado vence

Invariantes:
    - Cada classe é calculada no máximo uma vez por cache (salvo `clear()`)
    - Chamadores recebem cópias; o conteúdo cacheado não é mutável por fora

Limites explícitos:
    - Não há invalidação automática
"""

from __future__ import annotations

from threading import Lock
from typing import Callable, Dict, List, Optional


def class_parents(cls: type) -> List[type]:
    """Ancestrais de `cls`, do pai mais próximo ao mais distante, sem `object`."""
    return [base for base in cls.__mro__[1:] if base is not object]


class ParentsCache:
    """Memo de ancestrais indexado pela identidade da classe concreta."""

    def __init__(self, lookup: Optional[Callable[[type], List[type]]] = None):
        self._lookup = lookup or class_parents
        self._parents: Dict[type, List[type]] = {}
        self._lock = Lock()

    def get(self, cls: type) -> List[type]:
        parents = self._parents.get(cls)
        if parents is None:
            computed = list(self._lookup(cls))
            with self._lock:
                parents = self._parents.setdefault(cls, computed)
        return list(parents)

    def clear(self) -> None:
        with self._lock:
            self._parents.clear()

    def __contains__(self, cls: object) -> bool:
        return cls in self._parents

    def __len__(self) -> int:
        return len(self._parents)


parents_cache = ParentsCache()
