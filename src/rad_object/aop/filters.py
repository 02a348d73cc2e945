# src/rad_object/aop/filters.py
"""
Registro de interceptação de métodos (filters) como cadeia de middleware.

Um filtro é um callable ``filter(params, chain) -> resultado``. Ele pode
alterar `params` antes de delegar, delegar via ``chain.next(params)``,
alterar o resultado devolvido ou interromper a cadeia sem delegar.

Ordem de execução em `Filters.run(target, method, params, implementation)`:
    1. filtros de classe, da classe mais base à classe concreta
    2. filtros da instância
    3. a implementação, chamada como ``implementation(params)``

Em cada nível, filtros executam na ordem em que foram aplicados.

Decisões arquiteturais:
    - Alvos podem ser classes (afetam todas as instâncias) ou instâncias
    - Instâncias são mantidas por referência fraca; o registro não prolonga
      a vida dos objetos filtrados
    - O registro é explícito e injetável; existe um default de processo

Limites explícitos:
    - Não reescreve métodos: quem participa chama `run` explicitamente
"""

from __future__ import annotations

import logging
import weakref
from typing import Any, Callable, Dict, Iterable, List, MutableMapping, Optional

logger = logging.getLogger(__name__)

Filter = Callable[[Any, "Chain"], Any]
Implementation = Callable[[Any], Any]
MethodFilters = Dict[str, List[Filter]]


class Chain:
    """Cadeia de filtros em torno de uma implementação."""

    def __init__(
        self,
        filters: Iterable[Filter],
        implementation: Implementation,
        method: Optional[str] = None,
    ):
        self.method = method
        self._filters = list(filters)
        self._implementation = implementation
        self._position = 0

    def next(self, params: Any) -> Any:
        if self._position < len(self._filters):
            current = self._filters[self._position]
            self._position += 1
            return current(params, self)
        return self._implementation(params)

    def __len__(self) -> int:
        return len(self._filters)


class Filters:
    """Registro de filtros por alvo (classe ou instância) e nome de método."""

    def __init__(self) -> None:
        self._classes: Dict[type, MethodFilters] = {}
        self._instances: MutableMapping[Any, MethodFilters] = weakref.WeakKeyDictionary()

    def _bucket(self, target: Any, create: bool = False) -> Optional[MethodFilters]:
        store = self._classes if isinstance(target, type) else self._instances
        bucket = store.get(target)
        if bucket is None and create:
            bucket = store[target] = {}
        return bucket

    def apply(self, target: Any, method: str, filter: Filter) -> None:
        if not callable(filter):
            raise TypeError("filter must be callable")
        self._bucket(target, create=True).setdefault(method, []).append(filter)
        logger.debug("Applied filter to %s.%s", _name(target), method)

    def clear(self, target: Any = None, method: Optional[str] = None) -> None:
        """Remove filtros: todos, todos de um alvo, ou de um método do alvo."""
        if target is None:
            self._classes.clear()
            self._instances.clear()
            return

        bucket = self._bucket(target)
        if bucket is None:
            return
        if method is None:
            bucket.clear()
        else:
            bucket.pop(method, None)
        logger.debug("Cleared filters on %s.%s", _name(target), method or "*")

    def filters_for(self, target: Any, method: str) -> List[Filter]:
        cls = target if isinstance(target, type) else type(target)
        collected: List[Filter] = []
        for klass in reversed(cls.__mro__):
            collected.extend(self._classes.get(klass, {}).get(method, ()))
        if not isinstance(target, type):
            collected.extend((self._bucket(target) or {}).get(method, ()))
        return collected

    def has_filters(self, target: Any, method: str) -> bool:
        return bool(self.filters_for(target, method))

    def run(self, target: Any, method: str, params: Any, implementation: Implementation) -> Any:
        chain = Chain(self.filters_for(target, method), implementation, method=method)
        return chain.next(params)


def _name(target: Any) -> str:
    cls = target if isinstance(target, type) else type(target)
    return cls.__qualname__


filters = Filters()
