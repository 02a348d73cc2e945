# src/rad_object/core/libraries.py
"""
Localizador de classes e fábrica de instâncias.

Este módulo define `Libraries`, o registro explícito que resolve nomes
curtos (aliases) ou caminhos pontilhados em classes, e constrói instâncias
passando o mapping de opções ao construtor universal.

Ordem de resolução em `locate(type_, name)`:
    1. `name` já é uma classe → retornada como está
    2. alias registrado no escopo `type_`
    3. alias global (registrado sem tipo)
    4. caminho pontilhado: ``"pacote.modulo.Classe"`` ou ``"pacote.modulo:Classe"``
       (classes aninhadas: ``"pacote.modulo.Externa.Interna"``)

Decisões arquiteturais:
    - Aliases são explícitos (`add`); não há discovery automático
    - Alias duplicado no mesmo escopo é erro
    - Instâncias recebem as opções como único argumento posicional

Invariantes:
    - Um nome não resolvido sempre levanta `ClassNotFoundError`
    - Objetos (não classes, não strings) passam direto por `instance`
"""

from __future__ import annotations

import importlib
import logging
from typing import Any, Dict, List, Mapping, Optional, Tuple

from .errors import ClassNotFoundError

logger = logging.getLogger(__name__)

AliasKey = Tuple[Optional[str], str]


class Libraries:
    """Registro de aliases de classes e fábrica de instâncias."""

    def __init__(self, aliases: Optional[Mapping[str, Any]] = None):
        self._aliases: Dict[AliasKey, Any] = {}
        if aliases:
            for name, target in aliases.items():
                self.add(name, target)

    def add(self, name: str, target: Any, type_: Optional[str] = None) -> None:
        """Registra `target` (classe ou caminho pontilhado) sob `name`."""
        if not isinstance(name, str) or not name.strip():
            raise ValueError("alias name must be a non-empty string")

        key = (type_, name)
        if key in self._aliases:
            raise ValueError(f"alias already registered: {_describe(key)}")
        self._aliases[key] = target

    def remove(self, name: str, type_: Optional[str] = None) -> None:
        self._aliases.pop((type_, name), None)

    def aliases(self, type_: Optional[str] = None) -> List[str]:
        return sorted(name for (scope, name) in self._aliases if scope == type_)

    def locate(self, type_: Optional[str], name: Any) -> type:
        """
        Resolve `name` em uma classe.

        Raises:
            ClassNotFoundError: Se nenhum alias ou caminho corresponder.
        """
        if isinstance(name, type):
            return name
        if not isinstance(name, str) or not name:
            raise ClassNotFoundError(f"Cannot locate class from {name!r}")

        for key in ((type_, name), (None, name)):
            if key in self._aliases:
                target = self._aliases[key]
                cls = target if isinstance(target, type) else _import_path(target)
                logger.debug("Resolved %s -> %s", _describe(key), cls.__qualname__)
                return cls

        return _import_path(name)

    def instance(
        self,
        type_: Optional[str],
        name: Any,
        options: Optional[Mapping[str, Any]] = None,
    ) -> Any:
        """Retorna uma instância de `name` construída com `options`."""
        if not isinstance(name, (str, type)):
            return name

        cls = self.locate(type_, name)
        return cls(dict(options or {}))


def _describe(key: AliasKey) -> str:
    scope, name = key
    return f"{scope}:{name}" if scope else name


def _import_path(path: Any) -> type:
    if not isinstance(path, str) or not path:
        raise ClassNotFoundError(f"Cannot locate class from {path!r}")

    if ":" in path:
        module_name, _, attr = path.partition(":")
        if not module_name or not attr:
            raise ClassNotFoundError(f"Class `{path}` not found")
        candidates = [(module_name, attr.split("."))]
    else:
        # prefixo de módulo mais longo primeiro: "pkg.mod.Outer.Inner"
        parts = path.split(".")
        candidates = [
            (".".join(parts[:i]), parts[i:]) for i in range(len(parts) - 1, 0, -1)
        ]

    for module_name, attrs in candidates:
        module = _import_module(path, module_name)
        if module is not None:
            return _resolve_attrs(path, module, attrs)

    raise ClassNotFoundError(f"Class `{path}` not found")


def _import_module(path: str, module_name: str) -> Any:
    """Importa `module_name`; None se o próprio módulo (ou um pai) não existir."""
    if not all(module_name.split(".")):
        return None
    try:
        return importlib.import_module(module_name)
    except ModuleNotFoundError as e:
        if e.name and (module_name == e.name or module_name.startswith(e.name + ".")):
            return None
        raise ClassNotFoundError(f"Class `{path}` not found") from e
    except ImportError as e:
        raise ClassNotFoundError(f"Class `{path}` not found") from e


def _resolve_attrs(path: str, module: Any, attrs: List[str]) -> type:
    obj: Any = module
    for part in attrs:
        obj = getattr(obj, part, None)
        if obj is None:
            raise ClassNotFoundError(f"Class `{path}` not found")

    if not isinstance(obj, type):
        raise ClassNotFoundError(f"`{path}` is not a class")
    return obj


libraries = Libraries()
