# src/rad_object/core/inspector.py
"""
Inspeção de capacidades de objetos.

Convenção de visibilidade:
    - nomes iniciados por um único `_` são não públicos
    - nomes dunder (`__x__`) são públicos
    - nomes com name mangling (`__x`) são procurados na forma `_Classe__x`
"""

from __future__ import annotations

from typing import Any


def is_public(name: str) -> bool:
    if name.startswith("__") and name.endswith("__"):
        return True
    return not name.startswith("_")


def _resolve(target: Any, name: str) -> Any:
    attr = getattr(target, name, None)
    if attr is None and name.startswith("__") and not name.endswith("__"):
        cls = target if isinstance(target, type) else type(target)
        for klass in cls.__mro__:
            attr = getattr(target, f"_{klass.__name__.lstrip('_')}{name}", None)
            if attr is not None:
                break
    return attr


def is_callable(target: Any, name: str, internal: bool = False) -> bool:
    """
    Determina se o método `name` pode ser chamado em `target`.

    Args:
        target: Instância ou classe inspecionada.
        name: Nome do método.
        internal: `True` realiza a checagem "de dentro" do objeto, ignorando
            visibilidade; `False` exige também que o nome seja público.

    Returns:
        bool: `True` se o método existe, é chamável e visível.
    """
    if not isinstance(name, str) or not name:
        return False
    if not internal and not is_public(name):
        return False
    return callable(_resolve(target, name))
