# src/rad_object/core/auto_config.py
"""
Auto-configuração de objetos a partir do mapping de construção.

Este módulo implementa o mecanismo que copia ou mescla opções recebidas
pelo construtor universal em propriedades protegidas (`_<nome>`) da
instância, conforme as diretivas declaradas em `_auto_config`.

Formas aceitas de `_auto_config`:
    - sequência de nomes: ``["foo", "bar"]``
      (cada item vira a diretiva ``índice -> nome``)
    - mapping: ``{"foo": "merge", "bar": "baz"}``
      (``"merge"`` mescla; qualquer outro valor nomeia a opção de origem
      e a propriedade alvo)

Política de disparo (por diretiva ``(key, flag)``):
    - "definido": chave presente e valor diferente de None
    - dispara se ``config[key]`` OU ``config[flag]`` estiver definido
    - ``flag == "merge"`` → ``_<key> = array_union(config[key], _<key>)``
    - caso contrário → ``_<flag> = config.get(flag)``

A dupla checagem de chaves é o que faz a forma de sequência funcionar:
a chave é o índice posicional, e quem casa com a configuração é o nome.
A assimetria entre os dois caminhos (merge usa `key`, atribuição usa
`flag`) é preservada exatamente.

Decisões arquiteturais:
    - Diretivas são compiladas uma vez por declaração de classe em uma
      tabela de setters (closures), sem reflexão string → campo por chamada
    - A existência da propriedade alvo é verificada no momento da atribuição
    - Defaults dict/list das propriedades alvo são copiados por instância

Limites explícitos:
    - Não valida o tipo dos valores atribuídos (apenas operandos de merge)
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from copy import copy
from dataclasses import dataclass
from enum import Enum
from threading import Lock
import logging
from typing import Any, Callable, Dict, Hashable, List, Tuple

from .errors import AutoConfigError

logger = logging.getLogger(__name__)

MERGE = "merge"


class AutoConfigEffect(str, Enum):
    """
    Efeito de uma diretiva de auto-configuração.

    - ASSIGN: atribuição direta da opção à propriedade
    - MERGE: união da opção (mapping) com o valor default da propriedade

    Como mapping de `_auto_config`, ``{"foo": AutoConfigEffect.ASSIGN}`` é
    equivalente a ``{"foo": "foo"}``.
    """
    ASSIGN = "assign"
    MERGE = "merge"


@dataclass(frozen=True)
class AutoConfigDirective:
    """Diretiva normalizada: chave declarada, flag bruta, efeito e propriedade alvo."""

    key: Hashable
    flag: Any
    effect: AutoConfigEffect
    target: str

    def fires(self, config: Mapping) -> bool:
        return _is_set(config, self.key) or _is_set(config, self.flag)


Setter = Callable[[Any, Mapping], None]

_compiled: Dict[type, Tuple[Any, Tuple[Tuple[AutoConfigDirective, Setter], ...]]] = {}
_compiled_lock = Lock()


def _is_set(config: Mapping, key: Any) -> bool:
    try:
        return config.get(key) is not None
    except TypeError:
        # chave não hasheável nunca está no mapping
        return False


def array_union(left: Any, right: Any) -> Any:
    """
    União rasa em que o operando esquerdo vence (`left + right`).

    - mappings: todas as chaves de `left` (na ordem de `left`), seguidas das
      chaves de `right` ausentes em `left`
    - sequências: itens de `left` seguidos dos itens de `right` cujo índice
      excede o tamanho de `left`

    Nenhum operando é mutado.

    Raises:
        AutoConfigError: Se os operandos não forem ambos mappings ou ambos listas.
    """
    if isinstance(left, Mapping) and isinstance(right, Mapping):
        result = dict(left)
        for key, value in right.items():
            result.setdefault(key, value)
        return result

    if _is_list_like(left) and _is_list_like(right):
        return list(left) + list(right)[len(left):]

    raise AutoConfigError(
        f"Merge requer dois mappings ou duas listas, recebido: "
        f"{type(left).__name__} + {type(right).__name__}"
    )


def _is_list_like(value: Any) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes))


def normalize_directives(spec: Any) -> List[Tuple[Hashable, Any]]:
    """Converte `_auto_config` em pares ``(key, flag)`` na ordem de declaração."""
    if spec is None:
        return []
    if isinstance(spec, Mapping):
        pairs = []
        for key, flag in spec.items():
            if flag is AutoConfigEffect.ASSIGN:
                flag = key
            pairs.append((key, flag))
        return pairs
    if _is_list_like(spec):
        return list(enumerate(spec))
    raise AutoConfigError(
        f"_auto_config deve ser sequência de nomes ou mapping, recebido: {type(spec).__name__}"
    )


def _build(key: Hashable, flag: Any) -> Tuple[AutoConfigDirective, Setter]:
    if flag == MERGE:
        directive = AutoConfigDirective(key, flag, AutoConfigEffect.MERGE, f"_{key}")
        return directive, _merge_setter(directive)

    if not isinstance(flag, str) or not flag:
        raise AutoConfigError(f"Diretiva inválida para '{key}': {flag!r}")
    directive = AutoConfigDirective(key, flag, AutoConfigEffect.ASSIGN, f"_{flag}")
    return directive, _assign_setter(directive)


def _require_target(obj: Any, directive: AutoConfigDirective) -> None:
    if not hasattr(obj, directive.target):
        raise AutoConfigError(
            f"{type(obj).__name__} não define a propriedade '{directive.target}' "
            f"exigida pela diretiva '{directive.key}'"
        )


def _merge_setter(directive: AutoConfigDirective) -> Setter:
    key, target = directive.key, directive.target

    def merge(obj: Any, config: Mapping) -> None:
        _require_target(obj, directive)
        if not _is_set(config, key):
            raise AutoConfigError(f"Diretiva merge '{key}' sem valor em config")
        setattr(obj, target, array_union(config[key], getattr(obj, target)))

    return merge


def _assign_setter(directive: AutoConfigDirective) -> Setter:
    source, target = directive.flag, directive.target

    def assign(obj: Any, config: Mapping) -> None:
        _require_target(obj, directive)
        setattr(obj, target, config.get(source))

    return assign


def compile_directives(spec: Any) -> Tuple[Tuple[AutoConfigDirective, Setter], ...]:
    """Compila uma declaração `_auto_config` na tabela ordenada de setters."""
    return tuple(_build(key, flag) for key, flag in normalize_directives(spec))


def directives_for(cls: type) -> Tuple[Tuple[AutoConfigDirective, Setter], ...]:
    """
    Retorna a tabela de diretivas da classe.

    A tabela é recompilada quando o objeto `_auto_config` da classe deixa de
    ser o mesmo que a originou (ex.: reatribuído após a primeira instância).
    """
    spec = getattr(cls, "_auto_config", None)
    cached = _compiled.get(cls)
    if cached is not None and cached[0] is spec:
        return cached[1]

    table = compile_directives(spec)
    with _compiled_lock:
        _compiled[cls] = (spec, table)

    logger.debug(
        "Compiled %d auto-config directive(s) for %s", len(table), cls.__qualname__
    )
    return table


def _table_for(obj: Any) -> Tuple[Tuple[AutoConfigDirective, Setter], ...]:
    if "_auto_config" in vars(obj):
        return compile_directives(obj._auto_config)
    return directives_for(type(obj))


def isolate_defaults(obj: Any) -> None:
    """
    Copia para a instância os defaults mutáveis (dict/list) das propriedades
    alvo, para que nenhuma instância altere o default declarado na classe.

    Propriedades já presentes no `__dict__` da instância não são tocadas.
    """
    own = vars(obj)
    for directive, _ in _table_for(obj):
        if directive.target in own:
            continue
        value = getattr(obj, directive.target, None)
        if isinstance(value, (dict, list)):
            setattr(obj, directive.target, copy(value))


def apply_auto_config(obj: Any, config: Mapping) -> None:
    """
    Executa as diretivas de auto-configuração de `obj` contra `config`.

    Usa a tabela compilada da classe, exceto quando a instância sobrescreve
    `_auto_config` no próprio `__dict__` (compilada sob demanda, sem cache).
    """
    isolate_defaults(obj)

    for directive, setter in _table_for(obj):
        if directive.fires(config):
            setter(obj, config)
