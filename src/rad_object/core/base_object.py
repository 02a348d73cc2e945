# src/rad_object/core/base_object.py
"""
Classe base da hierarquia do rad_object.

Este módulo define o `BaseObject`, do qual as classes concretas herdam as
convenções de estrutura do framework:

    - **Construtor universal**: toda classe recebe exatamente um parâmetro
      (`config`), sempre um mapping. As opções ficam em `self._config`.
    - **Inicialização / auto-configuração**: após o construtor, `_init()` é
      chamado, mantendo lógica custosa ou difícil de testar fora do
      construtor. Pode ser desligado com ``{"init": False}``. O inicializador
      também atribui propriedades automaticamente a partir de `_auto_config`
      (ver `rad_object.core.auto_config`).
    - **Testes / diversos**: `set_state()` reconstrói um objeto a partir de um
      mapping de propriedades; `_stop()` substitui `sys.exit()` e pode ser
      sobrescrito em testes.

Colaboradores injetáveis (atributos de classe):
    - `_libraries`: localizador usado por `_instance()`
    - `_filters`: registro de filtros usado pela API deprecated
    - `_parents_cache`: cache de ancestrais usado por `_parents()`

Exemplo:
    ```
    class Bar(BaseObject):
        _auto_config = ["foo"]
        _foo = None

    Bar({"foo": "value"})._foo  # "value"
    ```

    Se `_foo` fosse um dict, ``_auto_config = {"foo": "merge"}`` mesclaria a
    opção `foo` com o default de `_foo`.
"""

from __future__ import annotations

import logging
import sys
import warnings
from types import MappingProxyType
from typing import Any, Callable, ClassVar, Dict, Iterable, List, Mapping, Optional, Sequence, Union

from rad_object.aop.filters import Filter, Filters, filters as default_filters

from .auto_config import apply_auto_config, array_union, isolate_defaults
from .inspector import is_callable
from .libraries import Libraries, libraries as default_libraries
from .parents import ParentsCache, parents_cache as default_parents_cache

logger = logging.getLogger(__name__)


class BaseObject:
    """Objeto base configurável: construtor universal + auto-configuração."""

    _auto_config: ClassVar[Union[Sequence[str], Mapping[Any, Any]]] = ()
    _classes: ClassVar[Mapping[str, Any]] = MappingProxyType({})

    _libraries: ClassVar[Libraries] = default_libraries
    _filters: ClassVar[Filters] = default_filters
    _parents_cache: ClassVar[ParentsCache] = default_parents_cache

    def __init__(self, config: Optional[Mapping[str, Any]] = None):
        """
        Armazena `config` (sobre os defaults ``{"init": True}``) e, salvo
        ``init`` falso, executa `_init()`.

        Opções de `config` têm prioridade sobre os defaults. Defaults
        dict/list das propriedades auto-configuradas são copiados para a
        instância mesmo sem `_init()`.
        """
        defaults = {"init": True}
        self._config: Dict[str, Any] = array_union(dict(config or {}), defaults)
        isolate_defaults(self)

        if self._config["init"]:
            self._init()

    def _init(self) -> None:
        """
        Inicializador chamado pelo construtor, salvo ``{"init": False}``.

        Útil em testes, onde o objeto precisa ser manipulado em estado não
        inicializado. Percorre `_auto_config` atribuindo opções de
        configuração às propriedades correspondentes. Subclasses que
        sobrescrevem este método devem chamar ``super()._init()``.
        """
        apply_auto_config(self, self._config)

    def invoke_method(self, method: str, params: Sequence[Any] = ()) -> Any:
        """
        Chama `method` neste objeto com os parâmetros posicionais `params`.

        Raises:
            AttributeError: Se o método não existir.
        """
        return getattr(self, method)(*params)

    @classmethod
    def set_state(cls, data: Mapping[str, Any]) -> "BaseObject":
        """
        Re-instancia a classe com as propriedades de `data` (públicas ou
        protegidas) atribuídas após a construção default.
        """
        obj = cls()
        for name, value in data.items():
            setattr(obj, name, value)
        return obj

    def export_state(self) -> Dict[str, Any]:
        """Cópia rasa das propriedades da instância, aceita por `set_state()`."""
        return dict(vars(self))

    def responds_to(self, method: str, internal: bool = False) -> bool:
        """
        Determina se o método pode ser chamado.

        `internal=True` checa "de dentro" da classe; `False` exige também
        visibilidade pública.
        """
        return is_callable(self, method, internal)

    def _instance(self, name: Any, options: Optional[Mapping[str, Any]] = None) -> Any:
        """
        Retorna uma instância de `name` construída com `options`.

        `name` pode ser uma chave de `_classes`, um caminho pontilhado, uma
        classe ou um objeto (devolvido como está). Tipicamente usado em
        `_init()` para criar dependências.
        """
        if isinstance(name, str) and name in self._classes:
            name = self._classes[name]
        return self._libraries.instance(None, name, options or {})

    @classmethod
    def _parents(cls) -> List[type]:
        return cls._parents_cache.get(cls)

    def _stop(self, status: Union[int, str] = 0) -> None:
        """Encerra o processo. Sobrescrito em testes."""
        logger.debug("%s stopping with status %r", type(self).__qualname__, status)
        sys.exit(status)

    # ------------------------------------------------------------------
    # Deprecated / BC
    # ------------------------------------------------------------------

    def apply_filter(
        self,
        method: Union[str, Iterable[str], bool],
        filter: Union[Filter, bool, None] = None,
    ) -> None:
        """
        Aplica um filtro a método(s) desta instância.

        `method=False` remove todos os filtros do objeto; `filter=False`
        remove os filtros dos métodos informados.

        Deprecated: use `Filters.apply()` e `Filters.clear()`.
        """
        warnings.warn(
            "`BaseObject.apply_filter()` has been deprecated in favor of "
            "`Filters.apply()` and `Filters.clear()`.",
            DeprecationWarning,
            stacklevel=2,
        )

        if method is False:
            self._filters.clear(self)
            return

        methods = [method] if isinstance(method, str) else list(method)
        for name in methods:
            if filter is False:
                self._filters.clear(self, name)
            else:
                self._filters.apply(self, name, filter)

    def _filter(
        self,
        method: str,
        params: Any,
        callback: Callable[[Any], Any],
        filters: Iterable[Filter] = (),
    ) -> Any:
        """
        Executa `callback` envolvido pelos filtros do método.

        `method` aceita ``"Classe::metodo"``, ``"Classe.metodo"`` ou o nome
        simples. Filtros de `filters` são aplicados ao registro antes da
        execução (e lá permanecem).

        Deprecated: use `Filters.run()` e `Filters.apply()`.
        """
        warnings.warn(
            "`BaseObject._filter()` has been deprecated in favor of "
            "`Filters.run()` and `Filters.apply()`.",
            DeprecationWarning,
            stacklevel=2,
        )

        name = method.rpartition("::")[2].rpartition(".")[2]

        for extra in filters:
            self._filters.apply(self, name, extra)
        return self._filters.run(self, name, params, callback)
