# src/rad_object/core/errors.py
"""
Exceções canônicas do core do rad_object.

Este módulo define a hierarquia de exceções levantadas pelo objeto base,
pela auto-configuração e pelo localizador de classes.

Princípios fundamentais:
    - Exceções são tipadas e semânticas
    - Toda exceção do pacote herda de `RadObjectError`
    - Exceções também herdam do builtin equivalente (ValueError, LookupError)
      para permitir captura genérica por código cliente

Limites explícitos:
    - Métodos inexistentes continuam sinalizados por `AttributeError`
    - Uso de APIs deprecated emite `DeprecationWarning`, não exceção
    - `_stop()` encerra via `SystemExit`, não por esta hierarquia
"""


class RadObjectError(Exception):
    """Exceção base para todos os erros do rad_object."""


class AutoConfigError(RadObjectError, ValueError):
    """
    Exceção levantada quando uma diretiva de auto-configuração é inválida.

    Casos cobertos:
        - `_auto_config` não é uma sequência de nomes nem um mapping
        - a propriedade alvo (`_<nome>`) não existe na classe
        - diretiva `merge` sem valor de configuração mesclável

    Invariantes:
        - Nenhuma propriedade é atribuída parcialmente pela diretiva com erro
    """


class ClassNotFoundError(RadObjectError, LookupError):
    """
    Exceção levantada quando o localizador não consegue resolver uma classe.

    O nome pode ser um alias registrado, um alias escopado por tipo ou um
    caminho pontilhado (`pacote.modulo.Classe`).
    """
