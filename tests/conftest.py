# tests/conftest.py
"""
Fixtures compartilhados para testes do rad_object.

Este módulo define fixtures reutilizáveis que fornecem:
- registros isolados (Filters, Libraries, ParentsCache) por teste
- uma primitiva de lookup de ancestrais instrumentada com contador

Decisões arquiteturais:
    - Registros de processo não são mutados pelos testes que usam as
      fixtures isoladas
    - Imports do core são realizados de forma lazy para
      melhorar a clareza de erros durante falhas

Invariantes:
    - Nenhuma fixture realiza I/O
    - Todas as fixtures são determinísticas
"""

import pytest


# =====================================================
# Isolated registries
# =====================================================

@pytest.fixture
def isolated_filters():
    """Registro de filtros novo, sem estado compartilhado com o processo."""
    from rad_object.aop.filters import Filters
    return Filters()


@pytest.fixture
def isolated_libraries():
    """Localizador novo, sem aliases registrados."""
    from rad_object.core.libraries import Libraries
    return Libraries()


@pytest.fixture
def counting_lookup():
    """
    Primitiva de lookup de ancestrais que conta suas chamadas.

    Returns:
        callable: `lookup(cls)` com atributo `calls` (lista de classes consultadas).
    """
    from rad_object.core.parents import class_parents

    def lookup(cls):
        lookup.calls.append(cls)
        return class_parents(cls)

    lookup.calls = []
    return lookup
