# tests/core/test_parents.py
"""
Testes do cache de ancestrais (ParentsCache) e de `BaseObject._parents()`.

Os testes asseguram que:
- a lista de ancestrais segue do pai mais próximo ao mais distante
- chamadas repetidas retornam valores iguais sem recomputar
- cada classe concreta possui sua própria entrada no cache
"""

from rad_object.core.base_object import BaseObject
from rad_object.core.parents import ParentsCache, class_parents

from tests.fixtures.objects.mock_object_for_parents import (
    MockChildForParents,
    MockObjectForParents,
)


def test_parents_of_mock_object():
    assert MockObjectForParents.parents() == [BaseObject]
    assert MockChildForParents.parents() == [MockObjectForParents, BaseObject]


def test_parents_are_computed_once_per_class(counting_lookup):
    class Counted(BaseObject):
        _parents_cache = ParentsCache(lookup=counting_lookup)

    class CountedChild(Counted):
        pass

    first = Counted._parents()
    second = Counted._parents()

    assert first == second == [BaseObject]
    assert counting_lookup.calls == [Counted]

    assert CountedChild._parents() == [Counted, BaseObject]
    assert counting_lookup.calls == [Counted, CountedChild]


def test_cached_list_cannot_be_mutated_by_callers(counting_lookup):
    cache = ParentsCache(lookup=counting_lookup)

    cache.get(MockChildForParents).clear()

    assert cache.get(MockChildForParents) == [MockObjectForParents, BaseObject]
    assert len(counting_lookup.calls) == 1


def test_clear_forces_recompute(counting_lookup):
    cache = ParentsCache(lookup=counting_lookup)
    cache.get(MockObjectForParents)
    assert MockObjectForParents in cache

    cache.clear()

    assert len(cache) == 0
    cache.get(MockObjectForParents)
    assert len(counting_lookup.calls) == 2


def test_class_parents_follows_mro_without_object():
    class A:
        pass

    class B(A):
        pass

    class C(A):
        pass

    class D(B, C):
        pass

    assert class_parents(D) == [B, C, A]
    assert class_parents(A) == []
