"""
Mock de objeto para inspeção de hierarquia de classes.

Expõe `_parents()` publicamente para que os testes consultem o cache de
ancestrais sem acessar API protegida.
"""

from __future__ import annotations

from rad_object.core.base_object import BaseObject


class MockObjectForParents(BaseObject):

    @classmethod
    def parents(cls):
        return cls._parents()


class MockChildForParents(MockObjectForParents):
    pass
