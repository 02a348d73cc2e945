# tests/core/test_libraries.py
"""
Testes do localizador de classes (Libraries).

Os testes asseguram que:
- aliases globais e escopados por tipo são resolvidos nessa ordem
- caminhos pontilhados são importados, inclusive de classes aninhadas
- nomes não resolvidos levantam `ClassNotFoundError`
- `instance()` repassa objetos e constrói classes com as opções
"""

import pytest

from rad_object.core.errors import ClassNotFoundError

from tests.fixtures.objects.mock_objects import MockAdapter, MockConfigurable, MockOuter


def test_locate_passes_classes_through(isolated_libraries):
    assert isolated_libraries.locate(None, MockAdapter) is MockAdapter


def test_locate_by_dotted_path(isolated_libraries):
    dotted = "tests.fixtures.objects.mock_objects.MockAdapter"
    colon = "tests.fixtures.objects.mock_objects:MockAdapter"

    assert isolated_libraries.locate(None, dotted) is MockAdapter
    assert isolated_libraries.locate(None, colon) is MockAdapter


def test_locate_nested_class_by_dotted_path(isolated_libraries):
    dotted = "tests.fixtures.objects.mock_objects.MockOuter.Inner"
    colon = "tests.fixtures.objects.mock_objects:MockOuter.Inner"

    assert isolated_libraries.locate(None, dotted) is MockOuter.Inner
    assert isolated_libraries.locate(None, colon) is MockOuter.Inner

    inner = isolated_libraries.instance(None, dotted, {"endpoint": "mem://"})
    assert inner._endpoint == "mem://"


def test_scoped_alias_wins_over_global(isolated_libraries):
    isolated_libraries.add("memory", MockConfigurable)
    isolated_libraries.add("memory", MockAdapter, type_="adapter")

    assert isolated_libraries.locate("adapter", "memory") is MockAdapter
    assert isolated_libraries.locate("model", "memory") is MockConfigurable
    assert isolated_libraries.locate(None, "memory") is MockConfigurable


def test_alias_may_point_to_dotted_path(isolated_libraries):
    isolated_libraries.add("adapter", "tests.fixtures.objects.mock_objects.MockAdapter")

    assert isolated_libraries.locate(None, "adapter") is MockAdapter
    assert isolated_libraries.aliases() == ["adapter"]


def test_duplicate_alias_raises(isolated_libraries):
    isolated_libraries.add("memory", MockAdapter)

    with pytest.raises(ValueError):
        isolated_libraries.add("memory", MockConfigurable)

    isolated_libraries.remove("memory")
    isolated_libraries.add("memory", MockConfigurable)


@pytest.mark.parametrize(
    "name",
    [
        "NoSuchClass",
        "no_such_module.Thing",
        "tests.fixtures.objects.mock_objects.Missing",
        "tests.fixtures.objects.mock_objects.MockOuter.Missing",
        ".mock_objects.MockAdapter",
        "tests.fixtures.objects.mock_objects.BaseObject.__init__",
        None,
    ],
)
def test_unresolvable_names_raise(isolated_libraries, name):
    with pytest.raises(ClassNotFoundError):
        isolated_libraries.locate(None, name)


def test_instance_constructs_with_options(isolated_libraries):
    isolated_libraries.add("adapter", MockAdapter)

    adapter = isolated_libraries.instance(None, "adapter", {"endpoint": "mem://"})

    assert isinstance(adapter, MockAdapter)
    assert adapter._endpoint == "mem://"


def test_instance_passes_objects_through(isolated_libraries):
    adapter = MockAdapter()

    assert isolated_libraries.instance(None, adapter) is adapter
