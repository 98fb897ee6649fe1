import functools

import pytest

from lite_bundle.core.dependencies import dependencies_of
from lite_bundle.core.graph import build_dependency_graph, order_dependencies
from lite_bundle.errors import DependencyCycleError


def _assert_topological(graph, ordered):
    assert sorted(ordered) == sorted(graph)
    for key, deps in graph.items():
        for dep in deps:
            assert ordered.index(dep) < ordered.index(key), (dep, key)


def test_graph_covers_transitive_closure_once():
    edges = {
        "top": ["left", "right"],
        "left": ["base"],
        "right": ["base"],
        "base": [],
        "unrelated": [],
    }
    calls = []

    def extract(identifier):
        calls.append(identifier)
        return list(edges[identifier])

    graph = build_dependency_graph(["top", "left"], extract)

    assert graph == {"top": ["left", "right"], "left": ["base"], "right": ["base"], "base": []}
    assert sorted(calls) == ["base", "left", "right", "top"]


def test_graph_from_module_files(write_module, layout, cache):
    write_module("p", "module.exports = 1;\n")
    write_module("q", "var p = require('./p');\nmodule.exports = p + 1;\n")

    extract = functools.partial(dependencies_of, layout=layout, cache=cache)
    graph = build_dependency_graph(["p", "q"], extract)

    assert graph == {"p": [], "q": ["p"]}
    assert order_dependencies(graph) == ["p", "q"]


def test_ties_break_lexicographically():
    assert order_dependencies({"b": [], "a": []}) == ["a", "b"]
    assert order_dependencies({"a": [], "b": []}) == ["a", "b"]


def test_blocked_candidates_rotate_to_the_back():
    graph = {"a": ["c"], "b": [], "c": []}

    assert order_dependencies(graph) == ["b", "c", "a"]


@pytest.mark.parametrize(
    "graph",
    [
        {},
        {"a": []},
        {"a": ["b"], "b": ["c"], "c": []},
        {"z": [], "y": ["z"], "x": ["y", "z"], "w": ["x"]},
        {
            "map": ["_curry2", "_dispatchable", "_map"],
            "_curry2": ["_curry1", "_isPlaceholder"],
            "_curry1": ["_isPlaceholder"],
            "_isPlaceholder": [],
            "_dispatchable": ["_isArray"],
            "_isArray": [],
            "_map": [],
            "filter": ["_curry2", "_filter"],
            "_filter": [],
        },
    ],
)
def test_order_is_topological_and_deterministic(graph):
    ordered = order_dependencies(graph)

    _assert_topological(graph, ordered)
    assert order_dependencies(dict(reversed(list(graph.items())))) == ordered


def test_cycles_are_reported():
    with pytest.raises(DependencyCycleError) as excinfo:
        order_dependencies({"a": ["b"], "b": ["a"], "c": []})

    assert "a, b" in str(excinfo.value)


def test_self_dependency_is_a_cycle():
    with pytest.raises(DependencyCycleError):
        order_dependencies({"a": ["a"]})
