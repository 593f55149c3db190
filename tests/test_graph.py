"""Tests for dependency graph building and topological ordering."""

import logging

import pytest

from cultivation_scheduler.engine.graph import build_dependency_graph, topological_sort
from cultivation_scheduler.errors import CyclicDependencyError, ValidationError

from conftest import make_task


class TestBuildDependencyGraph:
    """Task Graph Builder."""

    def test_maps_each_task_to_its_dependencies(self):
        tasks = [make_task('A'), make_task('B', depends_on=['A']), make_task('C', depends_on=['A', 'B'])]

        graph = build_dependency_graph(tasks)

        assert graph == {'A': (), 'B': ('A',), 'C': ('A', 'B')}

    def test_duplicate_task_ids_rejected(self):
        with pytest.raises(ValidationError, match="Duplicate task id: A"):
            build_dependency_graph([make_task('A'), make_task('A')])

    def test_unknown_dependency_dropped_and_logged(self, caplog):
        tasks = [make_task('A', depends_on=['ghost'])]

        with caplog.at_level(logging.WARNING):
            graph = build_dependency_graph(tasks)

        assert graph == {'A': ()}
        assert "ghost" in caplog.text
        assert "assuming already satisfied" in caplog.text

    def test_unknown_dependency_rejected_when_strict(self):
        tasks = [make_task('A'), make_task('B', depends_on=['A', 'ghost'])]

        with pytest.raises(ValidationError, match="B depends on unknown task"):
            build_dependency_graph(tasks, strict=True)

    def test_empty_input(self):
        assert build_dependency_graph([]) == {}


class TestTopologicalSort:
    """Topological Sequencer."""

    def test_dependencies_precede_dependents(self):
        graph = {'C': ('B',), 'B': ('A',), 'A': ()}

        assert topological_sort(graph, ['C', 'B', 'A']) == ['A', 'B', 'C']

    def test_independent_tasks_keep_input_order(self):
        graph = {'A': (), 'B': ('A',), 'C': ('A',), 'D': ()}

        assert topological_sort(graph, ['A', 'B', 'C', 'D']) == ['A', 'B', 'C', 'D']
        assert topological_sort(graph, ['D', 'C', 'B', 'A']) == ['D', 'A', 'C', 'B']

    def test_dependencies_visited_in_declared_order(self):
        graph = {'Z': ('Y', 'X'), 'X': (), 'Y': ()}

        assert topological_sort(graph, ['Z', 'X', 'Y']) == ['Y', 'X', 'Z']

    def test_two_task_cycle_raises(self):
        graph = {'A': ('B',), 'B': ('A',)}

        with pytest.raises(CyclicDependencyError) as exc_info:
            topological_sort(graph, ['A', 'B'])

        assert exc_info.value.cycle == ['A', 'B', 'A']
        assert "A -> B -> A" in str(exc_info.value)

    def test_self_dependency_raises(self):
        with pytest.raises(CyclicDependencyError) as exc_info:
            topological_sort({'A': ('A',)}, ['A'])

        assert exc_info.value.cycle == ['A', 'A']

    def test_cycle_reported_without_unrelated_prefix(self):
        graph = {'root': ('X',), 'X': ('Y',), 'Y': ('Z',), 'Z': ('X',)}

        with pytest.raises(CyclicDependencyError) as exc_info:
            topological_sort(graph, ['root', 'X', 'Y', 'Z'])

        assert exc_info.value.cycle == ['X', 'Y', 'Z', 'X']

    def test_long_chain_does_not_hit_recursion_limit(self):
        size = 5000
        graph = {f"t{i}": ((f"t{i - 1}",) if i else ()) for i in range(size)}

        order = topological_sort(graph, [f"t{i}" for i in reversed(range(size))])

        assert order == [f"t{i}" for i in range(size)]
