"""Dependency graph construction and topological ordering."""

import logging
from typing import Dict, Iterable, List, Tuple

from ..errors import CyclicDependencyError, ValidationError
from ..models.task import WorkflowTask

logger = logging.getLogger(__name__)

_VISITING = 1
_DONE = 2


def build_dependency_graph(
    tasks: Iterable[WorkflowTask],
    strict: bool = False,
) -> Dict[str, Tuple[str, ...]]:
    """Map each task id to its declared dependencies.

    Dependencies that reference no task in the input are rejected with
    ``ValidationError`` when ``strict`` is set. Otherwise they are logged and
    dropped, i.e. treated as already satisfied.
    """
    tasks = list(tasks)
    known_ids = set()
    for task in tasks:
        if task.task_id in known_ids:
            raise ValidationError(f"Duplicate task id: {task.task_id}")
        known_ids.add(task.task_id)

    graph: Dict[str, Tuple[str, ...]] = {}
    for task in tasks:
        unknown = [dep_id for dep_id in task.depends_on if dep_id not in known_ids]
        if unknown:
            if strict:
                raise ValidationError(
                    f"Task {task.task_id} depends on unknown task(s): {', '.join(unknown)}"
                )
            logger.warning(
                "Task %s depends on unknown task(s) %s; assuming already satisfied",
                task.task_id, ', '.join(unknown),
            )
        graph[task.task_id] = tuple(dep_id for dep_id in task.depends_on if dep_id in known_ids)

    return graph


def topological_sort(graph: Dict[str, Tuple[str, ...]], task_ids: Iterable[str]) -> List[str]:
    """Order task ids so every task follows all of its dependencies.

    Depth-first post-order over ``task_ids`` in the given order, visiting each
    task's dependencies in declared order. Uses an explicit stack, so deep
    chains do not hit the recursion limit.
    """
    state: Dict[str, int] = {}
    order: List[str] = []

    for root in task_ids:
        if root in state:
            continue

        state[root] = _VISITING
        stack = [(root, iter(graph.get(root, ())))]

        while stack:
            node, deps = stack[-1]
            for dep_id in deps:
                dep_state = state.get(dep_id)
                if dep_state == _VISITING:
                    path = [n for n, _ in stack]
                    cycle = path[path.index(dep_id):] + [dep_id]
                    logger.error("Cyclic dependency detected: %s", ' -> '.join(cycle))
                    raise CyclicDependencyError(cycle)
                if dep_state is None:
                    state[dep_id] = _VISITING
                    stack.append((dep_id, iter(graph.get(dep_id, ()))))
                    break
            else:
                stack.pop()
                state[node] = _DONE
                order.append(node)

    return order
