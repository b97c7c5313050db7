import pytest

from core.exceptions import (
    BusinessRuleError,
    CyclicDependencyError,
    DuplicateTaskError,
    InvalidDurationError,
    UnknownDependencyError,
    ValidationError,
)
from core.models import Task
from core.services.scheduling import SchedulingEngine
from core.services.scheduling.graph import build_task_graph


def test_graph_indexes_tasks_and_successors(diamond_tasks):
    graph = build_task_graph(diamond_tasks)

    assert [t.id for t in graph.tasks] == ["A", "B", "C", "D"]
    assert graph.successors_of("A") == ("B", "C")
    assert graph.successors_of("D") == ()
    assert graph.predecessors_of("D") == ("B", "C")
    assert graph.final_task_ids() == ["D"]
    assert len(graph) == 4


def test_topological_order_puts_dependencies_first():
    tasks = [
        Task.create("D", 1, ["B", "C"]),
        Task.create("C", 1, ["A"]),
        Task.create("B", 1, ["A"]),
        Task.create("A", 1),
    ]
    order = build_task_graph(tasks).topo_order
    position = {task_id: idx for idx, task_id in enumerate(order)}

    assert sorted(order) == ["A", "B", "C", "D"]
    for task in tasks:
        for dep_id in task.dependencies:
            assert position[dep_id] < position[task.id]


def test_unknown_dependency_is_rejected():
    tasks = [Task.create("A", 1), Task.create("B", 2, ["A", "Z"])]

    with pytest.raises(UnknownDependencyError) as exc:
        build_task_graph(tasks)

    assert isinstance(exc.value, ValidationError)
    assert exc.value.code == "UNKNOWN_DEPENDENCY"
    assert exc.value.task_id == "B"
    assert exc.value.dependency_id == "Z"


def test_two_task_cycle_is_reported_with_its_path():
    tasks = [Task.create("A", 1, ["B"]), Task.create("B", 1, ["A"])]

    with pytest.raises(CyclicDependencyError) as exc:
        build_task_graph(tasks)

    assert isinstance(exc.value, BusinessRuleError)
    assert exc.value.code == "DEPENDENCY_CYCLE"
    assert exc.value.cycle == ["A", "B", "A"]


def test_cycle_path_excludes_tasks_leading_into_it():
    tasks = [
        Task.create("X", 1, ["A"]),
        Task.create("A", 1, ["B"]),
        Task.create("B", 1, ["C"]),
        Task.create("C", 1, ["A"]),
    ]

    with pytest.raises(CyclicDependencyError) as exc:
        build_task_graph(tasks)

    assert exc.value.cycle == ["A", "B", "C", "A"]
    assert "X" not in exc.value.cycle


def test_self_dependency_is_a_cycle():
    with pytest.raises(CyclicDependencyError) as exc:
        build_task_graph([Task.create("A", 3, ["A"])])
    assert exc.value.cycle == ["A", "A"]


@pytest.mark.parametrize("duration", [-1, 2.5, "3", None, True, float("nan")])
def test_invalid_durations_are_rejected(duration):
    with pytest.raises(InvalidDurationError) as exc:
        build_task_graph([Task.create("A", duration)])
    assert exc.value.code == "INVALID_DURATION"
    assert exc.value.task_id == "A"


def test_integral_float_duration_is_normalised():
    graph = build_task_graph([Task.create("A", 3.0)])
    assert graph.tasks_by_id["A"].duration == 3
    assert isinstance(graph.tasks_by_id["A"].duration, int)


def test_duplicate_ids_are_rejected():
    with pytest.raises(DuplicateTaskError) as exc:
        build_task_graph([Task.create("A", 1), Task.create("A", 2)])
    assert exc.value.code == "DUPLICATE_TASK"


def test_duration_is_checked_before_dependencies():
    with pytest.raises(InvalidDurationError):
        build_task_graph([Task.create("A", -4, ["missing"])])


def test_unknown_dependency_is_checked_before_cycles():
    tasks = [
        Task.create("A", 1, ["B"]),
        Task.create("B", 1, ["A"]),
        Task.create("C", 1, ["ghost"]),
    ]
    with pytest.raises(UnknownDependencyError):
        build_task_graph(tasks)


def test_repeated_dependency_ids_collapse_in_order():
    task = Task.create("C", 1, ["B", "A", "B"])
    assert task.dependencies == ("B", "A")


def test_mappings_are_accepted_as_input():
    graph = build_task_graph(
        [
            {"id": "A", "name": "Design", "duration": 2, "dependencies": []},
            {"id": "B", "name": "Build", "duration": 3, "dependencies": ["A"]},
        ]
    )
    assert graph.tasks_by_id["A"].name == "Design"
    assert graph.predecessors_of("B") == ("A",)


def test_mapping_without_duration_is_rejected():
    with pytest.raises(InvalidDurationError) as exc:
        SchedulingEngine().calculate([{"id": "A", "name": "Design", "dependencies": []}])
    assert exc.value.task_id == "A"


def test_string_dependency_is_one_id():
    task = Task.from_dict({"id": "C", "duration": 1, "dependencies": "AB"})
    assert task.dependencies == ("AB",)
    assert Task.create("C", 1, "AB").dependencies == ("AB",)

    tasks = [
        Task.create("A", 1),
        Task.create("B", 1),
        {"id": "C", "duration": 1, "dependencies": "AB"},
    ]
    with pytest.raises(UnknownDependencyError) as exc:
        build_task_graph(tasks)
    assert exc.value.dependency_id == "AB"


def test_graph_never_returns_caller_task_instances(chain_tasks):
    graph = build_task_graph(chain_tasks)
    for original in chain_tasks:
        assert graph.tasks_by_id[original.id] == original
        assert graph.tasks_by_id[original.id] is not original


def test_deep_chain_does_not_hit_recursion_limit():
    tasks = [Task.create("T0", 1)]
    tasks += [Task.create(f"T{i}", 1, [f"T{i - 1}"]) for i in range(1, 5000)]
    # Reverse so the walk has to descend the whole chain from the first root.
    graph = build_task_graph(reversed(tasks))
    assert graph.topo_order[0] == "T0"
    assert graph.topo_order[-1] == "T4999"
