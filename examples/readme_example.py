from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from typemeta import (
    Instantiator,
    Pointer,
    any_settable,
    create_registry,
    deep_copy,
    record,
)


class TaskStatus(Enum):
    PENDING = "pending"
    COMPLETED = "completed"


@record(namespace="example.com/tasks")
@dataclass
class Task:
    description: str
    status: str = TaskStatus.PENDING.value


@record(namespace="example.com/tasks")
@dataclass
class TaskList:
    """Task list that can point at the list it was split from."""

    tasks: list[Task] = field(default_factory=list)
    parent: Pointer[TaskList] | None = None


def main() -> None:
    registry = create_registry()
    name = registry.insert(TaskList)
    registry.dump()

    # Build by name, as a deserializer would
    value = Instantiator(registry).make(name)
    todo = value.data
    todo.tasks.append(Task("write docs"))
    todo.parent = Pointer(TaskList.__type_descriptor__, todo)
    print(f"{name} settable: {any_settable(value)}")

    # Hand an isolated copy to a worker
    snapshot = deep_copy(todo)
    todo.tasks[0].status = TaskStatus.COMPLETED.value

    print(f"original: {todo.tasks[0].status}, snapshot: {snapshot.tasks[0].status}")
    print(f"snapshot cycle preserved: {snapshot.parent.value.parent is snapshot.parent}")


if __name__ == "__main__":
    main()
