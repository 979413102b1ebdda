"""A toy virtual machine with a mark-and-sweep garbage collector."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from enum import Enum
from typing import TextIO

STACK_MAX = 256
INITIAL_THRESHOLD = 5


class ObjectType(Enum):
    """Kinds of heap objects the VM can allocate."""

    INT = "INT"
    DOUBLE = "DOUBLE"
    PAIR = "PAIR"


@dataclass(eq=False)
class HeapObject:
    """A heap cell: an int, a double, or a pair of other cells."""

    type: ObjectType
    value: int | float | None = None
    head: HeapObject | None = None
    tail: HeapObject | None = None
    marked: bool = False


def format_object(obj: HeapObject, address: bool) -> str:
    """Render an object; with ``address`` the object's identity is appended."""
    if obj.type is ObjectType.INT:
        text = f"I-[{int(obj.value)}]"
    elif obj.type is ObjectType.DOUBLE:
        text = f"D-[{float(obj.value):.2f}]"
    else:
        return f"P-[{id(obj.head)}][{id(obj.tail)}]"
    return f"{text}({id(obj)})" if address else text


class VM:
    """A stack machine whose heap is collected once an allocation threshold is hit."""

    def __init__(self, out: TextIO | None = None) -> None:
        self._out = out
        self.num_objects = 0
        self.max_objects = INITIAL_THRESHOLD
        self._objects: list[HeapObject] = []
        self.stack: list[HeapObject] = []
        self._write("Virtual Machine ready.\n\n")

    def _write(self, text: str) -> None:
        (self._out if self._out is not None else sys.stdout).write(text)

    @property
    def heap(self) -> list[HeapObject]:
        """All live allocations, newest first."""
        return list(reversed(self._objects))

    def _allocate(self, obj_type: ObjectType) -> HeapObject:
        if self.num_objects == self.max_objects:
            self.collect()
        obj = HeapObject(obj_type)
        self._objects.append(obj)
        self.num_objects += 1
        return obj

    def push(self, obj: HeapObject) -> None:
        """Push an object onto the stack."""
        if len(self.stack) >= STACK_MAX:
            raise OverflowError("stack overflow")
        self.stack.append(obj)

    def pop(self) -> HeapObject:
        """Pop the top object off the stack."""
        if not self.stack:
            raise IndexError("stack underflow")
        return self.stack.pop()

    def push_int(self, value: int) -> None:
        obj = self._allocate(ObjectType.INT)
        obj.value = int(value)
        self.push(obj)

    def push_double(self, value: float) -> None:
        obj = self._allocate(ObjectType.DOUBLE)
        obj.value = float(value)
        self.push(obj)

    def push_pair(self) -> None:
        """Replace the two topmost objects with a pair holding them."""
        obj = self._allocate(ObjectType.PAIR)
        obj.tail = self.pop()
        obj.head = self.pop()
        self.push(obj)

    def _mark_all(self) -> None:
        pending = list(self.stack)
        while pending:
            obj = pending.pop()
            if obj.marked:
                continue
            obj.marked = True
            if obj.type is ObjectType.PAIR:
                pending.append(obj.head)
                pending.append(obj.tail)

    def _sweep(self) -> None:
        survivors = [obj for obj in self._objects if obj.marked]
        for obj in survivors:
            obj.marked = False
        self._objects = survivors

    def collect(self) -> None:
        """Free every object not reachable from the stack, reporting before and after."""
        self._write("Garbage collector activated.\n")
        self._write("Before:\n")
        self._write(self.format_stack())
        self._write(self.format_objects())
        self._mark_all()
        self._sweep()
        self.num_objects = 0
        self._write("After:\n")
        self._write(self.format_stack())
        self._write(self.format_objects())

    def format_stack(self) -> str:
        body = " -> ".join(format_object(obj, False) for obj in self.stack)
        return f"Stack status:\n{body}\n\n"

    def format_objects(self) -> str:
        lines = "".join(f"{format_object(obj, True)}\n" for obj in self.heap)
        return f"Objects status:\n{lines}\n"


def main(argv: list[str] | None = None) -> int:
    """Run the demonstration allocation sequence."""
    print(f"Activating threshold: {INITIAL_THRESHOLD}")
    vm = VM()
    vm.push_int(10)
    vm.push_double(3.23)
    vm.push_int(1)
    vm.push_double(2.24)
    vm.pop()
    vm.push_pair()
    vm.push_int(13)
    vm.push_int(24)
    vm.push_double(34.1)
    vm.push_pair()
    vm.pop()
    vm.push_int(2)
    vm.push_int(6)
    sys.stdout.write("Final:\n")
    sys.stdout.write(vm.format_stack())
    sys.stdout.write(vm.format_objects())
    return 0