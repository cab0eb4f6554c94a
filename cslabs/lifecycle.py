"""Object lifecycle demonstration: construction, copying and release of named objects."""

from __future__ import annotations

import itertools
from typing import Callable, Optional

DEFAULT_NAME = "--default--"

_ids = itertools.count(1)


class NamedObject:
    """A named object that reports its own creation, copying and release."""

    def __init__(self, name: Optional[str] = None, log: Optional[Callable[[str], None]] = None):
        self._log = log
        self.id = next(_ids)
        self.released = False
        if name is None:
            self.name = DEFAULT_NAME
            self._emit("Default constructor:   ")
        else:
            self.name = name
            self._emit("Parameter constructor: ")

    def _emit(self, label: str) -> None:
        if self._log is not None:
            self._log(f"{label}{self}")

    def copy(self) -> "NamedObject":
        """Return a new object with the same name and a fresh id."""
        duplicate = NamedObject.__new__(NamedObject)
        duplicate._log = self._log
        duplicate.id = next(_ids)
        duplicate.released = False
        duplicate.name = self.name
        duplicate._emit("Copy constructor:      ")
        return duplicate

    def release(self) -> None:
        """End the object's life; releasing twice is an error."""
        if self.released:
            raise RuntimeError(f"object {self} was already released")
        self.released = True
        self._emit("Destructor:            ")

    def __enter__(self) -> "NamedObject":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.release()

    def __str__(self) -> str:
        return f'("{self.name}", {self.id})'


def compare_objects(first: NamedObject, second: NamedObject) -> int:
    """Compare two objects by name: -1, 0 or 1."""
    if first.name == second.name:
        return 0
    return -1 if first.name < second.name else 1


def max_object(first: NamedObject, second: NamedObject) -> NamedObject:
    """Return the object with the greater name, preferring the first on a tie."""
    return first if first.name >= second.name else second


def swap_names(first: NamedObject, second: NamedObject) -> None:
    """Exchange the names of two objects in place."""
    temporary = first.copy()
    first.name = second.name
    second.name = temporary.name
    temporary.release()


def main(argv=None) -> int:
    """Walk through the lifetimes of several objects, printing every event."""
    log = print
    static = NamedObject("I'm static, outside of main", log)

    print("--PART 1: Start of main--")
    print('--Defining o1, o2("Bob")--')
    o1 = NamedObject(log=log)
    o2 = NamedObject("Bob", log)

    print("--Defining o3(o2)--")
    o3 = o2.copy()

    print("--Defining array of 3 objects--")
    array = [NamedObject(log=log) for _ in range(3)]
    print()

    print("--PART 2: call function using call-by-value, return int--")
    first_arg, second_arg = o1.copy(), o3.copy()
    compare_objects(first_arg, second_arg)
    second_arg.release()
    first_arg.release()

    print("--call function using call-by-value, return object--")
    first_arg, second_arg = o1.copy(), o3.copy()
    result = max_object(first_arg, second_arg).copy()
    second_arg.release()
    first_arg.release()
    result.release()
    print()

    print(f"--PART 3:  o1: {o1}")
    print("  --entering new block, define new o1(Sally)--")
    with NamedObject("Sally", log) as inner:
        inner.name = "Sally"
        print(f"  o1: {inner}\to2: {o2}")
        print("  --call swap function using call-by-reference--")
        swap_names(inner, o2)
        print("  --were their values swapped?--")
        print(f"  o1: {inner}\to2: {o2}")
        print("  --leaving new block--")
    print(f"o1: {o1}")
    print()

    print("--PART 4: Bind another name: { ref = o1 } --")
    ref = o1
    del ref
    print("-- was anything constructed/destructed?--")
    print()

    print("--PART 5: create and release--")
    print("--create one object, then a list of 2 objects--")
    single = NamedObject(log=log)
    pair = [NamedObject(log=log) for _ in range(2)]
    print("--release that one object--")
    single.release()
    print("--release that list of 2 objects --")
    for obj in reversed(pair):
        obj.release()
    print()

    print("--LAST PART:  End of main--")
    for obj in reversed(array):
        obj.release()
    for obj in (o3, o2, o1):
        obj.release()
    static.release()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())