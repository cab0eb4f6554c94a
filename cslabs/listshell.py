"""Interactive menu that exercises one linked list and one iterator over it."""

from __future__ import annotations

import re
import sys
from typing import Callable, Iterable, Iterator, Optional, Sequence, TextIO

from cslabs.bank import choose_option as _show_menu
from cslabs.linkedlist import LinkedList, ListIterator, format_list

OPTIONS = (
    "Quit",
    "New List",
    "Show List elements",
    "Set ListItr with first()",
    "Set ListItr with find()",
    "Set ListItr with last()",
    "Move ListItr forward",
    "Move ListItr backward",
    "Retrieve element at ListItr",
    "Insert element before",
    "Insert element after",
    "Insert element at tail",
    "Remove element",
    "Cardinality (size)",
    "Copy list w/copy constructor",
    "Copy list with operator=",
    "Make list empty",
)

BANNER = (
    "--------------------------------------------------\n"
    "\tThis test harness operates with one List\n"
    "\tobject and one ListItr object.\n"
    "\n"
    "\tUse the menu options to manipulate these\n"
    "\tobjects.\n"
)

_NO_LIST = "\n\tCreate a List first.\n"
_NO_ITERATOR = "\n\tCreate a ListItr first.\n"
_NO_BOTH = "\n\tCreate a List and ListItr first.\n"
_NOT_INTEGER = "\tPlease enter an integer.\n"
_FORWARD_HEADING = "\nThe elements in forward order: \n"


def choose_option(options: Sequence[str], tokens: Iterable[str], out: TextIO) -> int:
    """Show the menu and read tokens until a valid 1-based choice is given."""
    return _show_menu(options, tokens, out)


def _starts_with_digit(token: str) -> bool:
    return bool(token) and token[0] in "0123456789"


def _leading_int(token: str) -> int:
    match = re.match(r"\d+", token)
    return int(match.group()) if match else 0


def _is_yes(token: str) -> bool:
    return bool(token) and token[0] in "yY"


class ListShell:
    """A menu-driven session over one list and one iterator, reading whitespace tokens."""

    def __init__(self, tokens: Iterable[str], out: TextIO):
        self._tokens: Iterator[str] = iter(tokens)
        self._out = out
        self.list: Optional[LinkedList] = None
        self.iterator: Optional[ListIterator] = None
        self._actions: dict[int, Callable[[], bool]] = {
            1: self._quit,
            2: self._new_list,
            3: self._show,
            4: self._set_first,
            5: self._set_find,
            6: self._set_last,
            7: self._move_forward,
            8: self._move_backward,
            9: self._retrieve,
            10: self._insert_before,
            11: self._insert_after,
            12: self._insert_at_tail,
            13: self._remove,
            14: self._size,
            15: self._copy,
            16: self._assign,
            17: self._make_empty,
        }

    def run(self) -> Optional[LinkedList]:
        """Run until the user quits or input ends; return the list in use."""
        self._write(BANNER)
        try:
            while True:
                command = choose_option(OPTIONS, self._tokens, self._out)
                if self._actions[command]():
                    break
        except EOFError:
            pass
        return self.list

    def _write(self, text: str) -> None:
        self._out.write(text)

    def _read(self) -> str:
        try:
            return next(self._tokens)
        except StopIteration:
            raise EOFError("input ended") from None

    def _read_integer(self) -> Optional[int]:
        response = self._read()
        if _starts_with_digit(response):
            return _leading_int(response)
        self._write(_NOT_INTEGER)
        return None

    def _print_forward(self) -> None:
        self._write(_FORWARD_HEADING)
        self._write(format_list(self.list, True))

    def _quit(self) -> bool:
        self._write("\tDo you really want to quit? (y/n) > ")
        return _is_yes(self._read())

    def _new_list(self) -> bool:
        self.list = LinkedList()
        self.iterator = None
        self._write("\tYou have created an empty list\n")
        self._write("\tDo you want to initialize it with elements? (y/n) > ")
        if not _is_yes(self._read()):
            return False
        self._write("\t\tEnter elements one by one as integers.\n")
        self._write("\t\tAny non-numeric character, e.g. #, will terminate input\n")
        self._write("\tEnter first element: ")
        response = self._read()
        while _starts_with_digit(response):
            self.list.append(_leading_int(response))
            self._write("\tEnter next element: ")
            response = self._read()
        self._print_forward()
        return False

    def _show(self) -> bool:
        if self.list is None:
            self._write(_NO_LIST)
            return False
        self._write("\tPrint the list forwards or backwards? (f/b) > ")
        response = self._read()
        if response[:1] in ("b", "B"):
            self._write("\nThe elements in reverse order:\n")
            self._write(format_list(self.list, False))
        else:
            self._write("\nThe elements in forward order:\n")
            self._write(format_list(self.list, True))
        return False

    def _set_first(self) -> bool:
        if self.list is None:
            self._write(_NO_LIST)
            return False
        self._write("\tSetting the ListItr to the first element...\n")
        self.iterator = self.list.first()
        return False

    def _set_find(self) -> bool:
        if self.list is None:
            self._write(_NO_LIST)
            return False
        self._write("\tEnter element to find: ")
        element = self._read_integer()
        if element is not None:
            self._write(f"\tSetting the ListItr to find({element})...\n")
            self.iterator = self.list.find(element)
        return False

    def _set_last(self) -> bool:
        if self.list is None:
            self._write(_NO_LIST)
            return False
        self._write("\tSetting the ListItr to the last element...\n")
        self.iterator = self.list.last()
        return False

    def _move_forward(self) -> bool:
        if self.iterator is None:
            self._write(_NO_ITERATOR)
            return False
        self._write("\tMoving the ListItr forwards...\n")
        self.iterator.move_forward()
        return False

    def _move_backward(self) -> bool:
        if self.iterator is None:
            self._write(_NO_ITERATOR)
            return False
        self._write("\tMoving the ListItr backwards...\n")
        self.iterator.move_backward()
        return False

    def _retrieve(self) -> bool:
        if self.iterator is None:
            self._write(_NO_ITERATOR)
        elif self.iterator.is_past_beginning():
            self._write("\tThe ListItr is past the beginning.\n")
        elif self.iterator.is_past_end():
            self._write("\tThe ListItr is past the end.\n")
        else:
            self._write(f"\tElement retrieved: {self.iterator.retrieve()}\n")
        return False

    def _insert_before(self) -> bool:
        if self.list is None or self.iterator is None:
            self._write(_NO_BOTH)
            return False
        if self.iterator.is_past_beginning():
            self._write("\n\tCannot insert past the beginning of the list.\n")
            return False
        self._write("\tEnter element to insert: ")
        element = self._read_integer()
        if element is None:
            return False
        self.list.insert_before(element, self.iterator)
        self._write(f"\tInserting {element} before the current ListItr\n")
        self._print_forward()
        return False

    def _insert_after(self) -> bool:
        if self.list is None or self.iterator is None:
            self._write(_NO_BOTH)
            return False
        if self.iterator.is_past_end():
            self._write("\n\tCannot insert past the end of the list.\n")
            return False
        self._write("\tEnter element to insert: ")
        element = self._read_integer()
        if element is None:
            return False
        self.list.insert_after(element, self.iterator)
        self._write(f"\tInserting {element} after the current ListItr\n")
        self._print_forward()
        return False

    def _insert_at_tail(self) -> bool:
        if self.list is None:
            self._write(_NO_LIST)
            return False
        self._write("\tEnter element to insert: ")
        element = self._read_integer()
        if element is None:
            return False
        self.list.append(element)
        self._write(f"\tInserting {element} at the tail of the list\n")
        self._print_forward()
        return False

    def _remove(self) -> bool:
        if self.list is None:
            self._write(_NO_LIST)
            return False
        self._write("\tEnter element to remove: ")
        element = self._read_integer()
        if element is None:
            return False
        self.list.remove(element)
        self._write(f"\tRemoving {element} from list\n")
        self._print_forward()
        return False

    def _size(self) -> bool:
        if self.list is None:
            self._write(_NO_LIST)
            return False
        self._write(f"\tSize of list: {len(self.list)}\n")
        return False

    def _replace_with_copy(self) -> None:
        old = self.list
        self.list = old.copy()
        old.clear()
        self._write("The new list is (forward): " + format_list(self.list, True))
        self._write("The new list is (backward): " + format_list(self.list, False))
        self._write("The old list was made empty (forward): " + format_list(old, True))
        self._write("The old list was made empty (backward): " + format_list(old, False))
        self._write("The old list should be destroyed now.\n")
        self.iterator = None

    def _copy(self) -> bool:
        if self.list is None:
            self._write(_NO_LIST)
            return False
        self._replace_with_copy()
        return False

    def _assign(self) -> bool:
        if self.list is None:
            self._write(_NO_LIST)
            return False
        self._replace_with_copy()
        return False

    def _make_empty(self) -> bool:
        if self.list is None:
            self._write(_NO_LIST)
            return False
        self._write("The list is (forward): " + format_list(self.list, True))
        self._write("The list is (backward): " + format_list(self.list, False))
        self.list.clear()
        self.iterator = None
        self._write("The list was made empty (forward): " + format_list(self.list, True))
        self._write("The list was made empty (backward): " + format_list(self.list, False))
        return False


def _stdin_tokens() -> Iterator[str]:
    for line in sys.stdin:
        yield from line.split()


def main(argv=None) -> int:
    """Run the list menu on standard input and output."""
    ListShell(_stdin_tokens(), sys.stdout).run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())