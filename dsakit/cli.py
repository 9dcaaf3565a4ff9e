"""Interactive menu driving a stack from lines of input."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from typing import Iterable, Optional, Sequence, TextIO, Union

from dsakit.stacks import DEFAULT_CAPACITY, ArrayStack, LinkedStack, StackOverflow, StackUnderflow

Stack = Union[ArrayStack, LinkedStack]


@dataclass(frozen=True)
class _Dialect:
    menu: str
    choice_prompt: str
    push_prompt: str
    pushed: str
    overflow: str
    empty_display: str
    display_header: str
    underflow: str
    popped: str
    top: str
    invalid_choice: str
    invalid_item: str


_ARRAY_DIALECT = _Dialect(
    menu="\n1.PUSH\n2.POP\n3.DISPLAY\n4.PEEK\n5.EXIT\n",
    choice_prompt="Enter your choice: \n",
    push_prompt="Enter the item: ",
    pushed="The element is now inserted",
    overflow="Stack Overflow",
    empty_display="Stack is empty",
    display_header="The elements in the stack are: ",
    underflow="stack underflow",
    popped="The deleted element is: {}",
    top="{}",
    invalid_choice="Invalid choice........",
    invalid_item="Invalid item",
)

_LINKED_DIALECT = _Dialect(
    menu="\n1.Push\n2.Pop\n3.Display\n4.Peek\n5.Exit\n",
    choice_prompt="Enter your choice: ",
    push_prompt="Enter the data: ",
    pushed="",
    overflow="",
    empty_display="Stack is empty",
    display_header="",
    underflow="Stack is empty",
    popped="Deleted element is {}",
    top="Top element is {}",
    invalid_choice="Invalid choice",
    invalid_item="Invalid data",
)


def _parse_int(line: str) -> Optional[int]:
    try:
        return int(line.strip())
    except ValueError:
        return None


def run_stack_menu(stack: Stack, lines: Iterable[str], out: TextIO) -> None:
    """Run the push/pop/display/peek menu until choice 5 or end of input."""
    dialect = _ARRAY_DIALECT if isinstance(stack, ArrayStack) else _LINKED_DIALECT
    source = iter(lines)
    while True:
        out.write(dialect.menu)
        out.write(dialect.choice_prompt)
        line = next(source, None)
        if line is None:
            return
        choice = _parse_int(line)
        if choice == 1:
            out.write(dialect.push_prompt)
            item_line = next(source, None)
            if item_line is None:
                return
            item = _parse_int(item_line)
            if item is None:
                out.write(dialect.invalid_item)
                continue
            try:
                stack.push(item)
            except StackOverflow:
                out.write(dialect.overflow)
            else:
                out.write(dialect.pushed)
        elif choice == 2:
            try:
                out.write(dialect.popped.format(stack.pop()))
            except StackUnderflow:
                out.write(dialect.underflow)
        elif choice == 3:
            if stack.is_empty():
                out.write(dialect.empty_display)
            else:
                out.write(dialect.display_header)
                out.write("".join(f"{item}\n" for item in stack))
        elif choice == 4:
            try:
                out.write(dialect.top.format(stack.peek()))
            except StackUnderflow:
                out.write(dialect.underflow)
        elif choice == 5:
            return
        else:
            out.write(dialect.invalid_choice)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the stack menu on standard input and output."""
    parser = argparse.ArgumentParser(prog="dsakit", description="Stack menu.")
    parser.add_argument("--linked", action="store_true", help="use a linked stack")
    parser.add_argument(
        "--capacity",
        type=int,
        default=DEFAULT_CAPACITY,
        help="capacity of the array stack",
    )
    args = parser.parse_args(argv)
    if args.linked:
        stack: Stack = LinkedStack()
    else:
        if args.capacity < 1:
            parser.error("capacity must be at least 1")
        stack = ArrayStack(args.capacity)
    run_stack_menu(stack, sys.stdin, sys.stdout)
    return 0