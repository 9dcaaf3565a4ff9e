import io

import pytest

from dsakit.cli import main, run_stack_menu
from dsakit.stacks import DEFAULT_CAPACITY, ArrayStack, LinkedStack


def run(stack, lines):
    out = io.StringIO()
    run_stack_menu(stack, lines, out)
    return out.getvalue()


def test_array_push_display_pop():
    stack = ArrayStack()
    text = run(stack, ["1", "1", "1", "2", "3", "2", "5"])
    assert text.count("The element is now inserted") == 2
    assert "The elements in the stack are: 2\n1\n" in text
    assert "The deleted element is: 2" in text
    assert list(stack) == [1]


def test_array_overflow_message():
    stack = ArrayStack()
    lines = []
    for i in range(DEFAULT_CAPACITY + 1):
        lines += ["1", str(i)]
    text = run(stack, lines + ["5"])
    assert text.count("Stack Overflow") == 1
    assert len(stack) == DEFAULT_CAPACITY


def test_array_underflow_and_empty():
    text = run(ArrayStack(), ["2", "4", "3", "5"])
    assert text.count("stack underflow") == 2
    assert "Stack is empty" in text


def test_linked_messages():
    stack = LinkedStack()
    text = run(stack, ["1", "4", "4", "2", "2", "5"])
    assert "Enter the data: " in text
    assert "Top element is 4" in text
    assert "Deleted element is 4" in text
    assert "Stack is empty" in text
    assert stack.is_empty()


def test_invalid_choice():
    text = run(LinkedStack(), ["9", "abc", "5"])
    assert text.count("Invalid choice") == 2


def test_exit_stops_reading():
    stack = ArrayStack()
    run(stack, ["5", "1", "3"])
    assert stack.is_empty()


def test_end_of_input_stops():
    stack = LinkedStack()
    text = run(stack, ["1"])
    assert text.endswith("Enter the data: ")
    assert stack.is_empty()


def test_main_linked(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("1\n8\n4\n5\n"))
    assert main(["--linked"]) == 0
    assert "Top element is 8" in capsys.readouterr().out


def test_main_array_capacity(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("1\n1\n1\n2\n5\n"))
    assert main(["--capacity", "1"]) == 0
    assert "Stack Overflow" in capsys.readouterr().out


def test_main_rejects_bad_capacity(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    with pytest.raises(SystemExit):
        main(["--capacity", "0"])