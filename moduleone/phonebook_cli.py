"""Interactive phone book driven by ADD, SEARCH and EXIT commands."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from typing import TextIO

from moduleone.phonebook import (
    BOLD,
    CYAN,
    GREEN,
    RED,
    RESET,
    YELLOW,
    Contact,
    PhoneBook,
)

_PROMPT = CYAN + "~~> " + RESET
_COMMANDS = GREEN + "Valid commands : ADD, SEARCH, EXIT\n" + RESET + "\n"

_FIELDS = (
    ("first_name", "first name:\t", False),
    ("last_name", "last name:\t", False),
    ("nickname", "nickname:\t", False),
    ("phone_number", "phonenumber:\t", True),
    ("darkest_secret", "darkest secret:\t", False),
)


def is_digits_only(text: str) -> bool:
    """Return True when ``text`` is non-empty and made of ASCII digits."""
    return bool(text) and all(ch in "0123456789" for ch in text)


class _Console:
    def __init__(self, stdin: TextIO, stdout: TextIO) -> None:
        self._stdin = stdin
        self._stdout = stdout

    def write(self, text: str) -> None:
        self._stdout.write(text)
        self._stdout.flush()

    def read_line(self) -> str:
        line = self._stdin.readline()
        if not line:
            raise EOFError
        return line[:-1] if line.endswith("\n") else line

    def ask(self, prompt: str, numeric: bool) -> str:
        while True:
            self.write(CYAN + BOLD + prompt)
            answer = self.read_line()
            if not answer:
                self.write(BOLD + RED + "This field can not be empty!" + RESET + "\n")
            elif numeric and not is_digits_only(answer):
                self.write(
                    BOLD
                    + RED
                    + "This field needs to be numerical without spaces"
                    + RESET
                    + "\n"
                )
            else:
                return answer


def _add_contact(console: _Console, book: PhoneBook) -> None:
    console.write(CYAN + BOLD + "\n")
    values = {name: console.ask(prompt, numeric) for name, prompt, numeric in _FIELDS}
    console.write(RESET + "\n")
    book.add(Contact(**values))


def _show_contact(console: _Console, book: PhoneBook) -> None:
    console.write(
        GREEN
        + BOLD
        + "Enter the index of the contact you would like to see"
        + RESET
        + "\n"
    )
    console.write(_PROMPT)
    answer = console.read_line()
    if not is_digits_only(answer):
        console.write(
            RED + BOLD + "Non digit input\nReturning to main menu" + RESET + "\n"
        )
        return
    try:
        console.write(book.render_contact(int(answer)))
    except LookupError as exc:
        console.write(RED + BOLD + str(exc.args[0]) + RESET + "\n")
    console.write("\n")


def run(stdin: TextIO, stdout: TextIO) -> int:
    """Run the command loop until EXIT or end of input; return the exit code."""
    console = _Console(stdin, stdout)
    book = PhoneBook()
    console.write(YELLOW + BOLD + "\n\t\tWELCOME\n" + RESET + "\n")
    console.write(_COMMANDS)
    try:
        while True:
            console.write(_PROMPT)
            command = console.read_line()
            if command == "EXIT":
                return 0
            if command == "ADD":
                _add_contact(console, book)
            elif command == "SEARCH":
                console.write(book.render_table())
                _show_contact(console, book)
            else:
                console.write(RED + "No valid command" + RESET + "\n")
                console.write(_COMMANDS)
    except EOFError:
        return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Start the phone book on the terminal; it takes no arguments."""
    if argv is None:
        argv = sys.argv[1:]
    if argv:
        sys.stdout.write(RED + BOLD + "This program doesnt take parameters!" + RESET + "\n")
        return 1
    return run(sys.stdin, sys.stdout)


if __name__ == "__main__":
    raise SystemExit(main())