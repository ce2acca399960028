"""A fixed-size phone book that overwrites its oldest entry when full."""

from __future__ import annotations

from dataclasses import dataclass

RESET = "\033[0m"
BLACK = "\033[30m"
RED = "\033[31m"
GREEN = "\033[32m"
YELLOW = "\033[33m"
BLUE = "\033[34m"
MAGENTA = "\033[35m"
CYAN = "\033[36m"
WHITE = "\033[37m"
BOLD = "\033[1m"
UNDERLINE = "\033[4m"

CAPACITY = 8
FIELD_WIDTH = 10

_TABLE_TOP = "____________________________________________"
_TABLE_HEADER = "|  INDEX  |FIRST NAME| LAST NAME| NICKNAME |"
_TABLE_RULE = "--------------------------------------------"


@dataclass
class Contact:
    """One phone-book entry."""

    first_name: str = ""
    last_name: str = ""
    nickname: str = ""
    phone_number: str = ""
    darkest_secret: str = ""


def format_field(field: str) -> str:
    """Fit a value into a ten-character column.

    Longer values are cut to nine characters and end in a dot; shorter
    ones are right-aligned.
    """
    if len(field) > FIELD_WIDTH:
        return field[: FIELD_WIDTH - 1] + "."
    return field.rjust(FIELD_WIDTH)


class PhoneBook:
    """Holds up to eight contacts, replacing the oldest once full."""

    def __init__(self) -> None:
        self._slots: list[Contact | None] = [None] * CAPACITY
        self._added = 0

    def add(self, contact: Contact) -> None:
        """Store a contact in the next slot, wrapping round after eight."""
        self._slots[self._added % CAPACITY] = contact
        self._added += 1

    def __len__(self) -> int:
        return min(self._added, CAPACITY)

    def __getitem__(self, index: int) -> Contact | None:
        return self._slots[index]

    def render_table(self) -> str:
        """Return the summary table of all stored contacts."""
        lines = [CYAN + BOLD + _TABLE_TOP, _TABLE_HEADER, _TABLE_RULE]
        for index, contact in enumerate(self._slots[: len(self)]):
            assert contact is not None
            cells = "|".join(
                format_field(value)
                for value in (contact.first_name, contact.last_name, contact.nickname)
            )
            lines.append(f"|       {index}.|{cells}|")
            lines.append(_TABLE_RULE)
        return "\n".join(lines) + "\n" + RESET + "\n"

    def render_contact(self, index: int) -> str:
        """Return every field of the contact at ``index``.

        Raises IndexError for an index outside 0-7 and LookupError when
        the slot holds no contact.
        """
        if not 0 <= index < CAPACITY:
            raise IndexError("Wrong index")
        contact = self._slots[index]
        if contact is None or not contact.first_name:
            raise LookupError("No contact in this index")
        rows = [
            ("first name:\t", contact.first_name),
            ("last name:\t", contact.last_name),
            ("nickname:\t", contact.nickname),
            ("phone number:\t", contact.phone_number),
            ("darkest secret:\t", contact.darkest_secret),
        ]
        body = "".join(f"{CYAN}{BOLD}{label}{value}\n" for label, value in rows)
        return "\n" + body + RESET + "\n"