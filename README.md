# moduleone

Three small console programs. Each one can also be used as a library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## megaphone

Prints its arguments in upper case, joined by single spaces. With no arguments it prints a stock feedback-noise line.

```
$ megaphone "shhhhh... I think the students are asleep..."
SHHHHH... I THINK THE STUDENTS ARE ASLEEP...
$ megaphone
* LOUD AND UNBEARABLE FEEDBACK NOISE *
```

From Python, `moduleone.megaphone.shout(words)` returns the same text.

## phonebook

An interactive phone book with room for eight contacts. When a ninth contact is added, it overwrites the oldest one.

```
$ phonebook
```

Commands:

- `ADD`: asks for first name, last name, nickname, phone number and darkest secret. A field left empty is asked for again. A phone number that is not digits only is also asked for again.
- `SEARCH`: prints a table of the stored contacts with index, first name, last name and nickname. Each column is ten characters wide. Longer values are cut to nine characters followed by a dot. It then asks for an index and prints every field of that contact. If the input is not digits, it reports "Non digit input". If the index is outside 0–7 or the slot is empty, it prints an error.
- `EXIT`: quits. The program also stops at end of input.

Anything else prints "No valid command" and the list of commands. The program takes no command-line arguments. If any are given, it prints a message and exits with status 1.

### Using it from Python

`moduleone.phonebook` provides:

- `Contact`: a dataclass with `first_name`, `last_name`, `nickname`, `phone_number` and `darkest_secret`.
- `PhoneBook`: has `add(contact)`, `len()` and indexing. `render_table()` returns the summary table. `render_contact(index)` returns one contact's details. It raises `IndexError` for an index outside 0–7 and `LookupError` for an empty slot.
- `format_field(field)`: fits a value into the ten-character column.

`moduleone.phonebook_cli.run(stdin, stdout)` runs the command loop on any pair of text streams and returns the exit code. `is_digits_only(text)` is the check used for phone numbers and indices.

### Not included

Contacts live in memory only. Nothing is saved to disk, so the phone book is empty each time the program starts.

## account-demo

Replays a fixed scenario against a ledger of bank accounts:

1. Opens eight accounts with fixed initial deposits.
2. Prints the ledger summary and each account's status.
3. Makes one deposit into each account, then prints the summary and statuses again.
4. Makes one withdrawal from each account, then prints the summary and statuses again. A withdrawal larger than the balance is refused.
5. Closes every account.

Every line starts with a `[YYYYMMDD_HHMMSS]` timestamp.

```
$ account-demo
```

### Using it from Python

`moduleone.account.Ledger(out=None, clock=None)` writes its log to `out` (standard output by default). Timestamps come from `clock` (`datetime.now` by default). Its methods and attributes:

- `open(initial_deposit)`: returns a new `Account`.
- `accounts_info()`: logs the totals and returns the summary line.
- `nb_accounts`, `total_amount`, `total_deposits` and `total_withdrawals`: hold the running totals.

Each `Account` supports:

- `deposit(amount)`: returns the logged line.
- `withdraw(amount)`: returns `True` or `False`.
- `status()`: returns the logged line.
- `close()`: logs the closing once. It is also called when the account is used as a context manager.

`moduleone.account_demo.run_demo(out, clock)` plays the scenario on any stream with the clock you supply, and returns the `Ledger`.