import pytest

from moduleone.phonebook import CAPACITY, Contact, PhoneBook, format_field


def _contact(name):
    return Contact(
        first_name=name,
        last_name=name + "son",
        nickname="nick",
        phone_number="0000",
        darkest_secret="secret",
    )


def test_short_field_is_right_aligned():
    result = format_field("abc")
    assert len(result) == 10
    assert result.endswith("abc")
    assert result.strip() == "abc"


def test_exact_width_field_is_unchanged():
    assert format_field("abcdefghij") == "abcdefghij"


def test_long_field_is_truncated_with_dot():
    result = format_field("abcdefghijk")
    assert result == "abcdefghi."
    assert len(result) == 10


def test_empty_book_has_no_contacts():
    book = PhoneBook()
    assert len(book) == 0


def test_length_caps_at_capacity():
    book = PhoneBook()
    for n in range(CAPACITY + 3):
        book.add(_contact(f"n{n}"))
    assert len(book) == CAPACITY


def test_ninth_contact_replaces_first():
    book = PhoneBook()
    for n in range(CAPACITY + 1):
        book.add(_contact(f"name{n}"))
    assert book[0].first_name == f"name{CAPACITY}"
    assert book[1].first_name == "name1"


def test_table_has_row_per_contact():
    book = PhoneBook()
    book.add(_contact("alice"))
    book.add(_contact("bob"))
    table = book.render_table()
    assert "|  INDEX  |FIRST NAME| LAST NAME| NICKNAME |" in table
    assert "|       0.|" + format_field("alice") + "|" in table
    assert "|       1.|" + format_field("bob") + "|" in table
    assert "|       2.|" not in table


def test_render_contact_lists_all_fields():
    book = PhoneBook()
    book.add(_contact("alice"))
    text = book.render_contact(0)
    assert "first name:\talice" in text
    assert "last name:\taliceson" in text
    assert "phone number:\t0000" in text
    assert "darkest secret:\tsecret" in text


@pytest.mark.parametrize("index", [-1, 8, 100])
def test_render_contact_rejects_out_of_range(index):
    book = PhoneBook()
    book.add(_contact("alice"))
    with pytest.raises(IndexError, match="Wrong index"):
        book.render_contact(index)


def test_render_contact_empty_slot():
    book = PhoneBook()
    with pytest.raises(LookupError, match="No contact in this index"):
        book.render_contact(3)