import pytest

from dsalab.hashing import (
    ChainedDirectory,
    LinearProbingTable,
    PhoneBook,
    QuadraticProbingTable,
    TableFullError,
)

EMPTY_ROW = ("-", 0, -1)


# ChainedDirectory


def test_directory_starts_empty():
    rows = ChainedDirectory().rows()
    assert len(rows) == 10
    assert all(row == EMPTY_ROW for row in rows)


def test_directory_home_slot():
    directory = ChainedDirectory()
    slot = directory.insert("alice", 11)
    assert directory.rows()[slot] == ("alice", 11, -1)
    assert slot == 11 % 10


def test_directory_links_collision():
    directory = ChainedDirectory()
    home = directory.insert("alice", 11)
    other = directory.insert("bob", 21)
    rows = directory.rows()
    assert rows[home][2] == other
    assert rows[other][:2] == ("bob", 21)


def test_directory_full():
    directory = ChainedDirectory()
    for number in range(1, 11):
        directory.insert(f"n{number}", number)
    with pytest.raises(TableFullError):
        directory.insert("extra", 99)


def test_directory_rejects_zero():
    with pytest.raises(ValueError):
        ChainedDirectory().insert("zero", 0)


# PhoneBook


def test_phonebook_search_and_chain():
    book = PhoneBook()
    book.insert("alice", 11)
    book.insert("bob", 21)
    book.insert("carol", 31)
    assert book.search(11)[1] == "alice"
    assert book.search(21)[1] == "bob"
    assert book.search(31)[1] == "carol"
    assert book.search(41) is None


def test_phonebook_delete_tail():
    book = PhoneBook()
    book.insert("alice", 11)
    slot = book.insert("bob", 21)
    book.delete(21)
    assert book.search(21) is None
    assert book.rows()[slot] == EMPTY_ROW
    assert book.rows()[book.search(11)[0]][2] == -1


def test_phonebook_delete_head_moves_next_in():
    book = PhoneBook()
    book.insert("alice", 11)
    book.insert("bob", 21)
    head = book.search(11)[0]
    book.delete(11)
    assert book.search(11) is None
    assert book.search(21) == (head, "bob")
    filled = [row for row in book.rows() if row != EMPTY_ROW]
    assert [row[:2] for row in filled] == [("bob", 21)]


def test_phonebook_delete_missing():
    book = PhoneBook()
    book.insert("alice", 11)
    with pytest.raises(KeyError):
        book.delete(42)


def test_phonebook_full():
    book = PhoneBook()
    for number in range(1, 11):
        book.insert(f"n{number}", number)
    with pytest.raises(TableFullError):
        book.insert("extra", 55)


# Probing tables


@pytest.mark.parametrize("table_type", [LinearProbingTable, QuadraticProbingTable])
def test_first_insert_lands_home(table_type):
    table = table_type()
    count = table.insert(7)
    assert count == 1
    assert table.slots()[7] == 7


@pytest.mark.parametrize("table_type", [LinearProbingTable, QuadraticProbingTable])
def test_collisions_cost_more(table_type):
    table = table_type()
    counts = [table.insert(key) for key in (5, 15, 25)]
    assert counts == sorted(counts)
    assert len(set(counts)) == 3
    assert set(table.comparisons()) == set(zip((5, 15, 25), counts))


@pytest.mark.parametrize("table_type", [LinearProbingTable, QuadraticProbingTable])
def test_total_is_sum(table_type):
    table = table_type()
    counts = [table.insert(key) for key in (3, 13, 23, 8, 18)]
    assert table.total_comparisons() == sum(counts)


def test_comparisons_in_slot_order():
    table = LinearProbingTable()
    for key in (9, 19, 4):
        table.insert(key)
    keys = [key for key, _ in table.comparisons()]
    assert keys == [k for k in table.slots() if k is not None]


def test_linear_fills_consecutive_slots():
    table = LinearProbingTable()
    for key in (5, 15, 25):
        table.insert(key)
    assert table.slots()[5:8] == [5, 15, 25]


def test_linear_full():
    table = LinearProbingTable()
    for key in range(1, 11):
        table.insert(key)
    with pytest.raises(TableFullError):
        table.insert(77)


def test_quadratic_skips_by_squares():
    table = QuadraticProbingTable()
    for key in (3, 13, 23):
        table.insert(key)
    assert table.slots()[7] == 23


def test_quadratic_full_before_table_is():
    table = QuadraticProbingTable()
    for key in (10, 20, 30, 40, 50, 60):
        table.insert(key)
    with pytest.raises(TableFullError):
        table.insert(70)
    assert None in table.slots()


@pytest.mark.parametrize("table_type", [LinearProbingTable, QuadraticProbingTable])
def test_rejects_non_positive(table_type):
    with pytest.raises(ValueError):
        table_type().insert(0)