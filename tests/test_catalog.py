from catalog import Book, Catalog


def test_add_and_list(catalog):
    assert catalog.list() == []

    book = Book("Dune", "Herbert", "111", True)
    catalog.add(book)

    assert len(catalog) == 1
    assert catalog.list() == [book]


def test_list_keeps_insertion_order_and_is_a_copy(catalog):
    dune = Book("Dune", "Herbert", "111", True)
    hobbit = Book("Hobbit", "Tolkien", "222", False)
    catalog.add(dune)
    catalog.add(hobbit)

    books = catalog.list()
    assert books == [dune, hobbit]

    books.clear()
    assert len(catalog) == 2


def test_worked_example(catalog):
    catalog.add(Book("Dune", "Herbert", "111", True))
    catalog.add(Book("Hobbit", "Tolkien", "222", False))

    assert [b.title for b in catalog.list()] == ["Dune", "Hobbit"]
    assert [b.title for b in catalog.search("tolkien")] == ["Hobbit"]

    catalog.delete("111")
    assert [b.title for b in catalog.list()] == ["Hobbit"]


def test_update_changes_only_availability(sample_catalog):
    assert sample_catalog.update("222", True) is True

    hobbit = sample_catalog.list()[1]
    assert hobbit == Book("The Hobbit", "J.R.R. Tolkien", "222", True)


def test_update_missing_isbn_is_noop(sample_catalog):
    before = [Book(b.title, b.author, b.isbn, b.available) for b in sample_catalog]

    assert sample_catalog.update("999", True) is False
    assert sample_catalog.list() == before


def test_update_affects_first_duplicate_only(catalog):
    catalog.add(Book("First", "A", "dup", False))
    catalog.add(Book("Second", "B", "dup", False))

    catalog.update("dup", True)

    assert [b.available for b in catalog.list()] == [True, False]


def test_update_isbn_match_is_exact(sample_catalog):
    assert sample_catalog.update("11", False) is False
    assert sample_catalog.list()[0].available is True


def test_delete_removes_all_matches(catalog):
    catalog.add(Book("First", "A", "dup"))
    catalog.add(Book("Other", "C", "keep"))
    catalog.add(Book("Second", "B", "dup"))

    assert catalog.delete("dup") == 2
    assert [b.isbn for b in catalog.list()] == ["keep"]


def test_delete_missing_isbn_is_noop(sample_catalog):
    assert sample_catalog.delete("999") == 0
    assert len(sample_catalog) == 3


def test_search_is_case_insensitive_over_title_and_author(sample_catalog):
    results = sample_catalog.search("TOLKIEN")
    assert [b.isbn for b in results] == ["222", "333"]

    assert [b.isbn for b in sample_catalog.search("dUnE")] == ["111"]
    assert [b.isbn for b in sample_catalog.search("hobb")] == ["222"]


def test_search_no_match(sample_catalog):
    assert sample_catalog.search("asimov") == []


def test_search_empty_query_matches_everything(sample_catalog):
    assert len(sample_catalog.search("")) == 3


def test_book_text_rendering():
    assert str(Book("Dune", "Herbert", "111", True)) == (
        "Title: Dune, Author: Herbert, ISBN: 111, Available: Yes"
    )
    assert str(Book("Hobbit", "Tolkien", "222")).endswith("Available: No")
