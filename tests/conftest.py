import os

# Qt must not try to open a real display while the tests run.
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest

from catalog import Book, Catalog


@pytest.fixture
def catalog():
    return Catalog()


@pytest.fixture
def sample_catalog():
    return Catalog([
        Book("Dune", "Frank Herbert", "111", True),
        Book("The Hobbit", "J.R.R. Tolkien", "222", False),
        Book("Silmarillion", "Tolkien", "333", True),
    ])


@pytest.fixture(scope="session")
def qapp():
    from PySide6.QtWidgets import QApplication
    app = QApplication.instance() or QApplication([])
    yield app
