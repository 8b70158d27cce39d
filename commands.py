# commands.py
#
# Toolkit-independent form logic for the library catalog.
# A presentation layer (the Qt window, the console shell) collects the raw
# field values into a FormFields value and hands them to LibraryForm.dispatch,
# which validates them, runs the catalog operation and returns the text to show.

import logging
from dataclasses import dataclass
from enum import Enum

from catalog import Book

logger = logging.getLogger(__name__)

# --- Output Messages ---
ADD_MISSING_MESSAGE = "All fields (Title, Author, ISBN) must be filled!"
UPDATE_MISSING_MESSAGE = "Please enter ISBN to update a book."
DELETE_MISSING_MESSAGE = "Please enter ISBN to delete a book."
SEARCH_MISSING_MESSAGE = "Please enter a title or author to search."

ADDED_MESSAGE = "Book added successfully."
UPDATED_MESSAGE = "Book updated successfully (if found)."
DELETED_MESSAGE = "Book deleted successfully (if found)."
NO_MATCHES_MESSAGE = "No books found matching the query."
EMPTY_CATALOG_MESSAGE = "No books in the library."
SEARCH_RESULTS_HEADER = "Search results:"
ALL_BOOKS_HEADER = "All books in the library:"


class Command(Enum):
    """The six actions offered by the form, one per button."""
    ADD = "add"
    UPDATE = "update"
    DELETE = "delete"
    SEARCH = "search"
    DISPLAY_ALL = "display_all"
    EXIT = "exit"


@dataclass
class FormFields:
    """Snapshot of the form inputs at the moment a command is issued."""
    title: str = ""
    author: str = ""
    isbn: str = ""
    query: str = ""
    available: bool = False


@dataclass
class CommandResult:
    """
    What the presentation layer should do after a command.

    Attributes:
        output (str): Text for the output area (replaces its previous content).
        clear_fields (bool): Whether the input fields should be reset.
        exit_requested (bool): Whether the application should terminate.
    """
    output: str
    clear_fields: bool = False
    exit_requested: bool = False


class MissingFieldsError(ValueError):
    """Raised when a command is issued without its required fields."""

    def __init__(self, message, fields):
        super().__init__(message)
        self.message = message
        self.fields = tuple(fields)


def require(fields, names, message):
    """
    Checks that each named attribute of `fields` is a non-empty string.

    Raises:
        MissingFieldsError: If one or more of the named fields is empty.
    """
    missing = [name for name in names if getattr(fields, name) == ""]
    if missing:
        raise MissingFieldsError(message, missing)


def format_listing(header, books):
    """Renders a header line followed by one line per book."""
    lines = [header] + [str(book) for book in books]
    return "\n".join(lines) + "\n"


class LibraryForm:
    """
    Command dispatcher between a presentation layer and a Catalog.

    The catalog is owned by the caller and passed in; LibraryForm keeps no
    other state.
    """

    def __init__(self, catalog):
        self.catalog = catalog
        self._handlers = {
            Command.ADD: self._add,
            Command.UPDATE: self._update,
            Command.DELETE: self._delete,
            Command.SEARCH: self._search,
            Command.DISPLAY_ALL: self._display_all,
            Command.EXIT: self._exit,
        }

    def dispatch(self, command, fields=None):
        """
        Runs one form command against the catalog.

        Args:
            command (Command): The button / menu entry that was activated.
            fields (FormFields): Current input values. Defaults to empty fields.

        Returns:
            CommandResult: Output text and follow-up actions for the UI.
                Validation failures are reported here too, never raised.
        """
        fields = fields if fields is not None else FormFields()
        logger.info("Dispatching %s", command.value)
        try:
            return self._handlers[command](fields)
        except MissingFieldsError as e:
            logger.warning("%s rejected, missing: %s", command.value, ", ".join(e.fields))
            return CommandResult(output=e.message)

    def _add(self, fields):
        require(fields, ("title", "author", "isbn"), ADD_MISSING_MESSAGE)
        self.catalog.add(Book(fields.title, fields.author, fields.isbn, fields.available))
        return CommandResult(output=ADDED_MESSAGE, clear_fields=True)

    def _update(self, fields):
        require(fields, ("isbn",), UPDATE_MISSING_MESSAGE)
        if not self.catalog.update(fields.isbn, fields.available):
            logger.info("Update matched no book with ISBN %r", fields.isbn)
        return CommandResult(output=UPDATED_MESSAGE, clear_fields=True)

    def _delete(self, fields):
        require(fields, ("isbn",), DELETE_MISSING_MESSAGE)
        if not self.catalog.delete(fields.isbn):
            logger.info("Delete matched no book with ISBN %r", fields.isbn)
        return CommandResult(output=DELETED_MESSAGE, clear_fields=True)

    def _search(self, fields):
        require(fields, ("query",), SEARCH_MISSING_MESSAGE)
        results = self.catalog.search(fields.query)
        if not results:
            output = NO_MATCHES_MESSAGE
        else:
            output = format_listing(SEARCH_RESULTS_HEADER, results)
        return CommandResult(output=output, clear_fields=True)

    def _display_all(self, fields):
        books = self.catalog.list()
        if not books:
            return CommandResult(output=EMPTY_CATALOG_MESSAGE)
        return CommandResult(output=format_listing(ALL_BOOKS_HEADER, books))

    def _exit(self, fields):
        return CommandResult(output="", exit_requested=True)
