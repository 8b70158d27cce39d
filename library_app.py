# library_app.py
#
# Implements a PySide6 desktop form for managing an in-memory library catalog.
# Features include:
# - Adding books by title, author, ISBN and availability.
# - Updating a book's availability by ISBN.
# - Deleting books by ISBN.
# - Searching titles and authors (case-insensitive substring match).
# - Listing the whole catalog in a read-only output area.
# - Basic QSS styling for a modern look and feel.
#
# The catalog lives only as long as the process; nothing is saved to disk.

import logging
import sys

from PySide6.QtWidgets import (
    QApplication,
    QMainWindow,
    QWidget,
    QVBoxLayout,
    QGridLayout,
    QLineEdit,
    QPushButton,
    QLabel,
    QCheckBox,
    QPlainTextEdit,
    QStatusBar,
)
from PySide6.QtCore import Qt

from catalog import Catalog
from commands import Command, FormFields, LibraryForm

logger = logging.getLogger(__name__)

# --- Application Stylesheet ---
# Defines the overall look and feel of the application using Qt Style Sheets (QSS).
APP_STYLESHEET = """
/* General */
QMainWindow, QWidget {
    background-color: #F4F4F4;
    color: #333333;
    font-family: "Segoe UI", Arial, sans-serif;
    font-size: 10pt;
}

/* Buttons */
QPushButton {
    background-color: #0078D7;
    color: white;
    border: 1px solid #005A9E;
    padding: 6px 12px;
    border-radius: 4px;
}
QPushButton:hover {
    background-color: #005A9E;
}
QPushButton:pressed {
    background-color: #003C6A;
}
QPushButton#exitButton {
    background-color: #B0B0B0;
    border-color: #8A8A8A;
    color: #222222;
}

/* Text inputs */
QLineEdit {
    padding: 5px;
    border: 1px solid #BDBDBD;
    border-radius: 4px;
    background-color: #FFFFFF;
}
QLineEdit:focus {
    border: 1px solid #0078D7;
    background-color: #E6F2FF;
}

/* Output area */
QPlainTextEdit {
    background-color: white;
    border: 1px solid #DCDCDC;
    border-radius: 4px;
    font-family: Consolas, "Courier New", monospace;
}

/* Availability checkbox */
QCheckBox {
    spacing: 8px;
}
QCheckBox::indicator {
    width: 18px;
    height: 18px;
    border: 1px solid #777777;
    border-radius: 3px;
    background-color: #FFFFFF;
}
QCheckBox::indicator:checked {
    background-color: #0078D7;
    border-color: #005A9E;
}

/* StatusBar */
QStatusBar {
    background-color: #E8E8E8;
    color: #444444;
    padding: 4px;
    font-size: 9pt;
    border-top: 1px solid #D0D0D0;
}
"""

# --- Constants ---
WINDOW_TITLE = "Library Management System"
WINDOW_WIDTH = 600
WINDOW_HEIGHT = 400
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
STATUS_MESSAGE_TIMEOUT = 3000  # Milliseconds a command's status bar message stays visible.

# Button captions in grid order, paired with the command each one issues.
BUTTONS = [
    ("Add Book", Command.ADD),
    ("Update Book", Command.UPDATE),
    ("Delete Book", Command.DELETE),
    ("Search Books", Command.SEARCH),
    ("Display All Books", Command.DISPLAY_ALL),
    ("Exit", Command.EXIT),
]


class MainWindow(QMainWindow):
    """
    Main window of the library form.
    Owns the widgets only; every action is delegated to a LibraryForm built
    around the catalog passed in by the caller.
    """
    def __init__(self, catalog, quit_callback=None):
        """
        Args:
            catalog (Catalog): The catalog this window operates on.
            quit_callback (callable): Called when Exit is pressed.
                Defaults to QApplication.quit.
        """
        super().__init__()
        self.catalog = catalog
        self.form = LibraryForm(catalog)
        self._quit_callback = quit_callback or QApplication.quit

        self.setWindowTitle(WINDOW_TITLE)
        self.resize(WINDOW_WIDTH, WINDOW_HEIGHT)

        # --- Central Widget and Main Layout ---
        central_widget = QWidget()
        self.setCentralWidget(central_widget)
        main_layout = QVBoxLayout(central_widget)

        # --- Header ---
        self.header_label = QLabel(WINDOW_TITLE)
        self.header_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.header_label.setStyleSheet("font-family: Arial; font-size: 16pt; font-weight: bold;")
        main_layout.addWidget(self.header_label)

        # --- Output Area ---
        self.output_area = QPlainTextEdit()
        self.output_area.setReadOnly(True)
        main_layout.addWidget(self.output_area, 1)  # Output area takes the spare height

        # --- Controls (labelled inputs, then the command buttons) ---
        controls_widget = QWidget()
        controls_layout = QGridLayout(controls_widget)
        controls_layout.setHorizontalSpacing(5)
        controls_layout.setVerticalSpacing(5)

        self.title_input = QLineEdit()
        self.author_input = QLineEdit()
        self.isbn_input = QLineEdit()
        self.available_checkbox = QCheckBox()
        self.search_input = QLineEdit()
        self.search_input.setPlaceholderText("Title or author...")

        inputs = [
            ("Title:", self.title_input),
            ("Author:", self.author_input),
            ("ISBN:", self.isbn_input),
            ("Available:", self.available_checkbox),
            ("Search:", self.search_input),
        ]
        for row, (caption, widget) in enumerate(inputs):
            controls_layout.addWidget(QLabel(caption), row, 0)
            controls_layout.addWidget(widget, row, 1)

        self.buttons = {}
        first_button_row = len(inputs)
        for index, (caption, command) in enumerate(BUTTONS):
            button = QPushButton(caption)
            button.clicked.connect(lambda checked=False, c=command: self.run_command(c))
            controls_layout.addWidget(button, first_button_row + index // 2, index % 2)
            self.buttons[command] = button
        self.buttons[Command.EXIT].setObjectName("exitButton")

        main_layout.addWidget(controls_widget)

        # --- Status Bar ---
        self.status_bar = QStatusBar()
        self.setStatusBar(self.status_bar)
        self.status_bar.showMessage("Application Ready.")

    def read_fields(self):
        """Collects the current input values into a FormFields snapshot."""
        return FormFields(
            title=self.title_input.text(),
            author=self.author_input.text(),
            isbn=self.isbn_input.text(),
            query=self.search_input.text(),
            available=self.available_checkbox.isChecked(),
        )

    def run_command(self, command):
        """
        Handles a button click: dispatches the command and applies the result
        to the output area, the inputs and the status bar.
        """
        result = self.form.dispatch(command, self.read_fields())
        if result.exit_requested:
            self._quit_callback()
            return

        self.output_area.setPlainText(result.output)
        if result.clear_fields:
            self.clear_fields()
        self.status_bar.showMessage(f"{len(self.catalog)} book(s) in the catalog.", STATUS_MESSAGE_TIMEOUT)

    def clear_fields(self):
        """Empties every text input and unchecks the availability box."""
        self.title_input.clear()
        self.author_input.clear()
        self.isbn_input.clear()
        self.search_input.clear()
        self.available_checkbox.setChecked(False)


def main():
    logging.basicConfig(level=logging.INFO, format=LOG_FORMAT)
    app = QApplication(sys.argv)
    app.setStyleSheet(APP_STYLESHEET)  # Apply the global QSS stylesheet

    window = MainWindow(Catalog())
    window.show()

    sys.exit(app.exec())


# --- Application Entry Point ---
if __name__ == "__main__":
    main()
