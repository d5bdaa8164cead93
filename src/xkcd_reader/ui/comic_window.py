"""Comic Window - Application shell displaying one comic at a time."""

from pathlib import Path
from typing_extensions import override

from PySide6.QtCore import QUrl, Qt, Signal
from PySide6.QtGui import QAction, QDesktopServices, QKeyEvent, QMovie, QPixmap
from PySide6.QtWidgets import (
    QInputDialog,
    QLabel,
    QMainWindow,
    QMessageBox,
    QScrollArea,
    QVBoxLayout,
    QWidget,
)

from xkcd_reader.core import ResolvedComic


class ComicWindow(QMainWindow):
    """Shows the current comic and turns key presses into navigation signals."""

    next_requested = Signal()
    previous_requested = Signal()
    random_requested = Signal()
    latest_requested = Signal()
    latest_cached_requested = Signal()
    last_viewed_requested = Signal()
    # Raw user input: a comic number or a comic URL
    goto_requested = Signal(str)
    alt_text_requested = Signal()
    open_viewer_requested = Signal()
    open_explanation_requested = Signal()

    def __init__(self):
        super().__init__()
        self.setWindowTitle("xkcd")
        self.setGeometry(100, 100, 900, 700)

        self._movie: QMovie | None = None
        self._setup_ui()
        self._create_menu_bar()

    def _setup_ui(self):
        """Initialize the main UI layout."""
        central_widget = QWidget()
        self.setCentralWidget(central_widget)

        self.main_layout = QVBoxLayout(central_widget)
        self.main_layout.setContentsMargins(8, 8, 8, 8)

        self.title_label = QLabel()
        self.title_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.main_layout.addWidget(self.title_label)

        self.image_label = QLabel()
        self.image_label.setAlignment(Qt.AlignmentFlag.AlignCenter)

        self.scroll_area = QScrollArea()
        self.scroll_area.setWidgetResizable(True)
        self.scroll_area.setWidget(self.image_label)
        self.main_layout.addWidget(self.scroll_area)

    def _create_menu_bar(self):
        """Create the Comic menu; its shortcuts are the reader's key bindings."""
        menu = self.menuBar().addMenu("&Comic")

        entries = [
            ("&Next", "N", self.next_requested),
            ("&Previous", "P", self.previous_requested),
            ("&Random", "R", self.random_requested),
            ("&Latest", "L", self.latest_requested),
            ("Latest &Cached", "C", self.latest_cached_requested),
            ("Last &Viewed", "V", self.last_viewed_requested),
            ("Alt &Text", "T", self.alt_text_requested),
            ("&Open in Browser", "O", self.open_viewer_requested),
            ("&Explain", "E", self.open_explanation_requested),
        ]
        for label, shortcut, signal in entries:
            action = QAction(label, self)
            action.setShortcut(shortcut)
            action.triggered.connect(signal)
            menu.addAction(action)

        goto_action = QAction("&Go To...", self)
        goto_action.setShortcut("G")
        goto_action.triggered.connect(self._on_goto)
        menu.addAction(goto_action)

        menu.addSeparator()

        exit_action = QAction("E&xit", self)
        exit_action.setShortcut("Q")
        exit_action.triggered.connect(self.close)
        menu.addAction(exit_action)

    def _on_goto(self):
        text, ok = QInputDialog.getText(self, "Go To Comic", "Comic number or URL:")
        if ok and text.strip():
            self.goto_requested.emit(text.strip())

    def set_controller(self, controller):
        """Inject the controller and wire UI signals to its slots.

        The controller is expected to expose methods:
        - show_next(), show_previous(), show_random(), show_latest()
        - show_latest_cached(), show_last_viewed(), show_from_input(str)
        - show_alt_text(), open_viewer(), open_explanation()
        """
        self._controller = controller
        self.next_requested.connect(controller.show_next)
        self.previous_requested.connect(controller.show_previous)
        self.random_requested.connect(controller.show_random)
        self.latest_requested.connect(controller.show_latest)
        self.latest_cached_requested.connect(controller.show_latest_cached)
        self.last_viewed_requested.connect(controller.show_last_viewed)
        self.goto_requested.connect(controller.show_from_input)
        self.alt_text_requested.connect(controller.show_alt_text)
        self.open_viewer_requested.connect(controller.open_viewer)
        self.open_explanation_requested.connect(controller.open_explanation)

    def render_comic(self, resolved: ResolvedComic):
        """Display a resolved comic; GIFs are played as animations."""
        self.setWindowTitle(f"xkcd {resolved.number}: {resolved.title}")
        heading = f"{resolved.number}: {resolved.title}"
        if resolved.comic.published:
            heading += f" ({resolved.comic.published})"
        self.title_label.setText(heading)
        self.image_label.setToolTip(resolved.alt_text)
        self._stop_movie()

        path = str(Path(resolved.image_path))
        if resolved.image_format.is_animated:
            self._movie = QMovie(path)
            if self._movie.isValid():
                self.image_label.setMovie(self._movie)
                self._movie.start()
                return
            self._movie = None

        pixmap = QPixmap(path)
        if pixmap.isNull():
            self.image_label.setText(f"Unable to display image:\n{path}")
        else:
            self.image_label.setPixmap(pixmap)

    def _stop_movie(self):
        if self._movie is not None:
            self._movie.stop()
            self._movie = None
        self.image_label.clear()

    def open_url(self, url: str):
        """Hand a URL to the desktop's default browser."""
        QDesktopServices.openUrl(QUrl(url))

    def show_error(self, title: str, message: str):
        """Display an error message to the user."""
        QMessageBox.critical(self, title, message)

    def show_info(self, title: str, message: str):
        """Display an information message to the user."""
        QMessageBox.information(self, title, message)

    @override
    def keyPressEvent(self, event: QKeyEvent):
        """Arrow keys mirror the next/previous shortcuts."""
        if event.key() == Qt.Key.Key_Right:
            self.next_requested.emit()
        elif event.key() == Qt.Key.Key_Left:
            self.previous_requested.emit()
        else:
            super().keyPressEvent(event)
