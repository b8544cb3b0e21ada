from PyQt5.QtCore import Qt
from PyQt5.QtGui import QFont
from PyQt5.QtWidgets import QLabel, QVBoxLayout, QWidget

from ..settings import DEFAULT_FONT


class StatusDisplay(QWidget):
    """Whether the box is taking donations, and the last thing that happened."""

    colours = {
        "Open": "#00a000",
        "Not yet open": "#606000",
        "Closed": "#c00000",
    }

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)

        self.layout = QVBoxLayout()

        self._status = QLabel("Inactive")
        self._status.setFont(QFont(DEFAULT_FONT, 48))
        self._status.setAlignment(Qt.AlignCenter)
        self.layout.addWidget(self._status)

        self._last_event = QLabel("No donations yet")
        self._last_event.setFont(QFont(DEFAULT_FONT, 14))
        self._last_event.setAlignment(Qt.AlignCenter)
        self.layout.addWidget(self._last_event)

        self.setLayout(self.layout)

    @property
    def status(self):
        return self._status.text()

    @status.setter
    def status(self, text):
        self._status.setText(text)
        self.setStyleSheet(f"color: {self.colours.get(text, '#000000')}")

    @property
    def last_event(self):
        return self._last_event.text()

    @last_event.setter
    def last_event(self, text):
        self._last_event.setText(text)
