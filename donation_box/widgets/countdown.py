from datetime import datetime, timezone
import logging

from PyQt5.QtCore import pyqtSignal, Qt, QTimer
from PyQt5.QtGui import QFont
from PyQt5.QtWidgets import QLabel, QVBoxLayout, QWidget

from .mixins import (
    SaveSizeAndPositionOnClose,
    ControllableBackgroundAndTextColour,
    HideTitleBarOptional,
)
from ..donations import system_clock
from ..settings import DEFAULT_FONT


def format_duration(seconds):
    hours, remainder = divmod(int(seconds), 60 * 60)
    minutes, seconds = divmod(remainder, 60)
    return f"{hours}:{minutes:02}:{seconds:02}"


class Countdown(
    QWidget,
    SaveSizeAndPositionOnClose,
    ControllableBackgroundAndTextColour,
    HideTitleBarOptional,
):
    """Counts down to the opening, then the closing, of a donation window."""

    refresh_interval = 250
    event_finish = pyqtSignal()
    clock = staticmethod(system_clock)

    def __init__(self, parent=None):
        super().__init__(parent=parent)

        self.donation_window = None
        self.finished = False

        self.caption = QLabel("")
        self.caption.setFont(QFont(DEFAULT_FONT, 18))
        self.caption.setAlignment(Qt.AlignCenter)

        self.label = QLabel("...")
        self.label.setFont(QFont(DEFAULT_FONT, 72))
        self.label.setAlignment(Qt.AlignCenter)

        self.layout = QVBoxLayout()
        self.layout.addWidget(self.caption)
        self.layout.addWidget(self.label)
        self.setLayout(self.layout)
        self.setWindowTitle("Donation Countdown")

        self.timer = QTimer()
        self.timer.timeout.connect(self.refresh_time)

    def set_window(self, donation_window):
        self.donation_window = donation_window
        self.finished = False
        if donation_window is None:
            self.timer.stop()
            self.caption.setText("")
            self.label.setText("Always open")
            return

        logging.info(
            "Counting down to donation window "
            f"{datetime.fromtimestamp(donation_window.start, timezone.utc)} - "
            f"{datetime.fromtimestamp(donation_window.end, timezone.utc)}"
        )
        self.refresh_time()
        self.timer.start(self.refresh_interval)

    def refresh_time(self):
        now = self.clock()
        if now < self.donation_window.start:
            self.caption.setText("Donations open in")
            self.label.setText(format_duration(self.donation_window.start - now))
        elif now <= self.donation_window.end:
            self.caption.setText("Donations close in")
            self.label.setText(format_duration(self.donation_window.end - now))
        elif not self.finished:
            self.finished = True
            self.timer.stop()
            self.caption.setText("")
            self.label.setText("CLOSED!")
            self.event_finish.emit()
