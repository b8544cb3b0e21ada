from PyQt5.QtCore import Qt, QRect, QSize
from PyQt5.QtGui import QBrush, QFont, QPainter, QPen
from PyQt5.QtWidgets import QLabel, QVBoxLayout, QWidget

from ..settings import DEFAULT_FONT
from .mixins import (
    SaveSizeAndPositionOnClose,
    HideTitleBarOptional,
    ControllableBackgroundAndTextColour,
)


class ProgressBar(QWidget):
    totals = None

    bar_colour = Qt.green
    text_colour = Qt.darkGreen

    def minimumSizeHint(self):
        return QSize(0, 100)

    def paintEvent(self, event):
        painter = QPainter(self)

        margin = 20
        bottom_margin = 5
        box_height = int(self.height() - margin - bottom_margin)
        box_width = int(self.width() - margin * 2)

        painter.setPen(Qt.NoPen)
        painter.setBrush(QBrush(Qt.white, Qt.SolidPattern))
        painter.drawRect(margin, margin, box_width, box_height)

        if self.totals:
            raised, target, currency = self.totals
            fraction = min(raised / target, 1) if target else 1

            painter.setPen(Qt.NoPen)
            painter.setBrush(QBrush(self.bar_colour, Qt.SolidPattern))
            painter.drawRect(margin, margin, int(fraction * box_width), box_height)

            painter.setPen(self.text_colour)
            painter.setFont(QFont(DEFAULT_FONT, 30))
            painter.drawText(
                QRect(margin, margin, box_width, box_height),
                Qt.AlignCenter,
                f"{currency}{raised:f} / {currency}{target:f}",
            )

        painter.setPen(QPen(Qt.black, 2, Qt.SolidLine))
        painter.setBrush(Qt.NoBrush)
        painter.drawRect(margin, margin, box_width, box_height)


class ProgressBarWindow(
    QWidget,
    SaveSizeAndPositionOnClose,
    HideTitleBarOptional,
    ControllableBackgroundAndTextColour,
):
    """Total raised against the target, with the undrawn balance underneath."""

    _totals = None

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)

        self.resize(512, 150)
        self.setWindowTitle("Donation Progress")

        self.layout = QVBoxLayout()

        self.progress_bar = ProgressBar()
        self.layout.addWidget(self.progress_bar)

        self.balance_label = QLabel("")
        self.balance_label.setAlignment(Qt.AlignTop | Qt.AlignHCenter)
        self.balance_label.setFont(QFont(DEFAULT_FONT, 18))
        self.layout.addWidget(self.balance_label)

        self.setLayout(self.layout)

    @property
    def bar_colour(self):
        return self.progress_bar.bar_colour

    @bar_colour.setter
    def bar_colour(self, colour):
        self.progress_bar.bar_colour = colour
        self.progress_bar.update()

    @property
    def totals(self):
        return self._totals

    @totals.setter
    def totals(self, totals):
        self._totals = totals
        self.progress_bar.totals = totals
        self.progress_bar.update()

    def set_balance(self, balance, currency):
        if balance:
            self.balance_label.setText(f"{currency}{balance:f} waiting to be withdrawn")
        else:
            self.balance_label.setText("Nothing waiting to be withdrawn")
