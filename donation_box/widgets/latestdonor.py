from PyQt5.QtCore import Qt
from PyQt5.QtGui import QFont
from PyQt5.QtWidgets import QLabel, QVBoxLayout, QWidget

from ..common import format_ether, short_address
from ..settings import CURRENCY_SYMBOL, DEFAULT_FONT
from .mixins import (
    SaveSizeAndPositionOnClose,
    ControllableBackgroundAndTextColour,
    HideTitleBarOptional,
)


class LatestDonor(
    QWidget,
    SaveSizeAndPositionOnClose,
    ControllableBackgroundAndTextColour,
    HideTitleBarOptional,
):
    _donation = None

    def __init__(self, parent=None):
        super().__init__(parent=parent)

        self.resize(250, 50)

        self.layout = QVBoxLayout()
        self.layout.setSpacing(0)
        self.layout.setContentsMargins(0, 0, 0, 0)

        self.name = QLabel("")
        self.name.setAlignment(Qt.AlignCenter)
        self.name.setFont(QFont(DEFAULT_FONT, 36))
        self.layout.addWidget(self.name)

        message_font = QFont(DEFAULT_FONT, 18)
        message_font.setItalic(True)
        self.message = QLabel("")
        self.message.setAlignment(Qt.AlignCenter)
        self.message.setFont(message_font)
        self.layout.addWidget(self.message)

        self.setLayout(self.layout)
        self.setWindowTitle("Latest Donation")

    @property
    def donation(self):
        return self._donation

    @donation.setter
    def donation(self, donation):
        self._donation = donation
        self.name.setText(
            f"{short_address(donation.donor)}: "
            f"{format_ether(donation.amount, CURRENCY_SYMBOL)}"
        )
        if donation.cumulative != donation.amount:
            self.message.setText(
                f"{format_ether(donation.cumulative, CURRENCY_SYMBOL)} given so far"
            )
        else:
            self.message.setText("First donation!")
