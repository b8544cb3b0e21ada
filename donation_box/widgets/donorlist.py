from PyQt5.QtCore import Qt
from PyQt5.QtGui import QFont, QFontMetrics, QPainter
from PyQt5.QtWidgets import QHBoxLayout, QLabel, QVBoxLayout, QWidget

from .mixins import (
    SaveSizeAndPositionOnClose,
    ControllableBackgroundAndTextColour,
    HideTitleBarOptional,
)
from ..common import format_ether, short_address
from ..settings import CURRENCY_SYMBOL, DEFAULT_FONT
from ..types import NULL_DONOR


class ElidingLabel(QLabel):
    def paintEvent(self, event):
        painter = QPainter(self)
        metrics = QFontMetrics(self.font())
        elided = metrics.elidedText(self.text(), Qt.ElideRight, self.width())
        painter.drawText(self.rect(), self.alignment(), elided)


class SingleDonor(QWidget):
    _donor = NULL_DONOR

    def __init__(self, rank, parent=None):
        super().__init__(parent=parent)

        self.layout = QHBoxLayout()
        self.rank = QLabel(f"{rank}.")
        self.rank.setFont(QFont(DEFAULT_FONT, 24))
        self.name = ElidingLabel("")
        self.name.setFont(QFont(DEFAULT_FONT, 24))
        self.name.setMinimumWidth(50)
        self.amount = QLabel("")
        self.amount.setFont(QFont(DEFAULT_FONT, 24))
        self.amount.setAlignment(Qt.AlignVCenter | Qt.AlignRight)

        self.layout.addWidget(self.rank)
        self.layout.addWidget(self.name, stretch=1)
        self.layout.addWidget(self.amount)

        self.setLayout(self.layout)

    @property
    def donor(self):
        return self._donor

    @donor.setter
    def donor(self, donor):
        self._donor = donor
        if donor == NULL_DONOR:
            self.name.setText("")
            self.amount.setText("")
        else:
            self.name.setText(short_address(donor.account))
            self.amount.setText(format_ether(donor.amount, CURRENCY_SYMBOL))


class DonorList(
    QWidget,
    SaveSizeAndPositionOnClose,
    ControllableBackgroundAndTextColour,
    HideTitleBarOptional,
):
    """Shows the top-3 leaderboard of a donation box, one row per slot."""

    _donors = ()

    def __init__(self, num_donors=3, parent=None):
        super().__init__(parent=parent)

        self.resize(250, 250)
        self.setWindowTitle("Top Donors")

        self.layout = QVBoxLayout()
        self.layout.setSpacing(0)
        self.layout.setContentsMargins(10, 0, 10, 0)

        self.donor_widgets = []
        for rank in range(1, num_donors + 1):
            donor_widget = SingleDonor(rank)
            self.donor_widgets.append(donor_widget)
            self.layout.addWidget(donor_widget)

        self.setLayout(self.layout)

    @property
    def donors(self):
        return self._donors

    @donors.setter
    def donors(self, donors):
        self._donors = tuple(donors)
        for index, donor_widget in enumerate(self.donor_widgets):
            if index < len(self._donors):
                donor_widget.donor = self._donors[index]
            else:
                donor_widget.donor = NULL_DONOR
