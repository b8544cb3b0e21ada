from decimal import Decimal, InvalidOperation
from functools import partial
import logging
import sys

from PyQt5.QtCore import Qt, QSettings
from PyQt5.QtGui import QColor
from PyQt5.QtWidgets import (
    QAction,
    QApplication,
    QColorDialog,
    QDesktopWidget,
    QInputDialog,
    QMainWindow,
    QMessageBox,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from .accounts import Accounts
from .common import format_donation, format_ether, parse_ether, short_address, to_ether
from .deploy import deploy_donation_box
from .donations import TimedDonationBox
from .errors import ContractError
from .settings import CURRENCY_SYMBOL, DEFAULT_OWNER, DEFAULT_TARGET_ETHER
from .types import Donation, OwnershipTransferred, Total, Withdrawal

from .widgets.countdown import Countdown
from .widgets.donorlist import DonorList
from .widgets.latestdonor import LatestDonor
from .widgets.progressbar import ProgressBarWindow
from .widgets.status import StatusDisplay


class ShowButton(QPushButton):
    def __init__(self, caption, parent, target):
        super().__init__(caption, parent)
        self.target = target
        self.clicked.connect(self.target.show)


class DonationTotaliser(QMainWindow):
    """Main window: follows one donation box and drives the display windows."""

    def __init__(self, box, account=None, accounts=None, settings=None, debug=False, parent=None):
        super().__init__(parent)

        self.box = box
        self.account = account
        self.accounts = accounts
        self.settings = settings or QSettings("donation_box", "donation_box")
        self.key = "mainWindow"

        self.setWindowTitle("Donation Box")

        self.central_widget = QWidget()
        self.setCentralWidget(self.central_widget)

        self.progress_bar = ProgressBarWindow()
        self.latest_donor = LatestDonor()
        self.donor_list = DonorList()
        self.countdown = Countdown()

        self.layout = QVBoxLayout()

        self.status_display = StatusDisplay()
        self.layout.addWidget(self.status_display)

        for widget, caption in self.display_windows():
            button = ShowButton(caption, self, widget)
            self.layout.addWidget(button)
            widget.show()

        self.central_widget.setLayout(self.layout)

        self.menu_bar = self.menuBar()
        self.options_menu()
        self.donations_menu()
        if debug:
            logging.debug("Enabling debug menu")
            self.debug_menu()

        self.init_settings()
        self.init_colours()

        self.countdown.clock = box.clock
        self.countdown.event_finish.connect(self.refresh_status)
        if isinstance(box, TimedDonationBox):
            self.countdown.set_window(box.window)
        else:
            self.countdown.set_window(None)

        self.refresh()
        box.subscribe(self.on_event)
        self.subscribed = True

    def display_windows(self):
        return [
            (self.progress_bar, "Progress bar"),
            (self.latest_donor, "Latest donor"),
            (self.donor_list, "Top donors"),
            (self.countdown, "Countdown"),
        ]

    def init_settings(self):
        self.target = Decimal(
            str(self.settings.value("target", DEFAULT_TARGET_ETHER))
        )

        for widget, key, default_width, default_height in [
            (self.progress_bar, "bar", 500, 150),
            (self.latest_donor, "latest", 500, 150),
            (self.donor_list, "list", 250, 250),
            (self.countdown, "countdown", 250, 150),
        ]:
            widget.restore_geometry(self.settings, key, default_width, default_height)

        width = int(self.settings.value(f"{self.key}/width", 250))
        height = int(self.settings.value(f"{self.key}/height", 250))
        self.resize(width, height)

        hide = self.settings.value("hide_title_bars", False)
        self.show_hide_title_bars(hide in (True, "true"))

    def options_menu(self):
        self.options_sub_menu = self.menu_bar.addMenu("Options")

        self.set_target_action = QAction("Set target", self)
        self.set_target_action.setStatusTip("Set the amount the progress bar aims for.")
        self.set_target_action.setShortcut("CTRL+G")
        self.set_target_action.triggered.connect(self.prompt_set_target)

        self.hide_title_bars_action = QAction("Hide title bars", self)
        self.hide_title_bars_action.setStatusTip(
            "Hide the title bars of the windows intended to be streamed"
        )
        self.hide_title_bars_action.setShortcut("CTRL+B")
        self.hide_title_bars_action.triggered.connect(
            lambda: self.show_hide_title_bars(hide=True)
        )

        self.show_title_bars_action = QAction("Show title bars", self)
        self.show_title_bars_action.setStatusTip(
            "Show the title bars of the windows intended to be streamed"
        )
        self.show_title_bars_action.setShortcut("CTRL+B")
        self.show_title_bars_action.setVisible(False)
        self.show_title_bars_action.triggered.connect(
            lambda: self.show_hide_title_bars(hide=False)
        )

        self.exit_action = QAction("Exit Application", self)
        self.exit_action.setStatusTip("Exit the application.")
        self.exit_action.setShortcut("CTRL+Q")
        self.exit_action.triggered.connect(lambda: QApplication.quit())

        for action in (
            self.set_target_action,
            self.hide_title_bars_action,
            self.show_title_bars_action,
            self.exit_action,
        ):
            self.options_sub_menu.addAction(action)

    def donations_menu(self):
        self.donations_sub_menu = self.menu_bar.addMenu("Donations")

        self.donate_action = QAction("Donate", self)
        self.donate_action.setStatusTip("Record a donation from any address.")
        self.donate_action.setShortcut("CTRL+D")
        self.donate_action.triggered.connect(self.prompt_donate)

        self.withdraw_action = QAction("Withdraw", self)
        self.withdraw_action.setStatusTip("Send everything in the box to its owner.")
        self.withdraw_action.setShortcut("CTRL+W")
        self.withdraw_action.triggered.connect(self.withdraw)

        self.donations_sub_menu.addAction(self.donate_action)
        self.donations_sub_menu.addAction(self.withdraw_action)

    def debug_menu(self):
        self.debug_sub_menu = self.menu_bar.addMenu("Debug")

        self.test_donation_action = QAction(f"Add {CURRENCY_SYMBOL}1 donation", self)
        self.test_donation_action.setStatusTip(
            "Pretend a new donor just gave one ether."
        )
        self.test_donation_action.triggered.connect(
            lambda: self.donate(
                f"0x{self.box.donor_count + 1:040x}", parse_ether("1")
            )
        )
        self.debug_sub_menu.addAction(self.test_donation_action)

    def init_colours(self):
        self.colour_menu = self.menu_bar.addMenu("Colours")
        self.colour_menu_items = []

        for widget, text in [
            (self.latest_donor, "latest donor text"),
            (self.donor_list, "donor list text"),
            (self.countdown, "countdown text"),
            (self.progress_bar, "progress bar lower text"),
        ]:

            def set_colour(checked, widget, text):
                colour = QColorDialog.getColor(
                    initial=widget.text_colour,
                    parent=self,
                    title=f"Choose {text} colour",
                )
                if colour.isValid():
                    widget.text_colour = colour
                    self.settings.setValue(f"{widget.key}/text_colour", colour)

            action = QAction(f"Set {text} colour", self)
            action.triggered.connect(partial(set_colour, widget=widget, text=text))
            self.colour_menu.addAction(action)
            self.colour_menu_items.append(action)

            widget.restore_colours(self.settings)

        self.progress_bar.bar_colour = QColor(
            self.settings.value("bar/bar_colour", QColor(Qt.green))
        )
        bar_colour_action = QAction("Set progress bar colour", self)
        bar_colour_action.triggered.connect(self.set_bar_colour)
        self.colour_menu.addAction(bar_colour_action)
        self.colour_menu_items.append(bar_colour_action)

        background_colour_action = QAction("Set window background colour", self)
        background_colour_action.triggered.connect(self.set_background_colours)
        self.colour_menu.addAction(background_colour_action)
        self.colour_menu_items.append(background_colour_action)

    def set_bar_colour(self):
        colour = QColorDialog.getColor(
            initial=QColor(self.progress_bar.bar_colour),
            parent=self,
            title="Choose progress bar colour",
        )
        if colour.isValid():
            self.progress_bar.bar_colour = colour
            self.settings.setValue("bar/bar_colour", colour)

    def set_background_colours(self):
        colour = QColorDialog.getColor(
            initial=self.donor_list.background_colour,
            parent=self,
            title="Choose window background colour",
        )
        if colour.isValid():
            self.settings.setValue("background_colour", colour)
            for window, _ in self.display_windows():
                window.background_colour = colour

    def show_hide_title_bars(self, hide):
        for window, _ in self.display_windows():
            visible = window.isVisible()
            window.title_bar_hidden = hide
            if visible:
                window.show()

        self.hide_title_bars_action.setVisible(not hide)
        self.show_title_bars_action.setVisible(hide)
        self.settings.setValue("hide_title_bars", hide)

    def prompt_set_target(self):
        target, accept = QInputDialog.getText(
            self,
            "Enter target",
            f"Enter the target amount, in {CURRENCY_SYMBOL}:",
        )
        if accept:
            try:
                self.set_target(target)
            except ValueError as ex:
                QMessageBox.warning(self, "Invalid target", str(ex))

    def set_target(self, target):
        try:
            target = Decimal(target)
        except InvalidOperation:
            raise ValueError(f"Not a number: {target!r}") from None
        if target <= 0:
            raise ValueError("The target must be more than zero")

        self.target = target
        self.settings.setValue("target", str(target))
        self.refresh()

    def prompt_donate(self):
        donor, accept = QInputDialog.getText(
            self, "Enter donor", "Enter the donor's address:"
        )
        if not accept:
            return
        amount, accept = QInputDialog.getText(
            self, "Enter amount", f"Enter the amount to donate, in {CURRENCY_SYMBOL}:"
        )
        if not accept:
            return

        try:
            wei = parse_ether(amount)
        except ValueError as ex:
            QMessageBox.warning(self, "Donation rejected", str(ex))
            return
        self.donate(donor.strip(), wei)

    def donate(self, donor, amount):
        try:
            self.box.donate(donor, amount)
        except ContractError as ex:
            logging.info(f"Donation from {donor} rejected: {ex}")
            QMessageBox.warning(self, "Donation rejected", str(ex))
            return False
        return True

    def withdraw(self):
        account = self.account or self.box.owner
        try:
            self.box.withdraw(account)
        except ContractError as ex:
            logging.info(f"Withdrawal by {account} rejected: {ex}")
            QMessageBox.warning(self, "Withdrawal rejected", str(ex))
            return False
        return True

    def on_event(self, event):
        if isinstance(event, Donation):
            self.latest_donor.donation = event
            self.status_display.last_event = format_donation(event, CURRENCY_SYMBOL)
        elif isinstance(event, Withdrawal):
            message = (
                f"{short_address(event.owner)} withdrew "
                f"{format_ether(event.amount, CURRENCY_SYMBOL)}"
            )
            if self.accounts is not None:
                wallet = self.accounts.balance_of(event.owner)
                message += f", wallet now {format_ether(wallet, CURRENCY_SYMBOL)}"
            self.status_display.last_event = message
        elif isinstance(event, OwnershipTransferred):
            self.status_display.last_event = (
                f"Box now owned by {short_address(event.new_owner) or 'nobody'}"
            )
        self.refresh()

    def refresh(self):
        self.progress_bar.totals = Total(
            to_ether(self.box.total_donations), self.target, CURRENCY_SYMBOL
        )
        self.progress_bar.set_balance(to_ether(self.box.balance), CURRENCY_SYMBOL)
        self.donor_list.donors = self.box.get_top3_donors()
        self.refresh_status()

    def refresh_status(self):
        if self.box.is_donation_allowed():
            self.status_display.status = "Open"
        elif isinstance(self.box, TimedDonationBox) and (
            self.box.clock() < self.box.donation_start_time
        ):
            self.status_display.status = "Not yet open"
        else:
            self.status_display.status = "Closed"

    def closeEvent(self, event):
        self.settings.setValue(f"{self.key}/width", self.size().width())
        self.settings.setValue(f"{self.key}/height", self.size().height())
        if self.subscribed:
            self.box.unsubscribe(self.on_event)
            self.subscribed = False

        QApplication.closeAllWindows()
        event.accept()


def main(debug=False):
    application = QApplication(sys.argv)
    settings = QSettings("donation_box", "donation_box")
    owner = settings.value("owner", DEFAULT_OWNER)

    accounts = Accounts()
    box = deploy_donation_box(owner, payout=accounts.credit)
    window = DonationTotaliser(box, accounts=accounts, settings=settings, debug=debug)

    desktop = QDesktopWidget().availableGeometry()
    width = (desktop.width() - window.width()) // 2
    height = (desktop.height() - window.height()) // 2
    window.show()
    window.move(width, height)
    sys.exit(application.exec_())
