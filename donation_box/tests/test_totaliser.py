from decimal import Decimal

import pytest

from PyQt5.QtCore import QSettings

from donation_box import totaliser
from donation_box.accounts import Accounts
from donation_box.donations import DonationBox, TimedDonationBox
from donation_box.types import NULL_DONOR, Total, TopDonor

from .conftest import ALICE, BOB, CAROL, DAVE, ETHER, OWNER


@pytest.fixture
def settings(qapp, tmp_path):
    return QSettings(str(tmp_path / "settings.ini"), QSettings.IniFormat)


@pytest.fixture
def accounts():
    return Accounts()


@pytest.fixture
def box(clock, accounts):
    return TimedDonationBox(OWNER, 1_000, 2_000, payout=accounts.credit, clock=clock)


@pytest.fixture
def warnings(monkeypatch):
    shown = []
    monkeypatch.setattr(
        totaliser.QMessageBox, "warning", lambda *args: shown.append(args)
    )
    return shown


@pytest.fixture
def window(qtbot, box, accounts, settings):
    new_window = totaliser.DonationTotaliser(box, accounts=accounts, settings=settings)
    qtbot.add_widget(new_window)
    for widget, _ in new_window.display_windows():
        qtbot.add_widget(widget)
    new_window.show()
    yield new_window
    new_window.countdown.timer.stop()


def test_window_title(window):
    assert window.windowTitle() == "Donation Box"
    assert window.donor_list.windowTitle() == "Top Donors"


def test_starts_empty(window):
    assert window.progress_bar.totals == Total(Decimal(0), Decimal(10), "Ξ")
    assert window.donor_list.donors == (NULL_DONOR,) * 3
    assert window.status_display.status == "Open"
    assert window.status_display.last_event == "No donations yet"
    assert window.progress_bar.balance_label.text() == "Nothing waiting to be withdrawn"


def test_donations_update_displays(window, box):
    for donor, amount in [(ALICE, 1), (BOB, 3), (CAROL, 2), (DAVE, 4)]:
        box.donate(donor, amount * ETHER)

    assert window.donor_list.donors == (
        TopDonor(DAVE, 4 * ETHER),
        TopDonor(BOB, 3 * ETHER),
        TopDonor(CAROL, 2 * ETHER),
    )
    assert window.donor_list.donor_widgets[0].amount.text() == "Ξ4"
    assert window.progress_bar.totals.raised == Decimal(10)
    assert window.latest_donor.name.text() == "0x4444…4444: Ξ4"
    assert window.latest_donor.message.text() == "First donation!"
    assert window.status_display.last_event == "0x4444…4444 donated Ξ4"


def test_repeat_donation_message(window, box):
    box.donate(ALICE, ETHER)
    box.donate(ALICE, 2 * ETHER)
    assert window.latest_donor.message.text() == "Ξ3 given so far"


def test_donate_action_reports_rejection(window, box, warnings):
    assert not window.donate(ALICE, 0)
    assert len(warnings) == 1
    assert warnings[0][2] == "Donation amount must be greater than 0"
    assert box.total_donations == 0


def test_prompt_donate(window, box, monkeypatch, warnings):
    answers = iter([(ALICE, True), ("1.5", True)])
    monkeypatch.setattr(
        totaliser.QInputDialog, "getText", lambda *args: next(answers)
    )
    window.prompt_donate()
    assert box.get_donation(ALICE) == 3 * ETHER // 2
    assert warnings == []


def test_prompt_donate_bad_amount(window, box, monkeypatch, warnings):
    answers = iter([(ALICE, True), ("lots", True)])
    monkeypatch.setattr(
        totaliser.QInputDialog, "getText", lambda *args: next(answers)
    )
    window.prompt_donate()
    assert box.total_donations == 0
    assert len(warnings) == 1


def test_withdraw(window, box, accounts, warnings):
    box.donate(ALICE, 2 * ETHER)
    assert window.progress_bar.balance_label.text() == "Ξ2 waiting to be withdrawn"

    assert window.withdraw()
    assert accounts.balance_of(OWNER) == 2 * ETHER
    assert window.progress_bar.balance_label.text() == "Nothing waiting to be withdrawn"
    assert window.status_display.last_event.endswith("wallet now Ξ2")

    assert not window.withdraw()
    assert warnings[0][2] == "No funds to withdraw"


def test_withdraw_as_stranger(qtbot, box, settings, warnings):
    window = totaliser.DonationTotaliser(box, account=ALICE, settings=settings)
    qtbot.add_widget(window)
    box.donate(BOB, ETHER)
    assert not window.withdraw()
    assert box.balance == ETHER
    assert warnings[0][2] == f"Unauthorized account: {ALICE}"
    window.countdown.timer.stop()


def test_ownership_change_shown(window, box):
    box.transfer_ownership(OWNER, BOB)
    assert window.status_display.last_event == "Box now owned by 0x2222…2222"


def test_withdraw_follows_new_owner(window, box, accounts, warnings):
    box.donate(ALICE, ETHER)
    box.transfer_ownership(OWNER, BOB)
    assert window.withdraw()
    assert accounts.balance_of(BOB) == ETHER
    assert warnings == []


def test_set_target(window, settings):
    window.set_target("2.5")
    assert window.progress_bar.totals.target == Decimal("2.5")
    assert settings.value("target") == "2.5"

    with pytest.raises(ValueError):
        window.set_target("0")
    with pytest.raises(ValueError):
        window.set_target("many")
    assert window.target == Decimal("2.5")


def test_countdown_closes(qtbot, window, clock):
    clock.now = 1_500
    window.countdown.refresh_time()
    assert window.countdown.caption.text() == "Donations close in"
    assert window.countdown.label.text() == "0:08:20"

    clock.now = 2_001
    with qtbot.waitSignal(window.countdown.event_finish, timeout=1000):
        window.countdown.refresh_time()
    assert window.countdown.label.text() == "CLOSED!"
    assert window.status_display.status == "Closed"
    assert not window.countdown.timer.isActive()


def test_countdown_before_opening(qtbot, box, clock, settings):
    clock.now = 400
    window = totaliser.DonationTotaliser(box, settings=settings)
    qtbot.add_widget(window)
    assert window.countdown.caption.text() == "Donations open in"
    assert window.countdown.label.text() == "0:10:00"
    assert window.status_display.status == "Not yet open"
    window.countdown.timer.stop()


def test_untimed_box_always_open(qtbot, settings):
    window = totaliser.DonationTotaliser(DonationBox(OWNER), settings=settings)
    qtbot.add_widget(window)
    assert window.countdown.label.text() == "Always open"
    assert window.status_display.status == "Open"


def test_hide_title_bars_persists(window, settings):
    window.show_hide_title_bars(True)
    assert window.donor_list.title_bar_hidden
    assert window.show_title_bars_action.isVisible()
    assert settings.value("hide_title_bars") in (True, "true")

    window.show_hide_title_bars(False)
    assert not window.countdown.title_bar_hidden
    assert window.hide_title_bars_action.isVisible()
