"""
pytest-qt tests for the transient status channel.

The notifier holds at most one message and a single pending dismiss timer;
each new message restarts that timer.
"""
import pytest
from PyQt5.QtWidgets import QWidget

from components.status_notifier import StatusNotifier, StatusToast
from constants import STATUS_TIMEOUT_MS
from models.notification import Severity
from utils.errors import InvalidFileType
from utils.logger import set_notifier, loggerNotify, loggerSuccess


# ══════════════════════════════════════════════════════════════════════════
# StatusNotifier
# ══════════════════════════════════════════════════════════════════════════

class TestStatusNotifier:

    @pytest.fixture
    def notifier(self, qtbot):
        return StatusNotifier(timeout_ms=600)

    def test_default_timeout_is_one_second(self, qtbot):
        assert STATUS_TIMEOUT_MS == 1000
        assert StatusNotifier()._timer.interval() == 1000

    def test_show_sets_current(self, notifier):
        notifier.show("Saved", Severity.SUCCESS)
        assert notifier.current.message == "Saved"
        assert notifier.current.severity is Severity.SUCCESS
        assert notifier.is_pending()

    def test_severity_accepts_plain_string(self, notifier):
        notifier.show("Oops", 'error')
        assert notifier.current.severity is Severity.ERROR

    def test_auto_dismiss(self, qtbot, notifier):
        notifier.show("Hello")
        with qtbot.waitSignal(notifier.messageCleared, timeout=2000):
            pass
        assert notifier.current is None
        assert not notifier.is_pending()

    def test_new_message_restarts_timer(self, qtbot, notifier):
        notifier.show("first")
        qtbot.wait(350)
        notifier.show("second")
        qtbot.wait(350)

        # 700 ms after the first message, the restarted timer is still pending
        assert notifier.current.message == "second"
        assert notifier.is_pending()

        with qtbot.waitSignal(notifier.messageCleared, timeout=2000):
            pass
        assert notifier.current is None

    def test_shown_signal_payload(self, qtbot, notifier):
        with qtbot.waitSignal(notifier.messageShown, timeout=1000) as blocker:
            notifier.show("Bad file", Severity.ERROR)
        assert blocker.args == ["Bad file", "error"]


# ══════════════════════════════════════════════════════════════════════════
# Logger Routing
# ══════════════════════════════════════════════════════════════════════════

class TestLoggerRouting:

    def test_notify_routes_user_message(self, qtbot):
        notifier = StatusNotifier()
        set_notifier(notifier.show)

        loggerNotify(InvalidFileType("text/plain upload"))

        assert notifier.current.message == "Please select an image file"
        assert notifier.current.severity is Severity.ERROR

    def test_success_routes(self, qtbot):
        notifier = StatusNotifier()
        set_notifier(notifier.show)

        loggerSuccess("Image saved successfully")

        assert notifier.current.severity is Severity.SUCCESS

    def test_no_notifier_falls_back_to_stderr(self, capsys):
        loggerNotify(ValueError("boom"), "Something failed")
        assert "ERROR: Something failed" in capsys.readouterr().err


# ══════════════════════════════════════════════════════════════════════════
# StatusToast
# ══════════════════════════════════════════════════════════════════════════

class TestStatusToast:

    def test_toast_follows_notifier(self, qtbot):
        parent = QWidget()
        qtbot.addWidget(parent)
        parent.resize(600, 400)
        parent.show()

        notifier = StatusNotifier(timeout_ms=100)
        toast = StatusToast(notifier, parent)

        notifier.show("Image loaded successfully")
        assert toast.isVisible()
        assert toast.text() == "Image loaded successfully"

        with qtbot.waitSignal(notifier.messageCleared, timeout=2000):
            pass
        assert not toast.isVisible()
