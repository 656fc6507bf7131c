"""Global logging and error handling utilities"""
import sys
import logging
import traceback

from models.notification import Severity

# Detect debug mode - True if running from source, False if packaged
DEBUG_MODE = not getattr(sys, 'frozen', False)

_logger = logging.getLogger('errors')
_notifier = None


def set_notifier(notifier):
    """Set the callable that shows transient messages: notifier(message, severity)"""
    global _notifier
    _notifier = notifier


def _report(message, severity):
    if _notifier:
        _notifier(message, severity)
    else:
        # Fallback if no notifier set (headless)
        print(f"{severity.value.upper()}: {message}", file=sys.stderr)


def loggerNotify(e: Exception, user_message: str = None):
    """Report a recoverable error as a transient notification

    Args:
        e: The exception to report (EditorError carries its own user_message)
        user_message: Override for the text shown to the user

    Editing state is never touched here; the caller has already aborted.
    """
    message = user_message or getattr(e, 'user_message', None) or str(e)
    _logger.warning(f"{type(e).__name__}: {e}")
    _report(message, Severity.ERROR)


def loggerRaise(e: Exception, user_message: str = None):
    """Handle unexpected exceptions with an optional notification in release mode

    Args:
        e: The exception to handle
        user_message: User-friendly message (optional)

    In DEBUG_MODE:
        - Just raises the exception (shows full traceback)

    In RELEASE_MODE:
        - Logs the full traceback
        - Shows the user message or exception string
        - Then raises the exception
    """
    if DEBUG_MODE:
        raise e

    tb = traceback.format_exc()
    _logger.error(f"ERROR: {tb}")
    _report(user_message if user_message else str(e), Severity.ERROR)
    raise e


def loggerSuccess(message: str):
    """Show a transient success notification"""
    _logger.info(message)
    _report(message, Severity.SUCCESS)
