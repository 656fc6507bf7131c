"""Shared UI helper functions for components"""

from PyQt5.QtWidgets import QComboBox, QLabel, QPushButton
from PyQt5.QtCore import Qt


BUTTON_STYLE = """
    QPushButton {
        padding: 10px 18px;
        border-radius: 8px;
        border: none;
        font-size: 13px;
        font-weight: 600;
        color: white;
        background-color: %(color)s;
    }
    QPushButton:hover {
        background-color: %(hover)s;
    }
    QPushButton:disabled {
        background-color: #9ca3af;
        color: #e5e7eb;
    }
"""

ACCENT_COLORS = {
    'primary': ('#ff5f2e', '#ff8853'),
    'reset': ('#6d28d9', '#7c3aed'),
    'seasonal': ('#dc2626', '#16a34a'),
}


def create_command_button(text, tooltip=None, accent='primary'):
    """Create a flat command button

    Args:
        text: Button label
        tooltip: Optional tooltip (shortcut hint)
        accent: Key into ACCENT_COLORS

    Returns:
        QPushButton
    """
    color, hover = ACCENT_COLORS.get(accent, ACCENT_COLORS['primary'])
    button = QPushButton(text)
    button.setCursor(Qt.PointingHandCursor)
    button.setStyleSheet(BUTTON_STYLE % {'color': color, 'hover': hover})
    if tooltip:
        button.setToolTip(tooltip)
    return button


def create_styled_combo_box(items):
    """Create a styled combo box with unicode down arrow

    Args:
        items: List of strings to populate the combo box

    Returns:
        QComboBox with custom styling and unicode arrow
    """
    combo = QComboBox()
    combo.addItems(items)
    combo.setStyleSheet("""
        QComboBox {
            padding: 5px 5px;
            padding-right: 20px;
            border-radius: 3px;
            border: 1px solid #ff6b2b;
        }
        QComboBox::drop-down {
            border: none;
            width: 16px;
        }
        QComboBox::down-arrow {
            image: none;
        }
    """)

    arrow_label = QLabel("▼", combo)
    arrow_label.setStyleSheet("color: #ff6b2b; font-size: 10px; background: transparent;")
    arrow_label.setAttribute(Qt.WA_TransparentForMouseEvents)
    arrow_label.setAlignment(Qt.AlignCenter)

    def update_arrow_position():
        arrow_label.setGeometry(combo.width() - 20, 0, 20, combo.height())

    original_resize = combo.resizeEvent

    def resize_with_arrow(event):
        original_resize(event)
        update_arrow_position()
    combo.resizeEvent = resize_with_arrow
    update_arrow_position()

    return combo
