from PyQt5.QtWidgets import QWidget

DARK_STYLE_SHEET = """
    /* --- GENERAL --- */
    QMainWindow, QWidget, QLabel, QFrame {
        background-color: #2e2e2e;
        color: #f0f0f0;
        border: none;
    }

    /* --- TOOL BUTTONS --- */
    QToolButton {
        background-color: transparent;
        color: #B5B5C5;
        border: none;
        border-radius: 4px;
        padding: 4px 10px;
    }
    QToolButton:hover {
        background-color: #3e3e3e;
    }
    QToolButton:checked {
        background-color: #4a9eff;
        color: #ffffff;
    }
    QToolButton:disabled {
        color: #666666;
    }

    /* --- MENUS --- */
    QMenuBar, QMenu {
        background-color: #3e3e3e;
        color: #f0f0f0;
    }
    QMenu::item:selected, QMenuBar::item:selected {
        background-color: #4a9eff;
    }

    /* --- SCROLL AREA --- */
    QScrollArea {
        background-color: #1e1e1e;
    }
"""


def apply_style(widget: QWidget):
    """
    Applies the dark application style sheet to a top-level widget.
    The overlay paints itself and is unaffected.
    """
    widget.setStyleSheet(DARK_STYLE_SHEET)
