"""
Styles and themes for KnowMap.

Light slate theme with an indigo accent.
"""

# Light theme colors
COLORS = {
    "bg_primary": "#ffffff",
    "bg_secondary": "#f8fafc",
    "bg_tertiary": "#f1f5f9",
    "bg_hover": "#e2e8f0",
    "text_primary": "#1e293b",
    "text_secondary": "#64748b",
    "text_muted": "#94a3b8",
    "accent": "#4f46e5",
    "accent_hover": "#4338ca",
    "danger": "#dc2626",
    "border": "#e2e8f0",
}

LIGHT_STYLESHEET = """
QMainWindow, QWidget {
    background-color: #ffffff;
    color: #1e293b;
    font-family: "Segoe UI", sans-serif;
}

QLabel#sectionLabel {
    color: #94a3b8;
    font-size: 11px;
    font-weight: bold;
}
QLabel#panelTitle {
    color: #1e293b;
    font-size: 20px;
    font-weight: bold;
}
QLabel#mutedLabel {
    color: #64748b;
}
QLabel#hintLabel {
    background-color: rgba(255, 255, 255, 220);
    color: #64748b;
    border: 1px solid #e2e8f0;
    border-radius: 12px;
    padding: 6px 14px;
}

QTabWidget::pane {
    border: none;
    border-top: 1px solid #e2e8f0;
}
QTabBar::tab {
    background-color: #ffffff;
    color: #64748b;
    padding: 12px 22px;
    border: none;
    font-weight: 500;
}
QTabBar::tab:selected {
    color: #4f46e5;
    border-bottom: 2px solid #4f46e5;
}
QTabBar::tab:hover:!selected {
    color: #334155;
}

QPushButton {
    background-color: #ffffff;
    color: #334155;
    padding: 8px 16px;
    border-radius: 6px;
    border: 1px solid #e2e8f0;
}
QPushButton:hover {
    background-color: #f8fafc;
    border-color: #cbd5e1;
}
QPushButton:pressed {
    background-color: #f1f5f9;
}

QPushButton#primaryButton {
    background-color: #4f46e5;
    color: white;
    border: none;
    font-weight: 600;
    padding: 10px 16px;
}
QPushButton#primaryButton:hover {
    background-color: #4338ca;
}

QPushButton#dangerButton {
    background-color: #ffffff;
    color: #dc2626;
    border: 1px solid #fecaca;
    font-weight: 600;
}
QPushButton#dangerButton:hover {
    background-color: #fef2f2;
    border-color: #fca5a5;
}

QPushButton#tagChip {
    border-radius: 12px;
    padding: 4px 12px;
    font-size: 12px;
    background-color: #ffffff;
    color: #475569;
}
QPushButton#tagChip:checked {
    background-color: #4f46e5;
    color: white;
    border-color: #4f46e5;
}

QLineEdit, QTextEdit, QPlainTextEdit {
    background-color: #f8fafc;
    color: #1e293b;
    border: 1px solid #e2e8f0;
    border-radius: 6px;
    padding: 8px 10px;
}
QLineEdit:focus, QTextEdit:focus, QPlainTextEdit:focus {
    border-color: #4f46e5;
}

QLineEdit#searchBox {
    font-size: 14px;
    padding: 8px 14px;
    border-radius: 18px;
    min-width: 260px;
}

QComboBox {
    background-color: #f8fafc;
    color: #1e293b;
    border: 1px solid #e2e8f0;
    border-radius: 6px;
    padding: 6px 10px;
}
QComboBox QAbstractItemView {
    background-color: #ffffff;
    selection-background-color: #eef2ff;
    selection-color: #1e293b;
}

QListWidget {
    background-color: #ffffff;
    border: 1px solid #e2e8f0;
    border-radius: 6px;
}
QListWidget::item:selected {
    background-color: #eef2ff;
    color: #1e293b;
}

QCheckBox {
    spacing: 8px;
}

QToolBar {
    background-color: #ffffff;
    border-bottom: 1px solid #e2e8f0;
    spacing: 8px;
    padding: 6px;
}

QStatusBar {
    background-color: #f8fafc;
    color: #64748b;
    border-top: 1px solid #e2e8f0;
}

QToolTip {
    background-color: #1e293b;
    color: #f8fafc;
    border: none;
    padding: 4px;
}
"""
