"""
Add panel - form for creating a new note.
"""

from PyQt6.QtWidgets import (
    QWidget, QVBoxLayout, QLabel, QLineEdit, QPlainTextEdit,
    QPushButton, QButtonGroup, QRadioButton,
)

from knowmap_core.domain.quadrants import all_descriptors
from ...viewmodels.entry_vm import EntryVM


def _section(text: str) -> QLabel:
    label = QLabel(text.upper())
    label.setObjectName("sectionLabel")
    return label


class EntryPanel(QWidget):
    """Form bound to an EntryVM."""

    def __init__(self, vm: EntryVM, parent=None):
        super().__init__(parent)

        self._vm = vm

        self._setup_ui()

        self._vm.form_changed.connect(self._load_from_vm)
        self._load_from_vm()

    def _setup_ui(self):
        layout = QVBoxLayout(self)
        layout.setContentsMargins(20, 20, 20, 20)
        layout.setSpacing(10)

        layout.addWidget(_section("Title"))
        self.title_edit = QLineEdit()
        self.title_edit.setPlaceholderText("What do you know?")
        self.title_edit.returnPressed.connect(self._on_submit)
        layout.addWidget(self.title_edit)

        layout.addWidget(_section("Quadrant"))
        self.quadrant_group = QButtonGroup(self)
        self._quadrant_buttons = {}
        for descriptor in all_descriptors():
            btn = QRadioButton(f"{descriptor.label}  ·  {descriptor.subtitle}")
            btn.setStyleSheet(f"color: {descriptor.color}; font-weight: 600;")
            self.quadrant_group.addButton(btn)
            self._quadrant_buttons[descriptor.quadrant] = btn
            layout.addWidget(btn)

        layout.addWidget(_section("Description"))
        self.description_edit = QPlainTextEdit()
        self.description_edit.setPlaceholderText("Add some details...")
        self.description_edit.setMaximumHeight(120)
        layout.addWidget(self.description_edit)

        layout.addWidget(_section("Tags"))
        self.tags_edit = QLineEdit()
        self.tags_edit.setPlaceholderText("comma, separated, tags")
        layout.addWidget(self.tags_edit)

        self.error_label = QLabel("")
        self.error_label.setStyleSheet("color: #dc2626;")
        self.error_label.hide()
        self._vm.validation_failed.connect(self._on_validation_failed)
        layout.addWidget(self.error_label)

        self.add_btn = QPushButton("Add to Map")
        self.add_btn.setObjectName("primaryButton")
        self.add_btn.clicked.connect(self._on_submit)
        layout.addWidget(self.add_btn)

        layout.addStretch()

    def _load_from_vm(self):
        self.title_edit.setText(self._vm.label)
        self.description_edit.setPlainText(self._vm.description)
        self.tags_edit.setText(self._vm.tags_text)
        self._quadrant_buttons[self._vm.quadrant].setChecked(True)

    def _store_to_vm(self):
        self._vm.label = self.title_edit.text()
        self._vm.description = self.description_edit.toPlainText()
        self._vm.tags_text = self.tags_edit.text()
        for quadrant, btn in self._quadrant_buttons.items():
            if btn.isChecked():
                self._vm.quadrant = quadrant

    def _on_submit(self):
        self._store_to_vm()
        if self._vm.submit():
            self.error_label.hide()

    def _on_validation_failed(self, message: str):
        self.error_label.setText(message)
        self.error_label.show()
        self.title_edit.setFocus()

    def focus_title(self):
        self.title_edit.setFocus()
