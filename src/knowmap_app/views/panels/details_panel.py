"""
Details panel - read-only view of the selected note plus edit, link and
delete actions.
"""

from PyQt6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QLabel, QLineEdit, QPlainTextEdit,
    QPushButton, QComboBox, QListWidget, QListWidgetItem, QStackedWidget,
    QMessageBox,
)
from PyQt6.QtCore import Qt

from knowmap_core.domain.quadrants import all_descriptors
from ...viewmodels.entry_vm import split_tags
from ...viewmodels.inspector_vm import InspectorVM


class DetailsPanel(QWidget):
    """Details view bound to an InspectorVM."""

    def __init__(self, vm: InspectorVM, parent=None):
        super().__init__(parent)

        self._vm = vm
        self._editing = False

        self._setup_ui()

        self._vm.node_changed.connect(self._refresh)
        self._refresh()

    def _setup_ui(self):
        outer = QVBoxLayout(self)
        outer.setContentsMargins(0, 0, 0, 0)

        self.stack = QStackedWidget()
        outer.addWidget(self.stack)

        # Page 0: nothing selected
        empty = QWidget()
        empty_layout = QVBoxLayout(empty)
        empty_label = QLabel("Select a node on the map to see details")
        empty_label.setObjectName("mutedLabel")
        empty_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        empty_label.setWordWrap(True)
        empty_layout.addWidget(empty_label)
        self.stack.addWidget(empty)

        # Page 1: node details
        page = QWidget()
        layout = QVBoxLayout(page)
        layout.setContentsMargins(20, 20, 20, 20)
        layout.setSpacing(10)

        self.quadrant_label = QLabel()
        self.quadrant_label.setObjectName("sectionLabel")
        layout.addWidget(self.quadrant_label)

        self.title_label = QLabel()
        self.title_label.setObjectName("panelTitle")
        self.title_label.setWordWrap(True)
        layout.addWidget(self.title_label)

        self.tags_label = QLabel()
        self.tags_label.setObjectName("mutedLabel")
        layout.addWidget(self.tags_label)

        self.description_label = QLabel()
        self.description_label.setWordWrap(True)
        layout.addWidget(self.description_label)

        # Edit form (hidden until "Edit" is pressed)
        self.edit_form = QWidget()
        form = QVBoxLayout(self.edit_form)
        form.setContentsMargins(0, 0, 0, 0)
        self.title_edit = QLineEdit()
        form.addWidget(self.title_edit)
        self.quadrant_combo = QComboBox()
        for descriptor in all_descriptors():
            self.quadrant_combo.addItem(descriptor.label, descriptor.quadrant)
        form.addWidget(self.quadrant_combo)
        self.description_edit = QPlainTextEdit()
        self.description_edit.setMaximumHeight(100)
        form.addWidget(self.description_edit)
        self.tags_edit = QLineEdit()
        self.tags_edit.setPlaceholderText("comma, separated, tags")
        form.addWidget(self.tags_edit)
        self.edit_form.hide()
        layout.addWidget(self.edit_form)

        edit_row = QHBoxLayout()
        self.edit_btn = QPushButton("Edit")
        self.edit_btn.clicked.connect(self._on_edit_clicked)
        edit_row.addWidget(self.edit_btn)
        self.cancel_btn = QPushButton("Cancel")
        self.cancel_btn.clicked.connect(self._cancel_edit)
        self.cancel_btn.hide()
        edit_row.addWidget(self.cancel_btn)
        edit_row.addStretch()
        layout.addLayout(edit_row)

        # Links
        links_label = QLabel("LINKED NOTES")
        links_label.setObjectName("sectionLabel")
        layout.addWidget(links_label)

        self.links_list = QListWidget()
        self.links_list.setMaximumHeight(120)
        layout.addWidget(self.links_list)

        link_row = QHBoxLayout()
        self.link_combo = QComboBox()
        link_row.addWidget(self.link_combo, 1)
        self.link_btn = QPushButton("Link")
        self.link_btn.clicked.connect(self._on_link)
        link_row.addWidget(self.link_btn)
        self.unlink_btn = QPushButton("Unlink")
        self.unlink_btn.clicked.connect(self._on_unlink)
        link_row.addWidget(self.unlink_btn)
        layout.addLayout(link_row)

        layout.addStretch()

        self.delete_btn = QPushButton("Delete Node")
        self.delete_btn.setObjectName("dangerButton")
        self.delete_btn.clicked.connect(self._on_delete)
        layout.addWidget(self.delete_btn)

        self.stack.addWidget(page)

    # -------------------------------------------------------------------------
    # Refresh
    # -------------------------------------------------------------------------

    def _refresh(self):
        node = self._vm.node
        if node is None:
            self._editing = False
            self.stack.setCurrentIndex(0)
            return

        descriptor = self._vm.descriptor
        self.quadrant_label.setText(descriptor.label.upper())
        self.quadrant_label.setStyleSheet(f"color: {descriptor.color};")
        self.title_label.setText(node.label)
        self.tags_label.setText("  ".join(f"#{t}" for t in node.tags))
        self.tags_label.setVisible(bool(node.tags))
        self.description_label.setText(node.description or "No description provided.")

        self.links_list.clear()
        for linked in self._vm.linked_nodes:
            item = QListWidgetItem(linked.label)
            item.setData(Qt.ItemDataRole.UserRole, linked.link_id)
            self.links_list.addItem(item)

        self.link_combo.clear()
        for candidate in self._vm.link_candidates:
            self.link_combo.addItem(candidate.label, candidate.node_id)
        self.link_btn.setEnabled(self.link_combo.count() > 0)

        self._set_editing(False)
        self.stack.setCurrentIndex(1)

    def _set_editing(self, editing: bool):
        self._editing = editing
        self.edit_form.setVisible(editing)
        self.cancel_btn.setVisible(editing)
        self.edit_btn.setText("Save" if editing else "Edit")
        self.title_label.setVisible(not editing)
        self.description_label.setVisible(not editing)

    # -------------------------------------------------------------------------
    # Actions
    # -------------------------------------------------------------------------

    def _on_edit_clicked(self):
        node = self._vm.node
        if node is None:
            return

        if not self._editing:
            self.title_edit.setText(node.label)
            self.description_edit.setPlainText(node.description)
            self.tags_edit.setText(", ".join(node.tags))
            self.quadrant_combo.setCurrentIndex(self.quadrant_combo.findData(node.quadrant))
            self._set_editing(True)
            return

        saved = self._vm.save_edits(
            label=self.title_edit.text(),
            description=self.description_edit.toPlainText(),
            quadrant=self.quadrant_combo.currentData(),
            tags=split_tags(self.tags_edit.text()),
        )
        if not saved:
            self.title_edit.setFocus()

    def _cancel_edit(self):
        self._set_editing(False)

    def _on_link(self):
        other_id = self.link_combo.currentData()
        if other_id:
            self._vm.link_to(other_id)

    def _on_unlink(self):
        item = self.links_list.currentItem()
        if item is not None:
            self._vm.unlink(item.data(Qt.ItemDataRole.UserRole))

    def _on_delete(self):
        node = self._vm.node
        if node is None:
            return
        reply = QMessageBox.question(
            self,
            "Delete Node",
            f"Delete '{node.label}' and all of its links?",
            QMessageBox.StandardButton.Yes | QMessageBox.StandardButton.No,
        )
        if reply == QMessageBox.StandardButton.Yes:
            self._vm.delete_node()
