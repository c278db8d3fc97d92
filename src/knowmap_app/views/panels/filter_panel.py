"""
Filter panel - quadrant visibility toggles and tag chips.
"""

from PyQt6.QtWidgets import (
    QWidget, QVBoxLayout, QLabel, QCheckBox, QPushButton, QGridLayout,
)

from knowmap_core.domain.quadrants import all_descriptors
from ...viewmodels.filter_vm import FilterVM


class FilterPanel(QWidget):
    """Filter controls bound to a FilterVM."""

    # Tag chips per row
    CHIP_COLUMNS = 3

    def __init__(self, vm: FilterVM, parent=None):
        super().__init__(parent)

        self._vm = vm
        self._tag_buttons = {}

        self._setup_ui()

        self._vm.tags_changed.connect(self._rebuild_tags)
        self._vm.filter_changed.connect(self._sync_from_state)
        self._rebuild_tags()

    def _setup_ui(self):
        layout = QVBoxLayout(self)
        layout.setContentsMargins(20, 20, 20, 20)
        layout.setSpacing(10)

        zones_label = QLabel("TOGGLE ZONES")
        zones_label.setObjectName("sectionLabel")
        layout.addWidget(zones_label)

        self._quadrant_boxes = {}
        for descriptor in all_descriptors():
            box = QCheckBox(descriptor.label)
            box.setStyleSheet(f"color: {descriptor.color}; font-weight: 600;")
            box.setChecked(self._vm.is_quadrant_visible(descriptor.quadrant))
            box.toggled.connect(
                lambda checked, q=descriptor.quadrant: self._vm.set_quadrant_visible(q, checked)
            )
            self._quadrant_boxes[descriptor.quadrant] = box
            layout.addWidget(box)

        tags_label = QLabel("FILTER BY TAGS")
        tags_label.setObjectName("sectionLabel")
        layout.addWidget(tags_label)

        self._tags_container = QWidget()
        self._tags_layout = QGridLayout(self._tags_container)
        self._tags_layout.setContentsMargins(0, 0, 0, 0)
        self._tags_layout.setSpacing(6)
        layout.addWidget(self._tags_container)

        self.no_tags_label = QLabel("No tags yet")
        self.no_tags_label.setObjectName("mutedLabel")
        layout.addWidget(self.no_tags_label)

        self.clear_btn = QPushButton("Clear tag filter")
        self.clear_btn.clicked.connect(self._vm.clear_tags)
        layout.addWidget(self.clear_btn)

        self.reset_btn = QPushButton("Reset all filters")
        self.reset_btn.clicked.connect(self._vm.reset)
        self.reset_btn.setEnabled(self._vm.is_active)
        layout.addWidget(self.reset_btn)

        layout.addStretch()

    def _rebuild_tags(self):
        """Recreate tag chips from the registry."""
        for btn in self._tag_buttons.values():
            self._tags_layout.removeWidget(btn)
            btn.deleteLater()
        self._tag_buttons.clear()

        active = set(self._vm.active_tags)
        for i, tag in enumerate(self._vm.available_tags):
            btn = QPushButton(f"#{tag}")
            btn.setObjectName("tagChip")
            btn.setCheckable(True)
            btn.setChecked(tag in active)
            btn.clicked.connect(lambda _checked, t=tag: self._vm.toggle_tag(t))
            self._tags_layout.addWidget(btn, i // self.CHIP_COLUMNS, i % self.CHIP_COLUMNS)
            self._tag_buttons[tag] = btn

        self.no_tags_label.setVisible(not self._tag_buttons)
        self.clear_btn.setEnabled(bool(active))

    def _sync_from_state(self, state):
        for tag, btn in self._tag_buttons.items():
            btn.setChecked(tag in state.tags)
        for quadrant, box in self._quadrant_boxes.items():
            box.blockSignals(True)
            box.setChecked(state.is_quadrant_visible(quadrant))
            box.blockSignals(False)
        self.clear_btn.setEnabled(bool(state.tags))
        self.reset_btn.setEnabled(state.is_active())
