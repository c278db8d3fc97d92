"""
Main Window for KnowMap.

Thin view layer using MVVM pattern:
- ViewModels hold state and interaction logic
- This view handles UI layout and binding
"""

import logging
from typing import Optional

from PyQt6.QtWidgets import (
    QMainWindow, QWidget, QLabel, QLineEdit, QSplitter, QTabWidget, QToolBar,
    QSizePolicy,
)
from PyQt6.QtCore import Qt
from PyQt6.QtGui import QFont, QAction, QCloseEvent, QKeySequence

from knowmap_core.config import get_db_path
from knowmap_core.ports.store_port import StorePort
from knowmap_core.services.dataset import DatasetService

from ..viewmodels import MapVM, FilterVM, EntryVM, InspectorVM, AppCoordinator
from .map import MapCanvas
from .panels import EntryPanel, FilterPanel, DetailsPanel

logger = logging.getLogger(__name__)

HINT_TEXT = "Double-click any quadrant to add a note"


class MainWindow(QMainWindow):
    """Main application window using MVVM pattern."""

    def __init__(self, store: Optional[StorePort] = None):
        """
        Args:
            store: Storage adapter (defaults to the SQLite store in the data dir)
        """
        super().__init__()

        self.setWindowTitle("KnowMap - Personal Knowledge Map")
        self.resize(1400, 900)

        # Storage and dataset
        if store is None:
            from knowmap_core.adapters.sqlite_store import SqliteStore
            db_path = get_db_path()
            logger.info("Using store at %s", db_path)
            store = SqliteStore(db_path)
        self._store = store
        self._dataset = DatasetService(self._store)
        self._dataset.load()

        # Initialize ViewModels (after services)
        self._init_viewmodels()

        # Setup UI
        self._setup_ui()
        self._setup_toolbar()
        self._setup_status_bar()

        # Bind ViewModels to UI
        self._bind_viewmodels()

        # First layout run
        self._coordinator.start()

    # -------------------------------------------------------------------------
    # ViewModel Initialization
    # -------------------------------------------------------------------------

    def _init_viewmodels(self):
        """Initialize all ViewModels."""
        self._map_vm = MapVM(self._dataset)
        self._filter_vm = FilterVM(self._dataset)
        self._entry_vm = EntryVM(self._dataset)
        self._inspector_vm = InspectorVM(self._dataset)

        # Create coordinator for cross-VM wiring
        self._coordinator = AppCoordinator(
            self._map_vm,
            self._filter_vm,
            self._entry_vm,
            self._inspector_vm,
        )

    def _bind_viewmodels(self):
        """Bind ViewModel signals to UI updates."""
        self._coordinator.status_message.connect(self._show_status)
        self._coordinator.show_entry_requested.connect(self._show_entry_tab)
        self._map_vm.selection_changed.connect(self._on_selection_changed)
        self._filter_vm.filter_changed.connect(self._sync_search_box)

    # -------------------------------------------------------------------------
    # UI Setup
    # -------------------------------------------------------------------------

    def _setup_ui(self):
        """Setup the main UI layout: map on the left, side panel on the right."""
        splitter = QSplitter(Qt.Orientation.Horizontal)
        self.setCentralWidget(splitter)

        self.canvas = MapCanvas(self._map_vm)
        splitter.addWidget(self.canvas)

        self.side_tabs = QTabWidget()
        self.side_tabs.setDocumentMode(True)
        self.side_tabs.setMinimumWidth(340)
        self.side_tabs.setMaximumWidth(420)

        self.entry_panel = EntryPanel(self._entry_vm)
        self.side_tabs.addTab(self.entry_panel, "Add")

        self.filter_panel = FilterPanel(self._filter_vm)
        self.side_tabs.addTab(self.filter_panel, "Filter")

        self.details_panel = DetailsPanel(self._inspector_vm)
        self.side_tabs.addTab(self.details_panel, "Details")

        splitter.addWidget(self.side_tabs)
        splitter.setStretchFactor(0, 1)
        splitter.setStretchFactor(1, 0)

    def _setup_toolbar(self):
        """Title, search box and view actions."""
        toolbar = QToolBar("Main")
        toolbar.setMovable(False)
        self.addToolBar(toolbar)

        title = QLabel("Knowledge Hub")
        title.setFont(QFont("Segoe UI", 13, QFont.Weight.Bold))
        title.setContentsMargins(8, 0, 16, 0)
        toolbar.addWidget(title)

        self.search_box = QLineEdit()
        self.search_box.setObjectName("searchBox")
        self.search_box.setPlaceholderText("Search nodes...")
        self.search_box.setClearButtonEnabled(True)
        self.search_box.textChanged.connect(self._filter_vm.set_search)
        toolbar.addWidget(self.search_box)

        spacer = QWidget()
        spacer.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Preferred)
        toolbar.addWidget(spacer)

        zoom_in_action = QAction("Zoom In", self)
        zoom_in_action.setShortcut(QKeySequence.StandardKey.ZoomIn)
        zoom_in_action.triggered.connect(self.canvas.zoom_in)
        toolbar.addAction(zoom_in_action)

        zoom_out_action = QAction("Zoom Out", self)
        zoom_out_action.setShortcut(QKeySequence.StandardKey.ZoomOut)
        zoom_out_action.triggered.connect(self.canvas.zoom_out)
        toolbar.addAction(zoom_out_action)

        reset_action = QAction("Reset View", self)
        reset_action.triggered.connect(self.canvas.reset_view)
        toolbar.addAction(reset_action)

    def _setup_status_bar(self):
        """Setup the status bar with the interaction hint."""
        self.hint_label = QLabel(HINT_TEXT)
        self.hint_label.setObjectName("hintLabel")
        self.statusBar().addPermanentWidget(self.hint_label)
        self.statusBar().showMessage("Ready")

    # -------------------------------------------------------------------------
    # Handlers
    # -------------------------------------------------------------------------

    def _show_status(self, message: str, timeout: int = 0):
        self.statusBar().showMessage(message, timeout)

    def _show_entry_tab(self):
        self.side_tabs.setCurrentWidget(self.entry_panel)
        self.entry_panel.focus_title()

    def _sync_search_box(self, state):
        # "Reset all filters" clears the search from outside the box
        if self.search_box.text() != state.search:
            self.search_box.blockSignals(True)
            self.search_box.setText(state.search)
            self.search_box.blockSignals(False)

    def _on_selection_changed(self, node_id: str):
        if node_id:
            self.side_tabs.setCurrentWidget(self.details_panel)

    def closeEvent(self, event: QCloseEvent):
        """Stop the layout run and release the store."""
        self._map_vm.shutdown()
        self._store.close()
        super().closeEvent(event)
