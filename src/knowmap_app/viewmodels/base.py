"""
Base ViewModel class for the KnowMap MVVM layer.

ViewModels own UI state and commands, expose changes through PyQt6
signals, and never hold widget references. Services from knowmap_core
are injected through the constructor.
"""

from typing import Optional
from PyQt6.QtCore import QObject


class BaseViewModel(QObject):
    """
    Base class for all ViewModels.

    Pattern:
    - State behind read-only properties
    - Commands as methods that emit a signal when state changes
    - No widget references, so ViewModels run under a bare QCoreApplication
    """

    def __init__(self, parent: Optional[QObject] = None):
        """
        Initialize the ViewModel.

        Args:
            parent: Optional parent QObject for Qt memory management
        """
        super().__init__(parent)
