"""Container widget that lays out a form's views top to bottom."""

import logging
from typing import List

from PyQt6.QtWidgets import QVBoxLayout, QWidget

logger = logging.getLogger(__name__)


class FormView(QWidget):
    """
    ViewContainer for FormController.recreate_views().

    Usage:
        container = FormView()
        form.recreate_views(container, QtViewFactory())
        scroll_area.setWidget(container)
    """

    def __init__(self, parent=None):
        super().__init__(parent)
        self._layout = QVBoxLayout(self)
        self._layout.setContentsMargins(8, 8, 8, 8)
        self._layout.addStretch(1)
        self._views: List[QWidget] = []

    @property
    def views(self) -> List[QWidget]:
        return list(self._views)

    def clear(self) -> None:
        """Remove and schedule deletion of every view."""
        for view in self._views:
            self._layout.removeWidget(view)
            view.setParent(None)
            view.deleteLater()
        logger.debug(f"Cleared {len(self._views)} views")
        self._views.clear()

    def add_view(self, view: QWidget) -> None:
        """Append `view` above the trailing stretch."""
        self._layout.insertWidget(self._layout.count() - 1, view)
        self._views.append(view)
