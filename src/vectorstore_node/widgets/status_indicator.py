"""Node status indicator with colored dot, label, and run button."""

import logging
from typing import Callable, Optional

from PyQt6.QtGui import QFont
from PyQt6.QtWidgets import QHBoxLayout, QLabel, QPushButton, QWidget

from vectorstore_node.model import EntryStatus
from vectorstore_node.services import NodeStatus, StatusController

logger = logging.getLogger(__name__)

# --- Module-level constants ---
RUN_BUTTON_TOOLTIP = "Setup/connect vectorstores"

NODE_STATUS_COLORS = {
    NodeStatus.NONE: "#808080",
    NodeStatus.LOADING: "#e6c229",
    NodeStatus.READY: "#2f9e44",
    NodeStatus.ERROR: "#e03131",
    NodeStatus.WARNING: "#f08c00",
}

ENTRY_STATUS_COLORS = {
    EntryStatus.READY: "green",
    EntryStatus.LOADING: "yellow",
    EntryStatus.ERROR: "red",
}


def get_status_color(status: NodeStatus) -> str:
    """Resolve node status to a hex color."""
    return NODE_STATUS_COLORS[status]


def get_entry_status_color(status: Optional[EntryStatus]) -> str:
    """Color of the dot shown next to a single store entry."""
    return ENTRY_STATUS_COLORS.get(status, "gray")


class NodeStatusIndicator(QWidget):
    """
    Status dot, label and run button for a vectorstore node.

    Usage:
        indicator = NodeStatusIndicator(
            status=controller.status,
            on_run=runner.start,
            parent=self
        )
        layout.addWidget(indicator)

    The indicator follows the controller through a listener and disables
    the run button while a run is in flight.
    """

    def __init__(
        self,
        status: StatusController,
        on_run: Callable[[], object] = None,
        show_run: bool = True,
        parent=None
    ):
        super().__init__(parent)
        self._status = status
        self._on_run = on_run

        self._setup_ui(show_run)
        self._status.add_listener(self._on_status_changed)

    def _setup_ui(self, show_run: bool):
        layout = QHBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(4)

        # Colored dot
        self._dot = QLabel("●")
        self._dot.setFixedWidth(12)
        layout.addWidget(self._dot)

        # Status text
        self._label = QLabel("")
        self._label.setFont(QFont("Arial", 8))
        layout.addWidget(self._label)

        if show_run:
            self._run_btn = QPushButton("▶")
            self._run_btn.setFixedSize(20, 20)
            self._run_btn.setToolTip(RUN_BUTTON_TOOLTIP)
            self._run_btn.clicked.connect(self.run)
            layout.addWidget(self._run_btn)
        else:
            self._run_btn = None

        self.set_state(self._status.status)

    @property
    def run_button(self) -> Optional[QPushButton]:
        return self._run_btn

    @property
    def label_text(self) -> str:
        return self._label.text()

    def set_state(self, state: NodeStatus, message: str = None):
        """Update visual state."""
        color = get_status_color(state)
        logger.debug(f"NodeStatusIndicator.set_state: state={state}, color={color}")
        self._dot.setStyleSheet(f"color: {color};")
        self._label.setText(message or state.default_message or "")

        if self._run_btn:
            self._run_btn.setEnabled(state is not NodeStatus.LOADING)

    def run(self):
        """Trigger the setup run."""
        if self._on_run is None or self._status.is_running:
            return
        self._on_run()

    def _on_status_changed(self, new_status: NodeStatus, old_status: NodeStatus):
        self.set_state(new_status)

    def closeEvent(self, event):
        """Cleanup on close."""
        self._status.remove_listener(self._on_status_changed)
        super().closeEvent(event)
