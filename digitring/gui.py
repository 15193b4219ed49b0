"""PySide6 front end for inspecting and transforming number lists."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Optional

from PySide6.QtCore import QPointF, QRectF, Qt
from PySide6.QtGui import (
    QColor,
    QFont,
    QLinearGradient,
    QPaintEvent,
    QPainter,
    QPen,
    QRadialGradient,
)
from PySide6.QtWidgets import (
    QFileDialog,
    QFormLayout,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QMainWindow,
    QPushButton,
    QSizePolicy,
    QVBoxLayout,
    QWidget,
)

from .config import RECORD_BOOK_NUMBER, VARIANT
from .number_list import NumberList

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RingSkin:
    """Palette used to paint a digit ring."""

    background_gradient: tuple[str, str, str]
    ring_color: str
    node_fill_color: str
    node_border_color: str
    head_fill_color: str
    digit_color: str
    head_digit_color: str
    caption_color: str


DEFAULT_RING_SKIN = RingSkin(
    background_gradient=("#0f172a", "#111b2c", "#1f2937"),
    ring_color="#38bdf8",
    node_fill_color="#e2e8f0",
    node_border_color="#1f2937",
    head_fill_color="#38bdf8",
    digit_color="#0f172a",
    head_digit_color="#0f172a",
    caption_color="#e2e8f0",
)

RING_RADIUS_RATIO = 0.36
MAX_NODE_RADIUS_RATIO = 0.07
BUTTON_STYLE = (
    "QPushButton {background-color: #38bdf8; color: #0f172a; padding: 8px 14px; "
    "border-radius: 12px; font-weight: 600;}"
    "\nQPushButton:disabled {background-color: rgba(100, 116, 139, 120); color: rgba(226, 232, 240, 160);}"
)


class DigitRingWidget(QWidget):
    """Widget that draws every digit of a number list on a circle."""

    def __init__(
        self,
        number: Optional[NumberList] = None,
        skin: Optional[RingSkin] = None,
        parent: Optional[QWidget] = None,
    ) -> None:
        super().__init__(parent)
        self._number = number if number is not None else NumberList()
        self._skin = skin or DEFAULT_RING_SKIN
        self.setMinimumSize(360, 360)
        self.setAutoFillBackground(False)

    def set_number(self, number: NumberList) -> None:
        self._number = number
        self.update()

    def paintEvent(self, event: QPaintEvent) -> None:
        painter = QPainter(self)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing, True)

        self._draw_background(painter)

        size = min(self.width(), self.height())
        radius = size * RING_RADIUS_RATIO
        painter.translate(self.width() / 2.0, self.height() / 2.0)

        self._draw_ring(painter, radius)
        self._draw_caption(painter, radius)

    def _draw_background(self, painter: QPainter) -> None:
        painter.save()
        gradient = QLinearGradient(0, 0, 0, self.height())
        top, mid, bottom = self._skin.background_gradient
        gradient.setColorAt(0.0, QColor(top))
        gradient.setColorAt(0.45, QColor(mid))
        gradient.setColorAt(1.0, QColor(bottom))
        painter.fillRect(self.rect(), gradient)

        vignette = QRadialGradient(QPointF(self.width() / 2.0, self.height() / 2.0), max(self.width(), self.height()) * 0.65)
        vignette.setColorAt(0.0, QColor(255, 255, 255, 0))
        vignette.setColorAt(1.0, QColor(0, 0, 0, 90))
        painter.fillRect(self.rect(), vignette)
        painter.restore()

    def _draw_ring(self, painter: QPainter, radius: float) -> None:
        digits = str(self._number)
        if not digits:
            return
        painter.save()
        ring_pen = QPen(QColor(self._skin.ring_color))
        ring_pen.setWidthF(max(1.0, radius * 0.012))
        painter.setPen(ring_pen)
        painter.setBrush(Qt.BrushStyle.NoBrush)
        painter.drawEllipse(QRectF(-radius, -radius, radius * 2, radius * 2))

        step = 360.0 / len(digits)
        # Neighbouring nodes must not overlap on small widgets.
        node_radius = min(radius * MAX_NODE_RADIUS_RATIO * 2, radius * math.sin(math.radians(step / 2)) * 0.9)
        font = painter.font()
        font.setPointSizeF(max(4.0, node_radius * 0.9))
        font.setWeight(QFont.Weight.DemiBold)
        painter.setFont(font)

        for index, symbol in enumerate(digits):
            center = self._point_on_circle(radius, index * step)
            rect = QRectF(center.x() - node_radius, center.y() - node_radius, node_radius * 2, node_radius * 2)
            is_head = index == 0
            painter.setPen(QPen(QColor(self._skin.node_border_color), max(1.0, node_radius * 0.08)))
            painter.setBrush(QColor(self._skin.head_fill_color if is_head else self._skin.node_fill_color))
            painter.drawEllipse(rect)
            painter.setPen(QPen(QColor(self._skin.head_digit_color if is_head else self._skin.digit_color)))
            painter.drawText(rect, Qt.AlignmentFlag.AlignCenter, symbol)
        painter.restore()

    def _draw_caption(self, painter: QPainter, radius: float) -> None:
        painter.save()
        painter.setPen(QPen(QColor(self._skin.caption_color)))
        font = painter.font()
        font.setPointSizeF(max(6.0, radius * 0.1))
        painter.setFont(font)
        text = f"base {self._number.radix}\n{len(self._number)} digits"
        box = radius * 0.6
        painter.drawText(QRectF(-box, -box, box * 2, box * 2), Qt.AlignmentFlag.AlignCenter, text)
        painter.restore()

    @staticmethod
    def _point_on_circle(radius: float, angle_degrees: float) -> QPointF:
        radians = math.radians(angle_degrees - 90.0)
        x = radius * math.cos(radians)
        y = radius * math.sin(radians)
        return QPointF(x, y)


class NumberListWindow(QMainWindow):
    """Main application window."""

    def __init__(self, number: Optional[NumberList] = None, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self.setWindowTitle(f"Digit Ring - variant {RECORD_BOOK_NUMBER}")
        self._number = number if number is not None else NumberList()
        self._ring_widget = DigitRingWidget(number=self._number)
        self._ring_widget.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding)

        central = QWidget(self)
        layout = QVBoxLayout(central)
        layout.setContentsMargins(24, 24, 24, 24)
        layout.setSpacing(18)

        self._number_input = QLineEdit(str(self._number))
        self._number_input.setPlaceholderText("Digits 0-9 or A-F")
        self._number_input.returnPressed.connect(self._handle_parse)
        self._divisor_input = QLineEdit()
        self._divisor_input.setPlaceholderText("Divisor")
        self._divisor_input.returnPressed.connect(self._handle_modulo)

        inputs = QFormLayout()
        inputs.addRow("Number", self._number_input)
        inputs.addRow("Divisor", self._divisor_input)
        layout.addLayout(inputs)

        self._digits_label = QLabel()
        self._decimal_label = QLabel()
        self._status_label = QLabel()
        self._status_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        details = QFormLayout()
        details.addRow("Digits", self._digits_label)
        details.addRow("Decimal", self._decimal_label)
        layout.addLayout(details)
        layout.addWidget(self._status_label)

        layout.addWidget(self._ring_widget, stretch=1)

        layout.addLayout(
            self._button_row(
                ("Parse", self._handle_parse),
                (f"To base {VARIANT.target_radix}", self._handle_change_scale),
                ("Modulo", self._handle_modulo),
            )
        )
        layout.addLayout(
            self._button_row(
                ("Sort ascending", self._handle_sort_ascending),
                ("Sort descending", self._handle_sort_descending),
                ("Shift left", self._handle_shift_left),
                ("Shift right", self._handle_shift_right),
            )
        )
        layout.addLayout(
            self._button_row(
                ("Open...", self._handle_open),
                ("Save...", self._handle_save),
            )
        )

        self.setCentralWidget(central)
        self.resize(720, 840)
        self._refresh()

    def _button_row(self, *entries: tuple[str, Callable[[], None]]) -> QHBoxLayout:
        row = QHBoxLayout()
        row.setSpacing(12)
        row.addStretch(1)
        for text, handler in entries:
            button = QPushButton(text)
            button.setCursor(Qt.CursorShape.PointingHandCursor)
            button.setStyleSheet(BUTTON_STYLE)
            button.clicked.connect(handler)
            row.addWidget(button)
        row.addStretch(1)
        return row

    def _set_number(self, number: NumberList, status: str = "") -> None:
        self._number = number
        if not status or not number.is_empty():
            self._number_input.setText(str(number))
        self._ring_widget.set_number(number)
        self._status_label.setText(status)
        self._refresh()

    def _refresh(self) -> None:
        snapshot = self._number.snapshot()
        self._digits_label.setText(f"{snapshot.digits or '-'}  (base {snapshot.radix})")
        self._decimal_label.setText(snapshot.decimal or "-")

    def _handle_parse(self) -> None:
        text = self._number_input.text().strip()
        number = NumberList(text)
        status = "" if text == "" or not number.is_empty() else f"'{text}' is not a valid number."
        self._set_number(number, status)

    def _handle_change_scale(self) -> None:
        try:
            self._set_number(self._number.change_scale())
        except ValueError as exc:
            self._status_label.setText(str(exc))

    def _handle_modulo(self) -> None:
        divisor = NumberList(self._divisor_input.text().strip())
        try:
            result = self._number.additional_operation(divisor)
        except ValueError as exc:
            self._status_label.setText(str(exc))
            return
        self._set_number(result, f"{self._number.to_decimal_string() or '0'} mod {divisor or '0'}")

    def _handle_sort_ascending(self) -> None:
        self._number.sort_ascending()
        self._set_number(self._number)

    def _handle_sort_descending(self) -> None:
        self._number.sort_descending()
        self._set_number(self._number)

    def _handle_shift_left(self) -> None:
        self._number.shift_left()
        self._set_number(self._number)

    def _handle_shift_right(self) -> None:
        self._number.shift_right()
        self._set_number(self._number)

    def _handle_open(self) -> None:
        filename, _ = QFileDialog.getOpenFileName(self, "Open number", str(Path.cwd()), "Text files (*.txt);;All files (*)")
        if not filename:
            return
        self.load(Path(filename))

    def _handle_save(self) -> None:
        filename, _ = QFileDialog.getSaveFileName(self, "Save number", str(Path.cwd()), "Text files (*.txt);;All files (*)")
        if not filename:
            return
        if self._number.save(Path(filename)):
            self._status_label.setText(f"Saved to {filename}")
        else:
            self._status_label.setText(f"Could not save to {filename}")

    def load(self, path: Path) -> None:
        """Replace the current number with the one stored at ``path``."""
        number = NumberList.from_file(path)
        status = f"Loaded {path.name}" if not number.is_empty() else f"No number found in {path.name}"
        logger.info("%s", status)
        self._set_number(number, status)
