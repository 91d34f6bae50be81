# sgabout/services/ui/about.py
from __future__ import annotations

from collections.abc import Mapping

from PyQt6.QtCore import QPoint, QSize, Qt, pyqtSignal
from PyQt6.QtGui import QFont, QFontMetrics, QMouseEvent, QPainter, QPaintEvent, QPixmap
from PyQt6.QtWidgets import QDialog, QLabel, QPushButton, QWidget

from sgabout.domain.models import ClickEvent, Modifier, Point, Size, TextBlock
from sgabout.services.ui.presenters.about_presenter import AboutPresenter
from sgabout.utils.constants import DIALOG_TITLE, LOGO, OK_BUTTON, OK_LABEL, TEXT, TEXT_BOTTOM_MARGIN

_QT_MODIFIERS = (
    (Qt.KeyboardModifier.ShiftModifier, Modifier.SHIFT),
    (Qt.KeyboardModifier.ControlModifier, Modifier.CONTROL),
    (Qt.KeyboardModifier.AltModifier, Modifier.ALT),
    (Qt.KeyboardModifier.MetaModifier, Modifier.META),
)


def to_modifiers(qt_mods: Qt.KeyboardModifier, *, click: bool) -> Modifier:
    mods = Modifier.CLICK if click else Modifier.NONE
    for qt_flag, flag in _QT_MODIFIERS:
        if qt_mods & qt_flag:
            mods |= flag
    return mods


class TextPane(QWidget):
    """
    Paints a TextBlock line by line and reports left clicks in pane-local pixels.

    When a font is given it is used for drawing regardless of the widget font,
    so stylesheets cannot shift the glyphs away from the measured hit widths.
    """

    clicked = pyqtSignal(object)  # ClickEvent

    def __init__(
        self,
        block: TextBlock,
        *,
        font: QFont | None = None,
        bottom_margin: int = 0,
        parent: QWidget | None = None,
    ):
        super().__init__(parent)
        self._block = block
        self._text_font = QFont(font) if font is not None else None
        self._bottom_margin = bottom_margin

    @property
    def block(self) -> TextBlock:
        return self._block

    def text_font(self) -> QFont:
        return QFont(self._text_font) if self._text_font is not None else self.font()

    def sizeHint(self) -> QSize:
        fm = QFontMetrics(self.text_font())
        width = max((fm.horizontalAdvance(t) for t in self._block.texts()), default=0)
        return QSize(self._block.origin.x + width, self._block.origin.y + self._block.height + self._bottom_margin)

    def paintEvent(self, event: QPaintEvent) -> None:
        painter = QPainter(self)
        try:
            font = self.text_font()
            painter.setFont(font)
            painter.setPen(self.palette().color(self.foregroundRole()))
            ascent = QFontMetrics(font).ascent()
            x, y = self._block.origin.x, self._block.origin.y
            for i, line in enumerate(self._block.lines):
                painter.drawText(x, y + i * self._block.line_height + ascent, line.text)
        finally:
            painter.end()

    def mousePressEvent(self, event: QMouseEvent) -> None:
        if event.button() != Qt.MouseButton.LeftButton:
            super().mousePressEvent(event)
            return
        p = event.position().toPoint()
        self.clicked.emit(ClickEvent(Point(p.x(), p.y()), to_modifiers(event.modifiers(), click=True)))
        event.accept()


class AboutDialog(QDialog):
    """
    Modal About box: logo, clickable text and a default OK button.

    Children are positioned by hand from the presenter's ResolvedLayout,
    recomputed on show and on every resize.
    """

    def __init__(
        self,
        presenter: AboutPresenter,
        *,
        logo: QPixmap | None = None,
        title: str = DIALOG_TITLE,
        font: QFont | None = None,
        parent: QWidget | None = None,
    ):
        super().__init__(parent)
        self.setWindowTitle(title)
        self.setModal(True)
        self._presenter = presenter

        # Widgets
        self.logo_label = QLabel(self)
        if logo is not None and not logo.isNull():
            self.logo_label.setPixmap(logo)
        self.text_pane = TextPane(
            presenter.block, font=font, bottom_margin=TEXT_BOTTOM_MARGIN, parent=self
        )
        self.ok_btn = QPushButton(OK_LABEL, self)
        self.ok_btn.setDefault(True)

        self._widgets: dict[str, QWidget] = {
            LOGO: self.logo_label,
            TEXT: self.text_pane,
            OK_BUTTON: self.ok_btn,
        }

        # Signals
        self.ok_btn.clicked.connect(self.accept)
        self.text_pane.clicked.connect(self._on_text_clicked)

        pref = presenter.preferred_size(self.measured_sizes())
        self.setMinimumSize(pref.width, pref.height)
        self.resize(pref.width, pref.height)

    @property
    def presenter(self) -> AboutPresenter:
        return self._presenter

    def measured_sizes(self) -> Mapping[str, Size]:
        sizes = {}
        for component, w in self._widgets.items():
            hint = w.sizeHint()
            sizes[component] = Size(max(hint.width(), 0), max(hint.height(), 0))
        return sizes

    def run(self) -> int:
        """Enter the modal loop; returns once OK or the close box ends it."""
        return self.exec()

    # ---------- layout ----------

    def _apply_layout(self) -> None:
        layout = self._presenter.relayout(Size(self.width(), self.height()), self.measured_sizes())
        if layout is None:
            return
        for component, r in layout.items():
            w = self._widgets.get(component)
            if w is not None:
                w.setGeometry(r.x, r.y, r.width, r.height)

    def showEvent(self, event) -> None:
        super().showEvent(event)
        self._apply_layout()

    def resizeEvent(self, event) -> None:
        super().resizeEvent(event)
        self._apply_layout()

    # ---------- clicks ----------

    def _on_text_clicked(self, event: ClickEvent) -> None:
        pos = self.text_pane.mapToParent(QPoint(event.point.x, event.point.y))
        self._presenter.handle_click(ClickEvent(Point(pos.x(), pos.y()), event.modifiers))
