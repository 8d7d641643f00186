# src/retro_chip8/ui/display_view.py
"""
表示バッファを描画し、キーボード入力をVMのキーコードへ変換するウィジェット。
"""
import logging
from typing import Dict, Optional

from PySide6.QtWidgets import QWidget
from PySide6.QtCore import Qt, Signal
from PySide6.QtGui import QColor, QKeyEvent, QPainter, QPaintEvent

from retro_chip8.config.models import DEFAULT_KEY_MAP, DisplayConfig
from retro_chip8.video.display import HEIGHT, WIDTH

logger = logging.getLogger(__name__)

# @intent:utility_function 物理キーの文字をキーパッドのコードに変換します。対応しないキーはNone。
def map_key_text(text: str, key_map: Dict[str, int]) -> Optional[int]:
    if not text:
        return None
    return key_map.get(text.upper())

# @intent:responsibility 64x32のバッファを拡大描画し、キーイベントをシグナルとして通知します。
class DisplayView(QWidget):
    """
    VMの表示バッファを描画するウィジェット。
    バッファは読み込み専用として扱い、set_buffer() で毎フレーム差し替えます。
    """
    key_changed = Signal(int, bool)

    def __init__(self, config: Optional[DisplayConfig] = None,
                 key_map: Optional[Dict[str, int]] = None, parent=None):
        super().__init__(parent)
        self._config = config or DisplayConfig()
        self._key_map = key_map if key_map is not None else dict(DEFAULT_KEY_MAP)
        self._buffer = bytes(WIDTH * HEIGHT)
        self._foreground = QColor(self._config.foreground)
        self._background = QColor(self._config.background)

        self.setFixedSize(WIDTH * self._config.scale, HEIGHT * self._config.scale)
        self.setFocusPolicy(Qt.StrongFocus)

    def set_buffer(self, buffer: bytes) -> None:
        if len(buffer) != WIDTH * HEIGHT:
            raise ValueError(f"Display buffer must have {WIDTH * HEIGHT} cells, got {len(buffer)}")
        if buffer != self._buffer:
            self._buffer = bytes(buffer)
            self.update()

    def paintEvent(self, event: QPaintEvent) -> None:
        scale = self._config.scale
        painter = QPainter(self)
        painter.fillRect(self.rect(), self._background)
        for index, pixel in enumerate(self._buffer):
            if pixel:
                y, x = divmod(index, WIDTH)
                painter.fillRect(x * scale, y * scale, scale, scale, self._foreground)
        painter.end()

    def keyPressEvent(self, event: QKeyEvent) -> None:
        if not self._handle_key(event, True):
            super().keyPressEvent(event)

    def keyReleaseEvent(self, event: QKeyEvent) -> None:
        if not self._handle_key(event, False):
            super().keyReleaseEvent(event)

    def _handle_key(self, event: QKeyEvent, pressed: bool) -> bool:
        if event.isAutoRepeat():
            return True
        code = map_key_text(event.text(), self._key_map)
        if code is None:
            return False
        self.key_changed.emit(code, pressed)
        return True
