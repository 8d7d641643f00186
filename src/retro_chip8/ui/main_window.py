# src/retro_chip8/ui/main_window.py
"""
メインウィンドウの実装。
VMの表示とレジスタビューを保持し、QTimerでVMを駆動します。
"""
import logging
import time
from typing import Optional

from PySide6.QtWidgets import QMainWindow, QWidget, QHBoxLayout, QLabel
from PySide6.QtCore import QTimer, Slot

from retro_chip8.arch.chip8.cpu import Chip8Cpu
from retro_chip8.common.errors import Chip8Error
from retro_chip8.config.models import EmulatorConfig
from .display_view import DisplayView
from .register_view import RegisterView

logger = logging.getLogger(__name__)

# @intent:responsibility VMの表示と実行ループ（フレームごとの cycle 呼び出し）を管理します。
class MainWindow(QMainWindow):
    """
    アプリケーションのメインウィンドウクラス。
    VMは単一スレッド（GUIスレッド）上のQTimerから逐次的に呼び出されます。
    """
    def __init__(self, cpu: Chip8Cpu, config: Optional[EmulatorConfig] = None, parent=None):
        super().__init__(parent)
        self.setWindowTitle("Retro CHIP-8")
        self._cpu = cpu
        self._config = config or EmulatorConfig()
        self._last_tick: Optional[float] = None
        self.error: Optional[Chip8Error] = None

        self.display_view = DisplayView(self._config.display, self._config.key_map)
        self.display_view.key_changed.connect(self._on_key_changed)
        self.register_view = RegisterView()
        self.register_view.set_cpu(cpu)

        central_widget = QWidget()
        central_widget.setStyleSheet("background-color: #101010;")
        layout = QHBoxLayout(central_widget)
        layout.addWidget(self.display_view)
        layout.addWidget(self.register_view)
        self.setCentralWidget(central_widget)

        self.status_label = QLabel("Running")
        self.statusBar().addWidget(self.status_label)

        self._timer = QTimer(self)
        self._timer.timeout.connect(self._tick)

    def start(self) -> None:
        self._last_tick = time.perf_counter()
        self._timer.start(self._config.display.frame_interval_ms)
        self.display_view.setFocus()

    def stop(self) -> None:
        self._timer.stop()

    @property
    def is_running(self) -> bool:
        return self._timer.isActive()

    # @intent:responsibility 前回からの経過時間でVMを進め、画面とレジスタ表示を更新します。
    # @intent:post-condition VMの致命的エラーが発生した場合は実行を停止し、ステータスバーに表示します。
    @Slot()
    def _tick(self) -> None:
        now = time.perf_counter()
        elapsed = now - self._last_tick if self._last_tick is not None else 0.0
        self._last_tick = now
        try:
            self._cpu.cycle(elapsed)
        except Chip8Error as e:
            logger.error("VM halted: %s", e)
            self.error = e
            self.stop()
            self.status_label.setText(f"Halted: {e}")
        self.refresh()

    def refresh(self) -> None:
        self.display_view.set_buffer(self._cpu.display.buffer)
        self.register_view.update_registers()
        if self.error is None:
            self.status_label.setText("Waiting for key" if self._cpu.is_waiting_for_key else "Running")

    @Slot(int, bool)
    def _on_key_changed(self, code: int, pressed: bool) -> None:
        self._cpu.update_key(code, pressed)
