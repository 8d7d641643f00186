# src/retro_chip8/ui/app.py
"""
PySide6アプリケーションのエントリポイント。
VMを受け取ってメインウィンドウを起動します。
"""
from PySide6.QtWidgets import QApplication

from retro_chip8.arch.chip8.cpu import Chip8Cpu
from retro_chip8.config.models import EmulatorConfig
from .main_window import MainWindow

# @intent:responsibility アプリケーションを起動し、ウィンドウが閉じられるかVMが停止するまで実行します。
# @intent:post-condition VMが致命的エラーで停止した場合は1を返します。
def run(cpu: Chip8Cpu, config: EmulatorConfig) -> int:
    app = QApplication.instance() or QApplication([])
    main_win = MainWindow(cpu, config)
    main_win.show()
    main_win.start()
    status = app.exec()
    if main_win.error is not None:
        return 1
    return status
