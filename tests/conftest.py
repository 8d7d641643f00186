"""
テスト共通のフィクスチャ。
"""
import os
import random

import pytest

# UIテストはディスプレイのない環境でも実行できるようにする
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from retro_chip8.arch.chip8.cpu import Chip8Cpu


def words(*opcodes: int) -> bytes:
    """オペコード列をビッグエンディアンのプログラムイメージに変換します。"""
    return b"".join(op.to_bytes(2, "big") for op in opcodes)


@pytest.fixture
def assemble():
    return words


@pytest.fixture
def make_cpu():
    def _make(*opcodes: int, clock_speed_hz: float = 700.0, seed: int = 1234) -> Chip8Cpu:
        return Chip8Cpu(words(*opcodes), clock_speed_hz=clock_speed_hz, rng=random.Random(seed))
    return _make


@pytest.fixture(scope="session")
def qapp():
    from PySide6.QtWidgets import QApplication
    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    yield app
