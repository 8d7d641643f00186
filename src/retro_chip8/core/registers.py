# retro_chip8/core/registers.py
"""
Core Layer (レジスタファイル)

16本の8bit汎用レジスタ（V0-VF）、16bitのアドレスレジスタ I、
および2つの8bitタイマー（ディレイ/サウンド）を保持します。
VF はキャリー/ボロー/衝突フラグとしても使用されます。
"""
from retro_chip8.common.errors import InvalidRegisterIndex
from retro_chip8.common.types import Register

NUM_DATA_REGISTERS = 16
FLAG_REGISTER = 0xF

# @intent:responsibility CHIP-8のレジスタ状態を保持し、汎用レジスタへのアクセスを検証します。
class Registers:
    """
    CHIP-8のレジスタファイル。
    汎用レジスタは read/write 経由でのみアクセスし、I とタイマーは属性として直接扱います。
    """
    def __init__(self):
        self._data = bytearray(NUM_DATA_REGISTERS)
        self.i: int = 0x0000
        self.delay_timer: int = 0x00
        self.sound_timer: int = 0x00

    # @intent:responsibility 全てのレジスタを0に戻します。
    def reset(self) -> None:
        self._data = bytearray(NUM_DATA_REGISTERS)
        self.i = 0x0000
        self.delay_timer = 0x00
        self.sound_timer = 0x00

    # @intent:pre-condition registerは0-15の範囲である必要があります。
    def read(self, register: Register) -> int:
        self._validate(register)
        return self._data[register]

    # @intent:pre-condition registerは0-15の範囲である必要があります。
    # @intent:post-condition 値は8bitに切り詰めて格納されます。
    def write(self, register: Register, value: int) -> None:
        self._validate(register)
        self._data[register] = value & 0xFF

    @property
    def flag(self) -> int:
        return self._data[FLAG_REGISTER]

    # @intent:responsibility V0-VF の内容をタプルとして返します（UI/テスト用）。
    def snapshot(self) -> tuple:
        return tuple(self._data)

    @staticmethod
    def _validate(register: Register) -> None:
        if not isinstance(register, int) or not 0 <= register < NUM_DATA_REGISTERS:
            raise InvalidRegisterIndex(register)
