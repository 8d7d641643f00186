# tests/core/test_registers.py
"""
retro_chip8.core.registersモジュールの単体テスト。
"""
import pytest

from retro_chip8.common.errors import InvalidRegisterIndex
from retro_chip8.core.registers import FLAG_REGISTER, Registers

# @intent:test_suite レジスタファイルの読み書きと範囲検証。

class TestRegisters:
    def test_initial_state_is_zeroed(self):
        regs = Registers()
        assert regs.snapshot() == (0,) * 16
        assert regs.i == 0
        assert regs.delay_timer == 0
        assert regs.sound_timer == 0

    def test_read_write(self):
        regs = Registers()
        regs.write(0x3, 0xAB)
        assert regs.read(0x3) == 0xAB
        assert regs.read(0x4) == 0x00

    # @intent:test_case 8bitを超える値は切り詰めて格納されることを検証します。
    def test_write_truncates_to_byte(self):
        regs = Registers()
        regs.write(0x0, 0x1FF)
        assert regs.read(0x0) == 0xFF

    def test_flag_property_reads_vf(self):
        regs = Registers()
        regs.write(FLAG_REGISTER, 1)
        assert regs.flag == 1

    @pytest.mark.parametrize("index", [-1, 16, 255])
    def test_invalid_index_is_fatal(self, index):
        regs = Registers()
        with pytest.raises(InvalidRegisterIndex):
            regs.read(index)
        with pytest.raises(InvalidRegisterIndex):
            regs.write(index, 0)

    def test_invalid_index_is_an_index_error(self):
        with pytest.raises(IndexError):
            Registers().read(16)

    def test_reset(self):
        regs = Registers()
        regs.write(0x1, 5)
        regs.i = 0x300
        regs.delay_timer = 10
        regs.sound_timer = 3
        regs.reset()
        assert regs.read(0x1) == 0
        assert regs.i == 0
        assert regs.delay_timer == 0
        assert regs.sound_timer == 0
