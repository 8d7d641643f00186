import unittest
import random

from retro_chip8.arch.chip8 import instruction as ins
from retro_chip8.arch.chip8.instructions import execute_instruction
from retro_chip8.arch.chip8.state import Chip8State
from retro_chip8.transport.memory import MainMemory

VF = 0xF


class TestChip8AluInstructions(unittest.TestCase):
    def setUp(self):
        self.state = Chip8State(memory=MainMemory(bytes(4)), rng=random.Random(0))
        self.regs = self.state.registers

    def _execute(self, instruction):
        execute_instruction(instruction, self.state)

    def test_add_data_wraps_without_flag(self):
        self.regs.write(0x1, 0xFF)
        self.regs.write(VF, 0x7)
        self._execute(ins.AddData(0x1, 0x02))
        self.assertEqual(self.regs.read(0x1), 0x01)
        self.assertEqual(self.regs.read(VF), 0x7)

    def test_add_wraparound_sets_carry(self):
        self.regs.write(0x0, 0xFF)
        self.regs.write(0x1, 0x02)
        self._execute(ins.Add(0x0, 0x1))
        self.assertEqual(self.regs.read(0x0), 0x01)
        self.assertEqual(self.regs.read(VF), 1)

    def test_add_without_carry(self):
        self.regs.write(0x0, 0x10)
        self.regs.write(0x1, 0x20)
        self.regs.write(VF, 1)
        self._execute(ins.Add(0x0, 0x1))
        self.assertEqual(self.regs.read(0x0), 0x30)
        self.assertEqual(self.regs.read(VF), 0)

    def test_add_into_flag_register_keeps_sum(self):
        # 演算先がVFの場合はフラグより演算結果が優先される
        self.regs.write(VF, 0xFF)
        self.regs.write(0x1, 0x02)
        self._execute(ins.Add(VF, 0x1))
        self.assertEqual(self.regs.read(VF), 0x01)

    def test_sub_borrow(self):
        self.regs.write(0x0, 0x01)
        self.regs.write(0x1, 0x02)
        self._execute(ins.Sub(0x0, 0x1))
        self.assertEqual(self.regs.read(0x0), 0xFF)
        self.assertEqual(self.regs.read(VF), 0)

    def test_sub_no_borrow(self):
        self.regs.write(0x0, 0x05)
        self.regs.write(0x1, 0x03)
        self._execute(ins.Sub(0x0, 0x1))
        self.assertEqual(self.regs.read(0x0), 0x02)
        self.assertEqual(self.regs.read(VF), 1)

    def test_sub_equal_operands_clears_flag(self):
        self.regs.write(0x0, 0x07)
        self.regs.write(0x1, 0x07)
        self._execute(ins.Sub(0x0, 0x1))
        self.assertEqual(self.regs.read(0x0), 0x00)
        self.assertEqual(self.regs.read(VF), 0)

    def test_negated_sub(self):
        self.regs.write(0x0, 0x02)
        self.regs.write(0x1, 0x05)
        self._execute(ins.NegatedSub(0x0, 0x1))
        self.assertEqual(self.regs.read(0x0), 0x03)
        self.assertEqual(self.regs.read(VF), 1)

    def test_negated_sub_borrow(self):
        self.regs.write(0x0, 0x05)
        self.regs.write(0x1, 0x02)
        self._execute(ins.NegatedSub(0x0, 0x1))
        self.assertEqual(self.regs.read(0x0), 0xFD)
        self.assertEqual(self.regs.read(VF), 0)

    def test_shift_right_captures_low_bit(self):
        self.regs.write(0x0, 0b10000001)
        self._execute(ins.ShiftRight(0x0))
        self.assertEqual(self.regs.read(0x0), 0b01000000)
        self.assertEqual(self.regs.read(VF), 1)

    def test_shift_left_captures_high_bit(self):
        self.regs.write(0x0, 0b10000001)
        self._execute(ins.ShiftLeft(0x0))
        self.assertEqual(self.regs.read(0x0), 0b00000010)
        self.assertEqual(self.regs.read(VF), 1)

    def test_shift_left_without_high_bit(self):
        self.regs.write(0x0, 0b01000000)
        self._execute(ins.ShiftLeft(0x0))
        self.assertEqual(self.regs.read(0x0), 0b10000000)
        self.assertEqual(self.regs.read(VF), 0)

    def test_bitwise_operations(self):
        self.regs.write(0x0, 0b1100)
        self.regs.write(0x1, 0b1010)
        self._execute(ins.Or(0x0, 0x1))
        self.assertEqual(self.regs.read(0x0), 0b1110)
        self.regs.write(0x0, 0b1100)
        self._execute(ins.And(0x0, 0x1))
        self.assertEqual(self.regs.read(0x0), 0b1000)
        self.regs.write(0x0, 0b1100)
        self._execute(ins.Xor(0x0, 0x1))
        self.assertEqual(self.regs.read(0x0), 0b0110)

    def test_random_is_masked(self):
        for _ in range(50):
            self._execute(ins.Random(0x2, 0x0F))
            self.assertEqual(self.regs.read(0x2) & 0xF0, 0)

    def test_random_uses_state_rng(self):
        expected = random.Random(0).randint(0, 0xFF)
        self._execute(ins.Random(0x3, 0xFF))
        self.assertEqual(self.regs.read(0x3), expected)


if __name__ == '__main__':
    unittest.main()
