import unittest

from retro_chip8.common.errors import StackOverflow, StackUnderflow
from retro_chip8.core.stack import NUM_FRAMES, CallStack


class TestCallStack(unittest.TestCase):
    def setUp(self):
        self.stack = CallStack()

    def test_push_pop_round_trip(self):
        self.stack.push(0x300)
        self.assertEqual(self.stack.depth, 1)
        self.assertEqual(self.stack.pop(), 0x300)
        self.assertEqual(self.stack.depth, 0)

    def test_lifo_order(self):
        for address in (0x202, 0x204, 0x206):
            self.stack.push(address)
        self.assertEqual(self.stack.frames(), [0x202, 0x204, 0x206])
        self.assertEqual(self.stack.pop(), 0x206)
        self.assertEqual(self.stack.pop(), 0x204)
        self.assertEqual(self.stack.pop(), 0x202)

    def test_seventeenth_push_overflows(self):
        for n in range(NUM_FRAMES):
            self.stack.push(0x200 + 2 * n)
        with self.assertRaises(StackOverflow):
            self.stack.push(0x300)
        self.assertEqual(self.stack.depth, NUM_FRAMES)

    def test_pop_empty_underflows(self):
        with self.assertRaises(StackUnderflow):
            self.stack.pop()

    def test_reset_empties_stack(self):
        self.stack.push(0x222)
        self.stack.reset()
        self.assertEqual(self.stack.depth, 0)
        with self.assertRaises(StackUnderflow):
            self.stack.pop()


if __name__ == '__main__':
    unittest.main()
