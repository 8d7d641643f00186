# retro_chip8/core/stack.py
"""
Core Layer (コールスタック)

サブルーチン呼び出しの戻りアドレスを保持する固定長（16フレーム）のスタック。
"""
from typing import List

from retro_chip8.common.errors import StackOverflow, StackUnderflow

NUM_FRAMES = 16

# @intent:responsibility 戻りアドレスをLIFOで保持します。
# @intent:rationale 容量は固定で、溢れた場合は回復不能なエラーとして扱います。
class CallStack:
    def __init__(self):
        self._frames: List[int] = [0x0000] * NUM_FRAMES
        self._pointer: int = 0

    def reset(self) -> None:
        self._frames = [0x0000] * NUM_FRAMES
        self._pointer = 0

    # @intent:pre-condition 深さが16未満である必要があります。
    def push(self, address: int) -> None:
        if self._pointer >= NUM_FRAMES:
            raise StackOverflow(f"Stack overflow pushing 0x{address:04X}")
        self._frames[self._pointer] = address & 0xFFFF
        self._pointer += 1

    # @intent:pre-condition 深さが1以上である必要があります。
    def pop(self) -> int:
        if self._pointer == 0:
            raise StackUnderflow("Attempted pop from empty stack")
        self._pointer -= 1
        return self._frames[self._pointer]

    @property
    def depth(self) -> int:
        return self._pointer

    # 現在積まれているアドレス（古い順）
    def frames(self) -> List[int]:
        return list(self._frames[:self._pointer])
