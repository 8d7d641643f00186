# src/retro_chip8/arch/chip8/state.py
"""
CHIP-8 VM 固有の状態定義。
"""
import random
from dataclasses import dataclass, field
from typing import List, Optional

from retro_chip8.common.errors import InvalidKeyCode
from retro_chip8.core.registers import Registers
from retro_chip8.core.stack import CallStack
from retro_chip8.transport.memory import MainMemory
from retro_chip8.video.display import Display

NUM_KEYS = 16

# @intent:responsibility VMの全ての可変状態（レジスタ、スタック、メモリ、画面、キー状態）を1つの集約として保持します。
# @intent:rationale グローバル状態を持たず、命令実行関数にはこの集約を参照で渡します。
@dataclass
class Chip8State:
    """
    CHIP-8 VMの状態。

    awaiting_key が None でない場合、VMはキー押下待ちで停止しており、
    次に押されたキーのコードがそのレジスタに書き込まれます。
    """
    memory: MainMemory
    registers: Registers = field(default_factory=Registers)
    stack: CallStack = field(default_factory=CallStack)
    display: Display = field(default_factory=Display)
    keys: List[bool] = field(default_factory=lambda: [False] * NUM_KEYS)
    awaiting_key: Optional[int] = None
    rng: random.Random = field(default_factory=random.Random)

    @property
    def is_waiting_for_key(self) -> bool:
        return self.awaiting_key is not None

    # @intent:pre-condition keyは0-15の範囲である必要があります。
    def is_key_pressed(self, key: int) -> bool:
        if not 0 <= key < NUM_KEYS:
            raise InvalidKeyCode(key)
        return self.keys[key]
