# src/retro_chip8/arch/chip8/instructions/__init__.py
"""
CHIP-8命令セット実装パッケージ。
"""
from retro_chip8.arch.chip8.decoder import decode
from retro_chip8.arch.chip8.instruction import Instruction, Unknown
from retro_chip8.arch.chip8.state import Chip8State
from retro_chip8.common.errors import UnknownOpcode
from .maps import EXECUTE_MAP

# @intent:responsibility CHIP-8のオペコードをデコードします。
def decode_opcode(opcode: int) -> Instruction:
    return decode(opcode)

# @intent:responsibility デコードされたCHIP-8命令を実行し、VMの状態を変更します。
# @intent:post-condition Unknown命令は UnknownOpcode を送出します（NoOpとは異なり無視しない）。
def execute_instruction(instruction: Instruction, state: Chip8State) -> None:
    if isinstance(instruction, Unknown):
        raise UnknownOpcode(instruction.opcode)
    EXECUTE_MAP[type(instruction)](state, instruction)
