# src/retro_chip8/arch/chip8/disassembler.py
"""
CHIP-8 Disassembler

メモリ上のバイナリデータを解析し、CHIP-8のアセンブリ表記に変換します。
デコーダは純粋関数であり、読み出しには peek_opcode のみを使用するため、
VMのプログラムカウンタや状態には影響しません。
"""
from typing import List, Tuple

from retro_chip8.arch.chip8.decoder import decode
from retro_chip8.arch.chip8.instruction import Instruction
from retro_chip8.transport.memory import MEMORY_SIZE, OPCODE_SIZE, MainMemory

def format_instruction(instruction: Instruction) -> str:
    return instruction.format()

# @intent:responsibility 指定されたメモリ範囲を逆アセンブルし、表示用データを生成します。
def disassemble(memory: MainMemory, start_addr: int, length: int) -> List[Tuple[int, str, str]]:
    """
    指定された範囲のメモリを2バイト単位で逆アセンブルします。

    Returns:
        List of (address, hex_bytes, mnemonic) tuples.
    """
    result = []
    current_addr = start_addr
    end_addr = min(start_addr + length, MEMORY_SIZE)

    # 奇数長の末尾1バイトは命令として読めないため扱わない
    while current_addr + OPCODE_SIZE <= end_addr:
        opcode = memory.peek_opcode(current_addr)
        instruction = decode(opcode)
        result.append((current_addr, f"{opcode:04X}", format_instruction(instruction)))
        current_addr += OPCODE_SIZE

    return result
