# retro_chip8/core/snapshot.py
"""
実行ステップの不変スナップショット

1命令の実行結果（実行したアドレス、オペコード、命令）を記録する不変データ構造を定義します。
UIへの情報提供と、デバッグ時のトレース記録に用いる責務を負います。
"""
from dataclasses import dataclass

from retro_chip8.arch.chip8.instruction import Instruction

# @intent:responsibility 1ステップ分の実行記録を不変に保持します。
@dataclass(frozen=True)
class Snapshot:
    """
    実行した命令の記録。
    pc は命令をフェッチしたアドレス、instruction_count は累計実行命令数です。
    """
    pc: int
    opcode: int
    instruction: Instruction
    instruction_count: int

    # 例: "0x0200: 0x00E0 => CLS"
    @property
    def text(self) -> str:
        return f"0x{self.pc:04X}: 0x{self.opcode:04X} => {self.instruction.format()}"
