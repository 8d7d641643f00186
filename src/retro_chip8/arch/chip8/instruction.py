# src/retro_chip8/arch/chip8/instruction.py
"""
CHIP-8命令の型定義。

デコード結果は命令ごとの不変データクラスで表現します。オペランドはフィールド名で意味が決まります。
  - x, y:     レジスタ番号 (0-15)
  - data:     8bitリテラル
  - address:  12bitアドレス
  - rows:     スプライトの行数 (0-15)
  - opcode:   生の16bitオペコード（NoOp/Unknownのみ）
"""
from dataclasses import dataclass, fields
from typing import ClassVar, List

from retro_chip8.common.types import Address, Data, Register

# @intent:responsibility 全ての命令バリアントの基底クラス。逆アセンブル表示用の共通処理を提供します。
@dataclass(frozen=True)
class Instruction:
    MNEMONIC: ClassVar[str] = "???"

    # @intent:responsibility オペランドを表示用の文字列リストに変換します。
    def operands(self) -> List[str]:
        result = []
        for f in fields(self):
            value = getattr(self, f.name)
            if f.name in ("x", "y"):
                result.append(f"V{value:X}")
            elif f.name == "data":
                result.append(f"#{value:02X}")
            elif f.name == "address":
                result.append(f"${value:03X}")
            elif f.name == "opcode":
                result.append(f"${value:04X}")
            else:
                result.append(str(value))
        return result

    def format(self) -> str:
        operands = self.operands()
        if operands:
            return f"{self.MNEMONIC} {', '.join(operands)}"
        return self.MNEMONIC

    # トレース出力やログでは逆アセンブル表記を使う
    def __str__(self) -> str:
        return self.format()

# --- Flow control ---

@dataclass(frozen=True)
class ClearScreen(Instruction):
    MNEMONIC: ClassVar[str] = "CLS"

@dataclass(frozen=True)
class Return(Instruction):
    MNEMONIC: ClassVar[str] = "RET"

@dataclass(frozen=True)
class Jump(Instruction):
    MNEMONIC: ClassVar[str] = "JP"
    address: Address

@dataclass(frozen=True)
class Call(Instruction):
    MNEMONIC: ClassVar[str] = "CALL"
    address: Address

@dataclass(frozen=True)
class JumpFromOffset(Instruction):
    MNEMONIC: ClassVar[str] = "JP"
    address: Address

    def format(self) -> str:
        return f"JP V0, ${self.address:03X}"

@dataclass(frozen=True)
class SkipIfEqualData(Instruction):
    MNEMONIC: ClassVar[str] = "SE"
    x: Register
    data: Data

@dataclass(frozen=True)
class SkipIfNotEqualData(Instruction):
    MNEMONIC: ClassVar[str] = "SNE"
    x: Register
    data: Data

@dataclass(frozen=True)
class SkipIfEqualRegister(Instruction):
    MNEMONIC: ClassVar[str] = "SE"
    x: Register
    y: Register

@dataclass(frozen=True)
class SkipIfNotEqualRegister(Instruction):
    MNEMONIC: ClassVar[str] = "SNE"
    x: Register
    y: Register

# --- Load / ALU ---

@dataclass(frozen=True)
class LoadData(Instruction):
    MNEMONIC: ClassVar[str] = "LD"
    x: Register
    data: Data

@dataclass(frozen=True)
class AddData(Instruction):
    MNEMONIC: ClassVar[str] = "ADD"
    x: Register
    data: Data

@dataclass(frozen=True)
class LoadRegister(Instruction):
    MNEMONIC: ClassVar[str] = "LD"
    x: Register
    y: Register

@dataclass(frozen=True)
class Or(Instruction):
    MNEMONIC: ClassVar[str] = "OR"
    x: Register
    y: Register

@dataclass(frozen=True)
class And(Instruction):
    MNEMONIC: ClassVar[str] = "AND"
    x: Register
    y: Register

@dataclass(frozen=True)
class Xor(Instruction):
    MNEMONIC: ClassVar[str] = "XOR"
    x: Register
    y: Register

@dataclass(frozen=True)
class Add(Instruction):
    MNEMONIC: ClassVar[str] = "ADD"
    x: Register
    y: Register

@dataclass(frozen=True)
class Sub(Instruction):
    MNEMONIC: ClassVar[str] = "SUB"
    x: Register
    y: Register

@dataclass(frozen=True)
class ShiftRight(Instruction):
    MNEMONIC: ClassVar[str] = "SHR"
    x: Register

@dataclass(frozen=True)
class NegatedSub(Instruction):
    MNEMONIC: ClassVar[str] = "SUBN"
    x: Register
    y: Register

@dataclass(frozen=True)
class ShiftLeft(Instruction):
    MNEMONIC: ClassVar[str] = "SHL"
    x: Register

@dataclass(frozen=True)
class SetAddressRegister(Instruction):
    MNEMONIC: ClassVar[str] = "LD"
    address: Address

    def format(self) -> str:
        return f"LD I, ${self.address:03X}"

@dataclass(frozen=True)
class Random(Instruction):
    MNEMONIC: ClassVar[str] = "RND"
    x: Register
    data: Data

@dataclass(frozen=True)
class Draw(Instruction):
    MNEMONIC: ClassVar[str] = "DRW"
    x: Register
    y: Register
    rows: int

# --- Keypad / Timers / Memory ---

@dataclass(frozen=True)
class SkipIfPressed(Instruction):
    MNEMONIC: ClassVar[str] = "SKP"
    x: Register

@dataclass(frozen=True)
class SkipIfNotPressed(Instruction):
    MNEMONIC: ClassVar[str] = "SKNP"
    x: Register

@dataclass(frozen=True)
class LoadDelayTimer(Instruction):
    MNEMONIC: ClassVar[str] = "LD"
    x: Register

    def format(self) -> str:
        return f"LD V{self.x:X}, DT"

@dataclass(frozen=True)
class AwaitKeyPress(Instruction):
    MNEMONIC: ClassVar[str] = "LD"
    x: Register

    def format(self) -> str:
        return f"LD V{self.x:X}, K"

@dataclass(frozen=True)
class SetDelayTimer(Instruction):
    MNEMONIC: ClassVar[str] = "LD"
    x: Register

    def format(self) -> str:
        return f"LD DT, V{self.x:X}"

@dataclass(frozen=True)
class SetSoundTimer(Instruction):
    MNEMONIC: ClassVar[str] = "LD"
    x: Register

    def format(self) -> str:
        return f"LD ST, V{self.x:X}"

@dataclass(frozen=True)
class AddAddressRegister(Instruction):
    MNEMONIC: ClassVar[str] = "ADD"
    x: Register

    def format(self) -> str:
        return f"ADD I, V{self.x:X}"

@dataclass(frozen=True)
class LoadFontSprite(Instruction):
    MNEMONIC: ClassVar[str] = "LD"
    x: Register

    def format(self) -> str:
        return f"LD F, V{self.x:X}"

@dataclass(frozen=True)
class StoreBcd(Instruction):
    MNEMONIC: ClassVar[str] = "LD"
    x: Register

    def format(self) -> str:
        return f"LD B, V{self.x:X}"

@dataclass(frozen=True)
class StoreRegisters(Instruction):
    MNEMONIC: ClassVar[str] = "LD"
    x: Register

    def format(self) -> str:
        return f"LD [I], V{self.x:X}"

@dataclass(frozen=True)
class ReadRegisters(Instruction):
    MNEMONIC: ClassVar[str] = "LD"
    x: Register

    def format(self) -> str:
        return f"LD V{self.x:X}, [I]"

# --- Fallbacks ---

# @intent:rationale 0nnn（マシン語ルーチン呼び出し）は無視する。未知の命令とは扱いを分けて保持します。
@dataclass(frozen=True)
class NoOp(Instruction):
    MNEMONIC: ClassVar[str] = "SYS"
    opcode: int

@dataclass(frozen=True)
class Unknown(Instruction):
    MNEMONIC: ClassVar[str] = "UNKNOWN"
    opcode: int


# @intent:map 全ての命令バリアント。デコーダと実行マップの網羅性検証に使用されます。
ALL_INSTRUCTIONS = (
    ClearScreen, Return, Jump, Call, JumpFromOffset,
    SkipIfEqualData, SkipIfNotEqualData, SkipIfEqualRegister, SkipIfNotEqualRegister,
    LoadData, AddData, LoadRegister, Or, And, Xor, Add, Sub, ShiftRight, NegatedSub, ShiftLeft,
    SetAddressRegister, Random, Draw,
    SkipIfPressed, SkipIfNotPressed, LoadDelayTimer, AwaitKeyPress, SetDelayTimer, SetSoundTimer,
    AddAddressRegister, LoadFontSprite, StoreBcd, StoreRegisters, ReadRegisters,
    NoOp, Unknown,
)
