# src/retro_chip8/arch/chip8/decoder.py
"""
CHIP-8 命令デコーダ。

16bitのビッグエンディアン・オペコードを命令オブジェクトに変換する純粋関数を提供します。
上位ニブルで命令グループを選択し、0x0/0x5/0x8/0x9/0xE/0xF グループでは
下位ニブルまたは下位バイトで具体的な命令を選択します。
副作用を持たないため、実行中のVM状態に触れずに逆アセンブルにも使用できます。
"""
from typing import Callable, Dict

from retro_chip8.arch.chip8 import instruction as ins
from retro_chip8.arch.chip8.instruction import Instruction

# --- オペランド抽出 ---

def mask_address(opcode: int) -> int:
    return opcode & 0x0FFF

def mask_high_register(opcode: int) -> int:
    return (opcode & 0x0F00) >> 8

def mask_low_register(opcode: int) -> int:
    return (opcode & 0x00F0) >> 4

def mask_data(opcode: int) -> int:
    return opcode & 0x00FF

def mask_nibble(opcode: int) -> int:
    return opcode & 0x000F

# --- グループ別デコーダ ---

# @intent:rationale 0x0グループは下位バイトのみで判定します（0x0nE0 も CLS として扱う）。
def _decode_system(opcode: int) -> Instruction:
    low_byte = mask_data(opcode)
    if low_byte == 0xE0:
        return ins.ClearScreen()
    if low_byte == 0xEE:
        return ins.Return()
    # 0nnn はマシン語ルーチン呼び出し。無視する
    return ins.NoOp(opcode)

def _decode_register_pair(opcode: int, cls) -> Instruction:
    return cls(mask_high_register(opcode), mask_low_register(opcode))

def _decode_register_data(opcode: int, cls) -> Instruction:
    return cls(mask_high_register(opcode), mask_data(opcode))

# @intent:map 8xyN グループの下位ニブルから命令クラスへのマッピング。
ARITHMETIC_MAP = {
    0x0: ins.LoadRegister,
    0x1: ins.Or,
    0x2: ins.And,
    0x3: ins.Xor,
    0x4: ins.Add,
    0x5: ins.Sub,
    0x7: ins.NegatedSub,
}

# @intent:map 8xyN グループのうち単一レジスタを取るシフト命令。
SHIFT_MAP = {
    0x6: ins.ShiftRight,
    0xE: ins.ShiftLeft,
}

# @intent:map ExNN グループの下位バイトから命令クラスへのマッピング。
KEY_MAP = {
    0x9E: ins.SkipIfPressed,
    0xA1: ins.SkipIfNotPressed,
}

# @intent:map FxNN グループの下位バイトから命令クラスへのマッピング。
MISC_MAP = {
    0x07: ins.LoadDelayTimer,
    0x0A: ins.AwaitKeyPress,
    0x15: ins.SetDelayTimer,
    0x18: ins.SetSoundTimer,
    0x1E: ins.AddAddressRegister,
    0x29: ins.LoadFontSprite,
    0x33: ins.StoreBcd,
    0x55: ins.StoreRegisters,
    0x65: ins.ReadRegisters,
}

def _decode_skip_equal_register(opcode: int) -> Instruction:
    if mask_nibble(opcode) != 0x0:
        return ins.Unknown(opcode)
    return _decode_register_pair(opcode, ins.SkipIfEqualRegister)

def _decode_arithmetic(opcode: int) -> Instruction:
    nibble = mask_nibble(opcode)
    if nibble in ARITHMETIC_MAP:
        return _decode_register_pair(opcode, ARITHMETIC_MAP[nibble])
    if nibble in SHIFT_MAP:
        return SHIFT_MAP[nibble](mask_high_register(opcode))
    return ins.Unknown(opcode)

def _decode_skip_not_equal_register(opcode: int) -> Instruction:
    if mask_nibble(opcode) != 0x0:
        return ins.Unknown(opcode)
    return _decode_register_pair(opcode, ins.SkipIfNotEqualRegister)

def _decode_draw(opcode: int) -> Instruction:
    return ins.Draw(mask_high_register(opcode), mask_low_register(opcode), mask_nibble(opcode))

def _decode_key(opcode: int) -> Instruction:
    cls = KEY_MAP.get(mask_data(opcode))
    if cls is None:
        return ins.Unknown(opcode)
    return cls(mask_high_register(opcode))

def _decode_misc(opcode: int) -> Instruction:
    cls = MISC_MAP.get(mask_data(opcode))
    if cls is None:
        return ins.Unknown(opcode)
    return cls(mask_high_register(opcode))

# @intent:map 上位ニブルからグループデコーダへのマッピングテーブル。
DECODE_MAP: Dict[int, Callable[[int], Instruction]] = {
    0x0: _decode_system,
    0x1: lambda op: ins.Jump(mask_address(op)),
    0x2: lambda op: ins.Call(mask_address(op)),
    0x3: lambda op: _decode_register_data(op, ins.SkipIfEqualData),
    0x4: lambda op: _decode_register_data(op, ins.SkipIfNotEqualData),
    0x5: _decode_skip_equal_register,
    0x6: lambda op: _decode_register_data(op, ins.LoadData),
    0x7: lambda op: _decode_register_data(op, ins.AddData),
    0x8: _decode_arithmetic,
    0x9: _decode_skip_not_equal_register,
    0xA: lambda op: ins.SetAddressRegister(mask_address(op)),
    0xB: lambda op: ins.JumpFromOffset(mask_address(op)),
    0xC: lambda op: _decode_register_data(op, ins.Random),
    0xD: _decode_draw,
    0xE: _decode_key,
    0xF: _decode_misc,
}

# @intent:responsibility 16bitオペコードを命令オブジェクトにデコードします。
# @intent:post-condition 0x0000-0xFFFFの全ての入力に対して何らかの命令を返します（全域関数）。
def decode(opcode: int) -> Instruction:
    """
    オペコードをデコードし、対応する命令を返します。
    どのパターンにも一致しない場合は Unknown(opcode) を返します。
    """
    if not 0 <= opcode <= 0xFFFF:
        raise ValueError(f"Opcode {opcode} is not a 16-bit value.")
    return DECODE_MAP[opcode >> 12](opcode)
