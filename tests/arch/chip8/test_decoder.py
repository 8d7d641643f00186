# tests/arch/chip8/test_decoder.py
"""
retro_chip8.arch.chip8.decoderモジュールの単体テスト。
"""
import pytest

from retro_chip8.arch.chip8 import instruction as ins
from retro_chip8.arch.chip8.decoder import decode

# @intent:test_suite オペコードから命令への全域かつ決定的な変換の検証。

@pytest.mark.parametrize("opcode, expected", [
    (0x00E0, ins.ClearScreen()),
    (0x00EE, ins.Return()),
    (0x0123, ins.NoOp(0x0123)),
    (0x1234, ins.Jump(0x234)),
    (0x2ABC, ins.Call(0xABC)),
    (0x3A12, ins.SkipIfEqualData(0xA, 0x12)),
    (0x4B34, ins.SkipIfNotEqualData(0xB, 0x34)),
    (0x5120, ins.SkipIfEqualRegister(0x1, 0x2)),
    (0x6CFF, ins.LoadData(0xC, 0xFF)),
    (0x7D01, ins.AddData(0xD, 0x01)),
    (0x8120, ins.LoadRegister(0x1, 0x2)),
    (0x8121, ins.Or(0x1, 0x2)),
    (0x8122, ins.And(0x1, 0x2)),
    (0x8123, ins.Xor(0x1, 0x2)),
    (0x8124, ins.Add(0x1, 0x2)),
    (0x8125, ins.Sub(0x1, 0x2)),
    (0x8126, ins.ShiftRight(0x1)),
    (0x8127, ins.NegatedSub(0x1, 0x2)),
    (0x812E, ins.ShiftLeft(0x1)),
    (0x9340, ins.SkipIfNotEqualRegister(0x3, 0x4)),
    (0xA2F0, ins.SetAddressRegister(0x2F0)),
    (0xB300, ins.JumpFromOffset(0x300)),
    (0xC70F, ins.Random(0x7, 0x0F)),
    (0xD125, ins.Draw(0x1, 0x2, 5)),
    (0xE59E, ins.SkipIfPressed(0x5)),
    (0xE6A1, ins.SkipIfNotPressed(0x6)),
    (0xF107, ins.LoadDelayTimer(0x1)),
    (0xF20A, ins.AwaitKeyPress(0x2)),
    (0xF315, ins.SetDelayTimer(0x3)),
    (0xF418, ins.SetSoundTimer(0x4)),
    (0xF51E, ins.AddAddressRegister(0x5)),
    (0xF629, ins.LoadFontSprite(0x6)),
    (0xF733, ins.StoreBcd(0x7)),
    (0xF855, ins.StoreRegisters(0x8)),
    (0xF965, ins.ReadRegisters(0x9)),
])
def test_decode_known_opcodes(opcode, expected):
    assert decode(opcode) == expected

@pytest.mark.parametrize("opcode", [0x5121, 0x8128, 0x812F, 0x9341, 0xE500, 0xF000, 0xF1FF])
def test_decode_unmatched_patterns_as_unknown(opcode):
    assert decode(opcode) == ins.Unknown(opcode)

# @intent:test_case 0x0グループは下位バイトで CLS/RET を判定します。
def test_system_group_matches_on_low_byte():
    assert decode(0x01E0) == ins.ClearScreen()
    assert decode(0x0FEE) == ins.Return()
    assert decode(0x0000) == ins.NoOp(0x0000)

def test_decode_is_total():
    variants = set()
    for opcode in range(0x10000):
        result = decode(opcode)
        assert isinstance(result, ins.Instruction)
        variants.add(type(result))
    assert variants == set(ins.ALL_INSTRUCTIONS)

def test_decode_is_deterministic():
    assert decode(0xD01F) == decode(0xD01F)
    assert decode(0xD01F) is not decode(0xD01F)

@pytest.mark.parametrize("opcode", [-1, 0x10000])
def test_decode_rejects_non_16bit_values(opcode):
    with pytest.raises(ValueError):
        decode(opcode)

def test_instructions_are_immutable():
    jump = decode(0x1234)
    with pytest.raises(AttributeError):
        jump.address = 0x300

@pytest.mark.parametrize("opcode, text", [
    (0x00E0, "CLS"),
    (0x1234, "JP $234"),
    (0xB300, "JP V0, $300"),
    (0x6CFF, "LD VC, #FF"),
    (0x8124, "ADD V1, V2"),
    (0xA2F0, "LD I, $2F0"),
    (0xD125, "DRW V1, V2, 5"),
    (0xF20A, "LD V2, K"),
    (0xF855, "LD [I], V8"),
    (0x0123, "SYS $0123"),
    (0x5121, "UNKNOWN $5121"),
])
def test_format(opcode, text):
    assert decode(opcode).format() == text


def test_str_uses_assembly_text():
    assert str(decode(0x1234)) == "JP $234"
    assert f"{decode(0xF165)}" == "LD V1, [I]"
    assert repr(decode(0x1234)) == "Jump(address=564)"
