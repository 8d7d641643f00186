from retro_chip8.arch.chip8.disassembler import disassemble
from retro_chip8.transport.memory import MainMemory


def test_disassemble_font_region():
    memory = MainMemory(b"")
    # フォント "0" の先頭 F0 90 は不明な命令として表示される
    assert disassemble(memory, 0x000, 2) == [(0x000, "F090", "UNKNOWN $F090")]


def test_disassemble_stops_at_end_of_memory():
    memory = MainMemory(b"")
    result = disassemble(memory, 0xFFC, 16)
    assert [entry[0] for entry in result] == [0xFFC, 0xFFE]


def test_disassemble_ignores_trailing_odd_byte():
    memory = MainMemory(bytes([0x12, 0x00, 0x00]))
    assert disassemble(memory, 0x200, 3) == [(0x200, "1200", "JP $200")]


def test_disassemble_leaves_program_counter():
    memory = MainMemory(bytes([0x12, 0x00]))
    disassemble(memory, 0x200, 2)
    assert memory.peek_program_counter() == 0x200
