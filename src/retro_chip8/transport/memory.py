# retro_chip8/transport/memory.py
"""
Transport Layer (メインメモリ)

このモジュールは、CHIP-8の4KiBアドレス空間とプログラムカウンタを管理します。

アドレス空間は2つのデバイスで構成されます。
  - 0x000-0x1FF: 読み込み専用のインタプリタ領域（先頭80バイトがフォントスプライト）
  - 0x200-0xFFF: プログラム領域（プログラムイメージをロードする可変領域）

プログラム領域は内部的に0x200だけシフトして保持されますが、このモジュールの外側では
アドレスは常に変換前の12bit値として扱います。オフセット変換はこのモジュールだけが行います。
"""
from abc import ABC, abstractmethod
from typing import Optional

from retro_chip8.common.errors import MemoryBoundsViolation, ReadOnlyMemoryViolation

MEMORY_SIZE = 0x1000
PROGRAM_OFFSET = 0x200
PROGRAM_REGION_SIZE = MEMORY_SIZE - PROGRAM_OFFSET
OPCODE_SIZE = 2

# @intent:constant 16進数字 0-F のフォントスプライト（各5バイト）。
FONT_SPRITES = bytes([
    0xF0, 0x90, 0x90, 0x90, 0xF0,  # 0
    0x20, 0x60, 0x20, 0x20, 0x70,  # 1
    0xF0, 0x10, 0xF0, 0x80, 0xF0,  # 2
    0xF0, 0x10, 0xF0, 0x10, 0xF0,  # 3
    0x90, 0x90, 0xF0, 0x10, 0x10,  # 4
    0xF0, 0x80, 0xF0, 0x10, 0xF0,  # 5
    0xF0, 0x80, 0xF0, 0x90, 0xF0,  # 6
    0xF0, 0x10, 0x20, 0x40, 0x40,  # 7
    0xF0, 0x90, 0xF0, 0x90, 0xF0,  # 8
    0xF0, 0x90, 0xF0, 0x10, 0xF0,  # 9
    0xF0, 0x90, 0xF0, 0x90, 0x90,  # A
    0xE0, 0x90, 0xE0, 0x90, 0xE0,  # B
    0xF0, 0x80, 0x80, 0x80, 0xF0,  # C
    0xE0, 0x90, 0x90, 0x90, 0xE0,  # D
    0xF0, 0x80, 0xF0, 0x80, 0xF0,  # E
    0xF0, 0x80, 0xF0, 0x80, 0x80,  # F
])
FONT_SPRITE_SIZE = 5

# @intent:responsibility メモリデバイスの抽象インターフェースを定義します。
class Device(ABC):
    """
    アドレス空間に配置されるデバイスの抽象基底クラス。
    アドレスはデバイス内でのオフセットとして扱われます。
    """
    @abstractmethod
    def read(self, offset: int) -> int:
        pass

    @abstractmethod
    def write(self, offset: int, data: int) -> None:
        pass

    @abstractmethod
    def slice(self, start: int, end: int) -> bytes:
        pass

    @abstractmethod
    def get_size(self) -> int:
        pass

# @intent:responsibility 可変のメモリ領域を提供します。
class RAM(Device):
    # @intent:pre-condition sizeは正の整数である必要があります。
    def __init__(self, size: int, initial: bytes = b""):
        if not isinstance(size, int) or size <= 0:
            raise ValueError("RAM size must be a positive integer.")
        if len(initial) > size:
            raise ValueError(f"Initial data ({len(initial)} bytes) exceeds RAM size {size}.")
        self._memory = bytearray(size)
        self._memory[:len(initial)] = initial
        self._size = size

    def read(self, offset: int) -> int:
        self._check(offset)
        return self._memory[offset]

    # @intent:pre-condition データは8bit値である必要があります。
    def write(self, offset: int, data: int) -> None:
        self._check(offset)
        if not 0 <= data <= 0xFF:
            raise ValueError(f"Data {data} is not an 8-bit value.")
        self._memory[offset] = data

    def slice(self, start: int, end: int) -> bytes:
        if not 0 <= start <= end <= self._size:
            raise MemoryBoundsViolation(f"Range {start}..{end} out of bounds for device of size {self._size}.")
        return bytes(self._memory[start:end])

    def get_size(self) -> int:
        return self._size

    def _check(self, offset: int) -> None:
        if not 0 <= offset < self._size:
            raise MemoryBoundsViolation(f"Offset {offset} out of bounds for device of size {self._size}.")

# @intent:responsibility 読み込み専用のメモリ領域を提供します。
# @intent:rationale ROMへの書き込みは正しいCHIP-8プログラムでは起こり得ないため、契約違反として例外を送出します。
class ROM(RAM):
    def write(self, offset: int, data: int) -> None:
        self._check(offset)
        raise ReadOnlyMemoryViolation(f"Write of 0x{data:02X} to read-only offset 0x{offset:03X}")


# @intent:responsibility 4KiBのアドレス空間とプログラムカウンタを管理します。
class MainMemory:
    """
    CHIP-8のメインメモリとプログラムカウンタ。

    プログラムイメージはプログラム領域（3584バイト）に合わせてゼロ埋め、または切り詰められます。
    外部に公開するアドレスは全て0x000-0xFFFの未変換アドレスです。
    """
    def __init__(self, program: bytes):
        image = bytes(program[:PROGRAM_REGION_SIZE])
        self.program_length: int = len(image) // OPCODE_SIZE
        self._interpreter = ROM(PROGRAM_OFFSET, FONT_SPRITES)
        self._program = RAM(PROGRAM_REGION_SIZE, image)
        # プログラム領域内のオフセットとして保持する
        self._program_counter: int = 0

    # @intent:responsibility プログラムカウンタ位置から2バイトのオペコードを読み、PCを2進めます。
    # @intent:post-condition 残りが2バイト未満の場合はNoneを返し、PCは変化しません。
    def fetch_opcode(self) -> Optional[int]:
        if self._program_counter + OPCODE_SIZE > PROGRAM_REGION_SIZE:
            return None
        high = self._program.read(self._program_counter)
        low = self._program.read(self._program_counter + 1)
        self._program_counter += OPCODE_SIZE
        return (high << 8) | low

    # @intent:responsibility PCを変更せずに任意アドレスのオペコードを読み出します（逆アセンブラ用）。
    def peek_opcode(self, address: int) -> int:
        return (self.load_address(address) << 8) | self.load_address(address + 1)

    # @intent:pre-condition addressは0x200以上0x1000未満である必要があります。
    def set_program_counter(self, address: int) -> None:
        if not PROGRAM_OFFSET <= address < MEMORY_SIZE:
            raise MemoryBoundsViolation(f"Program counter 0x{address:04X} outside program region")
        self._program_counter = address - PROGRAM_OFFSET

    def peek_program_counter(self) -> int:
        return self._program_counter + PROGRAM_OFFSET

    # @intent:responsibility 検証なしでPCを退避・復元します（終端を越えたPCもそのまま戻す）。
    def save_program_counter(self) -> int:
        return self._program_counter

    def restore_program_counter(self, saved: int) -> None:
        self._program_counter = saved

    # 条件スキップ命令用: 次の命令を飛ばす
    def skip_instruction(self) -> None:
        self._program_counter += OPCODE_SIZE

    def load_address(self, address: int) -> int:
        device, offset = self._find_device(address)
        return device.read(offset)

    # @intent:pre-condition 0x200未満への書き込みは ReadOnlyMemoryViolation となります。
    def write_address(self, address: int, data: int) -> None:
        device, offset = self._find_device(address)
        device.write(offset, data & 0xFF)

    # @intent:responsibility スプライト読み込み用に連続領域を返します。
    # @intent:pre-condition 範囲はインタプリタ領域とプログラム領域をまたいではいけません。
    def slice_program(self, start: int, end: int) -> bytes:
        if not 0 <= start <= end <= MEMORY_SIZE:
            raise MemoryBoundsViolation(f"Invalid memory range 0x{start:04X}..0x{end:04X}")
        if end <= PROGRAM_OFFSET:
            return self._interpreter.slice(start, end)
        if start >= PROGRAM_OFFSET:
            return self._program.slice(start - PROGRAM_OFFSET, end - PROGRAM_OFFSET)
        raise MemoryBoundsViolation(
            f"Range 0x{start:04X}..0x{end:04X} spans the interpreter and program regions"
        )

    def _find_device(self, address: int):
        if not 0 <= address < MEMORY_SIZE:
            raise MemoryBoundsViolation(f"Invalid memory access at address 0x{address:04X}")
        if address < PROGRAM_OFFSET:
            return self._interpreter, address
        return self._program, address - PROGRAM_OFFSET
