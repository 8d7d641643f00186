# src/retro_chip8/arch/chip8/cpu.py
"""
CHIP-8 VMの実行エンジン。

CPUクロック（設定可能）と60Hzタイマーの2つの時間領域を、ホストから渡される
経過時間で独立に駆動します。キー押下待ち命令による停止/再開もここで管理します。
"""
import logging
import random
from datetime import timedelta
from typing import Dict, List, Optional, Tuple, Union

from retro_chip8.arch.chip8 import disassembler
from retro_chip8.arch.chip8.instruction import Instruction
from retro_chip8.arch.chip8.instructions import decode_opcode, execute_instruction
from retro_chip8.arch.chip8.state import NUM_KEYS, Chip8State
from retro_chip8.common.errors import InvalidKeyCode, ProgramExhausted
from retro_chip8.common.types import RegisterInfo, RegisterLayoutInfo
from retro_chip8.core.cpu import AbstractCpu
from retro_chip8.core.snapshot import Snapshot
from retro_chip8.transport.memory import PROGRAM_OFFSET, MainMemory

logger = logging.getLogger(__name__)

DEFAULT_CLOCK_SPEED_HZ = 700.0
TIMER_RATE_HZ = 60.0
MICROS_PER_SECOND = 1_000_000

Elapsed = Union[float, int, timedelta]

# @intent:responsibility CHIP-8のフェッチ・デコード・実行と、CPUクロック/タイマーの時間管理を提供します。
class Chip8Cpu(AbstractCpu):
    """
    CHIP-8 VM。

    ホストは毎フレーム cycle(elapsed) を呼び出し、キー入力の変化を update_key で通知し、
    display.buffer を読み出して描画します。全ての呼び出しは単一スレッドから逐次的に行う必要があります。
    """
    # @intent:pre-condition clock_speed_hzは正の値である必要があります。
    def __init__(self, program: bytes, clock_speed_hz: float = DEFAULT_CLOCK_SPEED_HZ,
                 rng: Optional[random.Random] = None):
        if clock_speed_hz <= 0:
            raise ValueError(f"Clock speed must be positive, got {clock_speed_hz}.")
        self._program = bytes(program)
        self._rng = rng if rng is not None else random.Random()
        self.clock_speed_hz = clock_speed_hz
        self.micros_per_cycle: int = max(1, round(MICROS_PER_SECOND / clock_speed_hz))
        self.micros_per_timer: int = round(MICROS_PER_SECOND / TIMER_RATE_HZ)
        self._micros_since_cycle: int = 0
        self._micros_since_timer: int = 0
        super().__init__()

    # @intent:responsibility プログラムイメージをロードした初期状態を生成します。
    def _create_initial_state(self) -> Chip8State:
        return Chip8State(memory=MainMemory(self._program), rng=self._rng)

    # @intent:responsibility VMをロード直後の状態に戻します。自己書き換えされたメモリも元のイメージに戻ります。
    def reset(self) -> None:
        super().reset()
        self._micros_since_cycle = 0
        self._micros_since_timer = 0

    # --- ホスト向けアクセサ ---

    @property
    def display(self):
        return self._state.display

    @property
    def registers(self):
        return self._state.registers

    @property
    def memory(self) -> MainMemory:
        return self._state.memory

    @property
    def stack(self):
        return self._state.stack

    @property
    def awaiting_key(self) -> Optional[int]:
        return self._state.awaiting_key

    @property
    def is_waiting_for_key(self) -> bool:
        return self._state.is_waiting_for_key

    def is_key_pressed(self, key: int) -> bool:
        return self._state.is_key_pressed(key)

    # --- 命令サイクル ---

    def _current_pc(self) -> int:
        return self._state.memory.peek_program_counter()

    # @intent:post-condition プログラム領域の終端に達した場合は ProgramExhausted を送出します。
    def _fetch(self) -> int:
        opcode = self._state.memory.fetch_opcode()
        if opcode is None:
            raise ProgramExhausted(
                f"End of ROM reached at 0x{self._state.memory.peek_program_counter():04X}"
            )
        return opcode

    def _decode(self, opcode: int) -> Instruction:
        instruction = decode_opcode(opcode)
        logger.debug("0x%04X => %s", opcode, instruction)
        return instruction

    def _execute(self, instruction: Instruction) -> None:
        execute_instruction(instruction, self._state)

    # @intent:responsibility 実時間の経過に応じてCPUとタイマーを進めます。
    def cycle(self, elapsed: Elapsed) -> None:
        """
        elapsed は経過秒数（float/int）または timedelta です。
        内部ではマイクロ秒の整数に丸めて advance() に渡します。
        """
        if isinstance(elapsed, timedelta):
            micros = elapsed // timedelta(microseconds=1)
        else:
            micros = round(elapsed * MICROS_PER_SECOND)
        self.advance(micros)

    # @intent:responsibility マイクロ秒単位でシミュレーション時間を進めます。
    # @intent:rationale CPUサイクルとタイマーは別々のアキュムレータで管理し、端数は次回に持ち越します。
    #                  キー待ち中もサイクル枠は消費されるため、再開後に実行が遅れを取り戻そうとすることはありません。
    def advance(self, micros: int) -> None:
        if micros < 0:
            raise ValueError(f"Elapsed time must not be negative, got {micros}us.")
        self._micros_since_cycle += micros
        self._micros_since_timer += micros

        while self._micros_since_cycle >= self.micros_per_cycle:
            self._micros_since_cycle -= self.micros_per_cycle
            if not self._state.is_waiting_for_key:
                self.step()

        regs = self._state.registers
        while self._micros_since_timer >= self.micros_per_timer:
            self._micros_since_timer -= self.micros_per_timer
            if regs.delay_timer > 0:
                regs.delay_timer -= 1
            if regs.sound_timer > 0:
                regs.sound_timer -= 1

    # @intent:responsibility キーの押下状態を更新し、キー待ち中であれば押されたキーをレジスタに書き込んで再開します。
    # @intent:pre-condition keyは0-15の範囲である必要があります。
    def update_key(self, key: int, is_pressed: bool) -> None:
        if not isinstance(key, int) or not 0 <= key < NUM_KEYS:
            raise InvalidKeyCode(key)
        logger.debug("Key %X is_pressed=%s", key, is_pressed)
        state = self._state
        state.keys[key] = is_pressed
        if is_pressed and state.awaiting_key is not None:
            state.registers.write(state.awaiting_key, key)
            state.awaiting_key = None

    # --- 逆アセンブル/スキャン ---

    # @intent:responsibility ロードされたプログラムを実行せずにフェッチ・デコードし、(opcode, instruction) の列を返します。
    # @intent:post-condition スキャン後、プログラムカウンタは呼び出し前の値に戻ります。
    def scan_program(self) -> List[Tuple[int, Instruction]]:
        memory = self._state.memory
        saved_pc = memory.save_program_counter()
        memory.set_program_counter(PROGRAM_OFFSET)
        result = []
        try:
            for _ in range(memory.program_length):
                opcode = memory.fetch_opcode()
                if opcode is None:
                    break
                result.append((opcode, decode_opcode(opcode)))
        finally:
            memory.restore_program_counter(saved_pc)
        return result

    def disassemble(self, start_addr: int, length: int) -> List[Tuple[int, str, str]]:
        return disassembler.disassemble(self._state.memory, start_addr, length)

    # --- UI向けAPI ---

    def get_register_map(self) -> Dict[str, int]:
        regs = self._state.registers
        result = {f"V{n:X}": value for n, value in enumerate(regs.snapshot())}
        result.update({
            "I": regs.i,
            "DT": regs.delay_timer,
            "ST": regs.sound_timer,
            "PC": self._current_pc(),
            "SP": self._state.stack.depth,
        })
        return result

    def get_register_layout(self) -> List[RegisterLayoutInfo]:
        return [
            RegisterLayoutInfo("Data", [RegisterInfo(f"V{n:X}", 8) for n in range(16)]),
            RegisterLayoutInfo("Address/Timers", [
                RegisterInfo("I", 16), RegisterInfo("PC", 16), RegisterInfo("SP", 8),
                RegisterInfo("DT", 8), RegisterInfo("ST", 8),
            ]),
        ]
