"""
ロード/ストア、タイマー、描画命令の実装。
"""
import logging

from retro_chip8.arch.chip8 import instruction as ins
from retro_chip8.arch.chip8.state import Chip8State
from retro_chip8.core.registers import FLAG_REGISTER
from retro_chip8.transport.memory import FONT_SPRITE_SIZE

logger = logging.getLogger(__name__)

def execute_load_data(state: Chip8State, op: ins.LoadData) -> None:
    state.registers.write(op.x, op.data)

def execute_load_register(state: Chip8State, op: ins.LoadRegister) -> None:
    state.registers.write(op.x, state.registers.read(op.y))

def execute_set_address_register(state: Chip8State, op: ins.SetAddressRegister) -> None:
    state.registers.i = op.address

def execute_add_address_register(state: Chip8State, op: ins.AddAddressRegister) -> None:
    regs = state.registers
    regs.i = (regs.i + regs.read(op.x)) & 0xFFFF

# @intent:responsibility Vx の下位ニブルに対応するフォントスプライトのアドレスを I に設定します。
def execute_load_font_sprite(state: Chip8State, op: ins.LoadFontSprite) -> None:
    state.registers.i = FONT_SPRITE_SIZE * (state.registers.read(op.x) & 0x0F)

# @intent:responsibility I から rows バイトのスプライトを (Vx, Vy) に描画し、衝突をVFに設定します。
def execute_draw(state: Chip8State, op: ins.Draw) -> None:
    regs = state.registers
    start = regs.i
    sprite = state.memory.slice_program(start, start + op.rows)
    collision = state.display.draw(regs.read(op.x), regs.read(op.y), sprite)
    regs.write(FLAG_REGISTER, 1 if collision else 0)

def execute_load_delay_timer(state: Chip8State, op: ins.LoadDelayTimer) -> None:
    state.registers.write(op.x, state.registers.delay_timer)

def execute_set_delay_timer(state: Chip8State, op: ins.SetDelayTimer) -> None:
    state.registers.delay_timer = state.registers.read(op.x)

# @intent:rationale 音声出力は実装しない。意図的な no-op として警告のみ出力します。
def execute_set_sound_timer(state: Chip8State, op: ins.SetSoundTimer) -> None:
    logger.warning("Sound is not implemented.")

# @intent:responsibility Vx の10進表現（百、十、一の位）を I, I+1, I+2 に書き込みます。
def execute_store_bcd(state: Chip8State, op: ins.StoreBcd) -> None:
    regs = state.registers
    value = regs.read(op.x)
    state.memory.write_address(regs.i, value // 100)
    state.memory.write_address(regs.i + 1, (value // 10) % 10)
    state.memory.write_address(regs.i + 2, value % 10)

# V0..Vx（両端を含む）を I からのメモリへ。I は変化しない
def execute_store_registers(state: Chip8State, op: ins.StoreRegisters) -> None:
    regs = state.registers
    for register in range(op.x + 1):
        state.memory.write_address(regs.i + register, regs.read(register))

def execute_read_registers(state: Chip8State, op: ins.ReadRegisters) -> None:
    regs = state.registers
    for register in range(op.x + 1):
        regs.write(register, state.memory.load_address(regs.i + register))
