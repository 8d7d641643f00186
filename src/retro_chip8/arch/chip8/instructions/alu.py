"""
算術論理演算命令の実装。

フラグを生成する命令は、結果を書き込む前にVFへフラグを書き込みます。
演算先がVF自身の場合は、演算結果がフラグを上書きします。
"""
from retro_chip8.arch.chip8 import instruction as ins
from retro_chip8.arch.chip8.state import Chip8State
from retro_chip8.core.registers import FLAG_REGISTER

# 7xkk: キャリーフラグは変化しない
def execute_add_data(state: Chip8State, op: ins.AddData) -> None:
    regs = state.registers
    regs.write(op.x, (regs.read(op.x) + op.data) & 0xFF)

def execute_or(state: Chip8State, op: ins.Or) -> None:
    regs = state.registers
    regs.write(op.x, regs.read(op.x) | regs.read(op.y))

def execute_and(state: Chip8State, op: ins.And) -> None:
    regs = state.registers
    regs.write(op.x, regs.read(op.x) & regs.read(op.y))

def execute_xor(state: Chip8State, op: ins.Xor) -> None:
    regs = state.registers
    regs.write(op.x, regs.read(op.x) ^ regs.read(op.y))

# @intent:responsibility Vx += Vy。和が255を超えた場合 VF=1。
def execute_add(state: Chip8State, op: ins.Add) -> None:
    regs = state.registers
    total = regs.read(op.x) + regs.read(op.y)
    regs.write(FLAG_REGISTER, 1 if total > 0xFF else 0)
    regs.write(op.x, total & 0xFF)

# @intent:responsibility Vx -= Vy。ボローが発生しなかった場合（Vx > Vy）VF=1。
def execute_sub(state: Chip8State, op: ins.Sub) -> None:
    regs = state.registers
    minuend = regs.read(op.x)
    subtrahend = regs.read(op.y)
    regs.write(FLAG_REGISTER, 1 if minuend > subtrahend else 0)
    regs.write(op.x, (minuend - subtrahend) & 0xFF)

# @intent:responsibility Vx = Vy - Vx。Vy > Vx の場合 VF=1。
def execute_negated_sub(state: Chip8State, op: ins.NegatedSub) -> None:
    regs = state.registers
    subtrahend = regs.read(op.x)
    minuend = regs.read(op.y)
    regs.write(FLAG_REGISTER, 1 if minuend > subtrahend else 0)
    regs.write(op.x, (minuend - subtrahend) & 0xFF)

# VF = シフト前の最下位ビット
def execute_shift_right(state: Chip8State, op: ins.ShiftRight) -> None:
    regs = state.registers
    value = regs.read(op.x)
    regs.write(FLAG_REGISTER, value & 0x1)
    regs.write(op.x, value >> 1)

# VF = シフト前の最上位ビット
def execute_shift_left(state: Chip8State, op: ins.ShiftLeft) -> None:
    regs = state.registers
    value = regs.read(op.x)
    regs.write(FLAG_REGISTER, value >> 7)
    regs.write(op.x, (value << 1) & 0xFF)

# @intent:responsibility 0-255の一様乱数にマスクを掛けて格納します。
def execute_random(state: Chip8State, op: ins.Random) -> None:
    state.registers.write(op.x, state.rng.randint(0, 0xFF) & op.data)
