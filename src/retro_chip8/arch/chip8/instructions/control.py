"""
制御フロー命令（ジャンプ、サブルーチン、条件スキップ）の実装。
"""
from retro_chip8.arch.chip8 import instruction as ins
from retro_chip8.arch.chip8.state import Chip8State

def execute_clear_screen(state: Chip8State, op: ins.ClearScreen) -> None:
    state.display.clear()

# @intent:responsibility スタックから戻りアドレスを取り出し、PCに設定します。
def execute_return(state: Chip8State, op: ins.Return) -> None:
    state.memory.set_program_counter(state.stack.pop())

def execute_jump(state: Chip8State, op: ins.Jump) -> None:
    state.memory.set_program_counter(op.address)

# @intent:responsibility 現在のPC（次の命令のアドレス）をスタックに積み、サブルーチンへジャンプします。
def execute_call(state: Chip8State, op: ins.Call) -> None:
    state.stack.push(state.memory.peek_program_counter())
    state.memory.set_program_counter(op.address)

# @intent:responsibility V0 + nnn へジャンプします。
def execute_jump_from_offset(state: Chip8State, op: ins.JumpFromOffset) -> None:
    state.memory.set_program_counter(state.registers.read(0x0) + op.address)

# --- 条件スキップ ---

def execute_skip_if_equal_data(state: Chip8State, op: ins.SkipIfEqualData) -> None:
    if state.registers.read(op.x) == op.data:
        state.memory.skip_instruction()

def execute_skip_if_not_equal_data(state: Chip8State, op: ins.SkipIfNotEqualData) -> None:
    if state.registers.read(op.x) != op.data:
        state.memory.skip_instruction()

def execute_skip_if_equal_register(state: Chip8State, op: ins.SkipIfEqualRegister) -> None:
    if state.registers.read(op.x) == state.registers.read(op.y):
        state.memory.skip_instruction()

def execute_skip_if_not_equal_register(state: Chip8State, op: ins.SkipIfNotEqualRegister) -> None:
    if state.registers.read(op.x) != state.registers.read(op.y):
        state.memory.skip_instruction()

def execute_skip_if_pressed(state: Chip8State, op: ins.SkipIfPressed) -> None:
    if state.is_key_pressed(state.registers.read(op.x)):
        state.memory.skip_instruction()

def execute_skip_if_not_pressed(state: Chip8State, op: ins.SkipIfNotPressed) -> None:
    if not state.is_key_pressed(state.registers.read(op.x)):
        state.memory.skip_instruction()

# @intent:responsibility キー押下待ち状態へ遷移します。解除は Chip8Cpu.update_key が行います。
def execute_await_key_press(state: Chip8State, op: ins.AwaitKeyPress) -> None:
    state.registers.read(op.x)  # レジスタ番号の検証
    state.awaiting_key = op.x

# @intent:rationale 0nnn（マシン語ルーチン呼び出し）は対応しないため何もしません。
def execute_no_op(state: Chip8State, op: ins.NoOp) -> None:
    pass
