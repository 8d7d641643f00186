"""
命令クラスと実行関数のマッピング定義。
"""
from retro_chip8.arch.chip8 import instruction as ins
from . import alu
from . import control
from . import load

# @intent:map 命令クラスから実行関数へのマッピングテーブル。
# Unknown は意図的に含めず、execute_instruction 側で致命的エラーとして扱う。
EXECUTE_MAP = {
    # Control
    ins.ClearScreen: control.execute_clear_screen,
    ins.Return: control.execute_return,
    ins.Jump: control.execute_jump,
    ins.Call: control.execute_call,
    ins.JumpFromOffset: control.execute_jump_from_offset,
    ins.SkipIfEqualData: control.execute_skip_if_equal_data,
    ins.SkipIfNotEqualData: control.execute_skip_if_not_equal_data,
    ins.SkipIfEqualRegister: control.execute_skip_if_equal_register,
    ins.SkipIfNotEqualRegister: control.execute_skip_if_not_equal_register,
    ins.SkipIfPressed: control.execute_skip_if_pressed,
    ins.SkipIfNotPressed: control.execute_skip_if_not_pressed,
    ins.AwaitKeyPress: control.execute_await_key_press,
    ins.NoOp: control.execute_no_op,

    # ALU
    ins.AddData: alu.execute_add_data,
    ins.Or: alu.execute_or,
    ins.And: alu.execute_and,
    ins.Xor: alu.execute_xor,
    ins.Add: alu.execute_add,
    ins.Sub: alu.execute_sub,
    ins.NegatedSub: alu.execute_negated_sub,
    ins.ShiftRight: alu.execute_shift_right,
    ins.ShiftLeft: alu.execute_shift_left,
    ins.Random: alu.execute_random,

    # Load/Store
    ins.LoadData: load.execute_load_data,
    ins.LoadRegister: load.execute_load_register,
    ins.SetAddressRegister: load.execute_set_address_register,
    ins.AddAddressRegister: load.execute_add_address_register,
    ins.LoadFontSprite: load.execute_load_font_sprite,
    ins.Draw: load.execute_draw,
    ins.LoadDelayTimer: load.execute_load_delay_timer,
    ins.SetDelayTimer: load.execute_set_delay_timer,
    ins.SetSoundTimer: load.execute_set_sound_timer,
    ins.StoreBcd: load.execute_store_bcd,
    ins.StoreRegisters: load.execute_store_registers,
    ins.ReadRegisters: load.execute_read_registers,
}
