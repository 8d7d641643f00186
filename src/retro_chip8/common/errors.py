"""
VM内部で発生する致命的エラーの定義。

CHIP-8プログラムは正しく構成されていることが前提であり、以下の例外はいずれも
VM内部では回復できません。発生箇所で送出し、ホスト（CLIやウィンドウ）が
ログを出力して実行を停止するかどうかを判断します。
"""

# @intent:responsibility 全てのVMエラーの基底クラス。
class Chip8Error(Exception):
    pass


# @intent:responsibility 0-15の範囲外のレジスタ番号が指定されたことを示します。
class InvalidRegisterIndex(Chip8Error, IndexError):
    def __init__(self, register: int):
        super().__init__(f"Invalid register index: {register}")
        self.register = register


# @intent:responsibility 4KiBのアドレス空間外、またはプログラム領域外へのアクセスを示します。
class MemoryBoundsViolation(Chip8Error, IndexError):
    pass


# @intent:responsibility 読み込み専用領域（0x000-0x1FF）への書き込みを示します。
class ReadOnlyMemoryViolation(MemoryBoundsViolation):
    pass


class StackOverflow(Chip8Error):
    pass


class StackUnderflow(Chip8Error):
    pass


# @intent:responsibility どの命令パターンにも一致しないオペコードの実行を示します。
class UnknownOpcode(Chip8Error, ValueError):
    def __init__(self, opcode: int):
        super().__init__(f"Unknown instruction encountered: 0x{opcode:04X}")
        self.opcode = opcode


# @intent:responsibility 停止命令に到達しないままプログラム領域の終端を越えてフェッチしたことを示します。
class ProgramExhausted(Chip8Error):
    pass


class InvalidKeyCode(Chip8Error, ValueError):
    def __init__(self, key: int):
        super().__init__(f"Invalid key code: {key}")
        self.key = key
