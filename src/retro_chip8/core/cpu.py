# retro_chip8/core/cpu.py
"""
Core Layer (抽象CPU)

このモジュールは、CPUの基本的な状態管理と命令サイクルの駆動に関する抽象化を提供します。
具体的な命令の振る舞いはInstruction Layerに移譲されます。
"""
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Tuple

from retro_chip8.arch.chip8.instruction import Instruction
from retro_chip8.common.types import RegisterLayoutInfo
from retro_chip8.core.snapshot import Snapshot

# @intent:responsibility 抽象CPUの基本機能とインターフェースを定義します。
class AbstractCpu(ABC):
    """
    CPUエミュレーションの基底となる抽象クラス。
    基本的な状態管理と、フェッチ→デコード→実行の命令サイクルを提供します。
    """
    def __init__(self):
        self._state = self._create_initial_state()
        self._instruction_count: int = 0
        # @intent:rationale Stateオブジェクトの直接操作を避けるため、protectedな命名規則を採用。
        #                  外部からのアクセスは`get_state()`メソッドを介して行う。

    # @intent:responsibility 初期状態のオブジェクトを生成します。
    @abstractmethod
    def _create_initial_state(self) -> Any:
        pass

    # @intent:responsibility CPUをリセットし、初期状態に戻します。
    def reset(self) -> None:
        self._state = self._create_initial_state()
        self._instruction_count = 0

    def get_state(self) -> Any:
        return self._state

    @property
    def instruction_count(self) -> int:
        return self._instruction_count

    # @intent:responsibility 現在のプログラムカウンタを返します。
    @abstractmethod
    def _current_pc(self) -> int:
        pass

    # @intent:responsibility 次の命令（オペコード）をフェッチし、PCを次の命令へ進めます。
    @abstractmethod
    def _fetch(self) -> int:
        pass

    @abstractmethod
    def _decode(self, opcode: int) -> Instruction:
        pass

    @abstractmethod
    def _execute(self, instruction: Instruction) -> None:
        pass

    # @intent:responsibility CPUを1命令進め、その結果のスナップショットを返します。
    # @intent:rationale Template Methodパターンを採用し、共通の実行フロー（フェッチ→デコード→実行→Snapshot生成）を定義します。
    def step(self) -> Snapshot:
        """
        CPUを1命令サイクル進め、実行した命令のSnapshotを返します。
        """
        initial_pc = self._current_pc()
        opcode = self._fetch()
        instruction = self._decode(opcode)
        self._execute(instruction)
        self._instruction_count += 1
        return Snapshot(
            pc=initial_pc,
            opcode=opcode,
            instruction=instruction,
            instruction_count=self._instruction_count,
        )

    @abstractmethod
    def get_register_map(self) -> Dict[str, int]:
        """
        現在のレジスタ値を辞書形式で返す。
        UIがCPUの内部構造を知らなくても値を表示できるようにするために使用される。
        """
        pass

    @abstractmethod
    def get_register_layout(self) -> List[RegisterLayoutInfo]:
        """
        レジスタをUI上でどのように配置・グループ化すべきかの定義を返す。
        """
        pass

    @abstractmethod
    def disassemble(self, start_addr: int, length: int) -> List[Tuple[int, str, str]]:
        """
        指定されたメモリ範囲を逆アセンブルし、(address, hex_bytes, mnemonic) のタプルリストを返す。
        """
        pass
