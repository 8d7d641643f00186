# src/retro_chip8/cli.py
"""
コマンドラインのエントリポイント。

Usage:
  retro-chip8 ROM [--scan] [--verbose] [--clock HZ] [--config FILE] [--scale N]
"""
import argparse
import logging
import sys
from typing import List, Optional

import yaml

from retro_chip8.arch.chip8.disassembler import format_instruction
from retro_chip8.common.errors import Chip8Error
from retro_chip8.config.builder import SystemBuilder
from retro_chip8.config.loader import ConfigLoader
from retro_chip8.config.models import EmulatorConfig

logger = logging.getLogger(__name__)

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="retro-chip8", description="Yet another CHIP-8 emulator.")
    parser.add_argument("program_file", metavar="PROGRAM_FILE", help="A CHIP-8 ROM filepath.")
    parser.add_argument("-s", "--scan", action="store_true",
                        help="Scan the program only, printing raw opcodes and instructions.")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Run the VM with verbose logging to the terminal.")
    parser.add_argument("-c", "--clock", dest="clock_speed", type=float, default=None,
                        help="The clock speed to run the CPU at in Hz. Defaults to 700Hz.")
    parser.add_argument("--config", default=None, help="YAML configuration file.")
    parser.add_argument("--scale", type=int, default=None, help="Pixel scale of the window.")
    return parser

# @intent:responsibility 設定ファイルとコマンドライン引数から最終的な設定を組み立てます。
def resolve_config(args: argparse.Namespace) -> EmulatorConfig:
    config = ConfigLoader().load_from_file(args.config) if args.config else EmulatorConfig()
    if args.clock_speed is not None:
        if args.clock_speed <= 0:
            raise ValueError(f"Clock speed must be positive, got {args.clock_speed}")
        config.clock_speed_hz = args.clock_speed
    if args.scale is not None:
        if args.scale <= 0:
            raise ValueError(f"Scale must be positive, got {args.scale}")
        config.display.scale = args.scale
    return config

# @intent:responsibility プログラムを実行せずにデコードし、"0xOPCODE => Instruction" 形式で出力します。
def scan(cpu) -> None:
    for opcode, instruction in cpu.scan_program():
        print(f"0x{opcode:04X} => {format_instruction(instruction)}")

def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    try:
        config = resolve_config(args)
        cpu = SystemBuilder().build_from_file(config, args.program_file)
    except (OSError, ValueError, yaml.YAMLError) as e:
        logger.error("Cannot start: %s", e)
        return 2

    if args.scan:
        scan(cpu)
        return 0

    # 重いGUI依存はウィンドウを開く場合のみ読み込む
    from retro_chip8.ui.app import run
    try:
        return run(cpu, config)
    except Chip8Error as e:
        logger.error("VM halted: %s", e)
        return 1

if __name__ == '__main__':
    sys.exit(main())
