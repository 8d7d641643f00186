import random
from typing import Optional

from retro_chip8.arch.chip8.cpu import Chip8Cpu
from retro_chip8.loader.loader import RomLoader
from .models import EmulatorConfig

# @intent:responsibility 設定（Config）とROMイメージからVMを生成します。
class SystemBuilder:
    def __init__(self, loader: Optional[RomLoader] = None):
        self._loader = loader or RomLoader()

    def build_system(self, config: EmulatorConfig, program: bytes,
                     rng: Optional[random.Random] = None) -> Chip8Cpu:
        image = self._loader.load_bytes(program)
        return Chip8Cpu(image, clock_speed_hz=config.clock_speed_hz, rng=rng)

    def build_from_file(self, config: EmulatorConfig, path: str) -> Chip8Cpu:
        return Chip8Cpu(self._loader.load_file(path), clock_speed_hz=config.clock_speed_hz)
