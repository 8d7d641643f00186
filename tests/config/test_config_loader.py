# tests/config/test_config_loader.py
import os
import random
import tempfile
import unittest

import pytest

from retro_chip8.arch.chip8.cpu import Chip8Cpu
from retro_chip8.config.builder import SystemBuilder
from retro_chip8.config.loader import ConfigLoader
from retro_chip8.config.models import DEFAULT_KEY_MAP, EmulatorConfig

# @intent:test_suite YAML設定の読み込みと、設定からのVM構築。

class TestConfigLoader(unittest.TestCase):
    def setUp(self):
        self.loader = ConfigLoader()

    def test_empty_document_uses_defaults(self):
        config = self.loader.load_from_string("")
        self.assertEqual(config, EmulatorConfig())
        self.assertEqual(config.key_map, DEFAULT_KEY_MAP)

    def test_full_document(self):
        yaml_text = """
clock_speed_hz: 500
display:
  scale: 8
  foreground: "#33FF33"
  background: "#002200"
  frame_interval_ms: 10
key_map:
  u: 0x1
  i: "0x2"
  o: 3
"""
        config = self.loader.load_from_string(yaml_text)
        self.assertEqual(config.clock_speed_hz, 500.0)
        self.assertEqual(config.display.scale, 8)
        self.assertEqual(config.display.foreground, "#33FF33")
        self.assertEqual(config.display.background, "#002200")
        self.assertEqual(config.display.frame_interval_ms, 10)
        self.assertEqual(config.key_map, {"U": 1, "I": 2, "O": 3})

    def test_load_from_file(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "chip8.yaml")
            with open(path, "w") as f:
                f.write("clock_speed_hz: 1000\n")
            config = self.loader.load_from_file(path)
        self.assertEqual(config.clock_speed_hz, 1000.0)
        self.assertEqual(config.display.scale, 10)

    def test_invalid_documents(self):
        for text in (
            "- a list\n- root",
            "clock_speed_hz: 0",
            "display:\n  scale: 0",
            "display:\n  scale: true",
            "key_map:\n  q: 0x10",
            "key_map:\n  q: [1]",
        ):
            with self.subTest(text=text):
                with self.assertRaises(ValueError):
                    self.loader.load_from_string(text)


class TestSystemBuilder:
    def test_build_system_applies_clock(self):
        config = EmulatorConfig(clock_speed_hz=100.0)
        cpu = SystemBuilder().build_system(config, b"\x12\x00", rng=random.Random(0))
        assert isinstance(cpu, Chip8Cpu)
        assert cpu.micros_per_cycle == 10000
        assert cpu.memory.peek_opcode(0x200) == 0x1200

    def test_build_from_file(self, tmp_path):
        rom = tmp_path / "loop.ch8"
        rom.write_bytes(b"\x00\xE0\x12\x02")
        cpu = SystemBuilder().build_from_file(EmulatorConfig(), str(rom))
        assert cpu.memory.program_length == 2

    def test_build_rejects_empty_image(self):
        with pytest.raises(ValueError):
            SystemBuilder().build_system(EmulatorConfig(), b"")
