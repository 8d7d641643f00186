# tests/test_cli.py
import pytest

from retro_chip8 import cli

# @intent:test_suite コマンドラインのスキャンモードと引数エラー処理。

@pytest.fixture
def rom(tmp_path, assemble):
    path = tmp_path / "test.ch8"
    path.write_bytes(assemble(0x00E0, 0xA22A, 0x5121))
    return path


def test_scan_prints_opcodes(rom, capsys):
    assert cli.main([str(rom), "--scan"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out == [
        "0x00E0 => CLS",
        "0xA22A => LD I, $22A",
        "0x5121 => UNKNOWN $5121",
    ]


def test_missing_rom_returns_error(tmp_path):
    assert cli.main([str(tmp_path / "nope.ch8"), "-s"]) == 2


@pytest.mark.parametrize("option", [["--clock", "0"], ["--scale", "-1"]])
def test_invalid_overrides_return_error(rom, option):
    assert cli.main([str(rom), "-s", *option]) == 2


def test_resolve_config_overrides_file(tmp_path):
    config_path = tmp_path / "chip8.yaml"
    config_path.write_text("clock_speed_hz: 500\ndisplay:\n  scale: 4\n")
    args = cli.build_parser().parse_args(["rom.ch8", "--config", str(config_path), "-c", "1200"])
    config = cli.resolve_config(args)
    assert config.clock_speed_hz == 1200.0
    assert config.display.scale == 4


def test_scan_prints_operands_in_hex(tmp_path, assemble, capsys):
    path = tmp_path / "jump.ch8"
    path.write_bytes(assemble(0x1234, 0x3A0F, 0xD125))
    assert cli.main([str(path), "--scan"]) == 0
    assert capsys.readouterr().out.splitlines() == [
        "0x1234 => JP $234",
        "0x3A0F => SE VA, #0F",
        "0xD125 => DRW V1, V2, 5",
    ]
