import yaml
from typing import Any, Dict

from .models import DEFAULT_KEY_MAP, DisplayConfig, EmulatorConfig

# @intent:responsibility YAML設定ファイルを読み込み、EmulatorConfigに変換します。
class ConfigLoader:
    def load_from_file(self, path: str) -> EmulatorConfig:
        with open(path, 'r') as f:
            data = yaml.safe_load(f)
        return self._parse_config(data or {})

    def load_from_string(self, text: str) -> EmulatorConfig:
        return self._parse_config(yaml.safe_load(text) or {})

    def _parse_config(self, data: Dict[str, Any]) -> EmulatorConfig:
        if not isinstance(data, dict):
            raise ValueError(f"Configuration root must be a mapping, got {type(data).__name__}")

        clock_speed_hz = float(data.get("clock_speed_hz", 700.0))
        if clock_speed_hz <= 0:
            raise ValueError(f"clock_speed_hz must be positive: {clock_speed_hz}")

        # Parse Display
        display_data = data.get("display", {}) or {}
        display = DisplayConfig(
            scale=self._parse_int(display_data.get("scale", 10)),
            foreground=str(display_data.get("foreground", "#FFFFFF")),
            background=str(display_data.get("background", "#000000")),
            frame_interval_ms=self._parse_int(display_data.get("frame_interval_ms", 16)),
        )
        if display.scale <= 0:
            raise ValueError(f"display.scale must be positive: {display.scale}")

        # Parse Key Map
        key_map = dict(DEFAULT_KEY_MAP)
        key_map_data = data.get("key_map")
        if key_map_data:
            key_map = {}
            for key_name, code in key_map_data.items():
                value = self._parse_int(code)
                if not 0 <= value <= 0xF:
                    raise ValueError(f"Key code for '{key_name}' out of range: {code}")
                key_map[str(key_name).upper()] = value

        return EmulatorConfig(
            clock_speed_hz=clock_speed_hz,
            display=display,
            key_map=key_map,
        )

    def _parse_int(self, value: Any) -> int:
        if isinstance(value, bool):
            raise ValueError(f"Invalid integer format: {value}")
        if isinstance(value, int):
            return value
        if isinstance(value, str):
            if value.lower().startswith("0x"):
                return int(value, 16)
            return int(value)
        raise ValueError(f"Invalid integer format: {value}")
