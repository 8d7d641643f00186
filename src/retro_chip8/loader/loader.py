# retro_chip8/loader/loader.py
"""
ROMローダーモジュール。

CHIP-8のプログラムイメージ（生のバイナリ）を読み込み、プログラム領域に収まるよう検証します。
"""
import logging
from pathlib import Path
from typing import Union

from retro_chip8.transport.memory import PROGRAM_OFFSET, PROGRAM_REGION_SIZE

logger = logging.getLogger(__name__)

# @intent:responsibility CHIP-8 ROMファイルを読み込み、プログラムイメージとして返します。
class RomLoader:
    """
    生バイナリ形式のCHIP-8 ROMローダー。
    イメージは0x200からロードされる前提で、プログラム領域（3584バイト）を超える部分は切り捨てます。
    """
    # @intent:responsibility ファイルからROMイメージを読み込みます。
    # @intent:pre-condition pathは存在する読み込み可能なファイルである必要があります。
    def load_file(self, path: Union[str, Path]) -> bytes:
        path = Path(path)
        logger.info("Booting ROM [ %s ].", path)
        with open(path, "rb") as f:
            data = f.read()
        return self.load_bytes(data, source=str(path))

    # @intent:responsibility バイト列を検証し、プログラム領域に収まるイメージを返します。
    def load_bytes(self, data: bytes, source: str = "<bytes>") -> bytes:
        if not data:
            raise ValueError(f"ROM image {source} is empty.")
        if len(data) > PROGRAM_REGION_SIZE:
            logger.warning(
                "ROM image %s is %d bytes; truncating to %d bytes (0x%03X-0xFFF).",
                source, len(data), PROGRAM_REGION_SIZE, PROGRAM_OFFSET,
            )
            data = data[:PROGRAM_REGION_SIZE]
        if len(data) % 2:
            logger.debug("ROM image %s has an odd length (%d bytes).", source, len(data))
        return bytes(data)
