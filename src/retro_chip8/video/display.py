# retro_chip8/video/display.py
"""
表示バッファ

64x32のモノクロ画面を、1ピクセル1バイト（0または1）の行優先フラット配列として保持します。
描画はXORによるスプライト転送のみで、画面端では両軸とも折り返します（クリップしません）。
"""
from typing import List

WIDTH = 64
HEIGHT = 32
SIZE = WIDTH * HEIGHT
MAX_SPRITE_ROWS = 15

# @intent:responsibility 画面バッファの保持と、スプライトのXOR描画・衝突検出を行います。
class Display:
    """
    CHIP-8の表示バッファ。
    変更は clear() と draw() のみで行われ、各セルは常に0か1です。
    """
    def __init__(self):
        self._buffer = bytearray(SIZE)

    # @intent:responsibility 全ピクセルを消去します。
    def clear(self) -> None:
        self._buffer = bytearray(SIZE)

    # @intent:responsibility スプライトを(x, y)にXOR描画し、衝突の有無を返します。
    # @intent:post-condition 点灯していたピクセルが1つでも消えた場合にTrueを返します。
    def draw(self, x: int, y: int, sprite: bytes) -> bool:
        """
        spriteの各バイトを1行（MSBが左端）として描画します。
        同じスプライトを同じ位置に2回描画すると、元のバッファに戻ります。
        """
        if len(sprite) > MAX_SPRITE_ROWS:
            raise ValueError(f"Sprite has {len(sprite)} rows, maximum is {MAX_SPRITE_ROWS}.")

        erased = False
        for row, byte in enumerate(sprite):
            current_y = (y + row) % HEIGHT
            for bit in range(8):
                current_x = (x + bit) % WIDTH
                index = current_y * WIDTH + current_x

                old_pixel = self._buffer[index]
                new_pixel = old_pixel ^ ((byte >> (7 - bit)) & 1)
                self._buffer[index] = new_pixel

                if old_pixel == 1 and new_pixel == 0:
                    erased = True
        return erased

    # @intent:responsibility 描画側が参照するための読み込み専用スナップショットを返します。
    @property
    def buffer(self) -> bytes:
        return bytes(self._buffer)

    def pixel(self, x: int, y: int) -> int:
        return self._buffer[(y % HEIGHT) * WIDTH + (x % WIDTH)]

    def rows(self) -> List[bytes]:
        return [bytes(self._buffer[r * WIDTH:(r + 1) * WIDTH]) for r in range(HEIGHT)]

    # デバッグ表示用（'#'が点灯）
    def render_text(self) -> str:
        return "\n".join("".join("#" if p else "." for p in row) for row in self.rows())
