"""
UIフォント管理モジュール。

レジスタ表示などで使用する等幅フォントを、プラットフォームに応じて選択します。
"""
from PySide6.QtGui import QFontDatabase

# @intent:responsibility 現在のシステムで利用可能な最適な等幅フォントファミリー名を返します。
def get_monospace_font_family() -> str:
    """
    優先順位: Consolas -> Menlo -> DejaVu Sans Mono -> システムの固定幅フォント
    """
    preferred_fonts = ["Consolas", "Menlo", "DejaVu Sans Mono"]
    available_families = QFontDatabase.families()

    for font in preferred_fonts:
        if font in available_families:
            return font

    return QFontDatabase.systemFont(QFontDatabase.FixedFont).family()
