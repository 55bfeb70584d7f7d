"""
catalog.py
===========================

出題対象の国一覧と、国旗の説明文（読み上げ用ラベル）を管理するモジュール。

国旗画像は flags/<国名>.png のように国名そのままのファイル名で置く。
画像が無い国は UI 側で説明文カードに切り替える。

説明文は国名を含まない。読み上げで答えが分かってしまわないよう、
色と配置だけで国旗を描写する。
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, Optional, Tuple

# ----------------------------------------------------------------------
#  国一覧（プロセス中は不変）
# ----------------------------------------------------------------------
COUNTRIES: Tuple[str, ...] = (
    "Estonia",
    "France",
    "Germany",
    "Ireland",
    "Italy",
    "Nigeria",
    "Poland",
    "Spain",
    "UK",
    "Ukraine",
    "US",
)

# ----------------------------------------------------------------------
#  国旗の説明文
# ----------------------------------------------------------------------
FLAG_LABELS: Dict[str, str] = {
    "Estonia": "Flag with three horizontal stripes. Top stripe blue, middle stripe black, bottom stripe white.",
    "France": "Flag with three vertical stripes. Left stripe blue, middle stripe white, right stripe red.",
    "Germany": "Flag with three horizontal stripes. Top stripe black, middle stripe red, bottom stripe gold.",
    "Ireland": "Flag with three vertical stripes. Left stripe green, middle stripe white, right stripe orange.",
    "Italy": "Flag with three vertical stripes. Left stripe green, middle stripe white, right stripe red.",
    "Nigeria": "Flag with three vertical stripes. Left stripe green, middle stripe white, right stripe green.",
    "Poland": "Flag with two horizontal stripes. Top stripe white, bottom stripe red.",
    "Spain": "Flag with three horizontal stripes. Top thin stripe red, middle thick stripe is gold with crest on the left, bottom thin stripe red.",
    "UK": "Flag with overlapping red and white crosses, both straight and diagonally, on a blue background.",
    "Ukraine": "Flag with two horizontal stripes. Top stripe blue, bottom stripe yellow.",
    "US": "Flag with many red and white stripes, with white stars on a blue background in the top-left corner.",
}

UNKNOWN_FLAG_LABEL = "Unknown flag"

IMAGE_EXTENSIONS: Tuple[str, ...] = (".png", ".jpg", ".jpeg", ".webp")


# ----------------------------------------------------------------------
#  ルックアップ
# ----------------------------------------------------------------------
def flag_label(country: str) -> str:
    """国旗の説明文。表に無い国は "Unknown flag"。"""
    return FLAG_LABELS.get(country, UNKNOWN_FLAG_LABEL)


def flag_image_path(country: str, image_dir: Path) -> Optional[Path]:
    """
    国旗画像のパスを返す。見つからなければ None。

    拡張子は IMAGE_EXTENSIONS の順に探す。
    """
    image_dir = Path(image_dir)
    for ext in IMAGE_EXTENSIONS:
        candidate = image_dir / f"{country}{ext}"
        if candidate.is_file():
            return candidate
    return None
