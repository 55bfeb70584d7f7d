"""
config.py
=========

アプリ全体で利用する設定値を一元管理する。
ゲームのラウンド数・選択肢数・テーマ・国旗画像のパスなど
すべてこのクラスを通じて取得する。

ルートの config.toml があれば読み込み、無ければデフォルト値で動く。
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import toml

from .catalog import COUNTRIES

logger = logging.getLogger(__name__)


# ------------------------------------------------------------
# 基本パス定義
# ------------------------------------------------------------

ROOT_DIR = Path(__file__).resolve().parent.parent
FLAGS_DIR = ROOT_DIR / "flags"
CONFIG_PATH = ROOT_DIR / "config.toml"

DEFAULT_ROUNDS_PER_SESSION = 8
DEFAULT_CHOICES_PER_ROUND = 3
DEFAULT_NICE_SCORE_THRESHOLD = 4
DEFAULT_THEME = "classic"


# ------------------------------------------------------------
# AppConfig
# ------------------------------------------------------------

@dataclass
class AppConfig:
    """
    アプリ設定クラス。

    - ゲーム設定（ラウンド数 / 選択肢数 / 高得点のしきい値）
    - UI 設定（テーマ / 国旗画像ディレクトリ）
    """

    # ---------- アプリ ----------
    app_name: str = "Guess the Flag"

    # ---------- ゲーム ----------
    rounds_per_session: int = DEFAULT_ROUNDS_PER_SESSION
    choices_per_round: int = DEFAULT_CHOICES_PER_ROUND
    nice_score_threshold: int = DEFAULT_NICE_SCORE_THRESHOLD

    # ---------- UI ----------
    theme: str = DEFAULT_THEME
    flags_dir: Path = FLAGS_DIR

    def __post_init__(self):
        if self.rounds_per_session <= 0:
            raise ValueError("rounds_per_session must be positive")

        if not 1 <= self.choices_per_round <= len(COUNTRIES):
            raise ValueError(
                f"choices_per_round must be between 1 and {len(COUNTRIES)}"
            )

        # 相対パスはプロジェクトルート基準で解決する
        self.flags_dir = Path(self.flags_dir)
        if not self.flags_dir.is_absolute():
            self.flags_dir = ROOT_DIR / self.flags_dir

    # ============================================================
    # dict からの生成
    # ============================================================

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AppConfig":
        """
        config.toml を読み込んだ dict から AppConfig を作る。

        セクションが無い・型が違う場合は、そのキーだけデフォルト値を使う。
        """
        app = data.get("app") if isinstance(data.get("app"), dict) else {}
        game = data.get("game") if isinstance(data.get("game"), dict) else {}
        ui = data.get("ui") if isinstance(data.get("ui"), dict) else {}

        kwargs: Dict[str, Any] = {}

        if isinstance(app.get("name"), str):
            kwargs["app_name"] = app["name"]

        for key in ("rounds_per_session", "choices_per_round", "nice_score_threshold"):
            value = game.get(key)
            if isinstance(value, int) and not isinstance(value, bool):
                kwargs[key] = value

        if isinstance(ui.get("theme"), str):
            kwargs["theme"] = ui["theme"]
        if isinstance(ui.get("flags_dir"), str):
            kwargs["flags_dir"] = Path(ui["flags_dir"])

        return cls(**kwargs)


# ------------------------------------------------------------
# config.toml 読み込み
# ------------------------------------------------------------

def load_app_config(path: Optional[Path] = None) -> AppConfig:
    """
    config.toml を読み込んで AppConfig を返す。

    - ファイルが無い場合はデフォルト設定
    - 壊れている場合は警告ログを出してデフォルト設定
    """
    path = Path(path) if path is not None else CONFIG_PATH

    if not path.exists():
        return AppConfig()

    try:
        data = toml.load(path)
    except (toml.TomlDecodeError, OSError) as e:
        logger.warning("Could not read %s, using defaults: %s", path, e)
        return AppConfig()

    try:
        return AppConfig.from_dict(data)
    except ValueError as e:
        logger.warning("Invalid settings in %s, using defaults: %s", path, e)
        return AppConfig()
