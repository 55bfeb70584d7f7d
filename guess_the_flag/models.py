"""
models.py
======================

ゲームで使う値オブジェクトの定義。

- Phase: セッションの状態（出題中 / 結果ダイアログ表示中 / ゲームオーバー）
- Round: 1ラウンド分の出題（表示順の国 + 正解 index）
- RoundRecord: 解答済みラウンドの記録（終了時のサマリー用）
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any, Dict, Tuple


class Phase(str, Enum):
    PLAYING = "playing"
    SHOWING_ROUND_RESULT = "showing_round_result"
    GAME_OVER = "game_over"


@dataclass(frozen=True)
class Round:
    countries: Tuple[str, ...]
    correct_index: int

    def __post_init__(self):
        if not 0 <= self.correct_index < len(self.countries):
            raise ValueError("correct_index out of range")
        if len(set(self.countries)) != len(self.countries):
            raise ValueError("Round countries must be distinct")

    @property
    def correct_country(self) -> str:
        return self.countries[self.correct_index]


@dataclass(frozen=True)
class RoundRecord:
    """解答 1回分の記録。round_number は 1 始まり。"""

    round_number: int
    prompt_country: str
    selected_country: str
    correct: bool
    score_after: int

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
