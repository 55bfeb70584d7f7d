"""
history.py
=====================================

1セッション分の解答履歴を管理するモジュール。
ゲームオーバー時のサマリー表示に使う。

永続化はしない。セッションを始め直すたびに clear() される。
"""

from __future__ import annotations

from typing import Any, Dict, List

from .models import RoundRecord


class RoundHistory:
    """
    解答履歴（RoundRecord のリスト）を出題順に保持するクラス。
    """

    def __init__(self):
        self._records: List[RoundRecord] = []

    # ---------------------------------------------------------
    # 履歴を追加
    # ---------------------------------------------------------
    def record_round(
        self,
        prompt_country: str,
        selected_country: str,
        correct: bool,
        score_after: int,
    ) -> RoundRecord:
        """
        解答を 1件追加し、追加した RoundRecord を返す。
        round_number は追加順に 1, 2, 3... と振る。
        """
        record = RoundRecord(
            round_number=len(self._records) + 1,
            prompt_country=prompt_country,
            selected_country=selected_country,
            correct=correct,
            score_after=score_after,
        )
        self._records.append(record)
        return record

    def clear(self) -> None:
        self._records.clear()

    # ---------------------------------------------------------
    # 状態を取得（UI 用）
    # ---------------------------------------------------------
    @property
    def records(self) -> List[RoundRecord]:
        return list(self._records)

    @property
    def correct_count(self) -> int:
        return sum(1 for r in self._records if r.correct)

    @property
    def wrong_count(self) -> int:
        return sum(1 for r in self._records if not r.correct)

    def to_rows(self) -> List[Dict[str, Any]]:
        """
        表形式で表示するための行リスト。

        [
          {"Round": 1, "Flag of": "France", "You tapped": "Italy", "Result": "Wrong", "Score": -1},
          ...
        ]
        """
        return [
            {
                "Round": r.round_number,
                "Flag of": r.prompt_country,
                "You tapped": r.selected_country,
                "Result": "Correct" if r.correct else "Wrong",
                "Score": r.score_after,
            }
            for r in self._records
        ]

    def __len__(self) -> int:
        return len(self._records)
