"""
session.py
======================

クイズ 1セッション分の状態と操作をまとめたモジュール。

状態遷移:

    PLAYING --select_answer()--> SHOWING_ROUND_RESULT
    SHOWING_ROUND_RESULT --advance()--> PLAYING          (ラウンドが残っている場合)
    SHOWING_ROUND_RESULT --advance()--> GAME_OVER        (規定ラウンド数に達した場合)
    GAME_OVER --restart()--> PLAYING

ラウンド数のカウントは解答時ではなく、結果ダイアログを閉じた時（advance）に行う。
8 ラウンド目の結果を見て閉じた時点でゲームオーバーになる。

Streamlit には依存しない。UI 側（app.py / ui.py）はこのクラスの
プロパティを読んで描画し、ボタン操作でメソッドを呼ぶだけにする。
"""

from __future__ import annotations

import logging
import random
from typing import Optional, Sequence, Tuple

from .catalog import COUNTRIES
from .config import AppConfig
from .history import RoundHistory
from .models import Phase, Round

logger = logging.getLogger(__name__)

CORRECT_TITLE = "Correct"
WRONG_TITLE = "Wrong"
GAME_OVER_TITLE = "Game Over"


class QuizSession:
    """
    国旗当てクイズのセッションコントローラ。

    主な操作:
    - start_new_session(): スコアとラウンド数をリセットして新しいラウンドを出題
    - draw_round(): 国一覧をシャッフルして先頭から出題国を選ぶ
    - select_answer(): 国旗をタップした時の採点
    - advance(): 結果ダイアログを閉じた時の処理
    - restart(): ゲームオーバーからやり直し
    """

    def __init__(
        self,
        config: Optional[AppConfig] = None,
        rng: Optional[random.Random] = None,
        countries: Sequence[str] = COUNTRIES,
    ) -> None:
        self.config = config if config is not None else AppConfig()
        self.rng = rng if rng is not None else random.Random()

        if len(set(countries)) < self.config.choices_per_round:
            raise ValueError("Not enough unique countries to build a round")
        self._catalog: Tuple[str, ...] = tuple(countries)

        self.history = RoundHistory()
        self.score = 0
        self.rounds_completed = 0
        self.score_title = ""
        self.selected_country = ""
        self.phase = Phase.PLAYING
        self.current_round: Round

        self.start_new_session()

    # ------------------------------------------------------------------
    # セッション開始 / 出題
    # ------------------------------------------------------------------
    def start_new_session(self) -> None:
        self.score = 0
        self.rounds_completed = 0
        self.score_title = ""
        self.selected_country = ""
        self.history.clear()
        self.draw_round()
        logger.info("New session started (%d rounds)", self.rounds_per_session)

    def draw_round(self) -> Round:
        """
        国一覧をシャッフルし、先頭 choices_per_round 件を今回の候補にする。
        正解 index は候補の中から一様ランダム。

        前回と同じ国が正解になることもある。
        """
        shuffled = list(dict.fromkeys(self._catalog))
        self.rng.shuffle(shuffled)

        choices = self.config.choices_per_round
        self.current_round = Round(
            countries=tuple(shuffled[:choices]),
            correct_index=self.rng.randrange(choices),
        )
        self.phase = Phase.PLAYING
        logger.debug(
            "Drew round %s, answer=%s",
            self.current_round.countries,
            self.current_round.correct_country,
        )
        return self.current_round

    # ------------------------------------------------------------------
    # ユーザー操作
    # ------------------------------------------------------------------
    def select_answer(self, index: int) -> bool:
        """
        index 番目の国旗がタップされた時に呼ぶ。正解なら True。

        正解: score += 1 / 不正解: score -= 1
        どちらの場合も結果ダイアログ表示状態に移る。
        """
        if self.phase is not Phase.PLAYING:
            raise RuntimeError(f"Cannot select an answer while {self.phase.value}")
        if not 0 <= index < len(self.current_round.countries):
            raise ValueError(f"Answer index out of range: {index}")

        correct = index == self.current_round.correct_index
        if correct:
            self.score_title = CORRECT_TITLE
            self.score += 1
        else:
            self.score_title = WRONG_TITLE
            self.score -= 1

        self.selected_country = self.current_round.countries[index]
        self.history.record_round(
            prompt_country=self.current_round.correct_country,
            selected_country=self.selected_country,
            correct=correct,
            score_after=self.score,
        )
        self.phase = Phase.SHOWING_ROUND_RESULT

        logger.info(
            "Round %d: %s (tapped %s, score %d)",
            self.rounds_completed + 1,
            self.score_title,
            self.selected_country,
            self.score,
        )
        return correct

    def advance(self) -> None:
        """
        結果ダイアログの「Continue」で呼ぶ。
        規定ラウンド数に達したらゲームオーバー、そうでなければ次のラウンドを出題。
        """
        if self.phase is not Phase.SHOWING_ROUND_RESULT:
            raise RuntimeError(f"Cannot advance while {self.phase.value}")

        self.rounds_completed += 1

        if self.rounds_completed == self.rounds_per_session:
            self.phase = Phase.GAME_OVER
            logger.info(
                "Game over after %d rounds, final score %d",
                self.rounds_completed,
                self.score,
            )
            return

        self.draw_round()

    def restart(self) -> None:
        """ゲームオーバーダイアログの「Restart game」で呼ぶ。"""
        if self.phase is not Phase.GAME_OVER:
            raise RuntimeError(f"Cannot restart while {self.phase.value}")
        self.start_new_session()

    # ------------------------------------------------------------------
    # UI 用の読み取り専用プロパティ
    # ------------------------------------------------------------------
    @property
    def rounds_per_session(self) -> int:
        return self.config.rounds_per_session

    @property
    def countries(self) -> Tuple[str, ...]:
        return self.current_round.countries

    @property
    def correct_index(self) -> int:
        return self.current_round.correct_index

    @property
    def prompt_country(self) -> str:
        return self.current_round.correct_country

    @property
    def showing_round_result(self) -> bool:
        return self.phase is Phase.SHOWING_ROUND_RESULT

    @property
    def showing_game_over(self) -> bool:
        return self.phase is Phase.GAME_OVER

    @property
    def round_result_message(self) -> str:
        if self.score_title == WRONG_TITLE:
            return (
                f"Wrong! That's the flag of {self.selected_country}.\n"
                f"Your score is {self.score}."
            )
        return f"Your score is {self.score}."

    @property
    def game_over_title(self) -> str:
        return GAME_OVER_TITLE

    @property
    def game_over_message(self) -> str:
        if self.score >= self.config.nice_score_threshold:
            return f"You did {self.score} points! Nice job 😎"
        return f"You only did {self.score} points. Bummer 😭"
