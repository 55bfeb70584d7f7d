"""
app.py
======================

国旗当てクイズ（Streamlit）エントリーポイント。

特徴:
- 1画面構成（国旗 3枚から指定された国の国旗をタップ）
- 正解 +1 / 不正解 -1 のスコア
- 8 ラウンドでゲームオーバー、サマリー表示とリスタート
- 国旗画像が無い環境では説明文カードで代用

前提:
- flags/<国名>.png に国旗画像を置く（無くても動く）
- config.toml があれば読み込む（なければデフォルト設定）

起動:
    streamlit run app.py
"""

from __future__ import annotations

import logging

import streamlit as st

from guess_the_flag.config import AppConfig, load_app_config
from guess_the_flag.session import QuizSession
from guess_the_flag.ui import (
    render_game_page,
    show_game_over_dialog,
    show_round_result_dialog,
)

logger = logging.getLogger(__name__)


# ----------------------------------------------------------------------
#  AppConfig / QuizSession のラッパー
# ----------------------------------------------------------------------
def get_app_config() -> AppConfig:
    """AppConfig をセッションに保持して返す。"""
    if "app_config" not in st.session_state:
        st.session_state["app_config"] = load_app_config()
    return st.session_state["app_config"]  # type: ignore[return-value]


def get_quiz_session() -> QuizSession:
    """QuizSession をセッションに保持して返す。"""
    if "quiz_session" not in st.session_state:
        st.session_state["quiz_session"] = QuizSession(config=get_app_config())
    return st.session_state["quiz_session"]  # type: ignore[return-value]


# ----------------------------------------------------------------------
#  ページ: ゲーム
# ----------------------------------------------------------------------
def render_main_page() -> None:
    cfg = get_app_config()
    session = get_quiz_session()

    ui_result = render_game_page(
        session=session,
        flags_dir=cfg.flags_dir,
        default_theme=cfg.theme,
    )

    # 新たに国旗が押された場合のみ採点
    if ui_result["selected_choice"] is not None:
        session.select_answer(ui_result["selected_choice"])
        st.rerun()

    # ダイアログを閉じてしまった時の続行ボタン
    if ui_result["clicked_continue"]:
        session.advance()
        st.rerun()
    elif ui_result["clicked_restart"]:
        session.restart()
        st.rerun()

    if session.showing_round_result:
        show_round_result_dialog(session, on_continue=session.advance)
    elif session.showing_game_over:
        show_game_over_dialog(session, on_restart=session.restart)


# ----------------------------------------------------------------------
#  メイン
# ----------------------------------------------------------------------
def main() -> None:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    cfg = get_app_config()
    st.set_page_config(
        page_title=cfg.app_name,
        page_icon="🏳️",
        layout="centered",
    )

    render_main_page()


if __name__ == "__main__":
    main()
