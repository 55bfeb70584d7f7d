"""
ui.py
======================

Streamlit ベースの UI コンポーネントをまとめたモジュール。

責務:
- iPhone Safari を主ターゲットとしたレイアウトとスタイル
- ゲーム画面の描画（タイトル・出題国・国旗 3枚・スコア）
- 結果ダイアログ / ゲームオーバーダイアログ
- テーマ切替

ここでは「見た目」と「ユーザー操作の入力」を扱い、
採点やラウンド進行などのロジックは QuizSession（app.py 経由）に任せる。

戻り値として「何が押されたか」を返す。
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Callable, Dict, Optional

import pandas as pd
import streamlit as st

from .catalog import flag_image_path, flag_label
from .session import QuizSession

# ----------------------------------------------------------------------
#  テーマ定義（iPhone Safari 向け）
# ----------------------------------------------------------------------


THEMES: Dict[str, Dict[str, str]] = {
    "classic": {
        # 上が濃紺、下がクリムゾンの放射グラデーション
        "bg": "radial-gradient(circle at 50% 0, #1a3373 0px, #1a3373 350px, #c22642 350px)",
        "text": "#ffffff",
        "surface": "rgba(242, 242, 247, 0.85)",
        "surface_text": "#1c1c1e",
        "border": "#d1d1d6",
        "primary": "#007aff",  # iOS ブルー
    },
    "light": {
        "bg": "#f2f2f7",
        "text": "#1c1c1e",
        "surface": "#ffffff",
        "surface_text": "#1c1c1e",
        "border": "#d1d1d6",
        "primary": "#007aff",
    },
    "dark": {
        "bg": "#000000",
        "text": "#f5f5f7",
        "surface": "#1c1c1e",
        "surface_text": "#f5f5f7",
        "border": "#3a3a3c",
        "primary": "#0a84ff",
    },
}

DEFAULT_THEME = "classic"


# ----------------------------------------------------------------------
#  CSS 生成
# ----------------------------------------------------------------------
def _generate_css(theme: Dict[str, str]) -> str:
    """テーマに応じたグローバル CSS を生成する。"""

    return f"""
    <style>
    .stApp {{
        background: {theme['bg']};
        color: {theme['text']};
        -webkit-text-size-adjust: 100%;
        touch-action: manipulation;
        -webkit-tap-highlight-color: rgba(0,0,0,0);
        font-family: -apple-system, BlinkMacSystemFont, "SF Pro Text",
                     "Helvetica Neue", Arial, sans-serif;
    }}

    .gf-title {{
        text-align: center;
        font-size: 2.2rem;
        font-weight: 700;
        color: {theme['text']};
        margin: 1rem 0 0.75rem 0;
    }}

    .gf-prompt-card {{
        max-width: 700px;
        margin: 0 auto 0.75rem auto;
        padding: 1.25rem 1rem;
        border-radius: 20px;
        background: {theme['surface']};
        color: {theme['surface_text']};
        text-align: center;
    }}

    .gf-prompt-sub {{
        font-size: 0.9rem;
        font-weight: 800;
        opacity: 0.6;
    }}

    .gf-prompt-country {{
        font-size: 2rem;
        font-weight: 600;
    }}

    /* 画像が無い場合の国旗カード */
    .gf-flag-card {{
        padding: 1rem;
        min-height: 5rem;
        border-radius: 999px;
        border: 1px solid {theme['border']};
        background: {theme['surface']};
        color: {theme['surface_text']};
        font-size: 0.85rem;
        line-height: 1.4;
        text-align: center;
        box-shadow: 0 0 5px rgba(0,0,0,0.4);
        margin-bottom: 0.3rem;
    }}

    .gf-score {{
        text-align: center;
        font-size: 1.8rem;
        font-weight: 700;
        color: {theme['text']};
        margin-top: 1.5rem;
    }}

    .gf-progress {{
        text-align: center;
        font-size: 0.8rem;
        color: {theme['text']}aa;
    }}

    .gf-safe-bottom {{
        height: 80px; /* iPhone Safari 下部 UI に埋もれないための余白 */
    }}
    </style>
    """


# ----------------------------------------------------------------------
#  テーマ関連
# ----------------------------------------------------------------------
def _ensure_theme(default: str = DEFAULT_THEME) -> str:
    """セッションに theme キーを用意し、現在のテーマキーを返す。"""
    if default not in THEMES:
        default = DEFAULT_THEME
    if "theme" not in st.session_state:
        st.session_state["theme"] = default
    theme_key = st.session_state.get("theme", default)
    if theme_key not in THEMES:
        theme_key = default
        st.session_state["theme"] = default
    return theme_key


def _render_theme_selector(theme_key: str) -> str:
    """画面下部にテーマ切替を表示し、選択されたテーマキーを返す。"""
    options = list(THEMES.keys())
    labels = {"classic": "Classic", "light": "Light", "dark": "Dark"}

    idx = options.index(theme_key) if theme_key in options else 0
    selected = st.radio(
        "Theme",
        options,
        index=idx,
        horizontal=True,
        label_visibility="collapsed",
        format_func=lambda k: labels.get(k, k),
    )
    st.session_state["theme"] = selected
    return selected


# ----------------------------------------------------------------------
#  国旗 1枚の描画
# ----------------------------------------------------------------------
def _render_flag(country: str, flags_dir: Path) -> None:
    """
    国旗画像を描画する。画像が無ければ説明文カードで代用する。
    説明文には国名を含まないので、そのまま表示しても答えは分からない。
    """
    path = flag_image_path(country, flags_dir)
    if path is not None:
        st.image(str(path))
    else:
        st.markdown(
            f"<div class='gf-flag-card'>{flag_label(country)}</div>",
            unsafe_allow_html=True,
        )


# ----------------------------------------------------------------------
#  公開 API: ゲーム画面の描画
# ----------------------------------------------------------------------
def render_game_page(
    session: QuizSession,
    *,
    flags_dir: Path,
    default_theme: str = DEFAULT_THEME,
) -> Dict[str, Any]:
    """
    ゲーム画面全体を描画し、ユーザー操作の結果を返す。

    引数:
        session:
            QuizSession のインスタンス。
        flags_dir:
            国旗画像のディレクトリ。
        default_theme:
            config.toml の [ui].theme。セッションに未設定の時だけ使う。

    戻り値:
        {
          "selected_choice": Optional[int],   # 押された国旗 index (なければ None)
          "clicked_continue": bool,           # ダイアログを閉じてしまった時の続行ボタン
          "clicked_restart": bool,
          "theme": str,                       # 現在のテーマキー
        }
    """
    theme_key = _ensure_theme(default_theme)
    theme = THEMES[theme_key]
    st.markdown(_generate_css(theme), unsafe_allow_html=True)

    selected_choice: Optional[int] = None
    clicked_continue = False
    clicked_restart = False

    st.markdown("<div class='gf-title'>Guess the Flag</div>", unsafe_allow_html=True)

    # ----------------------------------------
    # 出題
    # ----------------------------------------
    st.markdown(
        "<div class='gf-prompt-card'>"
        "<div class='gf-prompt-sub'>Tap the flag of</div>"
        f"<div class='gf-prompt-country'>{session.prompt_country}</div>"
        "</div>",
        unsafe_allow_html=True,
    )

    # ----------------------------------------
    # 国旗
    # ----------------------------------------
    playing = not (session.showing_round_result or session.showing_game_over)

    for idx, country in enumerate(session.countries):
        _render_flag(country, flags_dir)
        # help には説明文を入れる（読み上げ・ツールチップ用）
        if st.button(
            f"Flag {idx + 1}",
            key=f"gf_flag_{idx}",
            help=flag_label(country),
            disabled=not playing,
        ):
            selected_choice = idx

    # ----------------------------------------
    # スコア
    # ----------------------------------------
    st.markdown(
        f"<div class='gf-score'>Score: {session.score}</div>"
        f"<div class='gf-progress'>Round {min(session.rounds_completed + 1, session.rounds_per_session)}"
        f" / {session.rounds_per_session}</div>",
        unsafe_allow_html=True,
    )

    # ダイアログを × で閉じた場合でも進められるようにしておく
    if session.showing_round_result:
        if st.button("Continue ▶", key="gf_continue"):
            clicked_continue = True
    elif session.showing_game_over:
        if st.button("Restart game", key="gf_restart"):
            clicked_restart = True

    st.write("")
    _render_theme_selector(theme_key)
    st.markdown("<div class='gf-safe-bottom'></div>", unsafe_allow_html=True)

    return {
        "selected_choice": selected_choice,
        "clicked_continue": clicked_continue,
        "clicked_restart": clicked_restart,
        "theme": st.session_state.get("theme", theme_key),
    }


# ----------------------------------------------------------------------
#  ダイアログ
# ----------------------------------------------------------------------
def show_round_result_dialog(session: QuizSession, on_continue: Callable[[], None]) -> None:
    """結果ダイアログ（タイトル: Correct / Wrong）。"""

    def _body() -> None:
        for line in session.round_result_message.split("\n"):
            st.write(line)
        if st.button("Continue", key="gf_dialog_continue"):
            on_continue()
            st.rerun()

    st.dialog(session.score_title)(_body)()


def show_game_over_dialog(session: QuizSession, on_restart: Callable[[], None]) -> None:
    """ゲームオーバーダイアログ。ラウンドごとの結果表も出す。"""

    def _body() -> None:
        st.write(session.game_over_message)

        rows = session.history.to_rows()
        if rows:
            df = pd.DataFrame(rows).set_index("Round")
            st.dataframe(df)
            st.caption(
                f"{session.history.correct_count} correct / "
                f"{session.history.wrong_count} wrong"
            )

        if st.button("Restart game", key="gf_dialog_restart"):
            on_restart()
            st.rerun()

    st.dialog(session.game_over_title)(_body)()
