"""
guess_the_flag パッケージ
======================

このパッケージは、国旗当てクイズアプリの内部ロジックを提供する。

主な役割:
- 設定管理（config）
- 国一覧と国旗の説明文（catalog）
- 値オブジェクト（models）
- 解答履歴（history）
- セッションの状態遷移と採点（session）
- UI コンポーネント（ui）

app.py は Streamlit UI のみを担当し、内部ロジックはすべて本パッケージから呼ぶ。
ui は streamlit を import するので、ここでは公開しない。
"""

from .config import AppConfig, load_app_config
from .catalog import COUNTRIES, FLAG_LABELS, UNKNOWN_FLAG_LABEL, flag_image_path, flag_label
from .models import Phase, Round, RoundRecord
from .history import RoundHistory
from .session import QuizSession

__all__ = [
    "AppConfig",
    "load_app_config",
    "COUNTRIES",
    "FLAG_LABELS",
    "UNKNOWN_FLAG_LABEL",
    "flag_image_path",
    "flag_label",
    "Phase",
    "Round",
    "RoundRecord",
    "RoundHistory",
    "QuizSession",
]
