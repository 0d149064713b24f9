"""orderpipe のグローバル設定.

テストやアプリケーションから ``monkeypatch`` / 代入で上書きして使う。
"""

from __future__ import annotations

STRICT_VALIDATION: bool = False
"""True の場合、build() / create_order() で厳格バリデーションを行う."""

ERROR_MESSAGE_LANGUAGE: str = "ja"
"""エラーメッセージの言語 ("ja", "en")."""

ERROR_INCLUDE_ORDER: bool = False
"""True の場合、バリデーションエラーのメッセージにユーザー名を含める."""
