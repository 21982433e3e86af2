"""
picklistdep - error.py

picklistdep 全体で使用する例外クラスを集約するモジュール。

方針:
- 想定内のエラーは PicklistDependencyError を基底とし、cli/main.py で exit code=1 に変換する。
- 項目の存在確認・依存関係の有無は core/metadata.py が検出して送出する。
- ファイル書き込み失敗（権限・ディスク・ファイル名）は OSError をそのまま伝播させる（ラップしない）。
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


# ============================================================
# Base
# ============================================================

class PicklistDependencyError(Exception):
    """picklistdep 固有の基底例外（想定内エラーの受け皿）。"""
    pass


# ============================================================
# Field validation
# ============================================================

class FieldNotFoundError(PicklistDependencyError):
    """指定した従属項目が組織に存在しない場合の例外。"""

    def __init__(self, field: str) -> None:
        self.field = field
        super().__init__(f'Field "{field}" does not exist in the target org.')


class NoDependencyConfiguredError(PicklistDependencyError):
    """項目は存在するが制御項目（valueSet.controllingField）が無い場合の例外。"""

    def __init__(self, field: str) -> None:
        self.field = field
        super().__init__(f'Field "{field}" has no controlling field configured.')


# ============================================================
# Org / Metadata API
# ============================================================

@dataclass(eq=False)
class OrgResolutionError(PicklistDependencyError):
    """alias / username から接続情報を解決できなかった場合の例外。"""
    reference: str
    reason: Optional[str] = None

    def __str__(self) -> str:
        msg = f'Could not resolve org "{self.reference}"'
        return msg + (f": {self.reason}" if self.reason else ".")


@dataclass(eq=False)
class MetadataReadError(PicklistDependencyError):
    """
    Metadata API の readMetadata 呼び出しが失敗した場合の例外。

    HTTP エラー・SOAP Fault・想定外のレスポンス形式をまとめて扱う。
    """
    field: Optional[str] = None
    reason: Optional[str] = None
    status_code: Optional[int] = None

    def __str__(self) -> str:
        parts: list[str] = []
        if self.field:
            parts.append(f"field={self.field}")
        if self.status_code is not None:
            parts.append(f"status={self.status_code}")
        if self.reason:
            parts.append(self.reason)
        return "MetadataReadError" + (f" ({', '.join(parts)})" if parts else "")
