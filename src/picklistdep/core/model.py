"""
picklistdep - model.py

Metadata API から読み取った従属選択リスト項目と、そこから導出する組み合わせのデータ構造。

- FieldMetadata / ValueSet / ValueSetting: metadata.py がレスポンスから組み立てる（入力側）
- DependencyPair: extractor.py が生成する（出力側、生成後は変更しない）
- DependencyTable: ソート済みの DependencyPair 配列（1回の実行の間だけ保持する）
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass(frozen=True)
class ValueSetting:
    """
    依存関係のルール1件。
    - value_name: 有効になる従属項目側の値
    - controlling_field_value: その値を有効にする制御項目側の値（1件以上）
    """
    value_name: str
    controlling_field_value: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class ValueSet:
    controlling_field: Optional[str] = None
    value_settings: List[ValueSetting] = field(default_factory=list)


@dataclass(frozen=True)
class FieldMetadata:
    """
    従属項目の定義（CustomField の必要部分のみ）。
    - full_name: "Object.Field" 形式。存在しない項目の場合は None になる
    - label: 表示ラベル（出力ファイル名・CSVヘッダーに使う）
    """
    full_name: Optional[str]
    label: Optional[str]
    value_set: Optional[ValueSet] = None

    @property
    def display_label(self) -> str:
        # label が無い項目は "Object.Field" の項目名部分で代用する
        if self.label:
            return self.label
        return (self.full_name or "").rsplit(".", 1)[-1]

    @property
    def controlling_field(self) -> Optional[str]:
        return self.value_set.controlling_field if self.value_set else None


@dataclass(frozen=True)
class DependencyPair:
    controlling_value: str
    dependent_value: str


DependencyTable = List[DependencyPair]
