"""
picklistdep - extractor.py

このモジュールは「FieldMetadata の依存関係設定を (制御値, 従属値) の組み合わせ一覧に展開する」責務のみを持つ。
- 入力: FieldMetadata（metadata.py で controllingField / valueSettings の存在を検証済み）
- 出力: DependencyTable（制御値 → 従属値の順で昇順ソート済み）
- CSV化・ファイル保存は行わない（serializer.py / output.py の責務）
"""

from __future__ import annotations

from typing import Iterable, List

from .model import DependencyPair, DependencyTable, FieldMetadata, ValueSetting


class DependencyExtractor:
    """
    valueSettings をフラットな DependencyPair 配列へ展開し、決定的な順序に並べる。
    """

    # 次のメソッド:
    # - 依存関係を展開してソート済みの DependencyTable を返す
    def extract(self, field: FieldMetadata) -> DependencyTable:
        # 要素1: valueSettings を (制御値, 従属値) に展開する
        pairs = self._expand(field.value_set.value_settings)

        # 要素2: 制御値 → 従属値 の順で昇順ソートする
        return self._sort(pairs)

    # 次のメソッド:
    # - 1つの valueSetting につき controllingFieldValue の件数分だけ組み合わせを作る
    #   （従属値1件 × 制御値N件。valueSettings 同士の直積は取らない）
    def _expand(self, value_settings: Iterable[ValueSetting]) -> List[DependencyPair]:
        return [
            DependencyPair(controlling_value=controlling, dependent_value=vs.value_name)
            for vs in value_settings
            for controlling in vs.controlling_field_value
        ]

    # 次のメソッド:
    # - 文字列の辞書順（コードポイント順）で並べる。完全に同じ組み合わせは入力順を保つ
    def _sort(self, pairs: List[DependencyPair]) -> DependencyTable:
        return sorted(pairs, key=lambda p: (p.controlling_value, p.dependent_value))


# 次のメソッド:
# - FieldMetadata から DependencyTable を得るワンショット関数
def extract_dependencies(field: FieldMetadata) -> DependencyTable:
    return DependencyExtractor().extract(field)
