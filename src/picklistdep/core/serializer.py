"""
picklistdep - serializer.py

DependencyTable を CSV 文字列に変換する。
- ヘッダーは [制御項目ラベル, 従属項目ラベル] の1行
- データ行は DependencyTable の順序のまま（ここでは並べ替えない）
- ファイル保存は行わない（保存は output.py の責務）
"""

from __future__ import annotations

from typing import List

from .model import DependencyTable


class TabularSerializer:

    # 次のメソッド:
    # - DependencyTable をCSV文字列に変換する
    def to_csv(self, table: DependencyTable, controlling_label: str, dependent_label: str) -> str:
        # 要素1: ヘッダー行（制御項目が先、従属項目が後）
        lines: List[str] = [self._row(controlling_label, dependent_label)]

        # 要素2: データ行（ヘッダーと同じ列順）
        for pair in table:
            lines.append(self._row(pair.controlling_value, pair.dependent_value))

        # 要素3: 改行で連結（空テーブルならヘッダーのみ）
        return "\n".join(lines)

    def _row(self, *values: str) -> str:
        return ",".join(self._escape(v) for v in values)

    # 次のメソッド:
    # - CSVエスケープ（カンマ/改行/ダブルクォートを含む場合のみクォート）
    def _escape(self, value: str) -> str:
        needs_quote = ("," in value) or ("\n" in value) or ('"' in value) or ("\r" in value)
        if '"' in value:
            value = value.replace('"', '""')
        return f'"{value}"' if needs_quote else value


def to_csv(table: DependencyTable, controlling_label: str, dependent_label: str) -> str:
    return TabularSerializer().to_csv(table, controlling_label, dependent_label)
