"""
picklistdep - output.py

このモジュールは「serializer.py が生成した CSV 文字列をファイルへ出力する」責務のみを持つ。

- 入力: CSV文字列 / 出力先ディレクトリ / 制御項目ラベル / 従属項目ラベル
- 出力: <out_dir>/<制御項目ラベル>-<従属項目ラベル>.csv

方針:
- 出力先ディレクトリは存在している前提（CLI の引数チェックで担保）。ここでは作成しない。
- 同名ファイルは上書きする（追記・マージはしない）。
- 文字コードは UTF-8、改行は \n に統一して書き込む。
- 権限不足・容量不足・ファイル名に使えない文字などの OSError はそのまま呼び出し元へ送出する。
"""

from __future__ import annotations

from pathlib import Path
from typing import Union


class ArtifactWriter:
    """
    CSV 文字列を決定的なファイル名で保存する writer。
    """

    def write(
        self,
        text: str,
        out_dir: Union[str, Path],
        controlling_label: str,
        dependent_label: str,
    ) -> str:
        """
        text を out_dir 配下のファイルに書き込む。

        Returns:
            実際に書き込んだ CSV 文字列（ファイルを読み直さずに呼び出し元で使える）
        """
        path = self.artifact_path(out_dir, controlling_label, dependent_label)
        return self._write_text(path, text)

    def artifact_path(
        self,
        out_dir: Union[str, Path],
        controlling_label: str,
        dependent_label: str,
    ) -> Path:
        return Path(out_dir) / self.file_name(controlling_label, dependent_label)

    def file_name(self, controlling_label: str, dependent_label: str) -> str:
        return f"{controlling_label}-{dependent_label}.csv"

    def _write_text(self, path: Path, text: str) -> str:
        # 改行は \n に統一。末尾に改行が無ければ付ける（CLIで扱いやすくする）
        if not text.endswith("\n"):
            text += "\n"
        path.write_text(text, encoding="utf-8", newline="\n")
        return text


def write_artifact(
    text: str,
    out_dir: Union[str, Path],
    controlling_label: str,
    dependent_label: str,
) -> str:
    return ArtifactWriter().write(text, out_dir, controlling_label, dependent_label)
