from pathlib import Path
import importlib

from picklistdep.core.model import FieldMetadata, ValueSet, ValueSetting
from picklistdep.core.org import OrgConnection
from picklistdep.error import NoDependencyConfiguredError

cli_main = importlib.import_module("picklistdep.cli.main")


class _DummyResolver:
    def resolve(self, reference: str) -> OrgConnection:
        return OrgConnection(
            username="admin@example.com",
            instance_url="https://example.my.salesforce.com",
            access_token="token",
        )


class _DummyReader:
    def __init__(self, connection, config, headers=None) -> None:
        self.connection = connection
        self.config = config

    def read_dependent_field(self, dependent: str) -> FieldMetadata:
        return FieldMetadata(
            full_name=dependent,
            label="SubStatus",
            value_set=ValueSet(
                controlling_field="Status",
                value_settings=[
                    ValueSetting(value_name="Closed", controlling_field_value=["Inactive", "Pending"]),
                    ValueSetting(value_name="Open", controlling_field_value=["Active"]),
                ],
            ),
        )


class _NoDependencyReader(_DummyReader):
    def read_dependent_field(self, dependent: str) -> FieldMetadata:
        raise NoDependencyConfiguredError(dependent)


def _argv(out_dir: Path) -> list[str]:
    return ["-u", "my-sandbox", "-d", "Case.SubStatus__c", "-f", str(out_dir)]


# 何をしているか: ダミーの Resolver / Reader でCLIメインを実行し、出力ファイル生成まで流す。
# 何を確認しているか: 正常系で exit code が 0 になり、CSVファイルと stdout が一致するか。
# テスト結果の期待値: code == 0、"Status-SubStatus.csv" の内容と stdout がソート済みCSV。
# テストコードの実行方法: pytest tests/test_cli_main.py
def test_main_happy_path_writes_output(tmp_path: Path, monkeypatch, capsys) -> None:
    monkeypatch.setattr(cli_main, "OrgResolver", _DummyResolver)
    monkeypatch.setattr(cli_main, "MetadataReader", _DummyReader)

    code = cli_main.main(_argv(tmp_path))
    assert code == 0

    expected = "Status,SubStatus\nActive,Open\nInactive,Closed\nPending,Closed\n"
    out_path = tmp_path / "Status-SubStatus.csv"
    assert out_path.read_text(encoding="utf-8") == expected

    captured = capsys.readouterr()
    assert captured.out == expected
    assert "Output generated at" in captured.err


# 何をしているか: 同じ入力でCLIメインを2回実行する。
# 何を確認しているか: 出力ファイルがバイト単位で一致するか（決定的な出力）。
# テスト結果の期待値: 1回目と2回目のファイル内容が一致する。
# テストコードの実行方法: pytest tests/test_cli_main.py
def test_main_output_is_deterministic(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.setattr(cli_main, "OrgResolver", _DummyResolver)
    monkeypatch.setattr(cli_main, "MetadataReader", _DummyReader)

    out_path = tmp_path / "Status-SubStatus.csv"
    assert cli_main.main(_argv(tmp_path)) == 0
    first = out_path.read_bytes()
    assert cli_main.main(_argv(tmp_path)) == 0
    assert out_path.read_bytes() == first


# 何をしているか: 依存関係の無い項目でCLIメインを実行する。
# 何を確認しているか: exit code が 1 になり、ファイルが作られず、stderr に項目名が出るか。
# テスト結果の期待値: code == 1、出力ディレクトリは空。
# テストコードの実行方法: pytest tests/test_cli_main.py
def test_main_no_dependency_writes_nothing(tmp_path: Path, monkeypatch, capsys) -> None:
    monkeypatch.setattr(cli_main, "OrgResolver", _DummyResolver)
    monkeypatch.setattr(cli_main, "MetadataReader", _NoDependencyReader)

    code = cli_main.main(_argv(tmp_path))
    assert code == 1
    assert list(tmp_path.iterdir()) == []

    captured = capsys.readouterr()
    assert captured.out == ""
    assert "Case.SubStatus__c" in captured.err


# 何をしているか: 存在しない出力先でCLIメインを実行する。
# 何を確認しているか: argparse のエラーとして exit code 2 が返るか。
# テスト結果の期待値: code == 2。
# テストコードの実行方法: pytest tests/test_cli_main.py
def test_main_rejects_missing_output_dir(tmp_path: Path) -> None:
    code = cli_main.main(_argv(tmp_path / "missing"))
    assert code == 2
