"""
cli/main.py

picklistdep CLI の実行エントリポイント。
- args.py: 引数定義・設定生成
- core: resolve / read / extract / serialize / write を実行

終了コード（目安）:
- 0: 成功（CSV を stdout に出力）
- 1: 想定内エラー（組織解決失敗、項目なし、依存関係なし、取得失敗、書き込み失敗等）
- 2: 想定外エラー
"""

from __future__ import annotations

import json
import sys
from typing import Optional, Sequence

import requests

from picklistdep.core import MetadataReader, OrgResolver
from picklistdep.core.extractor import DependencyExtractor
from picklistdep.core.output import ArtifactWriter
from picklistdep.core.serializer import TabularSerializer
from picklistdep.error import PicklistDependencyError

from . import args as cli_args


def main(argv: Optional[Sequence[str]] = None) -> int:
    argv_list = list(argv) if argv is not None else sys.argv[1:]

    try:
        # 1) パース
        ns = cli_args.parse_args(argv_list)

        # 2) debug（stderr）
        if getattr(ns, "debug", False):
            _print_debug(ns)

        # 3) core 実行パイプライン
        csv_text = run_export(ns)

        # 4) 結果（CSV）は stdout に
        sys.stdout.write(csv_text)
        return 0

    except SystemExit as e:
        # argparse が exit するケース（invalid args / --help / --version）
        code = int(e.code) if e.code is not None else 1
        return code

    except (PicklistDependencyError, requests.RequestException, OSError) as e:
        # stdout を汚さないよう stderr に出して exit code=1 とする。
        print(f"[picklistdep:error] {e}", file=sys.stderr)
        return 1

    except Exception as e:
        print(f"[picklistdep:error] unexpected {type(e).__name__}: {e}", file=sys.stderr)
        return 2


def run_export(ns) -> str:
    """
    接続 → 取得 → 抽出 → CSV化 → 書き込み を順に実行し、書き込んだ CSV 文字列を返す。
    """
    config = cli_args.make_connection_config(ns)

    # 状況メッセージは stderr に
    _log(f"Connecting to {ns.target_org}...")
    connection = OrgResolver().resolve(ns.target_org)

    _log(f'Fetching "{ns.dependent}" ...')
    field = MetadataReader(connection, config).read_dependent_field(ns.dependent)

    controlling = field.controlling_field
    dependent = field.display_label

    table = DependencyExtractor().extract(field)
    csv_text = TabularSerializer().to_csv(table, controlling, dependent)

    writer = ArtifactWriter()
    written = writer.write(csv_text, ns.output_dir, controlling, dependent)
    _log(f"Output generated at {writer.artifact_path(ns.output_dir, controlling, dependent)}")

    return written


def _log(message: str) -> None:
    print(f"[picklistdep] {message}", file=sys.stderr)


def _print_debug(ns) -> None:
    """
    args.py の debug_dump を stderr に出す。
    """
    data = cli_args.debug_dump(ns)
    print("[picklistdep:debug] parsed configs:", file=sys.stderr)
    print(json.dumps(data, ensure_ascii=False, indent=2), file=sys.stderr)


if __name__ == "__main__":
    raise SystemExit(main())
