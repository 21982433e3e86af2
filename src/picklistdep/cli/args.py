"""
cli/args.py

picklistdep CLI の引数定義と、core 側で使う設定オブジェクトの組み立てを担当する。

方針:
- --target-org / --dependent / --output-dir の3つは必須（短縮形 -u / -d / -f）。
- --output-dir は既存ディレクトリのみ受け付ける。無ければ argparse のエラーで中断する。
- リトライ設定は持たない。失敗はそのまま終了コードに反映する。
- --debug は「デバッグ表示用の辞書を生成する」までを args.py で提供し、出力は main.py 側に委譲する。
"""

from __future__ import annotations

import argparse
from dataclasses import asdict
from pathlib import Path
from typing import Optional, Sequence

from picklistdep import __version__
from picklistdep.core import ConnectionConfig


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="picklistdep",
        description="Export the controlling/dependent value pairs of a dependent picklist field as CSV.",
    )

    # ---- required inputs ----
    parser.add_argument(
        "-u",
        "--target-org",
        dest="target_org",
        required=True,
        help="Alias or username of the org to read the field from.",
    )
    parser.add_argument(
        "-d",
        "--dependent",
        dest="dependent",
        required=True,
        help="API name of the dependent picklist field. Example: --dependent Case.SubStatus__c",
    )
    parser.add_argument(
        "-f",
        "--output-dir",
        dest="output_dir",
        required=True,
        type=_validate_existing_dir,
        help="Existing directory to write <controlling>-<dependent>.csv into.",
    )

    # ---- connection options (ConnectionConfig) ----
    parser.add_argument(
        "--api-version",
        dest="api_version",
        default=ConnectionConfig().api_version,
        help=f"Metadata API version. (default: {ConnectionConfig().api_version})",
    )
    parser.add_argument(
        "--timeout",
        dest="timeout",
        type=int,
        default=ConnectionConfig().timeout,
        help=f"HTTP request timeout in seconds. (default: {ConnectionConfig().timeout})",
    )

    # ---- misc ----
    parser.add_argument(
        "--version",
        action="version",
        version=f"picklistdep {__version__}",
        help="Show version and exit.",
    )
    parser.add_argument(
        "--debug",
        dest="debug",
        action="store_true",
        help="Dump parsed configs for debugging (printing is handled by main.py).",
    )

    return parser


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    return build_parser().parse_args(argv)


def make_connection_config(ns: argparse.Namespace) -> ConnectionConfig:
    """
    argparse.Namespace から ConnectionConfig を生成する。
    """
    return ConnectionConfig(
        api_version=str(ns.api_version),
        timeout=int(ns.timeout),
    )


def debug_dump(ns: argparse.Namespace) -> dict:
    """
    main.py 側で --debug 時に利用するためのデバッグ情報を辞書で返す。
    （出力先は main.py 側で制御する）
    """
    return {
        "target_org": ns.target_org,
        "dependent": ns.dependent,
        "output_dir": ns.output_dir,
        "connection_config": asdict(make_connection_config(ns)),
    }


def _validate_existing_dir(value: str) -> str:
    """
    出力先が既存のディレクトリであることを検証する。

    失敗時は argparse のエラーとして扱う。
    """
    v = (value or "").strip()
    if not v:
        raise argparse.ArgumentTypeError("Output directory is empty.")
    if not Path(v).is_dir():
        raise argparse.ArgumentTypeError(f"Output directory does not exist: {v}")
    return v
