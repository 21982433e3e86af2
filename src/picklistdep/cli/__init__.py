"""
cli package

picklistdep の CLI 層。
- args.py : 引数定義・設定生成
- main.py : CLI 実行のオーケストレーション（entrypoint）

ここでは外部から利用しやすい最低限のAPIを re-export する。
"""

from .main import main, run_export
from .args import build_parser, parse_args, make_connection_config, debug_dump

__all__ = [
    # entrypoint
    "main",
    "run_export",
    # args helpers
    "build_parser",
    "parse_args",
    "make_connection_config",
    "debug_dump",
]
