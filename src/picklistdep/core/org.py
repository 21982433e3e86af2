"""
picklistdep - org.py

alias / username から接続先組織の情報（インスタンスURL・アクセストークン）を解決する。
認証情報の保存・キャッシュは Salesforce CLI（sf）に任せ、本モジュールでは参照のみ行う。
"""

from __future__ import annotations

import json
import shutil
import subprocess
from dataclasses import dataclass
from typing import Optional

from picklistdep.error import OrgResolutionError

# NOTE:
# 認証済み組織の一覧・トークンは sf CLI が管理しているため、ここでは実行ファイル名だけ持つ
SF_EXECUTABLE = "sf"


@dataclass(frozen=True)
class OrgConnection:
    username: str
    instance_url: str
    access_token: str


class OrgResolver:
    def __init__(self, executable: Optional[str] = None):
        self.executable = executable or SF_EXECUTABLE

    # ==================================================
    # public method
    # ==================================================

    # 次のメソッド:
    # - alias または username から OrgConnection を返す
    def resolve(self, reference: str) -> OrgConnection:
        # 1) sf org display の JSON を取得する
        payload = self._display(reference)

        # 2) 必要なキーを取り出す
        result = payload.get("result") or {}
        username = result.get("username")
        instance_url = result.get("instanceUrl")
        access_token = result.get("accessToken")

        if not (username and instance_url and access_token):
            raise OrgResolutionError(reference, "incomplete org information returned by sf")

        return OrgConnection(
            username=username,
            instance_url=instance_url.rstrip("/"),
            access_token=access_token,
        )

    # ==================================================
    # private methods
    # ==================================================

    # 次のメソッド:
    # - `sf org display --target-org <reference> --json` を実行し、JSON を辞書で返す
    def _display(self, reference: str) -> dict:
        # 要素1: sf を PATH から解決する（Windows では sf.cmd になるため、解決後のパスで実行する）
        executable = shutil.which(self.executable)
        if executable is None:
            raise OrgResolutionError(reference, f"'{self.executable}' executable not found on PATH")

        # 要素2: 実行する（失敗時も JSON が返るので check はしない）
        completed = subprocess.run(
            [executable, "org", "display", "--target-org", reference, "--json"],
            capture_output=True,
            text=True,
        )

        # 要素3: JSON として解釈する
        try:
            payload = json.loads(completed.stdout or "{}")
        except json.JSONDecodeError as e:
            raise OrgResolutionError(reference, f"unreadable sf output ({e})") from e

        if not isinstance(payload, dict):
            raise OrgResolutionError(reference, "unreadable sf output (not a JSON object)")

        # 要素4: 終了コードが0以外なら sf のメッセージを添えて例外
        if completed.returncode != 0:
            reason = payload.get("message") or completed.stderr.strip() or f"sf exited with {completed.returncode}"
            raise OrgResolutionError(reference, reason)

        return payload
