"""
picklistdep - metadata.py

このモジュールは「指定した従属項目の CustomField メタデータを Metadata API から取得し、
FieldMetadata に変換・検証する」責務のみを持つ。
設定値（ConnectionConfig）は core/__init__.py に集約し、本モジュールでは参照のみ行う。

- 取得: SOAP readMetadata（type=CustomField, fullNames=[1件]）を requests で POST
- 解析: レスポンスXMLを BeautifulSoup（lxml の XML パーサ）で読み、records 要素だけを見る
- 検証: 項目が存在しない → FieldNotFoundError / 制御項目が無い → NoDependencyConfiguredError
- リトライはしない（失敗はそのまま呼び出し元へ）
"""

from __future__ import annotations

from typing import List, Optional, TYPE_CHECKING
from xml.sax.saxutils import escape

import requests
from bs4 import BeautifulSoup, Tag

from picklistdep.error import FieldNotFoundError, MetadataReadError, NoDependencyConfiguredError

from .model import FieldMetadata, ValueSet, ValueSetting
from .org import OrgConnection

# core/__init__.py に定義された設定クラスを利用する
if TYPE_CHECKING:
    from . import ConnectionConfig


DEFAULT_HEADERS = {
    "Content-Type": "text/xml; charset=UTF-8",
    "SOAPAction": "readMetadata",
}

READ_METADATA_ENVELOPE = """<?xml version="1.0" encoding="utf-8"?>
<soapenv:Envelope xmlns:soapenv="http://schemas.xmlsoap.org/soap/envelope/" xmlns:met="http://soap.sforce.com/2006/04/metadata">
  <soapenv:Header>
    <met:SessionHeader>
      <met:sessionId>{session_id}</met:sessionId>
    </met:SessionHeader>
  </soapenv:Header>
  <soapenv:Body>
    <met:readMetadata>
      <met:type>CustomField</met:type>
      <met:fullNames>{full_name}</met:fullNames>
    </met:readMetadata>
  </soapenv:Body>
</soapenv:Envelope>"""


class MetadataReader:
    def __init__(self, connection: OrgConnection, config: ConnectionConfig, headers: Optional[dict] = None):
        self.connection = connection
        self.config = config
        self.headers = headers or DEFAULT_HEADERS

    # ==================================================
    # public method
    # ==================================================

    # 次のメソッド:
    # - 従属項目のメタデータを取得し、依存関係を持つことを確認して返す
    def read_dependent_field(self, dependent: str) -> FieldMetadata:
        # 1) readMetadata を実行してレスポンスXMLを得る
        content = self._post_read_metadata(dependent)

        # 2) records を FieldMetadata に変換する
        field = self.parse_response(content, dependent)

        # 3) 呼び出し元（extractor）が前提とする条件を検証する
        validate_dependent_field(field, dependent)

        return field

    # 次のメソッド:
    # - readMetadata のレスポンスXMLを FieldMetadata に変換する（検証はしない）
    def parse_response(self, content: bytes, dependent: str) -> FieldMetadata:
        # 要素1: XMLとしてパースする（タグ名は大文字小文字を区別する）
        soup = BeautifulSoup(content, "xml")

        # 要素2: SOAP Fault は取得失敗として扱う（HTTP 200 で返る場合もある）
        reason = _fault_reason(soup)
        if reason is not None:
            raise MetadataReadError(field=dependent, reason=reason)

        # 要素3: readMetadataResponse が無いものは SOAP 応答ではない（ログイン画面のHTML等）
        if soup.find("readMetadataResponse") is None:
            raise MetadataReadError(field=dependent, reason="response is not a readMetadata result")

        # 要素4: records が無い・空の場合は「項目なし」の FieldMetadata にする
        records = soup.find("records")
        if records is None:
            return FieldMetadata(full_name=None, label=None)

        # 要素5: label は valueSetDefinition 配下にもあるため、records 直下だけを見る
        return FieldMetadata(
            full_name=_child_text(records, "fullName"),
            label=_child_text(records, "label"),
            value_set=self._parse_value_set(records.find("valueSet", recursive=False)),
        )

    # ==================================================
    # private methods
    # ==================================================

    # 次のメソッド:
    # - Metadata API の SOAP エンドポイントへ readMetadata を POST する
    def _post_read_metadata(self, dependent: str) -> bytes:
        url = f"{self.connection.instance_url}/services/Soap/m/{self.config.api_version}"
        body = READ_METADATA_ENVELOPE.format(
            session_id=escape(self.connection.access_token),
            full_name=escape(dependent),
        )

        response = requests.post(
            url,
            data=body.encode("utf-8"),
            headers=self.headers,
            timeout=self.config.timeout,
        )

        # SOAP Fault は HTTP 500 で返るため、本文に faultstring があればそちらを優先する
        if response.status_code >= 400:
            fault = _fault_reason(BeautifulSoup(response.content, "xml"))
            reason = fault if fault is not None else response.reason
            raise MetadataReadError(field=dependent, reason=reason, status_code=response.status_code)

        return response.content

    # 次のメソッド:
    # - <valueSet> を ValueSet に変換する（無ければ None）
    def _parse_value_set(self, value_set: Optional[Tag]) -> Optional[ValueSet]:
        if value_set is None:
            return None

        settings: List[ValueSetting] = []
        for vs in value_set.find_all("valueSettings", recursive=False):
            settings.append(
                ValueSetting(
                    value_name=_child_text(vs, "valueName") or "",
                    controlling_field_value=[
                        c.get_text(strip=True)
                        for c in vs.find_all("controllingFieldValue", recursive=False)
                    ],
                )
            )

        return ValueSet(
            controlling_field=_child_text(value_set, "controllingField"),
            value_settings=settings,
        )


# 次のメソッド:
# - 抽出の前提条件を検証する
#   - fullName が無い → 項目が存在しない
#   - controllingField / valueSettings が無い → 依存関係が設定されていない
def validate_dependent_field(field: FieldMetadata, dependent: str) -> None:
    if not field.full_name:
        raise FieldNotFoundError(dependent)

    value_set = field.value_set
    if value_set is None or not value_set.controlling_field or not value_set.value_settings:
        raise NoDependencyConfiguredError(dependent)


# 次のメソッド:
# - 直下の子要素のテキストを返す（無い・空なら None）
def _child_text(parent: Tag, name: str) -> Optional[str]:
    child = parent.find(name, recursive=False)
    if child is None:
        return None
    text = child.get_text(strip=True)
    return text or None


# 次のメソッド:
# - SOAP Fault の faultstring を返す（Fault でなければ None）
def _fault_reason(soup: BeautifulSoup) -> Optional[str]:
    fault = soup.find("faultstring")
    if fault is None:
        return None
    return fault.get_text(strip=True) or "SOAP fault"
