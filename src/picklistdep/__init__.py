"""
picklistdep package

公開方針:
- 例外クラスは picklistdep.error に集約しており、ここからも再exportする。
- 実処理（取得・抽出・CSV化・出力）は core/cli にあり、ここでは公開APIを最小に保つ。
"""

from __future__ import annotations

# Version
__all__ = [
    "__version__",
    # errors (re-export)
    "PicklistDependencyError",
    "FieldNotFoundError",
    "NoDependencyConfiguredError",
    "OrgResolutionError",
    "MetadataReadError",
]

__version__ = "0.1.0"

# Re-export errors for convenient import: `from picklistdep import PicklistDependencyError`
from .error import (  # noqa: E402
    FieldNotFoundError,
    MetadataReadError,
    NoDependencyConfiguredError,
    OrgResolutionError,
    PicklistDependencyError,
)
