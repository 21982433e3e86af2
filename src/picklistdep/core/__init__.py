from dataclasses import dataclass

@dataclass(frozen=True)
class ConnectionConfig:
    api_version: str = "60.0"
    timeout: int = 10


from .org import OrgConnection, OrgResolver
from .metadata import MetadataReader

__all__ = ["ConnectionConfig", "OrgConnection", "OrgResolver", "MetadataReader"]
