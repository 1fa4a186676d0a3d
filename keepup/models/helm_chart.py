from pydantic.dataclasses import dataclass

@dataclass(frozen=True)
class HelmChart:
    name: str
    version: str
