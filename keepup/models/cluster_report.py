from typing import Any

from pydantic.dataclasses import dataclass

from .detected_component import DetectedComponent

@dataclass(frozen=True)
class ClusterReport:
    cluster_name: str
    kube_version: str
    components: list[DetectedComponent]

    def to_dict(self) -> dict[str, Any]:
        return {
            "cluster_name": self.cluster_name,
            "kube_version": self.kube_version,
            "helm_charts": [c.to_dict() for c in self.components],
        }
