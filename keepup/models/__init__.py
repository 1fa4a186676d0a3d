from .cluster_report import ClusterReport
from .detected_component import DetectedComponent, Observation
from .detection_rule import DetectionRule, DetectionRuleEntry
from .helm_chart import HelmChart
from .workload import NamespaceImages, WorkloadSpec
from .wrappers import DetectionRulesFile

__all__ = [
    "ClusterReport",
    "DetectedComponent",
    "DetectionRule",
    "DetectionRuleEntry",
    "DetectionRulesFile",
    "HelmChart",
    "NamespaceImages",
    "Observation",
    "WorkloadSpec",
]
