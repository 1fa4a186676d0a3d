from pydantic.dataclasses import dataclass

from keepup.models.detection_rule import DetectionRuleEntry

@dataclass(frozen=True)
class DetectionRulesFile:
    docker: list[DetectionRuleEntry]
