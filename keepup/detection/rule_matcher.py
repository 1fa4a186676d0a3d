from typing import Sequence

from keepup.models import DetectionRule


def match_rule(image: str, rules: Sequence[DetectionRule]) -> DetectionRule | None:
    # first match wins, declaration order decides
    return next((rule for rule in rules if rule.detection_regex.search(image)), None)
