import re
from dataclasses import dataclass

from pydantic import Field
from pydantic.dataclasses import dataclass as pydantic_dataclass


@pydantic_dataclass(frozen=True)
class DetectionRuleEntry:
    application_name: str = Field(alias="applicationName")
    detection_regex: str = Field(alias="detectionRegex")
    version_regex: str = Field(alias="versionRegex")


@dataclass(frozen=True)
class DetectionRule:
    application_name: str
    detection_regex: re.Pattern
    version_regex: re.Pattern
