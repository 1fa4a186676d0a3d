import re

from pydantic import ValidationError
from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from keepup.errors import ConfigParseError, ConfigReadError, InvalidPatternError
from keepup.models import DetectionRule, DetectionRuleEntry, DetectionRulesFile
from keepup.utils.yaml_loader import get_yaml_instance


class RulesRepository:
    """Loads the ordered detection rules from a YAML document.

    The document holds a ``docker`` list whose entries carry
    ``applicationName``, ``detectionRegex`` and ``versionRegex``. Rules are
    returned in declaration order since the first matching rule wins.
    """

    def __init__(self, file_path: str):
        self.file_path: str = file_path
        self.yaml: YAML = get_yaml_instance()

    def find_all(self) -> list[DetectionRule]:
        return [self._compile(entry) for entry in self._read_entries()]

    def _read_entries(self) -> list[DetectionRuleEntry]:
        try:
            with open(self.file_path, "r") as f:
                data = self.yaml.load(f)
        except OSError as e:
            raise ConfigReadError(self.file_path, str(e)) from e
        except YAMLError as e:
            raise ConfigParseError(self.file_path, str(e)) from e

        if not isinstance(data, dict):
            raise ConfigParseError(self.file_path, "expected a mapping with a 'docker' list")
        if "docker" in data and data["docker"] is None:
            data = {**data, "docker": []}
        try:
            parsed = DetectionRulesFile(**data)
        except (ValidationError, TypeError) as e:
            raise ConfigParseError(self.file_path, str(e)) from e
        return parsed.docker

    def _compile(self, entry: DetectionRuleEntry) -> DetectionRule:
        return DetectionRule(
            application_name=entry.application_name,
            detection_regex=_compile_pattern(entry.application_name, "detection", entry.detection_regex),
            version_regex=_compile_pattern(entry.application_name, "version", entry.version_regex),
        )


def _compile_pattern(application_name: str, kind: str, pattern: str) -> re.Pattern:
    try:
        return re.compile(pattern)
    except re.error as e:
        raise InvalidPatternError(application_name, kind, pattern, str(e)) from e
