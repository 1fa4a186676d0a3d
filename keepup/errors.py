class KeepupError(Exception):
    """Base class for every error raised by the image scanner."""


class ConfigReadError(KeepupError):
    def __init__(self, path: str, reason: str):
        super().__init__(f"Unable to read rules file {path}: {reason}")
        self.path = path


class ConfigParseError(KeepupError):
    def __init__(self, path: str, reason: str):
        super().__init__(f"Invalid rules file {path}: {reason}")
        self.path = path


class InvalidPatternError(KeepupError):
    def __init__(self, application_name: str, pattern_kind: str, pattern: str, reason: str):
        super().__init__(f"invalid {pattern_kind} regex for {application_name} ({pattern!r}): {reason}")
        self.application_name = application_name
        self.pattern_kind = pattern_kind
        self.pattern = pattern


class WorkloadSourceError(KeepupError):
    pass


class ConfigurationError(KeepupError):
    def __init__(self, setting: str, message: str):
        super().__init__(message)
        self.setting = setting


class MissingSettingError(ConfigurationError):
    def __init__(self, setting: str):
        super().__init__(setting, f"Environment [{setting}] not found.")


class InvalidSettingError(ConfigurationError):
    def __init__(self, setting: str, value: str):
        super().__init__(setting, f"Environment [{setting}] has an invalid value: {value!r}")
        self.value = value
