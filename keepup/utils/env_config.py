import os
from typing import Mapping
from urllib.parse import urlparse

from dotenv import load_dotenv
from pydantic.dataclasses import dataclass

from keepup.errors import InvalidSettingError, MissingSettingError

DEFAULT_RULES_FILE = "./keepup-detection.yaml"
TRUE_VALUES = ("1", "true", "yes", "on")
FALSE_VALUES = ("0", "false", "no", "off", "")


@dataclass(frozen=True)
class EnvConfig:
    app_env: str | None = None
    api_url: str | None = None
    api_token: str | None = None
    cluster_name: str | None = None
    rules_file: str = DEFAULT_RULES_FILE
    kubeconfig: str | None = None
    include_helm_releases: bool = False


def load_env_config(environ: Mapping[str, str] | None = None, env_file: str = ".env") -> EnvConfig:
    """Build the settings from the environment, validating them eagerly.

    When ``APP_ENV`` is not set the ``env_file`` is loaded into the process
    environment first, without overriding variables that are already set.
    """
    if environ is None:
        if "APP_ENV" not in os.environ:
            load_dotenv(env_file, override=False)
        environ = os.environ

    def get(name: str) -> str | None:
        value = environ.get(name)
        return value.strip() if value and value.strip() else None

    api_url = get("API_URL")
    api_token = get("API_TOKEN")
    if api_url and not api_token:
        raise MissingSettingError("API_TOKEN")
    if api_token and not api_url:
        raise MissingSettingError("API_URL")
    if api_url and urlparse(api_url).scheme not in ("http", "https"):
        raise InvalidSettingError("API_URL", api_url)

    rules_file = environ.get("RULES_FILE", DEFAULT_RULES_FILE)
    if not rules_file.strip():
        raise MissingSettingError("RULES_FILE")

    return EnvConfig(
        app_env=get("APP_ENV"),
        api_url=api_url,
        api_token=api_token,
        cluster_name=get("CLUSTER_NAME"),
        rules_file=rules_file.strip(),
        kubeconfig=get("KUBECONFIG"),
        include_helm_releases=parse_bool("INCLUDE_HELM_RELEASES", environ.get("INCLUDE_HELM_RELEASES", "")),
    )


def parse_bool(setting: str, value: str) -> bool:
    normalized = value.strip().lower()
    if normalized in TRUE_VALUES:
        return True
    if normalized in FALSE_VALUES:
        return False
    raise InvalidSettingError(setting, value)
