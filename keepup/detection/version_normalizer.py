import re

from keepup.models import DetectionRule

SEMVER_RE = re.compile(r"(\d+)\.(\d+)(?:\.(\d+))?")


def normalize_semver(raw: str | None) -> str | None:
    """Reduce ``raw`` to ``major.minor.patch``.

    A missing patch component becomes ``0``. Pre-release and build
    suffixes are dropped. Returns None when ``raw`` holds no
    ``<digits>.<digits>`` sequence.
    """
    if not raw:
        return None
    m = SEMVER_RE.search(raw)
    if m is None:
        return None
    major, minor, patch = m.groups()
    return f"{major}.{minor}.{patch or '0'}"


def extract_version(rule: DetectionRule, image: str) -> str | None:
    m = rule.version_regex.search(image)
    if m is None:
        return None
    raw = m.group(1) if m.re.groups and m.group(1) is not None else m.group(0)
    return normalize_semver(raw)


def version_key(version: str) -> tuple[int, int, int]:
    major, minor, patch = version.split(".")
    return int(major), int(minor), int(patch)
