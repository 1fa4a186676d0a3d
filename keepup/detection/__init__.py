from .image_collector import collect_images
from .namespace_aggregator import aggregate, build_report
from .rule_matcher import match_rule
from .version_normalizer import extract_version, normalize_semver

__all__ = [
    "aggregate",
    "build_report",
    "collect_images",
    "extract_version",
    "match_rule",
    "normalize_semver",
]
