from typing import Iterable

from keepup.detection.version_normalizer import version_key
from keepup.models import ClusterReport, DetectedComponent, Observation


def aggregate(observations: Iterable[Observation]) -> list[DetectedComponent]:
    """Fold observations into one component per (namespace, application).

    Observations without a version are dropped. When several images of a
    namespace resolve to the same application the highest version is kept.
    Components are returned sorted by namespace then application name.
    """
    detected: dict[tuple[str, str], DetectedComponent] = {}
    for observation in observations:
        if observation.version is None:
            continue
        key = (observation.namespace, observation.application_name)
        current = detected.get(key)
        if current is not None and version_key(current.version) >= version_key(observation.version):
            continue
        detected[key] = DetectedComponent(
            application_name=observation.application_name,
            version=observation.version,
            namespace=observation.namespace,
        )
    return [detected[key] for key in sorted(detected)]


def build_report(cluster_name: str, kube_version: str, components: list[DetectedComponent]) -> ClusterReport:
    return ClusterReport(cluster_name=cluster_name, kube_version=kube_version, components=components)
