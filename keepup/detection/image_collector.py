from typing import Iterable

from keepup.models import NamespaceImages, WorkloadSpec


def collect_images(namespace: str, workloads: Iterable[WorkloadSpec]) -> NamespaceImages:
    """Return the distinct images referenced by main and init containers of ``workloads``."""
    images: set[str] = set()
    for workload in workloads:
        images.update(workload.images)
    return NamespaceImages(namespace=namespace, images=frozenset(images))
