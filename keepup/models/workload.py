from pydantic.dataclasses import dataclass

@dataclass(frozen=True)
class WorkloadSpec:
    kind: str
    name: str
    containers: list[str]
    init_containers: list[str]

    @property
    def images(self) -> list[str]:
        return [image for image in self.containers + self.init_containers if image]


@dataclass(frozen=True)
class NamespaceImages:
    namespace: str
    images: frozenset[str]
