from pydantic.dataclasses import dataclass

@dataclass(frozen=True)
class Observation:
    namespace: str
    application_name: str
    version: str | None  # None when no version could be extracted


@dataclass(frozen=True)
class DetectedComponent:
    application_name: str
    version: str
    namespace: str

    def to_dict(self) -> dict[str, str]:
        return {
            "chart_name": self.application_name,
            "version": self.version,
            "namespace": self.namespace,
        }
