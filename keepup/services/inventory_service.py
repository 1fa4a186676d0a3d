import json
import logging
from typing import Iterator

from typing_extensions import override

from keepup.clients.kubernetes_client import KubernetesClient
from keepup.clients.report_api_client import ReportApiClient
from keepup.detection.helm_releases import decode_release
from keepup.detection.image_collector import collect_images
from keepup.detection.namespace_aggregator import aggregate, build_report
from keepup.detection.rule_matcher import match_rule
from keepup.detection.version_normalizer import extract_version, normalize_semver
from keepup.models import ClusterReport, DetectionRule, NamespaceImages, Observation
from keepup.repositories import RulesRepository
from keepup.services.service import Service
from keepup.utils.env_config import EnvConfig
from keepup.utils.logging import setup_logger


class InventoryService(Service):
    def __init__(self, env_config: EnvConfig, dry_run: bool = False):
        self.env_config: EnvConfig = env_config
        self.rules_repository: RulesRepository = RulesRepository(env_config.rules_file)
        self.kubernetes: KubernetesClient = KubernetesClient(env_config.kubeconfig)
        self.report_api: ReportApiClient = ReportApiClient(env_config.api_url, env_config.api_token)
        self.dry_run: bool = dry_run
        self.logger: logging.Logger = setup_logger("InventoryService")

    @override
    def run(self) -> None:
        rules = self.rules_repository.find_all()
        self.logger.info(f"Loaded {len(rules)} detection rules from {self.env_config.rules_file}")

        report = self.build_report(rules)

        if self.dry_run:
            print(json.dumps(report.to_dict(), indent=2))
            return

        self.report_api.send(report)

    def build_report(self, rules: list[DetectionRule]) -> ClusterReport:
        observations: list[Observation] = []
        for namespace in self.kubernetes.list_namespaces():
            namespace_images = self.collect_namespace(namespace)
            observations.extend(self.match_images(namespace_images, rules))
            if self.env_config.include_helm_releases:
                observations.extend(self.helm_observations(namespace))

        components = aggregate(observations)
        self.logger.info(f"Detected {len(components)} components")
        return build_report(
            self.kubernetes.get_cluster_name(self.env_config.cluster_name),
            self.kubernetes.get_kubernetes_version(),
            components,
        )

    def collect_namespace(self, namespace: str) -> NamespaceImages:
        workloads = [
            workload
            for kind in KubernetesClient.WORKLOAD_KINDS
            for workload in self.kubernetes.list_workloads(kind, namespace)
        ]
        namespace_images = collect_images(namespace, workloads)
        self.logger.debug(f"Found {len(namespace_images.images)} distinct images in namespace {namespace}")
        return namespace_images

    def match_images(self, namespace_images: NamespaceImages, rules: list[DetectionRule]) -> Iterator[Observation]:
        for image in sorted(namespace_images.images):
            rule = match_rule(image, rules)
            if rule is None:
                continue
            self.logger.info(f"Matched {image} → {rule.application_name}")
            version = extract_version(rule, image)
            if version is None:
                self.logger.warning(f"{image} → no version")
            yield Observation(
                namespace=namespace_images.namespace,
                application_name=rule.application_name,
                version=version,
            )

    def helm_observations(self, namespace: str) -> Iterator[Observation]:
        for payload in self.kubernetes.list_helm_releases(namespace):
            chart = decode_release(payload)
            if chart is None:
                continue
            yield Observation(
                namespace=namespace,
                application_name=chart.name,
                version=normalize_semver(chart.version),
            )
