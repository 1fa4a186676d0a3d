import logging
from typing import Any, Callable

from kubernetes import client, config
from kubernetes.client.exceptions import ApiException
from kubernetes.config.config_exception import ConfigException
from ruamel.yaml.error import YAMLError
from urllib3.exceptions import HTTPError

from keepup.errors import WorkloadSourceError
from keepup.models import WorkloadSpec
from keepup.utils.yaml_loader import get_yaml_instance

logger = logging.getLogger(__name__)

DEFAULT_CLUSTER_NAME = "unknown-cluster"
DEFAULT_KUBE_VERSION = "unknown-version"
HELM_RELEASE_SELECTOR = "owner=helm"


class KubernetesClient:
    WORKLOAD_KINDS = ("deployment", "statefulset", "daemonset")

    def __init__(self, kubeconfig: str | None = None):
        self._load_config(kubeconfig)
        api_client = client.ApiClient()
        self.core: client.CoreV1Api = client.CoreV1Api(api_client)
        self.apps: client.AppsV1Api = client.AppsV1Api(api_client)
        self.version: client.VersionApi = client.VersionApi(api_client)

    @staticmethod
    def _load_config(kubeconfig: str | None) -> None:
        try:
            if kubeconfig:
                # a colon-separated list is merged by the library
                config.load_kube_config(config_file=kubeconfig)
                return
            try:
                config.load_incluster_config()
            except ConfigException:
                config.load_kube_config()
        except (ConfigException, OSError) as e:
            raise WorkloadSourceError(f"Failed to create cluster config: {e}") from e

    def list_namespaces(self) -> list[str]:
        namespaces = self._call("namespaces", self.core.list_namespace)
        return [ns.metadata.name for ns in namespaces.items]

    def list_workloads(self, kind: str, namespace: str) -> list[WorkloadSpec]:
        listers: dict[str, Callable[..., Any]] = {
            "deployment": self.apps.list_namespaced_deployment,
            "statefulset": self.apps.list_namespaced_stateful_set,
            "daemonset": self.apps.list_namespaced_daemon_set,
        }
        if kind not in listers:
            raise ValueError(f"Unsupported workload kind: {kind}")
        workloads = self._call(f"{kind}s in namespace {namespace}", listers[kind], namespace)
        return [self._to_workload_spec(kind, item) for item in workloads.items]

    def list_helm_releases(self, namespace: str) -> list[str]:
        secrets = self._call(
            f"helm secrets in namespace {namespace}",
            self.core.list_namespaced_secret,
            namespace,
            label_selector=HELM_RELEASE_SELECTOR,
        )
        return [s.data["release"] for s in secrets.items if s.data and "release" in s.data]

    def get_kubernetes_version(self) -> str:
        try:
            return self.version.get_code().git_version
        except (ApiException, HTTPError) as e:
            logger.warning(f"Failed to fetch Kubernetes version, using '{DEFAULT_KUBE_VERSION}': {e}")
            return DEFAULT_KUBE_VERSION

    def get_cluster_name(self, configured: str | None = None) -> str:
        if configured:
            logger.info(f"Using cluster name from environment: {configured}")
            return configured
        try:
            config_map = self.core.read_namespaced_config_map("kubeadm-config", "kube-system")
            cluster_config = (config_map.data or {}).get("ClusterConfiguration")
            if cluster_config:
                cluster_name = (get_yaml_instance().load(cluster_config) or {}).get("clusterName")
                if cluster_name:
                    logger.info(f"Using cluster name from kubeadm-config: {cluster_name}")
                    return cluster_name
        except (ApiException, HTTPError, YAMLError, AttributeError) as e:
            logger.debug(f"kubeadm-config not readable: {e}")
        logger.info(f"Cluster name not found, using default '{DEFAULT_CLUSTER_NAME}'")
        return DEFAULT_CLUSTER_NAME

    @staticmethod
    def _call(description: str, fn: Callable[..., Any], *args: Any, **kwargs: Any) -> Any:
        try:
            return fn(*args, **kwargs)
        except (ApiException, HTTPError) as e:
            raise WorkloadSourceError(f"Failed to list {description}: {e}") from e

    @staticmethod
    def _to_workload_spec(kind: str, item: Any) -> WorkloadSpec:
        pod_spec = item.spec.template.spec
        return WorkloadSpec(
            kind=kind,
            name=item.metadata.name,
            containers=[c.image for c in pod_spec.containers or [] if c.image],
            init_containers=[c.image for c in pod_spec.init_containers or [] if c.image],
        )
