from types import SimpleNamespace
from unittest.mock import patch

import pytest
from kubernetes.client.exceptions import ApiException
from kubernetes.config.config_exception import ConfigException

from keepup.clients.kubernetes_client import KubernetesClient
from keepup.errors import WorkloadSourceError


def container(image):
    return SimpleNamespace(image=image)


def workload_item(name, images, init_images=None):
    pod_spec = SimpleNamespace(
        containers=[container(i) for i in images],
        init_containers=[container(i) for i in init_images] if init_images is not None else None,
    )
    return SimpleNamespace(metadata=SimpleNamespace(name=name), spec=SimpleNamespace(template=SimpleNamespace(spec=pod_spec)))


@pytest.fixture
def mock_config():
    with patch("keepup.clients.kubernetes_client.config") as p:
        p.load_incluster_config.return_value = None
        yield p


@pytest.fixture
def kube(mock_config):
    with patch("keepup.clients.kubernetes_client.client"):
        yield KubernetesClient()


def test_uses_explicit_kubeconfig(mock_config):
    with patch("keepup.clients.kubernetes_client.client"):
        KubernetesClient("/tmp/kubeconfig")
    mock_config.load_kube_config.assert_called_once_with(config_file="/tmp/kubeconfig")
    mock_config.load_incluster_config.assert_not_called()


def test_kubeconfig_path_list_is_passed_whole(mock_config):
    with patch("keepup.clients.kubernetes_client.client"):
        KubernetesClient("/etc/kube/base.yaml:/home/dev/.kube/config")
    mock_config.load_kube_config.assert_called_once_with(config_file="/etc/kube/base.yaml:/home/dev/.kube/config")


def test_falls_back_to_default_kubeconfig(mock_config):
    mock_config.load_incluster_config.side_effect = ConfigException("not in cluster")
    with patch("keepup.clients.kubernetes_client.client"):
        KubernetesClient()
    mock_config.load_kube_config.assert_called_once_with()


def test_no_cluster_config(mock_config):
    mock_config.load_incluster_config.side_effect = ConfigException("not in cluster")
    mock_config.load_kube_config.side_effect = ConfigException("no kubeconfig")
    with pytest.raises(WorkloadSourceError, match="Failed to create cluster config"):
        KubernetesClient()


def test_list_namespaces(kube):
    kube.core.list_namespace.return_value = SimpleNamespace(items=[
        SimpleNamespace(metadata=SimpleNamespace(name="default")),
        SimpleNamespace(metadata=SimpleNamespace(name="kube-system")),
    ])

    assert kube.list_namespaces() == ["default", "kube-system"]


def test_list_workloads_reads_main_and_init_containers(kube):
    kube.apps.list_namespaced_stateful_set.return_value = SimpleNamespace(items=[
        workload_item("redis", ["redis:7.2.4"], ["busybox:1.36"]),
        workload_item("postgres", ["postgres:16.1"]),
    ])

    workloads = kube.list_workloads("statefulset", "data")

    kube.apps.list_namespaced_stateful_set.assert_called_once_with("data")
    assert workloads[0].kind == "statefulset"
    assert workloads[0].containers == ["redis:7.2.4"]
    assert workloads[0].init_containers == ["busybox:1.36"]
    assert workloads[1].init_containers == []


def test_list_workloads_unsupported_kind(kube):
    with pytest.raises(ValueError, match="Unsupported workload kind"):
        kube.list_workloads("cronjob", "default")


def test_list_workloads_api_failure(kube):
    kube.apps.list_namespaced_deployment.side_effect = ApiException(status=403, reason="Forbidden")

    with pytest.raises(WorkloadSourceError, match="deployments in namespace default"):
        kube.list_workloads("deployment", "default")


def test_list_helm_releases(kube):
    kube.core.list_namespaced_secret.return_value = SimpleNamespace(items=[
        SimpleNamespace(data={"release": "payload"}),
        SimpleNamespace(data=None),
        SimpleNamespace(data={"other": "value"}),
    ])

    assert kube.list_helm_releases("default") == ["payload"]
    kube.core.list_namespaced_secret.assert_called_once_with("default", label_selector="owner=helm")


def test_get_kubernetes_version(kube):
    kube.version.get_code.return_value = SimpleNamespace(git_version="v1.29.1")

    assert kube.get_kubernetes_version() == "v1.29.1"


def test_get_kubernetes_version_fallback(kube):
    kube.version.get_code.side_effect = ApiException(status=500)

    assert kube.get_kubernetes_version() == "unknown-version"


def test_get_cluster_name_prefers_configured_value(kube):
    assert kube.get_cluster_name("prod-eu") == "prod-eu"
    kube.core.read_namespaced_config_map.assert_not_called()


def test_get_cluster_name_from_kubeadm_config(kube):
    kube.core.read_namespaced_config_map.return_value = SimpleNamespace(
        data={"ClusterConfiguration": "apiVersion: kubeadm.k8s.io/v1beta3\nclusterName: kubeadm-cluster\n"}
    )

    assert kube.get_cluster_name() == "kubeadm-cluster"
    kube.core.read_namespaced_config_map.assert_called_once_with("kubeadm-config", "kube-system")


def test_get_cluster_name_default(kube):
    kube.core.read_namespaced_config_map.side_effect = ApiException(status=404)

    assert kube.get_cluster_name() == "unknown-cluster"
