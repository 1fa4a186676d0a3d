from .kubernetes_client import KubernetesClient
from .report_api_client import ReportApiClient

__all__ = [
    "KubernetesClient",
    "ReportApiClient",
]
