import json
import logging

import requests

from keepup.models import ClusterReport

logger = logging.getLogger(__name__)


class ReportApiClient:
    def __init__(self, api_url: str | None, api_token: str | None, timeout: int = 30):
        self.api_url: str | None = api_url
        self.api_token: str | None = api_token
        self.timeout: int = timeout

    def send(self, report: ClusterReport) -> bool:
        if not (self.api_url and self.api_token):
            logger.info("API_URL or API_TOKEN not set, skipping API request")
            return False

        headers = {"Content-Type": "application/json", "x-api-token": self.api_token}
        body = json.dumps(report.to_dict(), indent=2)
        try:
            response = requests.put(url=self.api_url, data=body, headers=headers, timeout=self.timeout)
        except requests.RequestException as e:
            logger.error(f"Failed to send data to API: {e}")
            return False

        if 200 <= response.status_code < 300:
            logger.info("Successfully sent data to API")
            return True
        logger.error(f"API request failed with status: {response.status_code}")
        return False
