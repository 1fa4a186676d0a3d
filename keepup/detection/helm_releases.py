import base64
import binascii
import gzip
import json
import logging

from keepup.models import HelmChart

logger = logging.getLogger(__name__)

GZIP_MAGIC = b"\x1f\x8b"


def decode_release(payload: bytes | str) -> HelmChart | None:
    """Decode the ``release`` value of a Helm storage secret into its chart metadata.

    Helm stores a release as base64 text of a gzip-compressed JSON document.
    The payload may still carry the extra base64 layer Kubernetes applies to
    secret data. Undecodable payloads are logged and yield None.
    """
    try:
        data = payload.encode() if isinstance(payload, str) else payload
        for _ in range(2):
            data = base64.b64decode(data, validate=True)
            if data[:2] == GZIP_MAGIC:
                break
        release = json.loads(gzip.decompress(data))
    except (binascii.Error, OSError, EOFError, ValueError) as e:
        logger.warning(f"Failed to decode helm release: {e}")
        return None

    if not isinstance(release, dict):
        logger.warning("Helm release is not a JSON object, skipping")
        return None
    metadata = (release.get("chart") or {}).get("metadata") or {}
    name = metadata.get("name")
    version = metadata.get("version")
    if not name or not version:
        logger.warning("Helm release without chart name or version, skipping")
        return None
    return HelmChart(name=name, version=str(version))
