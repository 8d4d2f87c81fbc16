"""
HTTP session with connection pooling and an explicit retry policy.

Every failure is reported to the caller on the first attempt; retrying is
left to the user. The CA bundle comes from the environment or certifi.
"""

import os
import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from .constants import POOL_MAXSIZE

_retry_strategy = Retry(
    total=0,                 # No transport-level retries
    raise_on_status=False,
    respect_retry_after_header=False,
)


def _get_ca_bundle():
    """Get the CA bundle path.

    Priority: env var → certifi → system default.
    """
    env_ca = os.environ.get("REQUESTS_CA_BUNDLE") or os.environ.get("SSL_CERT_FILE")
    if env_ca and os.path.isfile(env_ca):
        return env_ca
    import certifi
    return certifi.where()


def create_session():
    """Create a new requests.Session with connection pooling and SSL."""
    session = requests.Session()
    adapter = HTTPAdapter(
        pool_connections=1,
        pool_maxsize=POOL_MAXSIZE,
        max_retries=_retry_strategy,
    )
    session.mount("http://", adapter)
    session.mount("https://", adapter)
    session.verify = _get_ca_bundle()
    return session

