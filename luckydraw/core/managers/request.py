import ssl
from typing import Dict, Optional

import aiohttp
import certifi

from luckydraw.core.settings import BackendConfig
from luckydraw.utils.decorators.singleton import singleton


@singleton
class RequestManager:
    @property
    def secure_connector(self) -> aiohttp.TCPConnector:
        ssl_context = ssl.create_default_context(cafile=certifi.where())
        return aiohttp.TCPConnector(ssl=ssl_context)

    @property
    def insecure_connector(self) -> aiohttp.TCPConnector:
        ssl_context = ssl.create_default_context()
        ssl_context.check_hostname = False
        ssl_context.verify_mode = ssl.CERT_NONE
        return aiohttp.TCPConnector(ssl=ssl_context)

    def get_connector(self, verify_ssl: bool) -> aiohttp.TCPConnector:
        return self.secure_connector if verify_ssl else self.insecure_connector

    def get_timeout(self, timeout: int) -> aiohttp.ClientTimeout:
        return aiohttp.ClientTimeout(total=timeout)

    def get_headers(self, access_token: Optional[str] = None) -> Dict[str, str]:
        headers = {
            "Accept": "application/json",
            "Accept-Language": "en-US,en;q=0.5",
        }

        if access_token:
            headers["Authorization"] = f"Bearer {access_token}"

        return headers

    def get_client_params(self, config: BackendConfig, authorized: bool = False) -> Dict[str, object]:
        return {
            "headers": self.get_headers(access_token=config.access_token if authorized else None),
            "connector": self.get_connector(verify_ssl=config.verify_ssl),
            "timeout": self.get_timeout(timeout=config.timeout),
        }


request_mgr = RequestManager()
