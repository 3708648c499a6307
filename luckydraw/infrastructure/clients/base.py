import json
from typing import Any, Dict, List, Optional, Type, TypeVar

import aiohttp
from loguru import logger
from pydantic import BaseModel

from luckydraw.core.managers.request import request_mgr
from luckydraw.core.settings import BackendConfig
from luckydraw.schemas.api_error import ApiError
from luckydraw.schemas.enums.message_tag import MessageTag
from luckydraw.schemas.page import Page
from luckydraw.utils.types.callback import OnAddMessageCallback

M = TypeVar("M", bound=BaseModel)


class BaseClient:
    """Shared plumbing for the lucky draw REST API.

    Every call opens its own ``aiohttp.ClientSession``. Failures are logged,
    reported through ``on_add_message`` and turned into ``None``; callers never
    see transport exceptions.
    """

    authorized: bool = False

    def __init__(self, config: BackendConfig, on_add_message: Optional[OnAddMessageCallback] = None) -> None:
        self._config = config
        self._on_add_message = on_add_message

    @property
    def base_url(self) -> str:
        return self._config.base_url

    @property
    def client_params(self) -> Dict[str, Any]:
        return request_mgr.get_client_params(config=self._config, authorized=self.authorized)

    def set_message_callback(self, on_add_message: Optional[OnAddMessageCallback]) -> None:
        self._on_add_message = on_add_message

    def url(self, path: str) -> str:
        return f"{self.base_url}/api/offers/{path.lstrip('/')}"

    def notify(self, tag: MessageTag, message: str) -> None:
        if self._on_add_message is not None:
            self._on_add_message(tag=tag, message=message)

    async def _send(
        self,
        method: str,
        path: str,
        action: str,
        params: Optional[Dict[str, Any]] = None,
        json_body: Optional[Dict[str, Any]] = None,
        data: Optional[aiohttp.FormData] = None,
        silent: bool = False,
    ) -> Optional[Any]:
        """Perform one request and return the decoded body, ``{}`` for an empty one."""
        try:
            async with aiohttp.ClientSession(**self.client_params) as session:
                async with session.request(
                    method=method,
                    url=self.url(path),
                    params=params,
                    json=json_body,
                    data=data,
                ) as response:
                    body = await self._read_body(response=response)

                    if not response.ok:
                        fallback = f"{action} failed with status: {response.status}"
                        message = ApiError.from_body(body).describe(fallback=fallback)
                        logger.error(f"{action} request failed with status {response.status} - {body}")

                        if not silent:
                            self.notify(tag=MessageTag.ERROR, message=message)

                        return None

                    return body

        except Exception as error:
            logger.exception(f"{action} request failed: {error}")
            if not silent:
                self.notify(tag=MessageTag.ERROR, message=f"{action} failed: could not reach the server")

            return None

    async def _read_body(self, response: aiohttp.ClientResponse) -> Any:
        text = await response.text(encoding="utf-8")
        if not text.strip():
            return {}

        try:
            return json.loads(text)

        except ValueError:
            return text

    def _parse(self, model: Type[M], body: Any, action: str) -> Optional[M]:
        try:
            return model.model_validate(body)

        except Exception as error:
            logger.exception(f"Unexpected {action} response: {error}")
            self.notify(tag=MessageTag.ERROR, message=f"{action} returned an unexpected response")
            return None

    def _parse_page(self, model: Type[M], body: Any, action: str) -> Optional[Page[M]]:
        # unpaginated endpoints answer with a bare list
        if isinstance(body, list):
            body = {"count": len(body), "results": body}

        return self._parse(Page[model], body, action=action)  # type: ignore[valid-type]

    def _parse_list(self, model: Type[M], body: Any, action: str) -> Optional[List[M]]:
        page = self._parse_page(model=model, body=body, action=action)
        return page.results if page is not None else None
