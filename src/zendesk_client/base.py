"""
Base classes for typed resource clients.

This module provides the generic machinery every Zendesk resource client is
built on: path building, pager translation, envelope parsing, the
not-found-as-``None`` rule for single reads, and expected-status checks for
writes.
"""

from typing import Any, AsyncIterator, Dict, Generic, Iterable, List, Optional, Type, TypeVar
import logging

import httpx
from pydantic import BaseModel

from zendesk_client.exceptions import NotFoundError, ZendeskRequestError
from zendesk_client.http import AsyncHTTPClient
from zendesk_client.models.base import JobStatus, Page, PagerParameters


T = TypeVar("T", bound=BaseModel)


class BaseEndpointClient:
    """
    Base class for all endpoint clients.

    Provides common functionality for HTTP operations and response checks.
    """

    def __init__(
        self,
        http_client: AsyncHTTPClient,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the endpoint client.

        Args:
            http_client: The underlying HTTP client
            logger: Diagnostics sink; defaults to the subclass module's logger
        """
        self._http = http_client
        self._logger = logger if logger is not None else logging.getLogger(type(self).__module__)

    @staticmethod
    def _build_path(*parts: Any) -> str:
        """Join path segments and append the ``.json`` suffix Zendesk expects."""
        clean_parts = [str(p).strip("/") for p in parts if p is not None and str(p) != ""]
        return "/" + "/".join(clean_parts) + ".json"

    @staticmethod
    def _pager_to_params(pager: Optional[PagerParameters]) -> Optional[Dict[str, Any]]:
        """Convert a pager to request parameters."""
        if pager is None:
            return None
        return pager.to_params()

    @staticmethod
    def _check_status(response: httpx.Response, expected_status: int) -> None:
        """Raise if a successful response carries a status the endpoint never returns."""
        if response.status_code != expected_status:
            raise ZendeskRequestError(
                f"Unexpected HTTP {response.status_code}, expected {expected_status}",
                status_code=response.status_code,
                content=response.text,
            )


class ResourceClient(BaseEndpointClient, Generic[T]):
    """
    Generic paginated resource client.

    Subclasses name the JSON envelope keys and the model, then compose the
    protected helpers into public operations.
    """

    def __init__(
        self,
        http_client: AsyncHTTPClient,
        response_model: Type[T],
        singular_key: str,
        plural_key: str,
        logger: Optional[logging.Logger] = None,
    ):
        super().__init__(http_client, logger=logger)
        self._response_model = response_model
        self._singular_key = singular_key
        self._plural_key = plural_key

    # =========================================================================
    # Parsing
    # =========================================================================

    @staticmethod
    def _read_json(response: httpx.Response) -> Dict[str, Any]:
        """Decode a success body, which must be a JSON object."""
        try:
            data = response.json()
        except ValueError as e:
            raise ZendeskRequestError(
                "Response body is not valid JSON",
                status_code=response.status_code,
                content=response.text,
            ) from e
        if not isinstance(data, dict):
            raise ZendeskRequestError(
                "Response body is not a JSON object",
                status_code=response.status_code,
                content=response.text,
            )
        return data

    def _read_envelope(self, response: httpx.Response, key: str) -> Any:
        data = self._read_json(response)
        if key not in data:
            raise ZendeskRequestError(
                f"Response body has no '{key}' envelope",
                status_code=response.status_code,
                content=response.text,
            )
        return data[key]

    def _parse_single(self, response: httpx.Response) -> T:
        return self._response_model.model_validate(self._read_envelope(response, self._singular_key))

    def _parse_page(self, response: httpx.Response) -> Page[T]:
        data = self._read_json(response)
        return Page[self._response_model].model_validate(
            {
                "items": data.get(self._plural_key) or [],
                "count": data.get("count"),
                "next_page": data.get("next_page"),
                "previous_page": data.get("previous_page"),
            }
        )

    def _serialize(self, entity: T) -> Dict[str, Any]:
        return entity.model_dump(mode="json", exclude_none=True)

    # =========================================================================
    # Read Operations
    # =========================================================================

    async def _get_single(self, path: str) -> Optional[T]:
        """
        Get a single resource.

        Returns:
            The resource, or None when the server answers 404

        Raises:
            ZendeskRequestError: For any other failure
        """
        try:
            response = await self._http.get(path)
        except NotFoundError:
            self._logger.info(f"{self._singular_key} at {path} not found")
            return None
        return self._parse_single(response)

    async def _get_page(
        self,
        path: str,
        pager: Optional[PagerParameters] = None,
        params: Optional[Dict[str, Any]] = None,
    ) -> Page[T]:
        """
        Get one page of resources.

        An empty page is a successful result. Every failure, including 404
        for a missing parent, is raised.
        """
        request_params = dict(params or {})
        request_params.update(self._pager_to_params(pager) or {})
        response = await self._http.get(path, params=request_params or None)
        return self._parse_page(response)

    async def _iterate_pages(
        self,
        path: str,
        page_size: int = 100,
    ) -> AsyncIterator[T]:
        """
        Walk pages 1, 2, ... until a page is empty or has no next page.

        A short page does not end the walk: the server may cap ``per_page``
        below ``page_size``.

        Each page is fetched only when the caller consumes past the previous
        one.
        """
        page_number = 1
        while True:
            page = await self._get_page(path, PagerParameters(page=page_number, page_size=page_size))
            for item in page:
                yield item
            if len(page) == 0 or not page.has_more:
                break
            page_number += 1

    # =========================================================================
    # Write Operations
    # =========================================================================

    async def _post_single(self, path: str, entity: T, expected_status: int = 201) -> T:
        response = await self._http.post(path, json_data={self._singular_key: self._serialize(entity)})
        self._check_status(response, expected_status)
        return self._parse_single(response)

    async def _post_many(
        self,
        path: str,
        entities: Iterable[T],
        expected_status: int = 200,
    ) -> JobStatus:
        """Submit a batch in one request. The batch fails or succeeds as a whole."""
        payload = {self._plural_key: [self._serialize(e) for e in entities]}
        response = await self._http.post(path, json_data=payload)
        self._check_status(response, expected_status)
        return JobStatus.model_validate(self._read_envelope(response, "job_status"))

    async def _put(
        self,
        path: str,
        json_data: Optional[Dict[str, Any]] = None,
        expected_status: int = 200,
    ) -> httpx.Response:
        response = await self._http.put(path, json_data=json_data)
        self._check_status(response, expected_status)
        return response

    async def _delete(
        self,
        path: str,
        params: Optional[Dict[str, Any]] = None,
        expected_status: int = 204,
    ) -> httpx.Response:
        response = await self._http.delete(path, params=params)
        self._check_status(response, expected_status)
        return response

    async def _delete_many(self, path: str, ids: List[int], expected_status: int = 200) -> JobStatus:
        response = await self._delete(
            path,
            params={"ids": ",".join(str(i) for i in ids)},
            expected_status=expected_status,
        )
        return JobStatus.model_validate(self._read_envelope(response, "job_status"))
