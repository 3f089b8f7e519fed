import logging
from typing import Optional

import httpx

from fuelsync.config import ClientConfig
from fuelsync.format import QueryResponse, LogResponse
from fuelsync.query.model import CanonicalQuery
from . import parquet, preset
from .selection import select_data, with_filter_columns
from .wire import query_to_json, parse_query_response


LOG = logging.getLogger(__name__)


class HttpExecutor:
    def __init__(self, config: ClientConfig, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.config = config
        headers = {
            'accept': 'application/json',
            'accept-encoding': 'gzip',
        }
        if config.bearer_token:
            headers['authorization'] = f'Bearer {config.bearer_token}'
        self._client = httpx.AsyncClient(
            base_url=config.url,
            headers=headers,
            timeout=httpx.Timeout(config.http_req_timeout_millis / 1000, connect=5),
            transport=transport
        )
        self._extra = {'url': config.url}

    async def aclose(self) -> None:
        await self._client.aclose()

    async def get_height(self) -> int:
        res = await self._client.get('/height')
        res.raise_for_status()
        height = res.json()['height']
        LOG.debug('height', extra={**self._extra, 'height': height})
        return height

    async def get_data(self, query: CanonicalQuery) -> QueryResponse:
        body = query_to_json(query)

        LOG.debug('query send', extra={**self._extra, 'from_block': query.from_block, 'to_block': query.to_block})

        res = await self._client.post('/query', json=body)
        res.raise_for_status()
        result = parse_query_response(res.json())

        LOG.debug('query result', extra={
            **self._extra,
            'next_block': result['next_block'],
            'exec_time': result['total_execution_time']
        })

        return result

    async def get_selected_data(self, query: CanonicalQuery) -> QueryResponse:
        res = await self.get_data(with_filter_columns(query))
        return select_data(query, res)

    async def get_logs(self, addresses: list[bytes], from_block: int, to_block: Optional[int]) -> LogResponse:
        query = preset.logs_query(addresses, from_block, to_block)
        res = await self.get_selected_data(query)
        return preset.to_log_response(res)

    async def export_to_files(self, query: CanonicalQuery, path: str) -> None:
        await parquet.export_to_files(self.get_data, query, path)
