import logging
from typing import Optional, Union, Mapping, Any

from . import retry
from .address import validate_addresses
from .codec import is_i64, widened_i64_to_u64, u64_to_widened_i64
from .config import ClientConfig, parse_config
from .errors import ExecutorError, ExportError, MalformedQuery
from .executor import Executor
from .executor.http import HttpExecutor
from .query import Query, normalize
from .response import decode_query_response, decode_log_response
from .types import QueryResponseTyped, LogResponse


LOG = logging.getLogger(__name__)


class Client:
    def __init__(
            self,
            config: Union[ClientConfig, Mapping[str, Any], None] = None,
            executor: Optional[Executor] = None
    ):
        self.config = parse_config(config)
        self._executor = executor or HttpExecutor(self.config)

    async def __aenter__(self) -> 'Client':
        return self

    async def __aexit__(self, *exc) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        aclose = getattr(self._executor, 'aclose', None)
        if aclose is not None:
            await aclose()

    async def get_height(self) -> int:
        """Height of the source instance"""
        try:
            height = await self._executor.get_height()
        except Exception as e:
            raise ExecutorError('get height', e) from e
        return u64_to_widened_i64(height)

    async def get_height_with_retry(self) -> int:
        """Height of the source instance.

        On failure sleeps for 1 second (one more after each next failure, up to 5)
        and tries again until success.
        """
        height = await retry.get_height_with_retry(self._executor.get_height)
        return u64_to_widened_i64(height)

    async def create_parquet_folder(self, query: Query, path: str) -> None:
        """Execute `query` and write the results as parquet files into the `path` folder"""
        q = normalize(query)
        try:
            await self._executor.export_to_files(q, path)
        except Exception as e:
            raise ExportError('create parquet folder', e) from e

    async def get_data(self, query: Query) -> QueryResponseTyped:
        """Execute `query`.

        Returns every transaction matching the receipt, input or output
        selections, along with all their receipts, inputs and outputs
        (not only the matching ones), so they can be associated with each other.
        """
        q = normalize(query)
        try:
            res = await self._executor.get_data(q)
        except Exception as e:
            raise ExecutorError('get data', e) from e
        return decode_query_response(res)

    async def get_selected_data(self, query: Query) -> QueryResponseTyped:
        """Execute `query`, keeping only receipts, inputs and outputs that exactly match its selections"""
        q = normalize(query)
        try:
            res = await self._executor.get_selected_data(q)
        except Exception as e:
            raise ExecutorError('get data', e) from e
        return decode_query_response(res)

    async def get_logs(
            self,
            contract_addresses: list[str],
            from_block: int,
            to_block: Optional[int] = None
    ) -> LogResponse:
        """LOG and LOG_DATA receipts emitted by any of `contract_addresses` in [from_block, to_block).

        When `to_block` is not given the query runs to the head of the chain.
        Logs of failed transactions are not returned.
        """
        addresses = validate_addresses(contract_addresses)

        first_block = _block_number('from_block', from_block)
        last_block = None if to_block is None else _block_number('to_block', to_block)

        try:
            res = await self._executor.get_logs(addresses, first_block, last_block)
        except Exception as e:
            raise ExecutorError('get logs', e) from e
        return decode_log_response(res)


def _block_number(name: str, value: int) -> int:
    if not is_i64(value):
        raise MalformedQuery('parse query', ValueError(f'{name} must be a 64-bit signed integer - {value!r}'))
    return widened_i64_to_u64(value)
