from typing import Optional, Protocol

from fuelsync.format import QueryResponse, LogResponse
from fuelsync.query.model import CanonicalQuery


class Executor(Protocol):
    async def get_height(self) -> int:
        pass

    async def get_data(self, query: CanonicalQuery) -> QueryResponse:
        pass

    async def get_selected_data(self, query: CanonicalQuery) -> QueryResponse:
        pass

    async def get_logs(self, addresses: list[bytes], from_block: int, to_block: Optional[int]) -> LogResponse:
        pass

    async def export_to_files(self, query: CanonicalQuery, path: str) -> None:
        pass
