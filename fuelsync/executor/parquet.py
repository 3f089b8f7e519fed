import asyncio
import dataclasses
import logging
import os
from typing import Awaitable, Callable, Optional

import marshmallow as mm
import pyarrow
import pyarrow.parquet

from fuelsync.format import QueryResponse, QueryResponseData
from fuelsync.query.model import CanonicalQuery, CanonicalFieldSelection
from fuelsync.query.schema import HexBytes
from .wire import U64, BLOCK_SCHEMA, TRANSACTION_SCHEMA, RECEIPT_SCHEMA, INPUT_SCHEMA, OUTPUT_SCHEMA


LOG = logging.getLogger(__name__)


def _arrow_type(field: mm.fields.Field) -> pyarrow.DataType:
    if isinstance(field, HexBytes):
        return pyarrow.binary()
    elif isinstance(field, U64):
        return pyarrow.uint64()
    elif isinstance(field, mm.fields.Integer):
        return pyarrow.uint8()
    elif isinstance(field, mm.fields.List):
        return pyarrow.list_(_arrow_type(field.inner))
    else:
        return pyarrow.string()


class TableBuilder:
    """Accumulates records column-wise as arrow array chunks"""

    def __init__(self, schema: mm.Schema, columns: list[str], chunk_size: int = 1000):
        self.types = {
            name: _arrow_type(schema.fields[name])
            for name in columns if name in schema.fields
        }
        self.columns = list(self.types)
        self.chunk_size = chunk_size
        self.reset()

    def append(self, record: dict) -> None:
        self.rows.append(record)
        self.size += 1
        if len(self.rows) >= self.chunk_size:
            self._new_chunk()

    def _new_chunk(self) -> None:
        for name, chunks in self.chunks.items():
            chunks.append(pyarrow.array([r.get(name) for r in self.rows], type=self.types[name]))
        self.rows.clear()

    def to_table(self) -> pyarrow.Table:
        if self.rows:
            self._new_chunk()
        arrays = [
            pyarrow.chunked_array(self.chunks[name], type=self.types[name])
            for name in self.columns
        ]
        return pyarrow.table(arrays, names=self.columns)

    def bytesize(self) -> int:
        return sum(a.nbytes for chunks in self.chunks.values() for a in chunks)

    def reset(self) -> None:
        self.chunks: dict[str, list[pyarrow.Array]] = {name: [] for name in self.columns}
        self.rows: list[dict] = []
        self.size = 0


class ParquetSink:
    """Writes one parquet file per selected entity kind into the `path` folder"""

    def __init__(self, path: str, fields: CanonicalFieldSelection):
        self.path = path
        self._tables = {
            'blocks': TableBuilder(BLOCK_SCHEMA, fields.block),
            'transactions': TableBuilder(TRANSACTION_SCHEMA, fields.transaction),
            'receipts': TableBuilder(RECEIPT_SCHEMA, fields.receipt),
            'inputs': TableBuilder(INPUT_SCHEMA, fields.input),
            'outputs': TableBuilder(OUTPUT_SCHEMA, fields.output),
        }
        self._writers: dict[str, pyarrow.parquet.ParquetWriter] = {}

    def push(self, data: QueryResponseData) -> None:
        for name, table in self._tables.items():
            if not table.columns:
                continue
            for record in data[name]:
                table.append(record)

    def buffered_bytes(self) -> int:
        return sum(t.bytesize() for t in self._tables.values())

    def flush(self) -> None:
        for name, table in self._tables.items():
            if not table.columns or (table.size == 0 and name in self._writers):
                continue
            arrow_table = table.to_table()
            writer = self._writers.get(name)
            if writer is None:
                writer = pyarrow.parquet.ParquetWriter(
                    os.path.join(self.path, f'{name}.parquet'),
                    arrow_table.schema,
                    compression='zstd'
                )
                self._writers[name] = writer
            writer.write_table(arrow_table)
            table.reset()

    def close(self) -> None:
        for writer in self._writers.values():
            writer.close()
        self._writers.clear()


FLUSH_THRESHOLD_BYTES = 64 * 1024 * 1024


def is_complete(query: CanonicalQuery, next_block: int, archive_height: Optional[int]) -> bool:
    if query.to_block is not None:
        return next_block >= query.to_block
    return archive_height is not None and next_block >= archive_height


async def export_to_files(
        get_data: Callable[[CanonicalQuery], Awaitable[QueryResponse]],
        query: CanonicalQuery,
        path: str
) -> None:
    os.makedirs(path, exist_ok=True)
    sink = ParquetSink(path, query.field_selection)
    try:
        while True:
            res = await get_data(query)
            sink.push(res['data'])
            LOG.debug('fetched blocks %d..%d', query.from_block, res['next_block'])

            if sink.buffered_bytes() > FLUSH_THRESHOLD_BYTES:
                await asyncio.to_thread(sink.flush)

            if is_complete(query, res['next_block'], res['archive_height']):
                break

            if res['next_block'] <= query.from_block:
                LOG.warning('query made no progress, stopping at block %d', query.from_block)
                break

            query = dataclasses.replace(query, from_block=res['next_block'])

        await asyncio.to_thread(sink.flush)
    finally:
        sink.close()

    LOG.info('parquet export finished', extra={'path': path, 'next_block': res['next_block']})
