import asyncio
import json

import httpx
import pyarrow
import pyarrow.parquet

from fuelsync import Client, ClientConfig
from fuelsync.codec import U64_MAX
from fuelsync.executor.http import HttpExecutor
from fuelsync.executor.parquet import TableBuilder
from fuelsync.executor.wire import RECEIPT_SCHEMA


TX_ID = 'ab' * 32


class PagedServer:
    def __init__(self, pages):
        self.pages = pages
        self.bodies = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        body = json.loads(request.content)
        self.bodies.append(body)
        next_block, tables = self.pages[body['from_block']]
        return httpx.Response(200, json={
            'archive_height': 100,
            'next_block': next_block,
            'total_execution_time': 1,
            'data': [tables],
        })


def block(height: int) -> dict:
    return {'height': height, 'id': '0x' + f'{height:02x}' * 32}


def receipt(height: int, amount: int) -> dict:
    return {'block_height': height, 'tx_id': '0x' + TX_ID, 'amount': amount, 'receipt_type': 7}


def make_client(server) -> Client:
    executor = HttpExecutor(ClientConfig(url='http://hyperfuel.test'), transport=httpx.MockTransport(server))
    return Client(executor=executor)


QUERY = {
    'from_block': 0,
    'to_block': 10,
    'receipts': [{'receipt_type': [7]}],
    'field_selection': {
        'block': ['height', 'id'],
        'receipt': ['block_height', 'tx_id', 'amount'],
    },
}


def test_export_follows_pagination(tmp_path):
    server = PagedServer({
        0: (5, {'blocks': [block(1), block(4)], 'receipts': [receipt(1, 10)]}),
        5: (10, {'blocks': [block(7)], 'receipts': [receipt(7, U64_MAX), receipt(7, 0)]}),
    })
    out = tmp_path / 'out'
    asyncio.run(make_client(server).create_parquet_folder(QUERY, str(out)))

    assert [b['from_block'] for b in server.bodies] == [0, 5]

    blocks = pyarrow.parquet.read_table(out / 'blocks.parquet')
    assert blocks.column_names == ['height', 'id']
    assert blocks.column('height').to_pylist() == [1, 4, 7]
    assert blocks.schema.field('id').type == pyarrow.binary()
    assert blocks.column('id').to_pylist()[0] == bytes([1] * 32)

    receipts = pyarrow.parquet.read_table(out / 'receipts.parquet')
    assert receipts.column_names == ['amount', 'block_height', 'tx_id']
    assert receipts.schema.field('amount').type == pyarrow.uint64()
    assert receipts.column('amount').to_pylist() == [10, U64_MAX, 0]

    assert not (out / 'transactions.parquet').exists()
    assert not (out / 'inputs.parquet').exists()
    assert not (out / 'outputs.parquet').exists()


def test_export_to_archive_height(tmp_path):
    server = PagedServer({
        90: (100, {'blocks': [block(95)]}),
    })
    query = {'from_block': 90, 'field_selection': {'block': ['height'], 'transaction': ['id']}}
    asyncio.run(make_client(server).create_parquet_folder(query, str(tmp_path)))

    assert len(server.bodies) == 1
    assert pyarrow.parquet.read_table(tmp_path / 'blocks.parquet').num_rows == 1
    transactions = pyarrow.parquet.read_table(tmp_path / 'transactions.parquet')
    assert transactions.num_rows == 0
    assert transactions.column_names == ['id']


def test_export_stops_without_progress(tmp_path):
    server = PagedServer({
        3: (3, {'blocks': []}),
    })
    query = {'from_block': 3, 'to_block': 50, 'field_selection': {'block': ['height']}}
    asyncio.run(make_client(server).create_parquet_folder(query, str(tmp_path)))
    assert len(server.bodies) == 1


def test_table_builder_chunks():
    builder = TableBuilder(RECEIPT_SCHEMA, ['amount', 'data', 'no_such_column'], chunk_size=2)
    assert builder.columns == ['amount', 'data']

    for i in range(5):
        builder.append({'amount': i, 'data': bytes([i]) if i % 2 else None, 'gas': 1})
    assert builder.size == 5
    assert builder.bytesize() > 0

    table = builder.to_table()
    assert table.num_rows == 5
    assert table.column('amount').num_chunks == 3
    assert table.schema.field('data').type == pyarrow.binary()
    assert table.column('data').to_pylist() == [None, b'\x01', None, b'\x03', None]

    builder.reset()
    assert builder.size == 0
    assert builder.to_table().num_rows == 0
