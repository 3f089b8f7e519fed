from typing import Optional

from fuelsync.format import QueryResponse, LogResponse, LogContext
from fuelsync.query.model import CanonicalQuery, CanonicalReceiptSelection, CanonicalFieldSelection
from fuelsync.types import ReceiptType, TxStatus


LOG_CONTEXT_RECEIPT_FIELDS = [
    'block_height',
    'tx_id',
    'receipt_index',
    'receipt_type',
    'contract_id',
    'root_contract_id',
    'ra',
    'rb',
    'rc',
    'rd',
    'pc',
    'is',
    'ptr',
    'len',
    'digest',
    'data',
]


def logs_query(addresses: list[bytes], from_block: int, to_block: Optional[int]) -> CanonicalQuery:
    """LOG and LOG_DATA receipts of successful transactions emitted by `addresses`"""
    return CanonicalQuery(
        from_block=from_block,
        to_block=to_block,
        receipts=[
            CanonicalReceiptSelection(
                root_contract_id=list(addresses),
                receipt_type=[ReceiptType.LOG, ReceiptType.LOG_DATA],
                tx_status=[TxStatus.SUCCESS],
            )
        ],
        field_selection=CanonicalFieldSelection(
            receipt=sorted(LOG_CONTEXT_RECEIPT_FIELDS)
        ),
    )


def to_log_response(res: QueryResponse) -> LogResponse:
    data: list[LogContext] = []
    for receipt in res['data']['receipts']:
        ctx = {}
        for name in LOG_CONTEXT_RECEIPT_FIELDS:
            value = receipt.get(name)
            if value is not None:
                ctx[name] = value
        data.append(ctx)

    return {
        'archive_height': res['archive_height'],
        'next_block': res['next_block'],
        'total_execution_time': res['total_execution_time'],
        'data': data,
    }
