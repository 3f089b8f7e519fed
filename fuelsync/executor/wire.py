"""JSON wire format of the query service.

Requests carry bytes as "0x"-prefixed hex and u64 values as JSON numbers.
Responses are loaded into the canonical records of `fuelsync.format`.
"""
import dataclasses
from typing import Any

import marshmallow as mm

from fuelsync.codec import U64_MAX, parse_u64
from fuelsync.format import QueryResponse, QueryResponseData, empty_response_data
from fuelsync.query.model import CanonicalQuery
from fuelsync.query.schema import HexBytes


def query_to_json(query: CanonicalQuery) -> dict:
    return _to_json(query)


def _to_json(value: Any) -> Any:
    if isinstance(value, bytes):
        return '0x' + value.hex()
    elif dataclasses.is_dataclass(value):
        obj = {}
        for f in dataclasses.fields(value):
            v = getattr(value, f.name)
            if v is not None:
                obj[f.name] = _to_json(v)
        return obj
    elif isinstance(value, list):
        return [_to_json(i) for i in value]
    else:
        return value


class U64(mm.fields.Field):
    """u64 sent either as a JSON number or as a decimal string"""

    default_error_messages = {
        'invalid': 'Not a valid u64.',
    }

    def _deserialize(self, value, attr, data, **kwargs):
        if isinstance(value, str):
            try:
                return parse_u64(value)
            except ValueError:
                raise self.make_error('invalid')
        if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= U64_MAX:
            raise self.make_error('invalid')
        return value


def _u64():
    return U64(allow_none=True)


def _u64_required():
    return U64(load_default=0)


def _u8_required():
    return mm.fields.Integer(strict=True, load_default=0)


def _hex():
    return HexBytes(allow_none=True)


def _hex_required():
    return HexBytes(load_default=b'')


def _schema(name: str, fields: dict) -> mm.Schema:
    cls = mm.Schema.from_dict(fields, name=name)
    return cls(unknown=mm.EXCLUDE)


# Required fields missing from the payload (not selected by the field selection)
# are filled with zero values.


BLOCK_SCHEMA = _schema('BlockSchema', {
    'id': _hex_required(),
    'da_height': _u64_required(),
    'consensus_parameters_version': _u64_required(),
    'state_transition_bytecode_version': _u64_required(),
    'transactions_count': _hex_required(),
    'message_receipt_count': _hex_required(),
    'transactions_root': _hex_required(),
    'message_outbox_root': _hex_required(),
    'event_inbox_root': _hex_required(),
    'height': _u64_required(),
    'prev_root': _hex_required(),
    'time': _u64_required(),
    'application_hash': _hex_required(),
})


TRANSACTION_SCHEMA = _schema('TransactionSchema', {
    'block_height': _u64_required(),
    'id': _hex_required(),
    'input_asset_ids': mm.fields.List(HexBytes(), allow_none=True),
    'input_contracts': mm.fields.List(HexBytes(), allow_none=True),
    'input_contract_utxo_id': _hex(),
    'input_contract_balance_root': _hex(),
    'input_contract_state_root': _hex(),
    'input_contract_tx_pointer_block_height': _u64(),
    'input_contract_tx_pointer_tx_index': _u64(),
    'input_contract': _hex(),
    'policies_tip': _u64(),
    'policies_witness_limit': _u64(),
    'policies_maturity': _u64(),
    'policies_max_fee': _u64(),
    'script_gas_limit': _u64(),
    'maturity': _u64(),
    'mint_amount': _u64(),
    'mint_asset_id': _hex(),
    'mint_gas_price': _u64(),
    'tx_pointer_block_height': _u64(),
    'tx_pointer_tx_index': _u64(),
    'tx_type': _u8_required(),
    'output_contract_input_index': _u64(),
    'output_contract_balance_root': _hex(),
    'output_contract_state_root': _hex(),
    'witnesses': _hex(),
    'receipts_root': _hex(),
    'status': _u8_required(),
    'time': _u64_required(),
    'reason': mm.fields.Str(allow_none=True),
    'script': _hex(),
    'script_data': _hex(),
    'bytecode_witness_index': _u64(),
    'bytecode_root': _hex(),
    'subsection_index': _u64(),
    'subsections_number': _u64(),
    'proof_set': _hex(),
    'consensus_parameters_upgrade_purpose_witness_index': _u64(),
    'consensus_parameters_upgrade_purpose_checksum': _hex(),
    'state_transition_upgrade_purpose_root': _hex(),
    'salt': _hex(),
})


RECEIPT_SCHEMA = _schema('ReceiptSchema', {
    'receipt_index': _u64_required(),
    'root_contract_id': _hex(),
    'tx_id': _hex_required(),
    'tx_status': _u8_required(),
    'block_height': _u64_required(),
    'pc': _u64(),
    'is': _u64(),
    'to': _hex(),
    'to_address': _hex(),
    'amount': _u64(),
    'asset_id': _hex(),
    'gas': _u64(),
    'param1': _u64(),
    'param2': _u64(),
    'val': _u64(),
    'ptr': _u64(),
    'digest': _hex(),
    'reason': _u64(),
    'ra': _u64(),
    'rb': _u64(),
    'rc': _u64(),
    'rd': _u64(),
    'len': _u64(),
    'receipt_type': _u8_required(),
    'result': _u64(),
    'gas_used': _u64(),
    'data': _hex(),
    'sender': _hex(),
    'recipient': _hex(),
    'nonce': _hex(),
    'contract_id': _hex(),
    'sub_id': _hex(),
})


INPUT_SCHEMA = _schema('InputSchema', {
    'tx_id': _hex_required(),
    'tx_status': _u8_required(),
    'block_height': _u64_required(),
    'input_type': _u8_required(),
    'utxo_id': _hex(),
    'owner': _hex(),
    'amount': _u64(),
    'asset_id': _hex(),
    'tx_pointer_block_height': _u64(),
    'tx_pointer_tx_index': _u64(),
    'witness_index': _u64(),
    'predicate_gas_used': _u64(),
    'predicate': _hex(),
    'predicate_data': _hex(),
    'balance_root': _hex(),
    'state_root': _hex(),
    'contract': _hex(),
    'sender': _hex(),
    'recipient': _hex(),
    'nonce': _hex(),
    'data': _hex(),
})


OUTPUT_SCHEMA = _schema('OutputSchema', {
    'tx_id': _hex_required(),
    'tx_status': _u8_required(),
    'block_height': _u64_required(),
    'output_type': _u8_required(),
    'to': _hex(),
    'amount': _u64(),
    'asset_id': _hex(),
    'input_index': _u64(),
    'balance_root': _hex(),
    'state_root': _hex(),
    'contract': _hex(),
})


_BATCH_SCHEMA = _schema('BatchSchema', {
    'blocks': mm.fields.List(mm.fields.Nested(BLOCK_SCHEMA), load_default=list),
    'transactions': mm.fields.List(mm.fields.Nested(TRANSACTION_SCHEMA), load_default=list),
    'receipts': mm.fields.List(mm.fields.Nested(RECEIPT_SCHEMA), load_default=list),
    'inputs': mm.fields.List(mm.fields.Nested(INPUT_SCHEMA), load_default=list),
    'outputs': mm.fields.List(mm.fields.Nested(OUTPUT_SCHEMA), load_default=list),
})


_RESPONSE_SCHEMA = _schema('QueryResponseSchema', {
    'archive_height': U64(load_default=None, allow_none=True),
    'next_block': U64(required=True),
    'total_execution_time': U64(required=True),
    'data': mm.fields.List(mm.fields.Nested(_BATCH_SCHEMA), load_default=list),
})


class InvalidResponse(Exception):
    pass


def parse_query_response(obj: Any) -> QueryResponse:
    if isinstance(obj, dict) and isinstance(obj.get('data'), dict):
        obj = {**obj, 'data': [obj['data']]}

    try:
        res = _RESPONSE_SCHEMA.load(obj)
    except mm.ValidationError as err:
        raise InvalidResponse(str(err.normalized_messages()))

    data: QueryResponseData = empty_response_data()
    for batch in res['data']:
        for table, items in batch.items():
            data[table].extend(items)

    return {
        'archive_height': res['archive_height'],
        'next_block': res['next_block'],
        'total_execution_time': res['total_execution_time'],
        'data': data,
    }
