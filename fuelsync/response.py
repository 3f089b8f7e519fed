from typing import Optional, Callable, TypeVar

from . import format as fmt
from .codec import hex_encode, u64_to_widened_i64, u64_to_bigint, u64_to_digit_string
from .types import Block, Transaction, Receipt, Input, Output, LogContext, \
    QueryResponseData, QueryResponseTyped, LogResponse


T = TypeVar('T')
R = TypeVar('R')


def _opt(value: Optional[T], f: Callable[[T], R]) -> Optional[R]:
    if value is None:
        return None
    return f(value)


def _hex(value: Optional[bytes]) -> Optional[str]:
    return _opt(value, hex_encode)


def _hex_list(value: Optional[list[bytes]]) -> Optional[list[str]]:
    return _opt(value, lambda ls: [hex_encode(i) for i in ls])


def _i64(value: Optional[int]) -> Optional[int]:
    return _opt(value, u64_to_widened_i64)


def _big(value: Optional[int]) -> Optional[int]:
    return _opt(value, u64_to_bigint)


def _dec(value: Optional[int]) -> Optional[str]:
    return _opt(value, u64_to_digit_string)


def decode_block(b: fmt.BlockHeader) -> Block:
    return Block(
        id=hex_encode(b['id']),
        da_height=u64_to_widened_i64(b['da_height']),
        consensus_parameters_version=u64_to_widened_i64(b['consensus_parameters_version']),
        state_transition_bytecode_version=u64_to_widened_i64(b['state_transition_bytecode_version']),
        transactions_count=hex_encode(b['transactions_count']),
        message_receipt_count=hex_encode(b['message_receipt_count']),
        transactions_root=hex_encode(b['transactions_root']),
        message_outbox_root=hex_encode(b['message_outbox_root']),
        event_inbox_root=hex_encode(b['event_inbox_root']),
        height=u64_to_widened_i64(b['height']),
        prev_root=hex_encode(b['prev_root']),
        time=u64_to_widened_i64(b['time']),
        application_hash=hex_encode(b['application_hash']),
    )


def decode_transaction(t: fmt.Transaction) -> Transaction:
    return Transaction(
        block_height=u64_to_widened_i64(t['block_height']),
        id=hex_encode(t['id']),
        tx_type=t['tx_type'],
        status=t['status'],
        time=u64_to_widened_i64(t['time']),
        input_asset_ids=_hex_list(t.get('input_asset_ids')),
        input_contracts=_hex_list(t.get('input_contracts')),
        input_contract_utxo_id=_hex(t.get('input_contract_utxo_id')),
        input_contract_balance_root=_hex(t.get('input_contract_balance_root')),
        input_contract_state_root=_hex(t.get('input_contract_state_root')),
        input_contract_tx_pointer_block_height=_i64(t.get('input_contract_tx_pointer_block_height')),
        input_contract_tx_pointer_tx_index=_i64(t.get('input_contract_tx_pointer_tx_index')),
        input_contract=_hex(t.get('input_contract')),
        policies_tip=_i64(t.get('policies_tip')),
        policies_witness_limit=_i64(t.get('policies_witness_limit')),
        policies_maturity=_i64(t.get('policies_maturity')),
        policies_max_fee=_i64(t.get('policies_max_fee')),
        script_gas_limit=_i64(t.get('script_gas_limit')),
        maturity=_i64(t.get('maturity')),
        mint_amount=_i64(t.get('mint_amount')),
        mint_asset_id=_hex(t.get('mint_asset_id')),
        mint_gas_price=_i64(t.get('mint_gas_price')),
        tx_pointer_block_height=_i64(t.get('tx_pointer_block_height')),
        tx_pointer_tx_index=_i64(t.get('tx_pointer_tx_index')),
        output_contract_input_index=_i64(t.get('output_contract_input_index')),
        output_contract_balance_root=_hex(t.get('output_contract_balance_root')),
        output_contract_state_root=_hex(t.get('output_contract_state_root')),
        witnesses=_hex(t.get('witnesses')),
        receipts_root=_hex(t.get('receipts_root')),
        reason=t.get('reason'),
        script=_hex(t.get('script')),
        script_data=_hex(t.get('script_data')),
        bytecode_witness_index=_i64(t.get('bytecode_witness_index')),
        bytecode_root=_hex(t.get('bytecode_root')),
        subsection_index=_i64(t.get('subsection_index')),
        subsections_number=_i64(t.get('subsections_number')),
        proof_set=_hex(t.get('proof_set')),
        consensus_parameters_upgrade_purpose_witness_index=_i64(
            t.get('consensus_parameters_upgrade_purpose_witness_index')
        ),
        consensus_parameters_upgrade_purpose_checksum=_hex(
            t.get('consensus_parameters_upgrade_purpose_checksum')
        ),
        state_transition_upgrade_purpose_root=_hex(t.get('state_transition_upgrade_purpose_root')),
        salt=_hex(t.get('salt')),
    )


def decode_receipt(r: fmt.Receipt) -> Receipt:
    return Receipt(
        receipt_index=u64_to_widened_i64(r['receipt_index']),
        tx_id=hex_encode(r['tx_id']),
        tx_status=r['tx_status'],
        block_height=u64_to_widened_i64(r['block_height']),
        receipt_type=r['receipt_type'],
        root_contract_id=_hex(r.get('root_contract_id')),
        pc=_dec(r.get('pc')),
        is_=_dec(r.get('is')),
        to=_hex(r.get('to')),
        to_address=_hex(r.get('to_address')),
        amount=_big(r.get('amount')),
        asset_id=_hex(r.get('asset_id')),
        gas=_i64(r.get('gas')),
        param1=_big(r.get('param1')),
        param2=_big(r.get('param2')),
        val=_big(r.get('val')),
        ptr=_big(r.get('ptr')),
        digest=_hex(r.get('digest')),
        reason=_i64(r.get('reason')),
        ra=_big(r.get('ra')),
        rb=_big(r.get('rb')),
        rc=_big(r.get('rc')),
        rd=_big(r.get('rd')),
        len=_big(r.get('len')),
        result=_i64(r.get('result')),
        gas_used=_i64(r.get('gas_used')),
        data=_hex(r.get('data')),
        sender=_hex(r.get('sender')),
        recipient=_hex(r.get('recipient')),
        nonce=_hex(r.get('nonce')),
        contract_id=_hex(r.get('contract_id')),
        sub_id=_hex(r.get('sub_id')),
    )


def decode_input(i: fmt.Input) -> Input:
    return Input(
        tx_id=hex_encode(i['tx_id']),
        tx_status=i['tx_status'],
        block_height=u64_to_widened_i64(i['block_height']),
        input_type=i['input_type'],
        utxo_id=_hex(i.get('utxo_id')),
        owner=_hex(i.get('owner')),
        amount=_big(i.get('amount')),
        asset_id=_hex(i.get('asset_id')),
        tx_pointer_block_height=_i64(i.get('tx_pointer_block_height')),
        tx_pointer_tx_index=_i64(i.get('tx_pointer_tx_index')),
        witness_index=_i64(i.get('witness_index')),
        predicate_gas_used=_i64(i.get('predicate_gas_used')),
        predicate=_hex(i.get('predicate')),
        predicate_data=_hex(i.get('predicate_data')),
        balance_root=_hex(i.get('balance_root')),
        state_root=_hex(i.get('state_root')),
        contract=_hex(i.get('contract')),
        sender=_hex(i.get('sender')),
        recipient=_hex(i.get('recipient')),
        nonce=_hex(i.get('nonce')),
        data=_hex(i.get('data')),
    )


def decode_output(o: fmt.Output) -> Output:
    return Output(
        tx_id=hex_encode(o['tx_id']),
        tx_status=o['tx_status'],
        block_height=u64_to_widened_i64(o['block_height']),
        output_type=o['output_type'],
        to=_hex(o.get('to')),
        amount=_big(o.get('amount')),
        asset_id=_hex(o.get('asset_id')),
        input_index=_i64(o.get('input_index')),
        balance_root=_hex(o.get('balance_root')),
        state_root=_hex(o.get('state_root')),
        contract=_hex(o.get('contract')),
    )


def decode_query_response(r: fmt.QueryResponse) -> QueryResponseTyped:
    data = r['data']
    return QueryResponseTyped(
        archive_height=_i64(r.get('archive_height')),
        next_block=u64_to_widened_i64(r['next_block']),
        total_execution_time=u64_to_widened_i64(r['total_execution_time']),
        data=QueryResponseData(
            blocks=[decode_block(b) for b in data['blocks']],
            transactions=[decode_transaction(t) for t in data['transactions']],
            receipts=[decode_receipt(i) for i in data['receipts']],
            inputs=[decode_input(i) for i in data['inputs']],
            outputs=[decode_output(o) for o in data['outputs']],
        )
    )


def decode_log_context(c: fmt.LogContext) -> LogContext:
    return LogContext(
        block_height=u64_to_widened_i64(c['block_height']),
        tx_id=hex_encode(c['tx_id']),
        receipt_index=u64_to_widened_i64(c['receipt_index']),
        receipt_type=c['receipt_type'],
        contract_id=_hex(c.get('contract_id')),
        root_contract_id=_hex(c.get('root_contract_id')),
        ra=_i64(c.get('ra')),
        rb=_i64(c.get('rb')),
        rc=_i64(c.get('rc')),
        rd=_i64(c.get('rd')),
        pc=_i64(c.get('pc')),
        is_=_i64(c.get('is')),
        ptr=_i64(c.get('ptr')),
        len=_i64(c.get('len')),
        digest=_hex(c.get('digest')),
        data=_hex(c.get('data')),
    )


def decode_log_response(r: fmt.LogResponse) -> LogResponse:
    return LogResponse(
        archive_height=_i64(r.get('archive_height')),
        next_block=u64_to_widened_i64(r['next_block']),
        total_execution_time=u64_to_widened_i64(r['total_execution_time']),
        data=[decode_log_context(c) for c in r['data']],
    )
