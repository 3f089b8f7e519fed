from typing import TypedDict, NotRequired, Optional


# Canonical response records, as produced by an executor.
# Bytes fields hold raw bytes, numeric fields hold u64 values.


class BlockHeader(TypedDict):
    id: bytes
    da_height: int
    consensus_parameters_version: int
    state_transition_bytecode_version: int
    transactions_count: bytes
    message_receipt_count: bytes
    transactions_root: bytes
    message_outbox_root: bytes
    event_inbox_root: bytes
    height: int
    prev_root: bytes
    time: int
    application_hash: bytes


class Transaction(TypedDict):
    block_height: int
    id: bytes
    input_asset_ids: NotRequired[list[bytes]]
    input_contracts: NotRequired[list[bytes]]
    input_contract_utxo_id: NotRequired[bytes]
    input_contract_balance_root: NotRequired[bytes]
    input_contract_state_root: NotRequired[bytes]
    input_contract_tx_pointer_block_height: NotRequired[int]
    input_contract_tx_pointer_tx_index: NotRequired[int]
    input_contract: NotRequired[bytes]
    policies_tip: NotRequired[int]
    policies_witness_limit: NotRequired[int]
    policies_maturity: NotRequired[int]
    policies_max_fee: NotRequired[int]
    script_gas_limit: NotRequired[int]
    maturity: NotRequired[int]
    mint_amount: NotRequired[int]
    mint_asset_id: NotRequired[bytes]
    mint_gas_price: NotRequired[int]
    tx_pointer_block_height: NotRequired[int]
    tx_pointer_tx_index: NotRequired[int]
    tx_type: int
    output_contract_input_index: NotRequired[int]
    output_contract_balance_root: NotRequired[bytes]
    output_contract_state_root: NotRequired[bytes]
    witnesses: NotRequired[bytes]
    receipts_root: NotRequired[bytes]
    status: int
    time: int
    reason: NotRequired[str]
    script: NotRequired[bytes]
    script_data: NotRequired[bytes]
    bytecode_witness_index: NotRequired[int]
    bytecode_root: NotRequired[bytes]
    subsection_index: NotRequired[int]
    subsections_number: NotRequired[int]
    proof_set: NotRequired[bytes]
    consensus_parameters_upgrade_purpose_witness_index: NotRequired[int]
    consensus_parameters_upgrade_purpose_checksum: NotRequired[bytes]
    state_transition_upgrade_purpose_root: NotRequired[bytes]
    salt: NotRequired[bytes]


Receipt = TypedDict('Receipt', {
    'receipt_index': int,
    'root_contract_id': NotRequired[bytes],
    'tx_id': bytes,
    'tx_status': int,
    'block_height': int,
    'pc': NotRequired[int],
    'is': NotRequired[int],
    'to': NotRequired[bytes],
    'to_address': NotRequired[bytes],
    'amount': NotRequired[int],
    'asset_id': NotRequired[bytes],
    'gas': NotRequired[int],
    'param1': NotRequired[int],
    'param2': NotRequired[int],
    'val': NotRequired[int],
    'ptr': NotRequired[int],
    'digest': NotRequired[bytes],
    'reason': NotRequired[int],
    'ra': NotRequired[int],
    'rb': NotRequired[int],
    'rc': NotRequired[int],
    'rd': NotRequired[int],
    'len': NotRequired[int],
    'receipt_type': int,
    'result': NotRequired[int],
    'gas_used': NotRequired[int],
    'data': NotRequired[bytes],
    'sender': NotRequired[bytes],
    'recipient': NotRequired[bytes],
    'nonce': NotRequired[bytes],
    'contract_id': NotRequired[bytes],
    'sub_id': NotRequired[bytes],
})


class Input(TypedDict):
    tx_id: bytes
    tx_status: int
    block_height: int
    input_type: int
    utxo_id: NotRequired[bytes]
    owner: NotRequired[bytes]
    amount: NotRequired[int]
    asset_id: NotRequired[bytes]
    tx_pointer_block_height: NotRequired[int]
    tx_pointer_tx_index: NotRequired[int]
    witness_index: NotRequired[int]
    predicate_gas_used: NotRequired[int]
    predicate: NotRequired[bytes]
    predicate_data: NotRequired[bytes]
    balance_root: NotRequired[bytes]
    state_root: NotRequired[bytes]
    contract: NotRequired[bytes]
    sender: NotRequired[bytes]
    recipient: NotRequired[bytes]
    nonce: NotRequired[bytes]
    data: NotRequired[bytes]


class Output(TypedDict):
    tx_id: bytes
    tx_status: int
    block_height: int
    output_type: int
    to: NotRequired[bytes]
    amount: NotRequired[int]
    asset_id: NotRequired[bytes]
    input_index: NotRequired[int]
    balance_root: NotRequired[bytes]
    state_root: NotRequired[bytes]
    contract: NotRequired[bytes]


class QueryResponseData(TypedDict):
    blocks: list[BlockHeader]
    transactions: list[Transaction]
    receipts: list[Receipt]
    inputs: list[Input]
    outputs: list[Output]


class QueryResponse(TypedDict):
    archive_height: Optional[int]
    next_block: int
    total_execution_time: int
    data: QueryResponseData


LogContext = TypedDict('LogContext', {
    'block_height': int,
    'tx_id': bytes,
    'receipt_index': int,
    'receipt_type': int,
    'contract_id': NotRequired[bytes],
    'root_contract_id': NotRequired[bytes],
    'ra': NotRequired[int],
    'rb': NotRequired[int],
    'rc': NotRequired[int],
    'rd': NotRequired[int],
    'pc': NotRequired[int],
    'is': NotRequired[int],
    'ptr': NotRequired[int],
    'len': NotRequired[int],
    'digest': NotRequired[bytes],
    'data': NotRequired[bytes],
})


class LogResponse(TypedDict):
    archive_height: Optional[int]
    next_block: int
    total_execution_time: int
    data: list[LogContext]


def empty_response_data() -> QueryResponseData:
    return {
        'blocks': [],
        'transactions': [],
        'receipts': [],
        'inputs': [],
        'outputs': [],
    }
