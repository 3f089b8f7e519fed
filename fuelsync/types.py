from dataclasses import dataclass
from typing import Optional


# Widened integers: u64 reinterpreted as i64.
# Precision-sensitive integers (amounts, registers, pointers, lengths) keep
# their exact u64 value.
# Hashes, addresses and byte strings are lowercase hex without "0x".


class TxType:
    SCRIPT = 0
    CREATE = 1
    MINT = 2
    UPGRADE = 3
    UPLOAD = 4


class TxStatus:
    SUCCESS = 1
    FAILURE = 3


class ReceiptType:
    CALL = 0
    RETURN = 1
    RETURN_DATA = 2
    PANIC = 3
    REVERT = 4
    LOG = 5
    LOG_DATA = 6
    TRANSFER = 7
    TRANSFER_OUT = 8
    SCRIPT_RESULT = 9
    MESSAGE_OUT = 10
    MINT = 11
    BURN = 12


class InputType:
    COIN = 0
    CONTRACT = 1
    MESSAGE = 2


class OutputType:
    COIN = 0
    CONTRACT = 1
    CHANGE = 2
    VARIABLE = 3
    CONTRACT_CREATED = 4


@dataclass(frozen=True)
class Block:
    id: str
    # DA layer height up to which (inclusive) input messages are processed
    da_height: int
    consensus_parameters_version: int
    state_transition_bytecode_version: int
    transactions_count: str
    message_receipt_count: str
    transactions_root: str
    message_outbox_root: str
    event_inbox_root: str
    height: int
    # merkle root of all previous consensus headers
    prev_root: str
    time: int
    application_hash: str


@dataclass(frozen=True)
class Transaction:
    block_height: int
    id: str
    tx_type: int
    status: int
    time: int
    input_asset_ids: Optional[list[str]] = None
    input_contracts: Optional[list[str]] = None
    input_contract_utxo_id: Optional[str] = None
    input_contract_balance_root: Optional[str] = None
    input_contract_state_root: Optional[str] = None
    input_contract_tx_pointer_block_height: Optional[int] = None
    input_contract_tx_pointer_tx_index: Optional[int] = None
    input_contract: Optional[str] = None
    policies_tip: Optional[int] = None
    policies_witness_limit: Optional[int] = None
    policies_maturity: Optional[int] = None
    policies_max_fee: Optional[int] = None
    script_gas_limit: Optional[int] = None
    # minimum block height the transaction can be included at
    maturity: Optional[int] = None
    mint_amount: Optional[int] = None
    mint_asset_id: Optional[str] = None
    mint_gas_price: Optional[int] = None
    tx_pointer_block_height: Optional[int] = None
    tx_pointer_tx_index: Optional[int] = None
    output_contract_input_index: Optional[int] = None
    output_contract_balance_root: Optional[str] = None
    output_contract_state_root: Optional[str] = None
    witnesses: Optional[str] = None
    receipts_root: Optional[str] = None
    # squeezed out or failure reason
    reason: Optional[str] = None
    script: Optional[str] = None
    script_data: Optional[str] = None
    bytecode_witness_index: Optional[int] = None
    bytecode_root: Optional[str] = None
    subsection_index: Optional[int] = None
    subsections_number: Optional[int] = None
    proof_set: Optional[str] = None
    consensus_parameters_upgrade_purpose_witness_index: Optional[int] = None
    consensus_parameters_upgrade_purpose_checksum: Optional[str] = None
    state_transition_upgrade_purpose_root: Optional[str] = None
    salt: Optional[str] = None


@dataclass(frozen=True)
class Receipt:
    receipt_index: int
    tx_id: str
    tx_status: int
    block_height: int
    receipt_type: int
    root_contract_id: Optional[str] = None
    # $pc and $is registers, as decimal strings
    pc: Optional[str] = None
    is_: Optional[str] = None
    to: Optional[str] = None
    to_address: Optional[str] = None
    amount: Optional[int] = None
    asset_id: Optional[str] = None
    gas: Optional[int] = None
    # CALL receipt: function selector and ABI argument
    param1: Optional[int] = None
    param2: Optional[int] = None
    val: Optional[int] = None
    ptr: Optional[int] = None
    # MEM[$rC, $rD] digest
    digest: Optional[str] = None
    # PANIC reason
    reason: Optional[int] = None
    ra: Optional[int] = None
    rb: Optional[int] = None
    rc: Optional[int] = None
    rd: Optional[int] = None
    len: Optional[int] = None
    # 0 if the script exited successfully
    result: Optional[int] = None
    gas_used: Optional[int] = None
    data: Optional[str] = None
    sender: Optional[str] = None
    recipient: Optional[str] = None
    nonce: Optional[str] = None
    contract_id: Optional[str] = None
    sub_id: Optional[str] = None


@dataclass(frozen=True)
class Input:
    tx_id: str
    tx_status: int
    block_height: int
    input_type: int
    utxo_id: Optional[str] = None
    # owning address or predicate root
    owner: Optional[str] = None
    amount: Optional[int] = None
    asset_id: Optional[str] = None
    tx_pointer_block_height: Optional[int] = None
    tx_pointer_tx_index: Optional[int] = None
    witness_index: Optional[int] = None
    predicate_gas_used: Optional[int] = None
    predicate: Optional[str] = None
    predicate_data: Optional[str] = None
    balance_root: Optional[str] = None
    state_root: Optional[str] = None
    contract: Optional[str] = None
    sender: Optional[str] = None
    recipient: Optional[str] = None
    nonce: Optional[str] = None
    data: Optional[str] = None


@dataclass(frozen=True)
class Output:
    tx_id: str
    tx_status: int
    block_height: int
    output_type: int
    to: Optional[str] = None
    amount: Optional[int] = None
    asset_id: Optional[str] = None
    input_index: Optional[int] = None
    balance_root: Optional[str] = None
    # ContractCreated: initial state root, ContractOutput: state root after execution
    state_root: Optional[str] = None
    contract: Optional[str] = None


@dataclass(frozen=True)
class LogContext:
    """Everything needed to decode a LOG or LOG_DATA receipt, plus some context"""
    block_height: int
    tx_id: str
    receipt_index: int
    receipt_type: int
    contract_id: Optional[str] = None
    root_contract_id: Optional[str] = None
    ra: Optional[int] = None
    rb: Optional[int] = None
    rc: Optional[int] = None
    rd: Optional[int] = None
    pc: Optional[int] = None
    is_: Optional[int] = None
    ptr: Optional[int] = None
    len: Optional[int] = None
    digest: Optional[str] = None
    data: Optional[str] = None


@dataclass(frozen=True)
class QueryResponseData:
    blocks: list[Block]
    transactions: list[Transaction]
    receipts: list[Receipt]
    inputs: list[Input]
    outputs: list[Output]


@dataclass(frozen=True)
class QueryResponseTyped:
    # current height of the source instance
    archive_height: Optional[int]
    # pagination cursor, the caller continues from here
    next_block: int
    total_execution_time: int
    data: QueryResponseData


@dataclass(frozen=True)
class LogResponse:
    archive_height: Optional[int]
    next_block: int
    total_execution_time: int
    data: list[LogContext]
