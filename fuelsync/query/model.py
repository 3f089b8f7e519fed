from dataclasses import dataclass, field
from typing import TypedDict, NotRequired, Optional


# Caller-facing query shape.
# Hashes and addresses are hex strings (with or without "0x"),
# registers are u64 decimal strings.


class ReceiptSelection(TypedDict, total=False):
    root_contract_id: list[str]
    to_address: list[str]
    asset_id: list[str]
    receipt_type: list[int]
    sender: list[str]
    recipient: list[str]
    contract_id: list[str]
    ra: list[str]
    rb: list[str]
    rc: list[str]
    rd: list[str]
    tx_status: list[int]


class InputSelection(TypedDict, total=False):
    owner: list[str]
    asset_id: list[str]
    contract: list[str]
    sender: list[str]
    recipient: list[str]
    input_type: list[int]
    tx_status: list[int]


class OutputSelection(TypedDict, total=False):
    to: list[str]
    asset_id: list[str]
    contract: list[str]
    output_type: list[int]
    tx_status: list[int]


class FieldSelection(TypedDict, total=False):
    block: list[str]
    transaction: list[str]
    receipt: list[str]
    input: list[str]
    output: list[str]


class Query(TypedDict):
    # The block to start the query from
    from_block: int
    # Exclusive, the returned range is [from_block, to_block).
    # When absent the query runs to the head of the chain. The server may stop
    # earlier, the caller continues from the response's next_block.
    to_block: NotRequired[int]
    receipts: NotRequired[list[ReceiptSelection]]
    inputs: NotRequired[list[InputSelection]]
    outputs: NotRequired[list[OutputSelection]]
    # Return all blocks of the range, not only the ones related to returned data
    include_all_blocks: NotRequired[bool]
    field_selection: FieldSelection
    # Soft limits, the server might overshoot them a bit
    max_num_blocks: NotRequired[int]
    max_num_transactions: NotRequired[int]


# Canonical form, exchanged with the executor.
# Hashes and addresses are raw bytes, registers are u64 integers.


@dataclass(frozen=True)
class CanonicalReceiptSelection:
    root_contract_id: list[bytes] = field(default_factory=list)
    to_address: list[bytes] = field(default_factory=list)
    asset_id: list[bytes] = field(default_factory=list)
    receipt_type: list[int] = field(default_factory=list)
    sender: list[bytes] = field(default_factory=list)
    recipient: list[bytes] = field(default_factory=list)
    contract_id: list[bytes] = field(default_factory=list)
    ra: list[int] = field(default_factory=list)
    rb: list[int] = field(default_factory=list)
    rc: list[int] = field(default_factory=list)
    rd: list[int] = field(default_factory=list)
    tx_status: list[int] = field(default_factory=list)


@dataclass(frozen=True)
class CanonicalInputSelection:
    owner: list[bytes] = field(default_factory=list)
    asset_id: list[bytes] = field(default_factory=list)
    contract: list[bytes] = field(default_factory=list)
    sender: list[bytes] = field(default_factory=list)
    recipient: list[bytes] = field(default_factory=list)
    input_type: list[int] = field(default_factory=list)
    tx_status: list[int] = field(default_factory=list)


@dataclass(frozen=True)
class CanonicalOutputSelection:
    to: list[bytes] = field(default_factory=list)
    asset_id: list[bytes] = field(default_factory=list)
    contract: list[bytes] = field(default_factory=list)
    output_type: list[int] = field(default_factory=list)
    tx_status: list[int] = field(default_factory=list)


@dataclass(frozen=True)
class CanonicalFieldSelection:
    block: list[str] = field(default_factory=list)
    transaction: list[str] = field(default_factory=list)
    receipt: list[str] = field(default_factory=list)
    input: list[str] = field(default_factory=list)
    output: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class CanonicalQuery:
    from_block: int
    field_selection: CanonicalFieldSelection
    to_block: Optional[int] = None
    receipts: list[CanonicalReceiptSelection] = field(default_factory=list)
    inputs: list[CanonicalInputSelection] = field(default_factory=list)
    outputs: list[CanonicalOutputSelection] = field(default_factory=list)
    include_all_blocks: bool = False
    max_num_blocks: Optional[int] = None
    max_num_transactions: Optional[int] = None
