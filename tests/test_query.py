import pytest

from fuelsync.codec import U64_MAX
from fuelsync.errors import MalformedQuery
from fuelsync.query import normalize, denormalize, CanonicalQuery, CanonicalFieldSelection, \
    CanonicalReceiptSelection


ASSET_ID = '2a0d0ed9d2217ec7f32dcd9a1902ce2a66d68437aeff84e3a3cc8bebee0d2eea'


def test_minimal_query():
    q = normalize({
        'from_block': 0,
        'field_selection': {'block': ['id', 'height', 'height']},
    })
    assert q == CanonicalQuery(
        from_block=0,
        field_selection=CanonicalFieldSelection(block=['height', 'id']),
    )
    assert q.to_block is None
    assert q.receipts == []
    assert q.include_all_blocks is False


def test_full_query():
    q = normalize({
        'from_block': 10,
        'to_block': 1300000,
        'receipts': [{'receipt_type': [5, 6], 'root_contract_id': ['0x' + ASSET_ID]}],
        'inputs': [{'asset_id': [ASSET_ID], 'input_type': [0]}],
        'outputs': [{'to': ['0x' + ASSET_ID.upper()]}],
        'include_all_blocks': True,
        'field_selection': {'input': ['tx_id', 'amount']},
        'max_num_blocks': 100,
        'max_num_transactions': 1000,
    })
    assert q.to_block == 1300000
    assert q.receipts[0].receipt_type == [5, 6]
    assert q.receipts[0].root_contract_id == [bytes.fromhex(ASSET_ID)]
    assert q.inputs[0].asset_id == [bytes.fromhex(ASSET_ID)]
    assert q.inputs[0].owner == []
    assert q.outputs[0].to == [bytes.fromhex(ASSET_ID)]
    assert q.include_all_blocks is True
    assert q.field_selection.input == ['amount', 'tx_id']
    assert q.max_num_blocks == 100
    assert q.max_num_transactions == 1000


def test_register_values():
    q = normalize({
        'from_block': 0,
        'receipts': [{
            'ra': ['1234'],
            'rb': ['21', '9999999999'],
            'rc': [str(U64_MAX)],
        }],
        'field_selection': {},
    })
    receipt = q.receipts[0]
    assert receipt.ra == [1234]
    assert receipt.rb == [21, 9999999999]
    assert receipt.rc == [U64_MAX]
    assert receipt.rd == []


def test_register_round_trip():
    q = normalize({
        'from_block': 0,
        'receipts': [{'ra': ['18446744073709551615'], 'rb': ['0']}],
        'field_selection': {},
    })
    caller = denormalize(q)
    assert caller['receipts'] == [{'ra': ['18446744073709551615'], 'rb': ['0']}]


def test_unparseable_register_maps_to_zero():
    q = normalize({
        'from_block': 0,
        'receipts': [{'ra': ['not a number', '18446744073709551616', '7']}],
        'field_selection': {},
    })
    assert q.receipts[0].ra == [0, 0, 7]


def test_register_must_be_string():
    with pytest.raises(MalformedQuery):
        normalize({
            'from_block': 0,
            'receipts': [{'ra': [1234]}],
            'field_selection': {},
        })


def test_unknown_fields_are_dropped():
    q = normalize({
        'from_block': 1,
        'logs': [{'address': ['0x00']}],
        'receipts': [{'ra': ['1'], 'topic0': ['x']}],
        'field_selection': {'block': ['height'], 'log': ['data']},
    })
    assert q.receipts == [CanonicalReceiptSelection(ra=[1])]
    assert q.field_selection == CanonicalFieldSelection(block=['height'])


def test_none_values_are_absent():
    q = normalize({
        'from_block': 1,
        'to_block': None,
        'receipts': None,
        'field_selection': {'block': None},
    })
    assert q.to_block is None
    assert q.receipts == []
    assert q.field_selection.block == []


@pytest.mark.parametrize('query', [
    None,
    [],
    {'field_selection': {}},
    {'from_block': 0},
    {'from_block': -1, 'field_selection': {}},
    {'from_block': '0', 'field_selection': {}},
    {'from_block': 2 ** 64, 'field_selection': {}},
    {'from_block': 0, 'to_block': 'head', 'field_selection': {}},
    {'from_block': 0, 'receipts': {'ra': ['1']}, 'field_selection': {}},
    {'from_block': 0, 'inputs': [{'owner': ['0xzz']}], 'field_selection': {}},
    {'from_block': 0, 'inputs': [{'owner': ['0x ab cd']}], 'field_selection': {}},
    {'from_block': 0, 'inputs': [{'owner': ['abc']}], 'field_selection': {}},
    {'from_block': 0, 'inputs': [{'owner': [123]}], 'field_selection': {}},
    {'from_block': 0, 'outputs': [{'output_type': [256]}], 'field_selection': {}},
    {'from_block': 0, 'field_selection': {'block': 'height'}},
])
def test_malformed_query(query):
    with pytest.raises(MalformedQuery) as exc:
        normalize(query)
    assert exc.value.context == 'parse query'


def test_to_block_order_is_not_checked():
    q = normalize({'from_block': 10, 'to_block': 5, 'field_selection': {}})
    assert q.from_block == 10
    assert q.to_block == 5


def test_denormalize():
    q = normalize({
        'from_block': 5,
        'inputs': [{'owner': ['0x' + ASSET_ID.upper()], 'input_type': [1]}],
        'field_selection': {'input': ['owner']},
    })
    assert denormalize(q) == {
        'from_block': 5,
        'inputs': [{'owner': ['0x' + ASSET_ID], 'input_type': [1]}],
        'include_all_blocks': False,
        'field_selection': {'input': ['owner']},
    }


def test_denormalize_is_accepted_back():
    caller = {
        'from_block': 3,
        'to_block': 30,
        'receipts': [{'contract_id': ['0x' + ASSET_ID], 'rd': [str(U64_MAX)], 'tx_status': [1]}],
        'field_selection': {'receipt': ['rd', 'contract_id']},
        'max_num_blocks': 7,
    }
    q = normalize(caller)
    assert normalize(denormalize(q)) == q
