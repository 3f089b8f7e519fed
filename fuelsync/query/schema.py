import binascii

import marshmallow as mm
import marshmallow.validate

from fuelsync.address import strip_hex_prefix
from fuelsync.codec import U64_MAX, digit_string_to_u64, u64_to_digit_string
from .model import CanonicalReceiptSelection, CanonicalInputSelection, CanonicalOutputSelection, \
    CanonicalFieldSelection, CanonicalQuery


class HexBytes(mm.fields.Field):
    """Hex string (optional "0x" prefix) on the caller side, raw bytes in canonical form"""

    default_error_messages = {
        'invalid': 'Not a valid hex string.',
    }

    def _serialize(self, value, attr, obj, **kwargs):
        if value is None:
            return None
        return '0x' + value.hex()

    def _deserialize(self, value, attr, data, **kwargs):
        if not isinstance(value, str):
            raise self.make_error('invalid')
        try:
            return binascii.unhexlify(strip_hex_prefix(value))
        except (binascii.Error, ValueError):
            raise self.make_error('invalid')


class RegisterValue(mm.fields.Field):
    """u64 register value carried as a decimal string on the caller side.

    Unparseable strings become 0 on load (see `digit_string_to_u64`).
    """

    default_error_messages = {
        'invalid': 'Register value must be a decimal string.',
    }

    def _serialize(self, value, attr, obj, **kwargs):
        if value is None:
            return None
        return u64_to_digit_string(value)

    def _deserialize(self, value, attr, data, **kwargs):
        if not isinstance(value, str):
            raise self.make_error('invalid')
        return digit_string_to_u64(value)


def u64(**kwargs):
    return mm.fields.Integer(
        strict=True,
        validate=mm.validate.Range(min=0, max=U64_MAX),
        **kwargs
    )


def type_code():
    return mm.fields.Integer(strict=True, validate=mm.validate.Range(min=0, max=255))


def hex_list():
    return mm.fields.List(HexBytes(), allow_none=True)


def register_list():
    return mm.fields.List(RegisterValue(), allow_none=True)


def type_code_list():
    return mm.fields.List(type_code(), allow_none=True)


def column_list():
    return mm.fields.List(mm.fields.Str(), allow_none=True)


def _present(data: dict) -> dict:
    return {k: v for k, v in data.items() if v is not None}


def _strip_absent(data: dict) -> dict:
    return {k: v for k, v in data.items() if v is not None and v != []}


class _SelectionSchema(mm.Schema):
    class Meta:
        unknown = mm.EXCLUDE

    @mm.post_dump
    def strip_absent(self, data, **kwargs):
        return _strip_absent(data)


class ReceiptSelectionSchema(_SelectionSchema):
    root_contract_id = hex_list()
    to_address = hex_list()
    asset_id = hex_list()
    receipt_type = type_code_list()
    sender = hex_list()
    recipient = hex_list()
    contract_id = hex_list()
    ra = register_list()
    rb = register_list()
    rc = register_list()
    rd = register_list()
    tx_status = type_code_list()

    @mm.post_load
    def make_selection(self, data, **kwargs):
        return CanonicalReceiptSelection(**_present(data))


class InputSelectionSchema(_SelectionSchema):
    owner = hex_list()
    asset_id = hex_list()
    contract = hex_list()
    sender = hex_list()
    recipient = hex_list()
    input_type = type_code_list()
    tx_status = type_code_list()

    @mm.post_load
    def make_selection(self, data, **kwargs):
        return CanonicalInputSelection(**_present(data))


class OutputSelectionSchema(_SelectionSchema):
    to = hex_list()
    asset_id = hex_list()
    contract = hex_list()
    output_type = type_code_list()
    tx_status = type_code_list()

    @mm.post_load
    def make_selection(self, data, **kwargs):
        return CanonicalOutputSelection(**_present(data))


class FieldSelectionSchema(_SelectionSchema):
    block = column_list()
    transaction = column_list()
    receipt = column_list()
    input = column_list()
    output = column_list()

    @mm.post_load
    def make_selection(self, data, **kwargs):
        columns = {k: sorted(set(v)) for k, v in _present(data).items()}
        return CanonicalFieldSelection(**columns)


class QuerySchema(mm.Schema):
    class Meta:
        unknown = mm.EXCLUDE

    from_block = u64(required=True)
    to_block = u64(allow_none=True)
    receipts = mm.fields.List(mm.fields.Nested(ReceiptSelectionSchema()), allow_none=True)
    inputs = mm.fields.List(mm.fields.Nested(InputSelectionSchema()), allow_none=True)
    outputs = mm.fields.List(mm.fields.Nested(OutputSelectionSchema()), allow_none=True)
    include_all_blocks = mm.fields.Boolean(allow_none=True)
    field_selection = mm.fields.Nested(FieldSelectionSchema(), required=True)
    max_num_blocks = u64(allow_none=True)
    max_num_transactions = u64(allow_none=True)

    @mm.post_load
    def make_query(self, data, **kwargs):
        return CanonicalQuery(**_present(data))

    @mm.post_dump
    def strip_absent(self, data, **kwargs):
        return _strip_absent(data)


QUERY_SCHEMA = QuerySchema()
