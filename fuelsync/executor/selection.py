import dataclasses
from typing import Any, Iterable, Sequence

from fuelsync.format import QueryResponse, QueryResponseData
from fuelsync.query.model import CanonicalQuery, CanonicalFieldSelection


def include_columns(columns: list[str], columns_to_include: Iterable[str] | None) -> list[str]:
    ls = list(columns)
    if columns_to_include is None:
        return ls
    included = set(ls)
    for c in columns_to_include:
        if c not in included:
            ls.append(c)
            included.add(c)
    return sorted(ls)


def _selection_columns(selections: Sequence[Any]) -> set[str]:
    columns = set()
    for sel in selections:
        for f in dataclasses.fields(sel):
            if getattr(sel, f.name):
                columns.add(f.name)
    return columns


def with_filter_columns(query: CanonicalQuery) -> CanonicalQuery:
    """Extend the field selection with every column the selections filter on"""
    fields = query.field_selection
    receipt = _selection_columns(query.receipts)
    input = _selection_columns(query.inputs)
    output = _selection_columns(query.outputs)
    return dataclasses.replace(query, field_selection=CanonicalFieldSelection(
        block=fields.block,
        transaction=fields.transaction,
        receipt=include_columns(fields.receipt, receipt) if receipt else fields.receipt,
        input=include_columns(fields.input, input) if input else fields.input,
        output=include_columns(fields.output, output) if output else fields.output,
    ))


def _matches(item: dict, selection: Any) -> bool:
    for f in dataclasses.fields(selection):
        values = getattr(selection, f.name)
        if values and item.get(f.name) not in values:
            return False
    return True


def _filter(items: list[dict], selections: Sequence[Any]) -> list[dict]:
    if not selections:
        return items
    return [i for i in items if any(_matches(i, s) for s in selections)]


def select_data(query: CanonicalQuery, res: QueryResponse) -> QueryResponse:
    """Drop receipts, inputs and outputs not matching any selection of their kind"""
    data = res['data']
    selected: QueryResponseData = {
        'blocks': data['blocks'],
        'transactions': data['transactions'],
        'receipts': _filter(data['receipts'], query.receipts),
        'inputs': _filter(data['inputs'], query.inputs),
        'outputs': _filter(data['outputs'], query.outputs),
    }
    return {**res, 'data': selected}

