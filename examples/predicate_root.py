import asyncio
import dataclasses
import json
import sys

from fuelsync import Client, Query, init_logging


PREDICATE_ROOT = '0x94a8e322ff02baeb1d625e83dadf5ec88870ac801da370d4b15bbd5f0af01169'


QUERY: Query = {
    'from_block': 0,
    'to_block': 1427625,
    'inputs': [
        {'owner': [PREDICATE_ROOT]}
    ],
    'field_selection': {
        'input': [
            'tx_id',
            'block_height',
            'input_type',
            'utxo_id',
            'owner',
            'amount',
            'asset_id',
            'predicate_gas_used',
            'predicate',
            'predicate_data',
        ]
    }
}


async def main():
    async with Client({'url': 'https://fuel-testnet.hypersync.xyz'}) as client:
        res = await client.get_selected_data(QUERY)

    json.dump([dataclasses.asdict(i) for i in res.data.inputs], sys.stdout, indent=2)


if __name__ == '__main__':
    init_logging()
    asyncio.run(main())
