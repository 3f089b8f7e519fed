import asyncio
import dataclasses
import json
import sys

from fuelsync import Client, Query, init_logging


ASSET_ID = '0x2a0d0ed9d2217ec7f32dcd9a1902ce2a66d68437aeff84e3a3cc8bebee0d2eea'


QUERY: Query = {
    'from_block': 0,
    # without to_block the query runs to the head of the chain
    'to_block': 1300000,
    'inputs': [
        {'asset_id': [ASSET_ID]}
    ],
    'field_selection': {
        'input': ['tx_id', 'block_height', 'input_type', 'utxo_id', 'owner', 'amount', 'asset_id']
    }
}


async def main():
    async with Client({'url': 'https://fuel-testnet.hypersync.xyz'}) as client:
        res = await client.get_selected_data(QUERY)

    json.dump([dataclasses.asdict(i) for i in res.data.inputs], sys.stdout, indent=2)


if __name__ == '__main__':
    init_logging()
    asyncio.run(main())
