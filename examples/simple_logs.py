import asyncio
import dataclasses
import json
import sys

from fuelsync import Client, init_logging


CONTRACTS = ['0xff63ad3cdb5fde197dfa2d248330d458bffe631bda65938aa7ab7e37efa561d0']


async def main():
    async with Client({'url': 'https://fuel-15.hypersync.xyz'}) as client:
        logs = await client.get_logs(CONTRACTS, 8076516, 8076517)

    print(f'number of logs: {len(logs.data)}', file=sys.stderr)
    json.dump([dataclasses.asdict(log) for log in logs.data], sys.stdout, indent=2)


if __name__ == '__main__':
    init_logging()
    asyncio.run(main())
