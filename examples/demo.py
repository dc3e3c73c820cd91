"""Print an Awair device's configuration and latest sample.

Use: demo.py <base url>
Example: demo.py 'http://192.168.1.10'
"""
import asyncio
from pprint import pprint
import sys

from awairaio import AwairClient, AwairError


async def main(base_url: str) -> None:
    async with AwairClient(base_url) as client:
        pprint(await client.config())
        pprint(await client.poll())


if __name__ == '__main__':
    if len(sys.argv) != 2:
        sys.exit(__doc__)
    try:
        asyncio.run(main(sys.argv[1]))
    except AwairError as err:
        sys.exit(f'Error: {err}')
