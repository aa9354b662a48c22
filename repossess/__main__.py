import argparse
import asyncio
import logging
import os
import sys

from repossess.downloader import ARCHIVE_FILENAME, ArchiveDownloader
from repossess.errors import RepoError
from repossess.schemas import DEFAULT_BRANCH

REPO_URL = os.getenv('REPO_URL')
REPO_BRANCH = os.getenv('REPO_BRANCH', DEFAULT_BRANCH)

parser = argparse.ArgumentParser(
    prog='repossess',
    description='Download a GitHub or GitLab repository branch as a zip archive',
)
parser.add_argument(
    '-u', '--url',
    default=REPO_URL,
    required=REPO_URL is None,
    help='GitHub or GitLab repository URL',
)
parser.add_argument('-b', '--branch', default=REPO_BRANCH)
parser.add_argument('-o', '--output', default=ARCHIVE_FILENAME)
parser.add_argument('-v', '--verbose', action='store_true')


async def run(args: argparse.Namespace) -> None:
    downloader = ArchiveDownloader(args.url, branch=args.branch)
    print(downloader.archive_url)
    await downloader.download(args.output)


def main(argv: list[str] | None = None) -> int:
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(asctime)s: %(message)s',
    )
    try:
        asyncio.run(run(args))
    except RepoError as err:
        print(f'Error: {err}', file=sys.stderr)
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
