# Imports
import sys
import json
import asyncio
import logging
import argparse
from typing import List

from pydantic import ValidationError

from repo_icons.config import Settings
from repo_icons.readme import Readme
from repo_icons.readme_image import ReadmeImage
from repo_icons.exceptions import (
    AuthenticationError,
    FetchFailedError,
    RateLimitError,
    RepositoryNotFoundError,
)

# Logger
logger = logging.getLogger(__name__)


# Helpers
def _parse_repo(value: str) -> List[str]:
    parts = value.strip("/").split("/")
    if len(parts) != 2 or not all(parts):
        raise argparse.ArgumentTypeError("Format: owner/repo")
    return parts


def _render(images: List[ReadmeImage], top: bool) -> str:
    if top:
        return images[0].src
    return json.dumps(
        [image.model_dump(mode="json", exclude={"headers"}) for image in images],
        indent=2,
    )


async def _collect(owner: str, repo: str, settings: Settings) -> List[ReadmeImage]:
    readme = await Readme.load(owner, repo, settings)
    with readme:
        return await readme.images()


# Execution
def main(argv=None) -> int:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s | %(levelname)-7s | %(message)s",
        datefmt="%H:%M:%S"
    )

    parser = argparse.ArgumentParser(description="Rank icon candidates from a GitHub README")
    parser.add_argument("repo", type=_parse_repo, help="Repository (owner/repo)")
    parser.add_argument("-t", "--top", action="store_true", help="Print only the best image URL")
    parser.add_argument("-v", "--verbose", action="store_true")
    args = parser.parse_args(argv)

    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    owner, repo = args.repo
    try:
        settings = Settings()
        images = asyncio.run(_collect(owner, repo, settings))

        if args.top and not images:
            logger.error(f"No icon candidates in {owner}/{repo}")
            return 7

        print(_render(images, args.top))
        return 0

    except KeyboardInterrupt:
        logger.info("\nInterrupted")
        return 130
    except AuthenticationError as e:
        logger.error(f"Authentication failed: {e}")
        return 2
    except RepositoryNotFoundError as e:
        logger.error(f"Repository error: {e}")
        return 3
    except RateLimitError as e:
        logger.error(f"Rate limit exceeded: {e}")
        return 4
    except ValidationError as e:
        logger.error(f"Configuration error: {e}")
        return 5
    except FetchFailedError as e:
        logger.error(f"Fetch failed: {e}")
        return 6
    except Exception as e:
        logger.exception(f"Unexpected error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
