"""Command line entry point for the API description diff."""

import argparse
import logging

from apidiff.errors import ApiDiffError
from apidiff.load_config import load_config
from apidiff.run_diff import run_diff

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    """Write the diff of documented-but-undescribed API symbols."""
    ap = argparse.ArgumentParser(
        description=(
            "List API symbols that are documented in source comments but "
            "missing from the hand-written API descriptions."
        ),
    )
    ap.add_argument(
        "--config",
        help="Path to a YAML configuration file overriding the defaults",
    )
    ap.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        config = load_config(args.config)
        out_path = run_diff(config)
    except ApiDiffError as e:
        logger.error("%s", e)
        raise SystemExit(1) from e

    print(f"Diff has been output to file {out_path}.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
