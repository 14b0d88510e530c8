import argparse
import logging
import os
import sys

from llrb.models.exceptions import InvariantViolationError
from llrb.models.sortedcontainers import RedBlackTree
from llrb.tooling.inspection import black_height, height, in_order, render, validate

logger = logging.getLogger()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="llrb-insert",
        description="Insert integers into a left-leaning Red-Black Tree and report its shape.",
    )
    parser.add_argument("values", nargs="+", type=int, metavar="VALUE")
    parser.add_argument("--render", action="store_true", help="print the tree sideways")
    parser.add_argument("--validate", action="store_true", help="check all invariants")
    return parser


def run(values: list[int], show: bool = False, check: bool = False) -> int:
    tree = RedBlackTree()
    inserted = 0
    for value in values:
        if tree.add(value):
            inserted += 1
            logger.debug(f"Inserted {value}")

    if check:
        try:
            validate(tree)
        except InvariantViolationError as e:
            logger.error(f"Tree is invalid: {e}")
            return 1

    logger.info(
        f"Inserted {inserted} of {len(values)} values, "
        f"distinct={len(in_order(tree))} height={height(tree)} "
        f"black_height={black_height(tree)}"
    )

    if show:
        print(render(tree))
    return 0


def main(argv: list[str] | None = None) -> int:
    logging.basicConfig(
        level=os.environ.get("LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s - %(levelname)s - %(message)s",
    )
    args = build_parser().parse_args(argv)
    return run(args.values, show=args.render, check=args.validate)


if __name__ == "__main__":
    sys.exit(main())
