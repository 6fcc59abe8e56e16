import argparse
import logging
import sys
import time
from pathlib import Path
from typing import Callable, Dict, List, Optional, Tuple

from .bigint import BigInt
from .conversion import PREFIXES
from .errors import BigIntError

logger = logging.getLogger("bignum")

UNARY: Dict[str, Callable[[BigInt], BigInt]] = {
    'parse': lambda a: a,
    'sqrt': lambda a: a.sqrt(),
}

BINARY: Dict[str, Callable[[BigInt, BigInt], BigInt]] = {
    'add': lambda a, b: a + b,
    'sub': lambda a, b: a - b,
    'mul': lambda a, b: a * b,
    'div': lambda a, b: a.quotient(b),
    'rem': lambda a, b: a.remainder(b),
    'and': lambda a, b: a & b,
    'or': lambda a, b: a | b,
    'xor': lambda a, b: a ^ b,
}


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="bignum", description="Arbitrary-precision integer driver.")

    ops = parser.add_mutually_exclusive_group(required=True)
    ops.add_argument('-c', '--parse', dest='op', action='store_const', const='parse', help="Parse and print a number.")
    ops.add_argument('-q', '--sqrt', dest='op', action='store_const', const='sqrt', help="Integer square root.")
    ops.add_argument('-a', '--add', dest='op', action='store_const', const='add', help="Add two numbers.")
    ops.add_argument('-s', '--sub', dest='op', action='store_const', const='sub', help="Subtract two numbers.")
    ops.add_argument('-m', '--mul', dest='op', action='store_const', const='mul', help="Multiply two numbers.")
    ops.add_argument('-d', '--div', dest='op', action='store_const', const='div', help="Truncating quotient.")
    ops.add_argument('-r', '--rem', dest='op', action='store_const', const='rem', help="Truncating remainder.")
    ops.add_argument('--and', dest='op', action='store_const', const='and', help="Bitwise AND.")
    ops.add_argument('--or', dest='op', action='store_const', const='or', help="Bitwise OR.")
    ops.add_argument('--xor', dest='op', action='store_const', const='xor', help="Bitwise XOR.")

    parser.add_argument('operands', nargs='*', help="Numbers, unless -f is given.")
    parser.add_argument('-f', '--file', type=Path, help="Read operands from a file, one per line. The result is written back to it.")
    parser.add_argument('-o', '--output', type=Path, help="Write the result here instead.")
    parser.add_argument('-v', '--verbose', action='store_true', help="Debug logging.")

    return parser.parse_args(argv)


def base_of(text: str) -> Tuple[int, str]:
    prefix = text.lstrip('-')[:2]
    if prefix in PREFIXES:
        return PREFIXES[prefix], prefix
    return 10, ''


def read_operands(args: argparse.Namespace) -> List[str]:
    if args.file:
        with open(args.file, 'r') as f:
            return [line.strip() for line in f if line.strip()]
    return args.operands


def run(op: str, operands: List[str]) -> Tuple[str, float]:
    arity = 1 if op in UNARY else 2
    if len(operands) != arity:
        raise ValueError(f"'{op}' takes {arity} operand(s), got {len(operands)}")

    base, prefix = base_of(operands[0])
    start = time.perf_counter()
    nums = [BigInt(x) for x in operands]
    if arity == 1:
        res = UNARY[op](nums[0])
    else:
        res = BINARY[op](nums[0], nums[1])
    out = res.to_string(base, prefix)
    elapsed = time.perf_counter() - start

    logger.debug("%s on %d operand(s) -> %d words in %.6fs", op, arity, len(res.words), elapsed)
    return out, elapsed


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    try:
        out, elapsed = run(args.op, read_operands(args))
        text = f"{out}\n{elapsed * 1000:.3f}ms\n"
        dest = args.output or args.file
        if dest:
            with open(dest, 'w') as f:
                f.write(text)
        else:
            sys.stdout.write(text)
    except (BigIntError, ValueError, OSError) as e:
        logger.error("%s", e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
