#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""Caesar shift over the 26-letter English alphabet"""

import sys
import argparse
import string
from functools import lru_cache
from typing import List, Optional

EN_ALPHA = string.ascii_lowercase
EN_SIZE = len(EN_ALPHA)  # 26

_ASCII_LETTERS = frozenset(string.ascii_letters)


@lru_cache(maxsize=EN_SIZE)
def _table(shift: int) -> dict:
    lo = EN_ALPHA
    up = lo.upper()
    s_lo = ''.join(lo[(i + shift) % EN_SIZE] for i in range(EN_SIZE))
    s_up = ''.join(up[(i + shift) % EN_SIZE] for i in range(EN_SIZE))
    return str.maketrans(lo + up, s_lo + s_up)


def encrypt(text: str, shift: int) -> str:
    """Shifts ASCII letters forward, keeping case. Anything else is copied."""
    return text.translate(_table(shift % EN_SIZE))


def decrypt(text: str, shift: int) -> str:
    """Shifts ASCII letters back by 'shift'; the inverse of encrypt."""
    return encrypt(text, -shift)


def normalize(text: str) -> str:
    """Letters-only lowercase view of a text: 'Hello, World!' -> 'helloworld'"""
    return ''.join(c.lower() for c in text if c in _ASCII_LETTERS)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(
        prog='caesar-encode',
        description='Encrypt (or decrypt) text with a known Caesar key',
    )
    p.add_argument('key', type=int, help='Shift, any integer (taken modulo 26)')
    p.add_argument('text', nargs='*', help='Text; read from stdin when omitted')
    p.add_argument('-d', '--decrypt', action='store_true',
                   help='Decrypt instead of encrypt')
    return p.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)

    if args.text:
        text = ' '.join(args.text)
    elif not sys.stdin.isatty():
        text = sys.stdin.read().rstrip('\n')
    else:
        print("Usage: caesar-encode <key> <text>", file=sys.stderr)
        print("Example: caesar-encode 3 'hello world'", file=sys.stderr)
        return 1

    op = decrypt if args.decrypt else encrypt
    print(op(text, args.key))
    return 0


if __name__ == '__main__':
    sys.exit(main())
