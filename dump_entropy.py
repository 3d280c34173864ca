#!/usr/bin/env python3
"""
Print entropy records of one partition straight from the on-disk index.

Run:
  python dump_entropy.py --partition 42 --n 5
  python dump_entropy.py --partition 42 --n 5 --continue <token>
  python dump_entropy.py --partition 42 --all
"""

import argparse
import sys

from entropy_engine.entropy_cursor import advance, iter_partition
from entropy_engine.errors import DecodeError, ParameterError
from entropy_engine.index_reader import IndexReader
from entropy_engine.paths import DEFAULT_N, LEXICON_PATH, LIVE_DOCS_PATH


def format_record(rec):
    return f"{rec.vsn}\t{rec.bucket_type}\t{rec.bucket_name}\t{rec.key}\t{rec.hash}"


def main(argv=None):
    ap = argparse.ArgumentParser(description="Dump entropy records for one partition.")
    ap.add_argument("--partition", required=True, help="Partition to list.")
    ap.add_argument("--n", type=int, default=DEFAULT_N, help="Page size.")
    ap.add_argument("--continue", dest="cont", default=None, help="Continuation token from a previous page.")
    ap.add_argument("--all", action="store_true", help="Follow continuations until the partition is drained.")
    ap.add_argument("--lexicon", default=LEXICON_PATH, help="Lexicon pickle path.")
    ap.add_argument("--live-docs", default=LIVE_DOCS_PATH, help="Live docs pickle path.")
    args = ap.parse_args(argv)

    reader = IndexReader.open(args.lexicon, args.live_docs)
    try:
        if args.all:
            total = 0
            for rec in iter_partition(reader, args.partition, n=args.n):
                print(format_record(rec))
                total += 1
            print(f"[dump] records={total}", file=sys.stderr)
            return 0

        page = advance(reader, args.cont, args.partition, n=args.n)
    except (ParameterError, DecodeError) as e:
        print(f"[dump] {e}", file=sys.stderr)
        return 2

    for rec in page.records:
        print(format_record(rec))
    print(f"[dump] records={page.num_found}  more={page.more}", file=sys.stderr)
    if page.more:
        print(f"[dump] continuation={page.continuation}", file=sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())
