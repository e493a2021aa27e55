"""
Vocab CLI.
"""

import argparse
from vocab.cli.commands import cache, lookup, serve, wordbook


def main():
    parser = argparse.ArgumentParser(prog="vocab", description="Dictionary lookup and wordbook CLI")
    subparsers = parser.add_subparsers(dest="command")

    lookup.add_subparser(subparsers)
    wordbook.add_subparser(subparsers)
    cache.add_subparser(subparsers)
    serve.add_subparser(subparsers)

    args = parser.parse_args()

    if hasattr(args, "func"):
        args.func(args)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
