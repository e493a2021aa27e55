"""
Wordbook commands.
"""

import sys
from vocab.cli import client


def add_subparser(subparsers):
    parser = subparsers.add_parser("wordbook", help="Personal word list")
    parser.add_argument("--user", default="default", help="Wordbook user id")
    wb_sub = parser.add_subparsers(dest="wordbook_command", required=True)

    # list
    list_p = wb_sub.add_parser("list", help="List saved words")
    list_p.set_defaults(func=wordbook_list)

    # add
    add_p = wb_sub.add_parser("add", help="Save a word")
    add_p.add_argument("word", help="Word to save")
    add_p.add_argument("definition", help="Short definition")
    add_p.set_defaults(func=wordbook_add)

    # remove
    rm_p = wb_sub.add_parser("remove", help="Remove a saved word")
    rm_p.add_argument("word", help="Word to remove")
    rm_p.set_defaults(func=wordbook_remove)


def wordbook_list(args):
    try:
        entries = client.list_wordbook(args.user)
        if not entries:
            print("Wordbook is empty.")
            return
        for e in entries:
            print(f"{e['word']:20} {e['short_definition']}")
    except Exception as e:
        print(f"✗ Error: {e}")
        sys.exit(1)


def wordbook_add(args):
    try:
        entry = client.add_to_wordbook(args.word, args.definition, args.user)
        print(f"✓ Saved: {entry['word']}")
    except Exception as e:
        print(f"✗ Error: {e}")
        sys.exit(1)


def wordbook_remove(args):
    try:
        client.remove_from_wordbook(args.word, args.user)
        print(f"✓ Removed: {args.word}")
    except Exception as e:
        print(f"✗ Error: {e}")
        sys.exit(1)
