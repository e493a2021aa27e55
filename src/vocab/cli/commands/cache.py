"""
Cache maintenance commands.
"""

import sys
from vocab.cli import client


def add_subparser(subparsers):
    parser = subparsers.add_parser("cache", help="Dictionary cache maintenance")
    cache_sub = parser.add_subparsers(dest="cache_command", required=True)

    purge_p = cache_sub.add_parser("purge", help="Delete expired cache records")
    purge_p.set_defaults(func=cache_purge)


def cache_purge(args):
    try:
        result = client.purge_cache()
        print(f"✓ Purged {result['purged']} expired records")
    except Exception as e:
        print(f"✗ Error: {e}")
        sys.exit(1)
