"""
Look up a word via the API.
"""

import json
import sys

from rich import print_json
from rich.console import Console
from rich.markup import escape

from vocab.cli import client


console = Console()


def add_subparser(subparsers):
    parser = subparsers.add_parser("lookup", help="Look up a word")
    parser.add_argument("word", help="Word to look up")
    parser.add_argument("--user", default="default", help="Wordbook user id")
    parser.add_argument("--json", action="store_true", help="Print the raw entry as JSON")
    parser.set_defaults(func=run)


def run(args):
    try:
        result = client.lookup(args.word, user_id=args.user)
    except Exception as e:
        print(f"✗ Error: {e}")
        sys.exit(1)

    entry = result["entry"]
    if args.json:
        print_json(json.dumps(entry))
        return

    marker = " [green]★ in wordbook[/green]" if result["in_wordbook"] else ""
    source = "cache" if result.get("cached") else "api"
    console.print(f"[bold]{escape(entry['word'])}[/bold]{marker}  [dim]({source})[/dim]")

    phonetics = [p["text"] for p in entry["phonetics"] if p.get("text")]
    if phonetics:
        console.print("  " + escape("  ".join(phonetics)))

    for meaning in entry["meanings"]:
        console.print(f"\n[italic]{escape(meaning['partOfSpeech'])}[/italic]")
        for i, d in enumerate(meaning["definitions"], 1):
            console.print(f"  {i}. {escape(d['definition'])}")
            if d.get("example"):
                console.print(f"     [dim]\"{escape(d['example'])}\"[/dim]")
        if meaning["synonyms"]:
            console.print(f"  synonyms: {escape(', '.join(meaning['synonyms']))}")

    if entry.get("sourceUrl"):
        console.print(f"\n[dim]{escape(entry['sourceUrl'])}[/dim]")
