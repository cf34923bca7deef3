#!/usr/bin/env python3
"""
Wallet CLI: read/write credentials in a MongoDB wallet.

Usage:
  python -m wallet_cli list
  python -m wallet_cli read <name>
  python -m wallet_cli write <name> <value>
  python -m wallet_cli write <name> --file <path>
  python -m wallet_cli delete <name>
  python -m wallet_cli dump

Options:
  --uri <uri>            MongoDB connection string (or MONGODB_WALLET_URI)
  --collection <name>    Collection name (or MONGODB_WALLET_COLLECTION)
  --prefix <prefix>      Wallet namePrefix (or MONGODB_WALLET_PREFIX)
"""
import argparse
import asyncio
import base64
import json
import sys
from pathlib import Path
from typing import Optional

# Allow running from the repo root without installing.
sys.path.insert(0, str(Path(__file__).resolve().parent))

from wallet import MongoDBWallet, load_config


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Wallet CLI - read/write credentials stored in MongoDB",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Commands:
  list                  List credential names
  read <name>           Print one credential (binary values are written raw)
  write <name> <value>  Store a text credential
  delete <name>         Delete one credential
  dump                  Print all credentials as JSON (binary as base64)
        """,
    )
    parser.add_argument("--uri", default=None, help="MongoDB connection string")
    parser.add_argument("--collection", default=None, help="Collection name")
    parser.add_argument("--prefix", default=None, help="Wallet namePrefix")
    parser.add_argument("--file", default=None, help="write: store this file's bytes")
    parser.add_argument(
        "command",
        nargs="?",
        choices=["list", "read", "write", "delete", "dump"],
        help="Command",
    )
    parser.add_argument("args", nargs="*", help="Name and/or value")
    return parser


async def run(wallet: MongoDBWallet, cmd: str, args: list[str], file: Optional[str] = None) -> int:
    if cmd == "list":
        for name in sorted(await wallet.list_names()):
            print(name)

    elif cmd == "read":
        if not args:
            print("Usage: read <name>", file=sys.stderr)
            return 1
        name = args[0]
        if not await wallet.contains(name):
            print(f"Key not found: {name}", file=sys.stderr)
            return 1
        value = await wallet.get(name)
        if isinstance(value, bytes):
            sys.stdout.buffer.write(value)
            sys.stdout.buffer.flush()
        else:
            print(value)

    elif cmd == "write":
        if file is not None:
            if len(args) != 1:
                print("Usage: write <name> --file <path>", file=sys.stderr)
                return 1
            name, value = args[0], Path(file).read_bytes()
        else:
            if len(args) < 2:
                print("Usage: write <name> <value>", file=sys.stderr)
                return 1
            name, value = args[0], " ".join(args[1:]).strip().strip("'\"")
        await wallet.put(name, value)
        print(f"Written: {name}")

    elif cmd == "delete":
        if not args:
            print("Usage: delete <name>", file=sys.stderr)
            return 1
        name = args[0]
        if not await wallet.contains(name):
            print(f"Key not found: {name}", file=sys.stderr)
            return 1
        await wallet.remove(name)
        print(f"Deleted: {name}")

    elif cmd == "dump":
        data = await wallet.get_all()
        out = {
            k: {"base64": base64.b64encode(v).decode("ascii")} if isinstance(v, bytes) else v
            for k, v in data.items()
        }
        print(json.dumps(out, indent=2, ensure_ascii=False, sort_keys=True))

    return 0


async def _main(parsed: argparse.Namespace) -> int:
    config = load_config(
        uri=parsed.uri,
        collection_name=parsed.collection,
        name_prefix=parsed.prefix,
    )
    wallet = MongoDBWallet(config)
    try:
        return await run(wallet, parsed.command, parsed.args or [], parsed.file)
    finally:
        await wallet.close()


def main(argv: Optional[list[str]] = None) -> None:
    parser = build_parser()
    parsed = parser.parse_args(argv)

    if not parsed.command:
        parser.print_help()
        sys.exit(0)

    try:
        code = asyncio.run(_main(parsed))
    except Exception as e:
        print(str(e), file=sys.stderr)
        sys.exit(1)
    sys.exit(code)


if __name__ == "__main__":
    main()
