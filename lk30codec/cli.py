"""
Command-line access to the LK30 codec.

    python -m lk30codec.cli decode 0101f43281
    python -m lk30codec.cli encode '{"func": 1, "wait": 300, "measurements": 10}'
"""
import argparse
import json
import sys

from lk30codec.errors import CodecError
from lk30codec.parsing.commands import command_from_dict, encode_downlink
from lk30codec.parsing.uplink import decode_uplink_b64, decode_uplink_hex


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="lk30codec", description="Decode LK30 uplinks and encode downlinks.")
    sub = parser.add_subparsers(dest="command", required=True)

    decode = sub.add_parser("decode", help="Decode an uplink payload.")
    decode.add_argument("payload", help="Uplink payload as hex (or base64 with --b64).")
    decode.add_argument("--b64", action="store_true", help="Treat the payload as base64.")

    encode = sub.add_parser("encode", help="Encode a downlink command.")
    encode.add_argument("data", help='Downlink object as JSON, e.g. \'{"func": 128}\'.')
    return parser


def run(args: argparse.Namespace) -> str:
    if args.command == "decode":
        message = decode_uplink_b64(args.payload) if args.b64 else decode_uplink_hex(args.payload)
        return json.dumps(message.as_dict())

    try:
        data = json.loads(args.data)
    except json.JSONDecodeError as exc:
        raise CodecError(f"Downlink data is not valid JSON: {exc}") from exc
    if not isinstance(data, dict):
        raise CodecError("Downlink data must be a JSON object")
    return encode_downlink(command_from_dict(data)).hex()


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    try:
        print(run(args))
    except CodecError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
