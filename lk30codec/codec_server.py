import argparse
import sys

import uvicorn

from lk30codec.codec_server_app import create_app, CodecServerSettings


class CodecServer:
    def __init__(self, settings: CodecServerSettings) -> None:
        self.settings = settings
        self.app = create_app(settings=self.settings)

    def start(self) -> None:
        uvicorn.run(
            self.app,
            host=self.settings.server_ip,
            port=self.settings.server_port,
            log_level=self.settings.log_level.lower(),
        )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Start the LK30 payload codec server.")
    parser.add_argument("--ip", type=str, default=None, help="IP address to bind the codec server to.")
    parser.add_argument("--port", type=int, default=None, help="Port to run the codec server on.")
    return parser


def settings_from_args(argv=None) -> CodecServerSettings:
    args = build_parser().parse_args(argv)
    overrides = {}
    if args.ip is not None:
        overrides["server_ip"] = args.ip
    if args.port is not None:
        overrides["server_port"] = args.port
    return CodecServerSettings(**overrides)


def main(argv=None):
    server = CodecServer(settings_from_args(argv))
    server.start()
    return 0


if __name__ == "__main__":
    sys.exit(main())
