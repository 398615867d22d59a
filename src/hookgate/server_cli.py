"""CLI entry point for the hookgate server."""

import argparse
import os

from hookgate.config import settings


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="hookgate-server",
        description="hookgate: verify Zoom webhooks and relay them downstream",
    )
    parser.add_argument("--host", default=settings.host, help=f"Bind host (default: {settings.host})")
    parser.add_argument("--port", type=int, default=settings.port, help=f"Bind port (default: {settings.port})")
    parser.add_argument(
        "--local",
        action="store_true",
        help="Local dev mode: coloured console logs instead of JSON",
    )
    args = parser.parse_args(argv)

    if args.local:
        os.environ["HOOKGATE_LOCAL"] = "1"

    import uvicorn

    uvicorn.run("hookgate.main:app", host=args.host, port=args.port, log_config=None)


if __name__ == "__main__":
    main()
