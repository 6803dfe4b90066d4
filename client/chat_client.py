"""Simple HTTP client for manual testing."""

from __future__ import annotations

import argparse
import logging
import time

import httpx

DEFAULT_URL = "http://127.0.0.1:8000/api/chat"


def send_message(url: str, message: str, timeout: float) -> dict:
    """Post ``message`` to the chat endpoint and return the decoded JSON body."""

    logger = logging.getLogger("chat_client")
    start = time.perf_counter()

    response = httpx.post(url, json={"message": message}, timeout=timeout)
    data = response.json()

    elapsed = time.perf_counter() - start
    logger.info("Received HTTP %d in %.2fs", response.status_code, elapsed)

    if response.status_code != 200:
        logger.error("Received error body: %s", data.get("error"))
        raise SystemExit(1)

    return data


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Test client for the Groq chat relay.")
    parser.add_argument("--url", default=DEFAULT_URL, help="Endpoint URL (default: %(default)s)")
    parser.add_argument("--message", required=True, help="Message to send.")
    parser.add_argument(
        "--timeout", type=float, default=60.0, help="Seconds to wait for the reply."
    )
    parser.add_argument("--log-level", default="INFO", help="Logging level.")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.INFO))
    data = send_message(args.url, args.message, args.timeout)
    print(data["response"])
    if data.get("usage"):
        logging.getLogger("chat_client").info("Usage: %s", data["usage"])


if __name__ == "__main__":  # pragma: no cover
    main()
