import argparse
from pathlib import Path
from urllib.parse import urlencode

import requests

GENERATE_PATH = "/api/v1/qr/generate"
PNG_SIGNATURE = b"\x89PNG\r\n\x1a\n"


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Ask a running QR code generator to render some text."
    )
    parser.add_argument("text", help="Text to encode in the QR code.")
    parser.add_argument(
        "--host",
        default="http://127.0.0.1:8080",
        help="Server host (default: http://127.0.0.1:8080).",
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=Path("qr.png"),
        help="Path to save the QR code image (default: qr.png).",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Print the request URL instead of sending the request.",
    )
    return parser.parse_args()


def build_url(host: str, text: str) -> str:
    return f"{host.rstrip('/')}{GENERATE_PATH}?{urlencode({'text': text})}"


def main() -> None:
    args = parse_args()
    url = build_url(args.host, args.text)

    if args.dry_run:
        print(f"POST {url}")
        return

    response = requests.post(url, timeout=10)

    print(f"Status: {response.status_code}")
    if not response.ok:
        print(response.text.strip())
    response.raise_for_status()

    if not response.content.startswith(PNG_SIGNATURE):
        raise SystemExit("Response is not a PNG image.")

    args.output.write_bytes(response.content)
    print(f"Saved {len(response.content)} bytes to {args.output.resolve()}")


if __name__ == "__main__":
    main()
