import argparse
import os
import sys

from vite_port import default_env_path, read_env_file, resolve_vite_port
from wait_http import DEFAULT_INTERVAL, is_ready_status, wait_http

DEFAULT_TIMEOUT = 300  # 5 minutes


def build_url(port: str) -> str:
    return f"http://127.0.0.1:{port}/"


def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="Wait for the Vite dev server to answer on VITE_PORT")
    ap.add_argument("--timeout", type=float, default=DEFAULT_TIMEOUT)
    ap.add_argument("--interval", type=float, default=DEFAULT_INTERVAL)
    ap.add_argument("--env-file", default=None, help="defaults to the project .env.local, else ./.env.local")
    args = ap.parse_args(argv)

    env_file = args.env_file or default_env_path()
    port = resolve_vite_port(os.environ, read_env_file(env_file))
    url = build_url(port)

    print(f"[wait-on-vite] Waiting for: {url}")
    try:
        wait_http(url, timeout=args.timeout, validate_status=is_ready_status, interval=args.interval)
    except Exception as e:
        print(f"[wait-on-vite] Failed to detect Vite dev server: {e}", file=sys.stderr)
        return 1

    print(f"[wait-on-vite] Vite dev server is ready on port {port}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
