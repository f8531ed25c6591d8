from __future__ import annotations

import argparse
import os

from marybot.dashboard import create_app
from marybot.db import init_db


def main() -> None:
    parser = argparse.ArgumentParser(description="Run the read-only Mary dashboard.")
    parser.add_argument("--host", default=os.getenv("DASHBOARD_HOST", "127.0.0.1"))
    parser.add_argument("--port", type=int, default=int(os.getenv("DASHBOARD_PORT", "8082")))
    args = parser.parse_args()

    init_db()
    app = create_app()
    print(f"[dashboard] serving on http://{args.host}:{args.port}")
    app.run(host=args.host, port=args.port, debug=False)


if __name__ == "__main__":
    main()
