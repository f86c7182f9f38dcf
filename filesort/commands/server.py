"""filesort server — start the FastAPI server with uvicorn."""
from __future__ import annotations

import sys


def cmd_server(args) -> None:
    try:
        import uvicorn
    except ImportError:
        print("filesort: uvicorn not installed. Run: pip install uvicorn[standard]", file=sys.stderr)
        sys.exit(1)

    host_bind = getattr(args, "host", "127.0.0.1")
    port = getattr(args, "port", 8766)
    reload = getattr(args, "reload", False)

    print(f"Starting filesort server on {host_bind}:{port}", flush=True)

    uvicorn.run(
        "server.main:app",
        host=host_bind,
        port=port,
        reload=reload,
    )
