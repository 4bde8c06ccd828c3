"""Package entry point for ``python -m srt_normalizer``.

WHY: Users run the normalizer as ``python -m srt_normalizer input.srt``
for CLI mode, or ``python -m srt_normalizer --serve`` for the HTTP API.

HOW: Checks sys.argv for the ``--serve`` flag. If present, starts the
FastAPI app under uvicorn. Otherwise, delegates to the CLI's main().
"""

import sys

if __name__ == "__main__":
    if "--serve" in sys.argv:
        from srt_normalizer.server.app import run_api
        run_api()
    else:
        from srt_normalizer.cli import main
        main()
