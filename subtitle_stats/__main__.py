"""Package entry point for ``python -m subtitle_stats``.

Checks sys.argv for the ``--serve`` flag. If present, starts the HTTP
API with uvicorn. Otherwise, delegates to the CLI's main() function.
"""

import sys

if __name__ == "__main__":
    if "--serve" in sys.argv:
        from subtitle_stats.server.app import main as serve_main
        serve_main()
    else:
        from subtitle_stats.cli import main
        main()
