"""Run the Form Mapper API.

Usage:
    form-mapper                      # Serve on 127.0.0.1:8000
    form-mapper --port 9000 --reload
"""

import argparse

import uvicorn


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Serve the Form Mapper API")
    parser.add_argument("--host", default="127.0.0.1", help="Interface to bind")
    parser.add_argument("--port", type=int, default=8000, help="Port to listen on")
    parser.add_argument("--reload", action="store_true", help="Reload on code changes")

    args = parser.parse_args(argv)

    uvicorn.run("formmapper.main:app", host=args.host, port=args.port, reload=args.reload)


if __name__ == "__main__":
    main()
