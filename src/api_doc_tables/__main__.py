"""Module entry point for `python -m api_doc_tables`."""

from .cli import main

if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
