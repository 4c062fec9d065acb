"""Module entry point for `python -m graphql_security_notices`."""

from .cli import main

if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
