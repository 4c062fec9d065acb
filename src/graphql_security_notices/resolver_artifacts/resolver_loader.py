"""Generated resolver template loading."""

from __future__ import annotations

from pathlib import Path

RESOLVER_BUILD_PATH = Path("build") / "resolvers"


def load_resolvers(api_resource_dir: Path | str) -> dict[str, str]:
    """Read generated resolver templates keyed by file name.

    A missing build output directory yields an empty mapping. Hidden entries
    and subdirectories are skipped. Undecodable bytes become U+FFFD.
    """
    resolver_directory = Path(api_resource_dir) / RESOLVER_BUILD_PATH
    if not resolver_directory.is_dir():
        return {}

    resolvers: dict[str, str] = {}
    for entry in resolver_directory.iterdir():
        if entry.name.startswith(".") or not entry.is_file():
            continue
        resolvers[entry.name] = entry.read_text(encoding="utf-8", errors="replace")
    return resolvers
