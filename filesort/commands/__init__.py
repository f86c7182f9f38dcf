import sys
from filesort.config import config_path, get_server_url
from filesort.sample import demo_filenames


def print_server_info() -> None:
    """Print version and server URL to stderr (TTY only)."""
    if sys.stderr.isatty():
        print(f"filesort {get_version()}", file=sys.stderr)
        print(f"  → {get_server_url()}", file=sys.stderr)


def print_config_hint() -> None:
    """Point at the config file when a remote call fails and none exists yet."""
    path = config_path()
    if not path.exists():
        print(
            f"filesort: no config at {path}; set [server] url there or FILESORT_SERVER",
            file=sys.stderr,
        )


def read_names(args) -> list[str]:
    """
    Collect input filenames: positional names, then --from FILE ('-' = stdin),
    then --demo. Blank lines in list files are skipped; names are otherwise
    passed through unmodified. Raises OSError if the list file can't be read.
    """
    names = list(getattr(args, "names", None) or [])

    source = getattr(args, "from_file", None)
    if source:
        if source == "-":
            lines = sys.stdin.read().splitlines()
        else:
            with open(source, encoding="utf-8") as f:
                lines = f.read().splitlines()
        names.extend(line for line in lines if line.strip())

    if getattr(args, "demo", False):
        names.extend(demo_filenames())

    return names


def get_version() -> str:
    # Prefer pyproject.toml so editable installs always reflect the latest version
    try:
        import tomllib
        from pathlib import Path
        pyproject = Path(__file__).resolve().parent.parent.parent / "pyproject.toml"
        with open(pyproject, "rb") as f:
            return tomllib.load(f)["project"]["version"]
    except Exception:
        pass
    try:
        from importlib.metadata import version
        return version("filesort")
    except Exception:
        return "unknown"
