try:
    from cli.app import run
except ModuleNotFoundError:
    # Fallback: ensure project root is on sys.path when invoked via console_script
    import os
    import sys

    sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))
    from cli.app import run


def main():
    """Entry point for the stackit CLI. Delegates to cli.app:run."""
    raise SystemExit(run())


if __name__ == "__main__":
    main()
