import sys
from pathlib import Path

# Ensure 'src' is in sys.path
if __name__ == "__main__":
    sys.path.insert(0, str(Path(__file__).resolve().parent.parent))


def main():
    """
    Console entry point.
    CommandErrors are already turned into exit codes; anything else is a crash.
    """
    from rn_toolbox.cli.output import error

    try:
        from rn_toolbox.cli.commands import cli
        cli()
    except Exception as e:
        error(f"Critical Error in CLI: {e}")


if __name__ == "__main__":
    main()
