"""termlookup CLI entry point."""

from termlookup.cli.commands.lookup import lookup_cmd


def main() -> None:
    """Run the termlookup command."""
    lookup_cmd()


if __name__ == "__main__":
    main()
