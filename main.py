"""Main entry point for the study-companion CLI."""

from study_companion.cli.app import app


def main():
    """Run the CLI application."""
    app()


if __name__ == "__main__":
    main()
