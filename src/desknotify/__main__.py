"""Allow running the desknotify CLI directly: python -m desknotify"""
from desknotify.cli.main import cli

if __name__ == "__main__":
    cli()
