"""tag-spine command-line interface (``tagspine``)."""

from tagspine.cli.app import app

__all__ = ["app"]
