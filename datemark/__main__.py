"""Allow `python -m datemark`."""

from .cli.main import main

main()
