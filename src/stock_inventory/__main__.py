"""Allow ``python -m stock_inventory``."""

from stock_inventory.cli import main

main()
