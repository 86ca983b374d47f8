"""Allow ``python -m multitranspile``"""

from multitranspile.cli.main import main

main()
