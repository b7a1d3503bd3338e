"""Allow running FlightCalc with ``python -m flightcalc``."""

import sys

from flightcalc.cli.main import main

sys.exit(main())
