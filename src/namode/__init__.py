"""
namode: ambiguity-aware statistical mode

Finds the most frequent value(s) of a sequence that may contain missing
entries, and says so explicitly when the missing entries make the answer
unknowable.

ARCHITECTURAL GUARANTEE:
------------------------
Every public operation is a pure function of its input and flags:
    - No global configuration
    - No state kept between calls
    - An undetermined mode is a normal return value, never an exception

Entry points live in `namode.estimator`; `namode.report` and
`namode.serialization` build on them.
"""

import logging

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())
