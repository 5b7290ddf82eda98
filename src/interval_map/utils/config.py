"""
Global runtime flags.
"""

from dataclasses import dataclass


@dataclass
class IMConfig:
    debug: bool = False
    # Re-validate canonical form after every assign (slow; for tests).
    check_invariants: bool = False


config = IMConfig()
