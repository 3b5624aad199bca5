# Re-export sequence components
from .core import Closed, HalfOpen, Interval, TerminationRule, Unbounded
from .generator import (
    DateSequence,
    make_closed,
    make_half_open,
    make_unbounded,
)
