#!/usr/bin/env python3
"""
Exceptions raised by the simulator.

Arithmetic failures use the built-in ZeroDivisionError (an ArithmeticError);
only backend failures get their own type.
"""


class SimulationError(Exception):
    """Base class for simulator errors."""


class BackendInitError(SimulationError):
    """The windowing backend could not create a window or renderer."""
