"""
Simulator Tests

Tests for the building router, the elevator state machine, the
immutable reports and the SimPy tick infrastructure.
"""
