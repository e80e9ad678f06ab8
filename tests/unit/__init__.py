"""
Unit tests for Courier, laid out like the courier package.

Each module exercises one source module in isolation; the network and
clocks are replaced with mocks.
"""
