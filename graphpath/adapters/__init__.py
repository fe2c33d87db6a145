"""Adapters layer - Concrete implementations of ports.

This module contains implementations of the port interfaces,
connecting the query core to host graph storage (in memory, CSV files).
"""
