"""Cycle-stepped 6502 CPU emulator for NES program images."""

__version__ = "0.1.0"