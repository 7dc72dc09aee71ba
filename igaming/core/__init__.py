"""Core mathematics and value types for the iGaming toolkit.

This package contains pure, host-agnostic building blocks:

- ``rounding``        — half-away-from-zero rounding shared by every formula
- ``errors``          — exception taxonomy
- ``validation``      — the ``ValidationResult`` value type
- ``rtp``             — return-to-player and house-edge math
- ``rollover``        — bonus wagering requirement tracking
- ``payouts``         — win, net win, loss and ROI arithmetic
- ``weighted_random`` — cumulative-weight outcome sampling
- ``currency_config`` — per-locale money formatting rules
- ``documents``       — CPF / CNPJ checksum validation and formatting

Nothing in this package imports from ``igaming.services`` or ``igaming.utils``.
All modules are side-effect-free and unit-testable in isolation.
"""
