"""iGaming calculation and validation utilities.

Layout:

- ``igaming.core``     — pure formulas (RTP, rollover, payouts, weighted
  random, CPF/CNPJ checksums, currency rules)
- ``igaming.services`` — bet validation and ID generation, configured from
  the environment
- ``igaming.utils``    — money string rendering
"""

__version__ = "1.0.0"
