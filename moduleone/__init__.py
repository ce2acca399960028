"""Console exercises: a megaphone, an eight-slot phone book and an account ledger."""

__version__ = "0.1.0"