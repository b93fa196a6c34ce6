"""Money Manager domain layer: budgets, transactions, loans and goals."""

__version__ = "0.1.0"
