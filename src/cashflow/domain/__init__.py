"""Domain layer for cashflow application.

Services are resolved lazily so the database layer can import entities
without pulling the services (and the database layer itself) back in.
"""

_SERVICES = {
    "TransactionService": "cashflow.domain.transaction",
    "CategoryService": "cashflow.domain.category",
    "SummaryService": "cashflow.domain.summary",
}

__all__ = list(_SERVICES)


def __getattr__(name):
    if name in _SERVICES:
        import importlib

        return getattr(importlib.import_module(_SERVICES[name]), name)
    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")
