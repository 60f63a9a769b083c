"""Category classification and amount signing."""

from dataclasses import dataclass
from decimal import Decimal
from typing import Iterable, Optional

from cashflow.domain.entities import CategoryType

INCOME_CATEGORY = "income"
INCOME_FILTER = "income"


@dataclass(frozen=True)
class Classification:
    """Result of classifying a category name."""

    is_income: bool


def classify(
    category_name: str,
    categories: Iterable = (),
    selected_filter: Optional[str] = None,
) -> Classification:
    """Decide whether a category represents income.

    Resolution order:
    1. Category metadata: income iff the named category's type is income.
    2. The literal category name "income".
    3. The active filter being the income filter.

    Anything else is an expense. Unknown categories never raise.

    Args:
        category_name: Category name of the transaction
        categories: Category metadata entries with ``name`` and ``category_type``
        selected_filter: Filter key active when the transaction was entered

    Returns:
        Classification for the category
    """
    for category in categories:
        if category.name == category_name:
            return Classification(
                is_income=CategoryType(category.category_type) == CategoryType.INCOME
            )

    if category_name == INCOME_CATEGORY:
        return Classification(is_income=True)

    return Classification(is_income=selected_filter == INCOME_FILTER)


def signed_amount(raw_amount: Decimal, is_income: bool) -> Decimal:
    """Return the amount signed positive for income, negative for expenses."""
    amount = abs(Decimal(raw_amount))
    return amount if is_income else -amount


class CategoryClassifier:
    """Classifier bound to a snapshot of category metadata."""

    def __init__(self, categories: Iterable = (), selected_filter: Optional[str] = None):
        """Initialize classifier.

        Args:
            categories: Category metadata entries; copied, never mutated
            selected_filter: Filter key used as the last fallback
        """
        self.categories = tuple(categories)
        self.selected_filter = selected_filter

    def classify(self, category_name: str) -> Classification:
        return classify(category_name, self.categories, self.selected_filter)

    def sign(self, raw_amount: Decimal, category_name: str) -> Decimal:
        return signed_amount(raw_amount, self.classify(category_name).is_income)
