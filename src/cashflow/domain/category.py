"""Category domain service."""

import logging
from typing import Optional

from cashflow.database.base import Database
from cashflow.domain.classification import CategoryClassifier
from cashflow.domain.entities import Category, CategoryType
from cashflow.domain.errors import (
    ConflictError,
    NotFoundError,
    ValidationError,
    category_exists,
    category_not_found,
)

logger = logging.getLogger(__name__)

# Categories every ledger starts with
DEFAULT_CATEGORIES = [
    ("income", CategoryType.INCOME),
    ("fixed", CategoryType.EXPENSE),
    ("variable", CategoryType.EXPENSE),
    ("people", CategoryType.EXPENSE),
    ("taxes", CategoryType.EXPENSE),
    ("transfer", CategoryType.EXPENSE),
]


class CategoryService:
    """Service for managing category metadata."""

    def __init__(self, db: Database):
        """Initialize category service.

        Args:
            db: Database instance
        """
        self.db = db

    def create_category(
        self, name: str, category_type: CategoryType = CategoryType.EXPENSE
    ) -> int:
        """Create a category.

        Args:
            name: Category name
            category_type: Income or expense

        Returns:
            Category ID

        Raises:
            ValidationError: If the name is empty or the type is unknown
            ConflictError: If a category with this name exists
        """
        name = (name or "").strip()
        if not name:
            raise ValidationError("Category name cannot be empty")
        try:
            category_type = CategoryType(category_type)
        except ValueError:
            raise ValidationError(f"Unknown category type '{category_type}'")

        if self.db.get_category_by_name(name) is not None:
            raise ConflictError(category_exists(name))

        category_id = self.db.create_category(name=name, category_type=category_type)
        logger.info("Created category %s (%s)", name, category_type.value)
        return category_id

    def get_category(self, category_id: int) -> Optional[Category]:
        return self.db.get_category(category_id)

    def get_category_by_name(self, name: str) -> Optional[Category]:
        return self.db.get_category_by_name(name)

    def require_category_by_name(self, name: str) -> Category:
        """Get category by name or raise NotFoundError."""
        category = self.db.get_category_by_name(name)
        if category is None:
            raise NotFoundError(category_not_found(name))
        return category

    def list_categories(self) -> list[Category]:
        return self.db.list_categories()

    def init_default_categories(self) -> list[str]:
        """Create the default categories that do not exist yet.

        Returns:
            Names of the categories that were created
        """
        created = []
        for name, category_type in DEFAULT_CATEGORIES:
            if self.db.get_category_by_name(name) is None:
                self.db.create_category(name=name, category_type=category_type)
                created.append(name)
        return created

    def get_classifier(self, selected_filter: Optional[str] = None) -> CategoryClassifier:
        """Build a classifier over the current category metadata."""
        return CategoryClassifier(self.db.list_categories(), selected_filter)
