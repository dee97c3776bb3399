"""Category management service."""

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import NotFoundError
from app.models.category import Category, CategoryType
from app.models.transaction import Transaction
from app.models.user import User
from app.schemas.category import CategoryCreate, CategoryUpdate

# Seeded for every new account
DEFAULT_CATEGORIES: list[tuple[str, CategoryType]] = [
    ("Salary", CategoryType.INCOME),
    ("Freelance", CategoryType.INCOME),
    ("Investments", CategoryType.INCOME),
    ("Rent", CategoryType.EXPENSE),
    ("Groceries", CategoryType.EXPENSE),
    ("Utilities", CategoryType.EXPENSE),
    ("Transportation", CategoryType.EXPENSE),
    ("Entertainment", CategoryType.EXPENSE),
    ("Healthcare", CategoryType.EXPENSE),
]


class CategoryService:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_categories(self, user: User) -> list[Category]:
        """List the user's categories in creation order."""
        result = await self.db.execute(
            select(Category).where(Category.user_id == user.id).order_by(Category.id)
        )
        return list(result.scalars().all())

    async def get_category(self, category_id: int, user: User) -> Category:
        return await self._get_user_category(category_id, user)

    async def create_category(self, data: CategoryCreate, user: User) -> Category:
        category = Category(user_id=user.id, name=data.name, type=data.type.value)
        self.db.add(category)
        await self.db.flush()
        await self.db.refresh(category)
        return category

    async def seed_defaults(self, user: User) -> list[Category]:
        """Create the default category set for a freshly registered user."""
        categories = [
            Category(user_id=user.id, name=name, type=category_type.value)
            for name, category_type in DEFAULT_CATEGORIES
        ]
        self.db.add_all(categories)
        await self.db.flush()
        return categories

    async def update_category(self, category_id: int, data: CategoryUpdate, user: User) -> Category:
        category = await self._get_user_category(category_id, user)
        update_data = data.model_dump(exclude_unset=True, exclude_none=True)
        if "type" in update_data:
            update_data["type"] = CategoryType(update_data["type"]).value
        for key, value in update_data.items():
            setattr(category, key, value)
        await self.db.flush()
        await self.db.refresh(category)
        return category

    async def delete_category(self, category_id: int, user: User) -> None:
        """Delete a category; its transactions keep existing without a category."""
        category = await self._get_user_category(category_id, user)
        await self.db.execute(
            update(Transaction)
            .where(Transaction.category_id == category.id)
            .values(category_id=None)
        )
        await self.db.delete(category)
        await self.db.flush()

    async def _get_user_category(self, category_id: int, user: User) -> Category:
        """Fetch a category owned by the user; another user's category reads as missing."""
        result = await self.db.execute(
            select(Category).where(Category.id == category_id, Category.user_id == user.id)
        )
        category = result.scalar_one_or_none()
        if not category:
            raise NotFoundError(detail=f"No category: {category_id}")
        return category
