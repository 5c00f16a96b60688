import enum
from dataclasses import dataclass


class TransactionKind(enum.Enum):
    """Direction of money flow."""
    INCOME = "income"
    EXPENSE = "expense"


class Category(enum.Enum):
    """
    Fixed set of transaction categories.

    Each member belongs to exactly one kind; expense categories are the only
    ones a budget can be set on.
    """
    # Expense
    FOOD = "food"
    TRANSPORT = "transport"
    ENTERTAINMENT = "entertainment"
    SHOPPING = "shopping"
    BILLS = "bills"
    HEALTHCARE = "healthcare"
    EDUCATION = "education"
    TRAVEL = "travel"
    OTHER_EXPENSE = "other-expense"

    # Income
    SALARY = "salary"
    FREELANCE = "freelance"
    BUSINESS = "business"
    INVESTMENT = "investment"
    OTHER_INCOME = "other-income"

    @property
    def info(self) -> "CategoryInfo":
        return CATEGORY_INFO[self]

    @property
    def kind(self) -> TransactionKind:
        return CATEGORY_INFO[self].kind


@dataclass(frozen=True)
class CategoryInfo:
    """Display metadata for a category."""
    name: str
    icon: str
    color: str
    kind: TransactionKind


CATEGORY_INFO: dict[Category, CategoryInfo] = {
    Category.FOOD: CategoryInfo("Food & Dining", "fas fa-utensils", "text-primary", TransactionKind.EXPENSE),
    Category.TRANSPORT: CategoryInfo("Transport", "fas fa-bus", "text-yellow-500", TransactionKind.EXPENSE),
    Category.ENTERTAINMENT: CategoryInfo("Entertainment", "fas fa-gamepad", "text-purple-500", TransactionKind.EXPENSE),
    Category.SHOPPING: CategoryInfo("Shopping", "fas fa-shopping-bag", "text-blue-500", TransactionKind.EXPENSE),
    Category.BILLS: CategoryInfo("Bills & Utilities", "fas fa-file-invoice-dollar", "text-red-500", TransactionKind.EXPENSE),
    Category.HEALTHCARE: CategoryInfo("Healthcare", "fas fa-heartbeat", "text-pink-500", TransactionKind.EXPENSE),
    Category.EDUCATION: CategoryInfo("Education", "fas fa-graduation-cap", "text-indigo-500", TransactionKind.EXPENSE),
    Category.TRAVEL: CategoryInfo("Travel", "fas fa-plane", "text-green-500", TransactionKind.EXPENSE),
    Category.OTHER_EXPENSE: CategoryInfo("Other", "fas fa-ellipsis-h", "text-purple-600", TransactionKind.EXPENSE),
    Category.SALARY: CategoryInfo("Salary", "fas fa-briefcase", "text-primary", TransactionKind.INCOME),
    Category.FREELANCE: CategoryInfo("Freelance", "fas fa-laptop", "text-blue-500", TransactionKind.INCOME),
    Category.BUSINESS: CategoryInfo("Business", "fas fa-building", "text-green-500", TransactionKind.INCOME),
    Category.INVESTMENT: CategoryInfo("Investment", "fas fa-chart-line", "text-purple-500", TransactionKind.INCOME),
    Category.OTHER_INCOME: CategoryInfo("Other", "fas fa-plus-circle", "text-purple-600", TransactionKind.INCOME),
}


def categories_for(kind: TransactionKind | None = None) -> list[Category]:
    """List categories in display order, optionally limited to one kind."""
    return [c for c in Category if kind is None or c.kind == kind]


class GoalIcon(enum.Enum):
    """Icons a savings goal can be shown with."""
    LAPTOP = "fas fa-laptop"
    CAR = "fas fa-car"
    HOUSE = "fas fa-home"
    TRAVEL = "fas fa-plane"
    EMERGENCY_FUND = "fas fa-piggy-bank"
    EDUCATION = "fas fa-graduation-cap"
    WEDDING = "fas fa-ring"
    PHONE = "fas fa-mobile-alt"
    CAMERA = "fas fa-camera"
    GENERAL = "fas fa-bullseye"

    @property
    def label(self) -> str:
        return GOAL_ICON_LABELS[self]


GOAL_ICON_LABELS: dict[GoalIcon, str] = {
    GoalIcon.LAPTOP: "Laptop",
    GoalIcon.CAR: "Car",
    GoalIcon.HOUSE: "House",
    GoalIcon.TRAVEL: "Travel",
    GoalIcon.EMERGENCY_FUND: "Emergency Fund",
    GoalIcon.EDUCATION: "Education",
    GoalIcon.WEDDING: "Wedding",
    GoalIcon.PHONE: "Phone",
    GoalIcon.CAMERA: "Camera",
    GoalIcon.GENERAL: "General Goal",
}

DEFAULT_GOAL_ICON = GoalIcon.GENERAL
