"""Demo data loaded into a new store."""

from fintrack.domain.inventory import InventoryItem, ItemStatus
from fintrack.domain.ledger import BudgetCategory, Transaction
from fintrack.domain.models import CategoryName, Description, Money, TransactionId, TransactionType

SEED_TRANSACTIONS: tuple[Transaction, ...] = (
    Transaction(
        id=TransactionId("1"),
        description=Description("Client payment for website development"),
        amount=Money(250000),
        type=TransactionType.INCOME,
        category=CategoryName("Business Income"),
        date="2025-09-15",
    ),
    Transaction(
        id=TransactionId("2"),
        description=Description("Office rent for September"),
        amount=Money(80000),
        type=TransactionType.EXPENSE,
        category=CategoryName("Office Supplies"),
        date="2025-09-01",
    ),
    Transaction(
        id=TransactionId("3"),
        description=Description("Marketing campaign - Google Ads"),
        amount=Money(35000),
        type=TransactionType.EXPENSE,
        category=CategoryName("Marketing"),
        date="2025-09-10",
    ),
    Transaction(
        id=TransactionId("4"),
        description=Description("Product sales revenue"),
        amount=Money(120000),
        type=TransactionType.INCOME,
        category=CategoryName("Business Income"),
        date="2025-09-12",
    ),
    Transaction(
        id=TransactionId("5"),
        description=Description("Business insurance premium"),
        amount=Money(15000),
        type=TransactionType.EXPENSE,
        category=CategoryName("Professional Services"),
        date="2025-09-05",
    ),
)

SEED_CATEGORIES: tuple[BudgetCategory, ...] = (
    BudgetCategory("1", CategoryName("Equipment"), Money(200000), "#ff6b6b", TransactionType.EXPENSE),
    BudgetCategory("2", CategoryName("Inventory Purchases"), Money(150000), "#4ecdc4", TransactionType.EXPENSE),
    BudgetCategory("3", CategoryName("Office Supplies"), Money(50000), "#45b7d1", TransactionType.EXPENSE),
    BudgetCategory("4", CategoryName("Marketing"), Money(80000), "#f9ca24", TransactionType.EXPENSE),
    BudgetCategory("5", CategoryName("Professional Services"), Money(60000), "#6c5ce7", TransactionType.EXPENSE),
    BudgetCategory("6", CategoryName("Business Income"), Money(500000), "#10b981", TransactionType.INCOME),
)

SEED_INVENTORY: tuple[InventoryItem, ...] = (
    InventoryItem(
        id="1",
        name='Business Laptop - MacBook Pro 16"',
        status=ItemStatus.NOT_LISTED,
        date_bought="2025-08-15",
        purchase_price=Money(249900),
        mileage=25,
        notes="Upgraded from previous model, excellent condition",
        location_bought="Apple Store Downtown",
    ),
    InventoryItem(
        id="2",
        name="Office Desk - Standing Convertible",
        status=ItemStatus.ON_MARKET,
        date_bought="2025-07-20",
        purchase_price=Money(39900),
        mileage=15,
        notes="Height adjustable, barely used",
        location_bought="IKEA",
    ),
    InventoryItem(
        id="3",
        name="Professional Camera - Canon EOS R5",
        status=ItemStatus.SOLD,
        date_bought="2025-06-10",
        purchase_price=Money(389900),
        mileage=40,
        notes="Used for product photography, excellent condition",
        location_bought="B&H Photo",
        date_sold="2025-09-01",
        location_sold="eBay",
        sell_price=Money(320000),
    ),
)
