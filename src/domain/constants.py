"""Domain constants for the day book."""

NET_SALES = "Net Sales"
PURCHASE_RETURN = "Purchase Return"
PAYMENT_IN = "Payment In"
INCOME = "Income"
PURCHASE = "Purchase"
SALES_RETURN = "Sales Return"
PAYMENT_OUT = "Payment Out"
EXPENSES = "Expenses"

RECEIPT_CATEGORIES = (NET_SALES, PURCHASE_RETURN, PAYMENT_IN, INCOME)
PAYMENT_CATEGORIES = (PURCHASE, SALES_RETURN, PAYMENT_OUT, EXPENSES)
DAY_BOOK_CATEGORIES = RECEIPT_CATEGORIES + PAYMENT_CATEGORIES

ORDER_STATUS_COMPLETED = "completed"
BILL_STATUS_PAID = "paid"
PURCHASE_EXPENSE_CATEGORY = "purchase"

ORDER_DATE_FIELDS = ("order_date", "created_at")
EXPENSE_DATE_FIELDS = ("date", "created_at")
BILL_DATE_FIELDS = ("bill_date", "created_at")

ACTION_READ = "read"
ACTION_WRITE = "write"
ACTION_READ_WRITE = "read_write"
PERMISSION_ACTIONS = (ACTION_READ, ACTION_WRITE, ACTION_READ_WRITE)

ROLE_ADMIN = "admin"
NOTIFICATION_ROLES = ("admin", "supervisor", "manager")

DAY_BOOK_RESOURCE = "day_book"


__all__ = [
    "NET_SALES",
    "PURCHASE_RETURN",
    "PAYMENT_IN",
    "INCOME",
    "PURCHASE",
    "SALES_RETURN",
    "PAYMENT_OUT",
    "EXPENSES",
    "RECEIPT_CATEGORIES",
    "PAYMENT_CATEGORIES",
    "DAY_BOOK_CATEGORIES",
    "ORDER_STATUS_COMPLETED",
    "BILL_STATUS_PAID",
    "PURCHASE_EXPENSE_CATEGORY",
    "ORDER_DATE_FIELDS",
    "EXPENSE_DATE_FIELDS",
    "BILL_DATE_FIELDS",
    "ACTION_READ",
    "ACTION_WRITE",
    "ACTION_READ_WRITE",
    "PERMISSION_ACTIONS",
    "ROLE_ADMIN",
    "NOTIFICATION_ROLES",
    "DAY_BOOK_RESOURCE",
]
