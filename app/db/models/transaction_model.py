from sqlalchemy import Column, Float, Integer, MetaData, Table, Text

metadata = MetaData()


# Core transaction record stored in SQLite.
transactions = Table(
    "transactions",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("type", Text),               # "income" | "expense", not enforced
    Column("category", Text),
    Column("amount", Float),
    Column("date", Text),               # free-form, no format validation
    Column("description", Text),
    sqlite_autoincrement=True,
)

# Columns a client may set on create / update
MUTABLE_FIELDS = ("type", "category", "amount", "date", "description")
