"""
Tests for the SQLAlchemy model <-> domain mapping (no database needed).
"""
from datetime import datetime, timezone
from decimal import Decimal

from domain.entities import Instant, Text, Transaction, User
from infrastructure.db.models import TransactionModel, UserModel

USER_ID = "5b1f0a6e-3c2d-4e8f-9a7b-1c2d3e4f5a6b"


def test_text_date_row_maps_to_text():
    row = TransactionModel(user_id=USER_ID, position=0, type="deposit", amount=Decimal("10.00"),
                           date_text="2024-01-05", occurred_at=None)
    assert row.to_domain() == Transaction(type="deposit", amount=Decimal("10.00"), date=Text("2024-01-05"))


def test_native_date_row_maps_to_instant():
    moment = datetime(2024, 1, 20, 9, 30, tzinfo=timezone.utc)
    row = TransactionModel(user_id=USER_ID, position=1, type="withdrawal", amount=Decimal("5.00"),
                           date_text=None, occurred_at=moment)
    assert row.to_domain().date == Instant(moment)


def test_row_without_any_date_maps_to_empty_text():
    row = TransactionModel(user_id=USER_ID, position=0, type="deposit", amount=Decimal("1.00"))
    assert row.to_domain().date == Text("")


def test_user_round_trip_keeps_transaction_order():
    moment = datetime(2024, 2, 1, tzinfo=timezone.utc)
    user = User(
        id=USER_ID,
        first_name="Ada",
        last_name="Lovelace",
        email="ada@example.com",
        balance=Decimal("99.90"),
        transactions=[
            Transaction(type="deposit", amount=Decimal("1"), date=Text("2024-03-01")),
            Transaction(type="deposit", amount=Decimal("2"), date=Instant(moment)),
        ],
    )
    model = UserModel.from_domain(user)

    assert [t.position for t in model.transactions_rel] == [0, 1]
    assert model.transactions_rel[0].date_text == "2024-03-01"
    assert model.transactions_rel[0].occurred_at is None
    assert model.transactions_rel[1].occurred_at == moment
    assert model.to_domain() == user
