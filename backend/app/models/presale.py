"""
Tortoise ORM models for the presale site.

These models track:
- Presale progress (amount raised against the supply goal, current stage)
- Purchase transactions submitted by wallets
"""

from tortoise import fields, models
from enum import Enum


class TransactionStatus(str, Enum):
    """Transaction status."""
    PENDING = "pending"
    CONFIRMED = "confirmed"
    FAILED = "failed"


class PresaleData(models.Model):
    """
    Snapshot of presale progress.

    The most recently updated row is the current state; a default row is
    inserted on first read when the table is empty.
    """
    id = fields.UUIDField(primary_key=True)

    # Progress
    total_raised = fields.DecimalField(max_digits=18, decimal_places=2, default=0)
    total_supply = fields.DecimalField(max_digits=18, decimal_places=2, default=1000000)
    current_rate = fields.DecimalField(max_digits=18, decimal_places=8, default=47)

    # Stage
    stage_end_time = fields.DatetimeField()
    is_active = fields.BooleanField(default=True)

    updated_at = fields.DatetimeField(auto_now=True)

    class Meta:
        table = "presale_data"


class Transaction(models.Model):
    """A token purchase recorded for a wallet."""
    id = fields.UUIDField(primary_key=True)

    wallet_address = fields.CharField(max_length=128, db_index=True)
    currency = fields.CharField(max_length=20)

    # Amount paid in `currency` and tokens received
    pay_amount = fields.DecimalField(max_digits=18, decimal_places=8)
    receive_amount = fields.DecimalField(max_digits=18, decimal_places=2)

    tx_hash = fields.TextField(null=True)
    status = fields.CharEnumField(TransactionStatus, max_length=20, default=TransactionStatus.PENDING)
    referral_code = fields.TextField(null=True)

    created_at = fields.DatetimeField(auto_now_add=True)

    class Meta:
        table = "transactions"
