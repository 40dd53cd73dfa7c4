# backend/app/models/transaction.py
from sqlalchemy import Column, String, Float, DateTime
from backend.app.db.base import Base, new_uuid, utcnow

TRANSACTION_DEPOSIT = "deposit"
TRANSACTION_WITHDRAWAL = "withdrawal"

STATUS_PENDING = "pending"
STATUS_COMPLETED = "completed"
STATUS_REJECTED = "rejected"


class CryptoTransaction(Base):
    __tablename__ = "crypto_transactions"

    id = Column(String(36), primary_key=True, default=new_uuid)
    user_id = Column(String(36), index=True, nullable=False)

    # deposit / withdrawal
    type = Column(String(20), nullable=False)
    crypto_type = Column(String(10), nullable=False)
    amount = Column(Float, nullable=False)

    # pending / completed / rejected - the column takes any label
    status = Column(String(20), nullable=False, default=STATUS_PENDING, index=True)

    reference = Column(String(64), nullable=False)
    user_email = Column(String(255), nullable=True)
    wallet_address = Column(String(255), nullable=True)

    created_at = Column(DateTime(timezone=True), default=utcnow, index=True)
    processed_at = Column(DateTime(timezone=True), nullable=True)
