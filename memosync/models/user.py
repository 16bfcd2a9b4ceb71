"""ORM model for users, including externally hosted (federated) accounts."""

from sqlalchemy import BigInteger, Column, Integer, String

from memosync.models.base import Base, now_ts


class User(Base):
    """
    Persisted user row.

    role: HOST, ADMIN, USER or EXTERNAL. For EXTERNAL users, username holds the
    remote service address plus /u/<remote username>.
    """

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    row_status = Column(String(32), nullable=False, default="NORMAL", index=True)
    created_ts = Column(BigInteger, nullable=False, default=now_ts)
    updated_ts = Column(BigInteger, nullable=False, default=now_ts)
    username = Column(String(1024), nullable=False, unique=True, index=True)
    role = Column(String(32), nullable=False, default="USER", index=True)
    email = Column(String(255), nullable=False, default="")
    nickname = Column(String(255), nullable=False, default="")
    password_hash = Column(String(255), nullable=False, default="")
    avatar_url = Column(String(2048), nullable=False, default="")
