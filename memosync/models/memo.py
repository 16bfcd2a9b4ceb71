"""ORM model for memos (local posts and posts ingested from remote services)."""

from sqlalchemy import BigInteger, Column, ForeignKey, Integer, String, Text

from memosync.models.base import Base, now_ts


class Memo(Base):
    """Persisted memo row. visibility: PRIVATE, PROTECTED or PUBLIC."""

    __tablename__ = "memos"

    id = Column(Integer, primary_key=True, autoincrement=True)
    creator_id = Column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    created_ts = Column(BigInteger, nullable=False, default=now_ts)
    updated_ts = Column(BigInteger, nullable=False, default=now_ts)
    row_status = Column(String(32), nullable=False, default="NORMAL")
    content = Column(Text, nullable=False, default="")
    visibility = Column(String(32), nullable=False, default="PRIVATE")
