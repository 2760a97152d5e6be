from sqlalchemy import BigInteger, Column, Integer, String, ForeignKey
from core.database import Base


class Word(Base):
    __tablename__ = "words"

    id = Column(Integer, primary_key=True)
    language_id = Column(Integer, ForeignKey("languages.id", ondelete="CASCADE"), nullable=False, index=True)
    original = Column(String(255), nullable=False)
    translation = Column(String(255), nullable=False)
    next = Column(Integer, ForeignKey("words.id", ondelete="SET NULL"), nullable=True)
    memory_value = Column(BigInteger, nullable=False, default=1, server_default="1")
    correct_count = Column(Integer, nullable=False, default=0, server_default="0")
    incorrect_count = Column(Integer, nullable=False, default=0, server_default="0")
