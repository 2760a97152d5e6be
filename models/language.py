from sqlalchemy import Column, Integer, String, ForeignKey
from core.database import Base


class Language(Base):
    __tablename__ = "languages"

    id = Column(Integer, primary_key=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    name = Column(String(100), nullable=False)
    # first word of the chain; words and languages reference each other
    head = Column(
        Integer,
        ForeignKey("words.id", ondelete="SET NULL", use_alter=True, name="fk_languages_head_words"),
        nullable=True,
    )
    total_score = Column(Integer, nullable=False, default=0, server_default="0")
