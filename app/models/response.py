from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy import Integer, Text, DateTime, ForeignKey, UniqueConstraint
from datetime import datetime
from app.db.base import Base
from app.models.question import Question
from app.models.user import User


class Response(Base):
    __tablename__ = "responses"
    __table_args__ = (
        UniqueConstraint("user_id", "question_id", name="uq_responses_user_question"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("users.id"), nullable=False)
    question_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("questions.id"), nullable=False)
    answer: Mapped[str] = mapped_column(Text, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime, default=datetime.now, nullable=False)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime, default=datetime.now, onupdate=datetime.now, nullable=False)

    user: Mapped[User] = relationship(back_populates="responses")
    question: Mapped[Question] = relationship()
