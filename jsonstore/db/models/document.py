from sqlalchemy import Column, String, DateTime, JSON

from jsonstore.core.db import Base


class Document(Base):
    __tablename__ = "documents"

    id = Column(String(36), primary_key=True)
    # Владелец: id аккаунта или "global" для административного ключа
    user_id = Column(String(36), index=True, nullable=False)
    name = Column(String(255), nullable=False)
    data = Column(JSON, nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False)
    updated_at = Column(DateTime(timezone=True), nullable=False)
