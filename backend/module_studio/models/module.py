from sqlalchemy import Column, Integer, Text, DateTime
from sqlalchemy.sql import func
from ..core.database import Base


class Module(Base):
    __tablename__ = "modules"

    id = Column(Integer, primary_key=True, index=True)
    prompt = Column(Text, nullable=False)
    en_name = Column(Text, nullable=False)
    en_description = Column(Text, nullable=True)
    en_input_placeholder = Column(Text, nullable=True)
    kn_name = Column(Text, nullable=False)
    kn_description = Column(Text, nullable=True)
    kn_input_placeholder = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
    updated_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())

    __table_args__ = (
        {"sqlite_autoincrement": True},
    )
