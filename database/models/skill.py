from sqlalchemy import Column, Text

from .base import Base, new_id


class Skill(Base):
    __tablename__ = 'skills'

    id = Column(Text, primary_key=True, default=new_id)
    name = Column(Text, nullable=False, unique=True)
    category = Column(Text)
