from sqlalchemy import Column, Integer, Text, TIMESTAMP, ForeignKey, UniqueConstraint, Index, func
from sqlalchemy.orm import relationship

from .base import Base, new_id


class Application(Base):
    """
    A candidate's application to a job posting.

    match_score is the only column the matching engine writes.
    """
    __tablename__ = 'applications'

    id = Column(Text, primary_key=True, default=new_id)
    job_id = Column(Text, ForeignKey('job_postings.id', ondelete='CASCADE'), nullable=False)
    job_seeker_id = Column(Text, ForeignKey('users.id', ondelete='CASCADE'), nullable=False)

    status = Column(Text, nullable=False, default='submitted')
    match_score = Column(Integer)

    applied_at = Column(TIMESTAMP(timezone=True), nullable=False, server_default=func.now())
    updated_at = Column(TIMESTAMP(timezone=True), nullable=False, server_default=func.now(), onupdate=func.now())

    job = relationship("JobPosting", back_populates="applications")

    __table_args__ = (
        UniqueConstraint('job_id', 'job_seeker_id', name='uq_application_job_seeker'),
        Index('idx_applications_job_seeker', 'job_seeker_id'),
    )
