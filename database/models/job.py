from sqlalchemy import Column, Integer, Text, TIMESTAMP, ForeignKey, Boolean, Numeric, UniqueConstraint, Index, func
from sqlalchemy.orm import relationship

from .base import Base, new_id


class Company(Base):
    __tablename__ = 'companies'

    id = Column(Text, primary_key=True, default=new_id)
    name = Column(Text, nullable=False)
    logo_url = Column(Text)
    is_verified = Column(Boolean, nullable=False, default=False)

    jobs = relationship("JobPosting", back_populates="company")


class JobPosting(Base):
    __tablename__ = 'job_postings'

    id = Column(Text, primary_key=True, default=new_id)
    company_id = Column(Text, ForeignKey('companies.id', ondelete='SET NULL'), nullable=True)
    recruiter_id = Column(Text, ForeignKey('users.id', ondelete='SET NULL'), nullable=True)

    title = Column(Text, nullable=False)
    status = Column(Text, nullable=False, default='active')  # draft|active|closed|expired

    experience_level = Column(Text)  # entry|mid|senior|executive
    employment_type = Column(Text)  # full_time|part_time|contract|internship
    education_requirements = Column(Text)

    salary_min = Column(Numeric)
    salary_max = Column(Numeric)

    location_city = Column(Text)
    location_state = Column(Text)
    is_remote = Column(Boolean, nullable=False, default=False)

    posted_date = Column(TIMESTAMP(timezone=True), nullable=False, server_default=func.now())
    application_deadline = Column(TIMESTAMP(timezone=True))

    company = relationship("Company", back_populates="jobs")
    skills = relationship("JobSkill", back_populates="job", cascade="all, delete-orphan")
    applications = relationship("Application", back_populates="job", cascade="all, delete-orphan")

    __table_args__ = (
        Index('idx_job_postings_status', 'status'),
        Index('idx_job_postings_posted', 'posted_date'),
    )


class JobSkill(Base):
    """
    A skill requirement attached to a job posting.
    """
    __tablename__ = 'job_skills'

    id = Column(Text, primary_key=True, default=new_id)
    job_id = Column(Text, ForeignKey('job_postings.id', ondelete='CASCADE'), nullable=False)
    skill_id = Column(Text, ForeignKey('skills.id', ondelete='CASCADE'), nullable=False)
    is_required = Column(Boolean, nullable=False, default=True)
    min_years_required = Column(Integer, nullable=False, default=0)

    job = relationship("JobPosting", back_populates="skills")

    __table_args__ = (
        UniqueConstraint('job_id', 'skill_id', name='uq_job_skill'),
        Index('idx_job_skills_job', 'job_id'),
    )
