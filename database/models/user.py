from sqlalchemy import Column, Text, Boolean, Integer, Numeric, TIMESTAMP, ForeignKey, Index, UniqueConstraint, func
from sqlalchemy.orm import relationship

from .base import Base, new_id


class User(Base):
    """
    User account. Only the fields that decide matching eligibility live here.
    """
    __tablename__ = 'users'

    id = Column(Text, primary_key=True, default=new_id)
    email = Column(Text, nullable=False, unique=True)
    user_type = Column(Text, nullable=False, default='job_seeker')  # job_seeker|recruiter|hiring_manager|admin
    status = Column(Text, nullable=False, default='active')  # active|suspended|deleted
    email_verified = Column(Boolean, nullable=False, default=False)
    created_at = Column(TIMESTAMP(timezone=True), nullable=False, server_default=func.now())

    profile = relationship("JobSeekerProfile", back_populates="user", uselist=False)

    __table_args__ = (
        Index('idx_users_status', 'status'),
    )


class JobSeekerProfile(Base):
    """
    Candidate profile used for matching.
    """
    __tablename__ = 'job_seeker_profiles'

    id = Column(Text, primary_key=True, default=new_id)
    user_id = Column(Text, ForeignKey('users.id', ondelete='CASCADE'), nullable=False, unique=True)

    first_name = Column(Text)
    last_name = Column(Text)
    headline = Column(Text)

    years_of_experience = Column(Integer)
    desired_salary_min = Column(Numeric)
    desired_salary_max = Column(Numeric)

    location_city = Column(Text)
    location_state = Column(Text)
    willing_to_relocate = Column(Boolean, nullable=False, default=False)
    remote_preference = Column(Text)  # remote_only|hybrid|onsite|flexible
    availability = Column(Text)  # immediately|within_month|within_3_months|not_looking

    updated_at = Column(TIMESTAMP(timezone=True), nullable=False, server_default=func.now(), onupdate=func.now())

    user = relationship("User", back_populates="profile")
    skills = relationship("JobSeekerSkill", back_populates="profile", cascade="all, delete-orphan")

    __table_args__ = (
        Index('idx_jsp_availability', 'availability'),
    )


class JobSeekerSkill(Base):
    __tablename__ = 'job_seeker_skills'

    id = Column(Text, primary_key=True, default=new_id)
    job_seeker_id = Column(Text, ForeignKey('job_seeker_profiles.id', ondelete='CASCADE'), nullable=False)
    skill_id = Column(Text, ForeignKey('skills.id', ondelete='CASCADE'), nullable=False)
    years_of_experience = Column(Integer, nullable=False, default=0)

    profile = relationship("JobSeekerProfile", back_populates="skills")

    __table_args__ = (
        UniqueConstraint('job_seeker_id', 'skill_id', name='uq_job_seeker_skill'),
        Index('idx_jss_job_seeker', 'job_seeker_id'),
    )
