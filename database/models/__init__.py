from .base import Base
from .skill import Skill
from .user import User, JobSeekerProfile, JobSeekerSkill
from .job import Company, JobPosting, JobSkill
from .application import Application

__all__ = [
    'Base',
    'Skill',
    'User',
    'JobSeekerProfile',
    'JobSeekerSkill',
    'Company',
    'JobPosting',
    'JobSkill',
    'Application',
]
