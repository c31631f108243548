"""Repositories package for the Highland Games site."""
from .content_repositories import EventRepository, SlideRepository, HeritageRepository, TallyRepository
from .registration_repository import RegistrationRepository
from .account_repository import UserRepository, AdminRepository
