import logging
from typing import Optional

from stridefit.schemas.storage import UserProfile
from stridefit.services.profile_repository import ProfileRepository

logger = logging.getLogger(__name__)

GUEST_NAME = "Guest Runner"


class AccountService:
    """Local profile setup, guest entry and the app lock flag."""

    def __init__(self, repository: ProfileRepository):
        self.repository = repository

    def has_profile(self) -> bool:
        return bool(self.repository.get_profile().name)

    def is_member(self) -> bool:
        return self.has_profile() and self.repository.is_member()

    def create_profile(self, name: str, email: str) -> Optional[UserProfile]:
        """Create the local member profile and unlock the app."""
        name = (name or "").strip()
        email = (email or "").strip()
        if not name or not email:
            logger.warning("Profile setup needs both a name and an email")
            return None

        profile = self.repository.update_profile(name=name, email=email, is_guest=False)
        self.repository.set_authenticated(True)
        logger.info(f"Created local profile for {name}")
        return profile

    def continue_as_guest(self) -> UserProfile:
        profile = self.repository.update_profile(name=GUEST_NAME, email="", is_guest=True)
        self.repository.set_authenticated(True)
        return profile

    def unlock(self) -> bool:
        """Unlock an existing profile. Without one there is nothing to unlock."""
        if not self.has_profile():
            logger.info("Unlock requested before any profile exists")
            return False
        self.repository.set_authenticated(True)
        return True

    def lock(self) -> None:
        self.repository.set_authenticated(False)
