"""
User Repository - Data access layer for user profile documents
"""

from typing import List

from appwrite.query import Query

from repositories.base import BaseDocumentRepository
from domain.schemas import UserProfile, UserProfileCreate


class UserRepository(BaseDocumentRepository[UserProfile]):
    """Repository for the user profile collection"""

    collection_attr = "user_collection_id"
    model = UserProfile

    def create_profile(self, profile: UserProfileCreate) -> UserProfile:
        return self.create(profile.to_document())

    def find_by_account_id(self, account_id: str) -> List[UserProfile]:
        """Profiles linked to an account, earliest created first

        Args:
            account_id: Appwrite account id

        Returns:
            Matching profiles (normally exactly one)
        """
        return self.list(
            [
                Query.equal("accountId", account_id),
                Query.order_asc("$createdAt"),
            ]
        )
