"""Repository for User domain entities in the document store."""

from userhub.documents import UserDocument
from userhub.domain.common.value_objects.ids import UserId
from userhub.domain.identity.entities.user import User
from userhub.domain.identity.exceptions import EmailAlreadyExistsError, UserNotFoundError
from userhub.domain.identity.value_objects.email import Email
from userhub.infrastructure.identity.mappers.user_mapper import UserDocumentMapper

from .base import translate_errors


class MongoUserRepository:
    """Repository for User domain entities."""

    def __init__(self) -> None:
        self.mapper = UserDocumentMapper()

    async def save(self, user: User) -> None:
        """
        Insert a new user document.

        Raises:
            EmailAlreadyExistsError: If the email is already stored
        """
        async with translate_errors(lambda: EmailAlreadyExistsError(user.email.value)):
            await self.mapper.to_document(user).insert()

    async def find_by_id(self, user_id: UserId) -> User | None:
        async with translate_errors():
            document = await UserDocument.get(user_id.value)
        return self.mapper.to_domain(document) if document else None

    async def find_by_email(self, email: Email) -> User | None:
        async with translate_errors():
            document = await UserDocument.find_one(UserDocument.email == email.value)
        return self.mapper.to_domain(document) if document else None

    async def find_all(self) -> list[User]:
        """All users, newest first."""
        async with translate_errors():
            documents = await UserDocument.find_all().sort(-UserDocument.created_at).to_list()
        return [self.mapper.to_domain(document) for document in documents]

    async def update(self, user: User) -> None:
        """
        Replace the stored document with the entity's current state.

        Raises:
            UserNotFoundError: If no document has the user's id
            EmailAlreadyExistsError: If the new email belongs to another document
        """
        async with translate_errors(lambda: EmailAlreadyExistsError(user.email.value)):
            document = await UserDocument.get(user.id.value)
            if document is None:
                raise UserNotFoundError(user.id.value)
            await self.mapper.to_document(user, document).save()

    async def delete(self, user_id: UserId) -> None:
        """
        Raises:
            UserNotFoundError: If no document has this id
        """
        async with translate_errors():
            document = await UserDocument.get(user_id.value)
            if document is None:
                raise UserNotFoundError(user_id.value)
            await document.delete()

    async def exists(self, user_id: UserId) -> bool:
        async with translate_errors():
            count = await UserDocument.find(UserDocument.id == user_id.value).count()
        return count > 0
