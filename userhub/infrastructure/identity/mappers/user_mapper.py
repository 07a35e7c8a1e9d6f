"""Mappers for User ORM ↔ Domain and Document ↔ Domain conversion."""

from userhub.documents import UserDocument
from userhub.domain.common.time import ensure_utc
from userhub.domain.common.value_objects.ids import UserId
from userhub.domain.identity.entities.user import User
from userhub.domain.identity.value_objects.email import Email
from userhub.domain.identity.value_objects.password import Password
from userhub.domain.identity.value_objects.role import Role
from userhub.models import User as UserORM


class UserMapper:
    """Mapper for User ORM ↔ Domain conversion."""

    def to_domain(self, orm_model: UserORM) -> User:
        """Convert ORM model to domain entity."""
        return User.create_with_id(
            id=UserId(orm_model.id),
            name=orm_model.name,
            email=Email(orm_model.email),
            password=Password.from_hash(orm_model.password),
            role=Role.create(orm_model.role),
            age=orm_model.age,
            created_at=ensure_utc(orm_model.created_at),
            updated_at=ensure_utc(orm_model.updated_at),
        )

    def to_orm(self, domain_entity: User, orm_model: UserORM | None = None) -> UserORM:
        """Convert domain entity to ORM model."""
        if orm_model:
            # Update existing
            orm_model.name = domain_entity.name
            orm_model.email = domain_entity.email.value
            orm_model.password = domain_entity.password.hashed_value
            orm_model.role = str(domain_entity.role)
            orm_model.age = domain_entity.age
            orm_model.updated_at = domain_entity.updated_at
            return orm_model

        # Create new
        return UserORM(
            id=domain_entity.id.value,
            name=domain_entity.name,
            email=domain_entity.email.value,
            password=domain_entity.password.hashed_value,
            role=str(domain_entity.role),
            age=domain_entity.age,
            created_at=domain_entity.created_at,
            updated_at=domain_entity.updated_at,
        )


class UserDocumentMapper:
    """Mapper for User Document ↔ Domain conversion."""

    def to_domain(self, document: UserDocument) -> User:
        """Convert stored document to domain entity."""
        return User.create_with_id(
            id=UserId(document.id),
            name=document.name,
            email=Email(document.email),
            password=Password.from_hash(document.password),
            role=Role.create(document.role),
            age=document.age,
            created_at=ensure_utc(document.created_at),
            updated_at=ensure_utc(document.updated_at),
        )

    def to_document(
        self, domain_entity: User, document: UserDocument | None = None
    ) -> UserDocument:
        """Convert domain entity to a document, updating ``document`` in place when given."""
        if document:
            document.name = domain_entity.name
            document.email = domain_entity.email.value
            document.password = domain_entity.password.hashed_value
            document.role = str(domain_entity.role)
            document.age = domain_entity.age
            document.updated_at = domain_entity.updated_at
            return document

        return UserDocument(
            id=domain_entity.id.value,
            name=domain_entity.name,
            email=domain_entity.email.value,
            password=domain_entity.password.hashed_value,
            role=str(domain_entity.role),
            age=domain_entity.age,
            created_at=domain_entity.created_at,
            updated_at=domain_entity.updated_at,
        )
