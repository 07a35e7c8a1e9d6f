"""Mappers for PasswordResetToken ORM/Document ↔ Domain conversion."""

from userhub.documents import PasswordResetTokenDocument
from userhub.domain.common.time import ensure_utc
from userhub.domain.common.value_objects.ids import PasswordResetTokenId, UserId
from userhub.domain.identity.entities.password_reset_token import PasswordResetToken
from userhub.models import PasswordResetToken as PasswordResetTokenORM


class PasswordResetTokenMapper:
    """Mapper for PasswordResetToken ORM ↔ Domain conversion."""

    def to_domain(self, orm_model: PasswordResetTokenORM) -> PasswordResetToken:
        return PasswordResetToken.create_with_id(
            id=PasswordResetTokenId(orm_model.id),
            token_hash=orm_model.token_hash,
            user_id=UserId(orm_model.user_id),
            expires_at=ensure_utc(orm_model.expires_at),
            created_at=ensure_utc(orm_model.created_at),
        )

    def to_orm(self, domain_entity: PasswordResetToken) -> PasswordResetTokenORM:
        return PasswordResetTokenORM(
            id=domain_entity.id.value,
            token_hash=domain_entity.token_hash,
            user_id=domain_entity.user_id.value,
            expires_at=domain_entity.expires_at,
            created_at=domain_entity.created_at,
        )


class PasswordResetTokenDocumentMapper:
    """Mapper for PasswordResetToken Document ↔ Domain conversion."""

    def to_domain(self, document: PasswordResetTokenDocument) -> PasswordResetToken:
        return PasswordResetToken.create_with_id(
            id=PasswordResetTokenId(document.id),
            token_hash=document.token_hash,
            user_id=UserId(document.user_id),
            expires_at=ensure_utc(document.expires_at),
            created_at=ensure_utc(document.created_at),
        )

    def to_document(self, domain_entity: PasswordResetToken) -> PasswordResetTokenDocument:
        return PasswordResetTokenDocument(
            id=domain_entity.id.value,
            token_hash=domain_entity.token_hash,
            user_id=domain_entity.user_id.value,
            expires_at=domain_entity.expires_at,
            created_at=domain_entity.created_at,
        )
