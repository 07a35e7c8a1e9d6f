"""Mappers for RefreshToken ORM/Document ↔ Domain conversion."""

from userhub.documents import RefreshTokenDocument
from userhub.domain.common.time import ensure_utc
from userhub.domain.common.value_objects.ids import RefreshTokenId, UserId
from userhub.domain.identity.entities.refresh_token import RefreshToken
from userhub.models import RefreshToken as RefreshTokenORM


class RefreshTokenMapper:
    """Mapper for RefreshToken ORM ↔ Domain conversion."""

    def to_domain(self, orm_model: RefreshTokenORM) -> RefreshToken:
        return RefreshToken.create_with_id(
            id=RefreshTokenId(orm_model.id),
            token=orm_model.token,
            user_id=UserId(orm_model.user_id),
            expires_at=ensure_utc(orm_model.expires_at),
            created_at=ensure_utc(orm_model.created_at),
        )

    def to_orm(self, domain_entity: RefreshToken) -> RefreshTokenORM:
        return RefreshTokenORM(
            id=domain_entity.id.value,
            token=domain_entity.token,
            user_id=domain_entity.user_id.value,
            expires_at=domain_entity.expires_at,
            created_at=domain_entity.created_at,
        )


class RefreshTokenDocumentMapper:
    """Mapper for RefreshToken Document ↔ Domain conversion."""

    def to_domain(self, document: RefreshTokenDocument) -> RefreshToken:
        return RefreshToken.create_with_id(
            id=RefreshTokenId(document.id),
            token=document.token,
            user_id=UserId(document.user_id),
            expires_at=ensure_utc(document.expires_at),
            created_at=ensure_utc(document.created_at),
        )

    def to_document(self, domain_entity: RefreshToken) -> RefreshTokenDocument:
        return RefreshTokenDocument(
            id=domain_entity.id.value,
            token=domain_entity.token,
            user_id=domain_entity.user_id.value,
            expires_at=domain_entity.expires_at,
            created_at=domain_entity.created_at,
        )
