"""Tests for the document-first, relational-second write order."""

import pytest

from userhub.application.common.dual_write import dual_write
from userhub.domain.common.exceptions import PersistenceError


class TestDualWrite:
    async def test_writes_document_store_before_relational(self) -> None:
        calls: list[str] = []

        async def document() -> None:
            calls.append("document")

        async def relational() -> None:
            calls.append("relational")

        await dual_write("user_created", document, relational, user_id="u1")

        assert calls == ["document", "relational"]

    async def test_document_failure_skips_relational_write(self) -> None:
        calls: list[str] = []

        async def document() -> None:
            raise PersistenceError("mongo down")

        async def relational() -> None:
            calls.append("relational")

        with pytest.raises(PersistenceError, match="mongo down"):
            await dual_write("user_created", document, relational)

        assert calls == []

    async def test_relational_failure_propagates_after_document_write(self) -> None:
        calls: list[str] = []

        async def document() -> None:
            calls.append("document")

        async def relational() -> None:
            raise PersistenceError("sql down")

        with pytest.raises(PersistenceError, match="sql down"):
            await dual_write("user_deleted", document, relational, user_id="u1")

        assert calls == ["document"]
