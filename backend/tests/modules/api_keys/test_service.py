import pytest
from unittest.mock import MagicMock

from modules.api_keys.exceptions import InvalidKeyNameError
from modules.api_keys.interfaces import IAPIKeyService
from modules.api_keys.models import APIKey
from modules.api_keys.repository import APIKeyRepository
from modules.api_keys.service import APIKeyService
from modules.auth.credentials import API_KEY_PREFIX
from modules.auth.exceptions import InvalidCredentialError
from shared.exceptions import PersistenceError

from tests.fakes import FakeSupabase


@pytest.fixture
def db():
    return FakeSupabase()


@pytest.fixture
def service(db):
    return APIKeyService(APIKeyRepository(db))


class TestAPIKeyServiceInterface:
    def test_implements_interface(self, service):
        assert isinstance(service, IAPIKeyService)


class TestCreate:
    @pytest.mark.asyncio
    async def test_returns_raw_key_once(self, service, db):
        created = await service.create("user-1", "CI pipeline")

        assert created.key.startswith(API_KEY_PREFIX)
        assert created.name == "CI pipeline"
        row = db.rows("api_keys")[0]
        assert row["id"] == created.id
        assert row["user_id"] == "user-1"
        assert row["key"] == created.key
        assert row["is_active"] is True

    @pytest.mark.asyncio
    @pytest.mark.parametrize("name", [None, "", "   ", 42, ["x"], {"a": 1}])
    async def test_rejects_bad_names(self, service, db, name):
        with pytest.raises(InvalidKeyNameError):
            await service.create("user-1", name)
        assert db.rows("api_keys") == []

    @pytest.mark.asyncio
    async def test_store_failure(self, service, db):
        db.fail("api_keys", "insert")
        with pytest.raises(PersistenceError):
            await service.create("user-1", "ci")


class TestList:
    @pytest.mark.asyncio
    async def test_newest_first_without_key_material(self, service, db):
        await service.create("user-1", "old")
        await service.create("user-1", "new")
        db.rows("api_keys")[0]["created_at"] = "2024-01-01T00:00:00+00:00"
        db.rows("api_keys")[1]["created_at"] = "2024-02-01T00:00:00+00:00"

        keys = await service.list("user-1")

        assert [k.name for k in keys] == ["new", "old"]
        for key in keys:
            assert "key" not in key.model_dump()
            assert not any(API_KEY_PREFIX in str(v) for v in key.model_dump().values())

    @pytest.mark.asyncio
    async def test_only_own_keys(self, service):
        await service.create("user-1", "mine")
        await service.create("user-2", "theirs")
        assert [k.name for k in await service.list("user-1")] == ["mine"]

    @pytest.mark.asyncio
    async def test_revoked_keys_still_listed(self, service):
        created = await service.create("user-1", "ci")
        await service.revoke("user-1", created.id)
        keys = await service.list("user-1")
        assert len(keys) == 1
        assert keys[0].is_active is False

    def test_list_selects_summary_columns_only(self):
        mock_db = MagicMock()
        query = mock_db.table.return_value.select.return_value.eq.return_value.order.return_value
        query.execute.return_value.data = []

        APIKeyRepository(mock_db).list_for_user("user-1")

        columns = mock_db.table.return_value.select.call_args.args[0]
        assert "key" not in [c.strip() for c in columns.split(",")]


class TestRevoke:
    @pytest.mark.asyncio
    async def test_cannot_revoke_other_users_key(self, service, db):
        created = await service.create("user-1", "ci")
        await service.revoke("user-2", created.id)
        assert db.rows("api_keys")[0]["is_active"] is True

    @pytest.mark.asyncio
    async def test_unknown_key_is_a_no_op(self, service):
        await service.revoke("user-1", "does-not-exist")

    @pytest.mark.asyncio
    async def test_malformed_id_is_a_no_op(self, service, db):
        created = await service.create("user-1", "ci")
        db.calls.clear()

        await service.revoke("user-1", "not-a-uuid")

        assert db.calls == []
        assert db.rows("api_keys")[0]["id"] == created.id
        assert db.rows("api_keys")[0]["is_active"] is True

    def test_repository_rejects_malformed_id(self, db):
        with pytest.raises(PersistenceError):
            APIKeyRepository(db).deactivate("user-1", "not-a-uuid")

    @pytest.mark.asyncio
    async def test_revoke_twice(self, service, db):
        created = await service.create("user-1", "ci")
        await service.revoke("user-1", created.id)
        await service.revoke("user-1", created.id)
        assert db.rows("api_keys")[0]["is_active"] is False


class TestAuthenticate:
    @pytest.mark.asyncio
    async def test_returns_owner(self, service):
        created = await service.create("user-1", "ci")
        assert await service.authenticate(created.key) == "user-1"

    @pytest.mark.asyncio
    async def test_unknown_key(self, service):
        with pytest.raises(InvalidCredentialError):
            await service.authenticate(API_KEY_PREFIX + "0" * 64)

    @pytest.mark.asyncio
    async def test_inactive_key(self, service):
        created = await service.create("user-1", "ci")
        await service.revoke("user-1", created.id)
        with pytest.raises(InvalidCredentialError) as exc_info:
            await service.authenticate(created.key)
        assert exc_info.value.message == "Invalid or inactive API key"

    @pytest.mark.asyncio
    async def test_touch_failure_logged_not_raised(self):
        repo = MagicMock()
        repo.get_by_key.return_value = APIKey(id="k1", user_id="user-1", key="sk", name="ci")
        repo.touch.side_effect = PersistenceError("touch_api_key")

        assert await APIKeyService(repo).authenticate("sk") == "user-1"
        repo.touch.assert_called_once()
