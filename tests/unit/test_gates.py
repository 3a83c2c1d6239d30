from uuid import UUID, uuid4

import pytest

from storefront.core.gates import CurrentUser, has_role, is_product_owner, parse_product_id
from storefront.models.enums import UserRole


@pytest.fixture()
def seller():
    return CurrentUser(id="seller-a", email="a@example.com", role=UserRole.SELLER)


class TestHasRole:
    def test_matching_role_allowed(self, seller):
        assert has_role(seller, UserRole.SELLER)

    def test_other_role_denied(self, seller):
        assert not has_role(seller, UserRole.BUYER)

    def test_no_requirement_admits_any_user(self, seller):
        assert has_role(seller, None)


class TestIsProductOwner:
    def test_owner_allowed(self, seller):
        assert is_product_owner(seller, "seller-a")

    def test_other_owner_denied(self, seller):
        assert not is_product_owner(seller, "seller-b")

    def test_missing_product_allowed(self, seller):
        assert is_product_owner(seller, None)


class TestParseProductId:
    def test_valid_uuid(self):
        product_id = uuid4()
        assert parse_product_id(str(product_id)) == product_id

    def test_returns_uuid_instance(self):
        assert isinstance(parse_product_id("12345678-1234-5678-1234-567812345678"), UUID)

    @pytest.mark.parametrize("raw", ["", "abc", "123", "6507c2f5e4b0a1b2c3d4e5f6"])
    def test_malformed_ids_rejected(self, raw):
        assert parse_product_id(raw) is None
