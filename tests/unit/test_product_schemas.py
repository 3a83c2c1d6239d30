import pytest
from pydantic import ValidationError

from storefront.schemas.product_schemas import (
    PaginationRequest,
    ProductCreateRequest,
    ProductUpdateRequest,
)


class TestProductCreateRequest:
    def test_owner_id_in_payload_is_dropped(self):
        product = ProductCreateRequest.model_validate(
            {"name": "Shoe", "brand": "Acme", "price": 10, "ownerId": "intruder", "owner_id": "intruder"}
        )
        assert "owner_id" not in product.model_dump()
        assert "ownerId" not in product.model_dump()

    def test_free_shipping_accepts_camel_case(self):
        product = ProductCreateRequest.model_validate(
            {"name": "Shoe", "brand": "Acme", "price": 10, "freeShipping": True}
        )
        assert product.free_shipping is True

    def test_name_is_required(self):
        with pytest.raises(ValidationError):
            ProductCreateRequest.model_validate({"brand": "Acme", "price": 10})

    def test_negative_price_rejected(self):
        with pytest.raises(ValidationError):
            ProductCreateRequest.model_validate({"name": "Shoe", "brand": "Acme", "price": -1})


class TestProductUpdateRequest:
    def test_patch_contains_only_supplied_fields(self):
        update = ProductUpdateRequest.model_validate({"price": 25})
        assert update.to_patch() == {"price": 25}

    def test_empty_body_is_empty_patch(self):
        assert ProductUpdateRequest.model_validate({}).to_patch() == {}

    def test_explicit_null_for_required_column_rejected(self):
        with pytest.raises(ValidationError):
            ProductUpdateRequest.model_validate({"name": None})

    def test_owner_id_cannot_be_patched(self):
        update = ProductUpdateRequest.model_validate({"ownerId": "intruder", "brand": "Zeta"})
        assert update.to_patch() == {"brand": "Zeta"}


class TestPaginationRequest:
    @pytest.mark.parametrize(
        "page, limit, skip",
        [(1, 10, 0), (2, 10, 10), (3, 7, 14)],
    )
    def test_skip(self, page, limit, skip):
        assert PaginationRequest(page=page, limit=limit).skip == skip

    def test_search_text_alias(self):
        pagination = PaginationRequest.model_validate({"page": 1, "limit": 5, "searchText": "sh"})
        assert pagination.search_text == "sh"

    def test_search_text_kept_verbatim(self):
        pagination = PaginationRequest.model_validate({"page": 1, "limit": 5, "searchText": " sh "})
        assert pagination.search_text == " sh "

    @pytest.mark.parametrize("body", [{"page": 0, "limit": 10}, {"page": 1, "limit": 0}, {"page": 1, "limit": 101}])
    def test_out_of_range_rejected(self, body):
        with pytest.raises(ValidationError):
            PaginationRequest.model_validate(body)
