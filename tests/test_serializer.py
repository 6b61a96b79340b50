"""
Unit tests for the change serializer

Tests:
- Leaf and nested in-place changes
- Arrays of records: new, partially changed, unchanged, unset, mixed origin
- Wholesale replacement of nested records
- Scalar arrays and the unset sentinel
"""

import pytest

from payclient.api.encoding import encode_params
from payclient.model.record import PaymentObject, convert_to_object
from payclient.model.serializer import UNSET, serialize_params


# ============================================================================
# FIXTURES
# ============================================================================


@pytest.fixture
def account_with_owners():
    """Account whose legal entity already has two loaded additional owners"""
    return convert_to_object({
        "object": "account",
        "legal_entity": {
            "additional_owners": [
                PaymentObject.construct_from({"first_name": "Joe"}),
                PaymentObject.construct_from({"first_name": "Jane"}),
            ]
        },
    })


@pytest.fixture
def customer_record():
    """Generic record with scalars, nested objects and a scalar array"""
    return convert_to_object({
        "id": "cus_1",
        "email": "a@example.com",
        "description": "Old",
        "address": {"line1": "1 Main St", "city": "Springfield"},
        "tags": ["vip"],
        "metadata": {"order_id": "6735"},
    })


# ============================================================================
# TEST: Scalar and nested changes
# ============================================================================


class TestScalarChanges:
    """Tests for leaf-level changes"""

    def test_unchanged_record_serializes_empty(self, customer_record):
        """Test loading then serializing yields nothing"""
        assert serialize_params(customer_record) == {}

    def test_leaf_change_only(self, customer_record):
        """Test only the assigned leaf is serialized"""
        customer_record.email = "b@example.com"

        assert serialize_params(customer_record) == {"email": "b@example.com"}

    def test_new_field(self, customer_record):
        """Test a field absent from the load is sent when assigned"""
        customer_record.phone = "555-1234"

        assert serialize_params(customer_record) == {"phone": "555-1234"}

    def test_nested_in_place_change(self, customer_record):
        """Test nested edits produce a nested diff without siblings"""
        customer_record.address.line1 = "2 Three Four"
        customer_record.metadata.source = "cli"

        assert serialize_params(customer_record) == {
            "address": {"line1": "2 Three Four"},
            "metadata": {"source": "cli"},
        }

    def test_none_becomes_unset(self, customer_record):
        """Test None is sent as the empty-string sentinel"""
        customer_record.description = None

        assert serialize_params(customer_record) == {"description": UNSET}
        assert encode_params(serialize_params(customer_record)) == "description="

    def test_legal_entity_leaves(self):
        """Test account updates send only changed legal entity leaves"""
        account = convert_to_object({
            "object": "account",
            "id": "acct_foo",
            "legal_entity": {
                "first_name": "Bling",
                "address": {"line1": None, "city": "SF"},
            },
        })

        account.legal_entity.first_name = "Bob"
        account.legal_entity.address.line1 = "2 Three Four"

        params = serialize_params(account)

        assert params == {
            "legal_entity": {
                "first_name": "Bob",
                "address": {"line1": "2 Three Four"},
            }
        }
        assert encode_params(params) == (
            "legal_entity[first_name]=Bob&legal_entity[address][line1]=2+Three+Four"
        )


# ============================================================================
# TEST: Arrays of records
# ============================================================================


class TestAdditionalOwners:
    """Tests for arrays of nested records"""

    def test_new_additional_owners(self):
        """Test a newly assigned array sends every element in full"""
        obj = convert_to_object({"object": "account", "legal_entity": {}})
        obj.legal_entity.additional_owners = [
            {"first_name": "Joe"},
            {"first_name": "Jane"},
        ]

        assert serialize_params(obj) == {
            "legal_entity": {
                "additional_owners": {
                    "0": {"first_name": "Joe"},
                    "1": {"first_name": "Jane"},
                }
            }
        }

    def test_partially_changed_additional_owners(self, account_with_owners):
        """Test only the changed element is sent, keyed by position"""
        account_with_owners.legal_entity.additional_owners[1].first_name = "Stripe"

        assert serialize_params(account_with_owners) == {
            "legal_entity": {
                "additional_owners": {
                    "1": {"first_name": "Stripe"},
                }
            }
        }

    def test_unchanged_additional_owners(self, account_with_owners):
        """Test an untouched owners array is still sent, as an empty mapping"""
        params = serialize_params(account_with_owners)

        assert params == {"legal_entity": {"additional_owners": {}}}
        assert encode_params(params) == ""

    def test_unchanged_owners_on_generic_record(self):
        """Test records other than accounts omit untouched arrays"""
        obj = convert_to_object({
            "legal_entity": {"additional_owners": [{"first_name": "Joe"}]},
        })

        assert serialize_params(obj) == {}

    def test_owners_kept_beside_other_changes(self, account_with_owners):
        """Test the owners entry joins other legal entity changes"""
        account_with_owners.legal_entity.first_name = "Bob"

        assert serialize_params(account_with_owners) == {
            "legal_entity": {"first_name": "Bob", "additional_owners": {}}
        }

    def test_unset_additional_owners(self, account_with_owners):
        """Test clearing an array sends the sentinel, not an empty mapping"""
        account_with_owners.legal_entity.additional_owners = None

        assert serialize_params(account_with_owners) == {
            "legal_entity": {"additional_owners": ""}
        }

    def test_empty_array_is_unset(self, account_with_owners):
        """Test assigning an empty array also sends the sentinel"""
        account_with_owners.legal_entity.additional_owners = []

        assert serialize_params(account_with_owners) == {
            "legal_entity": {"additional_owners": ""}
        }

    def test_mixed_origin_assignment(self, account_with_owners):
        """Test reassigned array: loaded elements send diffs, new ones full"""
        owners = account_with_owners.legal_entity.additional_owners
        owners[0].first_name = "Joseph"

        account_with_owners.legal_entity.additional_owners = owners + [
            {"first_name": "New", "last_name": "Owner"},
        ]

        assert serialize_params(account_with_owners) == {
            "legal_entity": {
                "additional_owners": {
                    "0": {"first_name": "Joseph"},
                    "2": {"first_name": "New", "last_name": "Owner"},
                }
            }
        }

    def test_constructed_elements_send_full_snapshot(self, account_with_owners):
        """Test locally constructed records in a reassigned array are sent in full"""
        account_with_owners.legal_entity.additional_owners = [
            PaymentObject(first_name="Ann", last_name="Lee"),
        ]

        assert serialize_params(account_with_owners) == {
            "legal_entity": {
                "additional_owners": {
                    "0": {"first_name": "Ann", "last_name": "Lee"},
                }
            }
        }

    def test_append_in_place(self, account_with_owners):
        """Test elements appended in place are sent in full at their index"""
        owners = account_with_owners.legal_entity.additional_owners
        owners.append(PaymentObject(first_name="Ann"))
        owners.append({"first_name": "Bea"})

        assert serialize_params(account_with_owners) == {
            "legal_entity": {
                "additional_owners": {
                    "2": {"first_name": "Ann"},
                    "3": {"first_name": "Bea"},
                }
            }
        }

    def test_delete_in_place_rejected(self, account_with_owners):
        """Test shrinking an array in place is refused"""
        account_with_owners.legal_entity.additional_owners.pop()

        with pytest.raises(ValueError, match="set a new array"):
            serialize_params(account_with_owners)

    def test_encoding_of_indexed_owners(self):
        """Test index-keyed arrays encode with numeric brackets"""
        obj = convert_to_object({"object": "account", "legal_entity": {}})
        obj.legal_entity.additional_owners = [{"first_name": "Joe"}, {"first_name": "Jane"}]

        assert encode_params(serialize_params(obj)) == (
            "legal_entity[additional_owners][0][first_name]=Joe"
            "&legal_entity[additional_owners][1][first_name]=Jane"
        )


# ============================================================================
# TEST: Wholesale replacement and scalar arrays
# ============================================================================


class TestReplacement:
    """Tests for values assigned as a whole"""

    def test_replaced_mapping_sends_full_snapshot(self, customer_record):
        """Test a reassigned nested object is sent in full, not diffed"""
        customer_record.address = {"line1": "9 Elm St", "city": "Shelbyville"}

        assert serialize_params(customer_record) == {
            "address": {"line1": "9 Elm St", "city": "Shelbyville"}
        }

    def test_replaced_with_loaded_record_sends_full_snapshot(self, customer_record):
        """Test assigning another loaded record sends all of its fields"""
        other = PaymentObject.construct_from({"line1": "7 Oak St", "city": "Ogdenville"})

        customer_record.address = other

        assert serialize_params(customer_record) == {
            "address": {"line1": "7 Oak St", "city": "Ogdenville"}
        }

    def test_deep_fresh_snapshot(self, customer_record):
        """Test fresh nested structures are sent in full at every level"""
        customer_record.owner = {
            "name": "Ann",
            "dob": {"day": 1, "month": 2, "year": 1980},
            "nickname": None,
        }

        assert serialize_params(customer_record) == {
            "owner": {
                "name": "Ann",
                "dob": {"day": 1, "month": 2, "year": 1980},
                "nickname": "",
            }
        }

    def test_assigned_scalar_array(self, customer_record):
        """Test assigned scalar arrays are sent as arrays"""
        customer_record.tags = ["vip", "beta"]

        params = serialize_params(customer_record)

        assert params == {"tags": ["vip", "beta"]}
        assert encode_params(params) == "tags[]=vip&tags[]=beta"

    def test_scalar_array_changed_in_place(self, customer_record):
        """Test scalar arrays edited in place are resent whole"""
        customer_record.tags.append("beta")

        assert serialize_params(customer_record) == {"tags": ["vip", "beta"]}

    def test_nested_resources_are_skipped(self):
        """Test edits to nested API resources are left to their own save()"""
        account = convert_to_object({
            "object": "account",
            "id": "acct_1",
            "external_accounts": {
                "object": "list",
                "data": [{"object": "bank_account", "id": "ba_1", "account": "acct_1"}],
            },
        })

        account.external_accounts.data[0].default_for_currency = True

        assert serialize_params(account) == {}


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
