import pytest

from oximod.errors import ValidationError
from oximod.fields import Field, field
from oximod.indexes import Index
from oximod.validation import Validate


def test_field_returns_field_with_default():
    declared = field(default="Anonymous")
    assert isinstance(declared, Field)
    assert declared.has_default
    assert declared.make_default() == "Anonymous"


def test_field_without_default_has_none():
    declared = field()
    assert declared.has_default is False
    with pytest.raises(LookupError):
        declared.make_default()


def test_default_factory_gives_fresh_values():
    declared = field(default_factory=list)
    first = declared.make_default()
    second = declared.make_default()
    assert first == []
    first.append(1)
    assert second == []
    assert declared.has_default


def test_none_is_a_valid_default():
    declared = field(default=None)
    assert declared.has_default
    assert declared.make_default() is None


def test_both_default_and_factory_rejected():
    with pytest.raises(ValueError):
        field(default=1, default_factory=int)


def test_mutable_default_rejected():
    with pytest.raises(ValueError):
        field(default=[])
    with pytest.raises(ValueError):
        field(default={})


def test_non_callable_factory_rejected():
    with pytest.raises(TypeError):
        field(default_factory=5)


def test_bad_index_and_validate_types_rejected():
    with pytest.raises(TypeError):
        field(index="email")
    with pytest.raises(TypeError):
        field(validate={"email": True})


def test_index_true_means_default_index():
    declared = field(index=True)
    assert declared.index == Index()
    model = declared.index_model("name")
    assert model.document["key"] == {"name": 1}


def test_index_false_means_no_index():
    declared = field(index=False)
    assert declared.index is None
    assert declared.index_model("name") is None


def test_index_model_uses_index_options():
    declared = field(index=Index(unique=True, name="name_idx"))
    document = declared.index_model("name").document
    assert document["key"] == {"name": 1}
    assert document["name"] == "name_idx"
    assert document["unique"] is True


def test_descending_order_from_string():
    declared = field(index=Index(sparse=True, order="-1"))
    document = declared.index_model("age").document
    assert document["key"] == {"age": -1}
    assert document["sparse"] is True


def test_ttl_index():
    declared = field(index=Index(expire_after_secs=3600))
    document = declared.index_model("created_at").document
    assert document["expireAfterSeconds"] == 3600


def test_check_without_rules_returns_value():
    declared = field()
    assert declared.check("anything", "value") == "value"


def test_check_delegates_to_validate():
    declared = field(validate=Validate(min_length=5, max_length=10))
    assert declared.check("name", "Valid") == "Valid"
    with pytest.raises(ValidationError, match="at least 5 characters"):
        declared.check("name", "abc")
    with pytest.raises(ValidationError, match="at most"):
        declared.check("name", "ThisNameIsWayTooLong")


def test_check_email_rule():
    declared = field(default=None, validate=Validate(email=True))
    assert declared.check("email", "user@example.com") == "user@example.com"
    with pytest.raises(ValidationError, match="valid email"):
        declared.check("email", "invalidemail.com")


def test_check_required_rule():
    declared = field(default=None, validate=Validate(required=True))
    with pytest.raises(ValidationError, match="is required"):
        declared.check("role", declared.make_default())


def test_field_is_immutable():
    declared = field(default=1)
    with pytest.raises(AttributeError):
        declared.default = 2
    assert declared.make_default() == 1