"""Unit tests for tfprovider/core/pair.py"""
import pytest

from tfprovider.core.pair import BindResource, CallbackOutcome, OutcomeKind, PairID
from tfprovider.core.platform import APIError, NotFoundError
from tfprovider.core.schema import FieldType


def _int_right(schema):
    schema["right_id"] = schema["right_id"].copy(type=FieldType.INT)
    return schema


def _bind(err=None, customize=None):
    def callback(left, right, client):
        if err is not None:
            raise err

    pair = PairID("left_id", "right_id")
    if customize is not None:
        pair.schema(customize)
    return pair.bind_resource(BindResource(create=callback, read=callback, delete=callback))


@pytest.mark.parametrize(
    "case",
    [
        dict(op="read", id="a", error="Invalid ID: a"),
        dict(op="read", id="a|", error="right_id cannot be empty"),
        dict(op="read", id="|b", error="left_id cannot be empty"),
        dict(op="read", id="|", error="right_id cannot be empty"),
        dict(op="delete", id="a", error="Invalid ID: a"),
        dict(op="read", id="a|b", left="a", right="b", expect_id="a|b"),
        dict(op="read", id="a|123", left="a", right="123", expect_id="a|123", customize=_int_right),
        dict(op="read", id="a|b|c|d", left="a", right="b|c|d", expect_id="a|b|c|d"),
        dict(op="read", id="a|abc", error="Expected integer", removed=True, right="0", customize=_int_right),
        dict(op="delete", id="a|b|c|d", left="a", right="b|c|d", expect_id="a|b|c|d"),
        dict(op="read", id="a|b", err=NotFoundError("Nope"), left="a", right="b", removed=True),
        dict(op="read", id="a|b", err=APIError(404, "Gone", "/x"), left="a", right="b", removed=True),
        dict(op="read", id="a|b", err=RuntimeError("Nope"), left="a", right="b", expect_id="a|b", error="Nope"),
        dict(op="create", state={"left_id": "a"}, left="a", error="right_id cannot be empty"),
        dict(op="create", state={"right_id": "a"}, right="a", error="left_id cannot be empty"),
        dict(op="create", state={"left_id": "a", "right_id": "b"}, left="a", right="b", expect_id="a|b"),
        dict(
            op="create",
            state={"left_id": "a", "right_id": "b"},
            err=RuntimeError("Nope"),
            left="a",
            right="b",
            error="Nope",
            removed=True,
        ),
        dict(op="delete", id="a|b", err=RuntimeError("Nope"), left="a", right="b", expect_id="a|b", error="Nope"),
    ],
    ids=lambda case: f"{case['op']}-{case.get('id', case.get('state'))}-{case.get('error', 'ok')}",
)
def test_pair_id_resource(resource_fixture, case):
    resource = _bind(case.get("err"), case.get("customize"))

    data, error = resource_fixture(resource, case["op"], id=case.get("id", ""), state=case.get("state"))

    if case.get("error"):
        assert error is not None, f"Expected to have {case['error']} error"
        assert str(error).startswith(case["error"])
    else:
        assert error is None
    assert data.id == case.get("expect_id", "")
    assert data.get("left_id") == case.get("left", "")
    assert str(data.get("right_id")) == case.get("right", "")
    if "removed" in case:
        assert data.removed is case["removed"]


def test_int_right_field_is_read_back_as_number(resource_fixture):
    resource = _bind(customize=_int_right)

    data, error = resource_fixture(resource, "read", id="a|123")

    assert error is None
    assert data.get("right_id") == 123


def test_callback_error_is_propagated_unchanged(resource_fixture):
    original = APIError(500, "backend exploded", "/api/2.0/x")
    resource = _bind(original)

    _, error = resource_fixture(resource, "delete", id="a|b")

    assert error is original


def test_create_treats_not_found_as_failure(resource_fixture):
    resource = _bind(NotFoundError("parent missing"))

    data, error = resource_fixture(resource, "create", state={"left_id": "a", "right_id": "b"})

    assert isinstance(error, NotFoundError)
    assert data.id == ""
    assert data.removed


def test_delete_does_not_swallow_not_found(resource_fixture):
    resource = _bind(NotFoundError("already gone"))

    data, error = resource_fixture(resource, "delete", id="a|b")

    assert isinstance(error, NotFoundError)
    assert data.id == "a|b"


def test_callbacks_receive_decoded_halves_and_client(resource_fixture):
    calls = []
    client = object()

    def record(left, right, c):
        calls.append((left, right, c))

    resource = PairID("left_id", "right_id").bind_resource(BindResource(read=record))

    resource_fixture(resource, "read", id="grp|usr|x", client=client)

    assert calls == [("grp", "usr|x", client)]


def test_missing_callbacks_leave_entry_points_unset(resource_fixture):
    resource = PairID("left_id", "right_id").bind_resource(BindResource(read=lambda l, r, c: None))

    assert resource.create_func is None
    assert resource.delete_func is None
    _, error = resource_fixture(resource, "delete", id="a|b")
    assert isinstance(error, NotImplementedError)


def test_import_then_read_populates_fields():
    resource = _bind()
    data = resource.new_data()

    resource.import_state(data, "a|b")
    resource.read(data, None)

    assert data.to_dict() == {"left_id": "a", "right_id": "b", "id": "a|b"}


def test_schema_customizer_does_not_leak_into_other_binders():
    customized = PairID("left_id", "right_id").schema(_int_right)
    plain = PairID("left_id", "right_id")

    assert customized.field_schema()["right_id"].type is FieldType.INT
    assert plain.field_schema()["right_id"].type is FieldType.STRING


def test_bound_schema_fields_are_required_and_force_new():
    resource = _bind()

    for spec in resource.schema.values():
        assert spec.required
        assert spec.force_new


class TestCallbackOutcome:
    def test_success(self):
        outcome = CallbackOutcome.of(lambda l, r, c: None, "a", "b", None)
        assert outcome.kind is OutcomeKind.SUCCESS
        outcome.raise_error()

    def test_not_found(self):
        def boom(l, r, c):
            raise NotFoundError("missing")

        outcome = CallbackOutcome.of(boom, "a", "b", None)
        assert outcome.kind is OutcomeKind.NOT_FOUND

    def test_other_error_reraises(self):
        def boom(l, r, c):
            raise APIError(400, "bad", "/x")

        outcome = CallbackOutcome.of(boom, "a", "b", None)
        assert outcome.kind is OutcomeKind.ERROR
        with pytest.raises(APIError, match="bad"):
            outcome.raise_error()


def test_create_uses_field_values_over_stale_identifier(resource_fixture):
    calls = []

    def record(left, right, client):
        calls.append((left, right))

    resource = PairID("left_id", "right_id").bind_resource(BindResource(create=record))

    data, error = resource_fixture(resource, "create", id="x|y", state={"left_id": "a", "right_id": "b"})

    assert error is None
    assert calls == [("a", "b")]
    assert data.id == "a|b"


def test_untyped_half_leaves_fields_unwritten(resource_fixture):
    resource = _bind(customize=_int_right)

    data, error = resource_fixture(resource, "delete", id="left|not-a-number")

    assert isinstance(error, ValueError)
    assert data.get("left_id") == ""
    assert data.id == ""
    assert data.removed
