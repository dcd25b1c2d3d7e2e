"""Tests for cross-field dependency rules."""

import pytest

from descriptor_constraints import FieldConstraint, ObjectConstraints, custom, required, validate, values
from descriptor_constraints.exceptions import DependencyError, FieldValueError, ValidationError

LINK = ObjectConstraints({
    "kind": FieldConstraint(
        required=True,
        type="string",
        depends_on={"target": (required, custom(lambda value: value.startswith("svc-"), "Should start with svc-"))},
    ),
    "target": FieldConstraint(type="string"),
    "mode": FieldConstraint(
        type="string",
        validators=(values(["push", "pull"]),),
        depends_on={"kind": (values(["remote"]),)},
        children={"never": FieldConstraint(required=True)},
    ),
})


def test_satisfied_dependency_passes():
    validate({"kind": "local", "target": "svc-a"}, LINK)


def test_missing_target_is_reported_at_the_depending_field():
    with pytest.raises(DependencyError) as exc_info:
        validate({"kind": "local"}, LINK)
    error = exc_info.value
    assert error.message == (
        'Field "kind" depends on field "target" with validation: Field "target" is required (at $.target)'
    )
    assert error.path == "$.kind"
    assert error.field == "kind"
    assert error.depends_on == "target"


def test_target_value_violation_nests_its_message():
    with pytest.raises(DependencyError) as exc_info:
        validate({"kind": "local", "target": "db-a"}, LINK)
    assert exc_info.value.message == (
        'Field "kind" depends on field "target" with validation: '
        'Field "target" is not valid. Should start with svc- (at $.target)'
    )


def test_dependency_is_checked_against_the_sibling_not_the_own_value():
    # "mode" itself is a valid value; its rule looks at "kind"
    with pytest.raises(DependencyError) as exc_info:
        validate({"kind": "local", "target": "svc-a", "mode": "push"}, LINK)
    assert exc_info.value.path == "$.mode"
    assert "Allowed values are: remote" in exc_info.value.message


def test_dependency_is_skipped_for_absent_field():
    validate({"kind": "remote", "target": "svc-a", "mode": None}, LINK)


def test_own_validators_run_before_dependencies():
    with pytest.raises(FieldValueError):
        validate({"kind": "local", "target": "svc-a", "mode": "sideways"}, LINK)


def test_dependencies_run_before_children():
    # "mode" is a string, so descending into its children would fail too
    with pytest.raises(DependencyError):
        validate({"kind": "local", "target": "svc-a", "mode": "pull"}, LINK)


def test_dependency_error_is_a_validation_error():
    assert issubclass(DependencyError, ValidationError)
