"""Tests for the constraint model."""

import dataclasses

import pytest

from descriptor_constraints.exceptions import SchemaDefinitionError
from descriptor_constraints.schema.constraints import (
    FieldConstraint,
    ObjectConstraints,
    UnionConstraints,
    as_constraint,
)
from descriptor_constraints.schema.validators import required, values


class TestObjectConstraints:

    def test_preserves_declaration_order(self):
        constraints = ObjectConstraints({
            "zeta": FieldConstraint(),
            "alpha": FieldConstraint(),
            "mid": FieldConstraint(),
        })
        assert list(constraints) == ["zeta", "alpha", "mid"]
        assert [name for name, _ in constraints.fields()] == ["zeta", "alpha", "mid"]

    def test_accepts_pairs(self):
        constraints = ObjectConstraints([("b", FieldConstraint()), ("a", FieldConstraint(required=True))])
        assert list(constraints) == ["b", "a"]
        assert constraints["a"].required

    def test_duplicate_names_are_rejected(self):
        with pytest.raises(SchemaDefinitionError, match="more than once"):
            ObjectConstraints([("a", FieldConstraint()), ("a", FieldConstraint())])

    def test_entries_must_be_field_constraints(self):
        with pytest.raises(SchemaDefinitionError):
            ObjectConstraints({"a": {"required": True}})

    def test_is_read_only(self):
        constraints = ObjectConstraints({"a": FieldConstraint()})
        with pytest.raises(TypeError):
            constraints["b"] = FieldConstraint()

    def test_discriminators(self):
        constraints = ObjectConstraints({
            "name": FieldConstraint(type="string"),
            "type": FieldConstraint(type="string", validators=(values(["a"]),)),
        })
        assert [name for name, _ in constraints.discriminators()] == ["type"]

    def test_equality(self):
        assert ObjectConstraints({"a": FieldConstraint()}) == ObjectConstraints({"a": FieldConstraint()})
        assert ObjectConstraints({"a": FieldConstraint()}) != ObjectConstraints({"b": FieldConstraint()})


class TestFieldConstraint:

    def test_unknown_type_is_rejected(self):
        with pytest.raises(SchemaDefinitionError, match="Unknown type"):
            FieldConstraint(type="date")

    def test_children_dict_becomes_object_constraints(self):
        constraint = FieldConstraint(children={"a": FieldConstraint()})
        assert isinstance(constraint.children, ObjectConstraints)

    def test_children_list_becomes_union(self):
        constraint = FieldConstraint(children=[{"a": FieldConstraint()}, {"b": FieldConstraint()}])
        assert isinstance(constraint.children, UnionConstraints)
        assert len(constraint.children) == 2

    def test_depends_on_is_normalized(self):
        constraint = FieldConstraint(depends_on={"other": [required]})
        assert constraint.depends_on == (("other", (required,)),)

    def test_empty_dependency_is_rejected(self):
        with pytest.raises(SchemaDefinitionError):
            FieldConstraint(depends_on={"other": []})

    def test_validators_must_be_validators(self):
        with pytest.raises(SchemaDefinitionError):
            FieldConstraint(validators=(lambda value: True,))

    def test_is_frozen(self):
        constraint = FieldConstraint()
        with pytest.raises(dataclasses.FrozenInstanceError):
            constraint.required = True


class TestUnionConstraints:

    def test_requires_an_alternative(self):
        with pytest.raises(SchemaDefinitionError):
            UnionConstraints(())

    def test_declared_fields_in_first_seen_order(self):
        union = UnionConstraints((
            {"name": FieldConstraint(), "value": FieldConstraint()},
            {"name": FieldConstraint(), "valueFrom": FieldConstraint()},
        ))
        assert union.declared_fields() == ("name", "value", "valueFrom")


class TestAsConstraint:

    def test_dict(self):
        assert isinstance(as_constraint({"a": FieldConstraint()}), ObjectConstraints)

    def test_list(self):
        assert isinstance(as_constraint([{"a": FieldConstraint()}]), UnionConstraints)

    def test_model_objects_pass_through(self):
        constraints = ObjectConstraints({})
        assert as_constraint(constraints) is constraints

    def test_unsupported(self):
        with pytest.raises(SchemaDefinitionError):
            as_constraint("string")
