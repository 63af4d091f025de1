"""Tests for the object validator."""

import asyncio

import pytest

from dataknobs_validators import ObjectValidator, v, validate


class TestObjectValidation:
    """Test per-key validation of mappings."""

    @pytest.mark.asyncio
    async def test_valid_signup(self, signup_schema):
        """Test mutation, defaults and omitted fields together."""
        result = await validate(signup_schema, {
            "name": "  Ada ",
            "email": " ADA@Example.com ",
            "password": "secret123",
            "password_confirmation": "secret123",
        })

        assert result.is_valid
        assert result.data == {
            "name": "Ada",
            "email": "ada@example.com",
            "password": "secret123",
            "newsletter": False,
        }

    @pytest.mark.asyncio
    async def test_reports_every_invalid_field(self, signup_schema):
        """Test that all invalid fields are reported."""
        result = await validate(signup_schema, {
            "name": "Ada",
            "email": "not-an-email",
            "password": "short",
            "password_confirmation": "different",
        })

        assert not result.is_valid
        assert [(error.input, error.type) for error in result.errors] == [
            ("email", "email"),
            ("password", "minLength"),
            ("password_confirmation", "equalsField"),
        ]

    @pytest.mark.asyncio
    async def test_absent_optional_keys_are_skipped(self):
        """Test that absent keys without presence rules never appear."""
        schema = v.object({
            "name": v.string().min_length(3),
            "nick": v.string().min_length(3),
        })

        result = await validate(schema, {"name": "Ada"})
        assert result.is_valid
        assert result.data == {"name": "Ada"}

    @pytest.mark.asyncio
    async def test_explicit_none_is_kept(self):
        """Test that None values stay in the output."""
        result = await validate(v.object({"nick": v.string()}), {"nick": None})
        assert result.is_valid
        assert result.data == {"nick": None}

    @pytest.mark.asyncio
    async def test_defaults(self):
        """Test defaults for absent and None values."""
        schema = v.object({
            "role": v.string().default("user"),
            "tags": v.array(v.string()).default([]),
        })

        result = await validate(schema, {"role": None})
        assert result.data == {"role": "user", "tags": []}

        first = await validate(schema, {})
        second = await validate(schema, {})
        assert first.data["tags"] is not second.data["tags"]

    @pytest.mark.asyncio
    async def test_nested_paths(self):
        """Test that nested errors carry dotted paths."""
        schema = v.object({"user": v.object({"email": v.string().email()})})

        result = await validate(schema, {"user": {"email": "bad"}})
        assert result.errors[0].input == "user.email"
        assert result.errors[0].error == "The user.email must be a valid email address"

    @pytest.mark.asyncio
    async def test_non_object_input_does_not_descend(self):
        """Test that a container type failure suppresses child errors."""
        schema = v.object({"name": v.string().required()})

        result = await validate(schema, "nope")
        assert [error.type for error in result.errors] == ["object"]
        assert result.errors[0].error == "The data must be an object"
        assert result.data == "nope"

    @pytest.mark.asyncio
    async def test_none_input_is_valid_unless_required(self):
        """Test that a None object passes when nothing requires it."""
        result = await validate(v.object({"name": v.string().required()}), None)
        assert result.is_valid
        assert result.data is None

        result = await validate(v.object({"name": v.string()}).required(), None)
        assert [error.type for error in result.errors] == ["required"]

    @pytest.mark.asyncio
    async def test_errors_follow_schema_order(self):
        """Test that concurrent children report in declaration order."""

        async def slow(value, context):
            await asyncio.sleep(0.02)
            return "slow failure"

        schema = v.object({
            "a": v.string().refine(slow),
            "b": v.string().refine(lambda value, ctx: "fast failure"),
        })

        result = await validate(schema, {"a": "x", "b": "y"})
        assert [error.input for error in result.errors] == ["a", "b"]

    @pytest.mark.asyncio
    async def test_input_is_not_modified(self):
        """Test that mutators never write into the caller's data."""
        payload = {"name": "  Ada  ", "extra": 1}
        schema = v.object({"name": v.string().trim()}).strip_unknown()

        result = await validate(schema, payload)
        assert result.data == {"name": "Ada"}
        assert payload == {"name": "  Ada  ", "extra": 1}


class TestOmit:
    """Test fields validated but excluded from the output."""

    @pytest.mark.asyncio
    async def test_passing_omitted_field_is_absent(self):
        """Test that a valid omitted field does not appear in data."""
        schema = v.object({
            "password": v.string().required(),
            "confirm": v.string().same_as("password").omit(),
        })

        result = await validate(schema, {"password": "secret", "confirm": "secret"})
        assert result.is_valid
        assert result.data == {"password": "secret"}

    @pytest.mark.asyncio
    async def test_failing_omitted_field_reports_error(self):
        """Test that an omitted field still reports errors."""
        schema = v.object({
            "password": v.string().required(),
            "confirm": v.string().same_as("password").exclude(),
        })

        result = await validate(schema, {"password": "secret", "confirm": "other"})
        assert not result.is_valid
        assert result.errors[0].input == "confirm"
        assert "confirm" not in result.data


class TestUnknownKeys:
    """Test unknown key policies."""

    @pytest.mark.asyncio
    async def test_unknown_keys_rejected(self):
        """Test the default rejection of extra keys."""
        result = await validate(v.object({"name": v.string()}), {"name": "x", "extra": 1})

        assert not result.is_valid
        assert result.errors[0].type == "unknownKeys"
        assert result.errors[0].error == "The data contains unknown keys: extra"

    @pytest.mark.asyncio
    async def test_allow_listed_keys(self):
        """Test that allowed keys pass but are not copied."""
        schema = v.object({"name": v.string()}).allow("extra")

        result = await validate(schema, {"name": "x", "extra": 1})
        assert result.is_valid
        assert result.data == {"name": "x"}

    @pytest.mark.asyncio
    async def test_allow_unknown_passes_keys_through(self):
        """Test that allow_unknown copies extra keys to the output."""
        schema = v.object({"name": v.string().trim()}).allow_unknown()

        result = await validate(schema, {"name": " x ", "extra": 1})
        assert result.is_valid
        assert result.data == {"name": "x", "extra": 1}

    @pytest.mark.asyncio
    async def test_strip_unknown(self):
        """Test that strip_unknown drops undeclared keys before the rules."""
        schema = v.object({"name": v.string()}).strip_unknown()

        result = await validate(schema, {"name": "x", "extra": 1})
        assert result.is_valid
        assert result.data == {"name": "x"}

    @pytest.mark.asyncio
    async def test_strip_unknown_keeps_allowed(self):
        """Test that allowed keys survive stripping."""
        schema = v.object({"name": v.string()}).allow("extra").strip_unknown()

        result = await validate(schema, {"name": "x", "extra": 1, "other": 2})
        assert result.is_valid


class TestObjectBuilders:
    """Test extend, merge, pick, without and clone."""

    def test_extend_does_not_touch_original(self):
        """Test that extend returns an independent copy."""
        base = v.object({"name": v.string().required()})
        extended = base.extend({"age": v.int()})

        assert set(extended.schema) == {"name", "age"}
        assert set(base.schema) == {"name"}
        assert extended.schema["name"] is not base.schema["name"]

    def test_merge(self):
        """Test merging schemas and policies."""
        base = v.object({"name": v.string()})
        other = v.object({"age": v.int()}).allow_unknown()

        merged = base.merge(other)
        assert isinstance(merged, ObjectValidator)
        assert set(merged.schema) == {"name", "age"}
        assert merged.should_allow_unknown is True
        assert [rule.name for rule in merged.rules].count("object") == 1

    @pytest.mark.asyncio
    async def test_merge_strip_unknown_uses_merged_keys(self):
        """Test that a borrowed strip_unknown honors keys allowed on either side."""
        base = v.object({"name": v.string()}).allow("nickname")
        other = v.object({"age": v.int()}).allow("tag").strip_unknown()

        merged = base.merge(other)
        strip = [m for m in merged.mutators if m.options.get("allowedKeys") is not None]
        assert strip[0].options["allowedKeys"] is merged.allowed_keys

        data = {"name": "x", "age": 1, "nickname": "y", "tag": "t", "other": 2}
        result = await validate(merged, data)
        assert result.is_valid
        assert result.data == {"name": "x", "age": 1}
        assert other.allowed_keys == ["tag"]

    def test_pick_and_without(self):
        """Test selecting and removing keys."""
        schema = v.object({"a": v.string(), "b": v.string(), "c": v.string()})

        assert list(schema.pick("a", "c").schema) == ["a", "c"]
        assert list(schema.without("b").schema) == ["a", "c"]
        assert list(schema.schema) == ["a", "b", "c"]

    def test_clone_is_deep(self):
        """Test that changing a clone's children leaves the original alone."""
        base = v.object({"name": v.string()})
        copy = base.clone()
        copy.schema["name"].min_length(3)

        assert len(base.schema["name"].rules) == 1
        assert len(copy.schema["name"].rules) == 2

    @pytest.mark.asyncio
    async def test_trim(self):
        """Test recursive trimming of string values."""
        schema = v.object({
            "name": v.string(),
            "address": v.object({"city": v.string()}),
        }).trim()

        result = await validate(schema, {"name": " Ada ", "address": {"city": " London "}})
        assert result.data == {"name": "Ada", "address": {"city": "London"}}


class TestScope:
    """Test global and sibling field lookups."""

    @pytest.mark.asyncio
    async def test_sibling_equals_global_at_root(self):
        """Test that both scopes agree for top-level fields."""
        global_schema = v.object({
            "type": v.string(),
            "company": v.string().required_if("type", "business"),
        })
        sibling_schema = v.object({
            "type": v.string(),
            "company": v.string().required_if_sibling("type", "business"),
        })

        for data in ({"type": "business"}, {"type": "personal"}):
            global_result = await validate(global_schema, data)
            sibling_result = await validate(sibling_schema, data)
            assert global_result.to_dict() == sibling_result.to_dict()

    @pytest.mark.asyncio
    async def test_sibling_reads_nearest_parent(self):
        """Test that nested sibling lookups use the enclosing object."""
        data = {"type": "business", "billing": {"type": "personal"}}

        sibling_schema = v.object({
            "type": v.string(),
            "billing": v.object({
                "type": v.string(),
                "company": v.string().required_if_sibling("type", "business"),
            }),
        })
        global_schema = v.object({
            "type": v.string(),
            "billing": v.object({
                "type": v.string(),
                "company": v.string().required_if("type", "business"),
            }),
        })

        assert (await validate(sibling_schema, data)).is_valid

        result = await validate(global_schema, data)
        assert result.errors[0].input == "billing.company"
        assert result.errors[0].type == "requiredIf"

    @pytest.mark.asyncio
    async def test_global_dotted_path(self):
        """Test global lookups through nested keys."""
        schema = v.object({
            "account": v.object({"plan": v.string()}),
            "seats": v.int().required_if("account.plan", "team"),
        })

        result = await validate(schema, {"account": {"plan": "team"}})
        assert result.errors[0].input == "seats"
