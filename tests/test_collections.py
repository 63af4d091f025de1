"""Tests for array, tuple and record validators."""

import asyncio

import pytest

from dataknobs_validators import SchemaDefinitionError, v, validate


class TestArrayValidator:
    """Test list validation."""

    @pytest.mark.asyncio
    async def test_items_are_mutated(self):
        """Test that each item goes through the item validator."""
        result = await validate(v.array(v.string().trim().lowercase()), [" A ", "b "])
        assert result.is_valid
        assert result.data == ["a", "b"]

    @pytest.mark.asyncio
    async def test_item_error_paths(self):
        """Test that item errors are addressed by index."""
        schema = v.object({"tags": v.array(v.string())})

        result = await validate(schema, {"tags": ["ok", 5]})
        assert result.errors[0].input == "tags.1"
        assert result.errors[0].error == "The tags.1 must be a string"

    @pytest.mark.asyncio
    async def test_non_list_reports_only_type_error(self):
        """Test that a non-list never reaches the items."""
        result = await validate(v.array(v.int()), "x")
        assert [error.type for error in result.errors] == ["array"]

    @pytest.mark.asyncio
    async def test_order_preserved_despite_completion_order(self):
        """Test that output slots follow input positions."""

        async def delay(value, context):
            await asyncio.sleep(value / 100)
            return None

        result = await validate(v.array(v.int().refine(delay)), [3, 1, 2])
        assert result.data == [3, 1, 2]

    @pytest.mark.asyncio
    async def test_length_rules(self):
        """Test min/max length on arrays."""
        schema = v.array(v.int()).min_length(2).max_length(3)

        assert (await validate(schema, [1, 2])).is_valid
        assert (await validate(schema, [1])).errors[0].type == "minLength"
        assert (await validate(schema, [1, 2, 3, 4])).errors[0].type == "maxLength"

    @pytest.mark.asyncio
    async def test_unique_rule_and_only_unique_mutator(self):
        """Test rejecting duplicates versus dropping them."""
        result = await validate(v.array(v.int()).unique(), [1, 1, 2])
        assert result.errors[0].type == "uniqueArray"

        result = await validate(v.array(v.int()).only_unique(), [1, 1, 2])
        assert result.is_valid
        assert result.data == [1, 2]

    @pytest.mark.asyncio
    async def test_sort_flip_and_remove_empty(self):
        """Test the list mutators."""
        assert (await validate(v.array(v.int()).sort(), [3, 1, 2])).data == [1, 2, 3]
        assert (await validate(v.array(v.int()).sort("desc"), [3, 1, 2])).data == [3, 2, 1]
        assert (await validate(v.array(v.int()).flip(), [1, 2, 3])).data == [3, 2, 1]
        assert (await validate(v.array(v.string()).remove_empty(), ["a", "", None])).data == ["a"]

    @pytest.mark.asyncio
    async def test_sort_by_key(self):
        """Test sorting objects by a dotted key."""
        schema = v.array(v.object({"n": v.int()})).sort(key="n")
        result = await validate(schema, [{"n": 2}, {"n": 1}])
        assert result.data == [{"n": 1}, {"n": 2}]

    @pytest.mark.asyncio
    async def test_sorted_rule(self):
        """Test the sorted rule."""
        assert (await validate(v.array(v.int()).sorted(), [1, 2, 2])).is_valid
        assert not (await validate(v.array(v.int()).sorted(), [2, 1])).is_valid

    @pytest.mark.asyncio
    async def test_sort_by_key_with_missing_values(self):
        """Test that items lacking the sort key go last in either direction."""
        items = v.object({"n": v.int()}).allow_unknown()
        data = [{"n": 2}, {"m": 1}, {"n": 1}]

        result = await validate(v.array(items).sort(key="n"), data)
        assert result.data == [{"n": 1}, {"n": 2}, {"m": 1}]

        result = await validate(v.array(items.clone()).sort("desc", key="n"), data)
        assert result.data == [{"n": 2}, {"n": 1}, {"m": 1}]

    @pytest.mark.asyncio
    async def test_sort_mixed_types(self):
        """Test sorting values of different types."""
        result = await validate(v.array(v.any()).sort(), [3, "b", None, 1, "a"])
        assert result.data == [1, 3, "a", "b", None]

    @pytest.mark.asyncio
    async def test_sorted_rule_mixed_types(self):
        """Test the sorted rule on values of different types."""
        assert (await validate(v.array(v.any()).sorted(), [1, "a"])).is_valid
        assert not (await validate(v.array(v.any()).sorted(), ["a", 1])).is_valid

    @pytest.mark.asyncio
    @pytest.mark.parametrize("method,rule", [("unique", "uniqueArray"), ("sorted", "sortedArray")])
    async def test_content_rules_on_non_list(self, all_errors, method, rule):
        """Test that content rules report a non-list instead of raising."""
        validator = getattr(v.array(v.int()), method)()
        result = await validate(validator, 5, all_errors)
        assert [error.type for error in result.errors] == ["array", rule]


class TestTupleValidator:
    """Test fixed-length positional validation."""

    @pytest.mark.asyncio
    async def test_length_mismatch_fails_fast(self):
        """Test a single length error and no positional checks."""
        schema = v.tuple([v.string(), v.number()])

        result = await validate(schema, ["a"])
        assert not result.is_valid
        assert len(result.errors) == 1
        assert result.errors[0].to_dict() == {
            "type": "tuple",
            "error": "Expected exactly 2 items, but got 1",
            "input": "value",
        }

    @pytest.mark.asyncio
    async def test_valid_tuple(self):
        """Test matching positions."""
        result = await validate(v.tuple([v.string(), v.number()]), ["a", 1])
        assert result.is_valid
        assert result.data == ["a", 1]

    @pytest.mark.asyncio
    async def test_position_type_mismatch(self):
        """Test that each position uses its own validator."""
        result = await validate(v.tuple([v.string(), v.number()]), [1, 1])
        assert not result.is_valid
        assert result.errors[0].input == "0"
        assert result.errors[0].type == "string"

    @pytest.mark.asyncio
    async def test_length_error_uses_key(self):
        """Test that nested tuples name their key."""
        schema = v.object({"point": v.tuple([v.number(), v.number()])})
        result = await validate(schema, {"point": [1, 2, 3]})
        assert result.errors[0].input == "point"

    def test_empty_tuple_rejected(self):
        """Test that a tuple needs positions."""
        with pytest.raises(SchemaDefinitionError):
            v.tuple([])


class TestRecordValidator:
    """Test mappings with arbitrary keys."""

    @pytest.mark.asyncio
    async def test_values_share_validator(self):
        """Test every value goes through the same validator."""
        result = await validate(v.record(v.int()), {"a": 1, "b": "2"})
        assert result.is_valid
        assert result.data == {"a": 1, "b": 2}

    @pytest.mark.asyncio
    async def test_errors_keyed_by_record_key(self):
        """Test error addressing in records."""
        schema = v.object({"scores": v.record(v.int().min(0))})

        result = await validate(schema, {"scores": {"ada": 3, "bob": -1}})
        assert result.errors[0].input == "scores.bob"
        assert result.errors[0].type == "min"

    @pytest.mark.asyncio
    async def test_non_mapping(self):
        """Test the record type rule."""
        result = await validate(v.record(v.int()), [1])
        assert [error.type for error in result.errors] == ["object"]
