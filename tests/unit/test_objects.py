"""Unit tests for awesomelib.objects."""

from types import MappingProxyType

import pytest

from awesomelib import objects
from awesomelib.errors import (
    CyclicReferenceError,
    PathConflictError,
    UnserializableValueError,
)

# pylint: disable=magic-value-comparison

# ============================================================================
#                           Copying & merging
# ============================================================================


class TestDeepClone:
    """Tests for deep_clone."""

    @staticmethod
    def test_copy_shares_nothing():
        """Mutating the clone never reaches the original."""
        original = {"a": 1, "b": {"c": [1, 2, {"d": 3}]}}
        clone = objects.deep_clone(original)
        assert clone == original
        clone["b"]["c"][2]["d"] = 99
        clone["b"]["c"].append(4)
        assert original == {"a": 1, "b": {"c": [1, 2, {"d": 3}]}}

    @staticmethod
    def test_json_normalization():
        """Tuples become lists and non-string keys become strings."""
        assert objects.deep_clone({1: (1, 2)}) == {"1": [1, 2]}

    @staticmethod
    def test_cycles_are_rejected():
        """A self-referencing structure raises CyclicReferenceError."""
        cyclic: dict = {"a": 1}
        cyclic["self"] = cyclic
        with pytest.raises(CyclicReferenceError):
            objects.deep_clone(cyclic)

    @staticmethod
    @pytest.mark.parametrize("value", [{"f": print}, {"s": {1, 2}}, [object()]])
    def test_unserializable_values_are_rejected(value):
        """Values without a JSON form raise UnserializableValueError."""
        with pytest.raises(UnserializableValueError):
            objects.deep_clone(value)


class TestMerging:
    """Tests for merge_objects and merge_deep."""

    @staticmethod
    def test_merge_objects_is_shallow_and_pure():
        """Source keys win; neither input changes."""
        target, source = {"a": 1, "b": {"x": 1}}, {"b": {"y": 2}, "c": 3}
        merged = objects.merge_objects(target, source)
        assert merged == {"a": 1, "b": {"y": 2}, "c": 3}
        assert target == {"a": 1, "b": {"x": 1}}
        assert merged is not target

    @staticmethod
    def test_merge_deep_merges_nested_mappings_in_place():
        """Nested mappings are combined and target is returned."""
        target = {"a": 1, "b": {"x": 1, "y": {"z": 1}}}
        result = objects.merge_deep(target, {"b": {"y": {"w": 2}}, "c": 3})
        assert result is target
        assert target == {"a": 1, "b": {"x": 1, "y": {"z": 1, "w": 2}}, "c": 3}

    @staticmethod
    def test_merge_deep_replaces_non_mappings():
        """A mapping over a scalar replaces it; lists are overwritten."""
        target = {"a": 5, "l": [1, 2]}
        objects.merge_deep(target, {"a": {"b": 1}, "l": [3]})
        assert target == {"a": {"b": 1}, "l": [3]}

    @staticmethod
    def test_merge_deep_does_not_alias_source():
        """Later edits to the merged target leave the source alone."""
        source = {"n": {"k": 1}}
        target: dict = {}
        objects.merge_deep(target, source)
        target["n"]["k"] = 2
        assert source == {"n": {"k": 1}}


# ============================================================================
#                           Selecting & reshaping
# ============================================================================


class TestSelection:
    """Tests for pick, omit and the entry accessors."""

    @staticmethod
    def test_pick_skips_missing_keys():
        """Only present keys are copied."""
        assert objects.pick({"a": 1, "b": 2, "c": 3}, ["a", "c", "z"]) == {
            "a": 1,
            "c": 3,
        }

    @staticmethod
    def test_omit():
        """Listed keys are removed from the copy."""
        source = {"a": 1, "b": 2, "c": 3}
        assert objects.omit(source, ["b"]) == {"a": 1, "c": 3}
        assert source == {"a": 1, "b": 2, "c": 3}

    @staticmethod
    def test_keys_values_entries():
        """Accessors follow insertion order."""
        obj = {"b": 2, "a": 1}
        assert objects.get_object_keys(obj) == ["b", "a"]
        assert objects.get_object_values(obj) == [2, 1]
        assert objects.to_entries(obj) == [("b", 2), ("a", 1)]


class TestReshaping:
    """Tests for rename, map, filter, invert, group and compact."""

    @staticmethod
    def test_rename_keys():
        """Mapped keys are renamed; empty targets keep the original name."""
        renamed = objects.rename_keys(
            {"a": 1, "b": 2, "c": 3}, {"a": "alpha", "c": ""}
        )
        assert renamed == {"alpha": 1, "b": 2, "c": 3}

    @staticmethod
    def test_map_object_passes_value_then_key():
        """The callback sees (value, key)."""
        assert objects.map_object({"a": 1, "b": 2}, lambda v, k: f"{k}{v * 2}") == {
            "a": "a2",
            "b": "b4",
        }

    @staticmethod
    def test_filter_object():
        """Entries failing the predicate are dropped."""
        kept = objects.filter_object({"a": 1, "b": 2, "c": 3}, lambda v, k: v % 2)
        assert kept == {"a": 1, "c": 3}

    @staticmethod
    def test_invert_object_last_write_wins():
        """Duplicate values keep the last key."""
        assert objects.invert_object({"a": 1, "b": 2, "c": 1}) == {1: "c", 2: "b"}

    @staticmethod
    def test_group_by():
        """Values are partitioned by the selector, preserving order."""
        people = {"ann": 31, "bob": 25, "cy": 38}
        groups = objects.group_by(people, lambda age, _name: age // 10 * 10)
        assert groups == {30: [31, 38], 20: [25]}

    @staticmethod
    def test_compact_object_keeps_falsy_values():
        """Only None is dropped."""
        obj = {"a": None, "b": 0, "c": "", "d": False, "e": []}
        assert objects.compact_object(obj) == {"b": 0, "c": "", "d": False, "e": []}

    @staticmethod
    def test_key_difference_and_intersection():
        """Results follow the first mapping's key order."""
        first, second = {"c": 1, "a": 2, "b": 3}, {"b": 0, "c": 0, "z": 0}
        assert objects.key_difference(first, second) == ["a"]
        assert objects.key_intersection(first, second) == ["c", "b"]


# ============================================================================
#                           Flattening
# ============================================================================


class TestFlattening:
    """Tests for flatten_object and unflatten_object."""

    @staticmethod
    def test_flatten_nested_mappings():
        """Nested keys are joined with dots."""
        nested = {"a": {"b": 1, "c": {"d": 2}}, "e": 3}
        assert objects.flatten_object(nested) == {"a.b": 1, "a.c.d": 2, "e": 3}

    @staticmethod
    def test_lists_and_empty_mappings_are_leaves():
        """Lists are not descended into; empty mappings survive."""
        flat = objects.flatten_object({"l": [1, {"x": 1}], "e": {}})
        assert flat == {"l": [1, {"x": 1}], "e": {}}

    @staticmethod
    def test_flatten_with_prefix():
        """A prefix is prepended to every key."""
        assert objects.flatten_object({"a": 1}, "root") == {"root.a": 1}

    @staticmethod
    def test_unflatten_rebuilds_nesting():
        """Dot-joined keys become nested dicts."""
        assert objects.unflatten_object({"a.b": 1, "a.c.d": 2, "e": 3}) == {
            "a": {"b": 1, "c": {"d": 2}},
            "e": 3,
        }

    @staticmethod
    def test_unflatten_later_key_wins():
        """A path through an earlier leaf replaces that leaf."""
        assert objects.unflatten_object({"a": 1, "a.b": 2}) == {"a": {"b": 2}}
        assert objects.unflatten_object({"a.b": 2, "a": 1}) == {"a": 1}

    @staticmethod
    def test_unflatten_does_not_write_into_input():
        """Mapping leaves are copied before deeper keys land in them."""
        leaf = {"x": 1}
        objects.unflatten_object({"a": leaf, "a.y": 2})
        assert leaf == {"x": 1}

    @staticmethod
    def test_round_trip():
        """Unflattening a flattened mapping restores it."""
        nested = {"a": {"b": [1, 2], "c": {}}, "d": None}
        assert objects.unflatten_object(objects.flatten_object(nested)) == nested


# ============================================================================
#                           Nested access
# ============================================================================


class TestNestedAccess:
    """Tests for get_nested_value and set_nested_value."""

    @staticmethod
    def test_get_existing_path():
        """The value at the end of the path is returned."""
        obj = {"a": {"b": {"c": 42}}}
        assert objects.get_nested_value(obj, ["a", "b", "c"]) == 42
        assert objects.get_nested_value(obj, ["a", "b"]) == {"c": 42}

    @staticmethod
    def test_get_missing_path_returns_default():
        """Missing keys and scalar intermediates yield the default."""
        obj = {"a": {"b": 1}}
        assert objects.get_nested_value(obj, ["a", "x"]) is None
        assert objects.get_nested_value(obj, ["a", "b", "c"], "n/a") == "n/a"

    @staticmethod
    def test_get_empty_path_returns_object():
        """An empty path returns the input itself."""
        obj = {"a": 1}
        assert objects.get_nested_value(obj, []) is obj

    @staticmethod
    def test_get_stored_none_is_not_the_default():
        """A stored None is returned as None even with another default."""
        assert objects.get_nested_value({"a": None}, ["a"], "dflt") is None

    @staticmethod
    def test_set_creates_intermediates():
        """Missing and None intermediates become dicts; obj is mutated."""
        obj: dict = {"a": None}
        result = objects.set_nested_value(obj, ["a", "b", "c"], 1)
        assert result is obj
        assert obj == {"a": {"b": {"c": 1}}}

    @staticmethod
    def test_set_overwrites_leaf():
        """An existing leaf is replaced."""
        obj = {"a": {"b": 1}}
        objects.set_nested_value(obj, ["a", "b"], 2)
        assert obj == {"a": {"b": 2}}

    @staticmethod
    def test_set_through_scalar_raises():
        """A scalar intermediate raises PathConflictError naming the key."""
        with pytest.raises(PathConflictError) as exc_info:
            objects.set_nested_value({"a": 5}, ["a", "b"], 1)
        assert exc_info.value.key == "a"
        assert exc_info.value.path == ["a", "b"]

    @staticmethod
    def test_set_empty_path_is_a_no_op():
        """Nothing is written for an empty path."""
        obj = {"a": 1}
        assert objects.set_nested_value(obj, [], 2) == {"a": 1}


# ============================================================================
#                           Predicates, equality & freezing
# ============================================================================


class TestPredicates:
    """Tests for is_empty_object, has_key and is_plain_object."""

    @staticmethod
    def test_is_empty_object():
        """Only mappings without keys are empty."""
        assert objects.is_empty_object({})
        assert not objects.is_empty_object({"a": None})

    @staticmethod
    def test_has_key():
        """Membership covers keys whose value is None."""
        assert objects.has_key({"a": None}, "a")
        assert not objects.has_key({"a": 1}, "b")

    @staticmethod
    @pytest.mark.parametrize(
        ("value", "expected"),
        [({}, True), ({"a": 1}, True), ([], False), (None, False), ("x", False)],
    )
    def test_is_plain_object(value, expected):
        """Dicts are plain objects; lists, None and strings are not."""
        assert objects.is_plain_object(value) is expected

    @staticmethod
    def test_mapping_proxy_is_not_plain():
        """Read-only views are not plain dicts."""
        assert not objects.is_plain_object(MappingProxyType({}))


class TestEquality:
    """Tests for shallow_equal and deep_equal."""

    @staticmethod
    def test_shallow_equal_scalars():
        """Same keys and strictly equal scalar values."""
        assert objects.shallow_equal({"a": 1, "b": "x"}, {"b": "x", "a": 1})
        assert not objects.shallow_equal({"a": 1}, {"a": 1, "b": 2})
        assert not objects.shallow_equal({"a": 1}, {"b": 1})

    @staticmethod
    def test_shallow_equal_compares_containers_by_identity():
        """Equal but distinct nested dicts are not shallow-equal."""
        shared = {"x": 1}
        assert objects.shallow_equal({"a": shared}, {"a": shared})
        assert not objects.shallow_equal({"a": {"x": 1}}, {"a": {"x": 1}})

    @staticmethod
    def test_shallow_equal_keeps_booleans_apart():
        """True is not strictly equal to 1."""
        assert not objects.shallow_equal({"a": True}, {"a": 1})

    @staticmethod
    def test_deep_equal_structures():
        """Nested mappings and sequences are compared by content."""
        first = {"a": [1, {"b": 2}], "c": {"d": None}}
        second = {"c": {"d": None}, "a": [1, {"b": 2}]}
        assert objects.deep_equal(first, second)
        assert not objects.deep_equal(first, {"a": [1, {"b": 3}], "c": {"d": None}})

    @staticmethod
    def test_deep_equal_mismatched_shapes():
        """Length, key-count and kind differences are unequal."""
        assert not objects.deep_equal([1, 2], [1, 2, 3])
        assert not objects.deep_equal({"a": 1}, {"a": 1, "b": 2})
        assert not objects.deep_equal({"a": 1}, [1])
        assert not objects.deep_equal({"a": [1]}, {"a": {"0": 1}})

    @staticmethod
    def test_deep_equal_scalars_are_strict():
        """True and 1 differ; 1 and 1.0 match."""
        assert not objects.deep_equal({"a": True}, {"a": 1})
        assert objects.deep_equal({"a": 1}, {"a": 1.0})
        assert objects.deep_equal("x", "x")


class TestFreezeObject:
    """Tests for freeze_object."""

    @staticmethod
    def test_nested_mappings_are_read_only():
        """Every level rejects assignment."""
        frozen = objects.freeze_object({"a": {"b": 1}, "l": [1, {"c": 2}]})
        with pytest.raises(TypeError):
            frozen["a"] = 2
        with pytest.raises(TypeError):
            frozen["a"]["b"] = 2
        with pytest.raises(TypeError):
            frozen["l"][1]["c"] = 3
        assert frozen["l"] == (1, MappingProxyType({"c": 2}))

    @staticmethod
    def test_original_stays_mutable():
        """The input is not affected by freezing."""
        original = {"a": {"b": 1}}
        objects.freeze_object(original)
        original["a"]["b"] = 2
        assert original == {"a": {"b": 2}}

    @staticmethod
    def test_scalars_and_sets():
        """Scalars pass through; sets become frozensets."""
        assert objects.freeze_object(5) == 5
        assert objects.freeze_object({1, 2}) == frozenset({1, 2})
