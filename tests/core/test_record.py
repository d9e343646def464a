"""Tests for the Record value type.

Critical Invariants:
- Equality and hashing use id only
- default() is the zero value
- duplicate() follows the id policy, duplicate_from() never touches id
"""

import copy

import pytest

from recordkit import IdPolicy, Record, equals, not_equals
from recordkit.core import Duplicable


def test_default_is_zero_value():
    person = Record.default()

    assert person.id == 0
    assert person.name == ""
    assert person.age == 0
    assert person.height == 0


def test_build_keeps_fields_as_given():
    """No range checking: out-of-range values are stored unchanged."""
    person = Record.build(2**64 + 5, "Zed", -1, 70_000)

    assert (person.id, person.name, person.age, person.height) == (2**64 + 5, "Zed", -1, 70_000)


# Identity equality


def test_same_id_different_payload_is_equal(sid_zero):
    """CRITICAL: Only id decides equality.

    Why: Records are entities; name/age/height are mutable payload.
    """
    assert sid_zero == Record.default()
    assert equals(sid_zero, Record.default())
    assert not not_equals(sid_zero, Record.default())


def test_different_id_same_payload_is_not_equal(sid, sid_zero):
    assert sid != sid_zero
    assert not equals(sid, sid_zero)
    assert not_equals(sid, sid_zero)


def test_hash_consistent_with_equality(sid):
    renamed = Record.build(sid.id, "Other", 99, 199)

    assert hash(renamed) == hash(sid)
    assert len({sid, renamed}) == 1


def test_not_equal_to_other_types(sid):
    assert sid != 100
    assert sid != (100, "Sid", 10, 120)


# Duplication


def test_duplicate_reset_policy_starts_new_identity(sid):
    twin = sid.duplicate(IdPolicy.RESET)

    assert twin.id == 0
    assert (twin.name, twin.age, twin.height) == ("Sid", 10, 120)
    assert twin is not sid
    assert twin != sid, "INVARIANT: reset duplicate of a non-zero id is a different entity"


def test_duplicate_preserve_policy_keeps_identity(sid):
    twin = sid.duplicate(IdPolicy.PRESERVE)

    assert twin.id == sid.id
    assert twin == sid
    assert twin is not sid


def test_duplicate_of_zero_id_equals_source_under_reset(sid_zero):
    assert sid_zero.duplicate(IdPolicy.RESET) == sid_zero


def test_duplicate_uses_configured_default_policy(fresh_settings, sid):
    """Default policy comes from RecordSettings (RESET unless overridden)."""
    assert sid.duplicate().id == 0

    fresh_settings.setenv("RECORDKIT_DUPLICATE_ID_POLICY", "preserve")
    from recordkit.config import get_settings

    get_settings.cache_clear()
    assert sid.duplicate().id == sid.id


def test_duplicate_is_independent(sid):
    twin = sid.duplicate(IdPolicy.PRESERVE)
    twin.name = "Changed"
    twin.age = 11

    assert sid.name == "Sid"
    assert sid.age == 10


def test_duplicate_from_overwrites_payload_keeps_id():
    target = Record.build(5, "test", 10, 150)
    source = Record.build(9, "Sid", 30, 180)

    target.duplicate_from(source)

    assert target.id == 5, "INVARIANT: duplicate_from must not reassign identity"
    assert (target.name, target.age, target.height) == ("Sid", 30, 180)
    assert (source.id, source.name) == (9, "Sid")


def test_stdlib_copy_preserves_identity(fresh_settings, sid):
    """CRITICAL: copy.copy and copy.deepcopy keep the id, whatever the configured policy.

    Why: Hashed containers rebuilt from reset ids would collapse to one entry.
    """
    shallow = copy.copy(sid)
    deep = copy.deepcopy([sid])[0]

    assert shallow.id == deep.id == sid.id
    assert shallow is not sid
    assert deep is not sid
    assert shallow.name == deep.name == "Sid"


def test_deepcopy_keeps_hashed_containers_intact(fresh_settings):
    first = Record.build(1, "A", 10, 120)
    second = Record.build(2, "B", 20, 130)

    copied_set = copy.deepcopy({first, second})
    copied_dict = copy.deepcopy({first: "a", second: "b"})

    assert copied_set == {first, second}
    assert copied_dict == {first: "a", second: "b"}


def test_deepcopy_preserves_aliasing(fresh_settings, sid):
    pair = copy.deepcopy([sid, sid])

    assert pair[0] is pair[1]
    assert pair[0] is not sid


def test_record_is_duplicable(sid):
    assert isinstance(sid, Duplicable)


@pytest.mark.parametrize("policy", list(IdPolicy))
def test_duplicate_never_mutates_source(sid, policy):
    sid.duplicate(policy)

    assert (sid.id, sid.name, sid.age, sid.height) == (100, "Sid", 10, 120)
