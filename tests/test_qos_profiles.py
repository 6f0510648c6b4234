import dataclasses

import pytest

from rmwkit import qos_profiles as qos
from rmwkit.time import INT64_MAX, time_total_nsec


def test_default_constructor_matches_default_profile():
    assert qos.QosProfile() == qos.DEFAULT


def test_sensor_data_profile():
    expected = qos.QosProfile(depth=5, reliability=qos.ReliabilityPolicy.BEST_EFFORT)
    assert qos.SENSOR_DATA == expected
    assert qos.SENSOR_DATA.history is qos.HistoryPolicy.KEEP_LAST


def test_parameter_profiles_share_policies():
    expected = qos.QosProfile(depth=1000)
    assert qos.PARAMETERS == expected
    assert qos.PARAMETER_EVENTS == expected


def test_services_default_equals_default():
    profile = qos.QosProfile()
    assert qos.SERVICES_DEFAULT == profile
    assert hash(qos.SERVICES_DEFAULT) == hash(profile)


def test_system_default_profile_uses_system_default_policies():
    expected = qos.QosProfile(
        history=qos.HistoryPolicy.SYSTEM_DEFAULT,
        depth=qos.DEPTH_SYSTEM_DEFAULT,
        reliability=qos.ReliabilityPolicy.SYSTEM_DEFAULT,
        durability=qos.DurabilityPolicy.SYSTEM_DEFAULT,
    )
    assert qos.SYSTEM_DEFAULT == expected


def test_best_available_durations_sit_just_below_infinite():
    deadline = time_total_nsec(qos.BEST_AVAILABLE.deadline)
    lease = time_total_nsec(qos.BEST_AVAILABLE.liveliness_lease_duration)
    assert deadline == INT64_MAX - 1
    assert lease == deadline


def test_unknown_profile_uses_unknown_policies():
    expected = qos.QosProfile(
        history=qos.HistoryPolicy.UNKNOWN,
        depth=qos.DEPTH_SYSTEM_DEFAULT,
        reliability=qos.ReliabilityPolicy.UNKNOWN,
        durability=qos.DurabilityPolicy.UNKNOWN,
        liveliness=qos.LivelinessPolicy.UNKNOWN,
    )
    assert qos.UNKNOWN == expected


def test_profiles_are_immutable():
    profile = qos.QosProfile()
    with pytest.raises(dataclasses.FrozenInstanceError):
        profile.depth = 1
    assert profile.depth == 10


def test_replace_produces_distinct_profile():
    changed = dataclasses.replace(qos.DEFAULT, depth=3)
    assert changed == qos.QosProfile(depth=3)
    assert changed.reliability is qos.DEFAULT.reliability
    assert qos.DEFAULT.depth == 10


def test_plain_integers_are_coerced_to_policies():
    profile = qos.QosProfile(history=int(qos.HistoryPolicy.KEEP_ALL))
    assert profile.history is qos.HistoryPolicy.KEEP_ALL


def test_negative_depth_is_rejected():
    with pytest.raises(ValueError):
        qos.QosProfile(depth=-1)


def test_unknown_policy_value_is_rejected():
    with pytest.raises(ValueError):
        qos.QosProfile(reliability=99)


def test_compatibility_ordering():
    assert qos.QosCompatibility.OK < qos.QosCompatibility.WARNING < qos.QosCompatibility.ERROR
    assert qos.QosCompatibility(0) is qos.QosCompatibility.OK