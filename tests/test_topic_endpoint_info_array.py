import pytest

from rmwkit.topic_endpoint_info import TopicEndpointInfo
from rmwkit.topic_endpoint_info_array import TopicEndpointInfoArray


def test_zero_initialize():
    arr = TopicEndpointInfoArray()
    assert arr.size == 0
    assert not arr.info_array


def test_check_zero():
    arr = TopicEndpointInfoArray()
    arr.check_zero()
    assert arr.size == 0

    arr_size_not_zero = TopicEndpointInfoArray(1, None)
    with pytest.raises(RuntimeError):
        arr_size_not_zero.check_zero()

    arr_info_array_not_null = TopicEndpointInfoArray(0, [TopicEndpointInfo()])
    with pytest.raises(RuntimeError):
        arr_info_array_not_null.check_zero()


def test_check_init_with_size():
    arr = TopicEndpointInfoArray()
    arr.init_with_size(5)
    assert arr.info_array
    assert arr.size == 5
    assert len(arr.info_array) == 5
    assert all(info == TopicEndpointInfo() for info in arr.info_array)
    arr.fini()
    assert arr.info_array is None


def test_init_elements_are_distinct():
    arr = TopicEndpointInfoArray()
    arr.init_with_size(2)
    arr.info_array[0].set_node_name("talker")
    assert arr.info_array[1].node_name is None


def test_init_on_non_zero_array_raises():
    arr = TopicEndpointInfoArray()
    arr.init_with_size(1)
    with pytest.raises(ValueError):
        arr.init_with_size(3)
    assert arr.size == 1


def test_init_negative_size_raises():
    arr = TopicEndpointInfoArray()
    with pytest.raises(ValueError):
        arr.init_with_size(-1)
    assert arr.info_array is None


def test_check_fini():
    arr = TopicEndpointInfoArray()
    arr.init_with_size(5)
    assert arr.info_array
    arr.fini()
    assert not arr.info_array
    assert arr.size == 0
    arr.check_zero()
    assert arr == TopicEndpointInfoArray()


def test_fini_finalizes_elements():
    arr = TopicEndpointInfoArray()
    arr.init_with_size(1)
    element = arr.info_array[0]
    element.set_topic_type("std_msgs/msg/String")
    arr.fini()
    assert element.topic_type is None


def test_reinit_after_fini():
    arr = TopicEndpointInfoArray()
    arr.init_with_size(2)
    arr.fini()
    arr.init_with_size(3)
    assert arr.size == 3
    assert len(arr.info_array) == 3