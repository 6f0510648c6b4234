# rmwkit

Plain Python data types for a publish/subscribe middleware layer. It covers
durations, QoS profiles, events, security options, subscription and
content-filter options, message sequences, and topic endpoint information.
It has no dependencies outside the standard library. It needs Python 3.10 or
later.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

### `rmwkit.time`

- `Time(sec=0, nsec=0)` is a frozen dataclass. Both fields must be `int` values
  in the unsigned 64-bit range. A non-int raises `TypeError`, and a value out of
  range raises `ValueError`.
- `time_total_nsec(time)` returns the total number of nanoseconds. The result
  saturates at `INT64_MAX` when it would not fit in a signed 64-bit count.
- `time_equal(left, right)` compares two times by their total nanoseconds.
- `time_from_nsec(nanoseconds)` splits a count into seconds and nanoseconds.
  A negative count returns `DURATION_INFINITE`.
- `time_normalize(time)` brings `nsec` below one second.
- Constants: `DURATION_UNSPECIFIED`, `DURATION_INFINITE`, `INT64_MAX`,
  `UINT64_MAX` and `NSEC_PER_SEC`.

### `rmwkit.qos_profiles`

- Policy enums: `HistoryPolicy`, `ReliabilityPolicy`, `DurabilityPolicy` and
  `LivelinessPolicy`.
- `QosCompatibility` has the values `OK`, `WARNING` and `ERROR`.
- `QosProfile` is a frozen dataclass. It holds history, depth, reliability,
  durability, deadline, lifespan, liveliness, liveliness lease duration and
  `avoid_ros_namespace_conventions`. A negative depth raises `ValueError`.
  Integer policy values are converted to their enums.
- Predefined profiles: `SENSOR_DATA`, `PARAMETERS`, `DEFAULT`,
  `SERVICES_DEFAULT`, `PARAMETER_EVENTS`, `SYSTEM_DEFAULT`, `BEST_AVAILABLE`
  and `UNKNOWN`.
- Duration constants: `DEADLINE_DEFAULT`, `LIFESPAN_DEFAULT`,
  `LIVELINESS_LEASE_DURATION_DEFAULT`, `DEADLINE_BEST_AVAILABLE`,
  `LIVELINESS_LEASE_DURATION_BEST_AVAILABLE` and `DEPTH_SYSTEM_DEFAULT`.

### `rmwkit.event`

- `EventType` lists the subscription event types and the publisher event
  types. `INVALID` is the sentinel value.
- `Event` holds `implementation_identifier`, `data` and `event_type`.
  `Event.fini()` resets all three to their zero state.
- `zero_initialized_event()` returns `Event()`.

### `rmwkit.flags`

- `Feature` lists the optional features a middleware may support.
- `LocalhostOnly` has the values `DEFAULT`, `ENABLED` and `DISABLED`.

### `rmwkit.security_options`

- `SecurityEnforcement` has the values `PERMISSIVE` and `ENFORCE`.
- `SecurityOptions` holds `enforce_security` and `security_root_path`.
  - `copy_from(src)` copies both fields.
  - `set_root_path(path)` replaces only the path.
  - `fini()` returns both fields to their zero state.
  - Passing `None` to `copy_from` or `set_root_path` raises `ValueError`.
- `zero_initialized_security_options()` and `default_security_options()` each
  return permissive options with no root path.

### `rmwkit.content_filter_options`

- `ContentFilterOptions` holds `filter_expression` and a list of
  `expression_parameters`.
  - `ContentFilterOptions.create(expression, parameters=None)` builds a new
    instance.
  - `set(expression, parameters=None)` clears the options and then fills them.
  - `copy_from(src)` copies another instance.
  - `fini()` clears the expression and the parameters.
  - A `None` expression, a `None` parameter or a `None` source raises
    `ValueError`.
- `zero_initialized_content_filter_options()` returns empty options.

### `rmwkit.subscription_options`

- `UniqueNetworkFlowEndpoints` has the values `NOT_REQUIRED`,
  `STRICTLY_REQUIRED`, `OPTIONALLY_REQUIRED` and `SYSTEM_DEFAULT`.
- `SubscriptionOptions` holds:
  - `rmw_specific_subscription_payload`
  - `ignore_local_publications`
  - `require_unique_network_flow_endpoints`
  - `content_filter_options`, which is a `ContentFilterOptions` or `None`
- `default_subscription_options()` returns options with no payload and no
  filter. Local publications are not ignored, and a unique network flow is not
  required.

### `rmwkit.message_sequence`

`MessageSequence` and `MessageInfoSequence` each have `data`, `size` and
`capacity`.

- `init(capacity)` reserves `capacity` empty slots and sets `size` to 0. With a
  capacity of 0, `data` stays `None`. A negative capacity raises `ValueError`,
  and a non-int capacity raises `TypeError`.
- `fini()` sets `data` to `None` and zeroes `size` and `capacity`.

### `rmwkit.topic_endpoint_info`

- `EndpointType` has the values `INVALID`, `PUBLISHER` and `SUBSCRIPTION`.
- `TopicEndpointInfo` holds the node name, node namespace, topic type,
  endpoint type, endpoint GID and QoS profile.
- Setters: `set_topic_type`, `set_node_name`, `set_node_namespace`,
  `set_endpoint_type`, `set_gid` and `set_qos_profile`.
  - `set_gid` zero-pads the GID to `GID_STORAGE_SIZE` bytes, which is 24. A
    longer GID raises `ValueError`.
  - `None` arguments raise `ValueError`.
  - Arguments of the wrong type raise `TypeError`.
- `fini()` restores the zero state. The QoS profile goes back to
  `SYSTEM_DEFAULT`.

### `rmwkit.topic_endpoint_info_array`

`TopicEndpointInfoArray` has `size` and `info_array`.

- `check_zero()` raises `RuntimeError` unless the array is zeroed.
- `init_with_size(size)` fills the array with zero-initialized elements. It
  raises `ValueError` if the array is not zeroed first or if `size` is negative.
- `fini()` finalizes every element and zeroes the array.

## Example

```python
from rmwkit.time import Time, time_normalize, time_total_nsec

t = Time(sec=1, nsec=1_500_000_000)
assert time_total_nsec(t) == 2_500_000_000
assert time_normalize(t) == Time(sec=2, nsec=500_000_000)

from rmwkit.security_options import default_security_options

opts = default_security_options()
opts.set_root_path("/etc/keystore")
opts.fini()

from rmwkit.content_filter_options import ContentFilterOptions

cf = ContentFilterOptions.create("data > %0", ["10"])
cf.set("data < %0", ["3"])
```

## What this package does not do

This package contains only the data types. It does not create nodes,
publishers, subscriptions or event handles on any transport. It does not take
events. It does not check whether two QoS profiles are compatible:
`QosCompatibility` is only the enum of outcomes. It does not validate node
names or namespaces. There is no command-line tool.