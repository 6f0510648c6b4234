import pytest

from rmwkit.security_options import (
    SecurityEnforcement,
    SecurityOptions,
    default_security_options,
    zero_initialized_security_options,
)


def test_zero_initialized_has_no_root_path():
    options = zero_initialized_security_options()
    assert options.security_root_path is None
    assert options.enforce_security == SecurityEnforcement(0)


def test_default_is_permissive():
    options = default_security_options()
    assert options.enforce_security is SecurityEnforcement.PERMISSIVE
    assert options.security_root_path is None


def test_copy_from_copies_all_members():
    src = SecurityOptions(SecurityEnforcement.ENFORCE, "/keystore/enclave")
    dst = default_security_options()
    dst.copy_from(src)
    assert dst.security_root_path == "/keystore/enclave"
    assert dst.enforce_security is SecurityEnforcement.ENFORCE
    assert dst == src


def test_copy_from_replaces_existing_path_with_none():
    dst = SecurityOptions(SecurityEnforcement.ENFORCE, "/old/path")
    dst.copy_from(default_security_options())
    assert dst.security_root_path is None
    assert dst.enforce_security is SecurityEnforcement.PERMISSIVE


def test_copy_from_none_raises():
    dst = default_security_options()
    with pytest.raises(ValueError):
        dst.copy_from(None)
    assert dst == default_security_options()


def test_set_root_path_keeps_enforcement():
    options = SecurityOptions(SecurityEnforcement.ENFORCE, None)
    options.set_root_path("/some/path")
    assert options.security_root_path == "/some/path"
    assert options.enforce_security is SecurityEnforcement.ENFORCE


def test_set_root_path_none_raises_and_keeps_state():
    options = SecurityOptions(SecurityEnforcement.ENFORCE, "/kept")
    with pytest.raises(ValueError):
        options.set_root_path(None)
    assert options.security_root_path == "/kept"


def test_fini_resets_to_zero():
    options = SecurityOptions(SecurityEnforcement.ENFORCE, "/some/path")
    options.fini()
    assert options == zero_initialized_security_options()