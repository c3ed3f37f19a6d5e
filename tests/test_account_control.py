import pytest

from pwpolicy import UAC_FLAGS
from tests import utils
from tests import tdata


def get_built_policy(**kw):
    policy = utils.get_policy()
    assert policy.build(utils.get_entry(**kw))
    return policy


def test_flag_values():
    assert UAC_FLAGS == {
        'ACCOUNT_DISABLED': 2,
        'LOCKOUT': 16,
        'PASSWD_NOTREQD': 32,
        'DONT_EXPIRE_PASSWD': 65536,
        'PASSWORD_EXPIRED': 8388608,
    }


def test_not_evaluated():
    policy = utils.get_policy()

    # Not built at all.
    for flag in UAC_FLAGS:
        assert not policy.has_account_control_flag(flag)

    # Built without userAccountControl.
    assert policy.build(utils.get_entry())
    for flag in UAC_FLAGS:
        assert not policy.has_account_control_flag(flag)


def test_non_positive_values():
    for value in ['0', '-1', '-2', '-65538', str(-(2 ** 63))]:
        policy = get_built_policy(userAccountControl=value)

        for flag in UAC_FLAGS:
            assert not policy.has_account_control_flag(flag)

        assert not policy.is_user_account_control_set_to_disable_account()
        assert not policy.is_user_account_control_set_to_lock_account()
        assert not policy.is_user_account_control_set_to_expire_password()
        assert not policy.is_account_password_set_to_never_expire()


def test_disabled_only():
    policy = get_built_policy(userAccountControl=tdata.uac_disabled)

    assert policy.is_user_account_control_set_to_disable_account()
    assert not policy.is_user_account_control_set_to_lock_account()
    assert not policy.is_user_account_control_set_to_expire_password()
    assert not policy.is_account_password_set_to_never_expire()


def test_disabled_and_never_expire():
    policy = get_built_policy(userAccountControl=tdata.uac_disabled_and_never_expire)

    assert policy.is_user_account_control_set_to_disable_account()
    assert policy.has_account_control_flag('DONT_EXPIRE_PASSWD')
    assert policy.is_account_password_set_to_never_expire()


def test_disabled_and_expired():
    policy = get_built_policy(userAccountControl=tdata.uac_disabled_and_expired)

    assert policy.is_user_account_control_set_to_disable_account()
    assert policy.is_user_account_control_set_to_expire_password()
    assert not policy.is_user_account_control_set_to_lock_account()


def test_locked():
    policy = get_built_policy(userAccountControl=tdata.uac_locked)

    assert policy.is_user_account_control_set_to_lock_account()
    assert not policy.is_user_account_control_set_to_disable_account()


def test_password_not_required():
    policy = get_built_policy(userAccountControl=tdata.uac_passwd_notreqd)

    assert policy.has_account_control_flag('PASSWD_NOTREQD')
    assert not policy.has_account_control_flag('LOCKOUT')


def test_normal_account():
    # 512 == NORMAL_ACCOUNT, not one of the recognized flags.
    policy = get_built_policy(userAccountControl=tdata.uac_normal)

    for flag in UAC_FLAGS:
        assert not policy.has_account_control_flag(flag)


def test_unknown_flag():
    policy = get_built_policy(userAccountControl=tdata.uac_normal)

    with pytest.raises(KeyError):
        policy.has_account_control_flag('NORMAL_ACCOUNT')
