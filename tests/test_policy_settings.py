import datetime

import settings
from pwpolicy import dateconv
from pwpolicy.policy import get_policy_attrlist, get_policy_configuration
from tests import utils


def test_policy_from_settings():
    policy = get_policy_configuration()

    assert policy.password_expiration_date_attr == settings.PASSWORD_EXPIRATION_DATE_ATTR
    assert policy.user_account_control_attr == settings.USER_ACCOUNT_CONTROL_ATTR
    assert policy.default_password_warning_days == settings.DEFAULT_PASSWORD_WARNING_DAYS
    assert policy.default_valid_password_days == settings.DEFAULT_VALID_PASSWORD_DAYS
    assert policy.password_policy_url == settings.PASSWORD_POLICY_URL
    assert isinstance(policy.date_converter, dateconv.FileTimeConverter)


def test_policy_from_settings_with_converter():
    policy = get_policy_configuration(converter='generalized_time')
    assert isinstance(policy.date_converter, dateconv.GeneralizedTimeConverter)


def test_active_directory_entry():
    policy = get_policy_configuration()
    entry = ('CN=John,CN=Users,DC=example,DC=com', {
        'msDS-UserPasswordExpiryTimeComputed': [b'133485408000000000'],
        'userAccountControl': [b'66048'],
    })

    assert policy.build(entry)
    assert policy.convert_password_expiration_date() == datetime.datetime(2024, 1, 1, tzinfo=datetime.timezone.utc)
    assert policy.is_account_password_set_to_never_expire()
    assert not policy.is_user_account_control_set_to_disable_account()


def test_password_last_set_is_not_expiration_date():
    # Entry with only the last password change time has no expiration policy.
    policy = get_policy_configuration()
    entry = ('CN=John,CN=Users,DC=example,DC=com', {
        'pwdLastSet': [b'133485408000000000'],
        'userAccountControl': [b'512'],
    })

    assert settings.PASSWORD_EXPIRATION_DATE_ATTR == 'msDS-UserPasswordExpiryTimeComputed'
    assert not policy.build(entry)


def test_policy_attrlist():
    policy = utils.get_policy()
    assert get_policy_attrlist(policy) == ['pwdExpireDate',
                                           'pwdWarningDays',
                                           'pwdValidDays',
                                           'accountDisabled',
                                           'accountLocked',
                                           'pwdMustChange',
                                           'userAccountControl',
                                           'ou']


def test_policy_attrlist_skips_unset_and_duplicate_attrs():
    policy = utils.get_policy(password_warning_days_attr=None,
                              valid_password_days_attr=None,
                              account_disabled_attr=None,
                              account_locked_attr='pwdExpireDate',
                              account_password_must_change_attr=None,
                              ignore_password_expiration_warning_attr=None)

    assert get_policy_attrlist(policy) == ['pwdExpireDate', 'userAccountControl']
