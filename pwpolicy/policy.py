"""Password policy state of a single LDAP account.

The policy is described by LDAP attributes of the account entry. Which
attribute carries which piece of data is configurable, see
`PASSWORD_*_ATTR` settings in `pwpolicy/default_settings.py`.

Typical usage:

    policy = get_policy_configuration()
    (dn, ldif) = conn_utils.get_account_ldif(conn, 'user@domain.com',
                                             attrs=get_policy_attrlist(policy))
    if dn and policy.build((dn, ldif)):
        expire_date = policy.convert_password_expiration_date()
"""

from typing import Dict, Iterable, List, Optional, Tuple

from ldap.cidict import cidict

import settings
from pwpolicy import UAC_FLAGS, UAC_NOT_EVALUATED
from pwpolicy import dateconv, utils
from pwpolicy.logger import logger


def get_attr_value(ldif, attr: Optional[str]) -> Optional[str]:
    """Return (the first) value of attribute `attr` as a string.

    Returns None if `attr` is None, or entry doesn't have this attribute.

    @ldif -- dict of attribute name and list of values, as returned by
             python-ldap. Attribute names are case-insensitive.
    @attr -- attribute name
    """
    if attr is None:
        return None

    values = ldif.get(attr)
    if not values:
        return None

    if isinstance(values, (list, tuple)):
        value = utils.bytes2str(values[0])
    else:
        value = utils.bytes2str(values)

    logger.debug("Retrieved attribute [{}] with value [{}]".format(attr, value))
    return value


class PasswordPolicyConfiguration:
    """Password policy defined by the LDAP entry of an account.

    Construct it with attribute names and defaults, then `build()` it with
    an LDAP entry. Derived data is read-only.
    """

    def __init__(self,
                 password_expiration_date_attr: Optional[str] = None,
                 password_warning_days_attr: Optional[str] = None,
                 valid_password_days_attr: Optional[str] = None,
                 account_disabled_attr: Optional[str] = None,
                 account_locked_attr: Optional[str] = None,
                 account_password_must_change_attr: Optional[str] = None,
                 user_account_control_attr: Optional[str] = 'userAccountControl',
                 ignore_password_expiration_warning_attr: Optional[str] = None,
                 ignore_password_expiration_warning_flags: Optional[Iterable[str]] = None,
                 default_password_warning_days: int = 30,
                 default_valid_password_days: int = 90,
                 password_policy_url: Optional[str] = None,
                 always_display_password_expiration_warning: bool = False,
                 date_converter=None):
        # Attribute names
        self.password_expiration_date_attr = password_expiration_date_attr
        self.password_warning_days_attr = password_warning_days_attr
        self.valid_password_days_attr = valid_password_days_attr
        self.account_disabled_attr = account_disabled_attr
        self.account_locked_attr = account_locked_attr
        self.account_password_must_change_attr = account_password_must_change_attr
        self.user_account_control_attr = user_account_control_attr
        self.ignore_password_expiration_warning_attr = ignore_password_expiration_warning_attr

        # Values of `ignore_password_expiration_warning_attr` which bypass
        # the password expiration warning.
        self.ignore_password_expiration_warning_flags = set(ignore_password_expiration_warning_flags or [])

        self.default_password_warning_days = default_password_warning_days
        self.default_valid_password_days = default_valid_password_days

        self.password_policy_url = password_policy_url
        self.always_display_password_expiration_warning = always_display_password_expiration_warning

        # Object with method `convert(str) -> datetime`.
        self.date_converter = date_converter

        # Derived data, set by `build()`.
        self._dn = None
        self._password_expiration_date = None
        self._password_warning_days = 0
        self._valid_password_days = 0
        self._ignore_password_expiration_warning = None
        self._account_disabled = False
        self._account_locked = False
        self._account_password_must_change = False
        self._user_account_control = UAC_NOT_EVALUATED

    def __repr__(self):
        return "<PasswordPolicyConfiguration dn={!r} expiration_date={!r} uac={}>".format(
            self._dn, self._password_expiration_date, self._user_account_control)

    @property
    def dn(self) -> Optional[str]:
        return self._dn

    @property
    def password_expiration_date(self) -> Optional[str]:
        """Raw value of the password expiration date attribute."""
        return self._password_expiration_date

    @property
    def password_warning_days(self) -> int:
        return self._password_warning_days

    @property
    def valid_password_days(self) -> int:
        return self._valid_password_days

    @property
    def ignore_password_expiration_warning(self) -> Optional[str]:
        """Value of the ignore-warning attribute read from the entry."""
        return self._ignore_password_expiration_warning

    @property
    def account_disabled(self) -> bool:
        return self._account_disabled

    @property
    def account_locked(self) -> bool:
        return self._account_locked

    @property
    def account_password_must_change(self) -> bool:
        return self._account_password_must_change

    @property
    def user_account_control(self) -> int:
        """Value of `userAccountControl`, `-1` if not read from any entry."""
        return self._user_account_control

    def _apply(self, **kw):
        """Update derived data. Only `build()` calls it."""
        for (k, v) in kw.items():
            setattr(self, '_' + k, v)

    def build(self, entry: Tuple[str, Dict]) -> bool:
        """Read policy data from LDAP entry.

        Returns False (and keeps all derived data untouched) if entry
        doesn't have a password expiration date, True otherwise.

        @entry -- tuple of (dn, ldif), as returned by python-ldap.
        """
        (dn, ldif) = entry
        ldif = cidict(ldif or {})

        expiration_date = get_attr_value(ldif, self.password_expiration_date_attr)
        if utils.is_blank(expiration_date):
            logger.warning("Password expiration policy cannot be established "
                           "because the password expiration date is blank "
                           "(dn: {}, attribute: {}).".format(dn, self.password_expiration_date_attr))
            return False

        kw = {
            'dn': dn,
            'password_expiration_date': expiration_date,
            'password_warning_days': self.default_password_warning_days,
            'valid_password_days': self.default_valid_password_days,
        }

        value = get_attr_value(ldif, self.password_warning_days_attr)
        if value is not None:
            kw['password_warning_days'] = utils.to_int(value, self.default_password_warning_days)

        value = get_attr_value(ldif, self.ignore_password_expiration_warning_attr)
        if value is not None:
            kw['ignore_password_expiration_warning'] = value

        value = get_attr_value(ldif, self.valid_password_days_attr)
        if value is not None:
            kw['valid_password_days'] = utils.to_int(value, self.default_valid_password_days)

        value = get_attr_value(ldif, self.account_disabled_attr)
        if value is not None:
            kw['account_disabled'] = utils.str2bool(value)

        value = get_attr_value(ldif, self.account_locked_attr)
        if value is not None:
            kw['account_locked'] = utils.str2bool(value)

        value = get_attr_value(ldif, self.account_password_must_change_attr)
        if value is not None:
            kw['account_password_must_change'] = utils.str2bool(value)

        value = get_attr_value(ldif, self.user_account_control_attr)
        if value is not None:
            kw['user_account_control'] = utils.to_signed_long(value, self._user_account_control)

        self._apply(**kw)
        return True

    def has_account_control_flag(self, flag: str) -> bool:
        """Check whether given `userAccountControl` flag is set.

        Always False if `userAccountControl` is not a positive number.

        @flag -- one of the keys of `pwpolicy.UAC_FLAGS`.
        """
        bit = UAC_FLAGS[flag]

        if self._user_account_control > 0:
            return (self._user_account_control & bit) == bit

        return False

    def is_user_account_control_set_to_disable_account(self) -> bool:
        return self.has_account_control_flag('ACCOUNT_DISABLED')

    def is_user_account_control_set_to_lock_account(self) -> bool:
        return self.has_account_control_flag('LOCKOUT')

    def is_user_account_control_set_to_expire_password(self) -> bool:
        return self.has_account_control_flag('PASSWORD_EXPIRED')

    def is_account_password_set_to_never_expire(self) -> bool:
        """Whether password expiration should be ignored for this account.

        True if value of the ignore-warning attribute is one of the
        configured flags, or `userAccountControl` has `DONT_EXPIRE_PASSWD`.
        """
        value = self._ignore_password_expiration_warning
        if not utils.is_blank(value) and value in self.ignore_password_expiration_warning_flags:
            return True

        return self.has_account_control_flag('DONT_EXPIRE_PASSWD')

    def convert_password_expiration_date(self):
        """Convert raw password expiration date with the date converter.

        Errors raised by the converter are not handled here.
        """
        return self.date_converter.convert(self._password_expiration_date)


def get_policy_attrlist(policy: PasswordPolicyConfiguration) -> List[str]:
    """Return names of all attributes required to build given policy.

    Used as attribute list of LDAP search.
    """
    attrs = [
        policy.password_expiration_date_attr,
        policy.password_warning_days_attr,
        policy.valid_password_days_attr,
        policy.account_disabled_attr,
        policy.account_locked_attr,
        policy.account_password_must_change_attr,
        policy.user_account_control_attr,
        policy.ignore_password_expiration_warning_attr,
    ]

    _attrs = []
    for attr in attrs:
        if attr and attr not in _attrs:
            _attrs.append(attr)

    return _attrs


def get_policy_configuration(converter: Optional[str] = None) -> PasswordPolicyConfiguration:
    """Return password policy configured in settings.

    @converter -- name of the date converter. Defaults to
                  `settings.PASSWORD_EXPIRATION_DATE_CONVERTER`.
    """
    if not converter:
        converter = settings.PASSWORD_EXPIRATION_DATE_CONVERTER

    date_converter = None
    if converter:
        date_converter = dateconv.get_date_converter(converter,
                                                     fmt=settings.PASSWORD_EXPIRATION_DATE_FORMAT)

    return PasswordPolicyConfiguration(
        password_expiration_date_attr=settings.PASSWORD_EXPIRATION_DATE_ATTR,
        password_warning_days_attr=settings.PASSWORD_WARNING_DAYS_ATTR,
        valid_password_days_attr=settings.VALID_PASSWORD_DAYS_ATTR,
        account_disabled_attr=settings.ACCOUNT_DISABLED_ATTR,
        account_locked_attr=settings.ACCOUNT_LOCKED_ATTR,
        account_password_must_change_attr=settings.ACCOUNT_PASSWORD_MUST_CHANGE_ATTR,
        user_account_control_attr=settings.USER_ACCOUNT_CONTROL_ATTR,
        ignore_password_expiration_warning_attr=settings.IGNORE_PASSWORD_EXPIRATION_WARNING_ATTR,
        ignore_password_expiration_warning_flags=settings.IGNORE_PASSWORD_EXPIRATION_WARNING_FLAGS,
        default_password_warning_days=settings.DEFAULT_PASSWORD_WARNING_DAYS,
        default_valid_password_days=settings.DEFAULT_VALID_PASSWORD_DAYS,
        password_policy_url=settings.PASSWORD_POLICY_URL,
        always_display_password_expiration_warning=settings.ALWAYS_DISPLAY_PASSWORD_EXPIRATION_WARNING,
        date_converter=date_converter,
    )
