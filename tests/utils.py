from pwpolicy.policy import PasswordPolicyConfiguration
from tests import tdata


class FakeDateConverter:
    """Return the given value with a prefix, record all converted values."""

    def __init__(self):
        self.values = []

    def convert(self, value):
        self.values.append(value)
        return 'converted:' + value


def get_policy(**kw):
    """Return password policy with attribute names defined in `tdata`.

    Keyword arguments override the defaults.
    """
    d = {
        'password_expiration_date_attr': tdata.expiration_date_attr,
        'password_warning_days_attr': tdata.warning_days_attr,
        'valid_password_days_attr': tdata.valid_days_attr,
        'account_disabled_attr': tdata.disabled_attr,
        'account_locked_attr': tdata.locked_attr,
        'account_password_must_change_attr': tdata.must_change_attr,
        'user_account_control_attr': tdata.uac_attr,
        'ignore_password_expiration_warning_attr': tdata.ignore_warning_attr,
        'ignore_password_expiration_warning_flags': tdata.ignore_warning_flags,
        'default_password_warning_days': tdata.default_warning_days,
        'default_valid_password_days': tdata.default_valid_days,
    }
    d.update(**kw)

    return PasswordPolicyConfiguration(**d)


def get_entry(dn=tdata.dn, expiration_date=tdata.expiration_date, **attrs):
    """Generate (dn, ldif) tuple like python-ldap search result.

    Values are stored as list of bytes. Attribute with value None is not
    added. Pass `expiration_date=None` to generate entry without password
    expiration date.
    """
    ldif = {}
    if expiration_date is not None:
        ldif[tdata.expiration_date_attr] = [expiration_date.encode()]

    for (k, v) in list(attrs.items()):
        if v is None:
            continue

        if isinstance(v, list):
            ldif[k] = [i.encode() for i in v]
        else:
            ldif[k] = [v.encode()]

    return (dn, ldif)
