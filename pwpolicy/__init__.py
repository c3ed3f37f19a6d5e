__version__ = "1.0.0"


# Active Directory `userAccountControl` flags recognized by the password
# policy. The attribute is a bitmask, an account may have several of them set.
#
# Reference:
# https://learn.microsoft.com/en-us/troubleshoot/windows-server/active-directory/useraccountcontrol-manipulate-account-properties
UAC_FLAGS = {
    'ACCOUNT_DISABLED': 0x00000002,         # 2
    'LOCKOUT': 0x00000010,                  # 16
    'PASSWD_NOTREQD': 0x00000020,           # 32
    'DONT_EXPIRE_PASSWD': 0x00010000,       # 65536
    'PASSWORD_EXPIRED': 0x00800000,         # 8388608
}

# Value of `userAccountControl` before it's read from an LDAP entry, or when
# the entry doesn't carry it. Not the same as `0` (no bits set).
UAC_NOT_EVALUATED = -1

# `userAccountControl` is stored as a signed 64-bit integer.
UAC_MIN_VALUE = -(2 ** 63)
UAC_MAX_VALUE = 2 ** 63 - 1

# Names of date converters which can be set in
# `settings.PASSWORD_EXPIRATION_DATE_CONVERTER`.
DATE_CONVERTERS = [
    'generalized_time',     # e.g. 20240101000000Z (OpenLDAP, 389-ds)
    'filetime',             # e.g. 133485408000000000 (Active Directory)
    'shadow_days',          # e.g. 19723 (days since 1970-01-01)
    'simple',               # custom format, see PASSWORD_EXPIRATION_DATE_FORMAT
]
