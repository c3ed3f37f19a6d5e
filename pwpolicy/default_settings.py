# Log level: info, debug.
log_level = 'info'

# Syslog server address.
# Log to local socket by default, /dev/log on Linux/OpenBSD, /var/run/log on FreeBSD.
SYSLOG_SERVER = '/dev/log'
SYSLOG_PORT = 514

# Syslog facility
SYSLOG_FACILITY = 'local5'

# ---------------
# LDAP server used by `tools/show_password_policy.py` and
# `pwpolicy.ldaplib.conn_utils.get_ldap_conn()`.
ldap_uri = 'ldap://127.0.0.1:389'
ldap_basedn = 'dc=example,dc=com'
ldap_binddn = ''
ldap_bindpw = ''

# Issue STARTTLS after connected.
ldap_enable_tls = False

# Filter used to search the account. `{account}` will be replaced by the
# (escaped) account name.
#
# Sample setting for Active Directory:
#
#   ldap_account_filter = '(&(objectClass=user)(sAMAccountName={account}))'
ldap_account_filter = '(&(objectClass=*)(|(uid={account})(mail={account})))'

# ---------------
# Password policy.
#
# Names of LDAP attributes which carry the policy data. Attribute name set
# to `None` is not read at all.

# Required. Entry without this attribute (or with an empty value) doesn't
# have password policy.
#
# Active Directory computes the expiration time (FILETIME) in
# `msDS-UserPasswordExpiryTimeComputed`. Note: `pwdLastSet` is the time of
# last password change, not expiration.
PASSWORD_EXPIRATION_DATE_ATTR = 'msDS-UserPasswordExpiryTimeComputed'

# Number of days to warn user before password expires.
PASSWORD_WARNING_DAYS_ATTR = None

# Number of days the password is valid.
VALID_PASSWORD_DAYS_ATTR = None

# Custom attributes with value 'true' or 'false'.
ACCOUNT_DISABLED_ATTR = None
ACCOUNT_LOCKED_ATTR = None
ACCOUNT_PASSWORD_MUST_CHANGE_ATTR = None

# Active Directory account control bitmask.
USER_ACCOUNT_CONTROL_ATTR = 'userAccountControl'

# Attribute whose value may bypass the password expiration warning, and the
# values which do bypass it.
#
# Sample setting: never warn accounts under `ou=Services`:
#
#   IGNORE_PASSWORD_EXPIRATION_WARNING_ATTR = 'ou'
#   IGNORE_PASSWORD_EXPIRATION_WARNING_FLAGS = ['Services']
IGNORE_PASSWORD_EXPIRATION_WARNING_ATTR = None
IGNORE_PASSWORD_EXPIRATION_WARNING_FLAGS = []

# Used if entry doesn't have (valid) value of the day attributes above.
DEFAULT_PASSWORD_WARNING_DAYS = 30
DEFAULT_VALID_PASSWORD_DAYS = 90

# URL of the web application which user can login to change password.
PASSWORD_POLICY_URL = ''

# Disregard the warning period and warn all users of password expiration.
ALWAYS_DISPLAY_PASSWORD_EXPIRATION_WARNING = False

# How to convert value of PASSWORD_EXPIRATION_DATE_ATTR to date time.
# Available converters: generalized_time, filetime, shadow_days, simple.
PASSWORD_EXPIRATION_DATE_CONVERTER = 'filetime'

# Date format used by converter `simple`, in `time.strftime()` syntax.
PASSWORD_EXPIRATION_DATE_FORMAT = '%Y-%m-%d'
