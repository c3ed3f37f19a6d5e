############################################################
# DO NOT TOUCH BELOW LINE.
#
# Import default settings.
# You can always override default settings by placing custom settings in this
# file.
from pwpolicy.default_settings import *
############################################################

# Log level: info, debug.
log_level = 'info'

# LDAP server.
ldap_uri = 'ldap://127.0.0.1:389'
ldap_basedn = 'dc=example,dc=com'
ldap_binddn = 'cn=pwpolicy,dc=example,dc=com'
ldap_bindpw = ''
