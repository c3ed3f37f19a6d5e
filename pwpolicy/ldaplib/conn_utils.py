import ldap
import ldap.filter
from ldap.ldapobject import ReconnectLDAPObject

import settings
from pwpolicy.logger import logger
from pwpolicy import utils


def get_ldap_conn():
    """Return a bound LDAP connection, or None if failed."""
    try:
        conn = ReconnectLDAPObject(settings.ldap_uri)
        logger.debug("LDAP connection initialized: {}".format(settings.ldap_uri))

        if settings.ldap_enable_tls:
            conn.start_tls_s()
    except Exception as e:
        logger.error("Failed to establish LDAP connection: {}".format(repr(e)))
        return None

    # Bind to ldap server.
    try:
        conn.bind_s(settings.ldap_binddn, settings.ldap_bindpw)
        logger.debug('LDAP bind success.')
    except ldap.INVALID_CREDENTIALS:
        logger.error('LDAP bind failed: incorrect bind dn or password.')
        return None
    except Exception as e:
        logger.error("LDAP bind failed: {}".format(repr(e)))
        return None

    return conn


def get_account_ldif(conn, account, query_filter=None, attrs=None):
    """Search given account, return tuple of (dn, ldif).

    Returns (None, None) if no such account or error occurs.

    @conn -- ldap connection cursor
    @account -- account name, it will be placed in `settings.ldap_account_filter`
    @query_filter -- use given search filter instead of `settings.ldap_account_filter`
    @attrs -- list of attribute names to retrieve
    """
    logger.debug("[+] Getting LDIF data of account: {}".format(account))

    if not query_filter:
        _account = ldap.filter.escape_filter_chars(account)
        query_filter = settings.ldap_account_filter.format(account=_account)

    logger.debug("search base dn: {}\n"
                 "search scope: SUBTREE \n"
                 "search filter: {}\n"
                 "search attributes: {}".format(
                     settings.ldap_basedn,
                     query_filter,
                     attrs))

    if not isinstance(attrs, list) or not attrs:
        # Attribute list must be None (search all attributes) or non-empty list
        attrs = None

    try:
        result = conn.search_s(settings.ldap_basedn,
                               ldap.SCOPE_SUBTREE,
                               query_filter,
                               attrs)
    except ldap.NO_SUCH_OBJECT:
        logger.debug("Search base dn doesn't exist: {}".format(settings.ldap_basedn))
        return (None, None)
    except Exception as e:
        logger.error("<!> Error while searching account ({}): {}".format(account, repr(e)))
        return (None, None)

    # Search references are returned with dn=None.
    result = [(_dn, _ldif) for (_dn, _ldif) in result if _dn]

    if not result:
        logger.debug('No such account.')
        return (None, None)

    if len(result) > 1:
        logger.debug("Found {} entries, use the first one.".format(len(result)))

    logger.debug("result: {}".format(repr(result[0])))
    (_dn, _ldif) = result[0]
    _ldif = utils.bytes2str(_ldif)
    return (_dn, _ldif)
