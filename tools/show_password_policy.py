#!/usr/bin/env python3
# Purpose: show password policy state of given LDAP account.

import os
import sys

os.environ['LC_ALL'] = 'C'

rootdir = os.path.abspath(os.path.dirname(__file__)) + '/../'
sys.path.insert(0, rootdir)

from tools import logger, yes_no
from pwpolicy import DATE_CONVERTERS
from pwpolicy.policy import get_policy_attrlist, get_policy_configuration
from pwpolicy.ldaplib import conn_utils

USAGE = """Usage:

    --converter name
        Convert password expiration date with given converter. Available
        converters: {converters}.

        If no '--converter' argument, defaults to the one set in
        `settings.PASSWORD_EXPIRATION_DATE_CONVERTER`.

    --raw
        Don't convert password expiration date.

    account
        Account to look up. It's placed in `settings.ldap_account_filter`.

Sample usage:

    # python3 show_password_policy.py user@example.com
    # python3 show_password_policy.py --converter generalized_time john
    # python3 show_password_policy.py --raw john
""".format(converters=', '.join(DATE_CONVERTERS))


def parse_args(args):
    """Return dict of parsed command line arguments.

    Raises ValueError with error message for invalid arguments.
    """
    args = list(args)
    opts = {'converter': None, 'raw': False, 'account': None}

    if '--raw' in args:
        opts['raw'] = True
        args.remove('--raw')

    if '--converter' in args:
        index = args.index('--converter')
        try:
            opts['converter'] = args[index + 1]
        except IndexError:
            raise ValueError('No converter name specified after --converter.')

        # Remove them.
        args.pop(index)
        args.pop(index)

        if opts['converter'] not in DATE_CONVERTERS:
            raise ValueError("Unknown converter: {}".format(opts['converter']))

    if len(args) != 1:
        raise ValueError('Please specify exactly one account.')

    opts['account'] = args[0]
    return opts


def format_policy(policy, raw=False):
    """Return list of lines describing the built password policy."""
    lines = [
        "DN: {}".format(policy.dn),
        "Password expiration date (raw): {}".format(policy.password_expiration_date),
    ]

    if not raw and policy.date_converter:
        try:
            expire_date = policy.convert_password_expiration_date()
            lines.append("Password expiration date: {}".format(expire_date.isoformat()))
        except ValueError as e:
            lines.append("Password expiration date: <!> {}".format(e))

    lines += [
        "Password warning days: {}".format(policy.password_warning_days),
        "Valid password days: {}".format(policy.valid_password_days),
        "Account disabled: {}".format(yes_no(policy.account_disabled)),
        "Account locked: {}".format(yes_no(policy.account_locked)),
        "Password must change: {}".format(yes_no(policy.account_password_must_change)),
        "userAccountControl: {}".format(policy.user_account_control),
        "  - disabled: {}".format(yes_no(policy.is_user_account_control_set_to_disable_account())),
        "  - locked: {}".format(yes_no(policy.is_user_account_control_set_to_lock_account())),
        "  - password expired: {}".format(yes_no(policy.is_user_account_control_set_to_expire_password())),
        "Password never expires: {}".format(yes_no(policy.is_account_password_set_to_never_expire())),
    ]

    if policy.always_display_password_expiration_warning:
        lines.append("Always display password expiration warning: yes")

    if policy.password_policy_url:
        lines.append("Password policy URL: {}".format(policy.password_policy_url))

    return lines


def main():
    if len(sys.argv) == 1:
        print(USAGE)
        sys.exit()

    try:
        opts = parse_args(sys.argv[1:])
    except ValueError as e:
        sys.exit("<<< ERROR >>> {}".format(e))

    policy = get_policy_configuration(converter=opts['converter'])

    logger.info('* Establishing LDAP connection.')
    conn = conn_utils.get_ldap_conn()
    if not conn:
        sys.exit('<<< ERROR >>> Failed to establish LDAP connection, check log for details.')

    (dn, ldif) = conn_utils.get_account_ldif(conn=conn,
                                             account=opts['account'],
                                             attrs=get_policy_attrlist(policy))
    conn.unbind_s()

    if not dn:
        sys.exit("<<< ERROR >>> No such account: {}".format(opts['account']))

    if not policy.build((dn, ldif)):
        sys.exit("<<< ERROR >>> No password policy for account: {}".format(opts['account']))

    for line in format_policy(policy, raw=opts['raw']):
        logger.info(line)


if __name__ == '__main__':
    main()
