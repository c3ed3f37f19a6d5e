"""Convert LDAP date attribute values to `datetime`.

All converters return timezone-aware datetime in UTC, and raise ValueError
if the value is not in expected format.
"""

import re
import datetime

# 1601-01-01, start of Windows FILETIME.
FILETIME_EPOCH = datetime.datetime(1601, 1, 1, tzinfo=datetime.timezone.utc)
UNIX_EPOCH = datetime.datetime(1970, 1, 1, tzinfo=datetime.timezone.utc)

# Active Directory uses these values in `accountExpires` and
# `msDS-UserPasswordExpiryTimeComputed` for "never".
FILETIME_NEVER = (0, 0x7FFFFFFFFFFFFFFF)

# GeneralizedTime (RFC 4517, section 3.3.13): YYYYmmddHH[MM[SS]][.fraction](Z|+HHMM|-HHMM)
regx_generalized_time = re.compile(
    r'(?P<year>\d{4})(?P<month>\d{2})(?P<day>\d{2})(?P<hour>\d{2})'
    r'(?:(?P<minute>\d{2})(?P<second>\d{2})?)?'
    r'(?:[.,](?P<fraction>\d+))?'
    r'(?P<tz>Z|[+-]\d{2}(?:\d{2})?)'
)


class GeneralizedTimeConverter:
    """LDAP GeneralizedTime, e.g. `20240101000000Z`, `20240101083000+0800`."""

    def convert(self, value):
        m = regx_generalized_time.fullmatch(value or '')
        if not m:
            raise ValueError("Invalid GeneralizedTime value: {}".format(value))

        d = m.groupdict()
        dt = datetime.datetime(int(d['year']),
                               int(d['month']),
                               int(d['day']),
                               int(d['hour']),
                               int(d['minute'] or 0),
                               int(d['second'] or 0))

        # Fraction applies to the last present element (hour, minute or second).
        if d['fraction']:
            fraction = float('0.' + d['fraction'])
            if d['second'] is not None:
                dt += datetime.timedelta(seconds=fraction)
            elif d['minute'] is not None:
                dt += datetime.timedelta(minutes=fraction)
            else:
                dt += datetime.timedelta(hours=fraction)

        tz = d['tz']
        if tz == 'Z':
            offset = datetime.timedelta(0)
        else:
            sign = -1 if tz[0] == '-' else 1
            offset = sign * datetime.timedelta(hours=int(tz[1:3]), minutes=int(tz[3:5] or 0))

        return (dt - offset).replace(tzinfo=datetime.timezone.utc)


class FileTimeConverter:
    """Active Directory FILETIME: 100-nanosecond intervals since 1601-01-01.

    Used by attributes `pwdLastSet`, `accountExpires`,
    `msDS-UserPasswordExpiryTimeComputed`.
    """

    def convert(self, value):
        try:
            ft = int(value)
        except (TypeError, ValueError):
            raise ValueError("Invalid FILETIME value: {}".format(value))

        if ft in FILETIME_NEVER:
            raise ValueError("FILETIME value means 'never': {}".format(value))

        if ft < 0:
            raise ValueError("Negative FILETIME value: {}".format(value))

        try:
            return FILETIME_EPOCH + datetime.timedelta(microseconds=ft // 10)
        except OverflowError:
            raise ValueError("FILETIME value out of range: {}".format(value))


class ShadowDaysConverter:
    """Days since 1970-01-01, e.g. value of `shadowLastChange`.

    @days_to_add -- add given days to the date. For example, use value of
                    `shadowMax` to get the password expiration date from
                    `shadowLastChange`.
    """

    def __init__(self, days_to_add=0):
        self.days_to_add = days_to_add

    def convert(self, value):
        try:
            days = int(value)
        except (TypeError, ValueError):
            raise ValueError("Invalid number of days: {}".format(value))

        try:
            return UNIX_EPOCH + datetime.timedelta(days=days + self.days_to_add)
        except OverflowError:
            raise ValueError("Number of days out of range: {}".format(value))


class SimpleDateConverter:
    """Date in custom format (`time.strftime()` syntax), treated as UTC."""

    def __init__(self, fmt='%Y-%m-%d'):
        self.fmt = fmt

    def convert(self, value):
        if value is None:
            raise ValueError("No date to convert.")

        # strptime() raises ValueError for mismatched value.
        dt = datetime.datetime.strptime(value, self.fmt)
        if dt.tzinfo is None:
            return dt.replace(tzinfo=datetime.timezone.utc)

        return dt.astimezone(datetime.timezone.utc)


def get_date_converter(name, fmt=None, days_to_add=0):
    """Return date converter with given name.

    @name -- one of `pwpolicy.DATE_CONVERTERS`.
    @fmt -- date format, used by converter `simple`.
    @days_to_add -- used by converter `shadow_days`.
    """
    if name == 'generalized_time':
        return GeneralizedTimeConverter()
    elif name == 'filetime':
        return FileTimeConverter()
    elif name == 'shadow_days':
        return ShadowDaysConverter(days_to_add=days_to_add)
    elif name == 'simple':
        return SimpleDateConverter(fmt=fmt or '%Y-%m-%d')

    raise ValueError("Unknown date converter: {}".format(name))
