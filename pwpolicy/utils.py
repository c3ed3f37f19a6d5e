import re
from typing import Union, List, Tuple, Set, Dict, Any, Optional

from pwpolicy import UAC_MIN_VALUE, UAC_MAX_VALUE

# Largest number of days accepted from an LDAP attribute (signed 32-bit).
MAX_DAYS = 2 ** 31 - 1

# Decimal integers only. Leading/trailing whitespace, decimal points,
# exponents and hex notation are not numbers here. Number of significant
# digits is limited, so `int()` never sees a huge string.
regx_unsigned_int = re.compile(r'0*(?P<digits>[0-9]{1,10})')
regx_signed_int = re.compile(r'(?P<sign>[+-]?)0*(?P<digits>[0-9]{1,19})')


def is_blank(s: Optional[str]) -> bool:
    """Return True if `s` is None, empty or contains only whitespaces.

    >>> is_blank(None)
    True
    >>> is_blank(' \\t')
    True
    >>> is_blank(' a ')
    False
    """
    if s is None:
        return True

    return not s.strip()


def to_int(s: Optional[str], default: int) -> int:
    """Parse `s` as a non-negative decimal integer, return `default` if it's
    not one.

    >>> to_int('45', 30)
    45
    >>> to_int('-1', 30)
    30
    >>> to_int('abc', 30)
    30
    """
    if s is None:
        return default

    m = regx_unsigned_int.fullmatch(s)
    if not m:
        return default

    i = int(m.group('digits'))
    if i > MAX_DAYS:
        return default

    return i


def to_signed_long(s: Optional[str], default: int) -> int:
    """Parse `s` as a signed 64-bit decimal integer, return `default` if it's
    blank, not a number or out of range.

    >>> to_signed_long('512', -1)
    512
    >>> to_signed_long('', -1)
    -1
    """
    if is_blank(s):
        return default

    m = regx_signed_int.fullmatch(s)
    if not m:
        return default

    i = int(m.group('sign') + m.group('digits'))
    if i < UAC_MIN_VALUE or i > UAC_MAX_VALUE:
        return default

    return i


def str2bool(s: Optional[str]) -> bool:
    """Only 'true' (case-insensitive) is True, anything else is False.

    >>> str2bool('TRUE')
    True
    >>> str2bool('yes')
    False
    """
    if s is None:
        return False

    return s.lower() == 'true'


def __bytes2str(b) -> str:
    """Convert object `b` to string.

    >>> __bytes2str("a")
    'a'
    >>> __bytes2str(b"a")
    'a'
    >>> __bytes2str(["a"])  # list: return `repr()`
    "['a']"
    """
    if isinstance(b, str):
        return b

    if isinstance(b, (bytes, bytearray)):
        return b.decode(errors='replace')
    elif isinstance(b, memoryview):
        return b.tobytes().decode(errors='replace')
    else:
        return repr(b)


def bytes2str(b: Union[bytes, str, List, Tuple, Set, Dict])\
        -> Union[str, List[str], Tuple[str], Dict[Any, str]]:
    """Convert `b` from bytes-like type to string.

    - If `b` is a string object, returns original `b`.
    - If `b` is a bytes, returns `b.decode()`, invalid UTF-8 bytes are replaced by U+FFFD.

    >>> bytes2str(b"a")
    'a'
    >>> bytes2str([b"a"])
    ['a']
    >>> bytes2str({"uid": [b"a"]})      # used to convert LDAP query result.
    {'uid': ['a']}
    """
    if isinstance(b, list):
        s = [bytes2str(i) for i in b]
    elif isinstance(b, tuple):
        s = tuple([bytes2str(i) for i in b])
    elif isinstance(b, set):
        s = {bytes2str(i) for i in b}
    elif isinstance(b, dict):
        new_dict = {}
        for (k, v) in list(b.items()):
            new_dict[k] = bytes2str(v)  # v could be list/tuple/dict
        s = new_dict
    else:
        s = __bytes2str(b)

    return s
