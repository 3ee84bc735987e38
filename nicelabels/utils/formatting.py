#    Copyright (C) 2010 Jeremy S. Sanders
#    Email: Jeremy Sanders <jeremy@jeremysanders.net>
#
#    This program is free software; you can redistribute it and/or modify
#    it under the terms of the GNU General Public License as published by
#    the Free Software Foundation; either version 2 of the License, or
#    (at your option) any later version.
#
#    This program is distributed in the hope that it will be useful,
#    but WITHOUT ANY WARRANTY; without even the implied warranty of
#    MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
#    GNU General Public License for more details.
#
#    You should have received a copy of the GNU General Public License along
#    with this program; if not, write to the Free Software Foundation, Inc.,
#    51 Franklin Street, Fifth Floor, Boston, MA 02110-1301 USA.
###############################################################################

"""Turning tick values into label text."""

import re

from .utilfuncs import InvalidType

# a format statement in a string
_format_re = re.compile(r'%([-#0-9 +.hlL]*?)([diouxXeEfFgGcrs%])')

# format used when the caller does not give one
default_format = '%g'

def formatLabels(values):
    """Format tick values as short strings for an axis.

    Values smaller than one in magnitude get a single decimal place,
    everything else is shown as an integer. The rounding is that of
    Python's % operator on the binary value (half to even).

    Labels are not checked for duplicates, so small values close together
    can format identically.
    """

    if values is None:
        return []

    labels = []
    for value in values:
        if abs(value) < 1.:
            labels.append('%.1f' % value)
        else:
            labels.append('%.0f' % value)
    return labels

def checkLabelFormat(fmt):
    """Check that fmt contains exactly one numeric format statement.

    Raises InvalidType otherwise."""

    codes = [m.group(2) for m in _format_re.finditer(fmt)
             if m.group(2) != '%']
    if len(codes) != 1 or codes[0] not in 'diouxXeEfFgG':
        raise InvalidType(
            "Label format %r needs exactly one numeric statement" % fmt)

def formatLabelsWith(values, fmt):
    """Format tick values with a printf style format string.

    If fmt is empty or None, %g is used.
    """

    if values is None:
        return []
    if not fmt:
        fmt = default_format
    checkLabelFormat(fmt)

    return [fmt % value for value in values]
